"""Foreign-function boundary to the native library.

@public

Every call into the native library comes back as a tagged result: either
``NativeSuccess`` carrying the value or ``NativeFault`` carrying an optional
diagnostic message. A fault is fatal to the triggering call; ``unwrap()``
re-raises it as ``NativeFaultError`` and nothing here retries.
"""

from collections.abc import Callable
from typing import Annotated, Any, Literal, NoReturn

from pydantic import BaseModel, ConfigDict, Discriminator, TypeAdapter

from doctree_core.exceptions import NativeFaultError
from doctree_core.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


class NativeSuccess(BaseModel):
    """Native call returned normally."""

    type: Literal["success"] = "success"
    value: Any = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def unwrap(self) -> Any:
        return self.value


class NativeFault(BaseModel):
    """Native call faulted (e.g. panicked) instead of returning."""

    type: Literal["fault"] = "fault"
    message: str | None = None

    model_config = ConfigDict(frozen=True)

    def unwrap(self) -> NoReturn:
        raise NativeFaultError(self.message)


NativeResult = Annotated[NativeSuccess | NativeFault, Discriminator("type")]

_native_result_adapter: TypeAdapter[NativeSuccess | NativeFault] = TypeAdapter(NativeResult)


def parse_native_result(payload: dict[str, Any] | str | bytes) -> NativeSuccess | NativeFault:
    """Validate a result payload handed back by the native side as a dict or JSON.

    Raises:
        pydantic.ValidationError: If the payload is not a tagged native result.
    """
    if isinstance(payload, (str, bytes)):
        return _native_result_adapter.validate_json(payload)
    return _native_result_adapter.validate_python(payload)


def call_native(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> NativeSuccess | NativeFault:
    """Invoke a native entry point and capture any fault it raises.

    @public

    Returns:
        NativeSuccess with the return value, or NativeFault with the fault's
        message (None when the fault carried no data).
    """
    try:
        value = fn(*args, **kwargs)
    except NativeFaultError as e:
        fault = NativeFault(message=e.message)
    except Exception as e:
        fault = NativeFault(message=str(e) or None)
    else:
        return NativeSuccess(value=value)

    name = getattr(fn, "__name__", repr(fn))
    logger.warning(f"Native call {name} faulted: {fault.message or NativeFaultError.DEFAULT_MESSAGE}")
    return fault
