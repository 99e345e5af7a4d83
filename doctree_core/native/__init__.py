"""Native library boundary.

@public
"""

from .boundary import NativeFault, NativeResult, NativeSuccess, call_native, parse_native_result

__all__ = ["NativeFault", "NativeResult", "NativeSuccess", "call_native", "parse_native_result"]
