"""Name registry lookups.

@public
"""

from .unique_name import ProviderNameRegistry, is_name_unique

__all__ = ["ProviderNameRegistry", "is_name_unique"]
