from functools import lru_cache

from .local_aliases import LocalTagAliases
from .provider import TagAliasProvider


@lru_cache(maxsize=1)
def get_default_alias_provider() -> TagAliasProvider:
    return LocalTagAliases()


__all__ = ["TagAliasProvider", "LocalTagAliases", "get_default_alias_provider"]
