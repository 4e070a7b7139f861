from .backend import disable, enable, parse_backend
from .parser import Raw, Structured
from .search import KWalletSource, SearchQuery, SearchResult

__all__ = [
    "KWalletSource",
    "Raw",
    "SearchQuery",
    "SearchResult",
    "Structured",
    "disable",
    "enable",
    "parse_backend",
]
