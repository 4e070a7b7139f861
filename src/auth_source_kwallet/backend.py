from __future__ import annotations

from typing import Any

from .registry import BackendDescriptor, BackendKind, BackendRegistry, default_registry
from .search import search

SOURCE_NAME = "KWallet"


def parse_backend(entry: Any) -> BackendDescriptor | None:
    if entry != BackendKind.KWALLET:
        return None
    return BackendDescriptor(
        source=SOURCE_NAME, kind=BackendKind.KWALLET, search_function=search
    )


def enable(registry: BackendRegistry | None = None) -> None:
    """Make KWallet one of the sources consulted for credentials."""
    registry = registry or default_registry
    registry.register_parser(parse_backend)
    registry.add_source(BackendKind.KWALLET)
    # results cached before this source existed are stale
    registry.invalidate_cache()


def disable(registry: BackendRegistry | None = None) -> None:
    registry = registry or default_registry
    registry.remove_source(BackendKind.KWALLET)
    registry.invalidate_cache()
