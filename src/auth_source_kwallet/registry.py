from __future__ import annotations

from typing import Any, Callable, Protocol

import msgspec

from .errors import UnknownBackendError

try:
    from enum import StrEnum
except ImportError:
    from enum import Enum

    class StrEnum(str, Enum):
        pass


class BackendKind(StrEnum):
    KWALLET = "kwallet"


class SearchFunction(Protocol):
    def __call__(self, **spec: Any) -> list: ...


class BackendDescriptor(msgspec.Struct, frozen=True):
    source: str
    kind: BackendKind
    search_function: SearchFunction


BackendParser = Callable[[Any], "BackendDescriptor | None"]


class BackendRegistry:
    """
    The host side of credential lookup: an ordered list of sources, the
    handlers able to turn a source entry into a backend, and a cache of
    search results.
    """

    def __init__(self) -> None:
        self.sources: list[Any] = []
        self.parsers: list[BackendParser] = []
        self._cache: dict[tuple, list] = {}

    def add_source(self, source: Any) -> None:
        if source not in self.sources:
            self.sources.append(source)

    def remove_source(self, source: Any) -> None:
        if source in self.sources:
            self.sources.remove(source)

    def register_parser(self, parser: BackendParser) -> None:
        if parser not in self.parsers:
            self.parsers.append(parser)

    def parse(self, entry: Any) -> BackendDescriptor:
        for parser in self.parsers:
            if backend := parser(entry):
                return backend
        raise UnknownBackendError(entry)

    def backends(self) -> list[BackendDescriptor]:
        return [self.parse(source) for source in self.sources]

    def invalidate_cache(self) -> None:
        self._cache.clear()

    def search(self, **spec: Any) -> list:
        cache_key = tuple(sorted((key, repr(value)) for key, value in spec.items()))
        if cache_key in self._cache:
            return list(self._cache[cache_key])
        results = []
        for backend in self.backends():
            results = backend.search_function(**spec)
            if results:
                break
        if results:
            self._cache[cache_key] = list(results)
        return results


default_registry = BackendRegistry()
