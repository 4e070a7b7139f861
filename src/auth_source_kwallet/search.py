from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

import msgspec

from .classifier import is_error
from .config import Config
from . import diagnostics
from .diagnostics import Warn
from .errors import (
    ImproperlyConfiguredError,
    SubprocessFailure,
    ToolTimeout,
    ToolUnavailable,
)
from .invoker import Mode, SubprocessResult, invoke
from .parser import SecretValue, parse_list, parse_secret


class SearchQuery(msgspec.Struct, kw_only=True):
    host: str | None = None
    user: str | None = None
    port: str | int | None = None
    label: str | None = None
    folder: str | None = None
    wallet: str | None = None
    list: bool = False

    @classmethod
    def from_spec(cls, **spec) -> SearchQuery:
        """Build a query from host framework keywords, ignoring the ones we don't use."""
        known = {name: spec[name] for name in cls.__struct_fields__ if name in spec}
        return cls(**known)


class SearchResult(msgspec.Struct, frozen=True):
    identifier: str
    secret: SecretValue


@dataclass
class KWalletSource:
    """
    Resolves credential queries against a wallet through kwallet-query.

    Every failure is reported through ``warn`` and turned into an empty
    result, nothing raised by the tool or its output escapes ``search``.
    """

    _config: Config | None = None
    warn: Warn = field(default=diagnostics.warn)

    @cached_property
    def config(self) -> Config:
        return self._config or Config.read()

    def search(self, query: SearchQuery) -> list[SearchResult] | list[str]:
        try:
            wallet = query.wallet or self.config.wallet
            folder = query.folder if query.folder is not None else self.config.folder
            if query.list:
                return self._list(wallet, folder)
            return self._read(wallet, folder, query)
        except ToolUnavailable as e:
            self.warn(f"{e}, is {e.executable!r} installed and on PATH?")
        except (ToolTimeout, SubprocessFailure, ImproperlyConfiguredError) as e:
            self.warn(str(e))
        return []

    def key_for(self, query: SearchQuery) -> str:
        if query.label:
            return query.label
        return f"{query.user or ''}{self.config.key_separator}{query.host or ''}"

    def _run(
        self, wallet: str, folder: str, mode: Mode, key: str | None = None
    ) -> SubprocessResult:
        result = invoke(
            self.config.executable,
            wallet,
            folder,
            mode,
            key=key,
            timeout=self.config.timeout,
        )
        if is_error(result):
            raise SubprocessFailure(result)
        return result

    def _list(self, wallet: str, folder: str) -> list[str]:
        # an empty folder makes the tool list the folders of the wallet
        result = self._run(wallet, folder, Mode.LIST)
        return parse_list(result.output)

    def _read(self, wallet: str, folder: str, query: SearchQuery) -> list[SearchResult]:
        result = self._run(wallet, folder, Mode.READ, key=self.key_for(query))
        return [
            SearchResult(
                identifier=query.label or query.user or "",
                secret=parse_secret(result.output),
            )
        ]


default_source = KWalletSource()


def search(**spec) -> list[SearchResult] | list[str]:
    """Keyed search function handed to the host framework."""
    return default_source.search(SearchQuery.from_spec(**spec))
