from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from auth_source_kwallet.invoker import SubprocessResult


class AuthSourceError(Exception):
    pass


class ImproperlyConfiguredError(AuthSourceError):
    pass


class ToolUnavailable(AuthSourceError):
    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"Could not find the {executable} executable")


class ToolTimeout(AuthSourceError):
    def __init__(self, executable: str, timeout: float):
        self.executable = executable
        self.timeout = timeout
        super().__init__(f"{executable} did not answer within {timeout} seconds")


class SubprocessFailure(AuthSourceError):
    def __init__(self, result: SubprocessResult):
        self.result = result
        super().__init__(
            f"Wallet query failed with exit status {result.exit_status}: "
            f"{result.output.strip()}"
        )


class UnknownBackendError(AuthSourceError):
    def __init__(self, entry: object):
        self.entry = entry
        super().__init__(f"No backend handler accepts {entry!r}")
