from __future__ import annotations

import shutil
import subprocess

import msgspec

from .errors import ToolTimeout, ToolUnavailable

try:
    from enum import StrEnum
except ImportError:
    from enum import Enum

    class StrEnum(str, Enum):
        pass


class Mode(StrEnum):
    LIST = "-l"
    READ = "-r"


class SubprocessResult(msgspec.Struct, frozen=True):
    exit_status: int
    output: str


def build_args(
    executable: str, wallet: str, folder: str, mode: Mode, key: str | None = None
) -> list[str]:
    args = [executable, wallet, "-f", folder, mode.value]
    if mode == Mode.READ:
        if key is None:
            raise ValueError("A key is required to read an entry")
        args.append(key)
    return args


def invoke(
    executable: str,
    wallet: str,
    folder: str,
    mode: Mode,
    key: str | None = None,
    timeout: float | None = None,
) -> SubprocessResult:
    """
    Run the wallet query tool once and capture its standard output.

    Standard error is discarded, the tool reports its failures on standard
    output or through the exit status.
    """
    path = shutil.which(executable)
    if path is None:
        raise ToolUnavailable(executable)
    args = build_args(path, wallet, folder, mode, key)
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ToolTimeout(executable, timeout) from e
    except OSError as e:
        raise ToolUnavailable(executable) from e
    return SubprocessResult(exit_status=result.returncode, output=result.stdout or "")
