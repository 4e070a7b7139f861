from __future__ import annotations

import re

from .invoker import SubprocessResult

# kwallet-query has reported these with a zero exit status in some releases
ERROR_PATTERNS = (
    re.compile(r"The folder .+ does not exist!"),
    re.compile(r"Failed to read entry .+"),
    re.compile(r"Wallet .+ not found"),
)


def matches_error_text(output: str) -> bool:
    return any(pattern.search(output) for pattern in ERROR_PATTERNS)


def is_error(result: SubprocessResult) -> bool:
    return result.exit_status != 0 or matches_error_text(result.output)
