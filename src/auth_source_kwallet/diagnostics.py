from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.markup import escape

Warn = Callable[[str], None]

stderr = Console(stderr=True)


def warn(message: str) -> None:
    stderr.print(f"[yellow]Warning:[/yellow] {escape(message)}")
