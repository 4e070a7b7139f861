from __future__ import annotations

from pathlib import Path

import cappa
import tomli_w
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from auth_source_kwallet.commands.base import BaseCommand
from auth_source_kwallet.config import CONFIG_FILE, Config


@cappa.command(name="config", help="Config management")
class ConfigCMD(BaseCommand):

    @cappa.command(help="Show the effective configuration")
    def show(self):
        console = Console()
        config = self.config.to_dict()
        config.setdefault("timeout", "none")
        formatted_text = "\n".join(
            f"[bold green]{key}:[/bold green] {escape(str(value))}"
            for key, value in config.items()
        )
        console.print(
            Panel(
                formatted_text,
                title="KWallet Configuration",
                border_style="green",
                width=100,
            )
        )

    @cappa.command(help="Generate a sample configuration file")
    def init(self):
        config_file = Path(CONFIG_FILE)
        if config_file.exists():
            raise cappa.Exit(f"{config_file} file already exists", code=1)
        config_file.write_text(tomli_w.dumps(Config().to_dict()))
        self.stdout.output(f"[green]Sample configuration written to {config_file}[/green]")
