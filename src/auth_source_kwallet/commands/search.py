from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import cappa
from rich.markup import escape
from rich.table import Table

from auth_source_kwallet.commands.base import BaseCommand
from auth_source_kwallet.parser import Structured
from auth_source_kwallet.search import SearchQuery


@cappa.command(help="Look up the secret matching a host and user, or a label")
@dataclass
class Search(BaseCommand):
    host: Annotated[str | None, cappa.Arg(long=True)] = None
    user: Annotated[str | None, cappa.Arg(long=True)] = None
    port: Annotated[str | None, cappa.Arg(long=True)] = None
    label: Annotated[str | None, cappa.Arg(long=True, help="Entry name, overrides host and user")] = None
    folder: Annotated[str | None, cappa.Arg(long=True)] = None
    wallet: Annotated[str | None, cappa.Arg(long=True)] = None

    def __call__(self):
        if not self.label and not (self.user and self.host):
            raise cappa.Exit("Pass either --label or both --user and --host", code=1)
        query = SearchQuery(
            host=self.host,
            user=self.user,
            port=self.port,
            label=self.label,
            folder=self.folder,
            wallet=self.wallet,
        )
        results = self.source.search(query)
        if not results:
            raise cappa.Exit(f"No entry found for {self.source.key_for(query)}", code=1)

        table = Table(header_style="bold cyan")
        table.add_column("Identifier", style="dim")
        table.add_column("Kind")
        table.add_column("Secret")
        for result in results:
            secret = result.secret
            if isinstance(secret, Structured):
                for name, value in secret.fields.items():
                    table.add_row(escape(str(result.identifier)), f"map:{escape(name)}", escape(value))
            else:
                table.add_row(escape(str(result.identifier)), "password", escape(secret.value))
        self.stdout.output(table)


@cappa.command(name="list", help="List the entries of a folder, or the folders of a wallet")
@dataclass
class ListEntries(BaseCommand):
    folder: Annotated[
        str | None,
        cappa.Arg(long=True, help="Folder to list, pass an empty string to list folders"),
    ] = None
    wallet: Annotated[str | None, cappa.Arg(long=True)] = None

    def __call__(self):
        names = self.source.search(
            SearchQuery(folder=self.folder, wallet=self.wallet, list=True)
        )
        if not names:
            raise cappa.Exit("No entries found", code=1)
        for name in names:
            self.stdout.output(escape(name))
