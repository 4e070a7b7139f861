import cappa
from rich.traceback import install

from auth_source_kwallet.commands.config import ConfigCMD
from auth_source_kwallet.commands.search import ListEntries, Search


@cappa.command(name="auth-source-kwallet", help="Query KWallet credentials through kwallet-query")
class AuthSourceKWallet:
    subcommands: cappa.Subcommands[Search | ListEntries | ConfigCMD]


def main():
    install(show_locals=True)
    cappa.invoke(AuthSourceKWallet)


if __name__ == "__main__":
    main()
