from dataclasses import dataclass
from functools import cached_property

import cappa

from auth_source_kwallet.config import Config
from auth_source_kwallet.errors import ImproperlyConfiguredError
from auth_source_kwallet.search import KWalletSource


@dataclass
class BaseCommand:
    @cached_property
    def config(self) -> Config:
        try:
            return Config.read()
        except ImproperlyConfiguredError as e:
            raise cappa.Exit(str(e), code=1) from e

    @cached_property
    def stdout(self) -> cappa.Output:
        return cappa.Output()

    @cached_property
    def source(self) -> KWalletSource:
        return KWalletSource(_config=self.config)
