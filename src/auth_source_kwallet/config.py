from __future__ import annotations

from pathlib import Path

import msgspec

from .errors import ImproperlyConfiguredError

CONFIG_FILE = Path("kwallet.toml")


class Config(msgspec.Struct, kw_only=True):
    wallet: str = "Passwords"
    folder: str = "Passwords"
    key_separator: str = "@"
    executable: str = "kwallet-query"
    # seconds to wait for the executable, None waits forever
    timeout: float | None = None

    def __post_init__(self):
        for name in ("wallet", "key_separator", "executable"):
            if not getattr(self, name):
                raise ImproperlyConfiguredError(f"'{name}' cannot be empty.")
        if self.timeout is not None and self.timeout <= 0:
            raise ImproperlyConfiguredError(
                f"'timeout' must be a positive number of seconds, got {self.timeout}."
            )

    @classmethod
    def read(cls, path: Path | None = None) -> Config:
        config_file = path or CONFIG_FILE
        if not config_file.exists():
            if path is not None:
                raise ImproperlyConfiguredError(f"{config_file} not found")
            return cls()
        try:
            return msgspec.toml.decode(config_file.read_text(), type=cls)
        except (msgspec.ValidationError, msgspec.DecodeError) as e:
            raise ImproperlyConfiguredError(f"Improperly configured, {e}") from e

    def to_dict(self) -> dict:
        return {
            key: value
            for key, value in msgspec.structs.asdict(self).items()
            if value is not None
        }
