from __future__ import annotations

from typing import Union

import msgspec


class Structured(msgspec.Struct, frozen=True, tag="structured"):
    fields: dict[str, str]

    def secret(self) -> str:
        if "password" in self.fields:
            return self.fields["password"]
        return msgspec.json.encode(self.fields).decode()


class Raw(msgspec.Struct, frozen=True, tag="raw"):
    value: str

    def secret(self) -> str:
        return self.value


SecretValue = Union[Structured, Raw]

_fields_decoder = msgspec.json.Decoder(dict[str, str])


def parse_list(output: str) -> list[str]:
    return output.split()


def parse_secret(output: str) -> SecretValue:
    """
    Read an entry payload. Maps stored in the wallet come back as a JSON
    object, passwords as plain text; anything that does not decode as an
    object of strings is kept verbatim.
    """
    text = output.strip()
    try:
        return Structured(fields=_fields_decoder.decode(text))
    except (msgspec.DecodeError, msgspec.ValidationError):
        return Raw(value=text)
