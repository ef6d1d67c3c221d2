"""
Discord snowflake identifiers.

IDs render as their decimal string form when embedded in URLs.
"""

from datetime import datetime, timedelta, timezone
from typing import Union

DISCORD_EPOCH_MS = 1420070400000
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Snowflake(int):
    def __new__(cls, value: Union[int, str]) -> "Snowflake":
        if isinstance(value, str):
            value = value.strip()
            if not value.isdigit():
                raise ValueError(f"invalid snowflake: {value!r}")
        ivalue = int(value)
        if ivalue < 0:
            raise ValueError(f"invalid snowflake: {value!r}")
        return super().__new__(cls, ivalue)

    @classmethod
    def parse(cls, value: str) -> "Snowflake":
        return cls(value)

    @property
    def created_at(self) -> datetime:
        ms = (int(self) >> 22) + DISCORD_EPOCH_MS
        return _UNIX_EPOCH + timedelta(milliseconds=ms)

    def __str__(self) -> str:
        return int.__repr__(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int.__repr__(self)})"


class AppID(Snowflake):
    pass


class InteractionID(Snowflake):
    pass


class MessageID(Snowflake):
    pass
