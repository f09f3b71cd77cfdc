"""Gender values reported by SWAPI.

The API documents `male`, `female`, `unknown` and `n/a`, and in practice
also returns `none` and `hermaphrodite`. Records keep the raw string; this
enum only names the values we know about.
"""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNKNOWN = "unknown"
    NOT_APPLICABLE = "n/a"
    NONE = "none"
    HERMAPHRODITE = "hermaphrodite"

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in cls._value2member_map_
