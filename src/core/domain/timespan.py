"""Timespan abbreviations (ms / sec / min / hr).

Only the strings live here; picking the right unit for a duration is up to
the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class TimeUnit(NamedTuple):
    short: str
    long: str
    full: str


class TimeSpanAbbreviation(Enum):
    """Short, long and full spellings of the supported time units."""

    MILLISECONDS = TimeUnit("ms", "ms", "Milliseconds")
    SECONDS = TimeUnit("s", "sec", "Seconds")
    MINUTES = TimeUnit("m", "min", "Minutes")
    HOURS = TimeUnit("h", "hr", "Hours")

    @property
    def short(self) -> str:
        return self.value.short

    @property
    def long(self) -> str:
        return self.value.long

    @property
    def full(self) -> str:
        return self.value.full
