"""Timestamps, scope state and temperature timelines."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import TypeVar

from .utils import average, maximum, minimum


@dataclass(frozen=True, order=True)
class Hour:
    """A single hour of a given day."""

    year: int
    month: int
    day: int
    hour: int


@dataclass(frozen=True, order=True)
class Day:
    """A single calendar day."""

    year: int
    month: int
    day: int


@dataclass(frozen=True, order=True)
class Month:
    """A single calendar month."""

    year: int
    month: int


@dataclass(frozen=True, order=True)
class Year:
    """A single calendar year."""

    year: int


class DataScope(IntEnum):
    """How deep into the data the current selection goes."""

    UNSET = 0
    COUNTRY = 1
    YEAR = 2
    MONTH = 3
    DAY = 4
    HOUR = 5


@dataclass
class DataScopeState:
    """The current selection: scope level, country and point in time."""

    scope_level: DataScope = DataScope.UNSET
    country_code: str = ""
    time_data: Hour = field(default_factory=lambda: Hour(0, 0, 0, 0))


class VisualMode(Enum):
    """Ways of displaying the selected data."""

    INVALID = 0
    TEMP = 1
    PLOT = 2
    PREDICTION = 3
    CANDLESTICK = 4


@dataclass
class Candlestick:
    """Open, high, low and close of a run of readings."""

    open: float
    high: float
    low: float
    close: float

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Candlestick:
        """Build a candle from a non-empty run of readings."""
        data = list(values)
        if not data:
            raise ValueError("a candlestick needs at least one value")
        return cls(data[0], maximum(data), minimum(data), data[-1])


KeyIn = TypeVar("KeyIn")
KeyOut = TypeVar("KeyOut")


def _group_average(
    readings: Mapping[KeyIn, float], key: Callable[[KeyIn], KeyOut]
) -> dict[KeyOut, float]:
    groups: dict[KeyOut, list[float]] = defaultdict(list)
    for timestamp, value in readings.items():
        groups[key(timestamp)].append(value)
    return {group: average(values) for group, values in sorted(groups.items())}


@dataclass
class TempTimeline:
    """Hourly temperatures of one country with daily, monthly and yearly means."""

    country_code: str
    hourly_readings: dict[Hour, float]
    daily_readings: dict[Day, float] = field(init=False)
    monthly_readings: dict[Month, float] = field(init=False)
    yearly_readings: dict[Year, float] = field(init=False)

    def __post_init__(self) -> None:
        self.hourly_readings = dict(sorted(self.hourly_readings.items()))
        self.daily_readings = _group_average(
            self.hourly_readings, lambda ts: Day(ts.year, ts.month, ts.day)
        )
        self.monthly_readings = _group_average(
            self.daily_readings, lambda ts: Month(ts.year, ts.month)
        )
        self.yearly_readings = _group_average(
            self.monthly_readings, lambda ts: Year(ts.year)
        )