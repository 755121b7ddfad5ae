"""Reading user input and dataset files into model values."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import replace

from .models import (
    DataScope,
    DataScopeState,
    Day,
    Hour,
    Month,
    TempTimeline,
    VisualMode,
    Year,
)
from .utils import tokenise


class SelectionError(ValueError):
    """A selection could not be made; the message says why."""


_DATA_SCOPES = {
    "country": DataScope.COUNTRY,
    "year": DataScope.YEAR,
    "month": DataScope.MONTH,
    "day": DataScope.DAY,
    "hour": DataScope.HOUR,
}

_VISUAL_MODES = {
    "temp": VisualMode.TEMP,
    "plot": VisualMode.PLOT,
    "prediction": VisualMode.PREDICTION,
    "candles": VisualMode.CANDLESTICK,
}


def read_data_scope(text: str) -> DataScope:
    """Scope named by ``text``, or ``DataScope.UNSET`` when unknown."""
    return _DATA_SCOPES.get(text, DataScope.UNSET)


def read_visual_mode(text: str) -> VisualMode:
    """Visual mode named by ``text``, or ``VisualMode.INVALID`` when unknown."""
    return _VISUAL_MODES.get(text, VisualMode.INVALID)


def read_timestamp(text: str) -> Hour:
    """Parse an ISO-like ``YYYY-MM-DDTHH...`` timestamp down to the hour."""
    date, separator, rest = text.partition("T")
    if not separator:
        raise ValueError(f"timestamp has no time part: {text!r}")
    parts = tokenise(date, "-")
    if len(parts) < 3:
        raise ValueError(f"malformed date in timestamp: {text!r}")
    year, month, day = (int(part) for part in parts[:3])
    return Hour(year, month, day, int(rest[:2]))


def load_dataset(path: str | os.PathLike[str]) -> dict[str, TempTimeline]:
    """Read a CSV of hourly temperatures into one timeline per country.

    The first column holds the timestamps; every other column is named by a
    header whose first two characters are the country code.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        fields = tokenise(handle.readline().rstrip("\r\n"), ",")
        if not fields:
            raise ValueError(f"dataset has no header: {path}")
        columns = fields[1:]
        readings: list[dict[Hour, float]] = [{} for _ in columns]

        for line in handle:
            row = line.rstrip("\r\n")
            if not row:
                continue
            cells = tokenise(row, ",")
            timestamp = read_timestamp(cells[0])
            values = cells[1:]
            if len(values) > len(columns):
                raise ValueError(f"row has more values than the header: {row!r}")
            for column, cell in zip(readings, values):
                column[timestamp] = float(cell)

    timelines: dict[str, TempTimeline] = {}
    for name, column in zip(columns, readings):
        code = name[:2]
        timelines[code] = TempTimeline(code, column)
    return dict(sorted(timelines.items()))


def handle_country(
    code: str, timelines: Mapping[str, TempTimeline], scope_state: DataScopeState
) -> None:
    """Select the country ``code``."""
    if code not in timelines:
        raise SelectionError("Country not found.")
    scope_state.scope_level = DataScope.COUNTRY
    scope_state.country_code = code


def handle_date(text: str, timeline: TempTimeline, scope_state: DataScopeState) -> None:
    """Select the day given as ``dd/mm/yyyy``."""
    components = tokenise(text, "/")
    if len(components) != 3:
        raise SelectionError("Invalid date format. Use dd/mm/yyyy")
    try:
        day, month, year = (int(component) for component in components)
    except ValueError:
        raise SelectionError("Invalid date format. Use dd/mm/yyyy") from None

    if Day(year, month, day) not in timeline.daily_readings:
        raise SelectionError("No data available for that date.")
    scope_state.time_data = replace(
        scope_state.time_data, year=year, month=month, day=day
    )
    scope_state.scope_level = DataScope.DAY


def handle_numeric(
    text: str,
    scope: DataScope,
    timeline: TempTimeline,
    scope_state: DataScopeState,
) -> None:
    """Select the year, month, day or hour numbered ``text`` within the current scope."""
    try:
        value = int(text)
    except ValueError:
        raise SelectionError(f"Invalid value: {text!r}.") from None

    ts = scope_state.time_data
    if scope is DataScope.YEAR:
        found = Year(value) in timeline.yearly_readings
        updated = replace(ts, year=value)
    elif scope is DataScope.MONTH:
        found = Month(ts.year, value) in timeline.monthly_readings
        updated = replace(ts, month=value)
    elif scope is DataScope.DAY:
        found = Day(ts.year, ts.month, value) in timeline.daily_readings
        updated = replace(ts, day=value)
    elif scope is DataScope.HOUR:
        found = Hour(ts.year, ts.month, ts.day, value) in timeline.hourly_readings
        updated = replace(ts, hour=value)
    else:
        found = False
        updated = ts

    if not found:
        raise SelectionError("No data available for that timestamp.")
    scope_state.time_data = updated
    scope_state.scope_level = scope