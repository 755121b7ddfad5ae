"""Text-mode charts of temperature timelines."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .models import DataScope, DataScopeState, Day, Hour, Month, TempTimeline, Year
from .processing import compute_candles, predict_seasonal
from .utils import days_in_month, get_range, maximum, minimum

ROWS = 16
COLS = 61
OFFSET_X = 10
OFFSET_Y = 5


class Canvas:
    """A fixed-size grid of characters; anything drawn outside it is clipped."""

    def __init__(self, height: int = 24, width: int = 80) -> None:
        if height <= 0 or width <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.height = height
        self.width = width
        self._cells = [[" "] * width for _ in range(height)]

    def _set(self, row: int, col: int, char: str) -> None:
        if 0 <= row < self.height and 0 <= col < self.width:
            self._cells[row][col] = char

    def put(self, row: int, col: int, text: str) -> None:
        """Write ``text`` left to right starting at ``(row, col)``."""
        for offset, char in enumerate(text):
            self._set(row, col + offset, char)

    def vline(self, row: int, col: int, char: str, length: int) -> None:
        """Draw ``length`` copies of ``char`` downwards from ``(row, col)``."""
        for current in range(row, row + length):
            self._set(current, col, char)

    def hline(self, row: int, col: int, char: str, length: int) -> None:
        """Draw ``length`` copies of ``char`` rightwards from ``(row, col)``."""
        for current in range(col, col + length):
            self._set(row, current, char)

    def render(self) -> str:
        """The grid as text, one line per row, trailing blanks removed."""
        return "\n".join("".join(cells).rstrip() for cells in self._cells)

    def __str__(self) -> str:
        return self.render()


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def graph(canvas: Canvas, start_x: int, end_x: int, start_y: int, end_y: int) -> None:
    """Draw the axes and their labels onto ``canvas``."""
    canvas.vline(OFFSET_Y, OFFSET_X, "|", ROWS)
    canvas.hline(OFFSET_Y + ROWS, OFFSET_X + 1, "-", COLS)

    v_labels = 6
    v_value_interval = (end_y - start_y) / (v_labels - 1)
    v_char_interval = (ROWS - 1) // (v_labels - 1)
    precision = 0 if end_y - start_y >= ROWS else 2
    for index in range(v_labels):
        value = start_y + v_value_interval * index
        text = f"{value:.{precision}f}C"
        canvas.put(
            ROWS + OFFSET_Y - index * v_char_interval - 1, OFFSET_X - len(text), text
        )

    if len(str(end_x)) >= 3:
        h_labels = 7
        h_char_interval = COLS // h_labels + 1
        local_offset_x = OFFSET_X + h_char_interval // 2 - 2
    else:
        h_labels = 12
        h_char_interval = COLS // h_labels
        local_offset_x = OFFSET_X + h_char_interval // 2 + 1
    h_value_interval = (end_x - start_x) / (h_labels - 1)

    for index in range(h_labels):
        value = int(start_x + h_value_interval * index)
        canvas.put(ROWS + OFFSET_Y + 1, local_offset_x + index * h_char_interval, str(value))


def _draw_series(
    canvas: Canvas,
    values: Sequence[float],
    padding: int,
    start: int,
    end: int,
    prediction_start: int | None = None,
) -> None:
    min_value = minimum(values) - padding
    max_value = maximum(values) + padding
    value_range = max_value - min_value

    graph(canvas, start, end, int(min_value), int(max_value))

    for col in range(COLS):
        index = (len(values) - 1) * col // COLS
        normalized = (values[index] - min_value) / value_range
        row = _round(normalized * ROWS)
        mark = "o" if prediction_start is None or index < prediction_start else "x"
        canvas.put(ROWS - row + OFFSET_Y, col + OFFSET_X + 1, mark)


def _unsupported(scope: DataScope, what: str) -> ValueError:
    return ValueError(f"cannot draw a {what} at scope {scope.name.lower()}")


def plot(timeline: TempTimeline, scope_state: DataScopeState) -> Canvas:
    """Line chart of the readings within the selected scope."""
    ts = scope_state.time_data
    scope = scope_state.scope_level

    if scope is DataScope.COUNTRY:
        years = list(timeline.yearly_readings)
        if not years:
            raise ValueError("timeline holds no readings")
        start, end, padding = years[0].year, years[-1].year, 2
        values = list(timeline.yearly_readings.values())
    elif scope is DataScope.YEAR:
        start, end, padding = 1, 12, 5
        values = get_range(
            Day(ts.year, 1, 1), Day(ts.year, 12, 31), timeline.daily_readings
        )
    elif scope is DataScope.MONTH:
        start, end, padding = 1, days_in_month(ts.year, ts.month), 2
        values = get_range(
            Day(ts.year, ts.month, 1), Day(ts.year, ts.month, end), timeline.daily_readings
        )
    elif scope is DataScope.DAY:
        start, end, padding = 0, 23, 2
        values = get_range(
            Hour(ts.year, ts.month, ts.day, 0),
            Hour(ts.year, ts.month, ts.day, 23),
            timeline.hourly_readings,
        )
    else:
        raise _unsupported(scope, "plot")

    canvas = Canvas()
    _draw_series(canvas, values, padding, start, end)
    return canvas


def prediction(
    timeline: TempTimeline, scope_state: DataScopeState, prediction_count: int
) -> Canvas:
    """Line chart of the selected readings followed by a seasonal forecast."""
    ts = scope_state.time_data
    scope = scope_state.scope_level

    if scope is DataScope.COUNTRY:
        years = list(timeline.yearly_readings)
        if not years:
            raise ValueError("timeline holds no readings")
        start, padding = years[0].year, 2
        end = years[-1].year + prediction_count
        values = list(timeline.yearly_readings.values())
        predictions = predict_seasonal(values, 5, 5, prediction_count)
    elif scope is DataScope.YEAR:
        start, padding = 1, 5
        end = 12 + prediction_count
        values = get_range(
            Day(ts.year, 1, 1), Day(ts.year, 12, 31), timeline.daily_readings
        )
        historical = get_range(
            next(iter(timeline.daily_readings)),
            Day(ts.year, 12, 31),
            timeline.daily_readings,
        )
        predictions = predict_seasonal(historical, 365, 30, prediction_count * 30)
    elif scope is DataScope.MONTH:
        start, padding = 1, 2
        end = days_in_month(ts.year, ts.month) + prediction_count
        values = get_range(
            Day(ts.year, ts.month, 1), Day(ts.year, ts.month, end), timeline.daily_readings
        )
        historical = get_range(
            next(iter(timeline.daily_readings)),
            Day(ts.year, ts.month, end),
            timeline.daily_readings,
        )
        predictions = predict_seasonal(historical, 365, 7, prediction_count)
    elif scope is DataScope.DAY:
        start, padding = 0, 2
        end = 23 + prediction_count
        values = get_range(
            Hour(ts.year, ts.month, ts.day, 0),
            Hour(ts.year, ts.month, ts.day, 23),
            timeline.hourly_readings,
        )
        historical = get_range(
            next(iter(timeline.hourly_readings)),
            Hour(ts.year, ts.month, ts.day, 23),
            timeline.hourly_readings,
        )
        predictions = predict_seasonal(historical, 24, 48, prediction_count)
    else:
        raise _unsupported(scope, "prediction")

    prediction_start = len(values)
    canvas = Canvas()
    _draw_series(canvas, values + predictions, padding, start, end, prediction_start)
    return canvas


def candlesticks(timeline: TempTimeline, scope_state: DataScopeState) -> Canvas:
    """Candlestick chart of the selected readings."""
    ts = scope_state.time_data
    scope = scope_state.scope_level

    if scope is DataScope.COUNTRY:
        years = list(timeline.yearly_readings)
        if not years:
            raise ValueError("timeline holds no readings")
        start, end, padding = years[0].year, years[-1].year, 14
        values = get_range(Day(start, 1, 1), Day(end, 12, 31), timeline.daily_readings)
        candles = compute_candles(values, 365)
    elif scope is DataScope.YEAR:
        start, end, padding = 1, 12, 5
        values = get_range(
            Day(ts.year, 1, 1), Day(ts.year, 12, 31), timeline.daily_readings
        )
        candles = compute_candles(values, 30)
    elif scope is DataScope.MONTH:
        start, end, padding = 1, 28, 2
        values = get_range(
            Hour(ts.year, ts.month, 1, 0),
            Hour(ts.year, ts.month, 31, 23),
            timeline.hourly_readings,
        )
        candles = compute_candles(values, 24)
    else:
        raise _unsupported(scope, "candlestick chart")

    if not candles:
        raise ValueError("not enough readings to build a candle")

    min_value = min(candle.low for candle in candles) - padding
    max_value = max(candle.high for candle in candles) + padding
    value_range = max_value - min_value

    canvas = Canvas()
    graph(canvas, start, end, int(min_value), int(max_value))

    def scaled(value: float) -> float:
        return (value - min_value) / value_range * ROWS

    spacing = COLS / len(candles)
    for index, candle in enumerate(candles):
        col = OFFSET_X + 1 + math.floor(index * spacing + spacing / 2)

        row_low = math.floor(ROWS - scaled(candle.low) + OFFSET_Y)
        row_high = math.ceil(ROWS - scaled(candle.high) + OFFSET_Y)
        canvas.vline(row_high, col, "|", row_low - row_high)

        row_open = _round(ROWS - scaled(candle.open) + OFFSET_Y)
        row_close = _round(ROWS - scaled(candle.close) + OFFSET_Y)
        row_top = min(row_open, row_close)
        row_bottom = max(row_open, row_close)

        # Rows grow downwards, so a higher close sits on a smaller row.
        if row_open > row_close:
            body = "+"
        elif row_open < row_close:
            body = "-"
        else:
            body = "="
        canvas.vline(row_top, col, body, row_bottom - row_top + 1)

    return canvas


def temp(timeline: TempTimeline, scope_state: DataScopeState) -> float:
    """Mean temperature of the selected year, month, day or hour."""
    ts = scope_state.time_data
    scope = scope_state.scope_level
    if scope is DataScope.YEAR:
        return timeline.yearly_readings[Year(ts.year)]
    if scope is DataScope.MONTH:
        return timeline.monthly_readings[Month(ts.year, ts.month)]
    if scope is DataScope.DAY:
        return timeline.daily_readings[Day(ts.year, ts.month, ts.day)]
    if scope is DataScope.HOUR:
        return timeline.hourly_readings[ts]
    raise ValueError(f"no single temperature at scope {scope.name.lower()}")