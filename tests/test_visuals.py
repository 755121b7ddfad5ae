import pytest

from wthr.models import DataScope, DataScopeState, Hour, TempTimeline
from wthr.visuals import (
    COLS,
    OFFSET_X,
    OFFSET_Y,
    ROWS,
    Canvas,
    candlesticks,
    graph,
    plot,
    prediction,
    temp,
)


def _grid(canvas):
    return [line.ljust(canvas.width) for line in canvas.render().split("\n")]


def _timeline(values_by_hour):
    return TempTimeline("XX", dict(values_by_hour))


def _hours(days, value_of):
    readings = {}
    position = 0
    for day in days:
        for hour in range(24):
            readings[Hour(2020, 1, day, hour)] = value_of(position)
            position += 1
    return readings


def _state(scope, year=0, month=0, day=0, hour=0):
    return DataScopeState(scope, "XX", Hour(year, month, day, hour))


def _marks(canvas, chars):
    grid = _grid(canvas)
    found = {}
    for col in range(OFFSET_X + 1, OFFSET_X + 1 + COLS):
        for row in range(OFFSET_Y, OFFSET_Y + ROWS + 1):
            if grid[row][col] in chars:
                found.setdefault(col, []).append((row, grid[row][col]))
    return found


def test_canvas_put_and_render():
    canvas = Canvas(height=3, width=10)
    canvas.put(1, 2, "abc")
    assert canvas.render().split("\n") == ["", "  abc", ""]


def test_canvas_clips_outside_text():
    canvas = Canvas(height=2, width=5)
    canvas.put(0, 3, "xyz")
    canvas.put(5, 0, "hidden")
    canvas.put(0, -2, "ab")
    assert canvas.render().split("\n") == ["   xy", ""]


def test_canvas_lines():
    canvas = Canvas(height=4, width=4)
    canvas.vline(1, 0, "|", 3)
    canvas.hline(0, 1, "-", 3)
    assert canvas.render().split("\n") == [" ---", "|", "|", "|"]


def test_canvas_zero_length_line_draws_nothing():
    canvas = Canvas(height=2, width=2)
    canvas.vline(0, 0, "|", 0)
    canvas.hline(0, 0, "-", -1)
    assert canvas.render() == "\n"


def test_canvas_rejects_empty_size():
    with pytest.raises(ValueError):
        Canvas(height=0, width=10)


def test_graph_draws_axes():
    canvas = Canvas()
    graph(canvas, 0, 23, 10, 20)
    grid = _grid(canvas)
    assert all(grid[row][OFFSET_X] == "|" for row in range(OFFSET_Y, OFFSET_Y + ROWS))
    axis_row = grid[OFFSET_Y + ROWS]
    assert axis_row[OFFSET_X + 1 : OFFSET_X + 1 + COLS] == "-" * COLS


def test_graph_vertical_labels_use_decimals_for_small_ranges():
    canvas = Canvas()
    graph(canvas, 0, 23, 10, 20)
    grid = _grid(canvas)
    assert grid[OFFSET_Y + ROWS - 1][: OFFSET_X].strip() == "10.00C"
    assert grid[OFFSET_Y][: OFFSET_X].strip() == "20.00C"


def test_graph_vertical_labels_whole_for_large_ranges():
    canvas = Canvas()
    graph(canvas, 0, 23, 0, 50)
    grid = _grid(canvas)
    assert grid[OFFSET_Y + ROWS - 1][: OFFSET_X].strip() == "0C"
    assert grid[OFFSET_Y][: OFFSET_X].strip() == "50C"


def test_graph_horizontal_labels_increase():
    canvas = Canvas()
    graph(canvas, 0, 23, 10, 20)
    labels = [int(token) for token in _grid(canvas)[OFFSET_Y + ROWS + 1].split()]
    assert len(labels) == 12
    assert labels[0] == 0
    assert labels == sorted(labels)


def test_graph_wide_labels_use_fewer_ticks():
    canvas = Canvas()
    graph(canvas, 1990, 2020, 0, 30)
    labels = [int(token) for token in _grid(canvas)[OFFSET_Y + ROWS + 1].split()]
    assert len(labels) == 7
    assert labels[0] == 1990
    assert labels[-1] == 2020


def test_plot_day_marks_every_column_once():
    timeline = _timeline(_hours([1, 2], float))
    canvas = plot(timeline, _state(DataScope.DAY, 2020, 1, 1))
    marks = _marks(canvas, "o")
    assert len(marks) == COLS
    assert all(len(found) == 1 for found in marks.values())


def test_plot_rising_series_climbs():
    timeline = _timeline(_hours([1, 2], float))
    canvas = plot(timeline, _state(DataScope.DAY, 2020, 1, 1))
    rows = [found[0][0] for _, found in sorted(_marks(canvas, "o").items())]
    assert rows == sorted(rows, reverse=True)
    assert rows[0] > rows[-1]


def test_plot_rejects_hour_scope():
    timeline = _timeline(_hours([1], float))
    with pytest.raises(ValueError):
        plot(timeline, _state(DataScope.HOUR, 2020, 1, 1, 3))


def test_prediction_day_marks_history_then_forecast():
    timeline = _timeline(_hours([1, 2, 3], lambda position: float(position % 24)))
    canvas = prediction(timeline, _state(DataScope.DAY, 2020, 1, 2), 12)
    marks = _marks(canvas, "ox")
    assert len(marks) == COLS
    kinds = [found[0][1] for _, found in sorted(marks.items())]
    assert "o" in kinds and "x" in kinds
    first_x = kinds.index("x")
    assert all(kind == "x" for kind in kinds[first_x:])


def test_prediction_needs_a_full_season():
    timeline = _timeline(_hours([1], float))
    with pytest.raises(ValueError):
        prediction(timeline, _state(DataScope.COUNTRY), 3)


def test_candlesticks_rising_days_have_rising_bodies():
    timeline = _timeline(_hours([1, 2, 3], float))
    canvas = candlesticks(timeline, _state(DataScope.MONTH, 2020, 1))
    bodies = {char for found in _marks(canvas, "+-=").values() for _, char in found}
    assert "+" in bodies
    assert "=" not in bodies
    body_rows = [row for found in _marks(canvas, "+").values() for row, _ in found]
    assert all(row < OFFSET_Y + ROWS for row in body_rows)


def test_candlesticks_falling_days_have_falling_bodies():
    timeline = _timeline(_hours([1, 2, 3], lambda position: 100.0 - position))
    canvas = candlesticks(timeline, _state(DataScope.MONTH, 2020, 1))
    columns = _marks(canvas, "+=")
    falling = [
        row
        for found in _marks(canvas, "-").values()
        for row, _ in found
        if row < OFFSET_Y + ROWS
    ]
    assert columns == {}
    assert falling


def test_candlesticks_need_enough_readings():
    timeline = _timeline(_hours([1], float))
    with pytest.raises(ValueError):
        candlesticks(timeline, _state(DataScope.MONTH, 2020, 1))


def test_candlesticks_reject_day_scope():
    timeline = _timeline(_hours([1, 2], float))
    with pytest.raises(ValueError):
        candlesticks(timeline, _state(DataScope.DAY, 2020, 1, 1))


def test_temp_hour_returns_reading():
    timeline = _timeline({Hour(2020, 1, 1, 5): 7.5, Hour(2020, 1, 1, 6): 9.0})
    assert temp(timeline, _state(DataScope.HOUR, 2020, 1, 1, 6)) == 9.0


@pytest.mark.parametrize("scope", [DataScope.YEAR, DataScope.MONTH, DataScope.DAY])
def test_temp_aggregates_constant_readings(scope):
    timeline = _timeline(_hours([1, 2], lambda position: 4.0))
    assert temp(timeline, _state(scope, 2020, 1, 1)) == 4.0


def test_temp_missing_reading_raises_key_error():
    timeline = _timeline(_hours([1], float))
    with pytest.raises(KeyError):
        temp(timeline, _state(DataScope.DAY, 2020, 1, 9))


def test_temp_rejects_country_scope():
    timeline = _timeline(_hours([1], float))
    with pytest.raises(ValueError):
        temp(timeline, _state(DataScope.COUNTRY))