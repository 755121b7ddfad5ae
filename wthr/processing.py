"""Forecasting and candle aggregation over temperature series."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Candlestick


def predict_seasonal(
    data: Sequence[float],
    season_length: int,
    recent_length: int,
    prediction_count: int,
) -> list[float]:
    """Forecast by seasonal averages shifted by the recent deviation from them."""
    if season_length <= 0:
        raise ValueError("season length must be positive")
    if not data:
        raise ValueError("cannot predict from an empty series")
    if recent_length <= 0:
        raise ValueError("recent length must be positive")

    sums: dict[int, float] = {}
    counts: dict[int, int] = {}
    for position, value in enumerate(data):
        season = position % season_length
        sums[season] = sums.get(season, 0.0) + value
        counts[season] = counts.get(season, 0) + 1
    seasonal_average = {season: sums[season] / counts[season] for season in sums}

    def season_mean(position: int) -> float:
        season = position % season_length
        try:
            return seasonal_average[season]
        except KeyError:
            raise ValueError(
                f"no data for season index {season}; series is shorter than a season"
            ) from None

    recent_length = min(recent_length, len(data))
    size = len(data)
    recent_deviation = (
        sum(data[pos] - season_mean(pos) for pos in range(size - recent_length, size))
        / recent_length
    )

    return [
        season_mean(size + step) + recent_deviation for step in range(prediction_count)
    ]


def compute_candles(data: Sequence[float], candle_size: int) -> list[Candlestick]:
    """Cut ``data`` into full candles of ``candle_size`` readings.

    The final chunk is never turned into a candle, even when it is full.
    """
    if not data or candle_size <= 0:
        return []
    return [
        Candlestick.from_values(data[start : start + candle_size])
        for start in range(0, len(data) - candle_size, candle_size)
    ]