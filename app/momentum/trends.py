"""
Trend analyzer — change of body metrics over a sample window.

For each metric the change is ``latest − first`` over the samples in
the window that carry the metric.  The trend compares the mean of the
first half of the series with the mean of the second half (for an odd
count the extra value belongs to the second half):

    Δ% = (mean₂ − mean₁) / mean₁ · 100

``|Δ%| < 2`` is ``stable``.  Otherwise the metric's direction decides
whether the movement is ``improving`` or ``declining``: weight, BMI,
body fat and waist are lower-is-better, muscle mass is
higher-is-better.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.core.exceptions import InvalidInput
from app.momentum.metrics import bmi
from app.schemas.progress import MetricChange, MetricDirection, SummaryWindow, Trend

STABLE_THRESHOLD_PCT = 2.0

WINDOW_DAYS: dict[SummaryWindow, int] = {
    SummaryWindow.WEEK: 7,
    SummaryWindow.MONTH: 30,
    SummaryWindow.QUARTER: 90,
}

METRIC_DIRECTIONS: dict[str, MetricDirection] = {
    "weight_kg": MetricDirection.LOWER_IS_BETTER,
    "bmi": MetricDirection.LOWER_IS_BETTER,
    "body_fat_pct": MetricDirection.LOWER_IS_BETTER,
    "waist_cm": MetricDirection.LOWER_IS_BETTER,
    "muscle_mass_kg": MetricDirection.HIGHER_IS_BETTER,
}


def parse_window(value) -> SummaryWindow:
    try:
        return SummaryWindow(value)
    except ValueError:
        raise InvalidInput(f"Unknown window: {value!r} (expected 7d, 30d or 90d)") from None


def window_start(window: SummaryWindow, now: datetime.datetime) -> datetime.datetime:
    return now - datetime.timedelta(days=WINDOW_DAYS[window])


def trend(values: list[float], direction: MetricDirection) -> Trend:
    if len(values) < 2:
        return Trend.STABLE
    half = len(values) // 2
    first, second = values[:half], values[half:]
    first_mean = sum(first) / len(first)
    second_mean = sum(second) / len(second)
    if first_mean == 0:
        return Trend.STABLE

    change_pct = (second_mean - first_mean) / first_mean * 100.0
    if abs(change_pct) < STABLE_THRESHOLD_PCT:
        return Trend.STABLE
    went_down = change_pct < 0
    if direction is MetricDirection.LOWER_IS_BETTER:
        return Trend.IMPROVING if went_down else Trend.DECLINING
    return Trend.DECLINING if went_down else Trend.IMPROVING


def metric_change(values: list[float], metric: str) -> Optional[MetricChange]:
    """Change and trend of one metric series, or None when it has no values."""
    if not values:
        return None
    direction = METRIC_DIRECTIONS[metric]
    return MetricChange(
        first=round(values[0], 2),
        latest=round(values[-1], 2),
        change=round(values[-1] - values[0], 2),
        trend=trend(values, direction),
        direction=direction,
        samples=len(values),
    )


def summarize(samples: list) -> dict[str, Optional[MetricChange]]:
    """Per-metric change over ``samples`` (oldest first)."""
    series: dict[str, list[float]] = {metric: [] for metric in METRIC_DIRECTIONS}
    for sample in samples:
        series["weight_kg"].append(sample.weight_kg)
        series["bmi"].append(bmi(sample.weight_kg, sample.height_cm))
        for metric in ("body_fat_pct", "muscle_mass_kg", "waist_cm"):
            value = getattr(sample, metric)
            if value is not None:
                series[metric].append(value)
    return {metric: metric_change(values, metric) for metric, values in series.items()}
