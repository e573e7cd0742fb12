"""Comparative analysis — per-metric winners and deltas against them."""

from dataclasses import dataclass
from enum import StrEnum

from browser_bench.report.domain.formatting import round_half_up
from browser_bench.report.domain.summary import MethodSummary


class Metric(StrEnum):
    TIME = "time"
    COST = "cost"
    TURNS = "turns"


@dataclass(frozen=True)
class MethodDelta:
    """How much better the metric's winner did than one other method."""

    method: MethodSummary
    percent: int
    # Whole seconds for TIME, USD for COST, turn count for TURNS.
    absolute: float


@dataclass(frozen=True)
class MetricAnalysis:
    metric: Metric
    winner: MethodSummary
    deltas: list[MethodDelta]


def percent_diff(best: float, other: float) -> int:
    """Percentage by which best beats other, relative to other's value.

    percent_diff(233000, 271000) == 14, i.e. round((271000 - 233000) / 271000 * 100).
    """
    if other == 0:
        return 0
    return round_half_up((other - best) / other * 100)


def metric_value(summary: MethodSummary, metric: Metric) -> float:
    match metric:
        case Metric.TIME:
            return summary.avg_duration_ms
        case Metric.COST:
            return summary.avg_cost_usd
        case Metric.TURNS:
            return summary.avg_turns


def _absolute_delta(winner: MethodSummary, other: MethodSummary, metric: Metric) -> float:
    diff = metric_value(other, metric) - metric_value(winner, metric)
    if metric is Metric.TIME:
        return round_half_up(diff / 1000)
    return diff


def analyze_metric(methods: list[MethodSummary], metric: Metric) -> MetricAnalysis:
    """Compare every method against the metric's best performer.

    methods must be non-empty and in ranked order; on ties the first method
    with the lowest value wins.
    """
    winner = min(methods, key=lambda m: metric_value(m, metric))
    deltas = [
        MethodDelta(
            method=m,
            percent=percent_diff(
                best=metric_value(winner, metric), other=metric_value(m, metric)
            ),
            absolute=_absolute_delta(winner=winner, other=m, metric=metric),
        )
        for m in methods
        if m.method != winner.method
    ]
    return MetricAnalysis(metric=metric, winner=winner, deltas=deltas)


def analyze(methods: list[MethodSummary]) -> list[MetricAnalysis]:
    """Return one MetricAnalysis per metric, in TIME, COST, TURNS order."""
    return [analyze_metric(methods=methods, metric=metric) for metric in Metric]
