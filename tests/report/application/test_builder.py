"""Tests for ranking methods and ordering evaluations."""

import pytest

from browser_bench.method.domain.method import Method
from browser_bench.report.application.builder import (
    build_evaluations,
    pool_evaluations,
    rank_methods,
)
from browser_bench.report.domain.record import RunRecord
from browser_bench.report.domain.summary import EvaluationSummary, MethodSummary
from tests.report.records import run


class TestMethodSummary:
    """Averages are taken over every run of a method."""

    def test_averages_runs(self) -> None:
        summary = MethodSummary.from_runs(
            method=Method.DEV_BROWSER,
            runs=[
                run(duration_ms=233000, cost_usd=0.80, turns=12),
                run(duration_ms=230000, cost_usd=0.90, turns=12),
                run(duration_ms=236000, cost_usd=1.00, turns=12),
            ],
        )

        assert summary.avg_duration_ms == 233000
        assert summary.avg_cost_usd == pytest.approx(0.9)
        assert summary.avg_turns == 12
        assert summary.display_name == "Dev Browser"

    def test_average_turns_round_half_up(self) -> None:
        summary = MethodSummary.from_runs(
            method=Method.VANILLA, runs=[run(turns=12), run(turns=13)]
        )

        assert summary.avg_turns == 13


class TestEvaluationSummary:
    def _evaluation(self, name: str) -> EvaluationSummary:
        return EvaluationSummary(
            name=name,
            methods=[MethodSummary.from_runs(method=Method.VANILLA, runs=[run()])],
        )

    def test_default_display_name(self) -> None:
        assert self._evaluation("default").display_name == "Default"

    def test_named_display_name_is_upper_cased(self) -> None:
        assert self._evaluation("game-tracker").display_name == "GAME-TRACKER"

    def test_anchor_lowercases_and_dashes_whitespace(self) -> None:
        assert self._evaluation("Game  Tracker").anchor == "game-tracker"


class TestRankMethods:
    """Methods are ranked by average duration, fastest first."""

    def test_fastest_first(self) -> None:
        ranked = rank_methods(
            {
                Method.DEV_BROWSER: [run(duration_ms=300000)],
                Method.VANILLA: [run(duration_ms=100000)],
                Method.PLAYWRIGHT_MCP: [run(duration_ms=200000)],
            }
        )

        assert [s.method for s in ranked] == [
            Method.VANILLA,
            Method.PLAYWRIGHT_MCP,
            Method.DEV_BROWSER,
        ]

    def test_ties_keep_canonical_order(self) -> None:
        ranked = rank_methods(
            {
                Method.VANILLA: [run(duration_ms=100000)],
                Method.PLAYWRIGHT_MCP: [run(duration_ms=100000)],
                Method.DEV_BROWSER: [run(duration_ms=100000)],
            }
        )

        assert [s.method for s in ranked] == [
            Method.DEV_BROWSER,
            Method.PLAYWRIGHT_MCP,
            Method.VANILLA,
        ]

    def test_methods_without_runs_are_dropped(self) -> None:
        ranked = rank_methods({Method.VANILLA: [run()], Method.DEV_BROWSER: []})

        assert [s.method for s in ranked] == [Method.VANILLA]


class TestBuildEvaluations:
    """The default evaluation comes first, the rest sort case-insensitively."""

    def test_default_first_then_alphabetical(self) -> None:
        grouped: dict[str, dict[Method, list[RunRecord]]] = {
            "zeta": {Method.VANILLA: [run()]},
            "default": {Method.VANILLA: [run()]},
            "Beta": {Method.VANILLA: [run()]},
            "alpha": {Method.VANILLA: [run()]},
        }

        evaluations = build_evaluations(grouped)

        assert [e.name for e in evaluations] == ["default", "alpha", "Beta", "zeta"]

    def test_methods_are_ranked_within_each_evaluation(self) -> None:
        grouped = {
            "checkout": {
                Method.DEV_BROWSER: [run(duration_ms=200000)],
                Method.VANILLA: [run(duration_ms=100000)],
            }
        }

        evaluations = build_evaluations(grouped)

        assert [s.method for s in evaluations[0].methods] == [
            Method.VANILLA,
            Method.DEV_BROWSER,
        ]


class TestPoolEvaluations:
    """Pooling concatenates runs rather than averaging averages."""

    def test_pools_runs_across_evaluations(self) -> None:
        evaluations = build_evaluations(
            {
                "a": {Method.VANILLA: [run(duration_ms=100000)]},
                "b": {
                    Method.VANILLA: [
                        run(duration_ms=200000),
                        run(duration_ms=300000),
                    ]
                },
            }
        )

        pooled = pool_evaluations(evaluations)

        assert len(pooled) == 1
        assert len(pooled[0].runs) == 3
        # Mean of averages would be 175000.
        assert pooled[0].avg_duration_ms == 200000

    def test_method_missing_from_one_evaluation_still_pooled(self) -> None:
        evaluations = build_evaluations(
            {
                "a": {
                    Method.VANILLA: [run(duration_ms=100000)],
                    Method.DEV_BROWSER: [run(duration_ms=50000)],
                },
                "b": {Method.VANILLA: [run(duration_ms=100000)]},
            }
        )

        pooled = pool_evaluations(evaluations)

        assert [s.method for s in pooled] == [Method.DEV_BROWSER, Method.VANILLA]
        assert len(pooled[1].runs) == 2
