"""Tests for markdown rendering of the comparison report."""

from browser_bench.method.domain.method import Method
from browser_bench.report.application.builder import build_evaluations
from browser_bench.report.application.markdown import (
    render_analysis,
    render_report,
    render_table,
)
from browser_bench.report.domain.summary import MethodSummary
from tests.report.records import run

SINGLE_EVALUATION_REPORT = (
    "# Benchmark Comparison\n"
    "\n"
    "| Method | Time | Cost (USD) | Turns |\n"
    "|--------|------|------------|-------|\n"
    "| **Dev Browser** | 3m 53s | $0.88 | 12 |\n"
    "| Playwright MCP | 4m 31s | $1.20 | 20 |\n"
    "\n"
    "## Analysis\n"
    "\n"
    "**Fastest: Dev Browser** - 3m 53s\n"
    "- 14% faster than Playwright MCP (38s saved)\n"
    "\n"
    "**Cheapest: Dev Browser** - $0.88\n"
    "- 27% cheaper than Playwright MCP ($0.32 saved)\n"
    "\n"
    "**Fewest Turns: Dev Browser** - 12 turns\n"
    "- 40% fewer turns than Playwright MCP (8 fewer)\n"
    "\n"
)


class TestRenderTable:
    def test_fastest_method_is_bold(self) -> None:
        methods = [
            MethodSummary.from_runs(Method.VANILLA, [run(duration_ms=100000)]),
            MethodSummary.from_runs(Method.DEV_BROWSER, [run(duration_ms=200000)]),
        ]

        lines = render_table(methods).splitlines()

        assert lines[2].startswith("| **Vanilla** |")
        assert lines[3].startswith("| Dev Browser |")

    def test_empty_methods_render_nothing(self) -> None:
        assert render_table([]) == ""
        assert render_analysis([]) == ""


class TestSingleEvaluation:
    """A single evaluation renders without headings, contents or overall section."""

    def test_exact_output(self) -> None:
        evaluations = build_evaluations(
            {
                "default": {
                    Method.PLAYWRIGHT_MCP: [
                        run(duration_ms=271000, cost_usd=1.20, turns=20)
                    ],
                    Method.DEV_BROWSER: [
                        run(duration_ms=233000, cost_usd=0.88, turns=12)
                    ],
                }
            }
        )

        assert render_report(evaluations) == SINGLE_EVALUATION_REPORT

    def test_averaged_note_when_multiple_runs(self) -> None:
        evaluations = build_evaluations(
            {
                "default": {
                    Method.DEV_BROWSER: [
                        run(duration_ms=233000),
                        run(duration_ms=230000),
                        run(duration_ms=236000),
                    ]
                }
            }
        )

        report = render_report(evaluations)

        assert "*Averaged over 3 runs per method*\n\n" in report
        assert "| **Dev Browser** | 3m 53s |" in report

    def test_no_averaged_note_for_single_run(self) -> None:
        evaluations = build_evaluations({"default": {Method.VANILLA: [run()]}})

        assert "Averaged over" not in render_report(evaluations)

    def test_single_named_evaluation_has_no_heading(self) -> None:
        evaluations = build_evaluations({"checkout": {Method.VANILLA: [run()]}})

        report = render_report(evaluations)

        assert "CHECKOUT" not in report
        assert "Table of Contents" not in report
        assert "Overall Summary" not in report


class TestMultipleEvaluations:
    """Several evaluations gain a contents list, sections and a pooled summary."""

    def _report(self) -> str:
        evaluations = build_evaluations(
            {
                "zeta": {Method.VANILLA: [run(duration_ms=100000)]},
                "default": {Method.VANILLA: [run(duration_ms=200000)]},
                "alpha": {Method.VANILLA: [run(duration_ms=300000)]},
            }
        )
        return render_report(evaluations)

    def test_table_of_contents_order(self) -> None:
        report = self._report()

        assert (
            "## Table of Contents\n"
            "\n"
            "- [Default](#default)\n"
            "- [ALPHA](#alpha)\n"
            "- [ZETA](#zeta)\n"
            "- [Overall Summary](#overall-summary)\n"
            "\n"
            "---\n"
        ) in report

    def test_sections_in_order(self) -> None:
        report = self._report()

        positions = [
            report.index("## Default\n"),
            report.index("## ALPHA\n"),
            report.index("## ZETA\n"),
            report.index("## Overall Summary\n"),
        ]
        assert positions == sorted(positions)
        assert report.count("### Analysis\n") == 4
        assert "\n## Analysis\n" not in report

    def test_overall_section_pools_runs(self) -> None:
        report = self._report()
        overall = report[report.index("## Overall Summary") :]

        assert "*Aggregated across 3 evals (3 total runs per method)*" in overall
        # (100 + 200 + 300) / 3 seconds
        assert "| **Vanilla** | 3m 20s |" in overall

    def test_report_ends_with_overall_analysis(self) -> None:
        report = self._report()

        assert report.endswith("**Fewest Turns: Vanilla** - 12 turns\n")
