"""Markdown rendering of the benchmark comparison report.

Every function here is pure: summaries in, text out. The layout is consumed by
people and by tooling that parses the report, so headings, table columns and
analysis phrasing are fixed.
"""

from browser_bench.report.application.builder import pool_evaluations
from browser_bench.report.domain.analysis import Metric, MetricAnalysis, analyze
from browser_bench.report.domain.formatting import format_cost, format_duration
from browser_bench.report.domain.summary import EvaluationSummary, MethodSummary

TITLE = "# Benchmark Comparison"
OVERALL_HEADING = "Overall Summary"
OVERALL_ANCHOR = "overall-summary"


def render_table(methods: list[MethodSummary]) -> str:
    """Render the Method / Time / Cost / Turns table, fastest method in bold."""
    if not methods:
        return ""

    fastest = methods[0]
    lines = [
        "| Method | Time | Cost (USD) | Turns |",
        "|--------|------|------------|-------|",
    ]
    for m in methods:
        name = f"**{m.display_name}**" if m.method == fastest.method else m.display_name
        lines.append(
            f"| {name} | {format_duration(m.avg_duration_ms)}"
            f" | {format_cost(m.avg_cost_usd)} | {m.avg_turns} |"
        )
    return "\n".join(lines) + "\n"


def _render_metric(analysis: MetricAnalysis) -> str:
    winner = analysis.winner
    match analysis.metric:
        case Metric.TIME:
            header = f"Fastest: {winner.display_name}"
            value = format_duration(winner.avg_duration_ms)
            bullets = [
                f"- {d.percent}% faster than {d.method.display_name}"
                f" ({int(d.absolute)}s saved)"
                for d in analysis.deltas
            ]
        case Metric.COST:
            header = f"Cheapest: {winner.display_name}"
            value = format_cost(winner.avg_cost_usd)
            bullets = [
                f"- {d.percent}% cheaper than {d.method.display_name}"
                f" ({format_cost(d.absolute)} saved)"
                for d in analysis.deltas
            ]
        case Metric.TURNS:
            header = f"Fewest Turns: {winner.display_name}"
            value = f"{winner.avg_turns} turns"
            bullets = [
                f"- {d.percent}% fewer turns than {d.method.display_name}"
                f" ({int(d.absolute)} fewer)"
                for d in analysis.deltas
            ]
    return "\n".join([f"**{header}** - {value}", *bullets]) + "\n"


def render_analysis(methods: list[MethodSummary]) -> str:
    """Render one paragraph per metric: the winner, then a bullet per other method."""
    if not methods:
        return ""
    return "\n".join(_render_metric(analysis) for analysis in analyze(methods))


def _render_toc(evaluations: list[EvaluationSummary]) -> str:
    lines = ["## Table of Contents", ""]
    lines += [f"- [{e.display_name}](#{e.anchor})" for e in evaluations]
    lines.append(f"- [{OVERALL_HEADING}](#{OVERALL_ANCHOR})")
    return "\n".join(lines) + "\n\n---\n\n"


def _render_evaluation(evaluation: EvaluationSummary, multiple: bool) -> str:
    md = ""
    if multiple:
        md += f"## {evaluation.display_name}\n\n"

    if evaluation.runs_per_method > 1:
        md += f"*Averaged over {evaluation.runs_per_method} runs per method*\n\n"

    md += render_table(evaluation.methods)
    md += "\n"
    md += "### Analysis\n\n" if multiple else "## Analysis\n\n"
    md += render_analysis(evaluation.methods)
    md += "\n"

    if multiple:
        md += "---\n\n"
    return md


def _render_overall(evaluations: list[EvaluationSummary]) -> str:
    pooled = pool_evaluations(evaluations)
    total_runs = len(pooled[0].runs) if pooled else 0

    md = f"## {OVERALL_HEADING}\n\n"
    md += (
        f"*Aggregated across {len(evaluations)} evals"
        f" ({total_runs} total runs per method)*\n\n"
    )
    md += render_table(pooled)
    md += "\n### Analysis\n\n"
    md += render_analysis(pooled)
    return md


def render_report(evaluations: list[EvaluationSummary]) -> str:
    """Render the full report for evaluations, which must already be ordered.

    With more than one evaluation the report gains a table of contents,
    per-evaluation headings and a pooled Overall Summary section.
    """
    multiple = len(evaluations) > 1

    md = f"{TITLE}\n\n"
    if multiple:
        md += _render_toc(evaluations)

    for evaluation in evaluations:
        md += _render_evaluation(evaluation, multiple=multiple)

    if multiple:
        md += _render_overall(evaluations)

    return md
