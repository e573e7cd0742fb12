"""Builder — turns grouped RunRecords into ranked Method and Evaluation summaries."""

from browser_bench.method.domain.method import Method, canonical_index
from browser_bench.report.domain.filename import DEFAULT_EVALUATION
from browser_bench.report.domain.record import RunRecord
from browser_bench.report.domain.summary import EvaluationSummary, MethodSummary


def rank_methods(method_runs: dict[Method, list[RunRecord]]) -> list[MethodSummary]:
    """Summarise each method's runs and rank them fastest first.

    Methods are laid out in canonical order before the stable sort, so methods
    with identical average durations keep canonical order. Methods with no
    runs are dropped.
    """
    summaries = [
        MethodSummary.from_runs(method=method, runs=runs)
        for method, runs in sorted(
            method_runs.items(), key=lambda item: canonical_index(item[0])
        )
        if runs
    ]
    return sorted(summaries, key=lambda s: s.avg_duration_ms)


def _evaluation_sort_key(summary: EvaluationSummary) -> tuple[bool, str, str]:
    return (summary.name != DEFAULT_EVALUATION, summary.name.casefold(), summary.name)


def build_evaluations(
    grouped: dict[str, dict[Method, list[RunRecord]]],
) -> list[EvaluationSummary]:
    """Build one EvaluationSummary per evaluation: default first, then by name."""
    evaluations = [
        EvaluationSummary(name=name, methods=rank_methods(method_runs=method_runs))
        for name, method_runs in grouped.items()
    ]
    return sorted(evaluations, key=_evaluation_sort_key)


def pool_evaluations(evaluations: list[EvaluationSummary]) -> list[MethodSummary]:
    """Re-aggregate every run of each method across all evaluations.

    Run lists are concatenated and averaged again; per-evaluation averages are
    never averaged together.
    """
    pooled: dict[Method, list[RunRecord]] = {}
    for evaluation in evaluations:
        for summary in evaluation.methods:
            pooled.setdefault(summary.method, []).extend(summary.runs)
    return rank_methods(method_runs=pooled)
