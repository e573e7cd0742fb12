"""MethodSummary and EvaluationSummary — aggregated views over RunRecords."""

import re
import statistics

from pydantic import BaseModel, Field

from browser_bench.method.domain.method import Method, display_name_for
from browser_bench.report.domain.filename import DEFAULT_EVALUATION
from browser_bench.report.domain.formatting import round_half_up
from browser_bench.report.domain.record import RunRecord

_WHITESPACE = re.compile(r"\s+")


class MethodSummary(BaseModel, frozen=True):
    """All runs of one method within one evaluation, with their averages."""

    method: Method
    display_name: str
    runs: list[RunRecord] = Field(min_length=1)
    avg_duration_ms: float
    avg_cost_usd: float
    avg_turns: int

    @classmethod
    def from_runs(cls, method: Method, runs: list[RunRecord]) -> "MethodSummary":
        """Average runs into a summary. runs must be non-empty."""
        return cls(
            method=method,
            display_name=display_name_for(method),
            runs=list(runs),
            avg_duration_ms=statistics.fmean(r.duration_ms for r in runs),
            avg_cost_usd=statistics.fmean(r.cost_usd for r in runs),
            avg_turns=round_half_up(statistics.fmean(r.turns for r in runs)),
        )


class EvaluationSummary(BaseModel, frozen=True):
    """One evaluation and its methods, ranked fastest first."""

    name: str = Field(min_length=1)
    methods: list[MethodSummary] = Field(min_length=1)

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_EVALUATION

    @property
    def display_name(self) -> str:
        return "Default" if self.is_default else self.name.upper()

    @property
    def anchor(self) -> str:
        return _WHITESPACE.sub("-", self.name.lower())

    @property
    def runs_per_method(self) -> int:
        return len(self.methods[0].runs)
