"""Result filename encoding — `<evaluation>-<method>-run<N>.jsonl`."""

import re
from dataclasses import dataclass

from browser_bench.method.domain.method import Method

DEFAULT_EVALUATION = "default"
RESULT_SUFFIX = ".jsonl"

_RUN_SUFFIX_PATTERN = re.compile(r"^(?P<prefix>.+)-run\d+\.jsonl$")


@dataclass(frozen=True)
class ResultFileName:
    """The evaluation and method a result file belongs to."""

    evaluation: str
    method: Method


def parse_result_filename(filename: str) -> ResultFileName | None:
    """Classify a result filename, or return None if it is not a result file.

    The method is recovered by suffix probing over Method in canonical order,
    which is only unambiguous while no method key is a suffix of another.
    An empty evaluation prefix maps to DEFAULT_EVALUATION.
    """
    match = _RUN_SUFFIX_PATTERN.match(filename)
    if match is None:
        return None

    prefix = match.group("prefix")
    for method in Method:
        if prefix == method.value:
            return ResultFileName(evaluation=DEFAULT_EVALUATION, method=method)
        if prefix.endswith(f"-{method.value}"):
            evaluation = prefix[: -(len(method.value) + 1)]
            return ResultFileName(
                evaluation=evaluation or DEFAULT_EVALUATION, method=method
            )

    return None


def result_filename(evaluation: str, method: Method, run_index: int) -> str:
    """Build the result filename for one run of method against evaluation."""
    return f"{evaluation}-{method.value}-run{run_index}{RESULT_SUFFIX}"
