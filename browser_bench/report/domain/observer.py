"""Observer port for the report domain — defines events in domain language."""

from typing import Protocol


class ReportObserver(Protocol):
    def report_collection_started(self, results_dir: str) -> None: ...

    def report_file_skipped(self, filename: str) -> None: ...

    def report_run_loaded(self, filename: str, evaluation: str, method: str) -> None: ...

    def report_run_failed(self, filename: str, reason: str) -> None: ...

    def report_collection_completed(
        self, total_runs: int, evaluation_names: list[str]
    ) -> None: ...

    def report_written(self, path: str, total_evaluations: int) -> None: ...
