"""BenchmarkRunner — runs every (evaluation, method, run) combination in sequence."""

import time
from pathlib import Path

from browser_bench.bench.domain.observer import BenchmarkObserver
from browser_bench.bench.domain.ports import (
    EnvironmentResetter,
    MethodConfigurator,
    SessionLauncher,
)
from browser_bench.bench.domain.summary import BenchmarkSummary
from browser_bench.bench.infrastructure.errors import (
    EvaluationDirectoryNotFoundError,
    UnknownEvaluationError,
    UnknownMethodError,
)
from browser_bench.config.domain.config import BenchConfig
from browser_bench.config.domain.evaluation import EvaluationConfig
from browser_bench.core.errors import BenchError
from browser_bench.method.domain.method import Method
from browser_bench.report.domain.filename import result_filename


class BenchmarkRunner:
    """Runs the benchmark loop: configure a method, then reset and launch N times.

    Runs are strictly sequential because every run of an evaluation shares the
    same working directory, ports and database. The first failure aborts the
    whole benchmark; nothing is retried.
    """

    def __init__(
        self,
        config: BenchConfig,
        configurator: MethodConfigurator,
        resetter: EnvironmentResetter,
        launcher: SessionLauncher,
        observer: BenchmarkObserver,
    ) -> None:
        self._config = config
        self._configurator = configurator
        self._resetter = resetter
        self._launcher = launcher
        self._observer = observer

    def run(
        self,
        evaluations: list[str] | None = None,
        methods: list[Method] | None = None,
    ) -> BenchmarkSummary:
        """Run the selected evaluations and methods (all configured ones by default).

        Raises:
            UnknownEvaluationError: if a selected evaluation is not configured.
            UnknownMethodError: if a selected method is not configured.
            EvaluationDirectoryNotFoundError: if a selected evaluation's directory
                is missing; checked before any run starts.
            BenchError: propagated from the configurator, resetter, or launcher.
        """
        selected = self._select_evaluations(names=evaluations)
        selected_methods = self._select_methods(methods=methods)
        self._check_directories(selected=selected)

        results_dir = self._config.results_dir
        results_dir.mkdir(parents=True, exist_ok=True)

        self._observer.benchmark_started(
            evaluations=list(selected),
            methods=[m.value for m in selected_methods],
            runs=self._config.runs,
        )
        started_at = time.monotonic()

        result_paths: list[Path] = []
        for name, evaluation in selected.items():
            self._observer.evaluation_started(evaluation=name)
            for method in selected_methods:
                result_paths += self._run_method(
                    name=name, evaluation=evaluation, method=method
                )

        self._observer.benchmark_completed(
            total_runs=len(result_paths),
            elapsed_seconds=time.monotonic() - started_at,
        )
        return BenchmarkSummary(
            config_name=self._config.name,
            results_dir=results_dir,
            result_paths=result_paths,
        )

    def _run_method(
        self, name: str, evaluation: EvaluationConfig, method: Method
    ) -> list[Path]:
        """Configure method once, then execute every run of it for one evaluation."""
        method_config = self._config.methods[method]
        directory = self._working_directory(evaluation=evaluation)

        mcp_config_path = self._configurator.configure(
            method_config=method_config, directory=directory
        )
        self._observer.method_configured(
            evaluation=name,
            method=method.value,
            mcp_config_path=str(mcp_config_path) if mcp_config_path else None,
        )

        prompt = evaluation.render_prompt(instruction=method_config.instruction)
        paths: list[Path] = []
        for run_index in range(1, self._config.runs + 1):
            self._observer.run_started(
                evaluation=name,
                method=method.value,
                run_index=run_index,
                total_runs=self._config.runs,
            )
            output_path = self._config.results_dir / result_filename(
                evaluation=name, method=method, run_index=run_index
            )
            try:
                if evaluation.reset is not None:
                    self._resetter.reset(config=evaluation.reset, directory=directory)
                self._launcher.launch(
                    prompt=prompt,
                    directory=directory,
                    mcp_config_path=mcp_config_path,
                    output_path=output_path,
                )
            except BenchError as exc:
                self._observer.run_failed(
                    evaluation=name,
                    method=method.value,
                    run_index=run_index,
                    reason=str(exc),
                )
                raise

            self._observer.run_completed(
                evaluation=name,
                method=method.value,
                run_index=run_index,
                output_path=str(output_path),
            )
            paths.append(output_path)
        return paths

    def _select_evaluations(
        self, names: list[str] | None
    ) -> dict[str, EvaluationConfig]:
        configured = self._config.evaluations
        if not names:
            return dict(configured)
        for name in names:
            if name not in configured:
                raise UnknownEvaluationError(name=name, available=list(configured))
        return {name: configured[name] for name in names}

    def _select_methods(self, methods: list[Method] | None) -> list[Method]:
        """Return the requested methods in canonical order, limited to configured ones."""
        configured = [m for m in Method if m in self._config.methods]
        if not methods:
            return configured
        for method in methods:
            if method not in self._config.methods:
                raise UnknownMethodError(
                    method=method.value, available=[m.value for m in configured]
                )
        return [m for m in configured if m in methods]

    def _check_directories(self, selected: dict[str, EvaluationConfig]) -> None:
        for name, evaluation in selected.items():
            if evaluation.directory is not None and not evaluation.directory.is_dir():
                raise EvaluationDirectoryNotFoundError(
                    name=name, path=evaluation.directory
                )

    def _working_directory(self, evaluation: EvaluationConfig) -> Path:
        if evaluation.directory is not None:
            return evaluation.directory
        return Path.cwd()
