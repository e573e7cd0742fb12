"""ProcessEnvironmentResetter — kills dev servers, removes state, reruns setup."""

import os
import shutil
import signal
import subprocess
from pathlib import Path

from browser_bench.bench.domain.observer import BenchmarkObserver
from browser_bench.bench.infrastructure.errors import EnvironmentResetError
from browser_bench.config.domain.evaluation import ResetConfig


class ProcessEnvironmentResetter:
    """Applies a ResetConfig in order: kill ports, remove paths, run commands."""

    def __init__(self, observer: BenchmarkObserver) -> None:
        self._observer = observer

    def reset(self, config: ResetConfig, directory: Path) -> None:
        """
        Reset the environment for one run.

        Raises:
            EnvironmentResetError: if `lsof` is unavailable, a process cannot be
                signalled, or a reset command fails.
        """
        for port in config.kill_ports:
            pids = self._kill_port(port=port)
            self._observer.environment_port_cleared(port=port, pids=pids)

        for relative in config.remove_paths:
            path = directory / relative
            self._remove(path=path)
            self._observer.environment_path_removed(path=str(path))

        for command in config.commands:
            self._run(command=command, directory=directory)
            self._observer.environment_command_completed(command=command)

    def _kill_port(self, port: int) -> list[int]:
        """SIGKILL every process listening on port; returns the pids signalled."""
        try:
            result = subprocess.run(
                ["lsof", "-ti", f":{port}"],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise EnvironmentResetError(reason="lsof is not installed") from exc

        # lsof exits 1 with no output when nothing holds the port.
        pids = [int(token) for token in result.stdout.split()]
        for pid in pids:
            try:
                os.kill(pid, signal.SIGKILL)
            except ProcessLookupError:
                continue
            except PermissionError as exc:
                raise EnvironmentResetError(
                    reason=f"not permitted to kill process {pid} on port {port}"
                ) from exc
        return pids

    def _remove(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)

    def _run(self, command: list[str], directory: Path) -> None:
        try:
            subprocess.run(command, cwd=directory, check=True, capture_output=True)
        except FileNotFoundError as exc:
            raise EnvironmentResetError(
                reason=f"command not found: {command[0]}"
            ) from exc
        except subprocess.CalledProcessError as exc:
            stderr = exc.stderr.decode("utf-8", errors="replace").strip()
            raise EnvironmentResetError(
                reason=f"`{' '.join(command)}` exited with {exc.returncode}: {stderr}"
            ) from exc
