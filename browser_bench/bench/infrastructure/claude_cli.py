"""ClaudeCliSessionLauncher — runs one `claude -p` session and records its stream."""

import subprocess
import sys
from pathlib import Path
from typing import TextIO

from browser_bench.bench.infrastructure.errors import SessionLaunchError

# Appended to the result filename while a session is still streaming. The
# collector only reads `.jsonl` files, so unfinished logs never reach a report.
PARTIAL_SUFFIX = ".partial"


def build_claude_args(
    claude_path: str, prompt: str, mcp_config_path: Path | None
) -> list[str]:
    """Build the command line for a non-interactive stream-json session."""
    args = [
        claude_path,
        "-p",
        prompt,
        "--dangerously-skip-permissions",
        "--output-format",
        "stream-json",
        "--verbose",
    ]
    if mcp_config_path is not None:
        args += ["--mcp-config", str(mcp_config_path)]
    return args


class ClaudeCliSessionLauncher:
    """Spawns the Claude Code CLI and tees its stdout to the console and a JSONL file.

    One session runs at a time; launch() blocks until the process exits. The
    child's stderr is inherited so errors show up on the terminal unchanged.
    """

    def __init__(self, claude_path: str, echo: TextIO | None = None) -> None:
        self._claude_path = claude_path
        self._echo = echo if echo is not None else sys.stdout

    def launch(
        self,
        prompt: str,
        directory: Path,
        mcp_config_path: Path | None,
        output_path: Path,
    ) -> None:
        """
        Run one session in directory, streaming its events into output_path.

        Events are written to a `.partial` sibling that is renamed to
        output_path only when the CLI exits with status 0. A failed session
        leaves the partial log for inspection and no result file.

        Raises:
            SessionLaunchError: if the CLI cannot be started or exits non-zero.
        """
        args = build_claude_args(
            claude_path=self._claude_path,
            prompt=prompt,
            mcp_config_path=mcp_config_path,
        )
        try:
            process = subprocess.Popen(
                args,
                cwd=directory,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise SessionLaunchError(
                reason=f"cannot start {self._claude_path}: {exc}"
            ) from exc

        partial_path = output_path.with_name(output_path.name + PARTIAL_SUFFIX)
        with process, partial_path.open("w", encoding="utf-8") as sink:
            assert process.stdout is not None  # guaranteed by stdout=PIPE
            for line in process.stdout:
                self._echo.write(line)
                self._echo.flush()
                sink.write(line)

        if process.returncode != 0:
            raise SessionLaunchError(
                reason=f"{self._claude_path} exited with status {process.returncode}"
                f" (partial log kept at {partial_path})"
            )
        partial_path.replace(output_path)
