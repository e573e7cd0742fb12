"""Top-level BenchConfig aggregate — the root configuration object."""

from pathlib import Path
from typing import Annotated, TypeAlias

from pydantic import BaseModel, Field

from browser_bench.config.domain.evaluation import EvaluationConfig
from browser_bench.config.domain.mcp_server import McpServer
from browser_bench.config.domain.method import MethodConfig
from browser_bench.method.domain.method import Method

EvaluationName = Annotated[str, Field(min_length=1)]
ServerName: TypeAlias = str


class BenchConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a benchmark run."""

    name: str = Field(min_length=1)
    claude_path: str = Field(default="claude", min_length=1)
    runs: int = Field(default=3, ge=1)
    results_dir: Path = Path("benchmark-results")
    mcp_servers: dict[ServerName, McpServer] = Field(default_factory=dict)
    methods: dict[Method, MethodConfig] = Field(min_length=1)
    evaluations: dict[EvaluationName, EvaluationConfig] = Field(min_length=1)
