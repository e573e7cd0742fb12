"""Method configuration model — how Claude Code is set up for one method."""

from pydantic import BaseModel, Field

from browser_bench.config.domain.method_mcp_server import MethodMcpServer


class MethodConfig(BaseModel, frozen=True):
    """Prompt instruction, plugin toggles and MCP servers for one method."""

    instruction: str = Field(min_length=1)
    plugins: dict[str, bool] = Field(default_factory=dict)
    mcp_servers: list[MethodMcpServer] = Field(default_factory=list)
