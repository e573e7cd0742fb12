"""MethodMcpServer — a resolved MCP server reference within a method config."""

from pydantic.dataclasses import dataclass

from browser_bench.config.domain.mcp_server import McpServer


@dataclass(frozen=True)
class MethodMcpServer:
    """A resolved MCP server reference: the server name paired with its full config."""

    name: str
    config: McpServer
