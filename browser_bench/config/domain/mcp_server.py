"""MCP server configuration models — discriminated union on `type` field."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class StdioMcpServer(BaseModel, frozen=True):
    """MCP server launched as a subprocess via stdio."""

    type: Literal["stdio"]
    command: str = Field(min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)


class SseMcpServer(BaseModel, frozen=True):
    """MCP server reachable over Server-Sent Events."""

    type: Literal["sse"]
    url: str = Field(min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)


class HttpMcpServer(BaseModel, frozen=True):
    """MCP server reachable over HTTP."""

    type: Literal["http"]
    url: str = Field(min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)


McpServer = Annotated[
    StdioMcpServer | SseMcpServer | HttpMcpServer,
    Field(discriminator="type"),
]


def to_mcp_json(server: StdioMcpServer | SseMcpServer | HttpMcpServer) -> dict[str, Any]:
    """Render one server entry in the shape Claude Code reads from `.mcp.json`.

    Empty optional collections are omitted.
    """
    return server.model_dump(exclude_defaults=True)
