"""ClaudeSettingsWriter — writes per-project Claude Code settings for one method."""

import json
from pathlib import Path
from typing import Any

from browser_bench.config.domain.mcp_server import to_mcp_json
from browser_bench.config.domain.method import MethodConfig

SETTINGS_RELATIVE_PATH = Path(".claude") / "settings.local.json"
MCP_CONFIG_FILENAME = ".mcp.json"


def build_settings(method_config: MethodConfig) -> dict[str, Any]:
    """Build the settings.local.json payload: plugin toggles and allowed MCP servers."""
    settings: dict[str, Any] = {"enabledPlugins": dict(method_config.plugins)}
    if method_config.mcp_servers:
        settings["allowedMcpServers"] = [
            {"serverName": server.name} for server in method_config.mcp_servers
        ]
    return settings


def build_mcp_config(method_config: MethodConfig) -> dict[str, Any]:
    """Build the .mcp.json payload for the method's MCP servers."""
    return {
        "mcpServers": {
            server.name: to_mcp_json(server.config)
            for server in method_config.mcp_servers
        }
    }


class ClaudeSettingsWriter:
    """Writes `.claude/settings.local.json` and `.mcp.json` into a project directory.

    Both files are overwritten on every call so that no setting from a
    previously benchmarked method survives.
    """

    def configure(self, method_config: MethodConfig, directory: Path) -> Path | None:
        """Write both files and return the `.mcp.json` path if the method uses MCP."""
        settings_path = directory / SETTINGS_RELATIVE_PATH
        mcp_path = directory / MCP_CONFIG_FILENAME

        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(
            json.dumps(build_settings(method_config), indent=2), encoding="utf-8"
        )
        mcp_path.write_text(
            json.dumps(build_mcp_config(method_config), indent=2), encoding="utf-8"
        )

        return mcp_path if method_config.mcp_servers else None
