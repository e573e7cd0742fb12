"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from browser_bench.config.domain.config import BenchConfig
from browser_bench.config.domain.evaluation import INSTRUCTION_PLACEHOLDER
from browser_bench.config.domain.observer import ConfigObserver
from browser_bench.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from browser_bench.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a BenchConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> BenchConfig:
        """
        Load, interpolate, validate, and return a BenchConfig from a YAML file.

        Relative `results_dir` and evaluation `directory` paths are resolved
        against the directory containing the config file.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if a method references an unknown MCP server
                name or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        interpolated = _interpolate(raw=raw)
        resolved = _resolve_method_server_refs(interpolated=interpolated)
        located = _resolve_paths(resolved=resolved, base_dir=path.parent)
        cfg = _build_config(resolved=located)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, runs=cfg.runs)
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc

    if not isinstance(data, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    return data


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _interpolate(raw: Any) -> Any:
    """Return a fully interpolated copy of raw with all ${ENV_VAR} substituted."""
    return interpolate(raw)


def _resolve_method_server_refs(interpolated: dict[str, Any]) -> dict[str, Any]:
    """
    Validate method MCP server references and replace each name with a resolved dict.

    Replaces each method's ``mcp_servers: [str, ...]`` with
    ``mcp_servers: [{"name": str, "config": dict}, ...]`` so that Pydantic can
    validate the full ``BenchConfig`` in one pass.

    Raises:
        ConfigValidationError: listing ALL invalid references across ALL methods.
    """
    mcp_servers_raw: dict[str, Any] = interpolated.get("mcp_servers", {}) or {}
    methods_raw: dict[str, Any] = interpolated.get("methods", {}) or {}
    defined_names = set(mcp_servers_raw.keys())

    unknown: list[str] = []
    for method_key, method_data in methods_raw.items():
        server_names: list[str] = (method_data or {}).get("mcp_servers", []) or []
        for server_name in server_names:
            if server_name not in defined_names:
                unknown.append(
                    f"method '{method_key}' references unknown MCP server"
                    f" '{server_name}'"
                )

    if unknown:
        raise ConfigValidationError("; ".join(unknown))

    resolved_methods: dict[str, Any] = {}
    for method_key, method_data in methods_raw.items():
        method_data = method_data or {}
        server_names = method_data.get("mcp_servers", []) or []
        resolved_methods[method_key] = {
            **method_data,
            "mcp_servers": [
                {"name": name, "config": mcp_servers_raw[name]} for name in server_names
            ],
        }

    return {**interpolated, "methods": resolved_methods}


def _resolve_paths(resolved: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Anchor relative filesystem paths at base_dir."""

    def anchor(value: Any) -> Any:
        if isinstance(value, str) and not Path(value).is_absolute():
            return str(base_dir / value)
        return value

    located = dict(resolved)
    if "results_dir" in located:
        located["results_dir"] = anchor(located["results_dir"])

    evaluations_raw: dict[str, Any] = located.get("evaluations", {}) or {}
    located["evaluations"] = {
        name: (
            {**data, "directory": anchor(data["directory"])}
            if isinstance(data, dict) and data.get("directory")
            else data
        )
        for name, data in evaluations_raw.items()
    }
    return located


def _build_config(resolved: dict[str, Any]) -> BenchConfig:
    try:
        return BenchConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: BenchConfig, observer: ConfigObserver) -> None:
    for name, evaluation in cfg.evaluations.items():
        if INSTRUCTION_PLACEHOLDER not in evaluation.prompt:
            observer.config_prompt_placeholder_warning(evaluation=name)
