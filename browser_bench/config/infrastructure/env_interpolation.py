"""Recursive ${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Walk the data tree and return the names of all referenced env vars that
    are unset and have no inline default. Every missing var is collected.
    """
    missing: list[str] = []
    _collect(data, missing)
    return missing


def _collect(data: RawValue, missing: list[str]) -> None:
    if isinstance(data, str):
        for match in _ENV_VAR_PATTERN.finditer(data):
            name = match.group("name")
            if match.group("default") is not None:
                continue
            if name not in os.environ and name not in missing:
                missing.append(name)
    elif isinstance(data, list):
        for item in data:
            _collect(item, missing)
    elif isinstance(data, dict):
        for value in data.values():
            _collect(value, missing)


def _substitute(match: re.Match[str]) -> str:
    default = match.group("default")
    if default is None:
        return os.environ[match.group("name")]
    return os.environ.get(match.group("name"), default)


def interpolate(data: RawValue) -> RawValue:
    """
    Recursively substitute all ${ENV_VAR} occurrences with their runtime values.

    Assumes every variable without a default is set; call `collect_missing_vars`
    first and raise `MissingEnvVarsError` if any are absent.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
