"""Method registry — the browser-automation strategies under comparison."""

from enum import StrEnum


class Method(StrEnum):
    """One browser-automation strategy.

    Declaration order is the canonical order: it is used both when decoding
    result filenames by suffix and as the display order before ranking.

    Result filenames are decoded by testing whether a prefix ends with
    ``-<method>``, so no member value may be a suffix of another member's
    value. Adding a member that breaks this is a registry defect.
    """

    DEV_BROWSER = "dev-browser"
    PLAYWRIGHT_SKILL = "playwright-skill"
    PLAYWRIGHT_MCP = "playwright-mcp"
    VANILLA = "vanilla"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Method, str] = {
    Method.DEV_BROWSER: "Dev Browser",
    Method.PLAYWRIGHT_SKILL: "Playwright Skill",
    Method.PLAYWRIGHT_MCP: "Playwright MCP",
    Method.VANILLA: "Vanilla",
}


def display_name_for(key: str) -> str:
    """Return the display name for a method key, or the key itself if unknown."""
    try:
        return Method(key).display_name
    except ValueError:
        return key


def canonical_index(method: Method) -> int:
    """Return the position of method in the canonical order."""
    return list(Method).index(method)
