"""Tests for the Method registry."""

from browser_bench.method.domain.method import Method, canonical_index, display_name_for


class TestDisplayNames:
    """Every method has a display name; unknown keys fall back to themselves."""

    def test_dev_browser_display_name(self) -> None:
        assert Method.DEV_BROWSER.display_name == "Dev Browser"

    def test_playwright_mcp_display_name(self) -> None:
        assert Method.PLAYWRIGHT_MCP.display_name == "Playwright MCP"

    def test_every_member_is_mapped(self) -> None:
        for method in Method:
            assert method.display_name

    def test_display_name_for_known_key(self) -> None:
        assert display_name_for("playwright-skill") == "Playwright Skill"

    def test_display_name_for_unknown_key_falls_back_to_key(self) -> None:
        assert display_name_for("selenium") == "selenium"


class TestRegistryOrdering:
    """The canonical order is the declaration order."""

    def test_canonical_order(self) -> None:
        assert [m.value for m in Method] == [
            "dev-browser",
            "playwright-skill",
            "playwright-mcp",
            "vanilla",
        ]

    def test_canonical_index(self) -> None:
        assert canonical_index(Method.DEV_BROWSER) == 0
        assert canonical_index(Method.VANILLA) == 3


class TestSuffixUniqueness:
    """No method key is a suffix of another, so filename decoding is unambiguous."""

    def test_no_key_is_a_dash_suffix_of_another(self) -> None:
        for a in Method:
            for b in Method:
                if a is not b:
                    assert not a.value.endswith(f"-{b.value}")
                    assert a.value != b.value
