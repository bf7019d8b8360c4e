"""Tests for the style registry and the css_style lookup."""

import pytest

from cssmap.styles import (
    Color,
    InvalidStyleValueError,
    Length,
    Style,
    StyleError,
    StyleRegistry,
    UnknownStyleError,
    css_style,
    default_registry,
)


# ---------------------------------------------------------------------------
# css_style lookup
# ---------------------------------------------------------------------------


class TestCssStyle:
    def test_known_property(self):
        style = css_style("color", {"color": "red"})
        assert style == Style(name="color", raw="red", value=Color(255, 0, 0))

    def test_unknown_property(self):
        with pytest.raises(UnknownStyleError) as exc_info:
            css_style("colour", {"colour": "red"})
        assert exc_info.value.name == "colour"
        assert "unknown style" in str(exc_info.value)

    def test_invalid_value(self):
        with pytest.raises(InvalidStyleValueError) as exc_info:
            css_style("color", {"color": "not-a-color"})
        assert exc_info.value.raw == "not-a-color"
        assert isinstance(exc_info.value, StyleError)

    def test_missing_declaration_is_invalid(self):
        with pytest.raises(InvalidStyleValueError):
            css_style("width", {})

    def test_error_does_not_touch_styles(self):
        styles = {"color": "bogus", "width": "10px"}
        with pytest.raises(InvalidStyleValueError):
            css_style("color", styles)
        assert css_style("width", styles).value == Length(10.0, "px")
        assert styles == {"color": "bogus", "width": "10px"}

    def test_injected_registry(self):
        registry = StyleRegistry()
        registry.register("gap", lambda raw: raw.upper())
        assert css_style("gap", {"gap": "wide"}, registry).value == "WIDE"

    def test_injected_registry_replaces_defaults(self):
        with pytest.raises(UnknownStyleError):
            css_style("color", {"color": "red"}, StyleRegistry())


# ---------------------------------------------------------------------------
# Registry behaviour
# ---------------------------------------------------------------------------


class TestStyleRegistry:
    def test_register_and_get(self):
        registry = StyleRegistry()
        handler = lambda raw: raw  # noqa: E731
        registry.register("x", handler)
        assert registry.get("x") is handler
        assert "x" in registry
        assert len(registry) == 1

    def test_latest_wins(self):
        registry = StyleRegistry()
        registry.register("x", lambda raw: 1)
        registry.register("x", lambda raw: 2)
        assert registry.interpret("x", "").value == 2

    def test_unregister_missing_is_noop(self):
        registry = StyleRegistry()
        registry.unregister("nothing")
        assert registry.names() == []

    def test_names_in_registration_order(self):
        registry = StyleRegistry()
        for name in ("b", "a", "c"):
            registry.register(name, str)
        assert registry.names() == ["b", "a", "c"]

    def test_copy_is_independent(self):
        registry = StyleRegistry({"x": str})
        clone = registry.copy()
        clone.register("y", str)
        assert "y" not in registry
        assert "x" in clone

    def test_handler_value_error_wrapped(self):
        def reject(raw):
            raise ValueError("nope")

        registry = StyleRegistry({"x": reject})
        with pytest.raises(InvalidStyleValueError) as exc_info:
            registry.interpret("x", "1")
        assert exc_info.value.reason == "nope"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestDefaultRegistry:
    def test_fresh_instance_each_call(self):
        first = default_registry()
        first.register("gap", str)
        assert "gap" not in default_registry()

    @pytest.mark.parametrize(
        "name, raw, expected",
        [
            ("background-color", "#00ff00", Color(0, 255, 0)),
            ("width", "auto", "auto"),
            ("height", "50%", Length(50.0, "%")),
            ("font-size", "1.5em", Length(1.5, "em")),
            ("margin-left", "-4px", Length(-4.0, "px")),
            ("display", "Flex", "flex"),
            ("font-weight", "bold", "bold"),
            ("font-weight", "700", 700),
            ("line-height", "1.4", 1.4),
            ("line-height", "20px", Length(20.0, "px")),
            ("opacity", "0.5", 0.5),
            ("z-index", "-1", -1),
        ],
    )
    def test_accepts(self, name, raw, expected):
        assert css_style(name, {name: raw}).value == expected

    @pytest.mark.parametrize(
        "name, raw",
        [
            ("width", "-10px"),
            ("width", "10"),
            ("padding-top", "-1px"),
            ("display", "sideways"),
            ("font-weight", "750"),
            ("opacity", "1.5"),
            ("z-index", "1.5"),
            ("color", "rgb(300, 0, 0)"),
        ],
    )
    def test_rejects(self, name, raw):
        with pytest.raises(InvalidStyleValueError):
            css_style(name, {name: raw})

    def test_margin_shorthand(self):
        value = css_style("margin", {"margin": "0 auto"}).value
        assert value == (Length(0.0, ""), "auto", Length(0.0, ""), "auto")
