"""Style registry: per-property handlers, registration, and lookup."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Mapping

from cssmap.styles.errors import InvalidStyleValueError, UnknownStyleError
from cssmap.styles.values import (
    parse_box,
    parse_color,
    parse_integer,
    parse_keyword,
    parse_length,
    parse_number,
)

__all__ = ["Style", "StyleHandler", "StyleRegistry", "default_registry", "css_style"]

# A handler receives the raw value text and returns a structured value,
# raising ValueError when the text is not acceptable.
StyleHandler = Callable[[str], Any]


@dataclass(frozen=True)
class Style:
    """A declaration value that passed its property's handler."""

    name: str
    raw: str
    value: Any


class StyleRegistry:
    """Registry of style handlers keyed by property name.

    Latest-wins on name collision. Insertion-order stable.
    """

    def __init__(self, handlers: Mapping[str, StyleHandler] | None = None) -> None:
        self._handlers: dict[str, StyleHandler] = dict(handlers or {})

    def register(self, name: str, handler: StyleHandler) -> None:
        """Register a handler. Overwrites any existing handler for *name*."""
        self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        """Remove a handler by name. No-op if not found."""
        self._handlers.pop(name, None)

    def get(self, name: str) -> StyleHandler | None:
        return self._handlers.get(name)

    def names(self) -> list[str]:
        """Return all registered property names in registration order."""
        return list(self._handlers.keys())

    def copy(self) -> StyleRegistry:
        return StyleRegistry(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def interpret(self, name: str, raw: str) -> Style:
        """Run the handler for *name* over *raw*.

        Raises UnknownStyleError if nothing is registered for *name* and
        InvalidStyleValueError if the handler rejects *raw*.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownStyleError(name)
        try:
            value = handler(raw)
        except ValueError as exc:
            raise InvalidStyleValueError(name, raw, str(exc)) from exc
        return Style(name=name, raw=raw, value=value)


def css_style(
    name: str, styles: Mapping[str, str], registry: StyleRegistry | None = None
) -> Style:
    """Look up *name* in a rule's declarations and interpret its value.

    A missing declaration is passed to the handler as an empty string,
    which the default handlers reject.
    """
    registry = registry if registry is not None else default_registry()
    return registry.interpret(name, styles.get(name, ""))


# ---------------------------------------------------------------------------
# Default handlers
# ---------------------------------------------------------------------------

_COLOR_PROPERTIES = (
    "color",
    "background-color",
    "border-color",
    "border-top-color",
    "border-right-color",
    "border-bottom-color",
    "border-left-color",
    "outline-color",
)

_SIZE_PROPERTIES = (
    "width",
    "height",
    "min-width",
    "min-height",
    "max-width",
    "max-height",
)

_OFFSET_PROPERTIES = ("top", "right", "bottom", "left")

_SIDES = ("top", "right", "bottom", "left")

_KEYWORDS: dict[str, frozenset[str]] = {
    "display": frozenset({
        "none", "block", "inline", "inline-block", "flex", "inline-flex",
        "grid", "inline-grid", "table", "table-row", "table-cell",
        "list-item", "contents",
    }),
    "position": frozenset({"static", "relative", "absolute", "fixed", "sticky"}),
    "visibility": frozenset({"visible", "hidden", "collapse"}),
    "text-align": frozenset({"left", "right", "center", "justify", "start", "end"}),
    "overflow": frozenset({"visible", "hidden", "scroll", "auto", "clip"}),
    "float": frozenset({"left", "right", "none"}),
    "clear": frozenset({"left", "right", "both", "none"}),
    "font-style": frozenset({"normal", "italic", "oblique"}),
    "text-decoration": frozenset({"none", "underline", "overline", "line-through"}),
    "white-space": frozenset({"normal", "nowrap", "pre", "pre-wrap", "pre-line"}),
    "cursor": frozenset({"auto", "default", "pointer", "text", "move", "wait", "not-allowed"}),
}

_FONT_WEIGHT_KEYWORDS = frozenset({"normal", "bold", "bolder", "lighter"})


def _font_weight(raw: str) -> str | int:
    text = raw.strip().lower()
    if text in _FONT_WEIGHT_KEYWORDS:
        return text
    weight = parse_integer(text)
    if weight % 100 != 0 or not 100 <= weight <= 900:
        raise ValueError("numeric font-weight must be 100, 200, ... 900")
    return weight


def _line_height(raw: str) -> object:
    text = raw.strip().lower()
    if text == "normal":
        return text
    try:
        return parse_number(text, minimum=0)
    except ValueError:
        return parse_length(text, allow_negative=False)


def default_registry() -> StyleRegistry:
    """Build a fresh registry with handlers for common properties.

    Each call returns a new instance, so callers may register or remove
    handlers without affecting anyone else.
    """
    registry = StyleRegistry()

    for name in _COLOR_PROPERTIES:
        registry.register(name, parse_color)

    for name in _SIZE_PROPERTIES:
        registry.register(
            name, partial(parse_length, allow_auto=True, allow_negative=False)
        )
    for name in _OFFSET_PROPERTIES:
        registry.register(name, partial(parse_length, allow_auto=True))

    registry.register("margin", partial(parse_box, allow_auto=True))
    registry.register("padding", partial(parse_box, allow_negative=False))
    for side in _SIDES:
        registry.register(f"margin-{side}", partial(parse_length, allow_auto=True))
        registry.register(
            f"padding-{side}", partial(parse_length, allow_negative=False)
        )

    registry.register("font-size", partial(parse_length, allow_negative=False))
    registry.register("font-weight", _font_weight)
    registry.register("line-height", _line_height)

    for name, allowed in _KEYWORDS.items():
        registry.register(name, partial(parse_keyword, allowed=allowed))

    registry.register("opacity", partial(parse_number, minimum=0, maximum=1))
    registry.register("z-index", parse_integer)

    return registry
