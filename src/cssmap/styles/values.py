"""Value parsers used by the default style handlers.

Each parser takes the raw declaration value and returns a structured
value, or raises ``ValueError`` describing why the text was rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "Color",
    "Length",
    "NAMED_COLORS",
    "LENGTH_UNITS",
    "parse_color",
    "parse_length",
    "parse_box",
    "parse_number",
    "parse_integer",
    "parse_keyword",
]


@dataclass(frozen=True)
class Color:
    """An sRGB color with 0-255 channels and a 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def hex(self) -> str:
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a < 1.0:
            base += f"{round(self.a * 255):02x}"
        return base


@dataclass(frozen=True)
class Length:
    """A CSS dimension. Unitless zero has ``unit == ""``."""

    value: float
    unit: str

    def __str__(self) -> str:
        number = f"{self.value:g}"
        return number + self.unit


NAMED_COLORS: dict[str, Color] = {
    "black": Color(0, 0, 0),
    "white": Color(255, 255, 255),
    "red": Color(255, 0, 0),
    "green": Color(0, 128, 0),
    "lime": Color(0, 255, 0),
    "blue": Color(0, 0, 255),
    "yellow": Color(255, 255, 0),
    "cyan": Color(0, 255, 255),
    "aqua": Color(0, 255, 255),
    "magenta": Color(255, 0, 255),
    "fuchsia": Color(255, 0, 255),
    "gray": Color(128, 128, 128),
    "grey": Color(128, 128, 128),
    "silver": Color(192, 192, 192),
    "maroon": Color(128, 0, 0),
    "olive": Color(128, 128, 0),
    "navy": Color(0, 0, 128),
    "purple": Color(128, 0, 128),
    "teal": Color(0, 128, 128),
    "orange": Color(255, 165, 0),
    "transparent": Color(0, 0, 0, 0.0),
}

LENGTH_UNITS = frozenset({
    "px", "em", "rem", "ex", "ch",
    "vh", "vw", "vmin", "vmax",
    "cm", "mm", "in", "pt", "pc",
    "%",
})

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)
_LENGTH_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z%]*)$")
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")


def _channel(raw: str) -> int:
    raw = raw.strip()
    if raw.endswith("%"):
        value = float(raw[:-1]) * 255 / 100
    else:
        value = float(raw)
    if not 0 <= value <= 255:
        raise ValueError(f"color channel out of range: {raw}")
    return round(value)


def _alpha(raw: str) -> float:
    raw = raw.strip()
    value = float(raw[:-1]) / 100 if raw.endswith("%") else float(raw)
    if not 0 <= value <= 1:
        raise ValueError(f"alpha out of range: {raw}")
    return value


def parse_color(raw: str) -> Color:
    """Parse a named color, ``#rgb[a]``, ``#rrggbb[aa]`` or ``rgb()``/``rgba()``."""
    text = raw.strip()
    named = NAMED_COLORS.get(text.lower())
    if named is not None:
        return named

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return Color(r, g, b, a)

    match = _RGB_RE.match(text)
    if match:
        parts = [p for p in re.split(r"[\s,/]+", match.group(1).strip()) if p]
        if len(parts) not in (3, 4):
            raise ValueError(f"expected 3 or 4 color components, got {len(parts)}")
        r, g, b = (_channel(p) for p in parts[:3])
        a = _alpha(parts[3]) if len(parts) == 4 else 1.0
        return Color(r, g, b, a)

    raise ValueError(f"not a color: {raw}")


def parse_length(
    raw: str, *, allow_auto: bool = False, allow_negative: bool = True
) -> Length | str:
    """Parse a single dimension such as ``12px``, ``1.5em``, ``50%`` or ``0``.

    Returns the string ``"auto"`` when *allow_auto* is set and the value is
    ``auto``.
    """
    text = raw.strip().lower()
    if allow_auto and text == "auto":
        return "auto"

    match = _LENGTH_RE.match(text)
    if not match:
        raise ValueError(f"not a length: {raw}")
    value = float(match.group(1))
    unit = match.group(2)
    if unit and unit not in LENGTH_UNITS:
        raise ValueError(f"unknown unit {unit!r}")
    if not unit and value != 0:
        raise ValueError("non-zero length requires a unit")
    if value < 0 and not allow_negative:
        raise ValueError("negative length not allowed")
    return Length(value, unit)


def parse_box(
    raw: str, *, allow_auto: bool = False, allow_negative: bool = True
) -> tuple[Length | str, Length | str, Length | str, Length | str]:
    """Parse a 1-4 value box shorthand into (top, right, bottom, left)."""
    parts = raw.split()
    if not 1 <= len(parts) <= 4:
        raise ValueError(f"expected 1 to 4 values, got {len(parts)}")
    values = [
        parse_length(p, allow_auto=allow_auto, allow_negative=allow_negative)
        for p in parts
    ]
    if len(values) == 1:
        values *= 4
    elif len(values) == 2:
        values = [values[0], values[1], values[0], values[1]]
    elif len(values) == 3:
        values = [values[0], values[1], values[2], values[1]]
    return values[0], values[1], values[2], values[3]


def parse_number(
    raw: str, *, minimum: float | None = None, maximum: float | None = None
) -> float:
    text = raw.strip()
    if not _NUMBER_RE.match(text):
        raise ValueError(f"not a number: {raw}")
    value = float(text)
    if minimum is not None and value < minimum:
        raise ValueError(f"{value:g} is below {minimum:g}")
    if maximum is not None and value > maximum:
        raise ValueError(f"{value:g} is above {maximum:g}")
    return value


def parse_integer(raw: str) -> int:
    text = raw.strip()
    if not re.match(r"^[+-]?\d+$", text):
        raise ValueError(f"not an integer: {raw}")
    return int(text)


def parse_keyword(raw: str, allowed: frozenset[str]) -> str:
    """Return the lower-cased keyword if it is one of *allowed*."""
    text = raw.strip().lower()
    if text not in allowed:
        raise ValueError(f"expected one of {', '.join(sorted(allowed))}")
    return text
