from cssmap.styles.errors import InvalidStyleValueError, StyleError, UnknownStyleError
from cssmap.styles.registry import (
    Style,
    StyleHandler,
    StyleRegistry,
    css_style,
    default_registry,
)
from cssmap.styles.values import Color, Length

__all__ = [
    "InvalidStyleValueError",
    "StyleError",
    "UnknownStyleError",
    "Style",
    "StyleHandler",
    "StyleRegistry",
    "css_style",
    "default_registry",
    "Color",
    "Length",
]
