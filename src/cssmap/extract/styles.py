"""Flatten a parsed stylesheet into declaration strings."""

from __future__ import annotations

from cssmap.model.rule import Stylesheet

__all__ = ["flatten_styles"]


def flatten_styles(stylesheet: Stylesheet) -> list[str]:
    """Return ``"property: value"`` for every declaration of every rule."""
    return [
        f"{prop}: {value}"
        for styles in stylesheet.values()
        for prop, value in styles.items()
    ]
