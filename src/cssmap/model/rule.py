"""Rule model: selector strings and the parsed stylesheet mapping."""

from __future__ import annotations

from enum import Enum


class RuleType(Enum):
    """Kind of element a selector targets, derived from its first character."""

    CLASS = "class"
    ID = "id"
    TAG = "tag"


class Rule(str):
    """A CSS selector such as ``.foo``, ``#bar`` or ``div``.

    A Rule is a plain string value: two rules are equal when their text is.
    """

    __slots__ = ()

    @property
    def type(self) -> RuleType:
        if self.startswith("."):
            return RuleType.CLASS
        if self.startswith("#"):
            return RuleType.ID
        return RuleType.TAG

    def __repr__(self) -> str:
        return f"Rule({str.__repr__(self)})"


# Selector -> {property: value}. Callers own the returned mapping.
Stylesheet = dict[Rule, dict[str, str]]
