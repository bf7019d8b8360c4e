"""Stylesheet validator: runs all lint rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from cssmap.model.diagnostic import Diagnostic
from cssmap.model.rule import Stylesheet
from cssmap.styles.registry import StyleRegistry, default_registry
from cssmap.validation.rules import ALL_RULES


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[Stylesheet, StyleRegistry], list[Diagnostic]]


def validate(
    stylesheet: Stylesheet,
    registry: StyleRegistry | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all lint rules against *stylesheet*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    registry = registry if registry is not None else default_registry()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(stylesheet, registry))
    return diagnostics


def validate_or_raise(
    stylesheet: Stylesheet,
    registry: StyleRegistry | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(stylesheet, registry=registry, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
