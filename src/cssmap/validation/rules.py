"""Lint rules for parsed stylesheets.

Each rule is a function taking a Stylesheet and a StyleRegistry and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from cssmap.model.diagnostic import Diagnostic, Severity
from cssmap.model.rule import Stylesheet
from cssmap.styles.errors import InvalidStyleValueError
from cssmap.styles.registry import StyleRegistry


def check_unknown_properties(
    stylesheet: Stylesheet, registry: StyleRegistry
) -> list[Diagnostic]:
    """Properties with no registered handler cannot be checked."""
    diagnostics: list[Diagnostic] = []
    for rule, styles in stylesheet.items():
        for prop in styles:
            if prop in registry:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_unknown_properties",
                    severity=Severity.WARNING,
                    message=f"Unknown property '{prop}'.",
                    selector=str(rule),
                    prop=prop,
                    fix="Check the spelling or register a handler for this property.",
                )
            )
    return diagnostics


def check_property_values(
    stylesheet: Stylesheet, registry: StyleRegistry
) -> list[Diagnostic]:
    """Values rejected by their property's handler are errors."""
    diagnostics: list[Diagnostic] = []
    for rule, styles in stylesheet.items():
        for prop, value in styles.items():
            if prop not in registry:
                continue  # check_unknown_properties reports these
            try:
                registry.interpret(prop, value)
            except InvalidStyleValueError as exc:
                diagnostics.append(
                    Diagnostic(
                        rule="check_property_values",
                        severity=Severity.ERROR,
                        message=f"Invalid value '{value}' for '{prop}': {exc.reason}.",
                        selector=str(rule),
                        prop=prop,
                    )
                )
    return diagnostics


def check_empty_rules(
    stylesheet: Stylesheet, registry: StyleRegistry
) -> list[Diagnostic]:
    """Rules whose blocks declare nothing."""
    return [
        Diagnostic(
            rule="check_empty_rules",
            severity=Severity.INFO,
            message=f"Rule '{rule}' has no declarations.",
            selector=str(rule),
            fix="Remove the empty block.",
        )
        for rule, styles in stylesheet.items()
        if not styles
    ]


ALL_RULES = [
    check_unknown_properties,
    check_property_values,
    check_empty_rules,
]
