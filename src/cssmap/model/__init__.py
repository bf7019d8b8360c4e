from cssmap.model.diagnostic import Diagnostic, Severity
from cssmap.model.rule import Rule, RuleType, Stylesheet
from cssmap.model.token import Token, TokenCategory

__all__ = [
    "Diagnostic",
    "Severity",
    "Rule",
    "RuleType",
    "Stylesheet",
    "Token",
    "TokenCategory",
]
