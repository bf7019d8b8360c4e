"""Style lookup error types."""

from __future__ import annotations


class StyleError(Exception):
    """Base error for a failed style lookup."""

    def __init__(self, message: str, name: str) -> None:
        self.name = name
        super().__init__(message)


class UnknownStyleError(StyleError):
    """No handler is registered for the property name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown style: {name!r}", name)


class InvalidStyleValueError(StyleError):
    """The registered handler rejected the property value."""

    def __init__(self, name: str, raw: str, reason: str = "") -> None:
        self.raw = raw
        self.reason = reason
        message = f"invalid value for {name!r}: {raw!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, name)
