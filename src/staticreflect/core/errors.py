"""Exception hierarchy for static reflection.

Every error carries a short message plus optional details, so callers can
report the failure without inspecting the underlying cause.
"""

from __future__ import annotations


class StaticReflectError(Exception):
    """Base error for all static reflection failures."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidSourceError(StaticReflectError, ValueError):
    """Located source could not be wrapped in a SourceUnit."""


class ParseError(StaticReflectError):
    """Source text could not be parsed into a syntax tree."""

    def __init__(
        self,
        message: str,
        details: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message, details)
        self.line = line
        self.column = column


class StrategyError(StaticReflectError):
    """A conversion strategy could not turn a node into a reflection."""

    def __init__(
        self,
        message: str,
        details: str | None = None,
        node_type: str | None = None,
        line: int | None = None,
    ) -> None:
        super().__init__(message, details)
        self.node_type = node_type
        self.line = line


class IdentifierNotFoundError(StaticReflectError):
    """No declaration with the requested identifier exists in the source."""

    def __init__(self, message: str, identifier_name: str, details: str | None = None) -> None:
        super().__init__(message, details)
        self.identifier_name = identifier_name
