"""Located source value object.

A SourceUnit is one block of PHP source text together with the place it came
from. Source without a file (in-memory strings, evaluated code) has no origin.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from staticreflect.core.errors import InvalidSourceError


@dataclass(frozen=True)
class SourceUnit:
    """Immutable (text, origin) pair ready to be parsed."""

    text: str
    origin: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise InvalidSourceError("Source code must be a non-empty string")
        if self.origin is not None and not isinstance(self.origin, str):
            raise InvalidSourceError(
                "Origin must be a string or None",
                details=f"got {type(self.origin).__name__}",
            )

    @classmethod
    def create(cls, text: Any, origin: Any = None) -> SourceUnitResult:
        """Build a SourceUnit without raising.

        Args:
            text: The source code.
            origin: File path the source was read from, or None.

        Returns:
            SourceUnitResult holding either the unit or the construction error.
        """
        try:
            return SourceUnitResult(unit=cls(text, origin))
        except InvalidSourceError as e:
            return SourceUnitResult(error=e)

    @property
    def has_file(self) -> bool:
        return self.origin is not None


@dataclass(frozen=True)
class SourceUnitResult:
    """Outcome of SourceUnit.create."""

    unit: SourceUnit | None = None
    error: InvalidSourceError | None = None

    @property
    def is_valid(self) -> bool:
        return self.unit is not None
