"""Reflector coordinating parsing and declaration discovery.

The reflector takes already located source, parses it and runs the
declaration finder for the requested identifier type. It passes itself as the
reflection context, so strategies can reach back to it when needed.
"""

from __future__ import annotations

import logging

from staticreflect.ast.finder import DeclarationFinder
from staticreflect.ast.parser import PhpParser
from staticreflect.ast.strategy import DefaultNodeToReflection, NodeToReflection
from staticreflect.core.config import StaticReflectConfig, get_config
from staticreflect.core.errors import IdentifierNotFoundError
from staticreflect.core.models import (
    Identifier,
    IdentifierType,
    Reflection,
    ReflectionClass,
    ReflectionConstant,
    ReflectionFunction,
)
from staticreflect.core.source import SourceUnit

logger = logging.getLogger(__name__)


class Reflector:
    """Build reflections from located PHP source without executing it."""

    def __init__(
        self,
        parser: PhpParser | None = None,
        strategy: NodeToReflection | None = None,
        config: StaticReflectConfig | None = None,
    ) -> None:
        self._config = config or get_config()
        self._parser = parser or PhpParser(self._config)
        self._finder = DeclarationFinder(strategy or DefaultNodeToReflection(config=self._config))

    def reflect_all(
        self, source_unit: SourceUnit, identifier_type: IdentifierType
    ) -> list[Reflection]:
        """Reflect every declaration of a type found in the source.

        Raises:
            ParseError: If the source cannot be parsed
            StrategyError: If a matching declaration cannot be converted
        """
        statements = self._parser.parse(source_unit.text)
        return self._finder(self, statements, identifier_type, source_unit)

    def reflect(self, identifier: Identifier, source_unit: SourceUnit) -> Reflection:
        """Reflect the declaration named by the identifier.

        Raises:
            IdentifierNotFoundError: If no matching declaration exists
        """
        for reflection in self.reflect_all(source_unit, identifier.type):
            if identifier.matches_name(reflection.name):
                return reflection

        logger.debug(f"{identifier.type.value} {identifier.name} not found")
        raise IdentifierNotFoundError(
            f"{identifier.type.value.capitalize()} {identifier.name!r} could not be found",
            identifier_name=identifier.name,
            details=f"searched {source_unit.origin or '<no file>'}",
        )

    def reflect_classes(self, source_unit: SourceUnit) -> list[ReflectionClass]:
        return self.reflect_all(source_unit, IdentifierType.CLASS)  # type: ignore[return-value]

    def reflect_functions(self, source_unit: SourceUnit) -> list[ReflectionFunction]:
        return self.reflect_all(source_unit, IdentifierType.FUNCTION)  # type: ignore[return-value]

    def reflect_constants(self, source_unit: SourceUnit) -> list[ReflectionConstant]:
        return self.reflect_all(source_unit, IdentifierType.CONSTANT)  # type: ignore[return-value]
