"""Core module containing source units, reflection models, errors and config."""

from staticreflect.core.errors import (
    IdentifierNotFoundError,
    InvalidSourceError,
    ParseError,
    StaticReflectError,
    StrategyError,
)
from staticreflect.core.models import (
    CLASS_LIKE_KINDS,
    ClassLikeKind,
    Identifier,
    IdentifierType,
    NodeKind,
    Reflection,
    ReflectionClass,
    ReflectionConstant,
    ReflectionFunction,
)
from staticreflect.core.source import SourceUnit, SourceUnitResult

__all__ = [
    "CLASS_LIKE_KINDS",
    "ClassLikeKind",
    "Identifier",
    "IdentifierNotFoundError",
    "IdentifierType",
    "InvalidSourceError",
    "NodeKind",
    "ParseError",
    "Reflection",
    "ReflectionClass",
    "ReflectionConstant",
    "ReflectionFunction",
    "SourceUnit",
    "SourceUnitResult",
    "StaticReflectError",
    "StrategyError",
]
