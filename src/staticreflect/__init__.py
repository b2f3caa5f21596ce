"""staticreflect - static reflection of PHP declarations.

Builds reflection records for classes, functions and constants by parsing
source text and walking the syntax tree, without executing the code.
"""

from staticreflect.ast import DeclarationFinder, NodeToReflection, PhpParser
from staticreflect.core import (
    Identifier,
    IdentifierNotFoundError,
    IdentifierType,
    InvalidSourceError,
    ParseError,
    Reflection,
    ReflectionClass,
    ReflectionConstant,
    ReflectionFunction,
    SourceUnit,
    StaticReflectError,
    StrategyError,
)
from staticreflect.reflector import Reflector

__version__ = "0.1.0"

__all__ = [
    "DeclarationFinder",
    "Identifier",
    "IdentifierNotFoundError",
    "IdentifierType",
    "InvalidSourceError",
    "NodeToReflection",
    "ParseError",
    "PhpParser",
    "Reflection",
    "ReflectionClass",
    "ReflectionConstant",
    "ReflectionFunction",
    "Reflector",
    "SourceUnit",
    "StaticReflectError",
    "StrategyError",
]
