"""Syntax tree parsing, node classification and declaration discovery."""

from staticreflect.ast.finder import DeclarationFinder, iter_classified
from staticreflect.ast.node_kind import classify
from staticreflect.ast.parser import PhpParser
from staticreflect.ast.strategy import (
    ClassLikeToReflection,
    ConstantToReflection,
    DefaultNodeToReflection,
    FunctionToReflection,
    NodeToReflection,
)

__all__ = [
    "ClassLikeToReflection",
    "ConstantToReflection",
    "DeclarationFinder",
    "DefaultNodeToReflection",
    "FunctionToReflection",
    "NodeToReflection",
    "PhpParser",
    "classify",
    "iter_classified",
]
