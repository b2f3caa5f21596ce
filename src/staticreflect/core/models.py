"""Reflection data models for staticreflect.

This module defines the declaration kinds the syntax tree walk understands,
the identifier types callers search for, and the reflection records produced
for every matched declaration.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class NodeKind(str, Enum):
    """Classification of a syntax tree node."""

    NAMESPACE = "namespace"
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    ENUM = "enum"
    ANONYMOUS_CLASS = "anonymous_class"
    FUNCTION = "function"
    METHOD = "method"
    CLOSURE = "closure"
    ARROW_FUNCTION = "arrow_function"
    CONSTANT = "constant"
    DEFINE = "define"
    CLASS_CONSTANT = "class_constant"
    OTHER = "other"


CLASS_LIKE_KINDS = frozenset(
    {
        NodeKind.CLASS,
        NodeKind.INTERFACE,
        NodeKind.TRAIT,
        NodeKind.ENUM,
        NodeKind.ANONYMOUS_CLASS,
    }
)


class IdentifierType(str, Enum):
    """Kind of declaration being searched for."""

    CLASS = "class"
    FUNCTION = "function"
    CONSTANT = "constant"

    def matches(self, kind: NodeKind) -> bool:
        """Check whether a node of the given kind is a declaration of this type."""
        return kind in _MATCHING_KINDS[self]

    @property
    def is_case_sensitive(self) -> bool:
        # PHP class and function names are case-insensitive, constants are not
        return self is IdentifierType.CONSTANT


_MATCHING_KINDS: dict[IdentifierType, frozenset[NodeKind]] = {
    IdentifierType.CLASS: CLASS_LIKE_KINDS,
    IdentifierType.FUNCTION: frozenset({NodeKind.FUNCTION}),
    IdentifierType.CONSTANT: frozenset({NodeKind.CONSTANT, NodeKind.DEFINE}),
}


class Identifier(BaseModel):
    """A declaration name together with the kind of declaration it names."""

    name: str = Field(..., min_length=1, description="Fully qualified name")
    type: IdentifierType

    @field_validator("name")
    @classmethod
    def _strip_leading_separator(cls, value: str) -> str:
        stripped = value.lstrip("\\")
        if not stripped:
            raise ValueError("Identifier name must not be empty")
        return stripped

    def matches_name(self, name: str) -> bool:
        if self.type.is_case_sensitive:
            return self.name == name
        return self.name.lower() == name.lower()


class ClassLikeKind(str, Enum):
    """Kind of class-like declaration."""

    CLASS = "CLASS"
    INTERFACE = "INTERFACE"
    TRAIT = "TRAIT"
    ENUM = "ENUM"


class Reflection(BaseModel):
    """Base class for all reflection records."""

    name: str = Field(..., description="Fully qualified name")
    short_name: str = Field(..., description="Name without namespace")
    namespace: str | None = Field(None, description="Declaring namespace, if any")
    file_name: str | None = Field(None, description="Origin of the located source")
    start_line: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)
    doc_comment: str | None = Field(None, description="Preceding /** */ comment")

    model_config = {"frozen": True}

    @property
    def in_namespace(self) -> bool:
        return bool(self.namespace)


class ReflectionClass(Reflection):
    """Class, interface, trait, enum or anonymous class declaration."""

    kind: ClassLikeKind
    is_anonymous: bool = False
    modifiers: list[str] = Field(default_factory=list, description="abstract/final/readonly")
    parent_class_name: str | None = Field(None, description="Name in the extends clause")
    interface_names: list[str] = Field(default_factory=list)
    method_names: list[str] = Field(default_factory=list)
    constant_names: list[str] = Field(default_factory=list)

    @property
    def is_interface(self) -> bool:
        return self.kind == ClassLikeKind.INTERFACE

    @property
    def is_trait(self) -> bool:
        return self.kind == ClassLikeKind.TRAIT

    @property
    def is_enum(self) -> bool:
        return self.kind == ClassLikeKind.ENUM


class ReflectionFunction(Reflection):
    """Named function declaration."""

    parameter_names: list[str] = Field(default_factory=list)
    return_type: str | None = None
    returns_reference: bool = False


class ReflectionConstant(Reflection):
    """Global constant declared with `const` or `define()`."""

    value_source: str = Field(..., description="Raw source of the value expression")
    is_define: bool = False
