"""Conversion strategies turning matched syntax nodes into reflections.

A strategy receives the reflection context (usually the Reflector driving the
search), a single matched node and the SourceUnit the tree was parsed from.
It builds one reflection record and never mutates the node or the source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from tree_sitter import Node

from staticreflect.ast.ast_utils import PhpAstUtils
from staticreflect.ast.node_kind import classify, define_arguments
from staticreflect.core.config import StaticReflectConfig, get_config
from staticreflect.core.errors import StrategyError
from staticreflect.core.models import (
    CLASS_LIKE_KINDS,
    NodeKind,
    Reflection,
    ReflectionClass,
    ReflectionConstant,
    ReflectionFunction,
)
from staticreflect.core.source import SourceUnit


class NodeToReflection(ABC):
    """Convert one syntax node into one reflection record."""

    @property
    @abstractmethod
    def supported_kinds(self) -> frozenset[NodeKind]:
        """Node kinds this strategy can convert."""

    @abstractmethod
    def __call__(self, context: Any, node: Node, source_unit: SourceUnit) -> Reflection:
        """Build the reflection for a node.

        Raises:
            StrategyError: If the node cannot be converted
        """

    def _check_supported(self, node: Node) -> NodeKind:
        kind = classify(node)
        if kind not in self.supported_kinds:
            raise unsupported_node(self, node, kind)
        return kind


def unsupported_node(strategy: object, node: Node, kind: NodeKind) -> StrategyError:
    line = PhpAstUtils.start_line(node)
    return StrategyError(
        f"{type(strategy).__name__} cannot convert {kind.value} nodes",
        details=f"node type {node.type!r} at line {line}",
        node_type=node.type,
        line=line,
    )


class ClassLikeToReflection(NodeToReflection):
    """Reflect classes, interfaces, traits, enums and anonymous classes."""

    def __init__(self, config: StaticReflectConfig | None = None) -> None:
        self._config = config or get_config()

    @property
    def supported_kinds(self) -> frozenset[NodeKind]:
        return CLASS_LIKE_KINDS

    def __call__(self, context: Any, node: Node, source_unit: SourceUnit) -> ReflectionClass:
        kind = self._check_supported(node)
        start_line = PhpAstUtils.start_line(node)

        if kind == NodeKind.ANONYMOUS_CLASS:
            short_name = f"{self._config.anonymous_class_prefix}{source_unit.origin or ''}:{start_line}"
            name = short_name
            namespace = None
        else:
            short_name = PhpAstUtils.get_name(node)
            if short_name is None:
                raise StrategyError(
                    "Class-like declaration has no name",
                    details=f"node type {node.type!r} at line {start_line}",
                    node_type=node.type,
                    line=start_line,
                )
            namespace = PhpAstUtils.enclosing_namespace(node)
            name = PhpAstUtils.qualify(namespace, short_name)

        body = PhpAstUtils.get_body(node)
        parents = PhpAstUtils.extract_clause_names(node, "base_clause")
        interfaces = PhpAstUtils.extract_clause_names(node, "class_interface_clause")
        if node.type == "interface_declaration":
            # Interfaces extend other interfaces rather than a parent class
            interfaces, parents = parents + interfaces, []

        return ReflectionClass(
            name=name,
            short_name=short_name,
            namespace=namespace,
            file_name=source_unit.origin,
            start_line=start_line,
            end_line=PhpAstUtils.end_line(node),
            doc_comment=PhpAstUtils.extract_doc_comment(node),
            kind=PhpAstUtils.get_class_like_kind(node.type),
            is_anonymous=kind == NodeKind.ANONYMOUS_CLASS,
            modifiers=PhpAstUtils.extract_modifiers(node),
            parent_class_name=parents[0] if parents else None,
            interface_names=interfaces,
            method_names=PhpAstUtils.extract_method_names(body) if body else [],
            constant_names=PhpAstUtils.extract_constant_names(body) if body else [],
        )


class FunctionToReflection(NodeToReflection):
    """Reflect named function declarations."""

    @property
    def supported_kinds(self) -> frozenset[NodeKind]:
        return frozenset({NodeKind.FUNCTION})

    def __call__(self, context: Any, node: Node, source_unit: SourceUnit) -> ReflectionFunction:
        self._check_supported(node)
        short_name = PhpAstUtils.get_name(node)
        if short_name is None:
            line = PhpAstUtils.start_line(node)
            raise StrategyError(
                "Function declaration has no name",
                details=f"line {line}",
                node_type=node.type,
                line=line,
            )
        namespace = PhpAstUtils.enclosing_namespace(node)

        return ReflectionFunction(
            name=PhpAstUtils.qualify(namespace, short_name),
            short_name=short_name,
            namespace=namespace,
            file_name=source_unit.origin,
            start_line=PhpAstUtils.start_line(node),
            end_line=PhpAstUtils.end_line(node),
            doc_comment=PhpAstUtils.extract_doc_comment(node),
            parameter_names=PhpAstUtils.extract_parameter_names(node),
            return_type=PhpAstUtils.extract_return_type(node),
            returns_reference=PhpAstUtils.returns_reference(node),
        )


class ConstantToReflection(NodeToReflection):
    """Reflect global constants from `const` elements and `define()` calls."""

    @property
    def supported_kinds(self) -> frozenset[NodeKind]:
        return frozenset({NodeKind.CONSTANT, NodeKind.DEFINE})

    def __call__(self, context: Any, node: Node, source_unit: SourceUnit) -> ReflectionConstant:
        kind = self._check_supported(node)
        line = PhpAstUtils.start_line(node)

        if kind == NodeKind.DEFINE:
            name_arg, value_arg = define_arguments(node)[:2]
            # define() always declares in the global namespace unless the name says otherwise
            name = PhpAstUtils.unquote(name_arg).replace("\\\\", "\\").lstrip("\\")
            namespace, _, short_name = name.rpartition("\\")
            value_source = PhpAstUtils.get_node_text(value_arg)
        else:
            short_name = PhpAstUtils.const_element_name(node) or ""
            namespace = PhpAstUtils.enclosing_namespace(node) or ""
            name = PhpAstUtils.qualify(namespace, short_name)
            value_source = PhpAstUtils.const_element_value(node)
        # Doc comments attach to the enclosing statement
        doc_node = node.parent if node.parent is not None else node

        if not short_name:
            raise StrategyError(
                "Constant declaration has no name",
                details=f"line {line}",
                node_type=node.type,
                line=line,
            )

        return ReflectionConstant(
            name=name,
            short_name=short_name,
            namespace=namespace or None,
            file_name=source_unit.origin,
            start_line=line,
            end_line=PhpAstUtils.end_line(node),
            doc_comment=PhpAstUtils.extract_doc_comment(doc_node),
            value_source=value_source,
            is_define=kind == NodeKind.DEFINE,
        )


class DefaultNodeToReflection(NodeToReflection):
    """Dispatch each node to the strategy registered for its kind."""

    def __init__(
        self,
        strategies: list[NodeToReflection] | None = None,
        config: StaticReflectConfig | None = None,
    ) -> None:
        if strategies is None:
            strategies = [
                ClassLikeToReflection(config),
                FunctionToReflection(),
                ConstantToReflection(),
            ]
        self._by_kind: dict[NodeKind, NodeToReflection] = {}
        for strategy in strategies:
            for kind in strategy.supported_kinds:
                self._by_kind.setdefault(kind, strategy)

    @property
    def supported_kinds(self) -> frozenset[NodeKind]:
        return frozenset(self._by_kind)

    def __call__(self, context: Any, node: Node, source_unit: SourceUnit) -> Reflection:
        kind = classify(node)
        strategy = self._by_kind.get(kind)
        if strategy is None:
            raise unsupported_node(self, node, kind)
        return strategy(context, node, source_unit)
