"""Declaration discovery over a parsed PHP syntax tree.

The finder walks every node reachable from the top-level statements,
including nodes nested in namespace bodies, class bodies, function bodies,
closures and expressions, and hands each node whose kind matches the
requested identifier type to a conversion strategy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from tree_sitter import Node

from staticreflect.ast.node_kind import classify
from staticreflect.ast.strategy import NodeToReflection
from staticreflect.core.models import IdentifierType, NodeKind, Reflection
from staticreflect.core.source import SourceUnit

logger = logging.getLogger(__name__)


class DeclarationFinder:
    """Find all reflections of one identifier type in a syntax tree."""

    def __init__(self, strategy: NodeToReflection) -> None:
        self._strategy = strategy

    def __call__(
        self,
        context: Any,
        statements: Sequence[Node],
        identifier_type: IdentifierType,
        source_unit: SourceUnit,
    ) -> list[Reflection]:
        return self.find(context, statements, identifier_type, source_unit)

    def find(
        self,
        context: Any,
        statements: Sequence[Node],
        identifier_type: IdentifierType,
        source_unit: SourceUnit,
    ) -> list[Reflection]:
        """Convert every declaration of the given type, in document order.

        Nodes that do not match are never converted, but their children are
        still searched, so declarations nested anywhere are found. A failing
        conversion aborts the whole search.

        Args:
            context: Reflection context handed through to the strategy
            statements: Top-level statements of the parsed program
            identifier_type: Kind of declaration to collect
            source_unit: Source the statements were parsed from

        Returns:
            One reflection per matching node

        Raises:
            StrategyError: If the strategy fails for a matching node; any
                other exception from the strategy propagates unchanged
        """
        reflections: list[Reflection] = []
        visited = 0

        for node, kind in iter_classified(statements):
            visited += 1
            if not identifier_type.matches(kind):
                continue
            try:
                reflections.append(self._strategy(context, node, source_unit))
            except Exception:
                logger.debug(
                    f"Conversion failed for {node.type} at line {node.start_point[0] + 1} "
                    f"in {source_unit.origin or '<no file>'}"
                )
                raise

        logger.debug(
            f"Visited {visited} nodes, found {len(reflections)} "
            f"{identifier_type.value} declarations in {source_unit.origin or '<no file>'}"
        )
        return reflections


def iter_classified(statements: Sequence[Node]) -> Iterator[tuple[Node, NodeKind]]:
    """Yield every node under the statements with its kind, pre-order, left to right."""
    stack = list(reversed(statements))
    while stack:
        node = stack.pop()
        yield node, classify(node)
        stack.extend(reversed(node.named_children))
