"""PHP parser built on tree-sitter-php.

Turns the text of a SourceUnit into the sequence of top-level statement nodes
consumed by the declaration finder.
"""

from __future__ import annotations

import logging

import tree_sitter_php as tsphp
from tree_sitter import Language, Node, Parser

from staticreflect.core.config import StaticReflectConfig, get_config
from staticreflect.core.errors import ParseError

logger = logging.getLogger(__name__)


class PhpParser:
    """tree-sitter parser producing top-level PHP statements."""

    def __init__(self, config: StaticReflectConfig | None = None) -> None:
        self._config = config or get_config()
        grammar = tsphp.language_php_only() if self._config.php_only else tsphp.language_php()
        self._language = Language(grammar)
        self._parser = Parser(self._language)

    def parse(self, text: str) -> list[Node]:
        """Parse source text into its top-level statement nodes.

        tree-sitter reads its input as UTF-8, so the text is always encoded
        as UTF-8 and node text decodes with the same codec.

        Args:
            text: PHP source code

        Returns:
            Named children of the program node, in source order

        Raises:
            ParseError: If the text cannot be encoded, or contains syntax
                errors while strict parsing is enabled
        """
        try:
            content = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseError("Failed to encode source text", details=str(e)) from e

        tree = self._parser.parse(content)
        root = tree.root_node

        if root.has_error and self._config.strict_parsing:
            error_node = find_error_node(root)
            line, column = (
                (error_node.start_point[0] + 1, error_node.start_point[1] + 1)
                if error_node is not None
                else (None, None)
            )
            raise ParseError(
                "Source contains syntax errors",
                details=f"first error at line {line}, column {column}",
                line=line,
                column=column,
            )

        statements = list(root.named_children)
        logger.debug(f"Parsed {len(content)} bytes into {len(statements)} top-level statements")
        return statements


def find_error_node(root: Node) -> Node | None:
    """Return the first ERROR or missing node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None
