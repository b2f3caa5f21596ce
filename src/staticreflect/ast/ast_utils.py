"""PHP AST utility helpers."""

from __future__ import annotations

from tree_sitter import Node

from staticreflect.ast.node_kind import CLASS_BODY_TYPES
from staticreflect.core.models import ClassLikeKind

NAMESPACE_SEPARATOR = "\\"


class PhpAstUtils:
    """Utility helpers for tree-sitter-php nodes."""

    @staticmethod
    def get_node_text(node: Node) -> str:
        return (node.text or b"").decode("utf-8")

    @staticmethod
    def get_name(node: Node) -> str | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return PhpAstUtils.get_node_text(name_node)

    @staticmethod
    def start_line(node: Node) -> int:
        return node.start_point[0] + 1

    @staticmethod
    def end_line(node: Node) -> int:
        return node.end_point[0] + 1

    @staticmethod
    def qualify(namespace: str | None, short_name: str) -> str:
        return f"{namespace}{NAMESPACE_SEPARATOR}{short_name}" if namespace else short_name

    @staticmethod
    def enclosing_namespace(node: Node) -> str | None:
        """Resolve the namespace a node is declared in.

        Bracketed namespaces enclose their statements; unbracketed ones apply
        to every following program-level statement up to the next namespace.
        """
        top = node
        current = node.parent
        while current is not None and current.type != "program":
            if current.type == "namespace_definition":
                return PhpAstUtils.get_name(current)
            top = current
            current = current.parent

        sibling = top.prev_named_sibling
        while sibling is not None:
            if (
                sibling.type == "namespace_definition"
                and sibling.child_by_field_name("body") is None
            ):
                return PhpAstUtils.get_name(sibling)
            sibling = sibling.prev_named_sibling
        return None

    @staticmethod
    def get_class_like_kind(node_type: str) -> ClassLikeKind:
        mapping = {
            "class_declaration": ClassLikeKind.CLASS,
            "interface_declaration": ClassLikeKind.INTERFACE,
            "trait_declaration": ClassLikeKind.TRAIT,
            "enum_declaration": ClassLikeKind.ENUM,
        }
        return mapping.get(node_type, ClassLikeKind.CLASS)

    @staticmethod
    def extract_modifiers(node: Node) -> list[str]:
        modifiers: list[str] = []
        for child in node.children:
            if child.type in ("abstract_modifier", "final_modifier", "readonly_modifier"):
                modifiers.append(child.type.replace("_modifier", ""))
        return modifiers

    @staticmethod
    def extract_doc_comment(node: Node) -> str | None:
        previous = node.prev_named_sibling
        if previous is None or previous.type != "comment":
            return None
        text = PhpAstUtils.get_node_text(previous)
        return text if text.startswith("/**") else None

    @staticmethod
    def extract_clause_names(node: Node, clause_type: str) -> list[str]:
        """Names listed in an extends or implements clause."""
        names: list[str] = []
        for named in node.named_children:
            if named.type != clause_type:
                continue
            for name_child in named.named_children:
                if name_child.type in ("name", "qualified_name"):
                    names.append(PhpAstUtils.get_node_text(name_child).lstrip(NAMESPACE_SEPARATOR))
        return names

    @staticmethod
    def get_body(node: Node) -> Node | None:
        body = node.child_by_field_name("body")
        if body is not None:
            return body
        return next((c for c in node.named_children if c.type in CLASS_BODY_TYPES), None)

    @staticmethod
    def extract_method_names(body: Node) -> list[str]:
        names: list[str] = []
        for child in body.named_children:
            if child.type != "method_declaration":
                continue
            name = PhpAstUtils.get_name(child)
            if name is not None:
                names.append(name)
        return names

    @staticmethod
    def extract_constant_names(body: Node) -> list[str]:
        names: list[str] = []
        for child in body.named_children:
            if child.type != "const_declaration":
                continue
            for element in child.named_children:
                if element.type != "const_element":
                    continue
                name = PhpAstUtils.const_element_name(element)
                if name is not None:
                    names.append(name)
        return names

    @staticmethod
    def const_element_name(element: Node) -> str | None:
        name_node = next((c for c in element.named_children if c.type == "name"), None)
        return PhpAstUtils.get_node_text(name_node) if name_node is not None else None

    @staticmethod
    def const_element_value(element: Node) -> str:
        children = element.named_children
        if len(children) < 2:
            return ""
        return PhpAstUtils.get_node_text(children[-1])

    @staticmethod
    def extract_parameter_names(callable_node: Node) -> list[str]:
        params = callable_node.child_by_field_name("parameters")
        if params is None:
            return []
        names: list[str] = []
        for p in params.named_children:
            name_node = p.child_by_field_name("name")
            if name_node is None:
                continue
            names.append(PhpAstUtils.get_node_text(name_node).lstrip("$"))
        return names

    @staticmethod
    def extract_return_type(callable_node: Node) -> str | None:
        type_node = callable_node.child_by_field_name("return_type")
        if type_node is None:
            return None
        return PhpAstUtils.get_node_text(type_node).lstrip(":").strip() or None

    @staticmethod
    def returns_reference(callable_node: Node) -> bool:
        return any(child.type == "reference_modifier" for child in callable_node.children)

    @staticmethod
    def unquote(literal: Node) -> str:
        text = PhpAstUtils.get_node_text(literal)
        if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
            return text[1:-1]
        return text
