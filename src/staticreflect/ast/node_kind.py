"""Classification of tree-sitter-php nodes into declaration kinds."""

from __future__ import annotations

from tree_sitter import Node

from staticreflect.core.models import NodeKind

_SIMPLE_KINDS: dict[str, NodeKind] = {
    "namespace_definition": NodeKind.NAMESPACE,
    "class_declaration": NodeKind.CLASS,
    "interface_declaration": NodeKind.INTERFACE,
    "trait_declaration": NodeKind.TRAIT,
    "enum_declaration": NodeKind.ENUM,
    "anonymous_class": NodeKind.ANONYMOUS_CLASS,
    "function_definition": NodeKind.FUNCTION,
    "method_declaration": NodeKind.METHOD,
    "anonymous_function": NodeKind.CLOSURE,
    "anonymous_function_creation_expression": NodeKind.CLOSURE,
    "arrow_function": NodeKind.ARROW_FUNCTION,
}

CLASS_BODY_TYPES = frozenset({"declaration_list", "enum_declaration_list"})

STRING_LITERAL_TYPES = frozenset({"string", "encapsed_string"})


def classify(node: Node) -> NodeKind:
    """Classify any node; grammar types without a declaration kind are OTHER."""
    kind = _SIMPLE_KINDS.get(node.type)
    if kind is not None:
        return kind
    if node.type == "const_element":
        return _classify_const_element(node)
    if node.type == "function_call_expression":
        return NodeKind.DEFINE if is_define_call(node) else NodeKind.OTHER
    if node.type == "object_creation_expression":
        # Older grammars inline the anonymous class body into the `new` expression
        if any(child.type == "declaration_list" for child in node.named_children):
            return NodeKind.ANONYMOUS_CLASS
    return NodeKind.OTHER


def _classify_const_element(node: Node) -> NodeKind:
    declaration = node.parent
    owner = declaration.parent if declaration is not None else None
    if owner is not None and owner.type in CLASS_BODY_TYPES:
        return NodeKind.CLASS_CONSTANT
    return NodeKind.CONSTANT


def is_define_call(node: Node) -> bool:
    """Check for `define('NAME', value)` with a literal string name."""
    function = node.child_by_field_name("function")
    if function is None or function.type not in ("name", "qualified_name"):
        return False
    name = (function.text or b"").decode("utf-8", errors="replace").lstrip("\\")
    if name.lower() != "define":
        return False
    args = define_arguments(node)
    return len(args) >= 2 and args[0].type in STRING_LITERAL_TYPES


def define_arguments(node: Node) -> list[Node]:
    """Return the value nodes of a call's arguments, in order."""
    arguments = node.child_by_field_name("arguments")
    if arguments is None:
        return []
    values: list[Node] = []
    for argument in arguments.named_children:
        if argument.type != "argument":
            continue
        value = argument.named_children[-1] if argument.named_children else None
        if value is not None:
            values.append(value)
    return values
