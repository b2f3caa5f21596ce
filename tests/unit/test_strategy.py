"""Unit tests for node-to-reflection conversion strategies."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from tree_sitter import Node

from staticreflect.ast import (
    ClassLikeToReflection,
    ConstantToReflection,
    DefaultNodeToReflection,
    FunctionToReflection,
    PhpParser,
    iter_classified,
)
from staticreflect.core import (
    ClassLikeKind,
    NodeKind,
    ReflectionClass,
    ReflectionConstant,
    ReflectionFunction,
    SourceUnit,
    StrategyError,
)
from staticreflect.core.config import StaticReflectConfig


def first_node(php_parser: PhpParser, source: str, kind: NodeKind) -> Node:
    statements = php_parser.parse(source)
    return next(node for node, node_kind in iter_classified(statements) if node_kind == kind)


class TestClassLikeToReflection:
    @pytest.fixture
    def strategy(self, config: StaticReflectConfig) -> ClassLikeToReflection:
        return ClassLikeToReflection(config)

    def test_plain_class(self, php_parser: PhpParser, strategy: ClassLikeToReflection) -> None:
        source = SourceUnit("<?php\nclass Foo {}\n", "/src/Foo.php")
        node = first_node(php_parser, source.text, NodeKind.CLASS)

        reflection = strategy(Mock(), node, source)

        assert isinstance(reflection, ReflectionClass)
        assert reflection.name == "Foo"
        assert reflection.short_name == "Foo"
        assert reflection.namespace is None
        assert reflection.file_name == "/src/Foo.php"
        assert reflection.start_line == 2
        assert reflection.end_line == 2
        assert reflection.kind == ClassLikeKind.CLASS
        assert not reflection.is_anonymous

    def test_bracketed_namespace(
        self, php_parser: PhpParser, strategy: ClassLikeToReflection
    ) -> None:
        source = SourceUnit("<?php namespace Foo\\Baz { class Bar {} }", None)
        node = first_node(php_parser, source.text, NodeKind.CLASS)

        reflection = strategy(Mock(), node, source)

        assert reflection.name == "Foo\\Baz\\Bar"
        assert reflection.namespace == "Foo\\Baz"
        assert reflection.short_name == "Bar"

    def test_unbracketed_namespaces_apply_until_the_next(
        self, php_parser: PhpParser, strategy: ClassLikeToReflection
    ) -> None:
        source = SourceUnit(
            "<?php namespace First;\nclass A {}\nnamespace Second;\nclass B {}", None
        )
        statements = php_parser.parse(source.text)
        nodes = [node for node, kind in iter_classified(statements) if kind == NodeKind.CLASS]

        names = [strategy(Mock(), node, source).name for node in nodes]

        assert names == ["First\\A", "Second\\B"]

    def test_class_details(self, php_parser: PhpParser, strategy: ClassLikeToReflection) -> None:
        source = SourceUnit(
            "<?php\n"
            "/** The foo. */\n"
            "abstract class Foo extends Base implements \\Countable, Stringable {\n"
            "    const A = 1, B = 2;\n"
            "    public function count(): int { return 0; }\n"
            "    public function __toString(): string { return ''; }\n"
            "}\n",
            None,
        )
        node = first_node(php_parser, source.text, NodeKind.CLASS)

        reflection = strategy(Mock(), node, source)

        assert reflection.doc_comment == "/** The foo. */"
        assert reflection.modifiers == ["abstract"]
        assert reflection.parent_class_name == "Base"
        assert reflection.interface_names == ["Countable", "Stringable"]
        assert reflection.constant_names == ["A", "B"]
        assert reflection.method_names == ["count", "__toString"]
        assert reflection.start_line == 3
        assert reflection.end_line == 7

    def test_interface_extends_are_interfaces(
        self, php_parser: PhpParser, strategy: ClassLikeToReflection
    ) -> None:
        source = SourceUnit("<?php interface Foo extends Bar, Baz {}", None)
        node = first_node(php_parser, source.text, NodeKind.INTERFACE)

        reflection = strategy(Mock(), node, source)

        assert reflection.kind == ClassLikeKind.INTERFACE
        assert reflection.parent_class_name is None
        assert reflection.interface_names == ["Bar", "Baz"]

    @pytest.mark.parametrize(
        ("source", "kind", "expected"),
        [
            ("<?php trait Foo {}", NodeKind.TRAIT, ClassLikeKind.TRAIT),
            ("<?php enum Foo { case A; }", NodeKind.ENUM, ClassLikeKind.ENUM),
        ],
    )
    def test_trait_and_enum(
        self,
        php_parser: PhpParser,
        strategy: ClassLikeToReflection,
        source: str,
        kind: NodeKind,
        expected: ClassLikeKind,
    ) -> None:
        node = first_node(php_parser, source, kind)
        reflection = strategy(Mock(), node, SourceUnit(source, None))
        assert reflection.kind == expected

    def test_anonymous_class_naming(
        self, php_parser: PhpParser, strategy: ClassLikeToReflection
    ) -> None:
        source = SourceUnit(
            "<?php namespace Foo;\n\n$x = new class {\n    public function bar() {}\n};",
            "/src/anon.php",
        )
        node = first_node(php_parser, source.text, NodeKind.ANONYMOUS_CLASS)

        reflection = strategy(Mock(), node, source)

        assert reflection.is_anonymous
        assert reflection.name == "class@anonymous/src/anon.php:3"
        assert reflection.short_name == reflection.name
        assert reflection.namespace is None
        assert reflection.method_names == ["bar"]

    def test_anonymous_class_without_file(self, php_parser: PhpParser) -> None:
        strategy = ClassLikeToReflection(
            StaticReflectConfig(_env_file=None, anonymous_class_prefix="anon@")
        )
        source = SourceUnit("<?php $x = new class {};", None)
        node = first_node(php_parser, source.text, NodeKind.ANONYMOUS_CLASS)

        assert strategy(Mock(), node, source).name == "anon@:1"

    def test_rejects_functions(
        self, php_parser: PhpParser, strategy: ClassLikeToReflection
    ) -> None:
        source = SourceUnit("<?php\n\nfunction foo() {}", None)
        node = first_node(php_parser, source.text, NodeKind.FUNCTION)

        with pytest.raises(StrategyError) as exc_info:
            strategy(Mock(), node, source)

        assert exc_info.value.node_type == "function_definition"
        assert exc_info.value.line == 3


class TestFunctionToReflection:
    def test_function_details(self, php_parser: PhpParser) -> None:
        source = SourceUnit(
            "<?php namespace App { /** Adds. */ function add(int $a, $b = 2): int { return $a + $b; } }",
            "/src/add.php",
        )
        node = first_node(php_parser, source.text, NodeKind.FUNCTION)

        reflection = FunctionToReflection()(Mock(), node, source)

        assert isinstance(reflection, ReflectionFunction)
        assert reflection.name == "App\\add"
        assert reflection.namespace == "App"
        assert reflection.parameter_names == ["a", "b"]
        assert reflection.return_type == "int"
        assert reflection.doc_comment == "/** Adds. */"
        assert reflection.file_name == "/src/add.php"

    def test_function_without_return_type(self, php_parser: PhpParser) -> None:
        source = SourceUnit("<?php function foo() {}", None)
        node = first_node(php_parser, source.text, NodeKind.FUNCTION)

        reflection = FunctionToReflection()(Mock(), node, source)

        assert reflection.name == "foo"
        assert reflection.return_type is None
        assert reflection.parameter_names == []
        assert reflection.doc_comment is None

    def test_rejects_methods(self, php_parser: PhpParser) -> None:
        source = SourceUnit("<?php class Foo { function bar() {} }", None)
        node = first_node(php_parser, source.text, NodeKind.METHOD)

        with pytest.raises(StrategyError, match="cannot convert method nodes"):
            FunctionToReflection()(Mock(), node, source)


class TestConstantToReflection:
    def test_const_element(self, php_parser: PhpParser) -> None:
        source = SourceUnit("<?php namespace App;\nconst LIMIT = 10 * 5;", None)
        node = first_node(php_parser, source.text, NodeKind.CONSTANT)

        reflection = ConstantToReflection()(Mock(), node, source)

        assert isinstance(reflection, ReflectionConstant)
        assert reflection.name == "App\\LIMIT"
        assert reflection.short_name == "LIMIT"
        assert reflection.namespace == "App"
        assert reflection.value_source == "10 * 5"
        assert not reflection.is_define
        assert reflection.start_line == 2

    def test_define_is_global(self, php_parser: PhpParser) -> None:
        source = SourceUnit("<?php namespace App;\ndefine('DEBUG', true);", None)
        node = first_node(php_parser, source.text, NodeKind.DEFINE)

        reflection = ConstantToReflection()(Mock(), node, source)

        assert reflection.name == "DEBUG"
        assert reflection.namespace is None
        assert reflection.value_source == "true"
        assert reflection.is_define

    def test_define_with_namespaced_name(self, php_parser: PhpParser) -> None:
        source = SourceUnit('<?php define("App\\\\Config\\\\DEBUG", false);', None)
        node = first_node(php_parser, source.text, NodeKind.DEFINE)

        reflection = ConstantToReflection()(Mock(), node, source)

        assert reflection.name == "App\\Config\\DEBUG"
        assert reflection.namespace == "App\\Config"
        assert reflection.short_name == "DEBUG"


class TestDefaultNodeToReflection:
    def test_dispatches_by_kind(self, php_parser: PhpParser, config: StaticReflectConfig) -> None:
        source = SourceUnit("<?php class A {} function b() {} const C = 1;", None)
        statements = php_parser.parse(source.text)
        strategy = DefaultNodeToReflection(config=config)

        reflections = [
            strategy(Mock(), node, source)
            for node, kind in iter_classified(statements)
            if kind in strategy.supported_kinds
        ]

        assert [type(r) for r in reflections] == [
            ReflectionClass,
            ReflectionFunction,
            ReflectionConstant,
        ]

    def test_rejects_unsupported_kind(self, php_parser: PhpParser) -> None:
        source = SourceUnit("<?php $f = function () {};", None)
        node = first_node(php_parser, source.text, NodeKind.CLOSURE)

        with pytest.raises(StrategyError, match="closure"):
            DefaultNodeToReflection()(Mock(), node, source)

    def test_custom_strategies(self, php_parser: PhpParser) -> None:
        source = SourceUnit("<?php class A {}", None)
        node = first_node(php_parser, source.text, NodeKind.CLASS)
        strategy = DefaultNodeToReflection([FunctionToReflection()])

        assert strategy.supported_kinds == frozenset({NodeKind.FUNCTION})
        with pytest.raises(StrategyError):
            strategy(Mock(), node, source)
