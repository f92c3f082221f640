# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the SDL parser."""

import pytest

from gqlgen.compiler.declarations import (
    DeclarationKind,
    RawArgument,
    RawDeclaration,
    RawField,
    RawSchema,
    SkippedConstruct,
    UnsupportedPolicy,
)
from gqlgen.compiler.errors import SchemaSyntaxError, UnsupportedConstructError
from gqlgen.compiler.parser import parse, parse_value_literal
from gqlgen.model.types import ListTypeRef, NamedTypeRef, NonNullTypeRef

# ###############
# Test Helpers
# ###############


def _named(name: str) -> NamedTypeRef:
    return NamedTypeRef(name=name)


def _nn(inner: NamedTypeRef | ListTypeRef) -> NonNullTypeRef:
    return NonNullTypeRef(of_type=inner)


def _decl(schema: RawSchema, name: str) -> RawDeclaration:
    """Return the declaration called *name*, failing the test if it is absent."""
    matches = [d for d in schema.declarations if d.name == name]
    assert len(matches) == 1, f"expected one declaration named {name!r}"
    return matches[0]


def _field_type(sdl_type: str):
    """Parse a one-field object and return the field's type reference."""
    schema = parse(f"type Query {{ f: {sdl_type} }}")
    return schema.declarations[0].fields[0].type


# ###############
# Empty Input
# ###############


class TestEmptyInput:
    def test_empty_source_is_rejected(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="Unexpected <EOF>") as exc_info:
            parse("")
        assert (exc_info.value.line, exc_info.value.column) == (1, 1)

    def test_only_comments_is_rejected(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="<EOF>") as exc_info:
            parse("# nothing here\n# at all\n")
        assert exc_info.value.line == 3

    def test_comments_and_byte_order_mark_are_ignored(self) -> None:
        schema = parse("\ufeff# leading comment\ntype Query { a: Int } # trailing\n")
        assert [d.name for d in schema.declarations] == ["Query"]

    def test_source_kind_is_sdl(self) -> None:
        assert parse("type Query { a: Int }").source_kind == "sdl"


# ###############
# Object Types
# ###############


class TestObjectTypes:
    def test_simple_object(self) -> None:
        schema = parse("type Query { hello: String }")
        assert schema.declarations == (
            RawDeclaration(
                kind=DeclarationKind.OBJECT,
                name="Query",
                fields=(RawField(name="hello", type=_named("String")),),
            ),
        )

    def test_object_without_fields(self) -> None:
        decl = parse("type Empty").declarations[0]
        assert decl.kind == DeclarationKind.OBJECT
        assert decl.fields == ()

    def test_field_order_is_preserved(self) -> None:
        decl = parse("type T { c: Int b: Int a: Int }").declarations[0]
        assert [f.name for f in decl.fields] == ["c", "b", "a"]

    def test_commas_between_fields_are_ignored(self) -> None:
        decl = parse("type T { a: Int, b: Int, }").declarations[0]
        assert [f.name for f in decl.fields] == ["a", "b"]

    def test_field_arguments(self) -> None:
        decl = parse("type Query { user(id: ID!, verbose: Boolean = false): User }").declarations[0]
        assert decl.fields[0].args == (
            RawArgument(name="id", type=_nn(_named("ID"))),
            RawArgument(name="verbose", type=_named("Boolean"), default_value="false"),
        )

    def test_descriptions(self) -> None:
        source = '''
        """A user account."""
        type User {
          "The login name."
          name: String
        }
        '''
        decl = parse(source).declarations[0]
        assert decl.description == "A user account."
        assert decl.fields[0].description == "The login name."

    def test_argument_description(self) -> None:
        decl = parse('type Query { f("how many" n: Int): Int }').declarations[0]
        assert decl.fields[0].args[0].description == "how many"

    def test_location_is_recorded(self) -> None:
        schema = parse("\n\n  type Query { a: Int }")
        assert schema.declarations[0].location == "line 3, column 3"

    def test_deprecated_directive_is_accepted(self) -> None:
        schema = parse('type Query { old: Int @deprecated(reason: "use new") new: Int }')
        assert [f.name for f in schema.declarations[0].fields] == ["old", "new"]
        assert schema.skipped == ()


# ###############
# Type References
# ###############


class TestTypeReferences:
    def test_named(self) -> None:
        assert _field_type("Int") == _named("Int")

    def test_non_null(self) -> None:
        assert _field_type("Int!") == _nn(_named("Int"))

    def test_list(self) -> None:
        assert _field_type("[Int]") == ListTypeRef(of_type=_named("Int"))

    def test_non_null_list_of_non_null(self) -> None:
        assert _field_type("[String!]!") == _nn(ListTypeRef(of_type=_nn(_named("String"))))

    def test_nested_list(self) -> None:
        assert _field_type("[[Int!]]!") == _nn(ListTypeRef(of_type=ListTypeRef(of_type=_nn(_named("Int")))))

    def test_nested_list_all_non_null(self) -> None:
        assert _field_type("[[Int!]!]!") == _nn(ListTypeRef(of_type=_nn(ListTypeRef(of_type=_nn(_named("Int"))))))

    def test_deep_nesting(self) -> None:
        ref = _field_type("[[[[[Int]]]]]")
        depth = 0
        while isinstance(ref, ListTypeRef):
            ref = ref.of_type
            depth += 1
        assert depth == 5
        assert ref == _named("Int")

    def test_double_bang_is_rejected(self) -> None:
        with pytest.raises(SchemaSyntaxError, match='found "!"') as exc_info:
            parse("type Query { f: Int!! }")
        assert exc_info.value.column == 21

    def test_unclosed_list(self) -> None:
        with pytest.raises(SchemaSyntaxError):
            parse("type Query { f: [Int }")


# ###############
# Input, Enum and Scalar Types
# ###############


class TestInputEnumScalar:
    def test_input_with_default_values(self) -> None:
        source = 'input Filter { limit: Int = 10 name: String = "x" tags: [String] = ["a", "b"] }'
        decl = parse(source).declarations[0]
        assert decl.kind == DeclarationKind.INPUT
        assert [(f.name, f.default_value) for f in decl.fields] == [
            ("limit", "10"),
            ("name", '"x"'),
            ("tags", '["a", "b"]'),
        ]

    def test_input_object_default(self) -> None:
        decl = parse("input I { p: Point = { x: 1, y: 2 } }").declarations[0]
        assert decl.fields[0].default_value == parse_value_literal("{x:1,y:2}")
        assert decl.fields[0].default_value.startswith("{")

    def test_enum_values(self) -> None:
        decl = parse("enum Color { RED GREEN BLUE }").declarations[0]
        assert decl.kind == DeclarationKind.ENUM
        assert decl.values == ("RED", "GREEN", "BLUE")

    def test_enum_value_descriptions_and_deprecation(self) -> None:
        decl = parse('enum E { "first" A B @deprecated }').declarations[0]
        assert decl.values == ("A", "B")

    @pytest.mark.parametrize("reserved", ["true", "false", "null"])
    def test_reserved_enum_values(self, reserved: str) -> None:
        with pytest.raises(SchemaSyntaxError, match="reserved"):
            parse(f"enum E {{ {reserved} }}")

    def test_duplicate_enum_value(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="more than once") as exc_info:
            parse("enum E { A A }")
        assert exc_info.value.location == "line 1, column 12"

    def test_scalar(self) -> None:
        decl = parse("scalar DateTime").declarations[0]
        assert decl == RawDeclaration(kind=DeclarationKind.SCALAR, name="DateTime")

    def test_specified_by_directive_is_accepted(self) -> None:
        schema = parse('scalar URL @specifiedBy(url: "https://example.com")')
        assert schema.skipped == ()


# ###############
# Schema Block
# ###############


class TestSchemaBlock:
    def test_custom_root_names(self) -> None:
        schema = parse("schema { query: Root mutation: Change } type Root { a: Int } type Change { b: Int }")
        assert schema.query_root == "Root"
        assert schema.mutation_root == "Change"

    def test_default_roots_without_schema_block(self) -> None:
        schema = parse("type Query { a: Int } type Mutation { b: Int }")
        assert schema.query_root == "Query"
        assert schema.mutation_root == "Mutation"

    def test_mutation_root_absent(self) -> None:
        assert parse("type Query { a: Int }").mutation_root is None

    def test_schema_block_without_mutation(self) -> None:
        schema = parse("schema { query: Q } type Q { a: Int } type Mutation { b: Int }")
        assert schema.mutation_root is None

    def test_duplicate_root_operation(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="more than once"):
            parse("schema { query: A query: B }")

    def test_duplicate_schema_block(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="more than once"):
            parse("schema { query: A } schema { query: B }")

    def test_unknown_root_operation(self) -> None:
        with pytest.raises(SchemaSyntaxError, match='Unexpected Name "lookup"'):
            parse("schema { lookup: A }")

    def test_subscription_root_is_skipped(self) -> None:
        schema = parse("schema { query: Q subscription: S } type Q { a: Int }")
        assert schema.skipped == (SkippedConstruct(kind="subscription", name="S"),)


# ###############
# Unsupported Constructs
# ###############


class TestUnsupportedConstructs:
    SOURCE = """
    interface Node { id: ID! }
    union SearchResult = | User | Post
    directive @auth(role: String) repeatable on FIELD_DEFINITION | OBJECT
    type User implements Node @key(fields: "id") { id: ID! }
    type Post { id: ID! }
    extend type User { age: Int }
    """

    def test_skip_policy_records_constructs(self) -> None:
        schema = parse(self.SOURCE)
        assert [(s.kind, s.name) for s in schema.skipped] == [
            ("interface", "Node"),
            ("union", "SearchResult"),
            ("directive definition", "@auth"),
            ("implements", "Node"),
            ("directive", "@key"),
            ("extend type", "User"),
        ]

    def test_skip_policy_keeps_supported_declarations(self) -> None:
        schema = parse(self.SOURCE)
        assert [d.name for d in schema.declarations] == ["User", "Post"]
        assert [f.name for f in _decl(schema, "User").fields] == ["id"]

    def test_skipped_construct_has_location(self) -> None:
        schema = parse(self.SOURCE)
        assert schema.skipped[0].location == "line 2, column 5"
        assert "Skipped unsupported interface 'Node' at line 2, column 5" == schema.skipped[0].message

    def test_fail_policy_raises_on_first_construct(self) -> None:
        with pytest.raises(UnsupportedConstructError) as exc_info:
            parse(self.SOURCE, policy=UnsupportedPolicy.FAIL)
        assert exc_info.value.construct == "interface"
        assert exc_info.value.name == "Node"
        assert exc_info.value.location == "line 2, column 5"

    def test_fail_policy_on_directive_usage(self) -> None:
        with pytest.raises(UnsupportedConstructError, match="@cached"):
            parse("type Query { a: Int @cached }", policy=UnsupportedPolicy.FAIL)

    def test_fail_policy_accepts_core_directives(self) -> None:
        schema = parse("type Query { a: Int @deprecated }", policy=UnsupportedPolicy.FAIL)
        assert schema.skipped == ()

    def test_extension_does_not_change_declarations(self) -> None:
        schema = parse("type Query { a: Int } extend type Query { b: Int }")
        assert [f.name for f in schema.declarations[0].fields] == ["a"]

    def test_extend_schema(self) -> None:
        schema = parse("type Query { a: Int } extend schema { mutation: M }")
        assert schema.mutation_root is None
        assert schema.skipped == (SkippedConstruct(kind="extend schema", name=None),)

    def test_malformed_union_is_still_a_syntax_error(self) -> None:
        with pytest.raises(SchemaSyntaxError):
            parse("union U = ")


# ###############
# Syntax Errors
# ###############


class TestSyntaxErrors:
    def test_missing_colon(self) -> None:
        with pytest.raises(SchemaSyntaxError, match='Expected ":", found Name "String"') as exc_info:
            parse("type Query {\n  hello String\n}")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 9

    def test_unterminated_type(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="<EOF>"):
            parse("type Query { a: Int")

    def test_missing_type_name(self) -> None:
        with pytest.raises(SchemaSyntaxError):
            parse("type { a: Int }")

    def test_unknown_keyword(self) -> None:
        with pytest.raises(SchemaSyntaxError, match='Unexpected Name "struct"'):
            parse("struct Foo { a: Int }")

    @pytest.mark.parametrize("source", ["query { a }", "{ a }", "fragment F on Q { a }"])
    def test_executable_definitions_are_rejected(self, source: str) -> None:
        with pytest.raises(SchemaSyntaxError, match="Executable definition"):
            parse(source)

    def test_variable_in_default_value(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="variable"):
            parse("type Query { f(a: Int = $x): Int }")

    def test_extend_with_description(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="description"):
            parse('"doc" extend type Query { a: Int }')


# ###############
# Value Literals
# ###############


class TestValueLiterals:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("42", "42"),
            ("-7", "-7"),
            ("true", "true"),
            ("null", "null"),
            ("RED", "RED"),
            ('"caf\\u00e9"', '"café"'),
            ('"""\n    block\n    string\n"""', '"block\\nstring"'),
            ("[1,2 ,3]", "[1, 2, 3]"),
            ('["a" "b"]', '["a", "b"]'),
            ("[]", "[]"),
        ],
    )
    def test_canonical_form(self, text: str, expected: str) -> None:
        assert parse_value_literal(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1.5", "1.5"),
            ("1.50", "1.5"),
            ("2.0", "2"),
            ("-1.5e3", "-1500"),
            ("0.1", "0.1"),
            ("1.25E-2", "0.0125"),
        ],
    )
    def test_floats_are_normalized(self, text: str, expected: str) -> None:
        assert parse_value_literal(text) == expected

    def test_object_spacing_does_not_matter(self) -> None:
        assert parse_value_literal("{a:1,b:[x]}") == parse_value_literal("{ a: 1, b: [ x ] }")

    def test_nested_floats_are_normalized(self) -> None:
        assert parse_value_literal("{ratio: [1.50, 2.0]}") == parse_value_literal("{ratio: [1.5, 2]}")

    def test_sdl_default_uses_canonical_form(self) -> None:
        decl = parse('input I { a: Float = 1.50 b: String = """x""" }').declarations[0]
        assert [f.default_value for f in decl.fields] == ["1.5", '"x"']

    def test_trailing_tokens_are_rejected(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="Expected <EOF>") as exc_info:
            parse_value_literal("1 2")
        assert exc_info.value.column == 3

    def test_empty_text_is_rejected(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="Unexpected <EOF>"):
            parse_value_literal("")

    def test_variables_are_rejected(self) -> None:
        with pytest.raises(SchemaSyntaxError, match="variable"):
            parse_value_literal("$limit")
