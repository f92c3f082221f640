# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""GraphQL schema definition language (SDL) front end.

SDL text is parsed into a graphql-core document, and the document's
definitions are walked into a :class:`RawSchema`. Object, input, enum and
scalar definitions and the ``schema`` block are processed; interfaces,
unions, directive definitions, type extensions and non-core directive usages
are recognized and handled according to the caller's
:class:`UnsupportedPolicy`.
"""

from __future__ import annotations

import math

from graphql import GraphQLSyntaxError
from graphql.language import (
    DirectiveDefinitionNode,
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    ExecutableDefinitionNode,
    FieldDefinitionNode,
    FloatValueNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    ListValueNode,
    Node,
    NonNullTypeNode,
    ObjectFieldNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ObjectValueNode,
    OperationDefinitionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    StringValueNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    ValueNode,
    parse_const_value,
    print_ast,
)
from graphql.language import parse as parse_document

from gqlgen.compiler.declarations import (
    DeclarationKind,
    RawArgument,
    RawDeclaration,
    RawField,
    RawSchema,
    SkippedConstruct,
    UnsupportedPolicy,
    record_unsupported,
)
from gqlgen.compiler.errors import SOURCE_SDL, SchemaSyntaxError
from gqlgen.model.types import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef

# ###############
# Public Interface
# ###############

# Directives built into GraphQL itself; their usages are accepted silently.
CORE_DIRECTIVES: frozenset[str] = frozenset({"deprecated", "specifiedBy", "include", "skip", "oneOf"})


def parse(source: str, *, policy: UnsupportedPolicy = UnsupportedPolicy.SKIP) -> RawSchema:
    """Parse SDL text into raw declarations.

    Args:
        source: The full SDL text.
        policy: How to treat interfaces, unions, directive definitions, type
            extensions, subscriptions and non-core directive usages.

    Returns:
        A RawSchema with declarations in source order, the declared root
        type names, and the constructs that were skipped.

    Raises:
        SchemaSyntaxError: If the source is not valid SDL.
        UnsupportedConstructError: If *policy* is FAIL and an unsupported
            construct is present.
    """
    try:
        document = parse_document(source, no_location=False)
    except GraphQLSyntaxError as exc:
        raise _from_graphql_error(exc) from exc
    return _DocumentWalker(policy).walk(document)


def parse_value_literal(text: str) -> str:
    """Parse a single constant GraphQL value and return its canonical printed form.

    Used to normalize default values so that ``[1,2]`` and ``[1, 2]``, or
    ``1.50`` and ``1.5``, compare equal regardless of the encoding they were
    read from.

    >>> parse_value_literal("[1,2 ,3]")
    '[1, 2, 3]'
    >>> parse_value_literal("1.50")
    '1.5'

    Raises:
        SchemaSyntaxError: If *text* is not exactly one constant value.
    """
    try:
        value = parse_const_value(text)
    except GraphQLSyntaxError as exc:
        raise _from_graphql_error(exc) from exc
    return print_value(value)


def print_value(node: ValueNode) -> str:
    """Print a constant value node in canonical form.

    Block strings print as regular strings, and float literals print the way
    a GraphQL server serializes the parsed number (``1.50`` as ``1.5``,
    ``2.0`` as ``2``).
    """
    return print_ast(_canonical_value(node))


# ################
# Implementation
# ################

_DEFAULT_QUERY_ROOT = "Query"
_DEFAULT_MUTATION_ROOT = "Mutation"

_EXTENSION_KEYWORDS: dict[type[Node], str] = {
    SchemaExtensionNode: "schema",
    ScalarTypeExtensionNode: "scalar",
    ObjectTypeExtensionNode: "type",
    InterfaceTypeExtensionNode: "interface",
    UnionTypeExtensionNode: "union",
    EnumTypeExtensionNode: "enum",
    InputObjectTypeExtensionNode: "input",
}


def _from_graphql_error(exc: GraphQLSyntaxError) -> SchemaSyntaxError:
    location = exc.locations[0] if exc.locations else None
    if location is None:
        return SchemaSyntaxError(exc.description, 1, 1)
    return SchemaSyntaxError(exc.description, location.line, location.column)


def _position(node: Node) -> tuple[int, int]:
    if node.loc is None:
        return 1, 1
    token = node.loc.start_token
    return token.line, token.column


def _location(node: Node) -> str:
    line, column = _position(node)
    return f"line {line}, column {column}"


def _syntax_error(message: str, node: Node) -> SchemaSyntaxError:
    line, column = _position(node)
    return SchemaSyntaxError(message, line, column)


def _description(node: Node) -> str | None:
    description = getattr(node, "description", None)
    return description.value if description is not None else None


def _canonical_number(text: str) -> str:
    number = float(text)
    if not math.isfinite(number):
        return text
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    return repr(number)


def _canonical_value(node: ValueNode) -> ValueNode:
    """Rebuild *node* without block strings and with normalized floats."""
    if isinstance(node, FloatValueNode):
        return FloatValueNode(value=_canonical_number(node.value))
    if isinstance(node, StringValueNode):
        return StringValueNode(value=node.value)
    if isinstance(node, ListValueNode):
        return ListValueNode(values=tuple(_canonical_value(v) for v in node.values))
    if isinstance(node, ObjectValueNode):
        return ObjectValueNode(
            fields=tuple(ObjectFieldNode(name=f.name, value=_canonical_value(f.value)) for f in node.fields)
        )
    return node


class _DocumentWalker:
    """Walks the definitions of one parsed SDL document."""

    def __init__(self, policy: UnsupportedPolicy) -> None:
        self._policy = policy
        self._declarations: list[RawDeclaration] = []
        self._skipped: list[SkippedConstruct] = []
        self._roots: dict[str, str] | None = None

    def walk(self, document: DocumentNode) -> RawSchema:
        """Walk every definition of *document* and return a RawSchema."""
        for definition in document.definitions:
            self._walk_definition(definition)

        if self._roots is not None:
            query_root = self._roots.get("query")
            mutation_root = self._roots.get("mutation")
        else:
            # Without a schema block the conventional root names apply if such types exist.
            object_names = {d.name for d in self._declarations if d.kind == DeclarationKind.OBJECT}
            query_root = _DEFAULT_QUERY_ROOT
            mutation_root = _DEFAULT_MUTATION_ROOT if _DEFAULT_MUTATION_ROOT in object_names else None

        return RawSchema(
            declarations=tuple(self._declarations),
            query_root=query_root,
            mutation_root=mutation_root,
            skipped=tuple(self._skipped),
            source_kind=SOURCE_SDL,
        )

    def _unsupported(self, construct: str, name: str | None, node: Node) -> None:
        record_unsupported(
            self._policy,
            self._skipped,
            construct,
            name,
            source_kind=SOURCE_SDL,
            location=_location(node),
        )

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    def _walk_definition(self, node: Node) -> None:
        if isinstance(node, SchemaDefinitionNode):
            self._walk_schema_definition(node)
        elif isinstance(node, ScalarTypeDefinitionNode):
            self._check_directives(node.directives)
            self._declarations.append(self._declaration(DeclarationKind.SCALAR, node))
        elif isinstance(node, ObjectTypeDefinitionNode):
            for interface in node.interfaces or ():
                self._unsupported("implements", interface.name.value, interface)
            self._check_directives(node.directives)
            self._declarations.append(
                self._declaration(DeclarationKind.OBJECT, node, fields=self._fields(node.fields))
            )
        elif isinstance(node, InputObjectTypeDefinitionNode):
            self._check_directives(node.directives)
            fields = tuple(
                RawField(name=a.name, type=a.type, default_value=a.default_value, description=a.description)
                for a in self._input_values(node.fields)
            )
            self._declarations.append(self._declaration(DeclarationKind.INPUT, node, fields=fields))
        elif isinstance(node, EnumTypeDefinitionNode):
            self._check_directives(node.directives)
            self._declarations.append(self._declaration(DeclarationKind.ENUM, node, values=self._enum_values(node)))
        elif isinstance(node, InterfaceTypeDefinitionNode):
            self._unsupported("interface", node.name.value, node)
        elif isinstance(node, UnionTypeDefinitionNode):
            self._unsupported("union", node.name.value, node)
        elif isinstance(node, DirectiveDefinitionNode):
            self._unsupported("directive definition", f"@{node.name.value}", node)
        elif type(node) in _EXTENSION_KEYWORDS:
            name = getattr(node, "name", None)
            self._unsupported(f"extend {_EXTENSION_KEYWORDS[type(node)]}", name.value if name else None, node)
        elif isinstance(node, OperationDefinitionNode):
            raise _syntax_error(f"Executable definition '{node.operation.value}' is not allowed in a schema", node)
        elif isinstance(node, ExecutableDefinitionNode):
            raise _syntax_error("Executable definition 'fragment' is not allowed in a schema", node)
        else:
            raise _syntax_error(f"Unexpected definition of kind '{node.kind}'", node)

    def _declaration(
        self,
        kind: DeclarationKind,
        node: Node,
        *,
        fields: tuple[RawField, ...] = (),
        values: tuple[str, ...] = (),
    ) -> RawDeclaration:
        return RawDeclaration(
            kind=kind,
            name=node.name.value,
            fields=fields,
            values=values,
            description=_description(node),
            location=_location(node),
        )

    def _walk_schema_definition(self, node: SchemaDefinitionNode) -> None:
        """Record the root operation types of the ``schema`` block."""
        if self._roots is not None:
            raise _syntax_error("Schema definition is declared more than once", node)
        self._check_directives(node.directives)
        roots: dict[str, str] = {}
        for operation_type in node.operation_types:
            operation = operation_type.operation.value
            if operation in roots:
                raise _syntax_error(f"Root operation '{operation}' is declared more than once", operation_type)
            roots[operation] = operation_type.type.name.value
            if operation == "subscription":
                self._unsupported("subscription", roots[operation], operation_type)
        self._roots = roots

    def _enum_values(self, node: EnumTypeDefinitionNode) -> tuple[str, ...]:
        values: list[str] = []
        for value_node in node.values or ():
            value = value_node.name.value
            if value in values:
                raise _syntax_error(
                    f"Enum value {value!r} is declared more than once in '{node.name.value}'",
                    value_node,
                )
            values.append(value)
            self._check_directives(value_node.directives)
        return tuple(values)

    # ------------------------------------------------------------------
    # Fields and input values
    # ------------------------------------------------------------------

    def _fields(self, nodes: tuple[FieldDefinitionNode, ...] | None) -> tuple[RawField, ...]:
        fields: list[RawField] = []
        for node in nodes or ():
            args = self._input_values(node.arguments)
            self._check_directives(node.directives)
            fields.append(
                RawField(
                    name=node.name.value,
                    type=_type_ref(node.type),
                    args=args,
                    description=_description(node),
                )
            )
        return tuple(fields)

    def _input_values(self, nodes: tuple[InputValueDefinitionNode, ...] | None) -> tuple[RawArgument, ...]:
        values: list[RawArgument] = []
        for node in nodes or ():
            default_value = print_value(node.default_value) if node.default_value is not None else None
            self._check_directives(node.directives)
            values.append(
                RawArgument(
                    name=node.name.value,
                    type=_type_ref(node.type),
                    default_value=default_value,
                    description=_description(node),
                )
            )
        return tuple(values)

    def _check_directives(self, directives: tuple[DirectiveNode, ...] | None) -> None:
        for directive in directives or ():
            if directive.name.value not in CORE_DIRECTIVES:
                self._unsupported("directive", f"@{directive.name.value}", directive)


def _type_ref(node: TypeNode) -> TypeRef:
    """Convert a type node to a TypeRef, keeping the list and non-null wrapping."""
    if isinstance(node, NonNullTypeNode):
        return NonNullTypeRef(of_type=_type_ref(node.type))
    if isinstance(node, ListTypeNode):
        return ListTypeRef(of_type=_type_ref(node.type))
    return NamedTypeRef(name=node.name.value)
