# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type model builder: turns raw declarations into an immutable TypeModel.

The builder is the only place where names are resolved. Every type
reference's base name goes through the scalar mapper, every generated
identifier goes into a registry that is checked as it is filled, and every
reference is checked against the declared types. A failure raises before any
model is returned.
"""

from __future__ import annotations

from gqlgen.compiler.declarations import (
    DeclarationKind,
    RawDeclaration,
    RawField,
    RawSchema,
    SkippedConstruct,
)
from gqlgen.compiler.errors import SOURCE_MODEL, CollisionError, UnresolvedReferenceError
from gqlgen.compiler.mapper import BUILTIN_SCALARS, IdentifierStyle, ScalarMapper, to_identifier
from gqlgen.model.entities import ArgDef, EnumTypeDef, FieldDef, InputTypeDef, ObjectTypeDef, TypeModel
from gqlgen.model.types import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef, base_type

# ###############
# Public Interface
# ###############

DEFAULT_QUERY_ROOT = "Query"
DEFAULT_MUTATION_ROOT = "Mutation"


def build_type_model(schema: RawSchema, mapper: ScalarMapper) -> TypeModel:
    """Build the type model for one schema.

    Args:
        schema: Raw declarations from the SDL parser or the introspection decoder.
        mapper: Scalar overrides and defaults for this compilation.

    Returns:
        The TypeModel. Neither argument is modified.

    Raises:
        CollisionError: If two names map to the same identifier.
        UnresolvedReferenceError: If a type reference or root type is not declared.
    """
    return TypeModelBuilder(schema, mapper).build()


class TypeModelBuilder:
    """Builds a TypeModel and records the fields it had to drop.

    Under the skip policy, interfaces and unions are not part of the model,
    so a field whose type or argument types name one of them is dropped and
    reported in :attr:`dropped` instead of failing the build.
    """

    def __init__(self, schema: RawSchema, mapper: ScalarMapper) -> None:
        self._schema = schema
        self._source_kind = schema.source_kind or SOURCE_MODEL
        custom_scalars = [
            d.name for d in schema.of_kind(DeclarationKind.SCALAR) if d.name not in BUILTIN_SCALARS
        ]
        self._mapper = mapper.with_scalars(custom_scalars)
        self._custom_scalars = custom_scalars
        self._skipped_types = {s.name for s in schema.skipped if s.kind in ("interface", "union") and s.name}
        self.dropped: list[SkippedConstruct] = []

    def build(self) -> TypeModel:
        """Run all build steps and return the model."""
        self.dropped = []
        self._register_names()
        known = (
            BUILTIN_SCALARS
            | set(self._custom_scalars)
            | {d.name for d in self._schema.declarations if d.kind != DeclarationKind.SCALAR}
        )

        types: dict[str, ObjectTypeDef] = {}
        inputs: dict[str, InputTypeDef] = {}
        enums: dict[str, EnumTypeDef] = {}
        for decl in self._schema.declarations:
            if decl.kind == DeclarationKind.OBJECT:
                types[decl.name] = ObjectTypeDef(
                    name=decl.name,
                    identifier=to_identifier(decl.name, IdentifierStyle.TYPE_MEMBER),
                    fields=self._build_fields(decl, known),
                    description=decl.description,
                )
            elif decl.kind == DeclarationKind.INPUT:
                inputs[decl.name] = InputTypeDef(
                    name=decl.name,
                    identifier=to_identifier(decl.name, IdentifierStyle.TYPE_MEMBER),
                    fields=self._build_fields(decl, known),
                    description=decl.description,
                )
            elif decl.kind == DeclarationKind.ENUM:
                enums[decl.name] = EnumTypeDef(
                    name=decl.name,
                    identifier=to_identifier(decl.name, IdentifierStyle.TYPE_MEMBER),
                    values=decl.values,
                    description=decl.description,
                )

        query = self._resolve_root("query", self._schema.query_root or DEFAULT_QUERY_ROOT, types)
        if self._schema.mutation_root is None:
            mutation = ObjectTypeDef(name=DEFAULT_MUTATION_ROOT, identifier=DEFAULT_MUTATION_ROOT)
        else:
            mutation = self._resolve_root("mutation", self._schema.mutation_root, types)

        return TypeModel(
            types=types,
            inputs=inputs,
            enums=enums,
            scalars={name: self._mapper.resolve_scalar(name) for name in self._custom_scalars},
            query=query,
            mutation=mutation,
        )

    # ------------------------------------------------------------------
    # Name registry
    # ------------------------------------------------------------------

    def _register_names(self) -> None:
        """Register every type identifier in declaration order.

        Types, inputs and enums share one namespace. Scalars only take part in
        the duplicate-name check, since they produce no identifier.
        """
        identifiers: dict[str, str] = {}
        source_names: set[str] = set()
        for decl in self._schema.declarations:
            if decl.name in source_names and decl.name not in BUILTIN_SCALARS:
                raise CollisionError(
                    decl.name,
                    decl.name,
                    decl.name,
                    source_kind=self._source_kind,
                    location=decl.location,
                )
            source_names.add(decl.name)
            if decl.kind == DeclarationKind.SCALAR:
                continue
            identifier = to_identifier(decl.name, IdentifierStyle.TYPE_MEMBER)
            if identifier in identifiers:
                raise CollisionError(
                    identifiers[identifier],
                    decl.name,
                    identifier,
                    source_kind=self._source_kind,
                    location=decl.location,
                )
            identifiers[identifier] = decl.name

        if self._schema.mutation_root is None:
            # The synthesized empty mutation root shares the type namespace.
            identifier = to_identifier(DEFAULT_MUTATION_ROOT, IdentifierStyle.TYPE_MEMBER)
            if identifier in identifiers:
                declared = identifiers[identifier]
                raise CollisionError(
                    declared,
                    DEFAULT_MUTATION_ROOT,
                    identifier,
                    message=(
                        f"'{declared}' maps to identifier '{identifier}', which is reserved for the "
                        "empty mutation root of a schema without a mutation type"
                    ),
                    source_kind=self._source_kind,
                    location=self._location_of(declared),
                )

    def _location_of(self, name: str) -> str | None:
        for decl in self._schema.declarations:
            if decl.name == name:
                return decl.location
        return None

    # ------------------------------------------------------------------
    # Fields and arguments
    # ------------------------------------------------------------------

    def _build_fields(self, decl: RawDeclaration, known: set[str]) -> tuple[FieldDef, ...]:
        fields: list[FieldDef] = []
        identifiers: dict[str, str] = {}
        for raw in decl.fields:
            context = f"{decl.name}.{raw.name}"
            if self._references_skipped_type(raw):
                self.dropped.append(SkippedConstruct(kind="field", name=context, location=decl.location))
                continue

            identifier = to_identifier(raw.name, IdentifierStyle.TYPE_MEMBER)
            if identifier in identifiers:
                raise CollisionError(
                    identifiers[identifier],
                    raw.name,
                    identifier,
                    scope=f"type '{decl.name}'",
                    source_kind=self._source_kind,
                    location=decl.location,
                )
            identifiers[identifier] = raw.name

            args: list[ArgDef] = []
            arg_identifiers: dict[str, str] = {}
            for raw_arg in raw.args:
                arg_identifier = to_identifier(raw_arg.name, IdentifierStyle.LOCAL_VARIABLE)
                if arg_identifier in arg_identifiers:
                    raise CollisionError(
                        arg_identifiers[arg_identifier],
                        raw_arg.name,
                        arg_identifier,
                        scope=f"field '{context}'",
                        source_kind=self._source_kind,
                        location=decl.location,
                    )
                arg_identifiers[arg_identifier] = raw_arg.name
                args.append(
                    ArgDef(
                        name=raw_arg.name,
                        identifier=arg_identifier,
                        type=self._resolve_ref(raw_arg.type, known, f"{context}({raw_arg.name})", decl),
                        default_value=raw_arg.default_value,
                        description=raw_arg.description,
                    )
                )

            fields.append(
                FieldDef(
                    name=raw.name,
                    identifier=identifier,
                    type=self._resolve_ref(raw.type, known, context, decl),
                    args=tuple(args),
                    default_value=raw.default_value,
                    description=raw.description,
                )
            )
        return tuple(fields)

    def _references_skipped_type(self, raw: RawField) -> bool:
        if not self._skipped_types:
            return False
        names = {base_type(raw.type).name} | {base_type(a.type).name for a in raw.args}
        return bool(names & self._skipped_types)

    # ------------------------------------------------------------------
    # Type references
    # ------------------------------------------------------------------

    def _resolve_ref(self, ref: TypeRef, known: set[str], context: str, decl: RawDeclaration) -> TypeRef:
        """Rebuild *ref* with resolved target names, keeping the wrapping exactly."""
        if isinstance(ref, NonNullTypeRef):
            return NonNullTypeRef(of_type=self._resolve_ref(ref.of_type, known, context, decl))
        if isinstance(ref, ListTypeRef):
            return ListTypeRef(of_type=self._resolve_ref(ref.of_type, known, context, decl))
        if ref.name not in known:
            raise UnresolvedReferenceError(
                f"Type '{ref.name}' referenced by '{context}' is not defined",
                source_kind=self._source_kind,
                name=ref.name,
                location=decl.location,
            )
        return NamedTypeRef(name=ref.name, target=self._mapper.resolve_scalar(ref.name))

    def _resolve_root(self, operation: str, name: str, types: dict[str, ObjectTypeDef]) -> ObjectTypeDef:
        if name not in types:
            raise UnresolvedReferenceError(
                f"The {operation} root type '{name}' is not a declared object type",
                source_kind=self._source_kind,
                name=name,
            )
        return types[name]
