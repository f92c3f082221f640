# Copyright 2026 gqlgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the gqlgen command-line interface."""

import argparse
import sys
from pathlib import Path

from gqlgen.compiler.artifact import write_artifact
from gqlgen.compiler.build import CompileResult, compile_schema
from gqlgen.compiler.declarations import UnsupportedPolicy
from gqlgen.compiler.errors import CompileError
from gqlgen.compiler.mapper import parse_mapping_argument
from gqlgen.config.settings import CONFIG_FILE_NAME, DEFAULT_OUTPUT, ConfigError, GeneratorConfig, load_config
from gqlgen.loader.source import SourceLoadError, load_source
from gqlgen.model.entities import ObjectTypeDef, TypeModel
from gqlgen.model.types import render_type_ref

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the gqlgen CLI."""
    parser = argparse.ArgumentParser(
        prog="gqlgen",
        description="gqlgen: compile a GraphQL schema into a canonical type model",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # compile subcommand
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile a schema and write the type model artifact",
        description="Compile an SDL file, introspection JSON file or GraphQL endpoint into a type model.",
    )
    _add_source_arguments(compile_parser)
    compile_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"Path of the model artifact to write (default: from config, else {DEFAULT_OUTPUT})",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the compiled type model",
        description="Compile a schema and print its types, inputs, enums and root fields.",
    )
    _add_source_arguments(show_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_source_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "source",
        help="Path to a GraphQL schema file (.graphql SDL or .json introspection) or an http(s) endpoint",
    )
    subparser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    subparser.add_argument(
        "-m",
        "--scalar-mapping",
        default=None,
        help='Map schema scalar types to target types, e.g. "ID=Guid,DateTime=DateTime"',
    )
    subparser.add_argument(
        "-H",
        "--header",
        default=None,
        help='Headers for the introspection endpoint, e.g. "Authorization=Bearer abc,X-API-Key=xyz"',
    )
    subparser.add_argument(
        "--fail-on-unsupported",
        action="store_true",
        help="Fail on interfaces, unions and custom directives instead of skipping them",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "compile":
        return _cmd_compile(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load the explicit or the default config file and apply command-line overrides."""
    if args.config is not None:
        config = load_config(Path(args.config))
    elif Path(CONFIG_FILE_NAME).exists():
        config = load_config(Path(CONFIG_FILE_NAME))
    else:
        config = GeneratorConfig()

    config.scalar_mapping.update(parse_mapping_argument(args.scalar_mapping))
    config.headers.update(parse_mapping_argument(args.header))
    if args.fail_on_unsupported:
        config.unsupported_constructs = UnsupportedPolicy.FAIL
    if getattr(args, "output", None):
        config.output = args.output
    return config


def _compile(args: argparse.Namespace) -> tuple[GeneratorConfig, CompileResult] | None:
    """Load and compile the source; print errors and return None on failure."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    print(f"Loading {args.source}...")
    try:
        source = load_source(args.source, config.headers)
        result = compile_schema(
            source.text,
            is_introspection=source.is_introspection,
            overrides=config.scalar_mapping,
            fallback=config.default_scalar,
            policy=config.unsupported_constructs,
        )
    except (SourceLoadError, CompileError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    for skipped in result.skipped:
        print(f"Warning: {skipped.message}")
    return config, result


def _cmd_compile(args: argparse.Namespace) -> int:
    """Handle the compile subcommand."""
    compiled = _compile(args)
    if compiled is None:
        return 1

    config, result = compiled
    model = result.model
    output = Path(config.output)
    try:
        write_artifact(model, output)
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return 1

    print(_summary(model))
    print(f"Wrote type model to '{output}'.")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    compiled = _compile(args)
    if compiled is None:
        return 1

    model = compiled[1].model
    print(_summary(model))
    for type_def in model.types.values():
        _print_object("type", type_def)
    for input_def in model.inputs.values():
        print(f"\ninput {input_def.name} -> {input_def.identifier}")
        for f in input_def.fields:
            default = f" = {f.default_value}" if f.default_value is not None else ""
            print(f"  {f.name}: {render_type_ref(f.type)}{default} -> {render_type_ref(f.type, target=True)}")
    for enum_def in model.enums.values():
        print(f"\nenum {enum_def.name} -> {enum_def.identifier}: {', '.join(enum_def.values)}")
    for name, target in model.scalars.items():
        print(f"\nscalar {name} -> {target}")
    return 0


def _print_object(keyword: str, type_def: ObjectTypeDef) -> None:
    print(f"\n{keyword} {type_def.name} -> {type_def.identifier}")
    for f in type_def.fields:
        args = ""
        if f.args:
            args = "(" + ", ".join(f"{a.name}: {render_type_ref(a.type)}" for a in f.args) + ")"
        print(f"  {f.name}{args}: {render_type_ref(f.type)} -> {render_type_ref(f.type, target=True)}")


def _summary(model: TypeModel) -> str:
    return (
        f"{len(model.types)} type(s), {len(model.inputs)} input(s), {len(model.enums)} enum(s); "
        f"query '{model.query.name}' has {len(model.query.fields)} field(s), "
        f"mutation '{model.mutation.name}' has {len(model.mutation.fields)} field(s)."
    )
