# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the schemadts command-line interface."""

import argparse
import sys
from collections import Counter
from pathlib import Path

from schemadts.compiler.artifact import serialize
from schemadts.compiler.printer import render
from schemadts.compiler.transform import build_registry, generate
from schemadts.config.settings import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config
from schemadts.logs import configure_logging, get_logger
from schemadts.triples.nodes import group_by_subject
from schemadts.triples.reader import TripleSourceError, TripleSyntaxError, read_ntriples
from schemadts.ts.registry import GraphError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the schemadts CLI."""
    parser = argparse.ArgumentParser(
        prog="schemadts",
        description="schemadts: generate TypeScript definitions from Schema.org N-Triples",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate type definitions from an N-Triples file",
        description="Read an N-Triples schema and write TypeScript definitions or a JSON artifact.",
    )
    generate_parser.add_argument("input", help="Path to the .nt schema file")
    generate_parser.add_argument(
        "-o",
        "--output",
        help="File to write to (default: standard output)",
    )
    generate_parser.add_argument(
        "--format",
        choices=("ts", "json"),
        default="ts",
        help="Output format (default: ts)",
    )
    generate_parser.add_argument(
        "--include-deprecated-properties",
        action="store_true",
        help="Keep superseded properties in the emitted records",
    )
    _add_config_argument(generate_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that a schema links into a consistent class graph",
        description="Build the class graph from an N-Triples file and report what it contains.",
    )
    check_parser.add_argument("input", help="Path to the .nt schema file")
    _add_config_argument(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

logger = get_logger(__name__)


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        help=f"Path to the configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load the configuration named on the command line, or the default file if present."""
    if args.config is not None:
        return load_config(Path(args.config))
    default = Path.cwd() / CONFIG_FILE_NAME
    if default.exists():
        return load_config(default)
    return GeneratorConfig()


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    configure_logging(config.log_level, "json" if config.log_format == "json" else "console")

    if args.include_deprecated_properties:
        config.skip_deprecated_properties = False

    source = Path(args.input)
    if not source.exists():
        print(f"Error: input file '{source}' does not exist.", file=sys.stderr)
        return 1

    try:
        triples = read_ntriples(source)
        declarations = generate(triples, config.to_options())
    except TripleSyntaxError as exc:
        print(f"Error: syntax error in '{source}': {exc}", file=sys.stderr)
        return 1
    except TripleSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except GraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    text = serialize(declarations) if args.format == "json" else render(declarations)
    if args.output is None:
        sys.stdout.write(text)
    else:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        logger.info("output_written", path=str(output), declarations=len(declarations))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    configure_logging(config.log_level, "json" if config.log_format == "json" else "console")

    source = Path(args.input)
    if not source.exists():
        print(f"Error: input file '{source}' does not exist.", file=sys.stderr)
        return 1

    try:
        registry = build_registry(group_by_subject(read_ntriples(source)), config.to_options())
    except TripleSyntaxError as exc:
        print(f"Error: syntax error in '{source}': {exc}", file=sys.stderr)
        return 1
    except TripleSourceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except GraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    kinds = Counter(entity.kind.value for entity in registry)
    deprecated = sum(1 for entity in registry if entity.deprecated)
    print(f"Checked '{source}': {len(registry)} entities.")
    for kind, count in sorted(kinds.items()):
        print(f"  {kind}: {count}")
    print(f"  deprecated: {deprecated}")
    print("No issues found.")
    return 0
