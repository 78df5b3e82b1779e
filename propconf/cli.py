"""
Configuration Check Command.

Builds a property registry from a declaration manifest, loads the given
"name=value" tokens against it, and prints every naming conflict and load
problem found.

Usage:
    propconf-check --manifest config/properties.yaml com.example.Server.PORT=8080
    propconf-check --manifest config/properties.yaml --naming as-is --format yaml port=80
    propconf-check --manifest config/properties.json --delimiter : com.example.Server.PORT:8080

Exit status: 0 when clean, 1 when conflicts or problems were found,
2 when the manifest cannot be loaded.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from loguru import logger

from propconf.declarations import DeclarationError, DeclarationLoader
from propconf.load import StringArgumentLoader
from propconf.naming import NAMING_STRATEGIES
from propconf.registry import PropertyRegistry
from propconf.reporting import ProblemReport

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_BAD_MANIFEST = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the configuration check."""
    parser = argparse.ArgumentParser(
        prog="propconf-check",
        description="Check configuration tokens against declared properties",
    )
    parser.add_argument(
        "--manifest",
        required=True,
        help="Path to the property declaration manifest (.yaml, .yml or .json)",
    )
    parser.add_argument(
        "--naming",
        choices=sorted(NAMING_STRATEGIES),
        default="case-insensitive",
        help="Naming strategy (default: case-insensitive)",
    )
    parser.add_argument(
        "--delimiter",
        default=StringArgumentLoader.KVP_DELIMITER,
        help=f"Name/value delimiter (default: '{StringArgumentLoader.KVP_DELIMITER}')",
    )
    parser.add_argument(
        "--format",
        choices=["text", "yaml"],
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="Configuration tokens, e.g. com.example.Server.PORT=8080",
    )
    args = parser.parse_args(argv)
    if not args.delimiter:
        parser.error("--delimiter must not be empty")
    return args


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the configuration check."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        groups = DeclarationLoader().load(args.manifest)
    except (FileNotFoundError, DeclarationError) as e:
        logger.error(f"[Check] Cannot load manifest: {e}")
        return EXIT_BAD_MANIFEST

    registry = PropertyRegistry.build(groups, naming=NAMING_STRATEGIES[args.naming]())
    values = StringArgumentLoader(
        args.tokens, delimiter=args.delimiter, name="command line"
    ).load(registry)

    report = ProblemReport().add_registry(registry).add_loader_values(values)
    report.log()

    if args.format == "yaml":
        print(report.to_yaml(), end="")
    else:
        print(report.render())

    if not report.is_empty:
        return EXIT_PROBLEMS

    lines: List[str] = []
    for entry in values.values:
        lines.append(f"{registry.get_canonical_name(entry.prop)} = {entry.value}")
    if lines and args.format == "text":
        print("Explicit values:")
        for line in lines:
            print(f"  {line}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
