# src/main.py — v2
"""CLI entry point: check and deps commands.

Usage:
    rebuildcheck check --src a.c --dst a.o [--toolchain gnu] -- cc -c a.c -o a.o
    rebuildcheck deps --src a.c --dst a.o [--toolchain msvc]

``check`` exits 0 when the output is up to date and 1 when it must be
rebuilt, so it can gate a compiler call in a shell script.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rebuildcheck.version import __version__

if TYPE_CHECKING:
    from rebuildcheck.config.settings import Settings

logger = logging.getLogger(__name__)

EXIT_UP_TO_DATE = 0
EXIT_REBUILD = 1
EXIT_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_ERROR

    try:
        settings = _load_settings(args.verbose)
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return EXIT_ERROR


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rebuildcheck",
        description=f"rebuildcheck v{__version__} - incremental rebuild decisions",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- check ---
    p_check = subparsers.add_parser(
        "check", help="Decide whether a compilation unit must be rebuilt",
    )
    _add_unit_arguments(p_check)
    p_check.add_argument(
        "build_command", nargs=argparse.REMAINDER,
        help="Compiler command line, after '--'",
    )
    p_check.set_defaults(func=_cmd_check)

    # --- deps ---
    p_deps = subparsers.add_parser(
        "deps", help="List the dependencies recorded by the last compile",
    )
    _add_unit_arguments(p_deps)
    p_deps.set_defaults(func=_cmd_deps)

    return parser


def _add_unit_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--src", type=Path, required=True, help="Source file")
    parser.add_argument("--dst", type=Path, required=True, help="Compiled output")
    parser.add_argument(
        "--toolchain", choices=["msvc", "gnu"], default=None,
        help="Compiler family (default: DEFAULT_TOOLCHAIN setting)",
    )


def _cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    """Print the decision and map it to an exit code."""
    from rebuildcheck.core.models import BuildCommand, CompilationUnit
    from rebuildcheck.engine.decision import evaluate

    argv = list(args.build_command)
    if argv and argv[0] == "--":
        argv = argv[1:]
    if not argv:
        logger.error("No build command given (expected after '--')")
        return EXIT_ERROR

    unit = CompilationUnit(src=args.src, dst=args.dst)
    command = BuildCommand.from_argv(argv)
    decision = evaluate(unit, command, args.toolchain or settings.default_toolchain, settings)

    if decision.rebuild:
        print(f"rebuild ({decision.reason.value})")
        return EXIT_REBUILD
    print("up-to-date")
    return EXIT_UP_TO_DATE


def _cmd_deps(args: argparse.Namespace, settings: Settings) -> int:
    """Print recorded dependencies, marking the stale ones."""
    from rebuildcheck.core.models import CompilationUnit
    from rebuildcheck.deps.reader_factory import get_dependencies
    from rebuildcheck.staleness.comparator import find_stale_inputs

    unit = CompilationUnit(src=args.src, dst=args.dst)
    deps = get_dependencies(unit, args.toolchain or settings.default_toolchain, settings)
    if deps is None:
        print(f"no dependency record for {unit.dst}")
        return EXIT_REBUILD

    stale = set(find_stale_inputs(unit.dst, deps))
    for dep in deps:
        marker = "*" if dep in stale else " "
        print(f"{marker} {dep}")
    return EXIT_REBUILD if stale else EXIT_UP_TO_DATE


def _load_settings(verbose: bool) -> Settings:
    """Load settings and configure logging for CLI usage."""
    from rebuildcheck.config.settings import load_settings
    from rebuildcheck.logging.logger import setup_logging

    settings = load_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    return settings


if __name__ == "__main__":
    sys.exit(main())
