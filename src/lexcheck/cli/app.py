# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI entry point and orchestration for lexcheck."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib
from collections.abc import Sequence
from typing import Final

from lexcheck import __version__
from lexcheck._internal.error_codes import error_code_for
from lexcheck._internal.exceptions import ConfigurationError
from lexcheck.cli.helpers import echo, positive_int, register_argument
from lexcheck.config import Config, load_config
from lexcheck.core.model_types import FailOnPolicy, LogFormat, OutputFormat
from lexcheck.core.type_aliases import RuleName
from lexcheck.discovery import discover_files
from lexcheck.engine import analyze
from lexcheck.logging import LOG_FORMATS, LOG_LEVELS, configure_logging
from lexcheck.reporting import ProgressPrinter, render_json, render_summary
from lexcheck.rules import describe_rules, resolve_rules
from lexcheck.syntax import PythonSyntaxChecker

logger: logging.Logger = logging.getLogger("lexcheck.cli")

LEXCHECK_VERSION: Final[str] = __version__

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_CONFIGURATION_ERROR: Final[int] = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the lexcheck command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: 0 when the run passes, 1 when it fails under the ``--fail-on``
        policy, 2 on configuration errors.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"lexcheck {LEXCHECK_VERSION}")
        return EXIT_OK
    _ = configure_logging(LogFormat.from_str(args.log_format) if args.log_format else None, log_level=args.log_level)
    output_format = OutputFormat.from_str(args.format)
    if output_format is OutputFormat.TEXT:
        echo(f"Lexcheck {LEXCHECK_VERSION}")
        echo("")
    if not args.list_rules and args.path is None:
        parser.error("the following arguments are required: PATH")
    try:
        if args.list_rules:
            return _execute_list_rules()
        return _execute_check(args, output_format)
    except ConfigurationError as exc:
        logger.debug("Configuration error", exc_info=exc)
        echo(f"Error [{error_code_for(exc)}]: {exc}", err=True)
        echo(parser.format_usage(), newline=False, err=True)
        return EXIT_CONFIGURATION_ERROR


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexcheck",
        description="Check Python source files with token-based rules.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parser,
        "path",
        metavar="PATH",
        nargs="?",
        type=pathlib.Path,
        help="File or directory to analyse.",
    )
    register_argument(
        parser,
        "-p",
        "--python",
        default=None,
        help="Interpreter used for the syntax pre-check (default: the running interpreter).",
    )
    register_argument(
        parser,
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Configuration file (default: lexcheck.toml, .lexcheck.toml or pyproject.toml).",
    )
    register_argument(
        parser,
        "-r",
        "--rule",
        dest="rules",
        action="append",
        default=None,
        help="Rule to run (repeatable). Overrides the configured rule list.",
    )
    register_argument(
        parser,
        "-w",
        "--workers",
        type=positive_int,
        default=None,
        help="Number of files analysed concurrently.",
    )
    register_argument(
        parser,
        "--no-syntax-check",
        dest="syntax_check",
        action="store_false",
        default=None,
        help="Skip the syntax pre-check.",
    )
    register_argument(
        parser,
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format for the results.",
    )
    register_argument(
        parser,
        "--fail-on",
        choices=[policy.value for policy in FailOnPolicy],
        default=None,
        help="Which findings make the run fail (default: errors).",
    )
    register_argument(
        parser,
        "--show-warnings",
        action="store_true",
        help="List warnings in the text summary, not only errors.",
    )
    register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (human-readable text or structured JSON).",
    )
    register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events (default: warning).",
    )
    register_argument(
        parser,
        "--list-rules",
        action="store_true",
        help="List the registered rules and exit.",
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the lexcheck version and exit.",
    )
    return parser


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    overrides: dict[str, object] = {}
    if args.python:
        overrides["python"] = args.python
    if args.rules:
        overrides["rules"] = [RuleName(name) for name in args.rules]
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.syntax_check is not None:
        overrides["syntax_check"] = args.syntax_check
    if args.fail_on is not None:
        overrides["fail_on"] = FailOnPolicy.from_str(args.fail_on)
    return dataclasses.replace(config, **overrides)


def _exit_code(policy: FailOnPolicy, *, errors: bool, warnings: bool) -> int:
    match policy:
        case FailOnPolicy.NEVER:
            return EXIT_OK
        case FailOnPolicy.ERRORS:
            return EXIT_FAILURE if errors else EXIT_OK
        case FailOnPolicy.WARNINGS:
            return EXIT_FAILURE if errors or warnings else EXIT_OK


def _execute_check(args: argparse.Namespace, output_format: OutputFormat) -> int:
    config = _apply_overrides(load_config(args.config), args)
    rules = resolve_rules(config.rules, config.rule_options)
    files = discover_files(args.path, extensions=config.extensions, exclude=config.exclude)
    checker: PythonSyntaxChecker | None = None
    if config.syntax_check:
        checker = PythonSyntaxChecker(config.python)
        checker.verify()
    logger.info("Analysing %s files with %s rules", len(files), len(rules))

    progress: ProgressPrinter | None = None
    if output_format is OutputFormat.TEXT:
        progress = ProgressPrinter(lambda glyph: echo(glyph, newline=False))
    result = analyze(files, rules, syntax_checker=checker, workers=config.workers, on_file=progress)

    if output_format is OutputFormat.JSON:
        echo(render_json(result))
    else:
        echo("")
        echo("")
        echo(render_summary(result, show_warnings=args.show_warnings))
        echo("")
    return _exit_code(config.fail_on, errors=result.has_errors(), warnings=result.has_warnings())


def _execute_list_rules() -> int:
    for descriptor in describe_rules():
        echo(f"{descriptor.name:<24} {descriptor.severity.value:<8} {descriptor.summary}")
    return EXIT_OK


__all__ = ["main"]
