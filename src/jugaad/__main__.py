"""Entry point for ``python -m jugaad``.

Runs one of the record functions on an input file and prints the result.
Uses stdlib :mod:`argparse` for argument parsing.

Subcommands:
    chat  -- Parse a chat export file and print the messages as JSON.
    form  -- Validate a JSON form record.
    pass  -- Render a local train pass from a JSON record.
    pnr   -- Print the status report for a JSON PNR record.

Exit codes:
    0 -- Success (or no subcommand: help is printed).
    1 -- Invalid record, unreadable input or configuration error.
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from jugaad.chat import parse_chat_file
from jugaad.config import ConfigError, Settings, load_settings
from jugaad.exceptions import RecordLoadError
from jugaad.form import validate_form
from jugaad.local_pass import INVALID_PASS, generate_local_pass
from jugaad.log import setup_logging
from jugaad.pnr import process_pnr


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with one subcommand per record type."""
    parser = argparse.ArgumentParser(
        prog="jugaad",
        description="Parse and validate chat lines, forms, local passes and PNR records.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    subparsers = parser.add_subparsers(dest="command")

    chat_parser = subparsers.add_parser("chat", help="Parse a chat export file.")
    chat_parser.add_argument("path", help="Path to the exported chat .txt file.")

    for name, help_text in (
        ("form", "Validate a JSON form record."),
        ("pass", "Render a local train pass from a JSON record."),
        ("pnr", "Print the status report for a JSON PNR record."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("path", help="Path to the JSON record file.")

    return parser


def load_record(path: str | Path) -> Any:
    """Read a JSON record from *path*.

    Raises:
        RecordLoadError: If the file is missing, unreadable or not JSON.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RecordLoadError(f"File not found: {file_path}", path=str(file_path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordLoadError(f"Cannot read {file_path}: {exc}", path=str(file_path)) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordLoadError(f"Invalid JSON in {file_path}: {exc}", path=str(file_path)) from exc


def _print_json(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _handle_chat(args: argparse.Namespace, settings: Settings) -> int:
    try:
        result = parse_chat_file(args.path, encoding=settings.chat_encoding)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_json(result.to_dict())
    return 0


def _handle_form(args: argparse.Namespace) -> int:
    result = validate_form(load_record(args.path))
    _print_json(result.to_dict())
    return 0 if result.is_valid else 1


def _handle_pass(args: argparse.Namespace) -> int:
    rendered = generate_local_pass(load_record(args.path))
    print(rendered)
    return 1 if rendered == INVALID_PASS else 0


def _handle_pnr(args: argparse.Namespace) -> int:
    report = process_pnr(load_record(args.path))
    if report is None:
        print(f"Error: Invalid PNR record: {args.path}", file=sys.stderr)
        return 1
    _print_json(report.to_dict())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the jugaad CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.command == "chat":
            return _handle_chat(args, settings)
        if args.command == "form":
            return _handle_form(args)
        if args.command == "pass":
            return _handle_pass(args)
        return _handle_pnr(args)
    except RecordLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
