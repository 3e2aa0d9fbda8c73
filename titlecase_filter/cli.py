"""Command-line interface for the title-case filter.

WHY: Users and non-Python hosts need a simple way to title-case a field
from the terminal or a subprocess. The CLI wires together request
parsing, settings resolution and the host filter behind one command.

HOW: Uses argparse. In text mode the positional argument (or stdin for
"-") is one single-segment field and the result text is printed. In
--json mode the input is a FieldRequest document and a FieldResponse
document is printed. Status messages go to stderr; results to stdout.

RULES:
- Settings precedence: command-line flags > request "settings" > environment
- Text mode: --language sets the reference language (default "en")
- Not handled → the input text is printed unchanged
- Exit codes: 0 = success, 1 = invalid input or configuration,
  2 = not handled and --strict was given
- Python 3.9 compatible — no match/case, no X | Y unions at runtime
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from titlecase_filter.config import load_settings
from titlecase_filter.core.models import CapitalizationSettings, UppercaseMode
from titlecase_filter.host.filter import filter_text_units
from titlecase_filter.host.models import Template
from titlecase_filter.schemas import FieldRequest, FieldResponse, ReferenceModel

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_HANDLED = 2


def _status(msg: str) -> None:
    """Write a progress or error line to stderr; stdout carries only the result."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _resolve_settings(
    request: FieldRequest,
    args: argparse.Namespace,
) -> CapitalizationSettings:
    """Merge environment, request and command-line settings.

    Raises:
        ValueError: If an environment value is invalid.
    """
    overrides = request.settings
    settings = load_settings(
        ensure_english=overrides.ensure_english,
        convert_full_uppercase=overrides.convert_full_uppercase,
        locale=overrides.locale,
    )

    changes = {}
    if args.no_language_check:
        changes["ensure_english"] = False
    if args.mode is not None:
        changes["convert_full_uppercase"] = UppercaseMode(args.mode)
    if args.locale:
        changes["locale"] = args.locale
    return dataclasses.replace(settings, **changes)


def _build_request(args: argparse.Namespace, raw: str) -> FieldRequest:
    """Build a FieldRequest from the raw input.

    Raises:
        ValueError: If --json input is not valid JSON or not a valid request.
    """
    if args.json:
        try:
            return FieldRequest.model_validate_json(raw)
        except ValidationError as e:
            raise ValueError("Invalid field request:\n{}".format(e)) from None

    # A trailing newline from stdin is not part of the title
    text = raw[:-1] if args.input == "-" and raw.endswith("\n") else raw
    return FieldRequest(
        segments=[text],
        reference=ReferenceModel(language=args.language),
    )


def run(args: argparse.Namespace) -> int:
    """Run one filter call and print the result. Returns the exit code."""
    try:
        request = _build_request(args, _read_input(args.input))
        settings = _resolve_settings(request, args)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return EXIT_ERROR

    logger.debug("Settings: %s", settings)

    result = filter_text_units(
        request.to_component_part(),
        Template(name="cli"),
        request.to_citation(),
        settings,
    )

    if result.handled:
        segments = [unit.text for unit in result.text_units]
    else:
        segments = list(request.segments or [])
        _status("Not handled: field left unchanged")

    if args.json:
        response = FieldResponse(handled=result.handled, segments=segments)
        print(response.model_dump_json(indent=2))
    else:
        print("".join(segments))

    if not result.handled and args.strict:
        return EXIT_NOT_HANDLED
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the filter.
    """
    parser = argparse.ArgumentParser(
        prog="titlecase_filter",
        description="Title-case a citation text field using English "
                    "title-case rules.",
    )

    parser.add_argument(
        "input",
        help="Text to title-case, a JSON field request with --json, "
             "or '-' to read from stdin.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Treat the input as a JSON field request and print a JSON response.",
    )

    parser.add_argument(
        "--language",
        default="en",
        help="Reference language in text mode (default: %(default)s).",
    )

    parser.add_argument(
        "--mode",
        choices=[m.value for m in UppercaseMode],
        default=None,
        help="Treatment of all-caps words (default: TITLECASE_CONVERT_UPPERCASE or never).",
    )

    parser.add_argument(
        "--locale",
        default=None,
        help="Locale for letter casing (default: TITLECASE_LOCALE or en-us).",
    )

    parser.add_argument(
        "--no-language-check",
        action="store_true",
        help="Capitalize regardless of the reference language.",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when the field is not handled.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments, title-case the input and exit with its status code.

    Args:
        argv: Arguments without the program name; None reads sys.argv.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
