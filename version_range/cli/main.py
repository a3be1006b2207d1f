"""Command line entry point: validate version expressions and print the normalized intervals."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from version_range.config.logging import configure_logging
from version_range.config.settings import load_settings
from version_range.expression.batch import check_expressions

logger = logging.getLogger(__name__)


def _read_expressions(path: str) -> list[str]:
    """Read one expression per line, skipping blank lines and `#` comments."""

    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="version-range",
        description="Validate version code range expressions such as '[1000, 1203)'.",
    )
    parser.add_argument("expressions", nargs="*", help="Expressions to validate.")
    parser.add_argument("--file", help="Read additional expressions from a file, one per line.")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept a missing or repeated separator (legacy scanner behavior).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(logging.getLevelNamesMapping()),
        help="Override LOG_LEVEL for this run.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns 0 when every expression is valid, 1 otherwise."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    load_dotenv(".env")
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    expressions = list(args.expressions)
    if args.file:
        expressions.extend(_read_expressions(args.file))
    if not expressions:
        parser.error("no expressions given")

    strict_separator = settings.strict_separator and not args.lenient
    logger.debug("checking %d expressions strict_separator=%s", len(expressions), strict_separator)

    report = check_expressions(expressions, strict_separator=strict_separator)
    for result in report.results:
        if result.ok:
            print(f"{result.expression} => {result.interval}")
        else:
            print(f"{result.expression} => error: {result.error}")
    print(report.summary())

    return 0 if report.succeeded == report.total else 1


if __name__ == "__main__":
    raise SystemExit(main())
