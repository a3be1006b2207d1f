"""Batch validation of version expressions.

Each expression is parsed independently: a malformed entry is recorded and logged, and the batch
moves on to the next one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from version_range.expression.parser import VersionExpressionError, parse
from version_range.expression.schema import Interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpressionResult:
    """Outcome of parsing one expression: either an interval or the error that rejected it."""

    expression: str
    interval: Interval | None = None
    error: VersionExpressionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchReport:
    """Per-expression results in input order."""

    results: tuple[ExpressionResult, ...]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failures(self) -> tuple[ExpressionResult, ...]:
        return tuple(r for r in self.results if not r.ok)

    def summary(self) -> str:
        return f"Succeeded {self.succeeded}/{self.total}"


def check_expressions(expressions: Iterable[str], *, strict_separator: bool = True) -> BatchReport:
    """Parse every expression and collect the outcomes."""

    results: list[ExpressionResult] = []
    for expression in expressions:
        try:
            interval = parse(expression, strict_separator=strict_separator)
        except VersionExpressionError as exc:
            logger.info("illegal version expression %r reason=%s", expression, exc)
            results.append(ExpressionResult(expression=expression, error=exc))
            continue

        logger.debug("%s => %s", expression, interval)
        results.append(ExpressionResult(expression=expression, interval=interval))

    report = BatchReport(results=tuple(results))
    logger.info("succeeded %d/%d", report.succeeded, report.total)
    return report
