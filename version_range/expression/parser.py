"""Version expression parser.

A version expression is made of these parts:

    starting tag
    |  lower version code
    |  |    separator
    |  |    | allowed blanks
    |  |    | |  higher version code
    |  |    | |  |    ending tag
    |  |    | |  |    |
    (10000,  12030]

The parser is a single left-to-right scan with no backtracking:
    - the first and last characters must be brackets (`[`/`(` and `]`/`)`),
    - the body may only hold ASCII digits, blanks (`' '` or the letter `t`) and one separator,
    - either version code may be empty to leave that side unbounded,
    - exclusive bounds are normalized to inclusive ones and `lower <= upper` must hold.
"""

from __future__ import annotations

from version_range.expression.schema import (
    INT32_MAX,
    INT32_MIN,
    InclusiveMarker,
    Interval,
    Separator,
)

_DIGITS = frozenset("0123456789")
# The letter "t" is a blank here (a historical stand-in for tab), a real tab is not.
_BLANKS = frozenset(" t")
_SEPARATORS = frozenset(s.value for s in Separator)
_STARTING_TAGS = frozenset(m.value for m in InclusiveMarker if m.is_starting)
_ENDING_TAGS = frozenset(m.value for m in InclusiveMarker if not m.is_starting)
_INT32_MAX_DIGITS = len(str(INT32_MAX))


class VersionExpressionError(ValueError):
    """Raised when a version expression cannot be parsed into an `Interval`."""

    def __init__(self, message: str, *, expression: str | None = None) -> None:
        super().__init__(message)
        self.expression = expression


class EmptyExpressionError(VersionExpressionError):
    """The expression is empty or missing."""


class InvalidStartingTagError(VersionExpressionError):
    """The first character is not `[` or `(`."""

    def __init__(self, char: str, *, expression: str) -> None:
        super().__init__(f"invalid starting character {char!r}", expression=expression)
        self.char = char


class InvalidEndingTagError(VersionExpressionError):
    """The last character is not `]` or `)`."""

    def __init__(self, char: str, *, expression: str) -> None:
        super().__init__(f"invalid ending character {char!r}", expression=expression)
        self.char = char


class IllegalCharacterError(VersionExpressionError):
    """A body character is not a digit, a blank or an expected separator."""

    def __init__(
            self,
            char: str,
            *,
            expression: str,
            position: int | None,
            message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"{char!r} at position {position} is an illegal version number character",
            expression=expression,
        )
        self.char = char
        self.position = position


class MissingSeparatorError(IllegalCharacterError):
    """The body has no separator between the lower and higher version codes."""

    def __init__(self, *, expression: str) -> None:
        super().__init__(
            "",
            expression=expression,
            position=None,
            message="missing separator, expected one of "
                    + ", ".join(repr(s.value) for s in Separator),
        )


class NumericOverflowError(VersionExpressionError):
    """A version code does not fit into a signed 32-bit integer."""

    def __init__(self, token: str, *, expression: str) -> None:
        super().__init__(
            f"version code {token} exceeds the maximum of {INT32_MAX}",
            expression=expression,
        )
        self.token = token


class RangeOrderError(VersionExpressionError):
    """The normalized lower version code is greater than the higher one."""

    def __init__(self, lower: int, upper: int, *, expression: str) -> None:
        super().__init__(
            f"lower version code {lower} is greater than higher version code {upper}",
            expression=expression,
        )
        self.lower = lower
        self.upper = upper


def _to_version_code(token: str, expression: str) -> int | None:
    """Convert an accumulated digit run; an empty run means the side is unbounded."""

    if not token:
        return None
    # Length first: int() refuses very long digit strings (leading zeros included).
    digits = token.lstrip("0") or "0"
    if len(digits) > _INT32_MAX_DIGITS:
        raise NumericOverflowError(token, expression=expression)
    value = int(digits)
    if value > INT32_MAX:
        raise NumericOverflowError(token, expression=expression)
    return value


def parse(expression: str | None, *, strict_separator: bool = True) -> Interval:
    """Parse a version expression into a normalized `Interval`.

    With `strict_separator` (the default) the body must hold exactly one separator. Without it,
    the scanner accepts legacy inputs: a missing separator reads the whole body as the higher
    version code, and extra separators overwrite the earlier ones.

    Raises:
        VersionExpressionError: One of its subclasses, describing the first problem found.
    """

    if not expression:
        raise EmptyExpressionError("empty version expression", expression=expression)

    first = expression[0]
    if first not in _STARTING_TAGS:
        raise InvalidStartingTagError(first, expression=expression)

    last = expression[-1]
    if last not in _ENDING_TAGS:
        raise InvalidEndingTagError(last, expression=expression)

    token = ""
    lower: int | None = None
    separator: Separator | None = None

    for position in range(1, len(expression) - 1):
        ch = expression[position]
        if ch in _DIGITS:
            token += ch
        elif ch in _BLANKS:
            token = ""
        elif ch in _SEPARATORS:
            if separator is not None and strict_separator:
                raise IllegalCharacterError(
                    ch,
                    expression=expression,
                    position=position,
                    message=f"duplicate separator {ch!r} at position {position}",
                )
            separator = Separator(ch)
            code = _to_version_code(token, expression)
            if code is not None:
                lower = code
            token = ""
        else:
            raise IllegalCharacterError(ch, expression=expression, position=position)

    if separator is None and strict_separator:
        raise MissingSeparatorError(expression=expression)

    higher = _to_version_code(token, expression)

    starting_tag = InclusiveMarker(first)
    ending_tag = InclusiveMarker(last)

    lower_code = INT32_MIN if lower is None else lower
    if lower is not None and not starting_tag.is_inclusive:
        lower_code += 1

    upper_code = INT32_MAX if higher is None else higher
    if higher is not None and not ending_tag.is_inclusive:
        upper_code -= 1

    if lower_code > upper_code:
        raise RangeOrderError(lower_code, upper_code, expression=expression)

    return Interval(
        lower=lower_code,
        upper=upper_code,
        separator=separator,
        starting_tag=starting_tag,
        ending_tag=ending_tag,
    )


def is_valid(expression: str | None, *, strict_separator: bool = True) -> bool:
    """Whether `expression` parses into an `Interval` (convenience wrapper)."""

    try:
        parse(expression, strict_separator=strict_separator)
    except VersionExpressionError:
        return False
    return True
