"""Version range schema (Pydantic models).

An `Interval` is the validated result of parsing a version expression such as `(10000, 12030]`.
Bounds are always stored as inclusive integers; the source brackets and separator are kept only
so the interval can be rendered back to text.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Separator(StrEnum):
    """Characters allowed between the lower and higher version codes."""

    comma = ","
    semicolon = ";"


class InclusiveMarker(StrEnum):
    """Brackets allowed at the first and last position of an expression."""

    starting_inclusive = "["
    starting_exclusive = "("
    ending_inclusive = "]"
    ending_exclusive = ")"

    @property
    def is_starting(self) -> bool:
        return self in {InclusiveMarker.starting_inclusive, InclusiveMarker.starting_exclusive}

    @property
    def is_inclusive(self) -> bool:
        return self in {InclusiveMarker.starting_inclusive, InclusiveMarker.ending_inclusive}


class Interval(BaseModel):
    """A contiguous, inclusive range of integer version codes.

    `lower` and `upper` are already normalized: `(1000, 1203)` is stored as `1001..1202`. An
    unbounded side holds the 32-bit sentinel (`INT32_MIN` or `INT32_MAX`).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lower: int = Field(default=INT32_MIN, ge=INT32_MIN, le=INT32_MAX)
    upper: int = Field(default=INT32_MAX, ge=INT32_MIN, le=INT32_MAX)
    separator: Separator | None = None
    starting_tag: InclusiveMarker = InclusiveMarker.starting_inclusive
    ending_tag: InclusiveMarker = InclusiveMarker.ending_inclusive

    @model_validator(mode="after")
    def validate_range(self) -> Interval:
        """Validate bracket placement and that the range is well-formed (`lower <= upper`)."""

        if not self.starting_tag.is_starting:
            raise ValueError(f"starting_tag must be '[' or '(', got {self.starting_tag.value!r}")
        if self.ending_tag.is_starting:
            raise ValueError(f"ending_tag must be ']' or ')', got {self.ending_tag.value!r}")
        if self.lower > self.upper:
            raise ValueError(f"lower ({self.lower}) must be <= upper ({self.upper})")
        return self

    @property
    def is_lower_bounded(self) -> bool:
        return self.lower != INT32_MIN

    @property
    def is_upper_bounded(self) -> bool:
        return self.upper != INT32_MAX

    def contains(self, version_code: int) -> bool:
        """Whether `version_code` falls within the inclusive bounds."""

        return self.lower <= version_code <= self.upper

    def __contains__(self, version_code: object) -> bool:
        return isinstance(version_code, int) and self.contains(version_code)

    def __str__(self) -> str:
        # Sentinels render as empty sides and a missing separator as a comma, so the text parses
        # back to the same bounds.
        lower = str(self.lower) if self.is_lower_bounded else ""
        upper = str(self.upper) if self.is_upper_bounded else ""
        separator = (self.separator or Separator.comma).value
        return f"{self.starting_tag.value}{lower}{separator}{upper}{self.ending_tag.value}"
