"""Types and data structures for key/frequency aggregation.

Defines immutable per-line results and the aggregation summary container.
A line is either a ``ParsedLine`` (folded into the table) or a
``SkippedLine`` (reported and ignored); line-level problems are returned as
values rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

# Insertion-ordered mapping from key to summed frequency
FrequencyTable = Dict[str, int]


@dataclass(frozen=True)
class ParsedLine:
    """A valid input line.

    Attributes:
        line_number: 1-based position of the line in the input.
        key: Trimmed first field.
        value: Parsed integer contribution for ``key``.
    """

    line_number: int
    key: str
    value: int


@dataclass(frozen=True)
class SkippedLine:
    """A malformed input line that contributes nothing to the table.

    Attributes:
        line_number: 1-based position of the line in the input.
        reason: Human-readable description of the problem.
        key: Offending key when it was already known, otherwise None.
    """

    line_number: int
    reason: str
    key: Optional[str] = None

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.reason}"


LineResult = Union[ParsedLine, SkippedLine]


@dataclass(frozen=True)
class AggregationResult:
    """Outcome of folding a sequence of lines.

    Attributes:
        table: Summed frequencies in first-seen key order.
        skipped: Lines that were reported and ignored, in input order.
        lines_read: Total number of lines consumed.
    """

    table: FrequencyTable
    skipped: Tuple[SkippedLine, ...] = ()
    lines_read: int = 0
