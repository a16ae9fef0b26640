"""Key/frequency aggregation.

Reads ``key,value`` lines, sums the integer values of repeated keys in
first-seen order, and renders the totals as a one-line summary.

Line-level problems (wrong field count, non-integer value) are returned from
``parse_line`` as ``SkippedLine`` values; ``aggregate_lines`` logs them and
moves on. Only failing to open or read the input file is fatal, and that is
left to propagate out of ``build`` as ``OSError``. Bytes that are not valid
UTF-8 are replaced with U+FFFD and only affect the line they appear on.

Example:
    >>> result = aggregate_lines(["a,3", "b,5", "a,2"])
    >>> render(result.table)
    'The total for a is 5. The total for b is 5.'
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Iterable, List, Union

from keycount.config import DEFAULT_CONFIG, AggregatorConfig
from keycount.logging import get_logger
from keycount.types import (
    AggregationResult,
    FrequencyTable,
    LineResult,
    ParsedLine,
    SkippedLine,
)

logger = get_logger(__name__)

# Optional sign followed by decimal digits; no underscores or inner whitespace
_INTEGER_RE = re.compile(r"[+-]?\d+")

WRONG_FIELD_COUNT = "line does not contain a key-value pair of length two"


def _split_fields(line: str, separator: str) -> List[str]:
    """Split ``line`` on ``separator`` and drop trailing empty fields.

    ``"a,3,"`` yields ``["a", "3"]``; an empty line yields ``[""]``.
    """
    fields = line.split(separator)
    while len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


def parse_line(
    line: str, line_number: int = 1, config: AggregatorConfig = DEFAULT_CONFIG
) -> LineResult:
    """Parse one raw input line into a per-line result.

    Args:
        line: Raw text line, with or without its trailing newline.
        line_number: 1-based position of the line, used in diagnostics.
        config: Parsing configuration.

    Returns:
        ``ParsedLine`` for a valid ``key,value`` pair, otherwise ``SkippedLine``
        describing why the line was ignored.
    """
    text = line.replace(config.marker, "").strip()

    fields = _split_fields(text, config.separator)
    if len(fields) != config.expected_fields:
        return SkippedLine(line_number=line_number, reason=WRONG_FIELD_COUNT)

    key = fields[0].strip()
    value_text = fields[1].strip()

    if not _INTEGER_RE.fullmatch(value_text):
        return SkippedLine(
            line_number=line_number,
            reason=f"value for key '{key}' is not an integer",
            key=key,
        )

    return ParsedLine(line_number=line_number, key=key, value=int(value_text))


def aggregate_lines(
    lines: Iterable[str], config: AggregatorConfig = DEFAULT_CONFIG
) -> AggregationResult:
    """Fold lines into a fresh frequency table.

    Skipped lines are logged at ERROR level and collected; they never stop the
    fold.

    Args:
        lines: Text lines in input order.
        config: Parsing configuration.

    Returns:
        AggregationResult with the table, the skipped lines and the line count.
    """
    table: FrequencyTable = {}
    skipped: List[SkippedLine] = []
    lines_read = 0

    for line_number, line in enumerate(lines, start=1):
        lines_read = line_number
        result = parse_line(line, line_number, config)

        if isinstance(result, SkippedLine):
            logger.error(str(result))
            skipped.append(result)
            continue

        table[result.key] = table.get(result.key, 0) + result.value
        logger.debug(
            f"Line {line_number}: added {result.value} to '{result.key}',"
            f" total now {table[result.key]}"
        )

    return AggregationResult(
        table=table, skipped=tuple(skipped), lines_read=lines_read
    )


def build(
    file_path: Union[str, Path], config: AggregatorConfig = DEFAULT_CONFIG
) -> FrequencyTable:
    """Read ``file_path`` and return its summed key frequencies.

    Args:
        file_path: Path to a UTF-8 text file of ``key,value`` lines.
        config: Parsing configuration.

    Returns:
        Frequency table in first-seen key order.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    path = Path(file_path)
    logger.info(f"Reading key counts from: {path}")

    with path.open("r", encoding="utf-8", errors="replace") as handle:
        result = aggregate_lines(handle, config)

    logger.info(
        f"Aggregated {len(result.table)} keys from {result.lines_read} lines"
        f" ({len(result.skipped)} skipped)"
    )
    return result.table


def render(table: FrequencyTable, config: AggregatorConfig = DEFAULT_CONFIG) -> str:
    """Return the one-line summary for ``table``.

    An empty table renders as an empty string.
    """
    return config.summary_joiner.join(
        config.format_entry(key, value) for key, value in table.items()
    )


def render_json(table: FrequencyTable) -> str:
    """Return ``table`` as a JSON object, keys in first-seen order."""
    return json.dumps(table)
