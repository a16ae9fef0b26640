"""keycount: sum the frequencies of repeated keys in a key,value file.

Primary API:
    build() - Read a file and return its frequency table
    aggregate_lines() - Fold already-read lines, keeping skipped-line details
    parse_line() - Parse one line into a ParsedLine or SkippedLine
    render() - Format a table as "The total for <key> is <value>." phrases

Example:
    from keycount import build, render

    table = build("counts.txt")
    print(render(table))
"""

from __future__ import annotations

from keycount import cli, logging
from keycount._version import __version__
from keycount.aggregator import (
    aggregate_lines,
    build,
    parse_line,
    render,
    render_json,
)
from keycount.config import DEFAULT_CONFIG, AggregatorConfig
from keycount.types import (
    AggregationResult,
    FrequencyTable,
    LineResult,
    ParsedLine,
    SkippedLine,
)

__all__ = [
    # Version
    "__version__",
    # Aggregation
    "build",
    "aggregate_lines",
    "parse_line",
    "render",
    "render_json",
    # Types
    "FrequencyTable",
    "LineResult",
    "ParsedLine",
    "SkippedLine",
    "AggregationResult",
    # Configuration
    "AggregatorConfig",
    "DEFAULT_CONFIG",
    # Utilities
    "cli",
    "logging",
]
