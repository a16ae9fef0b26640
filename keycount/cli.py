"""Command-line interface for keycount."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from keycount._version import __version__
from keycount.aggregator import build, render, render_json
from keycount.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)


def _count_keys(path: Path, as_json: bool) -> None:
    """Aggregate ``path`` and print the summary line to stdout.

    Fatal input errors are logged and terminate the process with status 1
    before anything is written to stdout.

    Args:
        path: Input file of ``key,value`` lines.
        as_json: Print the table as a JSON object instead of sentences.
    """
    _start_time = perf_counter()

    try:
        table = build(path)
    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Failed to read input file: {path}: {type(e).__name__}: {e}")
        sys.exit(1)

    print(render_json(table) if as_json else render(table))

    _elapsed = perf_counter() - _start_time
    logger.debug(f"Run completed in {_elapsed:.3f}s")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``keycount`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="keycount",
        description="Sum the frequencies of repeated keys in a key,value file.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the totals as a JSON object instead of a sentence summary",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "input_file", type=Path, help="Path to a file of key,value lines"
    )

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    _count_keys(args.input_file, args.json)


if __name__ == "__main__":
    main()
