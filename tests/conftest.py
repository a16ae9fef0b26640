"""Global pytest configuration.

Provides ``write_counts``, a factory fixture that writes a key,value input
file under the test's temporary directory and returns its path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_counts(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "counts.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path

    return _write
