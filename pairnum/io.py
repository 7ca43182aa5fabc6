# pairnum/io.py
"""Line-oriented input helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .config import DEFAULT_INPUT


def input_arg(argv: Optional[Sequence[str]] = None) -> str:
    """First positional argument, or the default input file name."""
    if argv:
        return argv[0]
    return DEFAULT_INPUT


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Yield the non-blank lines of `path` without their line endings."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.strip():
                yield line


def read_all_lines(path: Union[str, Path]) -> List[str]:
    return list(read_lines(path))
