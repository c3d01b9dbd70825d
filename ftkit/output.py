"""Writing characters, strings and numbers to text streams.

Each function writes to ``stream``, or to standard output when no stream is
given. A ``None`` string writes nothing.
"""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.conversions import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is not None:
        _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is not None:
        _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(itoa(n))