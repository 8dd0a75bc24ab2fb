"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c`` to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; nothing is written when ``s`` is None."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; nothing is written when ``s`` is None."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))