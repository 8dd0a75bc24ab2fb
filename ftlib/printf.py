"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    return (value + (1 << 31)) % _UINT32 - (1 << 31)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("%c expects a single character")
            return value
        return chr(_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {type(value).__name__}")
        return value
    if spec == "p":
        address = 0 if value is None else _int(value, spec) % _UINT64
        return "(nil)" if address == 0 else f"0x{address:x}"
    number = _int(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number % _UINT32
    if spec == "u":
        return str(unsigned)
    return format(unsigned, spec)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing ``%`` is dropped. Extra arguments are ignored.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` and return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)