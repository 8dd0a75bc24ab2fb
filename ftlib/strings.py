"""String helpers: length, bounded copies, searching, parsing and splitting.

Where a search finds nothing the result is None. Where a character is taken
as an argument, an integer code or a one-character string is accepted.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Tuple, Union

CharLike = Union[int, str]

_WHITESPACE = " \f\n\r\t\v"
_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integer codes are cut to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters) and the length
    of ``src``, the length the copy would have needed.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the concatenation tried to
    create. When ``dst`` already fills the buffer nothing is appended and the
    reported length is ``size + len(src)``.
    """
    _check_size(size)
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(s)
    return None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the codes of the first differing characters,
    the end of a string counting as code 0, or 0 when they match.
    """
    _check_size(n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size(length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A string with no digits gives 0.
    """
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_size(length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(charset, str):
        raise TypeError(f"charset must be a str, got {type(charset).__name__}")
    return s.strip(charset) if charset else s


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strmapi(s: Optional[str], f: Callable[[int, str], str]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    None is passed through unchanged.
    """
    if s is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: Optional[List[str]], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` for each character in the list ``chars``.

    When ``f`` returns a character, it replaces the one at that index;
    returning None leaves the character as it was.
    """
    if chars is None:
        return
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is None:
            continue
        if not isinstance(replacement, str) or len(replacement) != 1:
            raise ValueError("the callback must return a single character or None")
        chars[index] = replacement