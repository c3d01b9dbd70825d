"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices into the string, and ``None`` stands for
"not found". The NUL character ``"\\0"`` plays the part of the terminator:
searching for it finds the end of the string.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strmapi",
    "strncmp",
    "strnstr",
    "strtrim",
    "substr",
]

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``; ``"\\0"`` finds the end."""
    _single_char(c)
    index = s.find(c)
    if index != -1:
        return index
    return len(s) if c == _NUL else None


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; ``"\\0"`` finds the end."""
    _single_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, truncated to ``size - 1`` characters to leave
    room for the terminator, and the full length of ``src``. A size of 0
    copies nothing.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new text and the length the full result would have had:
    ``len(dest) + len(src)``, or ``size + len(src)`` when ``dest`` already
    fills the buffer.
    """
    _non_negative(size, "size")
    dest_len = len(dest)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, a short
    string comparing as if padded with NUL, or 0 when the prefixes match.
    """
    _non_negative(n, "n")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle or a length of 0 gives 0.
    """
    _non_negative(length, "length")
    if length == 0 or not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string. As in the routine this
    follows, text is only copied when ``start`` is smaller than the length
    that remains after clamping to the end of ``s``; otherwise the result
    is empty.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    length = min(length, len(s) - start)
    if start >= length:
        return ""
    return s[start : start + length]