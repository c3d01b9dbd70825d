"""Integer to text conversions with C ``int`` semantics for parsing."""

from __future__ import annotations

__all__ = ["atoi", "itoa"]

_WHITESPACE = "\t\n\v\f\r "


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one ``+`` or ``-`` is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    digits accumulate in a 64-bit register; a result whose sign disagrees
    with the written sign gives -1 for positive input and 0 for negative
    input, and the value is finally truncated to a 32-bit ``int``.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits += ch
    magnitude = int(digits) if digits else 0
    result = _wrap(sign * magnitude, 64)
    if result < 0 and sign > 0:
        return -1
    if result > 0 and sign < 0:
        return 0
    return _wrap(result, 32)


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with ``-`` for negatives."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return f"{n:d}"