"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Classification is strictly ASCII: letters outside ``A-Z``/``a-z`` are
not alphabetic. The case converters return a value of the same kind they
were given.
"""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_CASE_SHIFT = ord("a") - ord("A")


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: str | int) -> bool:
    """True for the decimal digits ``0`` to ``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, code: int) -> str | int:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_SHIFT
    return _convert(c, code)


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_SHIFT
    return _convert(c, code)