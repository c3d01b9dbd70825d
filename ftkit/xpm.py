"""Reader for XPM pixmaps.

An XPM image is a header line ``"width height ncolors chars_per_pixel"``,
``ncolors`` colour definitions and ``height`` rows of pixel keys. Colours are
given as ``#RRGGBB`` or by name; the name ``none`` marks a transparent pixel,
stored as ``0xFF000000``. Pixels are unsigned 32-bit ``0xAARRGGBB`` values.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from ftkit.colors import lookup_color

__all__ = [
    "XpmError",
    "XpmImage",
    "strip_comments",
    "split_words",
    "text_to_rgb",
    "parse_xpm_lines",
    "parse_xpm_text",
    "read_xpm_file",
]

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1

_WORD_SPLIT = re.compile(r"[ \t]+")
_DECIMAL = re.compile(r"[ \t\n\x0b\f\r]*([+-]?\d+)")
_HEX = re.compile(r"[ \t\n\x0b\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: rows of ``0xAARRGGBB`` pixels, top row first."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def _blank_comments(text: str, opener: str, closer: str, keep_closer: bool) -> str:
    chars = list(text)
    in_quote = False
    i = 0
    while i < len(chars) - len(opener) + 1:
        ch = chars[i]
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote and "".join(chars[i : i + len(opener)]) == opener:
            end = text.find(closer, i + len(opener))
            stop = len(chars) if end == -1 else end + (len(closer) if keep_closer else 0)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces.

    The length of the text is preserved. Block comments are removed first,
    then line comments together with the newline that ends them.
    """
    text = _blank_comments(text, "/*", "*/", keep_closer=True)
    return _blank_comments(text, "//", "\n", keep_closer=True)


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    if sign == "-":
        value = -value
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn a colour specification into an integer.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table; an
    unknown name yields 0 and ``none`` yields -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _take(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def _parse(lines: Iterator[str]) -> XpmImage:
    words = split_words(_take(lines, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    # Short keys overwrite earlier definitions; longer keys keep the first one.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _take(lines, "colour definition")
        key = line[:cpp]
        spec = split_words(line[cpp:])
        try:
            index = spec.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(spec):
            raise XpmError(f"colour definition without a colour: {line!r}")
        end = spec[index + 2] if index + 2 < len(spec) else None
        rgb = text_to_rgb(spec[index + 1], end)
        if last_wins or key not in palette:
            palette[key] = rgb

    rows = []
    for _ in range(height):
        line = _take(lines, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[start : start + cpp], 0))
                for start in range(0, width * cpp, cpp)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Parse XPM data given as its strings: header, colours, then rows."""
    return _parse(iter(lines))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the text of an XPM file, reading the quoted strings in order."""
    cleaned = strip_comments(text)
    return _parse(match.group(1) for match in _QUOTED.finditer(cleaned))


def read_xpm_file(path: str | Path) -> XpmImage:
    """Read and parse an XPM file."""
    data = Path(path).read_bytes()
    return parse_xpm_text(data.decode("latin-1"))