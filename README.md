# ftkit

A small collection of pure-Python utilities with no dependencies outside the
standard library.

## Modules

- `ftkit.colors` – the X11 named colour table. `lookup_color(name)` returns a
  `0xRRGGBB` integer, matching names without regard to case; `none` gives
  `-1` and an unknown name raises `KeyError`. `color_names()` lists every
  distinct name in table order.
- `ftkit.xpm` – a reader for XPM images. `read_xpm_file(path)`,
  `parse_xpm_text(text)` and `parse_xpm_lines(lines)` return an `XpmImage`
  with `width`, `height`, `pixels` (rows of `0xAARRGGBB` values, top row
  first) and `pixel(x, y)`. Transparent (`none`) pixels are stored as
  `0xFF000000`. Helpers: `strip_comments`, `split_words` and `text_to_rgb`.
  Malformed input raises `XpmError`, a subclass of `ValueError`.
- `ftkit.chars` – ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each takes a one-character string or an integer code point; the case
  converters return the same kind they were given.
- `ftkit.conversions` – `atoi(text)`, which parses a leading decimal integer
  with C `int` rules for whitespace, sign, trailing text and overflow, and
  `itoa(n)`, which returns the decimal text of an integer.
- `ftkit.output` – `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a given text stream or to standard output. A `None` string writes
  nothing.
- `ftkit.strutil` – `split`, `strchr`, `strrchr`, `strjoin`, `strlcpy`,
  `strlcat`, `strmapi`, `strncmp`, `strnstr`, `strtrim` and `substr`.
  Searches return indices, or `None` when nothing is found; `strlcpy` and
  `strlcat` return the resulting text together with the length the full
  result would have had.
- `ftkit.memory` – byte-buffer operations on `bytearray` or writable
  `memoryview` destinations: `memset`, `bzero`, `memcpy`, `memccpy`,
  `memmove`, `memchr`, `memcmp` and `calloc`. A count larger than a buffer
  raises `ValueError`.
- `ftkit.linked` – a singly linked `LinkedList` of `Node` objects with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration.

## Installing

```
pip install .
```

## Examples

```python
from ftkit.colors import lookup_color
from ftkit.conversions import atoi, itoa
from ftkit.strutil import split, strlcpy, strtrim
from ftkit.linked import LinkedList
from ftkit.xpm import parse_xpm_lines

lookup_color("Dodger Blue")        # 0x1e90ff
atoi("  -42abc")                   # -42
itoa(-2147483648)                  # "-2147483648"
split("  a  b c ", " ")            # ["a", "b", "c"]
strtrim("xxhixx", "x")             # "hi"
strlcpy("hello", 3)                # ("he", 5)

items = LinkedList()
items.push_back(1)
items.push_back(2)
doubled = items.map(lambda v: v * 2)
list(doubled)                      # [2, 4]

image = parse_xpm_lines([
    "2 1 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
])
image.pixel(0, 0)                  # 0xff0000
image.pixel(1, 0)                  # 0xff000000 (transparent)
```

## What it does not do

ftkit only reads XPM images into memory; it does not display them, open
windows or write images back out. It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```