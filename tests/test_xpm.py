import pytest

from ftkit.colors import lookup_color
from ftkit.xpm import (
    XpmError,
    XpmImage,
    parse_xpm_lines,
    parse_xpm_text,
    read_xpm_file,
    split_words,
    strip_comments,
    text_to_rgb,
)

SIMPLE = ["2 2 2 1", ". c #FF0000", "# c none", ".#", "#."]

FILE_TEXT = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000",
"# c none",
// pixels
".#",
"#."
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_removes_block():
    text = 'x /* gone */ "y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "gone" not in result
    assert '"y"' in result


def test_strip_comments_ignores_markers_in_quotes():
    text = '"a /* b */ c" "d // e"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    result = strip_comments('// note\n"k"')
    assert "note" not in result
    assert result.endswith('"k"')


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == lookup_color("red")


def test_text_to_rgb_name_case_insensitive():
    assert text_to_rgb("RED", None) == lookup_color("red")


def test_text_to_rgb_joins_end():
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("no-such-colour", None) == 0


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("none", None) == -1


def test_parse_lines_simple():
    image = parse_xpm_lines(SIMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == lookup_color("red")
    assert image.pixel(1, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(1, 1) == lookup_color("red")


def test_pixel_out_of_range():
    image = parse_xpm_lines(SIMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)
    with pytest.raises(IndexError):
        image.pixel(-1, 0)


def test_text_and_lines_agree():
    assert parse_xpm_text(FILE_TEXT) == parse_xpm_lines(SIMPLE)


def test_read_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(FILE_TEXT)
    assert read_xpm_file(path) == parse_xpm_lines(SIMPLE)


def test_named_colours_and_unknown_key():
    image = parse_xpm_lines(["3 1 2 1", "a c blue", "b c white", "abz"])
    assert image.pixels == ((lookup_color("blue"), lookup_color("white"), 0),)


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_two_char_keys():
    image = parse_xpm_lines(["2 1 2 2", "aa c red", "bb c green", "bbaa"])
    assert image.pixels == ((lookup_color("green"), lookup_color("red")),)


def test_image_is_dataclass_value():
    image = parse_xpm_lines(SIMPLE)
    assert image == XpmImage(image.width, image.height, image.pixels)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 2 1", ". c red", "# c none", ".#", "#."],
        ["2 2 2", ". c red"],
        ["2 2 2 1", ". red", "# c none", ".#", "#."],
        ["2 2 2 1", ". c", "# c none", ".#", "#."],
        ["2 2 2 1", ". c red", "# c none", ".#"],
        ["2 2 2 1", ". c red"],
        ["2 1 1 1", ". c red", "."],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_text_without_strings_raises():
    with pytest.raises(XpmError):
        parse_xpm_text("/* XPM */ nothing here")