import pytest

from ftkit.strutil import (
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_rejoins_to_words():
    text = "a,bb,,ccc,"
    words = split(text, ",")
    assert ",".join(words) == "a,bb,ccc"
    assert all(words)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_strchr_first_occurrence():
    s = "banana"
    index = strchr(s, "a")
    assert s[index] == "a"
    assert "a" not in s[:index]


def test_strchr_missing_is_none():
    assert strchr("banana", "z") is None


def test_strchr_nul_finds_end():
    s = "banana"
    assert strchr(s, "\0") == len(s)


def test_strrchr_last_occurrence():
    s = "banana"
    index = strrchr(s, "n")
    assert s[index] == "n"
    assert "n" not in s[index + 1 :]


def test_strrchr_missing_and_nul():
    s = "banana"
    assert strrchr(s, "q") is None
    assert strrchr(s, "\0") == len(s)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin("", "x") == "x"


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strlcpy_fits():
    src = "hello"
    copied, total = strlcpy(src, 10)
    assert copied == src
    assert total == len(src)


def test_strlcpy_truncates():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foo" + "bar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert len(result) == 5 - 1
    assert total == len("foo") + len("bar")


def test_strlcat_size_not_larger_than_dest():
    result, total = strlcat("foobar", "xyz", 4)
    assert result == "foobar"
    assert total == 4 + len("xyz")


def test_strlcat_negative_size_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_preserves_length():
    s = "hello world"
    assert len(strmapi(s, lambda i, ch: "*")) == len(s)


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_difference_of_codes():
    assert strncmp("a", "c", 1) == ord("a") - ord("c")


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_zero_length():
    assert strncmp("x", "y", 0) == 0


def test_strnstr_found_within_length():
    hay = "hello world"
    index = strnstr(hay, "world", len(hay))
    assert hay[index : index + len("world")] == "world"


def test_strnstr_needle_past_length():
    assert strnstr("hello world", "world", 8) is None


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 3) == 0
    assert strnstr("abc", "zzz", 0) == 0


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_everything_and_nothing():
    assert strtrim("aaaa", "a") == ""
    assert strtrim(" keep ", "") == " keep "


def test_substr_from_start():
    s = "hello"
    assert substr(s, 0, 3) == s[:3]


def test_substr_clamps_to_end():
    s = "hello world"
    assert substr(s, 2, 100) == s[2:]


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_start_not_below_length_is_empty():
    assert substr("hello", 3, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)