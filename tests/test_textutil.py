import pytest

from cubraycast.textutil import atoi, itoa, split, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -2147483647, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [3, -250, 99])
def test_atoi_skips_whitespace_and_stops_at_non_digit(n):
    assert atoi(f" \t\n\v\f\r{itoa(n)}xyz42") == n


def test_atoi_plus_sign():
    assert atoi("+17") == atoi("17")


def test_atoi_without_digits():
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_words():
    assert split(",a,,b,", ",") == ["a", "b"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_matches_whitespace_split_for_spaces():
    text = "  one two   three "
    assert split(text, " ") == text.split()


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xyhiyx", "xy") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("xxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_past_end():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 1, 100) == "bc"


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_finds_within_limit():
    hay, needle = "hello world", "world"
    idx = strnstr(hay, needle, len(hay))
    assert hay[idx:idx + len(needle)] == needle


def test_strnstr_needle_must_fit_in_limit():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay) - 1) is None


def test_strnstr_backtracks_after_partial_match():
    hay, needle = "aaab", "aab"
    idx = strnstr(hay, needle, len(hay))
    assert hay[idx:idx + len(needle)] == needle


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strncmp_equal_prefixes():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_value():
    assert strncmp("b", "a", 1) == ord("b") - ord("a")


def test_strncmp_shorter_string_is_less():
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_unsigned_bytes():
    assert strncmp(b"\xff", b"\x01", 1) > 0