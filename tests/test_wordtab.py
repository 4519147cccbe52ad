import pytest

from cubraycast.wordtab import find, find_outside_quotes, split_words


def test_find_locates_pattern():
    text = "hello world"
    assert find(text, "world", len(text)) == text.index("world")


def test_find_missing_pattern():
    text = "hello world"
    assert find(text, "xyz", len(text)) == -1


def test_find_pattern_longer_than_length():
    assert find("abcdef", "abc", 2) == -1


def test_find_empty_pattern_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_outside_quotes_skips_quoted():
    text = '"a//b" //c'
    assert find_outside_quotes(text, "//", len(text)) == text.rindex("//")


def test_find_outside_quotes_without_quotes_matches_find():
    text = "x /* y */"
    assert find_outside_quotes(text, "/*", len(text)) == find(text, "/*", len(text))


def test_find_outside_quotes_only_quoted_match():
    text = '"/*"'
    assert find_outside_quotes(text, "/*", len(text)) == -1


def test_find_outside_quotes_respects_length():
    assert find_outside_quotes("abab", "abab", 3) == -1


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []