import pytest

from cubraycast.colornames import lookup_color
from cubraycast.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1 ",
"a c #112233",
"b c None",
// pixels follow
"ab",
"ba"
};
"""


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff0000", None) == 0xff0000


def test_text_to_rgb_hex_without_digits():
    assert text_to_rgb("#", None) == 0


def test_text_to_rgb_named():
    assert text_to_rgb("red", None) == lookup_color("red")


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == lookup_color("none")
    assert text_to_rgb("nosuchcolour", None) == 0


def test_strip_comments_block():
    text = "/* x */abc"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == "abc"


def test_strip_comments_line_includes_newline():
    text = "// c\nabc"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == "abc"
    assert "\n" not in result


def test_strip_comments_keeps_quoted():
    text = '"/*x*/" "//y"'
    assert strip_comments(text) == text


def test_parse_lines_basic():
    image = parse_xpm_lines(["2 2 2 1", "a c #000000", "b c #ffffff", "ab", "ba"])
    assert image == XpmImage(2, 2, (0x000000, 0xffffff, 0xffffff, 0x000000))


def test_parse_lines_transparent():
    image = parse_xpm_lines(["1 1 1 1", "x c None", "x"])
    assert image.pixels == (0xFF000000,)


def test_parse_lines_multichar_keys():
    image = parse_xpm_lines(["2 1 2 3", "aaa c #010203", "bbb c #0a0b0c", "bbbaaa"])
    assert image.pixels == (0x0a0b0c, 0x010203)


def test_duplicate_key_short_keys_last_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == (0x000002,)


def test_duplicate_key_long_keys_first_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == (0x000001,)


def test_unknown_key_is_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c #123456", "z"])
    assert image.pixels == (0,)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #000000", "a", "a"],
        ["1 1 1 1", "a m #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
    ],
)
def test_parse_lines_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_matches_lines():
    expected = parse_xpm_lines(["2 2 2 1 ", "a c #112233", "b c None", "ab", "ba"])
    image = parse_xpm_text(SAMPLE)
    assert image == expected
    assert image.pixels[0] == 0x112233
    assert image.pixels[1] == 0xFF000000


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_xpm(tmp_path / "absent.xpm")