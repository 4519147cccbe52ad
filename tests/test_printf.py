import pytest

from cubraycast.printf import format_printf, printf, to_hex


@pytest.mark.parametrize("num", [0, 1, 15, 16, 255, 4096, 123456789])
def test_to_hex_round_trip(num):
    assert int(to_hex(num, False), 16) == num


@pytest.mark.parametrize("num", [10, 171, 48879, 3735928559])
def test_to_hex_upper_matches_lower(num):
    assert to_hex(num, True) == to_hex(num, False).upper()


def test_to_hex_wraps_negative_to_unsigned():
    assert int(to_hex(-1, False), 16) == 0xFFFFFFFF


def test_plain_text_passes_through():
    assert format_printf("abc def") == "abc def"


def test_string_and_null():
    assert format_printf("%s", "word") == "word"
    assert format_printf("%s", None) == "(null)"


def test_pointer_zero():
    assert format_printf("%p", 0) == "0x0"


def test_pointer_value():
    result = format_printf("%p", 48879)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 48879


def test_percent_literal():
    assert format_printf("%%") == "%"


def test_unknown_conversion_prints_character():
    assert format_printf("%q") == "q"


def test_char_from_int_and_str():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c", "z") == "z"


@pytest.mark.parametrize("value", [0, 42, -7, 2147483647, -2147483648])
def test_decimal_round_trip(value):
    assert int(format_printf("%d", value)) == value
    assert int(format_printf("%i", value)) == value


def test_unsigned_matches_hex_of_same_value():
    assert int(format_printf("%u", -1)) == int(to_hex(-1, False), 16)


def test_hex_conversions_match_to_hex():
    assert format_printf("%x", 3054) == to_hex(3054, False)
    assert format_printf("%X", 3054) == to_hex(3054, True)


def test_mixed_format():
    result = format_printf("%s=%d", "n", 5)
    assert result == "n=5"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_printf("oops %")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("hi %s %d", "there", 5)
    out = capsys.readouterr().out
    assert out == format_printf("hi %s %d", "there", 5)
    assert count == len(out)