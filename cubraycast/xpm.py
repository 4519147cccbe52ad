"""Reading of XPM images into 32-bit pixel arrays."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from .colornames import lookup_color
from .textutil import atoi
from .wordtab import find_outside_quotes, split_words

TRANSPARENT = 0xFF000000

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds rows top to bottom, 0xAARRGGBB."""

    width: int
    height: int
    pixels: tuple[int, ...]


def _as_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, extra: Optional[str] = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#``-prefixed values are read as hexadecimal. Otherwise ``name`` (joined
    with ``extra`` by a space, when given) is looked up in the colour table;
    unknown names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = -value
        return _as_int32(value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The text keeps its length; a line comment's newline is blanked too.
    """
    while (begin := find_outside_quotes(text, "/*", len(text))) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, begin + 3 if end == -1 else end + 2)
    while (begin := find_outside_quotes(text, "//", len(text))) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, begin + 2 if end == -1 else end + 1)
    return text


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings (header, colours, pixel rows)."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    # With one or two chars per pixel later definitions replace earlier
    # ones; with longer keys the first definition is kept.
    replace = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            idx = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c': {line!r}") from None
        if idx + 1 >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        extra = words[idx + 2] if idx + 2 < len(words) else None
        rgb = text_to_rgb(words[idx + 1], extra)
        key = line[:cpp]
        if replace:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    row_chars = width * cpp
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < row_chars:
            raise XpmError(f"pixel row too short: {line!r}")
        for offset in range(0, row_chars, cpp):
            color = palette.get(line[offset:offset + cpp], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    strings = (match.group(1) for match in _QUOTED.finditer(strip_comments(text)))
    return parse_xpm_lines(strings)


def load_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm_text(text)