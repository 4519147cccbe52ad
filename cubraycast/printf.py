"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = (1 << 64) - 1


def _as_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def to_hex(num: int, upper: bool = False) -> str:
    """Return ``num`` as an unsigned 32-bit hexadecimal string without prefix."""
    return format(int(num) & _UINT_MASK, "X" if upper else "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    return "0x" + format(int(value) & _ULONG_MASK, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None

    if spec == "c":
        return _format_char(take())
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _format_pointer(take())
    if spec in ("d", "i"):
        return str(_as_int32(take()))
    if spec == "u":
        return str(int(take()) & _UINT_MASK)
    if spec == "x":
        return to_hex(take(), False)
    if spec == "X":
        return to_hex(take(), True)
    # "%%" and any unknown conversion print the character itself.
    return spec


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``fmt`` with ``args`` and return the resulting text.

    Raises ``ValueError`` for a lone ``%`` at the end of the format and
    ``TypeError`` when there are fewer arguments than conversions.
    """
    out: list[str] = []
    arguments = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("incomplete conversion at end of format")
        out.append(_convert(spec, arguments))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)