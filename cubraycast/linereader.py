"""Buffered line reading from a stream, one line per call."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

BUFFER_SIZE = 13

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from a stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. Text left over after a newline is kept for the next call.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _next_chunk(self) -> Chunk:
        if self._pending:
            chunk, self._pending = self._pending, None
            return chunk
        return self._stream.read(self._buffer_size)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        parts: list[Chunk] = []
        while True:
            chunk = self._next_chunk()
            if not chunk:
                break
            newline = "\n" if isinstance(chunk, str) else b"\n"
            idx = chunk.find(newline)
            if idx < 0:
                parts.append(chunk)
                continue
            parts.append(chunk[:idx + 1])
            rest = chunk[idx + 1:]
            if rest:
                self._pending = rest
            break
        if not parts:
            return None
        empty = "" if isinstance(parts[0], str) else b""
        return empty.join(parts)

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line