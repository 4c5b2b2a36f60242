"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


class LineReader(Generic[AnyStr]):
    """Yield lines, newline included, from a text or binary stream.

    The last line may lack a newline. A read error ends the input and
    drops whatever was buffered.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 10) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _take(self, count: int) -> AnyStr:
        assert self._pending is not None
        line = self._pending[:count]
        rest = self._pending[count:]
        self._pending = rest if rest else None
        return line

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None at the end of the stream."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                cut = self._pending.find(newline)  # type: ignore[arg-type]
                if cut >= 0:
                    return self._take(cut + 1)
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                return None
            if not chunk:
                if self._pending:
                    return self._take(len(self._pending))
                self._pending = None
                return None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line