"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 69


class LineReader(Generic[AnyStr]):
    """Yield lines, newline included, from a text or binary stream.

    The stream is read in chunks of ``buffer_size``; text after the last
    newline is returned as a final line without one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return "\n" if isinstance(sample, str) else b"\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        """Read chunks until a newline is buffered or the stream runs dry."""
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            self._pending = chunk if self._pending is None else self._pending + chunk
            if self._newline(chunk) in chunk:
                return

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None when nothing is left."""
        if self._pending is None or self._newline(self._pending) not in self._pending:
            self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline(pending))
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line