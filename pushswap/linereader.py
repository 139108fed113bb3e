"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic


class LineReader(Generic[AnyStr]):
    """Yields lines of a text or binary stream, each with its newline if any."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, bytes) else "\n"  # type: ignore[return-value]

    def read_line(self) -> AnyStr | None:
        """The next line, ending in a newline unless it is the last; None at the end."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline(pending))
        end = len(pending) if cut < 0 else cut + 1
        self._pending = pending[end:]
        return pending[:end]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line

    def clear(self) -> None:
        """Drop whatever has been read from the stream but not yet returned."""
        self._pending = None