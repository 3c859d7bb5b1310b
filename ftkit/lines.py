"""Read a stream one line at a time, pulling fixed-size chunks on demand."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr, Generic

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 3


def _find_newline(data: Any) -> int:
    """Index of the first newline in ``data``, or -1 if there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Return successive lines of a stream, each with its trailing newline.

    ``stream`` is either an integer file descriptor, read with ``os.read``
    and yielding ``bytes``, or a file-like object with a ``read(size)``
    method yielding ``str`` or ``bytes``. Data is requested in chunks of
    ``buffer_size`` and only until a newline has been seen, so the stream
    is never read further than the current line needs. Anything read past
    the newline is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(stream, int) and not isinstance(stream, bool):
            if stream < 0:
                raise ValueError(f"invalid file descriptor: {stream}")
        elif not callable(getattr(stream, "read", None)):
            raise TypeError("stream must be a file descriptor or have a read() method")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @property
    def buffer_size(self) -> int:
        """Number of characters or bytes requested per read."""
        return self._buffer_size

    def _read_chunk(self) -> AnyStr | None:
        if isinstance(self._stream, int):
            return os.read(self._stream, self._buffer_size)  # type: ignore[return-value]
        return self._stream.read(self._buffer_size)

    def read_line(self) -> AnyStr | None:
        """Return the next line, newline included, or None at end of stream.

        The final line is returned without a newline when the stream does
        not end with one. Errors raised by the stream propagate.
        """
        pending = self._pending
        while pending is None or _find_newline(pending) < 0:
            chunk = self._read_chunk()
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = pending
            return None
        index = _find_newline(pending)
        if index < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[index + 1 :]
        return pending[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Any]:
    """Yield every line of ``stream`` as :class:`LineReader` reads them."""
    yield from LineReader(stream, buffer_size)