"""Byte-stream line reader with a doubling buffer."""

from typing import BinaryIO, Iterator

from catalog.store import GROWTH_FACTOR, INITIAL_CAPACITY

TERMINATOR = b"\n"


class LineReader:
    """Read one newline-terminated line at a time from a binary stream.

    ``read_line`` returns the line without its terminator, or None once the
    stream is exhausted before any byte of a new line was read. A final line
    with no terminator is still returned; only the next call yields None.
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8",
                 initial_capacity: int = INITIAL_CAPACITY):
        self._stream = stream
        self._encoding = encoding
        self._buffer = bytearray(initial_capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def read_line(self) -> str | None:
        self._length = 0
        saw_input = False
        while True:
            byte = self._stream.read(1)
            if not byte:
                break
            saw_input = True
            if byte == TERMINATOR:
                break
            if self._length >= len(self._buffer):
                self._buffer.extend(bytes(len(self._buffer) * (GROWTH_FACTOR - 1)))
            self._buffer[self._length] = byte[0]
            self._length += 1

        if not saw_input:
            return None
        return bytes(self._buffer[:self._length]).decode(self._encoding)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
