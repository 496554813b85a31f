"""A bounded, in-order byte stream with a writer side and a reader side."""

from __future__ import annotations


class ByteStream:
    """Bytes are written on the input side and read, in order, from the output side.

    The stream holds at most ``capacity`` bytes at a time. The writer can end
    the input; once the buffer is drained after that, the stream is at EOF.
    """

    __slots__ = ("_capacity", "_buffer", "_input_ended", "_bytes_read", "_bytes_written", "_error")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._buffer = ""
        self._input_ended = False
        self._bytes_read = 0
        self._bytes_written = 0
        self._error = False

    # Writer side

    def write(self, data: str) -> int:
        """Accept as much of ``data`` as fits and return how many bytes were accepted."""
        accepted = data[: self.remaining_capacity()]
        self._buffer += accepted
        self._bytes_written += len(accepted)
        return len(accepted)

    def remaining_capacity(self) -> int:
        """Number of additional bytes the stream has room for."""
        return self._capacity - len(self._buffer)

    def end_input(self) -> None:
        """Signal that no more bytes will be written."""
        self._input_ended = True

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    # Reader side

    def peek_output(self, length: int) -> str:
        """Return up to ``length`` bytes from the front of the buffer without removing them."""
        return self._buffer[:length]

    def pop_output(self, length: int) -> None:
        """Remove ``length`` bytes from the front of the buffer.

        Asking for more bytes than are buffered marks the stream as errored
        and removes nothing.
        """
        if length > len(self._buffer):
            self.set_error()
            return
        self._buffer = self._buffer[length:]
        self._bytes_read += length

    def read(self, length: int) -> str:
        """Remove and return the next ``length`` bytes.

        Asking for more bytes than are buffered marks the stream as errored
        and returns an empty string.
        """
        if length > len(self._buffer):
            self.set_error()
            return ""
        result = self._buffer[:length]
        self.pop_output(length)
        return result

    def input_ended(self) -> bool:
        """True once the writer has ended the input."""
        return self._input_ended

    def error(self) -> bool:
        """True if the stream has suffered an error."""
        return self._error

    def buffer_size(self) -> int:
        """Number of bytes that can currently be read."""
        return len(self._buffer)

    def buffer_empty(self) -> bool:
        """True if nothing is buffered."""
        return not self._buffer

    def eof(self) -> bool:
        """True when the input has ended and every byte has been read."""
        return self.buffer_empty() and self.input_ended()

    # Accounting

    def bytes_written(self) -> int:
        """Total number of bytes accepted by ``write``."""
        return self._bytes_written

    def bytes_read(self) -> int:
        """Total number of bytes removed from the buffer."""
        return self._bytes_read