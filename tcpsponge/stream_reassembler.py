"""Reassembly of possibly out-of-order, overlapping substrings into a byte stream."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter

from .byte_stream import ByteStream


@dataclass(frozen=True)
class _Segment:
    index: int
    data: str
    eof: bool


class StreamReassembler:
    """Assembles excerpts of a byte stream into an in-order ``ByteStream``."""

    def __init__(self, capacity: int) -> None:
        self._output = ByteStream(capacity)
        self._capacity = capacity
        self._next_index = 0
        self._eof = False
        self._pending: list[_Segment] = []

    def push_substring(self, data: str, index: int, eof: bool) -> None:
        """Receive a substring starting at ``index`` and write any newly contiguous bytes.

        Bytes that do not fit in the output stream are discarded. ``eof`` marks
        the last byte of ``data`` as the last byte of the whole stream.
        """
        if index + len(data) <= self._next_index and not eof:
            return

        self._pending.append(_Segment(index, data, eof))
        self._pending.sort(key=attrgetter("index"))

        while self._pending and self._pending[0].index <= self._next_index:
            segment = self._pending.pop(0)
            if segment.eof:
                self._eof = True
            chunk = segment.data[self._next_index - segment.index :]
            written = self._output.write(chunk)
            if written < len(chunk):
                self._eof = False
            self._next_index += written

        if self._eof:
            self._output.end_input()

    def stream_out(self) -> ByteStream:
        """The reassembled in-order byte stream."""
        return self._output

    def unassembled_bytes(self) -> int:
        """Number of distinct stored bytes not yet written to the output."""
        total = 0
        covered_to = self._next_index
        for segment in self._pending:
            end = segment.index + len(segment.data)
            start = max(segment.index, covered_to)
            if end > start:
                total += end - start
            covered_to = max(covered_to, end)
        return total

    def empty(self) -> bool:
        """True if no substrings are waiting to be assembled."""
        return not self._pending

    def ack_index(self) -> int:
        """Index of the next byte the reassembler is waiting for."""
        return self._next_index