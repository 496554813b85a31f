"""A TCP segment: header plus payload, with checksum handling."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .tcp_header import ParseError, TCPHeader


class _InternetChecksum:
    """Running one's-complement sum over 16-bit big-endian words."""

    def __init__(self, initial_sum: int = 0) -> None:
        self._sum = initial_sum
        self._high = True

    def add(self, data: bytes) -> None:
        for byte in data:
            self._sum += byte << 8 if self._high else byte
            self._high = not self._high

    def value(self) -> int:
        total = self._sum
        while total > 0xFFFF:
            total = (total >> 16) + (total & 0xFFFF)
        return ~total & 0xFFFF


@dataclass
class TCPSegment:
    """A TCP header together with its payload bytes."""

    header: TCPHeader = field(default_factory=TCPHeader)
    payload: bytes = b""

    @classmethod
    def parse(cls, data: bytes, datagram_layer_checksum: int = 0) -> TCPSegment:
        """Parse a segment, verifying its checksum against the lower layer's pseudo-checksum."""
        data = bytes(data)
        check = _InternetChecksum(datagram_layer_checksum)
        check.add(data)
        if check.value():
            raise ParseError("bad checksum")
        header = TCPHeader.parse(data)
        return cls(header=header, payload=data[header.doff * 4 :])

    def serialize(self, datagram_layer_checksum: int = 0) -> bytes:
        """Serialize the segment with a freshly computed checksum; ``self`` is left unchanged."""
        header_out = replace(self.header, cksum=0)
        check = _InternetChecksum(datagram_layer_checksum)
        check.add(header_out.serialize())
        check.add(self.payload)
        header_out.cksum = check.value()
        return header_out.serialize() + bytes(self.payload)

    def length_in_sequence_space(self) -> int:
        """Payload length plus one for SYN and one for FIN."""
        return len(self.payload) + int(self.header.syn) + int(self.header.fin)