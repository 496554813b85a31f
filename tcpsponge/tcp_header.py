"""The TCP segment header: parsing, serialization and display."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

_FIXED = struct.Struct("!HHIIBBHHH")

_URG = 0b0010_0000
_ACK = 0b0001_0000
_PSH = 0b0000_1000
_RST = 0b0000_0100
_SYN = 0b0000_0010
_FIN = 0b0000_0001


class ParseError(ValueError):
    """Raised when bytes cannot be parsed as a TCP header or segment."""


@dataclass(eq=False)
class TCPHeader:
    """A TCP segment header. Options are not supported and are skipped on parse."""

    LENGTH: ClassVar[int] = 20

    sport: int = 0
    dport: int = 0
    seqno: int = 0
    ackno: int = 0
    doff: int = LENGTH // 4
    urg: bool = False
    ack: bool = False
    psh: bool = False
    rst: bool = False
    syn: bool = False
    fin: bool = False
    win: int = 0
    cksum: int = 0
    uptr: int = 0

    @classmethod
    def parse(cls, data: bytes) -> TCPHeader:
        """Parse a header from the start of ``data``; anything past the header is ignored."""
        data = bytes(data)
        if len(data) < cls.LENGTH:
            raise ParseError("packet too short")
        sport, dport, seqno, ackno, off_b, fl_b, win, cksum, uptr = _FIXED.unpack_from(data)
        doff = off_b >> 4
        if doff < 5:
            raise ParseError("header too short")
        if len(data) < doff * 4:
            raise ParseError("packet too short")
        return cls(
            sport=sport,
            dport=dport,
            seqno=seqno,
            ackno=ackno,
            doff=doff,
            urg=bool(fl_b & _URG),
            ack=bool(fl_b & _ACK),
            psh=bool(fl_b & _PSH),
            rst=bool(fl_b & _RST),
            syn=bool(fl_b & _SYN),
            fin=bool(fl_b & _FIN),
            win=win,
            cksum=cksum,
            uptr=uptr,
        )

    def serialize(self) -> bytes:
        """Serialize the header, padded to ``4 * doff`` bytes; the checksum is not recomputed."""
        if self.doff < 5:
            raise ValueError("TCP header too short")
        fl_b = (
            (_URG if self.urg else 0)
            | (_ACK if self.ack else 0)
            | (_PSH if self.psh else 0)
            | (_RST if self.rst else 0)
            | (_SYN if self.syn else 0)
            | (_FIN if self.fin else 0)
        )
        fixed = _FIXED.pack(
            self.sport,
            self.dport,
            self.seqno,
            self.ackno,
            (self.doff << 4) & 0xFF,
            fl_b,
            self.win,
            self.cksum,
            self.uptr,
        )
        return fixed.ljust(4 * self.doff, b"\x00")

    def _flags_text(self) -> str:
        flags = (
            ("urg", self.urg),
            ("ack", self.ack),
            ("psh", self.psh),
            ("rst", self.rst),
            ("syn", self.syn),
            ("fin", self.fin),
        )
        return " ".join(f"{name}: {'true' if on else 'false'}" for name, on in flags)

    def to_string(self) -> str:
        """The header's contents in human-readable form, numbers in hexadecimal."""
        return (
            f"TCP source port: {self.sport:x}\n"
            f"TCP dest port: {self.dport:x}\n"
            f"TCP seqno: {self.seqno:x}\n"
            f"TCP ackno: {self.ackno:x}\n"
            f"TCP doff: {self.doff:x}\n"
            f"Flags: {self._flags_text()}\n"
            f"TCP winsize: {self.win:x}\n"
            f"TCP cksum: {self.cksum:x}\n"
            f"TCP uptr: {self.uptr:x}\n"
        )

    def summary(self) -> str:
        """A one-line summary of the flags, sequence numbers and window."""
        flags = "".join(
            letter for letter, on in (("S", self.syn), ("A", self.ack), ("R", self.rst), ("F", self.fin)) if on
        )
        return f"Header(flags={flags},seqno={self.seqno},ack={self.ackno},win={self.win})"

    def __eq__(self, other: object) -> bool:
        # Ports and checksum are deliberately left out of the comparison.
        if not isinstance(other, TCPHeader):
            return NotImplemented
        return (
            self.seqno == other.seqno
            and self.ackno == other.ackno
            and self.doff == other.doff
            and self.urg == other.urg
            and self.ack == other.ack
            and self.psh == other.psh
            and self.rst == other.rst
            and self.syn == other.syn
            and self.fin == other.fin
            and self.win == other.win
            and self.uptr == other.uptr
        )

    __hash__ = None  # type: ignore[assignment]