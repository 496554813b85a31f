import pytest

from tcpsponge.tcp_header import ParseError, TCPHeader
from tcpsponge.tcp_segment import TCPSegment


def _segment(payload=b"hello", **header_fields):
    return TCPSegment(header=TCPHeader(**header_fields), payload=payload)


def test_length_in_sequence_space():
    assert _segment(b"abc").length_in_sequence_space() == 3
    assert _segment(b"abc", syn=True).length_in_sequence_space() == 4
    assert _segment(b"abc", syn=True, fin=True).length_in_sequence_space() == 5
    assert _segment(b"", fin=True).length_in_sequence_space() == 1


def test_round_trip():
    seg = _segment(b"some data", sport=4000, dport=5000, seqno=123, ackno=456, ack=True, win=900)
    parsed = TCPSegment.parse(seg.serialize())
    assert parsed.header == seg.header
    assert parsed.header.sport == 4000
    assert parsed.payload == b"some data"


@pytest.mark.parametrize("payload", [b"", b"x", b"odd", b"even", bytes(range(256))])
def test_round_trip_payload_lengths(payload):
    parsed = TCPSegment.parse(_segment(payload, syn=True).serialize())
    assert parsed.payload == payload


def test_round_trip_with_options_area():
    seg = _segment(b"abc", doff=8)
    wire = seg.serialize()
    assert len(wire) == 8 * 4 + 3
    assert TCPSegment.parse(wire).payload == b"abc"


def test_serialize_leaves_segment_unchanged():
    seg = _segment(b"abc", cksum=0)
    seg.serialize()
    assert seg.header.cksum == 0


def test_known_checksum_of_empty_segment():
    wire = TCPSegment().serialize()
    assert wire[16:18] == b"\xaf\xff"


def test_corrupted_segment_fails_checksum():
    wire = bytearray(_segment(b"payload").serialize())
    wire[-1] ^= 0x01
    with pytest.raises(ParseError):
        TCPSegment.parse(bytes(wire))


def test_pseudo_checksum_must_match():
    wire = _segment(b"data").serialize(datagram_layer_checksum=0x1F2E)
    assert TCPSegment.parse(wire, 0x1F2E).payload == b"data"
    with pytest.raises(ParseError):
        TCPSegment.parse(wire, 0)


def test_parse_rejects_truncated_segment():
    with pytest.raises(ParseError):
        TCPSegment.parse(b"\xff\xff")


def test_default_segment_is_empty():
    seg = TCPSegment()
    assert seg.payload == b""
    assert seg.length_in_sequence_space() == 0
    assert len(seg.serialize()) == TCPHeader.LENGTH