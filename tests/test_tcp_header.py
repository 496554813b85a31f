import pytest

from tcpsponge.tcp_header import ParseError, TCPHeader


def _full_header(**overrides):
    fields = dict(
        sport=1234,
        dport=80,
        seqno=0xDEADBEEF,
        ackno=42,
        urg=True,
        ack=True,
        psh=False,
        rst=True,
        syn=False,
        fin=True,
        win=65535,
        cksum=0x1234,
        uptr=7,
    )
    fields.update(overrides)
    return TCPHeader(**fields)


def test_default_header_serializes_to_fixed_length():
    assert len(TCPHeader().serialize()) == TCPHeader.LENGTH


def test_round_trip_preserves_all_fields():
    header = _full_header()
    parsed = TCPHeader.parse(header.serialize())
    assert parsed == header
    assert parsed.sport == 1234
    assert parsed.dport == 80
    assert parsed.cksum == 0x1234
    assert parsed.seqno == 0xDEADBEEF


@pytest.mark.parametrize("flag", ["urg", "ack", "psh", "rst", "syn", "fin"])
def test_each_flag_round_trips_alone(flag):
    header = TCPHeader(**{flag: True})
    parsed = TCPHeader.parse(header.serialize())
    assert getattr(parsed, flag) is True
    others = {"urg", "ack", "psh", "rst", "syn", "fin"} - {flag}
    assert not any(getattr(parsed, name) for name in others)


def test_flag_bits_on_the_wire():
    assert TCPHeader(syn=True).serialize()[13] == 0b0000_0010
    assert TCPHeader(fin=True).serialize()[13] == 0b0000_0001
    assert TCPHeader(urg=True).serialize()[13] == 0b0010_0000


def test_larger_doff_pads_and_round_trips():
    header = TCPHeader(doff=7, seqno=9)
    wire = header.serialize()
    assert len(wire) == 4 * 7
    assert wire[TCPHeader.LENGTH :] == bytes(4 * 7 - TCPHeader.LENGTH)
    assert TCPHeader.parse(wire).doff == 7


def test_serialize_rejects_short_doff():
    with pytest.raises(ValueError):
        TCPHeader(doff=4).serialize()


def test_parse_rejects_truncated_data():
    wire = TCPHeader().serialize()
    with pytest.raises(ParseError):
        TCPHeader.parse(wire[:-1])


def test_parse_rejects_short_doff():
    wire = bytearray(TCPHeader().serialize())
    wire[12] = 4 << 4
    with pytest.raises(ParseError):
        TCPHeader.parse(bytes(wire))


def test_parse_rejects_doff_beyond_data():
    wire = TCPHeader(doff=6).serialize()
    with pytest.raises(ParseError):
        TCPHeader.parse(wire[: TCPHeader.LENGTH])


def test_parse_ignores_trailing_payload():
    header = _full_header()
    assert TCPHeader.parse(header.serialize() + b"payload") == header


def test_equality_ignores_ports_and_checksum():
    a = _full_header()
    b = _full_header(sport=1, dport=2, cksum=3)
    assert a == b
    assert a != _full_header(win=1)
    assert a != _full_header(syn=True)


def test_summary():
    header = TCPHeader(syn=True, ack=True, seqno=5, ackno=7, win=100)
    assert header.summary() == "Header(flags=SA,seqno=5,ack=7,win=100)"


def test_summary_without_flags():
    assert TCPHeader().summary() == "Header(flags=,seqno=0,ack=0,win=0)"


def test_to_string_lists_fields_in_hex():
    text = TCPHeader(sport=0xABC, ack=True).to_string()
    lines = text.splitlines()
    assert lines[0] == "TCP source port: abc"
    assert "Flags: urg: false ack: true psh: false rst: false syn: false fin: false" in lines
    assert text.endswith("\n")