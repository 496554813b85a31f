# tcpsponge

Pure-Python pieces of a user-space TCP implementation, with no dependencies
outside the standard library.

## Modules

- `tcpsponge.byte_stream.ByteStream`: a bounded, in-order stream of
  characters. The writer side has `write` (accepts as much as fits and
  returns how much was accepted), `remaining_capacity` and `end_input`. The
  reader side has `peek_output`, `pop_output` and `read`, plus
  `buffer_size`, `buffer_empty`, `input_ended` and `eof`. `bytes_written`
  and `bytes_read` keep running totals. Popping or reading more than is
  buffered does not raise: it sets the stream's error flag (see `error`),
  removes nothing, and `read` returns `""`.
- `tcpsponge.stream_reassembler.StreamReassembler`: `push_substring(data,
  index, eof)` accepts pieces of a stream, possibly out of order or
  overlapping, and writes the contiguous part into the `ByteStream` returned
  by `stream_out()`. Bytes that do not fit the output's capacity are
  discarded. `unassembled_bytes`, `empty` and `ack_index` report what is
  still waiting and where the next expected byte is.
- `tcpsponge.tcp_header.TCPHeader`: a dataclass of TCP header fields.
  `TCPHeader.parse(data)` reads a header from bytes (options are skipped)
  and raises `ParseError` if the data is too short or the data offset is
  below 5; `serialize()` packs it, padded to `4 * doff` bytes, without
  recomputing the checksum. `to_string()` and `summary()` give readable
  text. Equality ignores the ports and the checksum.
- `tcpsponge.tcp_segment.TCPSegment`: a header plus a `bytes` payload.
  `TCPSegment.parse(data, datagram_layer_checksum=0)` verifies the Internet
  checksum and raises `ParseError` on a mismatch; `serialize()` returns the
  bytes with a freshly computed checksum. `length_in_sequence_space()` is
  the payload length plus one for SYN and one for FIN.
- `tcpsponge.tcp_state`: the `State` enum of official TCP state names,
  `TCPState` (built from a `State`, compared by its sender summary,
  receiver summary and two flags, described by `name()`), the text
  constants in `TCPReceiverStateSummary` and `TCPSenderStateSummary`, and
  `TCPState.state_summary(receiver)` for any object offering `stream_out()`
  and `ackno()`.
- `tcpsponge.config.TCPConfig`: a dataclass with `rt_timeout`,
  `recv_capacity`, `send_capacity` and `fixed_isn`, and the class constants
  `DEFAULT_CAPACITY`, `MAX_PAYLOAD_SIZE`, `TIMEOUT_DFLT` and
  `MAX_RETX_ATTEMPTS`.

Sequence and acknowledgment numbers are plain 32-bit integers.

## Installation

```
pip install .
```

## Examples

```python
from tcpsponge.stream_reassembler import StreamReassembler

reassembler = StreamReassembler(8)
reassembler.push_substring("abc", 0, False)
reassembler.push_substring("de", 3, True)

stream = reassembler.stream_out()
print(stream.read(stream.buffer_size()))  # abcde
print(stream.eof())                        # True
```

```python
from tcpsponge.byte_stream import ByteStream

stream = ByteStream(15)
stream.write("cat")
stream.end_input()
stream.pop_output(3)
print(stream.bytes_read(), stream.eof())   # 3 True
```

```python
from tcpsponge.tcp_header import TCPHeader
from tcpsponge.tcp_segment import TCPSegment

segment = TCPSegment(TCPHeader(seqno=1, syn=True), b"hello")
wire = segment.serialize()
again = TCPSegment.parse(wire)
print(again.payload, again.length_in_sequence_space())  # b'hello' 6
```

## What this package does not do

It has no TCP receiver, sender or connection: nothing turns arriving
segments into acknowledgment numbers and windows, nothing sends or
retransmits, and there is no wrapping sequence-number arithmetic. It opens
no sockets and has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```