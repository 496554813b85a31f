"""Byte streams, stream reassembly, TCP headers and segments, state summaries and configuration."""

__version__ = "0.1.0"
__all__ = ["byte_stream", "stream_reassembler", "tcp_state", "config", "tcp_header", "tcp_segment"]