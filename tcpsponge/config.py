"""Configuration for the TCP sender and receiver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class TCPConfig:
    """Tunable parameters of a TCP endpoint.

    ``fixed_isn`` is a raw 32-bit initial sequence number, or ``None`` to let
    the endpoint pick one.
    """

    DEFAULT_CAPACITY: ClassVar[int] = 64000
    MAX_PAYLOAD_SIZE: ClassVar[int] = 1000
    TIMEOUT_DFLT: ClassVar[int] = 1000
    MAX_RETX_ATTEMPTS: ClassVar[int] = 8

    rt_timeout: int = TIMEOUT_DFLT
    recv_capacity: int = DEFAULT_CAPACITY
    send_capacity: int = DEFAULT_CAPACITY
    fixed_isn: int | None = None