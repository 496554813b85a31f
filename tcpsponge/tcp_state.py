"""Official TCP state names mapped onto sender and receiver state summaries."""

from __future__ import annotations

from enum import Enum


class TCPReceiverStateSummary:
    """Descriptions of the receiver's observable state."""

    ERROR = "error (connection was reset)"
    LISTEN = "waiting for SYN: ackno is empty"
    SYN_RECV = "SYN received (ackno exists), and input to stream hasn't ended"
    FIN_RECV = "input to stream has ended"


class TCPSenderStateSummary:
    """Descriptions of the sender's observable state."""

    ERROR = "error (connection was reset)"
    CLOSED = "waiting for stream to begin (no SYN sent)"
    SYN_SENT = "stream started but nothing acknowledged"
    SYN_ACKED = "stream ongoing"
    FIN_SENT = "stream finished (FIN sent) but not fully acknowledged"
    FIN_ACKED = "stream finished and fully acknowledged"


class State(Enum):
    """Official state names from the TCP specification."""

    LISTEN = 0
    SYN_RCVD = 1
    SYN_SENT = 2
    ESTABLISHED = 3
    CLOSE_WAIT = 4
    LAST_ACK = 5
    FIN_WAIT_1 = 6
    FIN_WAIT_2 = 7
    CLOSING = 8
    TIME_WAIT = 9
    CLOSED = 10
    RESET = 11


_R = TCPReceiverStateSummary
_S = TCPSenderStateSummary

# state -> (receiver, sender, active, linger_after_streams_finish)
_STATE_TABLE: dict[State, tuple[str, str, bool, bool]] = {
    State.LISTEN: (_R.LISTEN, _S.CLOSED, True, True),
    State.SYN_RCVD: (_R.SYN_RECV, _S.SYN_SENT, True, True),
    State.SYN_SENT: (_R.LISTEN, _S.SYN_SENT, True, True),
    State.ESTABLISHED: (_R.SYN_RECV, _S.SYN_ACKED, True, True),
    State.CLOSE_WAIT: (_R.FIN_RECV, _S.SYN_ACKED, True, False),
    State.LAST_ACK: (_R.FIN_RECV, _S.FIN_SENT, True, False),
    State.CLOSING: (_R.FIN_RECV, _S.FIN_SENT, True, True),
    State.FIN_WAIT_1: (_R.SYN_RECV, _S.FIN_SENT, True, True),
    State.FIN_WAIT_2: (_R.SYN_RECV, _S.FIN_ACKED, True, True),
    State.TIME_WAIT: (_R.FIN_RECV, _S.FIN_ACKED, True, True),
    State.RESET: (_R.ERROR, _S.ERROR, False, False),
    State.CLOSED: (_R.FIN_RECV, _S.FIN_ACKED, False, False),
}


class TCPState:
    """Summary of a connection's state: sender and receiver summaries plus two flags."""

    __slots__ = ("receiver", "sender", "active", "linger_after_streams_finish")

    def __init__(self, state: State) -> None:
        self.receiver, self.sender, self.active, self.linger_after_streams_finish = _STATE_TABLE[state]

    def _key(self) -> tuple[bool, bool, str, str]:
        return (self.active, self.linger_after_streams_finish, self.sender, self.receiver)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TCPState):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"TCPState({self.name()})"

    def name(self) -> str:
        """Summarize the state in a string."""
        return (
            f"sender=`{self.sender}`, receiver=`{self.receiver}`, "
            f"active={int(self.active)}, "
            f"linger_after_streams_finish={int(self.linger_after_streams_finish)}"
        )

    @staticmethod
    def state_summary(receiver) -> str:
        """Summarize a receiver's state.

        ``receiver`` must provide ``stream_out()`` returning a byte stream and
        ``ackno()`` returning ``None`` until a SYN has arrived.
        """
        stream = receiver.stream_out()
        if stream.error():
            return TCPReceiverStateSummary.ERROR
        if receiver.ackno() is None:
            return TCPReceiverStateSummary.LISTEN
        if stream.input_ended():
            return TCPReceiverStateSummary.FIN_RECV
        return TCPReceiverStateSummary.SYN_RECV