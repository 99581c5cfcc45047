"""Sends a message to a server one bit at a time, waiting for each acknowledgement."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from sigtalk.atoi import atoi
from sigtalk.printf import printf
from sigtalk.protocol import encode_bits, signal_for_bit

DEFAULT_TIMEOUT = 5.0

_PROG = "sigtalk-client"


class ClientError(Exception):
    """Raised when a bit cannot be delivered or is not acknowledged."""


@contextmanager
def _ack_signal_blocked() -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def _send_bit(server_pid: int, bit: int, timeout: float) -> None:
    signum = signal_for_bit(bit)
    try:
        os.kill(server_pid, signum)
    except OSError as exc:
        raise ClientError(
            f"Client: error sending data bit {signum.name}: {exc.strerror}"
        ) from exc
    if signal.sigtimedwait([signal.SIGUSR1], timeout) is None:
        raise ClientError("Client: no ACK received from server. Timeout.")


def send_char(server_pid: int, byte: int, timeout: float = DEFAULT_TIMEOUT) -> None:
    """Send the eight bits of *byte*, waiting up to *timeout* seconds for each ACK."""
    if server_pid <= 0:
        raise ValueError(f"invalid server PID: {server_pid}")
    if timeout < 0:
        raise ValueError("timeout must not be negative")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    with _ack_signal_blocked():
        for bit in encode_bits([byte]):
            _send_bit(server_pid, bit, timeout)


def send_message(
    server_pid: int, message: str | bytes, timeout: float = DEFAULT_TIMEOUT
) -> int:
    """Send *message* followed by a NUL byte; return the number of bytes sent."""
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    data += b"\0"
    with _ack_signal_blocked():
        for byte in data:
            send_char(server_pid, byte, timeout)
    return len(data)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``<server_pid> <message>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Usage: %s <server_pid> <message>\n", _PROG)
        return 1
    server_pid = atoi(args[0])
    if server_pid <= 0:
        printf("Error: invalid server PID.\n")
        return 1
    try:
        send_message(server_pid, args[1])
    except ClientError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0