"""Bit-level wire protocol: one signal per bit, most significant bit first.

A message is a sequence of bytes terminated by a NUL byte. Each bit travels
as a signal, ``SIGUSR1`` for 0 and ``SIGUSR2`` for 1, and the receiver
answers every bit with ``SIGUSR1`` as an acknowledgement.
"""

from __future__ import annotations

import signal
from collections.abc import Iterable, Iterator

MAX_MESSAGE_LEN = 1024

_BITS_PER_BYTE = 8


def encode_bits(data: Iterable[int]) -> Iterator[int]:
    """Yield the bits of each byte in *data*, most significant bit first."""
    for byte in data:
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        for shift in reversed(range(_BITS_PER_BYTE)):
            yield (byte >> shift) & 1


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries *bit*."""
    if bit == 0:
        return signal.SIGUSR1
    if bit == 1:
        return signal.SIGUSR2
    raise ValueError(f"bit must be 0 or 1, not {bit!r}")


def bit_for_signal(signum: int) -> int:
    """Return the bit carried by *signum*."""
    if signum == signal.SIGUSR2:
        return 1
    if signum == signal.SIGUSR1:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


class MessageDecoder:
    """Reassembles bytes from single bits and splits them into messages.

    A message ends at a NUL byte, or when ``max_length`` bytes have been
    collected; in the latter case the bytes that follow start a new message.
    """

    def __init__(self, max_length: int = MAX_MESSAGE_LEN) -> None:
        if max_length < 0:
            raise ValueError("max_length must not be negative")
        self.max_length = max_length
        self._byte = 0
        self._bits = 0
        self._buffer = bytearray()

    def feed_bit(self, bit: int) -> bytes | None:
        """Take one bit; return the finished message when this bit completes one."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, not {bit!r}")
        self._byte = ((self._byte << 1) | bit) & 0xFF
        self._bits += 1
        if self._bits < _BITS_PER_BYTE:
            return None
        self._bits = 0
        return self._push(self._byte)

    def _push(self, byte: int) -> bytes | None:
        if len(self._buffer) < self.max_length:
            self._buffer.append(byte)
        if byte == 0 or len(self._buffer) == self.max_length:
            message = bytes(self._buffer).split(b"\0", 1)[0]
            self._buffer.clear()
            return message
        return None