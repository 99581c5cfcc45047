"""Signal-driven message receiver."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO, NoReturn

from sigtalk.printf import printf
from sigtalk.protocol import MessageDecoder, bit_for_signal

_DATA_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


def _send_ack(pid: int) -> None:
    try:
        os.kill(pid, signal.SIGUSR1)
    except OSError as exc:
        print(
            f"Server: error sending ACK SIGUSR1 to client: {exc.strerror}",
            file=sys.stderr,
        )


class Server:
    """Decodes bits arriving as signals and writes each finished message.

    Every message is written to *output* (standard output by default)
    followed by a newline. Each received bit is acknowledged through *ack*,
    which by default sends ``SIGUSR1`` back to the sender.
    """

    def __init__(
        self,
        output: BinaryIO | None = None,
        ack: Callable[[int], None] | None = None,
        decoder: MessageDecoder | None = None,
    ) -> None:
        self._output = output
        self._ack = ack if ack is not None else _send_ack
        self.decoder = decoder if decoder is not None else MessageDecoder()

    def _write(self, message: bytes) -> None:
        out = self._output if self._output is not None else sys.stdout.buffer
        out.write(message + b"\n")
        out.flush()

    def handle(self, signum: int, sender_pid: int) -> bytes | None:
        """Process one data signal from *sender_pid*; return a finished message, if any."""
        message = self.decoder.feed_bit(bit_for_signal(signum))
        if message is not None:
            self._write(message)
        if sender_pid > 0:
            self._ack(sender_pid)
        return message

    def serve_forever(self) -> NoReturn:
        """Wait for data signals and handle them until an exception stops the loop."""
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _DATA_SIGNALS)
        try:
            while True:
                info = signal.sigwaitinfo(_DATA_SIGNALS)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: list[str] | None = None) -> int:
    """Print this process's PID and receive messages until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0