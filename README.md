# sigtalk

sigtalk is a client and a server that pass text from one process to another
using only POSIX signals. Each byte is sent as eight signals, most significant
bit first. `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. The server
answers every bit with `SIGUSR1`, and the client waits for that answer before
it sends the next bit. A NUL byte ends each message.

## Installation

```
pip install .
```

The package has no third-party dependencies. It needs `signal.sigwaitinfo`
and `signal.sigtimedwait`, so it runs on Linux and on other POSIX systems
that provide these calls.

## Usage

Start the server. It prints its process id and waits for messages until you
interrupt it with Ctrl-C:

```
$ sigtalk-server
Server PID: 4242
```

From a second terminal, send a message to that PID:

```
$ sigtalk-client 4242 "hello there"
```

When the NUL byte arrives, the server writes the message to standard output
followed by a newline. It collects at most 1024 bytes, the NUL included.
When 1024 bytes have been collected, the server writes them out and starts a
new message with the bytes that follow. A longer message therefore appears
in pieces of 1024 bytes. If its length is an exact multiple of 1024, an empty
line follows the last piece.

The client waits up to 5 seconds for each acknowledgement. It exits with
status 1 in these cases:

- it is not given exactly two arguments (it prints a usage line);
- the PID does not parse as a positive number (it prints
  `Error: invalid server PID.`);
- a signal cannot be delivered;
- the server does not acknowledge a bit in time.

The PID is parsed leniently, like C `atoi`: leading whitespace and one sign
are accepted, and parsing stops at the first non-digit.

## Library use

### Protocol

`sigtalk.protocol` holds the pieces that do not touch signals:

```python
from sigtalk.protocol import MessageDecoder, encode_bits

decoder = MessageDecoder()
for bit in encode_bits(b"hi\0"):
    message = decoder.feed_bit(bit)
    if message is not None:
        print(message)  # b'hi'
```

- `encode_bits(data)` yields the bits of each byte, most significant first.
- `signal_for_bit(bit)` and `bit_for_signal(signum)` map between bits and
  `SIGUSR1`/`SIGUSR2`. Either raises `ValueError` for anything else.
- `MessageDecoder(max_length=1024)` has a `feed_bit(bit)` method. It returns
  the finished message, without its NUL, when the bit completes one, and
  `None` otherwise.

### Client

`sigtalk.client.send_message(server_pid, message, timeout=5.0)` sends a `str`
or `bytes` message followed by a NUL byte and returns the number of bytes
sent. `send_char(server_pid, byte, timeout=5.0)` sends a single byte. Both
raise `ClientError` when a signal cannot be delivered or an acknowledgement
does not arrive in time. They raise `ValueError` when the PID, the timeout or
the byte is out of range.

### Server

`sigtalk.server.Server(output=None, ack=None, decoder=None)` does the
receiving:

- `handle(signum, sender_pid)` processes one data signal, writes any finished
  message to `output` (standard output by default), acknowledges the sender,
  and returns the message or `None`.
- `serve_forever()` blocks `SIGUSR1` and `SIGUSR2` and handles them as they
  arrive.

The `ack` argument replaces the default acknowledgement, which sends
`SIGUSR1` to the sender.

### Formatting

`sigtalk.printf` provides `format_string(fmt, *args)` and `printf(fmt, *args)`.
`printf` writes to standard output and returns the length of the text. They
support the conversions `%c`, `%s`, `%d`, `%i`, `%u`, `%x`, `%X`, `%p` and
`%%`, with no flags, widths or precisions:

- An unknown conversion produces nothing.
- `%s` of `None` gives `(null)`.
- `%p` of zero or `None` gives `(nil)`.

The conversions are built on `sigtalk.numfmt`, which provides `itoa`,
`itoa_unsigned`, `itoa_hex` and `itoa_ptr` with 32-bit integer wrap-around,
and on `sigtalk.atoi.atoi`.

## Limitations

- A server uses one decoder for all senders. If two clients send at the same
  time, their bits are mixed together.
- The command-line client always uses the default 5-second timeout per bit.
- Messages are plain bytes with no checksum or encryption.

## Development

```
pip install -e ".[test]"
pytest
```