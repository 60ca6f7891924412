"""Length-prefixed chat messages.

A message on the wire is a four-byte ASCII header holding the body length,
right-aligned and space-padded, followed by the body itself. Bodies longer
than ``MAX_BYTES`` are cut short.
"""

from __future__ import annotations

import re

MAX_BYTES = 512
HEADER = 4

_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


def clamp_body_length(length: int) -> int:
    """Return ``length`` limited to ``MAX_BYTES``."""
    return min(length, MAX_BYTES)


def _parse_header(raw: bytes) -> int:
    """Read a leading decimal integer the way C's ``atoi`` does; 0 if none."""
    raw = raw.split(b"\0", 1)[0]
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else 0


class Message:
    """One chat message: a length header followed by a body."""

    def __init__(self, text: str | bytes = b"") -> None:
        body = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        self._body_length = clamp_body_length(len(body))
        self._data = bytes(HEADER) + body[: self._body_length]
        self.encode_header()

    @classmethod
    def from_data(cls, data: bytes) -> "Message":
        """Wrap raw wire bytes; call ``decode_header`` before reading the body."""
        message = cls()
        message._data = bytes(data[: HEADER + MAX_BYTES])
        message._body_length = 0
        return message

    def encode_header(self) -> None:
        """Write the current body length into the header bytes."""
        header = f"{self._body_length:4d}".encode("ascii")[:HEADER]
        self._data = header + self._data[HEADER:]

    def decode_header(self) -> bool:
        """Set the body length from the header; False if it is out of range."""
        value = _parse_header(self._data[:HEADER])
        if value > MAX_BYTES or value < 0:
            self._body_length = 0
            return False
        self._body_length = value
        return True

    def data(self) -> bytes:
        """Return the header and the body together."""
        return self._data[: HEADER + self._body_length]

    def body(self) -> bytes:
        """Return the body without its header."""
        return self.data()[HEADER : HEADER + self._body_length]

    def body_length(self) -> int:
        """Return the length of the body in bytes."""
        return self._body_length

    def __repr__(self) -> str:
        return f"Message({self.body()!r})"