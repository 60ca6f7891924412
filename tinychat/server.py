"""The chat server: one session per connected client, all sharing one room."""

from __future__ import annotations

import asyncio
import re
import sys
from collections import deque

from .message import Message
from .room import Participant, Room

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Session(Participant):
    """A single connected client."""

    def __init__(self, reader: asyncio.StreamReader, writer, room: Room) -> None:
        self.reader = reader
        self.writer = writer
        self.room = room
        self._queue: deque[Message] = deque()

    async def start(self) -> None:
        """Join the room and read from the client until it goes away."""
        self.room.join(self)
        await self.read_loop()

    def deliver(self, message: Message) -> None:
        """Pass a message from this client to the room."""
        self.room.deliver(self, message)

    def write(self, message: Message) -> None:
        """Send a message from the room to this client."""
        self._queue.append(message)
        while self._queue:
            current = self._queue.popleft()
            if current.decode_header():
                self._send(current.body())
            else:
                print("Message length exceeds the maximum length")

    def _send(self, body: bytes) -> None:
        if self.writer.is_closing():
            print("Write error: connection is closed", file=sys.stderr)
            return
        self.writer.write(body)
        print("Data is written to the socket: ")

    async def read_loop(self) -> None:
        """Relay each newline-terminated line to the room; leave on error."""
        try:
            while True:
                try:
                    data = await self.reader.readuntil(b"\n")
                except asyncio.IncompleteReadError:
                    self.room.leave(self)
                    print("Connection closed by peer")
                    return
                except (OSError, asyncio.LimitOverrunError) as exc:
                    self.room.leave(self)
                    print(f"Read error: {exc}")
                    return
                print(f"Received: {data.decode('utf-8', errors='replace')}")
                self.deliver(Message(data))
        finally:
            self.writer.close()


async def serve(port: int, room: Room) -> asyncio.AbstractServer:
    """Start accepting clients on ``port``; return the listening server."""

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        await Session(reader, writer, room).start()

    return await asyncio.start_server(handle, "0.0.0.0", port)


async def _run(port: int) -> None:
    server = await serve(port, Room())
    async with server:
        await server.serve_forever()


def main(argv: list[str] | None = None) -> int:
    """Run the chat server on the port given as the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: server <port> [<port> ...]", file=sys.stderr)
        return 1
    try:
        asyncio.run(_run(_atoi(args[0])))
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        print(f"Exception: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())