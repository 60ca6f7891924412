"""An interactive chat client: typed lines go out, received lines are shown."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterable, Iterable
from typing import TextIO


async def receive_lines(reader: asyncio.StreamReader, out: TextIO) -> None:
    """Print every line from the server until the connection ends."""
    while True:
        try:
            line = await reader.readuntil(b"\n")
        except (asyncio.IncompleteReadError, asyncio.LimitOverrunError, OSError):
            return
        text = line.decode("utf-8", errors="replace").removesuffix("\n")
        print(f"Server: {text}", file=out, flush=True)


async def send_lines(writer, lines: Iterable[str] | AsyncIterable[str]) -> None:
    """Send each line, newline-terminated, to the server."""

    async def _send(line: str) -> None:
        writer.write((line.removesuffix("\n") + "\n").encode("utf-8"))
        await writer.drain()

    if isinstance(lines, AsyncIterable):
        async for line in lines:
            await _send(line)
    else:
        for line in lines:
            await _send(line)


async def _prompted_lines(stdin: TextIO, stdout: TextIO):
    while True:
        print("Enter message: ", end="", file=stdout, flush=True)
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            return
        yield line


async def run_client(
    port: int | str,
    host: str = "127.0.0.1",
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Connect, send typed lines and show received ones until both sides end."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    reader, writer = await asyncio.open_connection(host, int(port))
    receiver = asyncio.create_task(receive_lines(reader, stdout))
    try:
        await send_lines(writer, _prompted_lines(stdin, stdout))
        if writer.can_write_eof():
            writer.write_eof()
        await receiver
    finally:
        receiver.cancel()
        writer.close()


def main(argv: list[str] | None = None) -> int:
    """Run the client against the local server on the given port."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Provide port too as second argument", file=sys.stderr)
        return 1
    try:
        asyncio.run(run_client(args[0]))
    except KeyboardInterrupt:
        pass
    except (OSError, ValueError) as exc:
        print(f"Exception: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())