# tinychat

A small chat room over plain TCP. One server holds a single room. Every line
a connected client sends is passed on to all the other clients in the room,
never back to the sender.

## Install

    pip install .

## Running a server

    tinychat-server 9000

The server listens on all IPv4 addresses on the given port. It prints each
line it receives and notes when a client disconnects. With no port it prints
a usage line and exits with status 1.

## Joining the room

    tinychat-client 9000

The client connects to `127.0.0.1` on the given port and prompts with
`Enter message: `. Type a line and press Enter to send it. Lines from other
people in the room show up as `Server: <text>`. When standard input ends, the
client stops sending and waits until the server closes the connection.

`tinychat.client.run_client(port, host, stdin, stdout)` is the coroutine
behind the command. It also takes a host and the streams to use.
`receive_lines` and `send_lines` are the two halves of it.

## Message format

Each message passing through the room is held as a `tinychat.message.Message`:
a four-character, space-padded decimal length header followed by the body.
Bodies are cut to at most 512 bytes (`clamp_body_length`).

    >>> from tinychat.message import Message
    >>> m = Message("hello")
    >>> m.data()
    b'   5hello'
    >>> m.body()
    b'hello'

`Message.from_data` wraps raw bytes. `decode_header` then reads the length
from them and returns `False` if the length is out of range.

The server sends each receiving client only the body, without the header. A
line longer than 512 bytes therefore arrives cut short and without its
newline.

## Using the room in your own code

`tinychat.room.Room` keeps the set of participants and broadcasts messages.
Any subclass of `tinychat.room.Participant` that implements `deliver` and
`write` can join:

    from tinychat.message import Message
    from tinychat.room import Room

    room = Room()
    room.join(alice)
    room.join(bob)
    room.deliver(alice, Message("hi"))   # only bob.write(...) is called
    len(room)                            # 2
    alice in room                        # True

`tinychat.server.serve(port, room)` starts a listening asyncio server in which
every connection becomes a `Session` in the given room.

## What it does not do

There is one room per server and no way to pick or create others. There are no
nicknames, no message history for late joiners, no authentication and no
encryption. The client command always connects to `127.0.0.1`.

## Tests

    pip install ".[test]"
    pytest