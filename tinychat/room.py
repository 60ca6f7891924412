"""A chat room that relays each message to every participant but its sender."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from .message import Message


class Participant(ABC):
    """Anything that can take part in a room."""

    @abstractmethod
    def deliver(self, message: Message) -> None:
        """Hand a message from this participant to its room."""

    @abstractmethod
    def write(self, message: Message) -> None:
        """Send a message from the room out to this participant."""


class Room:
    """The set of connected participants and the broadcast between them."""

    def __init__(self) -> None:
        self._participants: dict[Participant, None] = {}
        self._queue: deque[Message] = deque()

    def join(self, participant: Participant) -> None:
        """Add a participant; joining twice has no further effect."""
        self._participants[participant] = None

    def leave(self, participant: Participant) -> None:
        """Remove a participant if present."""
        self._participants.pop(participant, None)

    def deliver(self, sender: Participant | None, message: Message) -> None:
        """Write ``message`` to every participant except ``sender``."""
        self._queue.append(message)
        while self._queue:
            current = self._queue.popleft()
            for participant in list(self._participants):
                if participant is not sender:
                    participant.write(current)

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, participant: object) -> bool:
        return participant in self._participants