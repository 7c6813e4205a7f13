"""Fixed-capacity ring buffer of feedback messages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pyrobase.domain.world_models import Severity

DEFAULT_CAPACITY = 1000


@dataclass(frozen=True, slots=True)
class Message:
    """A single log line. ``sequence`` counts every append, starting at 1."""

    text: str
    severity: Severity
    sequence: int


class MessageLog:
    """Append-only ring log that silently overwrites its oldest entry when full.

    ``_cursor`` is the slot the next append writes to. Once the buffer holds
    ``capacity`` entries that slot is also the oldest entry, so recency order
    is rebuilt by walking backwards from the cursor.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("Message log capacity must be positive.")
        self._capacity = capacity
        self._slots: List[Message | None] = [None] * capacity
        self._cursor = 0
        self._count = 0
        self._sequence = 0

    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._count

    @property
    def last_sequence(self) -> int:
        """Sequence number of the newest message, 0 when nothing was logged."""
        return self._sequence

    def append(self, text: str, severity: Severity = Severity.INFO) -> Message:
        self._sequence += 1
        message = Message(text=text, severity=severity, sequence=self._sequence)
        self._slots[self._cursor] = message
        self._cursor = (self._cursor + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1
        return message

    def recent(self, n: int) -> List[Message]:
        """Return up to ``n`` messages, newest first."""
        limit = min(max(n, 0), self._count)
        result: List[Message] = []
        for offset in range(1, limit + 1):
            message = self._slots[(self._cursor - offset) % self._capacity]
            assert message is not None
            result.append(message)
        return result

    def since(self, sequence: int, n: int) -> List[Message]:
        """Return up to ``n`` newest-first messages logged after ``sequence``."""
        return [message for message in self.recent(n) if message.sequence > sequence]
