from __future__ import annotations

from collections import deque
from typing import Iterator

DEFAULT_MAX_MESSAGES = 5


class MessageLog:
    """Bounded, oldest-first message history."""

    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES):
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self.max_messages = max_messages
        self._entries: deque = deque(maxlen=max_messages)

    def add(self, message: str) -> None:
        self._entries.append(message)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def last(self):
        return self._entries[-1] if self._entries else None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["DEFAULT_MAX_MESSAGES", "MessageLog"]
