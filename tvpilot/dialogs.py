"""Small helpers behind the message log and input dialogs."""

from __future__ import annotations

from typing import List


class MessageLog:
    """An append-only log of messages shown to the user."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def write(self, message: str) -> None:
        """Append ``message`` as a new line."""
        self._lines.append(message)

    def clear(self) -> None:
        """Remove every message."""
        self._lines.clear()

    def text(self) -> str:
        """The whole log, one message per line."""
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)


def lowercase_input(text: str) -> str:
    """The text entered in an input box, lower-cased as it is accepted."""
    return text.lower()