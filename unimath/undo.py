"""Undo stack — remembers recent conversions so they can be reverted."""
from dataclasses import dataclass
from typing import Optional
from collections import deque


@dataclass
class ConversionEntry:
    token: str          # escape word the user typed
    replacement: str    # Unicode text we typed instead
    trailing: str = ""  # text retyped after the replacement (whitespace, space key)

    @property
    def typed_len(self) -> int:
        """Characters on screen that belong to this conversion."""
        return len(self.replacement) + len(self.trailing)


class UndoStack:
    """Bounded stack of recent conversions."""

    def __init__(self, max_size: int = 50):
        self._stack: deque[ConversionEntry] = deque(maxlen=max_size)

    def push(self, entry: ConversionEntry):
        self._stack.append(entry)

    def pop(self) -> Optional[ConversionEntry]:
        if self._stack:
            return self._stack.pop()
        return None

    def clear(self):
        self._stack.clear()

    @property
    def size(self) -> int:
        return len(self._stack)
