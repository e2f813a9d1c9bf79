"""Line buffer — mirrors what was typed on the current line."""


class LineBuffer:
    """Keeps the text typed since the last line break.

    The daemon cannot read the focused application's text, so it evaluates
    escape words against this mirror instead. The caret is assumed to sit at
    the end of the buffer; anything that moves it elsewhere must clear().
    """

    LINE_BREAKS = set('\n\r')

    def __init__(self, max_length: int = 256):
        self._chars: list[str] = []
        self._max_length = max_length

    def add_char(self, char: str):
        """Add a typed character. A line break starts a fresh line."""
        if char in self.LINE_BREAKS:
            self._chars.clear()
            return
        self._chars.append(char)
        if len(self._chars) > self._max_length:
            # Only the tail can hold the word at the caret
            del self._chars[:len(self._chars) - self._max_length]

    def handle_backspace(self):
        """Handle backspace key — remove last character from buffer."""
        if self._chars:
            self._chars.pop()

    @property
    def text(self) -> str:
        return ''.join(self._chars)

    @property
    def column(self) -> int:
        """Caret column within the buffered line."""
        return len(self._chars)

    def clear(self):
        self._chars.clear()

    def replace_tail(self, old_len: int, new_text: str):
        """Mirror a replacement made at the caret: drop old_len chars, append new_text."""
        if old_len > 0:
            del self._chars[-old_len:]
        self._chars.extend(new_text)
