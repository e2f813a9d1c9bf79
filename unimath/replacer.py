"""X11 text replacer — sends synthetic key events via XTest."""
import time
import logging
import subprocess
from typing import Optional

from Xlib import X, XK, display
from Xlib.ext import xtest

logger = logging.getLogger(__name__)

_UNICODE_KEYSYM = 0x01000000

_SPECIAL_KEYSYMS = {
    ' ': XK.XK_space,
    '\t': XK.XK_Tab,
}


def char_to_keysym(char: str) -> int:
    """Keysym for a character: Latin-1 directly, everything else as Unicode."""
    if char in _SPECIAL_KEYSYMS:
        return _SPECIAL_KEYSYMS[char]
    code = ord(char)
    if 0x20 <= code <= 0x7E or 0xA0 <= code <= 0xFF:
        return code
    return _UNICODE_KEYSYM + code


class X11Replacer:
    """Deletes the escape word with backspaces, then types the symbol."""

    def __init__(self):
        self._display: Optional[display.Display] = None

    def _ensure_display(self):
        if self._display is None:
            self._display = display.Display()

    def replace_text(self, old_len: int, new_text: str, listener=None):
        """Replace the old_len characters before the caret with new_text.

        Args:
            old_len: Number of backspaces to send.
            new_text: Text to type in place.
            listener: Optional X11KeyListener to mute while we type.
        """
        self._ensure_display()

        if listener:
            listener.begin_suppress()

        try:
            time.sleep(0.01)
            self._send_backspaces(old_len)
            time.sleep(0.01)
            for char in new_text:
                self._type_char(char)
            self._display.flush()
            # Let the X server deliver the events before unmuting
            time.sleep(0.05)
        finally:
            if listener:
                listener.end_suppress()

    def _tap(self, keycode: int):
        xtest.fake_input(self._display, X.KeyPress, keycode)
        xtest.fake_input(self._display, X.KeyRelease, keycode)

    def _send_backspaces(self, count: int):
        backspace_code = self._display.keysym_to_keycode(XK.XK_BackSpace)
        for _ in range(count):
            self._tap(backspace_code)
        self._display.flush()

    def _type_char(self, char: str):
        keysym = char_to_keysym(char)
        keycode = self._display.keysym_to_keycode(keysym)
        if keycode == 0:
            # Math symbols are rarely on the keymap
            self._type_with_xdotool(char)
            return

        need_shift = (
            self._display.keycode_to_keysym(keycode, 0) != keysym
            and self._display.keycode_to_keysym(keycode, 1) == keysym
        )
        if need_shift:
            shift_code = self._display.keysym_to_keycode(XK.XK_Shift_L)
            xtest.fake_input(self._display, X.KeyPress, shift_code)
        self._tap(keycode)
        if need_shift:
            xtest.fake_input(self._display, X.KeyRelease, shift_code)
        self._display.flush()

    def _type_with_xdotool(self, char: str):
        self._display.flush()
        try:
            subprocess.run(
                ['xdotool', 'type', '--clearmodifiers', char],
                timeout=1.0,
                capture_output=True,
            )
        except (subprocess.TimeoutExpired, FileNotFoundError):
            logger.warning("xdotool fallback failed for char: %r", char)
