"""Core daemon — ties together input listener, line buffer, engine, replacer, undo."""
import threading
import logging
from typing import Optional

from Xlib import XK

from unimath.buffer import LineBuffer
from unimath.config import Config
from unimath.engine import SPACE_KEY, TAB_KEY, UnicodeMath
from unimath.replacer import X11Replacer
from unimath.undo import ConversionEntry, UndoStack

logger = logging.getLogger(__name__)

_CONTROL_MASK = 0x4
_SHIFT_MASK = 0x1


class Daemon:
    """Background daemon converting escape words as they are typed."""

    def __init__(self, config: Config):
        self.config = config
        self._running = False
        self._listener = None
        self._engine = UnicodeMath(italic=config.italic_prefix)
        self._buffer = LineBuffer(max_length=config.max_line_length)
        self._replacer = X11Replacer()
        self._undo_stack = UndoStack()
        self._lock = threading.Lock()

    @property
    def running(self):
        return self._running

    @property
    def engine(self):
        return self._engine

    @property
    def undo_stack(self):
        return self._undo_stack

    def start(self):
        if self._running:
            return
        self._running = True

        try:
            from unimath.x11_input import X11KeyListener
            self._listener = X11KeyListener(
                on_key_char=self._on_key_char,
                on_backspace=self._on_backspace,
                on_special=self._on_special,
            )
            self._listener.start()
            logger.info("Daemon started — X11 input listener active")
        except Exception as e:
            logger.error("Failed to start X11 listener: %s", e)
            self._running = False

    def stop(self):
        self._running = False
        if self._listener:
            self._listener.stop()
        logger.info("Daemon stopped")

    def _trigger_key(self, char: str) -> Optional[str]:
        if char == ' ' and self.config.trigger_space:
            return SPACE_KEY
        if char == '\t' and self.config.trigger_tab:
            return TAB_KEY
        return None

    def _on_key_char(self, char: str):
        """Called for each printable character typed (already delivered to the app)."""
        if not self.config.enabled:
            return

        with self._lock:
            key = self._trigger_key(char)
            if key is not None and self._commit(key, char):
                return
            self._buffer.add_char(char)

    def _on_backspace(self):
        with self._lock:
            self._buffer.handle_backspace()

    def _on_special(self, keysym: int, state: int):
        """Called for Ctrl/Alt combinations and caret-moving keys."""
        ctrl = bool(state & _CONTROL_MASK)
        shift = bool(state & _SHIFT_MASK)

        # Undo: Ctrl+/
        if ctrl and not shift and keysym == XK.XK_slash:
            self._do_undo()
            return

        # Toggle: Ctrl+Shift+U
        if ctrl and shift and keysym in (XK.XK_u, XK.XK_U):
            self.config.enabled = not self.config.enabled
            logger.info("Toggled enabled: %s", self.config.enabled)
            return

        # Anything else may have moved the caret or changed the text
        with self._lock:
            self._buffer.clear()

    def _commit(self, key: str, char: str) -> bool:
        """Convert the escape word before the trigger char. Returns True if converted."""
        line = self._buffer.text
        column = self._buffer.column
        result = self._engine.commit(line, column, key)
        if not result.changed:
            return False

        replacement = result.replacement
        # Whitespace the locator trimmed off the token stays on screen
        trailing = line[replacement.span.end:column]
        if result.propagate:
            trailing += char
        erase_len = column - replacement.span.start
        new_text = replacement.text + trailing

        logger.info("Converting: %r → %r", replacement.token, replacement.text)
        try:
            # +1: the trigger char has already reached the application
            self._replacer.replace_text(erase_len + 1, new_text, listener=self._listener)
        except Exception as e:
            logger.error("Replacement failed for %r: %s", replacement.token, e)
            self._buffer.clear()
            return True

        self._buffer.replace_tail(erase_len, new_text)
        self._undo_stack.push(ConversionEntry(
            token=replacement.token,
            replacement=replacement.text,
            trailing=trailing,
        ))
        return True

    def _do_undo(self):
        """Put the last converted escape word back."""
        with self._lock:
            entry = self._undo_stack.pop()
            if entry is None:
                logger.debug("Nothing to undo")
                return

            if not self._buffer.text.endswith(entry.replacement + entry.trailing):
                logger.debug("Undo skipped: text changed since %r was converted", entry.token)
                self._undo_stack.clear()
                return

            logger.info("Undo: %r → %r", entry.replacement, entry.token)
            try:
                self._replacer.replace_text(
                    entry.typed_len, entry.token + entry.trailing, listener=self._listener,
                )
            except Exception as e:
                logger.error("Undo failed: %s", e)
            # The restored token must not convert again on the next trigger
            self._buffer.clear()
