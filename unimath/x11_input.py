"""X11 global keyboard input listener using XRecord extension."""
import threading
import logging
from typing import Callable, Optional

from Xlib import X, XK, display
from Xlib.ext import record
from Xlib.protocol import rq

logger = logging.getLogger(__name__)

_UNICODE_KEYSYM = 0x01000000

# Keys that move the caret or leave the line: the line buffer goes stale
NAVIGATION_KEYSYMS = frozenset((
    XK.XK_Return, XK.XK_KP_Enter, XK.XK_Escape, XK.XK_Home, XK.XK_End,
    XK.XK_Left, XK.XK_Right, XK.XK_Up, XK.XK_Down,
    XK.XK_Page_Up, XK.XK_Page_Down, XK.XK_Delete,
))

# Legacy Cyrillic keysyms 0x6C0-0x6DF follow KOI8-R order, 0x6E0-0x6FF are
# the same letters in capitals.
_KOI8_SMALL = 'юабцдефгхийклмнопярстужвьызшэщчъ'
_CYRILLIC_EXTRA = {
    0x06A1: 'ђ', 0x06A2: 'ѓ', 0x06A3: 'ё', 0x06A4: 'є', 0x06A5: 'ѕ',
    0x06A6: 'і', 0x06A7: 'ї', 0x06A8: 'ј', 0x06A9: 'љ', 0x06AA: 'њ',
    0x06AB: 'ћ', 0x06AC: 'ќ', 0x06AD: 'ґ', 0x06AE: 'ў', 0x06AF: 'џ',
    0x06B0: '№',
    0x06B1: 'Ђ', 0x06B2: 'Ѓ', 0x06B3: 'Ё', 0x06B4: 'Є', 0x06B5: 'Ѕ',
    0x06B6: 'І', 0x06B7: 'Ї', 0x06B8: 'Ј', 0x06B9: 'Љ', 0x06BA: 'Њ',
    0x06BB: 'Ћ', 0x06BC: 'Ќ', 0x06BD: 'Ґ', 0x06BE: 'Ў', 0x06BF: 'Џ',
}

# Legacy Greek keysyms. Letters 0x7C1-0x7D9 / 0x7E1-0x7F9 run parallel to
# U+0391 / U+03B1 except around sigma.
_GREEK_EXTRA = {
    0x07A1: 'Ά', 0x07A2: 'Έ', 0x07A3: 'Ή', 0x07A4: 'Ί', 0x07A5: 'Ϊ',
    0x07A7: 'Ό', 0x07A8: 'Ύ', 0x07A9: 'Ϋ', 0x07AB: 'Ώ', 0x07AE: '΅',
    0x07AF: '―',
    0x07B1: 'ά', 0x07B2: 'έ', 0x07B3: 'ή', 0x07B4: 'ί', 0x07B5: 'ϊ',
    0x07B6: 'ΐ', 0x07B7: 'ό', 0x07B8: 'ύ', 0x07B9: 'ϋ', 0x07BA: 'ΰ',
    0x07BB: 'ώ',
    0x07D2: 'Σ', 0x07F2: 'σ', 0x07F3: 'ς',
}
_GREEK_CAPITALS = (0x07C1, 0x07D9, 0x0391)
_GREEK_SMALL = (0x07E1, 0x07F9, 0x03B1)

# Shift, Control, Caps Lock, Alt, Super... and the ISO level/lock shifts
_MODIFIER_RANGES = ((XK.XK_Shift_L, XK.XK_Hyper_R), (0xFE01, 0xFE0F))
_MODIFIER_KEYSYMS = frozenset((XK.XK_Mode_switch, XK.XK_Num_Lock))

_RECORD_RANGE = {
    'core_requests': (0, 0),
    'core_replies': (0, 0),
    'ext_requests': (0, 0, 0, 0),
    'ext_replies': (0, 0, 0, 0),
    'delivered_events': (0, 0),
    'device_events': (X.KeyPress, X.KeyPress),
    'errors': (0, 0),
    'client_started': False,
    'client_died': False,
}


def _legacy_letter(keysym: int) -> Optional[str]:
    if keysym in _CYRILLIC_EXTRA:
        return _CYRILLIC_EXTRA[keysym]
    if 0x06C0 <= keysym <= 0x06DF:
        return _KOI8_SMALL[keysym - 0x06C0]
    if 0x06E0 <= keysym <= 0x06FF:
        return _KOI8_SMALL[keysym - 0x06E0].upper()
    if keysym in _GREEK_EXTRA:
        return _GREEK_EXTRA[keysym]
    for first, last, base in (_GREEK_CAPITALS, _GREEK_SMALL):
        if first <= keysym <= last:
            return chr(base + keysym - first)
    return None


def keysym_to_char(keysym: int) -> Optional[str]:
    """Convert an X keysym to the character it types, if any."""
    if keysym == XK.XK_space:
        return ' '
    if keysym == XK.XK_Tab:
        return '\t'
    # Latin-1 keysyms equal their code points
    if 0x20 <= keysym <= 0x7E or 0xA0 <= keysym <= 0xFF:
        return chr(keysym)
    if keysym > _UNICODE_KEYSYM:
        return chr(keysym - _UNICODE_KEYSYM)
    return _legacy_letter(keysym)


def is_modifier(keysym: int) -> bool:
    """True for keys that only change the meaning of other keys."""
    if keysym in _MODIFIER_KEYSYMS:
        return True
    return any(first <= keysym <= last for first, last in _MODIFIER_RANGES)


class X11KeyListener:
    """Listens to global key presses via XRecord.

    on_key_char(char) gets every key that types a character, space and tab
    included. on_backspace() gets backspace. on_special(keysym, state) gets
    Ctrl/Alt combinations, caret movement and any other key that changes
    the text in a way the line buffer cannot follow. Bare modifier presses
    are ignored.
    """

    def __init__(
        self,
        on_key_char: Callable[[str], None],
        on_backspace: Callable[[], None],
        on_special: Callable[[int, int], None],
    ):
        self._on_key_char = on_key_char
        self._on_backspace = on_backspace
        self._on_special = on_special
        self._thread: Optional[threading.Thread] = None
        self._record_display = None
        self._local_display = None
        self._ctx = None
        self._suppressed = threading.Event()

    def start(self):
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self):
        if self._record_display and self._ctx:
            try:
                self._record_display.record_disable_context(self._ctx)
                self._record_display.flush()
            except Exception as e:
                logger.debug("Disabling record context failed: %s", e)
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None

    def begin_suppress(self):
        """Ignore key presses (our own synthetic ones) until end_suppress()."""
        self._suppressed.set()

    def end_suppress(self):
        self._suppressed.clear()

    def _run(self):
        try:
            self._record_display = display.Display()
            self._local_display = display.Display()
            self._ctx = self._record_display.record_create_context(
                0, [record.AllClients], [_RECORD_RANGE],
            )
            # Blocks until the context is disabled in stop()
            self._record_display.record_enable_context(self._ctx, self._handle_event)
            self._record_display.record_free_context(self._ctx)
        except Exception as e:
            logger.error("XRecord listener failed: %s", e)

    def _handle_event(self, reply):
        if reply.category != record.FromServer or reply.client_swapped:
            return
        # First byte below 2 is an error or reply, not an event
        if not len(reply.data) or reply.data[0] < 2:
            return

        data = reply.data
        while len(data):
            event, data = rq.EventField(None).parse_binary_value(
                data, self._record_display.display, None, None
            )
            if event.type != X.KeyPress or self._suppressed.is_set():
                continue
            try:
                self._process_keypress(event.detail, event.state)
            except Exception as e:
                # Keep the record thread alive whatever a handler does
                logger.error("Key handler failed: %s", e)

    def _keysym(self, keycode: int, state: int) -> int:
        """Keysym for keycode under the active layout group and shift level."""
        # XKB keeps the layout group in bits 13-14 of the state;
        # the core keymap lists two levels per group.
        base = 2 * ((state >> 13) & 0x3)
        shift = 1 if state & X.ShiftMask else 0
        for index in (base + shift, base, shift, 0):
            keysym = self._local_display.keycode_to_keysym(keycode, index)
            if keysym:
                return keysym
        return X.NoSymbol

    def _process_keypress(self, keycode: int, state: int):
        keysym = self._keysym(keycode, state)
        if keysym == X.NoSymbol or is_modifier(keysym):
            return

        if keysym == XK.XK_BackSpace:
            self._on_backspace()
            return

        char = None
        if not state & (X.ControlMask | X.Mod1Mask) and keysym not in NAVIGATION_KEYSYMS:
            char = keysym_to_char(keysym)

        if char:
            self._on_key_char(char)
        else:
            self._on_special(keysym, state)
