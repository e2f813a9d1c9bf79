"""Tests for keysym ↔ character conversion (no X display needed)."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from Xlib import XK

from unimath.replacer import char_to_keysym
from unimath.x11_input import is_modifier, keysym_to_char


def test_ascii_and_whitespace():
    assert keysym_to_char(ord('a')) == 'a'
    assert keysym_to_char(XK.XK_backslash) == '\\'
    assert keysym_to_char(XK.XK_space) == ' '
    assert keysym_to_char(XK.XK_Tab) == '\t'


def test_non_printing_keys():
    assert keysym_to_char(XK.XK_Shift_L) is None
    assert keysym_to_char(XK.XK_F1) is None


def test_unicode_keysyms():
    assert char_to_keysym('α') == 0x01000000 + 0x3B1
    assert keysym_to_char(char_to_keysym('α')) == 'α'
    assert keysym_to_char(char_to_keysym('\U0001D431')) == '\U0001D431'


def test_latin1_keysyms():
    assert char_to_keysym('°') == 0xB0
    assert keysym_to_char(0xB0) == '°'
    assert char_to_keysym('\t') == XK.XK_Tab


def test_greek_keysyms():
    assert keysym_to_char(0x07E1) == 'α'
    assert keysym_to_char(0x07F9) == 'ω'
    assert keysym_to_char(0x07C1) == 'Α'
    assert keysym_to_char(0x07B1) == 'ά'
    # Sigma breaks the parallel run
    assert keysym_to_char(0x07D2) == 'Σ'
    assert keysym_to_char(0x07F2) == 'σ'
    assert keysym_to_char(0x07F3) == 'ς'


def test_cyrillic_keysyms():
    # 0x6C0.. follow KOI8-R order, not alphabetical
    assert keysym_to_char(0x06C0) == 'ю'
    assert keysym_to_char(0x06C1) == 'а'
    assert keysym_to_char(0x06E1) == 'А'
    assert keysym_to_char(0x06DF) == 'ъ'
    assert keysym_to_char(0x06A3) == 'ё'
    assert keysym_to_char(0x06B3) == 'Ё'


def test_modifiers():
    assert is_modifier(XK.XK_Shift_L)
    assert is_modifier(XK.XK_Control_R)
    assert is_modifier(0xFE03)   # ISO_Level3_Shift
    assert not is_modifier(ord('a'))
    assert not is_modifier(0xFE51)   # dead_acute types nothing but is not a modifier
