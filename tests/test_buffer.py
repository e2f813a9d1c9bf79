"""Tests for the line buffer."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unimath.buffer import LineBuffer


def feed(buf, text):
    for char in text:
        buf.add_char(char)


def test_typing():
    buf = LineBuffer()
    feed(buf, 'x = \\alpha')
    assert buf.text == 'x = \\alpha'
    assert buf.column == 10


def test_backspace():
    buf = LineBuffer()
    feed(buf, 'ab')
    buf.handle_backspace()
    assert buf.text == 'a'
    buf.handle_backspace()
    buf.handle_backspace()
    assert buf.text == ''


def test_newline_starts_fresh_line():
    buf = LineBuffer()
    feed(buf, 'first\nsecond')
    assert buf.text == 'second'


def test_max_length_keeps_tail():
    buf = LineBuffer(max_length=4)
    feed(buf, 'abcdef')
    assert buf.text == 'cdef'


def test_replace_tail():
    buf = LineBuffer()
    feed(buf, 'x = \\alpha')
    buf.replace_tail(6, 'α ')
    assert buf.text == 'x = α '
    buf.replace_tail(0, 'y')
    assert buf.text == 'x = α y'


def test_clear():
    buf = LineBuffer()
    feed(buf, 'test')
    buf.clear()
    assert buf.text == ''
    assert buf.column == 0


if __name__ == '__main__':
    test_typing()
    test_backspace()
    test_newline_starts_fresh_line()
    test_max_length_keeps_tail()
    test_replace_tail()
    test_clear()
    print("All buffer tests passed.")
