"""Tests for the token classifier and expander."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unimath.expander import Expander, expand
from unimath.symbols import CODES, SUBSCRIPTS, SUPERSCRIPTS

# Mix of characters with and without sub/superscript forms
SAMPLES = ['2', 'Q', 'x', 'n+1', 'abc', 'XYZ', 'ij', '(a-b)', 'αβγ', 'q?', 'Hello', '']


def test_subscript():
    assert expand('\\_2') == '₂'
    assert expand('\\_a2Q') == 'ₐ₂Q'


def test_subscript_unchanged():
    assert expand('\\_Q') is None
    assert expand('\\_') is None


def test_superscript():
    assert expand('\\^n+1') == 'ⁿ⁺¹'
    assert expand('\\^?') is None


def test_script_modes_per_character():
    for table, marker in ((SUBSCRIPTS, '_'), (SUPERSCRIPTS, '^')):
        for s in SAMPLES:
            result = expand('\\' + marker + s)
            expected = ''.join(table.get(c, c) for c in s)
            if expected == s:
                assert result is None, s
            else:
                assert len(result) == len(s)
                assert result == expected


def test_script_modes_win_over_colon():
    assert expand('\\_a:b') == 'ₐ:b'


def test_bold():
    assert expand('\\b:x2') == '\U0001D431\U0001D7D0'
    assert expand('\\b:x?') == CODES['\\mbfx'] + '?'
    assert expand('\\b:?!') is None


def test_bold_per_character():
    for s in SAMPLES:
        result = expand('\\b:' + s)
        expected = ''.join(CODES.get('\\mbf' + c, c) for c in s)
        assert result == (None if expected == s else expected)


def test_italic_disabled_by_default():
    assert expand('\\i:x') is None


def test_italic_enabled():
    expander = Expander(italic=True)
    assert expander.expand('\\i:x') == '\U0001D465'
    assert expander.expand('\\i:h') == 'ℎ'
    assert expander.expand('\\i:1') is None


def test_generic_modifier():
    assert expand('\\Bbb:RZ') == 'ℝℤ'
    assert expand('\\mscr:L') == 'ℒ'
    assert expand('\\mfrak:g') == CODES['\\mfrakg']
    assert expand('\\mbfit:v w') == CODES['\\mbfitv'] + ' ' + CODES['\\mbfitw']


def test_generic_modifier_rules():
    for s in SAMPLES:
        result = expand('\\mtt:' + s)
        expected = ''.join(CODES.get('\\mtt' + c, c) for c in s)
        assert result == (None if expected == s else expected)


def test_generic_modifier_two_colons():
    assert expand('\\a:b:c') is None
    assert expand('\\Bbb:R:Z') is None


def test_generic_modifier_unknown_prefix():
    assert expand('\\foo:xyz') is None


def test_leading_colon_is_direct_lookup():
    assert expand('\\:alpha') is None
    assert Expander(codes={'\\:)': '☺'}).expand('\\:)') == '☺'


def test_direct_lookup():
    assert expand('\\alpha') == 'α'
    assert expand('\\Rightarrow') == '⇒'
    assert expand('\\nope') is None


def test_malformed_tokens():
    assert expand('\\') is None
    assert expand('') is None
    assert expand('alpha') is None
    assert expand('\\al pha') is None


def test_custom_tables():
    expander = Expander(codes={'\\x': 'X'}, subscripts={'q': 'Q'})
    assert expander.expand('\\x') == 'X'
    assert expander.expand('\\_q') == 'Q'
    assert expander.expand('\\alpha') is None


if __name__ == '__main__':
    test_subscript()
    test_subscript_unchanged()
    test_superscript()
    test_script_modes_per_character()
    test_script_modes_win_over_colon()
    test_bold()
    test_bold_per_character()
    test_italic_disabled_by_default()
    test_italic_enabled()
    test_generic_modifier()
    test_generic_modifier_rules()
    test_generic_modifier_two_colons()
    test_generic_modifier_unknown_prefix()
    test_leading_colon_is_direct_lookup()
    test_direct_lookup()
    test_malformed_tokens()
    test_custom_tables()
    print("All expander tests passed.")
