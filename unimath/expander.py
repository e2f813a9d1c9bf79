"""Token classifier and expander — turns an escape word into Unicode."""
import logging
from typing import Dict, Optional

from unimath.symbols import CODES, SUBSCRIPTS, SUPERSCRIPTS

logger = logging.getLogger(__name__)

BOLD_PREFIX = '\\mbf'
ITALIC_PREFIX = '\\mit'


class Expander:
    """Classifies an escape token and expands it.

    Dispatch order (first match wins):
    1. ``\\_xyz``    → subscript each character
    2. ``\\^xyz``    → superscript each character
    3. ``\\i:xyz``   → italic run (disabled unless ``italic=True``)
    4. ``\\b:xyz``   → bold run via ``\\mbf`` + c
    5. ``\\mod:xyz`` → run via ``\\mod`` + c (exactly one colon)
    6. anything else → direct lookup in the primary table

    Character modes return None when nothing changed, so a partial
    substitution is still returned as long as one character mapped.
    """

    def __init__(self, codes: Optional[Dict[str, str]] = None,
                 subscripts: Optional[Dict[str, str]] = None,
                 superscripts: Optional[Dict[str, str]] = None,
                 italic: bool = False):
        self.codes = CODES if codes is None else codes
        self.subscripts = SUBSCRIPTS if subscripts is None else subscripts
        self.superscripts = SUPERSCRIPTS if superscripts is None else superscripts
        self.italic = italic

    def expand(self, token: str) -> Optional[str]:
        """Return the replacement for token, or None to leave the text as is."""
        if not token or token[0] != '\\':
            return None

        start_char = token[1:2]
        if start_char == '_':
            return self._map_chars(token[2:], self.subscripts)
        if start_char == '^':
            return self._map_chars(token[2:], self.superscripts)
        if token.startswith('\\i:'):
            return self._map_italic(token[3:])
        if token.startswith('\\b:'):
            return self._map_prefixed(BOLD_PREFIX, token[3:])
        if not token.startswith('\\:') and ':' in token:
            return self._map_modifier(token)
        return self.codes.get(token)

    def _map_italic(self, target: str) -> Optional[str]:
        if not self.italic:
            logger.debug("Italic shorthand disabled, leaving %r", target)
            return None
        return self._map_prefixed(ITALIC_PREFIX, target)

    def _map_modifier(self, token: str) -> Optional[str]:
        parts = token.split(':')
        if len(parts) != 2:
            return None
        prefix, target = parts
        return self._map_prefixed(prefix, target)

    def _map_prefixed(self, prefix: str, target: str) -> Optional[str]:
        mapped = ''.join(self.codes.get(prefix + c, c) for c in target)
        return None if mapped == target else mapped

    @staticmethod
    def _map_chars(target: str, table: Dict[str, str]) -> Optional[str]:
        mapped = ''.join(table.get(c, c) for c in target)
        return None if mapped == target else mapped


_default = Expander()


def expand(token: str) -> Optional[str]:
    """Expand token with the built-in tables."""
    return _default.expand(token)
