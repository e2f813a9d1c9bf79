"""Host-facing engine: locate → expand on commit, locate → suggest while typing."""
import re
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from unimath.completer import Completer, Completion
from unimath.expander import Expander
from unimath.locator import Span, locate
from unimath.symbols import CODES

logger = logging.getLogger(__name__)

SPACE_KEY = 'space'
TAB_KEY = 'tab'
COMMIT_KEYS = (SPACE_KEY, TAB_KEY)

# Escape words inside running text: a backslash up to whitespace or the next backslash
_ESCAPE_RE = re.compile(r'\\[^\s\\]*')


@dataclass(frozen=True)
class Replacement:
    span: Span     # columns to delete
    token: str     # escape word being replaced
    text: str      # Unicode text to insert at span.start

    def apply(self, line: str) -> str:
        """Return line with the span swapped for the replacement text."""
        return line[:self.span.start] + self.text + line[self.span.end:]


@dataclass(frozen=True)
class CommitResult:
    replacement: Optional[Replacement]
    propagate: bool  # whether the host should still deliver the trigger key

    @property
    def changed(self) -> bool:
        return self.replacement is not None


class UnicodeMath:
    """Converts escape words at the caret and lists completions for them.

    Stateless between calls: every query reads the line it is given and
    nothing else, so several cursors can be evaluated independently.
    """

    def __init__(self, codes: Optional[Dict[str, str]] = None, italic: bool = False):
        self.codes = CODES if codes is None else codes
        self.expander = Expander(self.codes, italic=italic)
        self.completer = Completer(self.codes)

    def evaluate(self, line: str, column: int) -> Optional[Replacement]:
        """Replacement for the escape word ending at column, if any."""
        match = locate(line, column)
        if match is None:
            return None
        text = self.expander.expand(match.token)
        if text is None:
            return None
        return Replacement(match.span, match.token, text)

    def commit(self, line: str, column: int, key: str) -> CommitResult:
        """Evaluate the caret as the user presses a trigger key.

        The space key is always passed on; tab is passed on only when
        nothing was converted.
        """
        if key not in COMMIT_KEYS:
            raise ValueError(f"Unknown commit key: {key!r}")

        replacement = self.evaluate(line, column)
        if replacement is not None:
            logger.debug("Commit %s: %r → %r", key, replacement.token, replacement.text)
        propagate = replacement is None or key == SPACE_KEY
        return CommitResult(replacement, propagate)

    def commit_all(self, cursors: Iterable[Tuple[str, int]], key: str) -> List[CommitResult]:
        """Commit at several (line, column) cursors, each on its own."""
        return [self.commit(line, column, key) for line, column in cursors]

    def complete(self, line: str, column: int, limit: Optional[int] = None) -> List[Completion]:
        return self.completer.complete(line, column, limit=limit)

    def convert_line(self, line: str) -> str:
        """Convert every escape word found anywhere in line."""
        replacements = []
        for m in _ESCAPE_RE.finditer(line):
            replacement = self.evaluate(line, m.end())
            if replacement is not None:
                replacements.append(replacement)

        # Right to left so earlier spans stay valid
        for replacement in reversed(replacements):
            line = replacement.apply(line)
        return line
