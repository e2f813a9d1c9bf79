"""Token locator — finds the backslash escape word ending at the caret."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Span:
    """Half-open column range [start, end) within a single line."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Match:
    span: Span      # columns to replace
    token: str      # escape word, always starts with a backslash


def locate(line: str, column: int) -> Optional[Match]:
    """Find the escape token ending at ``column`` in ``line``.

    Uses a looser meaning of "word" than an editor would: the token runs
    from the last backslash before the caret up to the caret, so colons,
    underscores and carets are all part of it. Leading/trailing whitespace
    is trimmed; the result must still start with a backslash.

    Returns None when there is nothing to convert, including a caret at
    column 0 or past the end of the line.
    """
    if column <= 0 or column > len(line):
        return None

    before = line[:column]
    slash = before.rfind('\\')
    if slash < 0:
        return None

    token = before[slash:].strip()
    if not token.startswith('\\'):
        return None

    return Match(Span(slash, slash + len(token)), token)
