"""Completion matcher — escape words sharing a typed prefix."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from unimath.locator import Span, locate
from unimath.symbols import CODES, is_escape


@dataclass(frozen=True)
class Completion:
    label: str                  # escape word shown in the list
    detail: str                 # symbol shown next to it
    insert_text: str            # what accepting the completion inserts
    span: Optional[Span] = None  # columns the insert replaces


def suggest(partial: str, codes: Optional[Dict[str, str]] = None) -> List[Tuple[str, str]]:
    """All (key, expansion) pairs whose key starts with partial.

    Case-sensitive literal prefix match, in table order. Partial words that
    do not start with a backslash match nothing.
    """
    if codes is None:
        codes = CODES
    if not is_escape(partial):
        return []
    return [(key, value) for key, value in codes.items() if key.startswith(partial)]


class Completer:
    """Builds completion items for the escape word at the caret."""

    def __init__(self, codes: Optional[Dict[str, str]] = None):
        self.codes = CODES if codes is None else codes

    def complete(self, line: str, column: int, limit: Optional[int] = None) -> List[Completion]:
        match = locate(line, column)
        if match is None:
            return []

        items = [
            Completion(label=key, detail=value, insert_text=value, span=match.span)
            for key, value in suggest(match.token, self.codes)
        ]
        if limit is not None:
            items = items[:limit]
        return items
