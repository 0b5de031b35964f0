"""
Symptom term resolution over whitespace-delimited words.

Longest match wins: at each position the longest phrase window (bounded by the
table's longest phrase) is tried first, then the single word as a lemma.
Nothing is guessed. A word absent from the table, including a declined one,
is a no-match (``None``), never an error.

The resolver holds no mutable state; one instance can serve any number of
threads over the same ``TermTable``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from schemas.term_schema import normalize_token
from term_table import TermTable

SENTENCE_TERMINATORS = (".", "!", "?", "…")
_CLOSERS = "\"')]}”’»"


def split_words(text: str) -> List[str]:
    return (text or "").split()


def normalize_term(text: str) -> str:
    """Normalize a span to table-key form: lowercase words joined by single spaces."""
    words = (normalize_token(t) for t in split_words(text))
    return " ".join(w for w in words if w)


def ends_sentence(token: str) -> bool:
    return (token or "").rstrip(_CLOSERS).endswith(SENTENCE_TERMINATORS)


@dataclass(frozen=True)
class TermMatch:
    category: str
    start: int
    end: int
    term: str
    method: str

    @property
    def width(self) -> int:
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SymptomTermResolver:
    def __init__(
        self,
        table: TermTable,
        *,
        max_phrase_words: Optional[int] = None,
        respect_sentence_boundaries: bool = True,
    ) -> None:
        if max_phrase_words is not None and max_phrase_words < 1:
            raise ValueError(f"max_phrase_words must be >= 1, got {max_phrase_words}")
        bound = table.max_phrase_words
        if max_phrase_words is not None:
            bound = min(bound, max_phrase_words)
        self.table = table
        self.max_phrase_words = bound
        self.respect_sentence_boundaries = bool(respect_sentence_boundaries)

    def _window_limit(self, tokens: Sequence[str], position: int) -> int:
        limit = min(self.max_phrase_words, len(tokens) - position)
        if not self.respect_sentence_boundaries:
            return limit
        for offset in range(limit - 1):
            if ends_sentence(tokens[position + offset]):
                return offset + 1
        return limit

    def match_at(self, tokens: Sequence[str], position: int) -> Optional[TermMatch]:
        """Return the match starting at ``position``, or ``None``.

        Phrase windows are tried longest first; the single word is only looked
        up when no phrase starting here matches.
        """
        if position < 0:
            raise IndexError(f"position must be non-negative, got {position}")
        if position >= len(tokens):
            return None

        limit = self._window_limit(tokens, position)
        words = [normalize_token(t) for t in tokens[position : position + limit]]
        if not words[0]:
            return None

        if self.table.has_phrase_entries():
            phrase_keys = self.table.phrase_keys()
            for width in range(limit, 1, -1):
                # A window must end on a real word; stray "-" or "..." tokens inside are dropped.
                if not words[width - 1]:
                    continue
                key = " ".join(w for w in words[:width] if w)
                if key in phrase_keys:
                    return TermMatch(
                        category=self.table[key],
                        start=position,
                        end=position + width,
                        term=key,
                        method="phrase",
                    )

        category = self.table.get(words[0])
        if category is None:
            return None
        return TermMatch(category=category, start=position, end=position + 1, term=words[0], method="lemma")

    def resolve(self, text: str) -> Optional[str]:
        """Category of the term the span starts with ("Tired" -> "fatigue")."""
        match = self.match_at(split_words(text), 0)
        return match.category if match else None

    def iter_matches(self, tokens: Sequence[str]) -> Iterator[TermMatch]:
        """Yield non-overlapping matches left to right."""
        position = 0
        while position < len(tokens):
            match = self.match_at(tokens, position)
            if match is None:
                position += 1
                continue
            yield match
            position = match.end

    def resolve_tokens(self, tokens: Sequence[str]) -> List[Optional[TermMatch]]:
        """One result per position.

        Every position covered by a phrase carries that phrase's match, so a
        word inside a phrase is never looked up on its own.
        """
        results: List[Optional[TermMatch]] = [None] * len(tokens)
        for match in self.iter_matches(tokens):
            for index in range(match.start, match.end):
                results[index] = match
        return results

    def find_matches(self, text: str) -> List[TermMatch]:
        return list(self.iter_matches(split_words(text)))


__all__ = [
    "SENTENCE_TERMINATORS",
    "SymptomTermResolver",
    "TermMatch",
    "ends_sentence",
    "normalize_term",
    "normalize_token",
    "split_words",
]
