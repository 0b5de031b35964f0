"""
Immutable symptom term table.

Maps normalized terms (single-word lemmas and multi-word phrases) to canonical
symptom category identifiers. A table is validated and built once at startup
and then shared read-only by every resolver and thread; nothing mutates it.

Load-time problems:
- malformed data raises ``pydantic.ValidationError`` (fatal);
- a term re-declared with a different category is logged as a warning and
  recorded in ``TermTable.conflicts``; the later declaration wins.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union

from schemas.term_schema import DeclinedTerm, TermEntry, TermTableSource
from vocab import DECLINED_TERMS, bundled_sections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TermConflict:
    term: str
    previous_category: str
    previous_section: str
    category: str
    section: str


class TermTable(Mapping[str, str]):
    """Read-only ``term -> category`` mapping with a derived phrase/lemma split."""

    def __init__(self, source: TermTableSource) -> None:
        categories: Dict[str, str] = {}
        sections: Dict[str, str] = {}
        conflicts: List[TermConflict] = []

        for entry in source.iter_entries():
            self._declare(entry, categories, sections, conflicts)

        self._categories = MappingProxyType(categories)
        self._sections = MappingProxyType(sections)
        self._conflicts: Tuple[TermConflict, ...] = tuple(conflicts)
        self._declined = MappingProxyType({d.term: d for d in source.declined})
        self._phrase_keys: FrozenSet[str] = frozenset(t for t in categories if " " in t)
        self._lemma_keys: FrozenSet[str] = frozenset(t for t in categories if " " not in t)
        self._max_phrase_words = max((len(t.split(" ")) for t in self._phrase_keys), default=1)

        logger.info(
            f"Term table ready: {len(categories)} terms "
            f"({len(self._lemma_keys)} lemmas, {len(self._phrase_keys)} phrases), "
            f"{len(source.sections)} sections, {len(conflicts)} conflicts, "
            f"{len(self._declined)} declined"
        )

    @staticmethod
    def _declare(
        entry: TermEntry,
        categories: Dict[str, str],
        sections: Dict[str, str],
        conflicts: List[TermConflict],
    ) -> None:
        previous = categories.get(entry.term)
        if previous is not None:
            previous_section = sections[entry.term]
            if previous != entry.category:
                conflict = TermConflict(
                    term=entry.term,
                    previous_category=previous,
                    previous_section=previous_section,
                    category=entry.category,
                    section=entry.section,
                )
                conflicts.append(conflict)
                logger.warning(
                    f"Term {entry.term!r} re-declared: {previous!r} ({previous_section}) -> "
                    f"{entry.category!r} ({entry.section}); keeping the later declaration"
                )
            else:
                logger.debug(
                    f"Term {entry.term!r} declared twice as {entry.category!r} "
                    f"({previous_section}, {entry.section})"
                )
        categories[entry.term] = entry.category
        sections[entry.term] = entry.section

    # Mapping protocol
    def __getitem__(self, term: str) -> str:
        return self._categories[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return (
            f"TermTable(terms={len(self)}, phrases={len(self._phrase_keys)}, "
            f"conflicts={len(self._conflicts)})"
        )

    # Lookup
    def get(self, term: str, default: Optional[str] = None) -> Optional[str]:
        """Exact lookup; the caller normalizes case and whitespace first."""
        return self._categories.get(term, default)

    def has_phrase_entries(self) -> bool:
        return bool(self._phrase_keys)

    def phrase_keys(self) -> FrozenSet[str]:
        return self._phrase_keys

    def lemma_keys(self) -> FrozenSet[str]:
        return self._lemma_keys

    @property
    def max_phrase_words(self) -> int:
        return self._max_phrase_words

    def categories(self) -> FrozenSet[str]:
        return frozenset(self._categories.values())

    def terms_for(self, category: str) -> List[str]:
        return sorted(term for term, cat in self._categories.items() if cat == category)

    def section_of(self, term: str) -> Optional[str]:
        return self._sections.get(term)

    # Authoring metadata
    @property
    def conflicts(self) -> Tuple[TermConflict, ...]:
        return self._conflicts

    @property
    def declined_terms(self) -> Mapping[str, DeclinedTerm]:
        return self._declined

    def is_declined(self, term: str) -> bool:
        return term in self._declined

    def declined_reason(self, term: str) -> Optional[DeclinedTerm]:
        return self._declined.get(term)


def build_term_table(
    sections: Mapping[str, Mapping[str, Any]],
    declined: Optional[Iterable[Any]] = None,
) -> TermTable:
    """Validate ``{section: {term: category}}`` data and build a table from it."""
    source = TermTableSource.from_sections(sections, list(declined or []))
    return TermTable(source)


class _ObjectLayers(list):
    """The pairs of one JSON object, split into dicts wherever a key repeats."""


def _split_repeated_keys(pairs: List[Tuple[str, Any]]) -> _ObjectLayers:
    layers = _ObjectLayers([{}])
    for key, value in pairs:
        if key in layers[-1]:
            layers.append({})
        layers[-1][key] = value
    return layers


def load_extra_terms(path: Union[str, Path]) -> List[Any]:
    """Read a flat ``{term: category}`` JSON object; validation happens at build time.

    Returns the object as ordered layers. A term repeated inside the file starts
    a new layer, so the table sees it as a re-declaration instead of JSON
    silently keeping the last value.
    """
    p = Path(path)
    with p.open("r", encoding="utf-8") as handle:
        data = json.load(handle, object_pairs_hook=_split_repeated_keys)
    if not isinstance(data, _ObjectLayers):
        # not an object; left for the schema to reject
        return [data]
    if len(data) > 1:
        logger.warning(f"Extra terms file {p} repeats keys; split into {len(data)} layers")
    logger.info(f"Loaded extra terms file {p}")
    return list(data)


def load_term_table(extra_terms: Optional[Union[str, Path]] = None) -> TermTable:
    """Build the bundled symptom table, optionally followed by an extra-terms file.

    The extra-terms file is declared last, so its entries override bundled ones
    (each override of a different category is reported as a conflict).
    """
    sections: Dict[str, Any] = dict(bundled_sections())
    if extra_terms:
        name = f"extra:{Path(extra_terms).name}"
        for index, layer in enumerate(load_extra_terms(extra_terms)):
            sections[name if index == 0 else f"{name}#{index + 1}"] = layer
    return build_term_table(sections, DECLINED_TERMS)


__all__ = [
    "TermConflict",
    "TermTable",
    "build_term_table",
    "load_extra_terms",
    "load_term_table",
]
