"""
Bundled symptom vocabulary.

Section order is declaration order: phrase sections first, lemma sections
after, so the lemma data wins any re-declaration.
"""

from typing import Dict

from .declined_terms import DECLINED_TERMS
from .symptom_lemmas import SYMPTOM_LEMMA_SECTIONS
from .symptom_phrases import SYMPTOM_PHRASE_SECTIONS


def bundled_sections() -> Dict[str, Dict[str, str]]:
    """Return all bundled sections keyed ``phrases.<name>`` / ``lemmas.<name>``."""
    sections: Dict[str, Dict[str, str]] = {}
    for name, entries in SYMPTOM_PHRASE_SECTIONS.items():
        sections[f"phrases.{name}"] = entries
    for name, entries in SYMPTOM_LEMMA_SECTIONS.items():
        sections[f"lemmas.{name}"] = entries
    return sections


__all__ = [
    "DECLINED_TERMS",
    "SYMPTOM_LEMMA_SECTIONS",
    "SYMPTOM_PHRASE_SECTIONS",
    "bundled_sections",
]
