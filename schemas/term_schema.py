"""Pydantic models for authored symptom-term data.

Every structural problem in the bundled vocabulary (or in an extra-terms
file) surfaces here as a ``pydantic.ValidationError`` before a table is built.
"""

from __future__ import annotations

import re
import string
import unicodedata
from typing import Annotated, Any, Dict, Iterator, List, Mapping, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, model_validator


CATEGORY_PATTERN = r"^[a-z][a-z0-9_]*$"

# Characters that token normalization strips from both ends of a word.
EDGE_PUNCTUATION = string.punctuation + "“”‘’…«»"

_BAD_WHITESPACE_RE = re.compile(r"\s{2,}|[^\S ]")
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})


def normalize_token(token: str) -> str:
    """Lowercase a word and strip the punctuation around it ("Tired!" -> "tired")."""
    t = unicodedata.normalize("NFKC", token or "").translate(_APOSTROPHES)
    return t.strip().lower().strip(EDGE_PUNCTUATION)


def validate_term_key(value: str) -> str:
    """Reject keys that input words, once normalized, could never spell."""
    if not value:
        raise ValueError("term must not be empty")
    if value != value.strip():
        raise ValueError(f"term has leading/trailing whitespace: {value!r}")
    if value != value.lower():
        raise ValueError(f"term must be lowercase: {value!r}")
    if _BAD_WHITESPACE_RE.search(value):
        raise ValueError(f"term words must be separated by single spaces: {value!r}")
    if value[0] in EDGE_PUNCTUATION or value[-1] in EDGE_PUNCTUATION:
        raise ValueError(f"term starts or ends with punctuation and can never match: {value!r}")
    for word in value.split(" "):
        if normalize_token(word) != word:
            raise ValueError(
                f"term word {word!r} is not in normalized form ({normalize_token(word)!r}) "
                f"and can never match: {value!r}"
            )
    return value


TermKey = Annotated[str, AfterValidator(validate_term_key)]
CategoryId = Annotated[str, StringConstraints(pattern=CATEGORY_PATTERN)]


class TermEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: TermKey
    category: CategoryId
    section: str = "inline"

    @property
    def is_phrase(self) -> bool:
        return " " in self.term


class DeclinedTerm(BaseModel):
    """A bare word deliberately kept out of the table.

    ``use_instead`` lists the phrase forms that carry the meaning safely.
    """

    model_config = ConfigDict(frozen=True)

    term: TermKey
    reason: str = Field(min_length=1)
    use_instead: List[str] = Field(default_factory=list)


class TermSection(BaseModel):
    name: str = Field(min_length=1)
    entries: Dict[TermKey, CategoryId] = Field(default_factory=dict)


class TermTableSource(BaseModel):
    """Validated input for a ``TermTable``: ordered sections plus the exclusion list."""

    sections: List[TermSection] = Field(default_factory=list)
    declined: List[DeclinedTerm] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_declined_terms(self) -> "TermTableSource":
        seen: Dict[str, DeclinedTerm] = {}
        for declined in self.declined:
            if declined.term in seen:
                raise ValueError(f"declined term listed twice: {declined.term!r}")
            seen[declined.term] = declined

        for section in self.sections:
            for term in section.entries:
                if term in seen:
                    raise ValueError(
                        f"declined term {term!r} is declared in section {section.name!r}; "
                        f"remove the entry or drop it from the declined list"
                    )
        return self

    def iter_entries(self) -> Iterator[TermEntry]:
        """Yield entries in declaration order (later declarations win)."""
        for section in self.sections:
            for term, category in section.entries.items():
                yield TermEntry(term=term, category=category, section=section.name)

    @classmethod
    def from_sections(
        cls,
        sections: Mapping[str, Mapping[str, Any]],
        declined: Optional[List[Any]] = None,
    ) -> "TermTableSource":
        return cls.model_validate(
            {
                "sections": [{"name": name, "entries": data} for name, data in sections.items()],
                "declined": list(declined or []),
            }
        )


__all__ = [
    "CATEGORY_PATTERN",
    "EDGE_PUNCTUATION",
    "CategoryId",
    "DeclinedTerm",
    "TermEntry",
    "TermKey",
    "TermSection",
    "TermTableSource",
    "normalize_token",
    "validate_term_key",
]
