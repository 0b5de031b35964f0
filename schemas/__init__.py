"""Pydantic schemas for authored symptom-term data."""

from pydantic import ValidationError

from .term_schema import DeclinedTerm, TermEntry, TermSection, TermTableSource, validate_term_key

__all__ = [
    "DeclinedTerm",
    "TermEntry",
    "TermSection",
    "TermTableSource",
    "ValidationError",
    "validate_term_key",
]
