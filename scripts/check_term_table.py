#!/usr/bin/env python3
"""
Symptom vocabulary gate.

Builds the bundled term table (plus an optional extra-terms file) and fails if
the data is malformed, if a declined word's replacement phrases do not resolve,
or, with --strict, if any term is re-declared with a different category.

Run it in CI before shipping vocabulary edits.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from pydantic import ValidationError  # noqa: E402

from term_resolver import SymptomTermResolver  # noqa: E402
from term_table import TermTable, load_term_table  # noqa: E402


@dataclass(frozen=True)
class Finding:
    term: str
    reason: str


def check_table(table: TermTable, *, strict: bool = False) -> List[Finding]:
    findings: List[Finding] = []
    resolver = SymptomTermResolver(table)

    for term, declined in sorted(table.declined_terms.items()):
        for phrase in declined.use_instead:
            if resolver.resolve(phrase) is None:
                findings.append(Finding(term=term, reason=f"replacement phrase does not resolve: {phrase!r}"))

    if strict:
        for c in table.conflicts:
            findings.append(
                Finding(
                    term=c.term,
                    reason=f"re-declared {c.previous_category!r} ({c.previous_section}) -> {c.category!r} ({c.section})",
                )
            )
    return findings


def _summary(table: TermTable) -> str:
    return (
        f"{len(table)} terms, {len(table.lemma_keys())} lemmas, {len(table.phrase_keys())} phrases "
        f"(longest {table.max_phrase_words} words), {len(table.categories())} categories, "
        f"{len(table.declined_terms)} declined, {len(table.conflicts)} conflicts"
    )


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--extra-terms", default=os.getenv("SYMPTOM_EXTRA_TERMS", ""), help="JSON object of extra term -> category entries")
    ap.add_argument("--strict", action="store_true", help="treat re-declared terms as failures")
    ap.add_argument("--log-level", default=os.getenv("SYMPTOM_LOG_LEVEL", "WARNING"))
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        table = load_term_table(args.extra_terms or None)
    except ValidationError as e:
        print(f"Term table check FAILED: invalid vocabulary data\n{e}", file=sys.stderr)
        raise SystemExit(2) from e

    findings = check_table(table, strict=bool(args.strict))
    if findings:
        print("Term table check FAILED. Findings:", file=sys.stderr)
        for f in findings:
            print(f"- {f.term}: {f.reason}", file=sys.stderr)
        raise SystemExit(2)

    for c in table.conflicts:
        print(f"warning: {c.term!r} re-declared {c.previous_category!r} -> {c.category!r} ({c.section})")
    print(f"Term table check OK: {_summary(table)}")


if __name__ == "__main__":
    main()
