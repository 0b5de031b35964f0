#!/usr/bin/env python3
"""
Resolve symptom terms in free text.

Each --text value (or each non-empty stdin line) is split on whitespace and
resolved; one JSON object per entry is printed with the matches found, or with
one result per word when --per-token is given.

Examples:
  python scripts/resolve_symptom_terms.py --text "feeling dizzy and nauseous"
  echo "post covid fatigue" | python scripts/resolve_symptom_terms.py --per-token
  python scripts/resolve_symptom_terms.py --terms-for fatigue
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from pydantic import ValidationError  # noqa: E402

from term_resolver import SymptomTermResolver, split_words  # noqa: E402
from term_table import load_term_table  # noqa: E402

logger = logging.getLogger(__name__)


def resolve_entry(resolver: SymptomTermResolver, text: str, *, per_token: bool = False) -> Dict[str, Any]:
    tokens = split_words(text)
    out: Dict[str, Any] = {"text": text, "tokens": tokens}
    if per_token:
        out["positions"] = [m.to_dict() if m else None for m in resolver.resolve_tokens(tokens)]
    else:
        out["matches"] = [m.to_dict() for m in resolver.iter_matches(tokens)]
    return out


def _iter_inputs(texts: List[str], stream: Iterable[str]) -> Iterable[str]:
    if texts:
        yield from texts
        return
    for line in stream:
        line = line.strip()
        if line:
            yield line


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--text", action="append", default=[], help="text to resolve (repeatable); stdin when omitted")
    ap.add_argument("--per-token", action="store_true", help="print one result per word instead of the match list")
    ap.add_argument("--terms-for", default="", help="print every term mapped to this category and exit")
    ap.add_argument("--extra-terms", default=os.getenv("SYMPTOM_EXTRA_TERMS", ""))
    ap.add_argument("--max-phrase-words", type=int, default=os.getenv("SYMPTOM_MAX_PHRASE_WORDS", "0"))
    ap.add_argument("--ignore-sentence-boundaries", action="store_true")
    ap.add_argument("--log-level", default=os.getenv("SYMPTOM_LOG_LEVEL", "WARNING"))
    args = ap.parse_args(argv)
    if args.max_phrase_words < 0:
        ap.error("--max-phrase-words must be >= 0 (0 uses the table bound)")

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        table = load_term_table(args.extra_terms or None)
    except ValidationError as e:
        print(f"Invalid vocabulary data, refusing to resolve:\n{e}", file=sys.stderr)
        raise SystemExit(2) from e

    if args.terms_for:
        terms = table.terms_for(args.terms_for)
        if not terms:
            raise SystemExit(f"No terms map to category {args.terms_for!r}")
        print(json.dumps({"category": args.terms_for, "terms": terms}, ensure_ascii=False))
        return

    resolver = SymptomTermResolver(
        table,
        max_phrase_words=args.max_phrase_words or None,
        respect_sentence_boundaries=not args.ignore_sentence_boundaries,
    )
    count = 0
    for text in _iter_inputs(args.text, sys.stdin):
        print(json.dumps(resolve_entry(resolver, text, per_token=bool(args.per_token)), ensure_ascii=False))
        count += 1
    logger.info(f"Resolved {count} entries")


if __name__ == "__main__":
    main()
