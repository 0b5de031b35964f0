import json
import logging
from collections.abc import Mapping
from pathlib import Path

import pytest
from pydantic import ValidationError

from schemas.term_schema import DeclinedTerm
from term_table import TermConflict, TermTable, build_term_table, load_extra_terms, load_term_table


def _small_table() -> TermTable:
    return build_term_table(
        {
            "fatigue": {"tired": "fatigue", "tiredness": "fatigue", "no energy": "fatigue"},
            "covid": {"long covid": "long_covid", "post covid": "post_viral", "good days bad days": "symptom_fluctuation"},
        },
        [{"term": "energy", "reason": "ambiguous", "use_instead": ["no energy"]}],
    )


def test_table_is_a_read_only_mapping() -> None:
    table = _small_table()

    assert table["tired"] == "fatigue"
    assert table.get("long covid") == "long_covid"
    assert table.get("Tired") is None
    assert table.get("missing", "fallback") == "fallback"
    assert "tiredness" in table
    assert len(table) == 6
    assert dict(table)["post covid"] == "post_viral"

    with pytest.raises(TypeError):
        table["tired"] = "pem"  # type: ignore[index]
    assert not hasattr(table, "__setitem__")
    assert isinstance(table, Mapping)
    assert isinstance(table.declined_terms, Mapping)
    assert all(isinstance(d, DeclinedTerm) for d in table.declined_terms.values())


def test_phrase_and_lemma_partition_is_derived() -> None:
    table = _small_table()

    assert table.has_phrase_entries()
    assert table.phrase_keys() == {"no energy", "long covid", "post covid", "good days bad days"}
    assert table.lemma_keys() == {"tired", "tiredness"}
    assert table.max_phrase_words == 4


def test_lemma_only_table() -> None:
    table = build_term_table({"only": {"dizzy": "dizziness"}})

    assert not table.has_phrase_entries()
    assert table.max_phrase_words == 1


def test_empty_table() -> None:
    table = build_term_table({})

    assert len(table) == 0
    assert table.get("tired") is None
    assert not table.has_phrase_entries()


def test_reverse_lookup_and_provenance() -> None:
    table = _small_table()

    assert table.terms_for("fatigue") == ["no energy", "tired", "tiredness"]
    assert table.terms_for("unknown") == []
    assert table.categories() == {"fatigue", "long_covid", "post_viral", "symptom_fluctuation"}
    assert table.section_of("long covid") == "covid"
    assert table.section_of("missing") is None


def test_declined_terms_are_exposed() -> None:
    table = _small_table()

    assert table.is_declined("energy")
    assert not table.is_declined("tired")
    declined = table.declined_reason("energy")
    assert declined is not None
    assert declined.use_instead == ["no energy"]
    assert table.declined_reason("tired") is None
    assert "energy" not in table


def test_redeclaration_last_write_wins_and_is_reported(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="term_table"):
        table = build_term_table(
            {
                "phrases.pem": {"boom bust": "pem", "wiped out": "fatigue"},
                "lemmas.pacing": {"boom bust": "boom_bust_cycle"},
                "lemmas.crash": {"wiped out": "pem_crash"},
            }
        )

    assert table["boom bust"] == "boom_bust_cycle"
    assert table["wiped out"] == "pem_crash"
    assert table.section_of("boom bust") == "lemmas.pacing"
    assert table.conflicts == (
        TermConflict("boom bust", "pem", "phrases.pem", "boom_bust_cycle", "lemmas.pacing"),
        TermConflict("wiped out", "fatigue", "phrases.pem", "pem_crash", "lemmas.crash"),
    )
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "'boom bust' re-declared" in warnings[0].getMessage()


def test_same_category_redeclaration_is_not_a_conflict(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="term_table"):
        table = build_term_table({"a": {"vomiting": "vomiting"}, "b": {"vomiting": "vomiting"}})

    assert table.conflicts == ()
    assert table.section_of("vomiting") == "b"
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any("declared twice" in r.getMessage() for r in caplog.records)


def test_invalid_key_fails_construction() -> None:
    with pytest.raises(ValidationError, match="lowercase"):
        build_term_table({"covid": {"COVID-19": "long_covid"}})
    with pytest.raises(ValidationError, match="empty"):
        build_term_table({"fatigue": {"": "fatigue"}})
    with pytest.raises(ValidationError, match="whitespace"):
        build_term_table({"fatigue": {"tired ": "fatigue"}})


def test_declined_key_fails_construction() -> None:
    with pytest.raises(ValidationError, match="declined term 'down'"):
        build_term_table({"mood": {"down": "low_mood"}}, [{"term": "down", "reason": "ambiguous"}])


def test_load_term_table_builds_bundled_vocabulary() -> None:
    table = load_term_table()

    assert len(table) > 1000
    assert table.conflicts == ()
    assert table["tired"] == "fatigue"
    assert table["long covid"] == "long_covid"
    assert table.section_of("tired") == "lemmas.fatigue_energy"
    assert table.section_of("no energy") == "phrases.fatigue_energy"


def test_extra_terms_file_overrides_bundled_entries(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    extra = tmp_path / "clinic_terms.json"
    extra.write_text(json.dumps({"brain is shit": "brain_fog", "wonky": "joint_instability"}), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="term_table"):
        table = load_term_table(extra)

    assert table["brain is shit"] == "brain_fog"
    assert table["wonky"] == "joint_instability"
    assert table.section_of("wonky") == "extra:clinic_terms.json"
    assert [c.term for c in table.conflicts] == ["wonky"]
    assert table.conflicts[0].previous_category == "dizziness"


def test_extra_terms_file_is_validated(tmp_path: Path) -> None:
    bad_key = tmp_path / "bad_key.json"
    bad_key.write_text(json.dumps({"Brain Fog": "brain_fog"}), encoding="utf-8")
    declined = tmp_path / "declined.json"
    declined.write_text(json.dumps({"energy": "fatigue"}), encoding="utf-8")
    not_object = tmp_path / "list.json"
    not_object.write_text(json.dumps(["tired", "fatigue"]), encoding="utf-8")

    for path in (bad_key, declined, not_object):
        with pytest.raises(ValidationError):
            load_term_table(path)


def test_load_extra_terms_propagates_io_and_json_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_extra_terms(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_extra_terms(broken)


def test_repeated_key_in_extra_terms_file_is_a_conflict(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    extra = tmp_path / "clinic_terms.json"
    extra.write_text('{"wonky": "joint_instability", "wobbly legs": "weakness", "wonky": "dizziness"}', encoding="utf-8")

    assert load_extra_terms(extra) == [
        {"wonky": "joint_instability", "wobbly legs": "weakness"},
        {"wonky": "dizziness"},
    ]

    with caplog.at_level(logging.WARNING, logger="term_table"):
        table = load_term_table(extra)

    assert table["wonky"] == "dizziness"
    assert table.section_of("wonky") == "extra:clinic_terms.json#2"
    repeated = [c for c in table.conflicts if c.section == "extra:clinic_terms.json#2"]
    assert repeated == [
        TermConflict(
            term="wonky",
            previous_category="joint_instability",
            previous_section="extra:clinic_terms.json",
            category="dizziness",
            section="extra:clinic_terms.json#2",
        )
    ]
    assert "repeats keys" in caplog.text


def test_extra_terms_file_without_repeats_is_one_layer(tmp_path: Path) -> None:
    extra = tmp_path / "extra.json"
    extra.write_text(json.dumps({"brain is shit": "brain_fog"}), encoding="utf-8")

    assert load_extra_terms(extra) == [{"brain is shit": "brain_fog"}]
