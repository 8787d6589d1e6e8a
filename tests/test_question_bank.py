import json
from pathlib import Path

import pytest

from conftest import make_record
from question_bank import DEFAULT_BANK_PATH, load_bank, load_bank_from_records
from quiz_engine import DEFAULT_QUESTION_COUNT, QuizEngine


def test_bundled_bank_is_valid() -> None:
    bank = load_bank()
    assert len(bank) == 52
    assert len({q.id for q in bank}) == len(bank)
    for q in bank:
        assert 0 <= q.correct < len(q.options)
        assert len(q.hero_cards) == 2
        assert q.rationale
    assert Path(DEFAULT_BANK_PATH).name == "questions.json"


def test_bundled_bank_supports_default_quiz_length() -> None:
    engine = QuizEngine(load_bank())
    assert engine.session.total == DEFAULT_QUESTION_COUNT


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "bank.json"
    path.write_text(json.dumps([make_record(1), make_record(2)]), encoding="utf-8")
    bank = load_bank(str(path))
    assert [q.id for q in bank] == [1, 2]
    assert isinstance(bank, tuple)


def test_duplicate_ids_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate question id: 3"):
        load_bank_from_records([make_record(3), make_record(3)])


def test_empty_bank_rejected(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="empty"):
        load_bank(str(path))


def test_non_list_bank_rejected(tmp_path: Path) -> None:
    path = tmp_path / "obj.json"
    path.write_text(json.dumps({"questions": []}), encoding="utf-8")
    with pytest.raises(ValueError, match="JSON array"):
        load_bank(str(path))


def test_invalid_question_rejected() -> None:
    raw = make_record(1)
    raw["correct"] = 9
    with pytest.raises(ValueError, match="out of range"):
        load_bank_from_records([raw])


@pytest.mark.parametrize("field", ["scenario", "options", "correct", "hero_cards", "id"])
def test_missing_field_reported_as_value_error(tmp_path: Path, field: str) -> None:
    raw = make_record(1)
    del raw[field]
    path = tmp_path / "missing.json"
    path.write_text(json.dumps([make_record(2), raw]), encoding="utf-8")
    with pytest.raises(ValueError, match=f"question record 2: missing field '{field}'"):
        load_bank(str(path))


@pytest.mark.parametrize("entry", ["not a question", 7, None, ["FOLD", "CALL"]])
def test_non_object_record_rejected(entry) -> None:
    with pytest.raises(ValueError, match="question record 1: expected an object"):
        load_bank_from_records([entry])


def test_malformed_card_rejected() -> None:
    raw = make_record(1)
    raw["hero_cards"] = ["AS", "KD"]
    with pytest.raises(ValueError, match="question record 1"):
        load_bank_from_records([raw])
