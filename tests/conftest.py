from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from question_bank import load_bank_from_records  # noqa: E402


def make_record(qid: int, correct: int = 0, board: list[dict] | None = None) -> dict:
    return {
        "id": qid,
        "scenario": f"Scenario {qid}: villain bets half pot. What now?",
        "hero_cards": [{"rank": "A", "suit": "♠"}, {"rank": "K", "suit": "♦"}],
        "board": board or [],
        "options": ["FOLD", "CALL", "RAISE"],
        "correct": correct,
        "rationale": f"Rationale {qid}.",
    }


@pytest.fixture
def records() -> list[dict]:
    return [make_record(qid, correct=qid % 3) for qid in range(1, 6)]


@pytest.fixture
def bank(records):
    return load_bank_from_records(records)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
