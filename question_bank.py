#!/usr/bin/env python3
# question_bank.py - load and validate the static question bank

import json
import logging
import os
from typing import Dict, Iterable, Optional, Tuple

from quiz_engine import Question

logger = logging.getLogger(__name__)

DEFAULT_BANK_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "questions.json")


def load_bank_from_records(records: Iterable[Dict]) -> Tuple[Question, ...]:
    """Build questions from raw records, rejecting empty banks and duplicate ids."""
    questions = []
    seen = set()
    for n, raw in enumerate(records, start=1):
        if not isinstance(raw, dict):
            raise ValueError(f"question record {n}: expected an object, got {type(raw).__name__}")
        try:
            q = Question.from_dict(raw)
        except KeyError as e:
            raise ValueError(f"question record {n}: missing field {e}") from None
        except TypeError as e:
            raise ValueError(f"question record {n}: {e}") from None
        if q.id in seen:
            raise ValueError(f"Duplicate question id: {q.id}")
        seen.add(q.id)
        questions.append(q)
    if not questions:
        raise ValueError("Question bank is empty.")
    return tuple(questions)


def load_bank(path: Optional[str] = None) -> Tuple[Question, ...]:
    path = path or DEFAULT_BANK_PATH
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{os.path.basename(path)}: expected a JSON array of questions")
    bank = load_bank_from_records(raw)
    logger.info("loaded %d questions from %s", len(bank), path)
    return bank
