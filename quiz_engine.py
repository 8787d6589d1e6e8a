#!/usr/bin/env python3
# quiz_engine.py - question model, session state machine and engine

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from errors import InvalidAnswerError, InvalidTransitionError
from sampler import sample

logger = logging.getLogger(__name__)

DEFAULT_QUESTION_COUNT = 20
RANKS = tuple("23456789TJQKA")

# (minimum percentage, message), checked top-down
GRADE_MESSAGES = [
    (90, "Outstanding! You're a poker math master!"),
    (80, "Excellent work! Your poker math is solid."),
    (70, "Good job! Keep practicing to improve."),
    (60, "Not bad! More study will help."),
    (0, "Keep practicing! Poker math takes time to master."),
]


class Suit(Enum):
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    @property
    def letter(self) -> str:
        return self.name[0]


@dataclass(frozen=True)
class Card:
    rank: str
    suit: Suit

    @staticmethod
    def from_dict(d: Dict) -> "Card":
        rank = str(d["rank"])
        if rank not in RANKS:
            raise ValueError(f"unknown rank {rank!r}")
        try:
            suit = Suit(d["suit"])
        except ValueError:
            raise ValueError(f"unknown suit {d['suit']!r}") from None
        return Card(rank=rank, suit=suit)

    @property
    def code(self) -> str:
        """Asset stem, e.g. 'AS' for the ace of spades."""
        return self.rank + self.suit.letter

    @property
    def is_red(self) -> bool:
        return self.suit in (Suit.HEARTS, Suit.DIAMONDS)

    def __str__(self):
        return self.rank + self.suit.value


@dataclass(frozen=True)
class Question:
    id: int
    scenario: str
    hero_cards: Tuple[Card, ...]
    board: Tuple[Card, ...]
    options: Tuple[str, ...]
    correct: int
    rationale: str = ""

    @staticmethod
    def from_dict(d: Dict) -> "Question":
        qid = int(d["id"])
        options = tuple(str(o) for o in d["options"])
        if len(options) < 2:
            raise ValueError(f"question {qid}: needs at least two options")
        correct = int(d["correct"])
        if not 0 <= correct < len(options):
            raise ValueError(f"question {qid}: correct index {correct} out of range")
        hero = tuple(Card.from_dict(c) for c in d["hero_cards"])
        if len(hero) != 2:
            raise ValueError(f"question {qid}: expected 2 hero cards, got {len(hero)}")
        return Question(
            id=qid,
            scenario=str(d["scenario"]),
            hero_cards=hero,
            board=tuple(Card.from_dict(c) for c in d.get("board", [])),
            options=options,
            correct=correct,
            rationale=str(d.get("rationale", "")),
        )

    @property
    def correct_option(self) -> str:
        return self.options[self.correct]


@dataclass(frozen=True)
class AnsweredRecord:
    selected: int
    correct: bool


class Phase(Enum):
    AWAITING_ANSWER = "awaiting an answer"
    ANSWER_REVEALED = "the answer is revealed"
    COMPLETE = "the quiz is complete"


def grade_message(percentage: int) -> str:
    for floor, message in GRADE_MESSAGES:
        if percentage >= floor:
            return message
    return GRADE_MESSAGES[-1][1]


@dataclass(frozen=True)
class SessionResult:
    final_score: int
    total: int

    @property
    def percentage(self) -> int:
        # half-up, so 2/3 -> 67 and 1/8 -> 13
        return int(math.floor(100 * self.final_score / max(1, self.total) + 0.5))

    @property
    def message(self) -> str:
        return grade_message(self.percentage)


@dataclass
class Session:
    """One learner's walk through a sampled sequence of questions.

    The question sequence is fixed for the lifetime of the session; a new
    session is created to start over. Transitions raise a QuizError subclass
    and leave the session unchanged when they are not allowed.
    """

    questions: Tuple[Question, ...]
    position: int = 0
    answers: Dict[int, AnsweredRecord] = field(default_factory=dict)
    score: int = 0
    phase: Phase = Phase.AWAITING_ANSWER

    def __post_init__(self):
        if not self.questions:
            raise ValueError("a session needs at least one question")

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current(self) -> Optional[Question]:
        if self.phase is Phase.COMPLETE:
            return None
        return self.questions[self.position]

    @property
    def is_complete(self) -> bool:
        return self.phase is Phase.COMPLETE

    @property
    def is_revealed(self) -> bool:
        return self.phase is Phase.ANSWER_REVEALED

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def record_at(self, position: int) -> Optional[AnsweredRecord]:
        return self.answers.get(position)

    @property
    def selected(self) -> Optional[int]:
        rec = self.answers.get(self.position)
        return rec.selected if rec else None

    @property
    def is_correct(self) -> Optional[bool]:
        rec = self.answers.get(self.position)
        return rec.correct if rec else None

    @property
    def rationale(self) -> Optional[str]:
        if not self.is_revealed:
            return None
        return self.questions[self.position].rationale

    def _require(self, phase: Phase, action: str):
        if self.phase is not phase:
            logger.warning("rejected %s at position %d: %s", action, self.position, self.phase.value)
            raise InvalidTransitionError(action, self.phase)

    def submit_answer(self, index: int) -> AnsweredRecord:
        self._require(Phase.AWAITING_ANSWER, "submit an answer")
        q = self.questions[self.position]
        if not 0 <= index < len(q.options):
            logger.warning("rejected option %d for question %s", index, q.id)
            raise InvalidAnswerError(f"option {index} is out of range for {len(q.options)} options")
        rec = AnsweredRecord(selected=index, correct=(index == q.correct))
        self.answers[self.position] = rec
        if rec.correct:
            self.score += 1
        self.phase = Phase.ANSWER_REVEALED
        logger.debug("position %d answered %d (correct=%s), score %d", self.position, index, rec.correct, self.score)
        return rec

    def reveal_without_answering(self):
        self._require(Phase.AWAITING_ANSWER, "reveal the answer")
        self.phase = Phase.ANSWER_REVEALED
        logger.debug("position %d revealed without an answer", self.position)

    def advance(self):
        self._require(Phase.ANSWER_REVEALED, "advance")
        if self.position < self.total - 1:
            self.position += 1
            self.phase = Phase.AWAITING_ANSWER
        else:
            self.position = self.total
            self.phase = Phase.COMPLETE
            logger.info("session complete: %d/%d", self.score, self.total)

    def result(self) -> SessionResult:
        if not self.is_complete:
            raise InvalidTransitionError("report a final result", self.phase)
        return SessionResult(final_score=self.score, total=self.total)

    @property
    def history(self) -> List[Tuple[Question, Optional[AnsweredRecord]]]:
        """Questions whose answer has been shown, with the learner's record if any."""
        seen = self.position + 1 if self.is_revealed else self.position
        return [(self.questions[i], self.answers.get(i)) for i in range(min(seen, self.total))]

    def summary(self) -> str:
        pct = SessionResult(self.score, self.total).percentage
        s = [f"Your score: {self.score}/{self.total} ({pct}%)\n"]
        s.append("Review:\n")
        for i, (q, rec) in enumerate(self.history, start=1):
            s.append(f"{i}. {q.scenario}")
            s.append(f"   Your answer: {q.options[rec.selected] if rec else '(revealed without answering)'}")
            s.append(f"   Correct answer: {q.correct_option}")
            if q.rationale:
                s.append(f"   Why: {q.rationale}")
            s.append("")
        return "\n".join(s)


class QuizEngine:
    """Owns the question bank and the learner's current Session."""

    def __init__(self, bank: Sequence[Question], count: int = DEFAULT_QUESTION_COUNT, rng=None):
        if not bank:
            raise ValueError("question bank is empty")
        self.bank = tuple(bank)
        self.count = count
        self.rng = rng
        # a count larger than the bank fails here with BankUnderflowError
        self.session = self._new_session()

    def _new_session(self) -> Session:
        session = Session(questions=sample(self.bank, self.count, self.rng))
        logger.info("started a session of %d questions from a bank of %d", self.count, len(self.bank))
        return session

    def submit_answer(self, index: int) -> AnsweredRecord:
        return self.session.submit_answer(index)

    def reveal_without_answering(self):
        self.session.reveal_without_answering()

    def advance(self):
        self.session.advance()

    def restart(self) -> Session:
        # a count larger than the bank fails here with BankUnderflowError
        self.session = self._new_session()
        return self.session
