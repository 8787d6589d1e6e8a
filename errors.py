#!/usr/bin/env python3
# errors.py - exceptions raised by the quiz engine


class QuizError(Exception):
    """Base class for recoverable quiz engine errors."""


class InvalidTransitionError(QuizError):
    """An action was requested in a state that does not allow it."""

    def __init__(self, action: str, phase):
        super().__init__(f"cannot {action} while {phase.value}")
        self.action = action
        self.phase = phase


class InvalidAnswerError(QuizError, ValueError):
    """Selected option index is out of range for the current question."""


class BankUnderflowError(QuizError, ValueError):
    """More questions were requested than the bank holds."""

    def __init__(self, requested: int, available: int):
        super().__init__(f"requested {requested} questions but the bank only has {available}")
        self.requested = requested
        self.available = available
