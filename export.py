#!/usr/bin/env python3
# export.py - write a finished (or in-progress) session to CSV

import csv
import logging
from datetime import datetime
from typing import Optional

from quiz_engine import Session, SessionResult

logger = logging.getLogger(__name__)


def outcome_label(rec) -> str:
    if rec is None:
        return "Revealed"
    return "Correct" if rec.correct else "Incorrect"


def write_results_csv(path: str, session: Session, name: str = "", dt: Optional[datetime] = None):
    dt = dt or datetime.now()
    pct = SessionResult(session.score, session.total).percentage
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["Name", "Date", "Score", "Total", "Percentage", "Complete"])
        w.writerow([name, dt.strftime("%Y-%m-%d %H:%M"), session.score, session.total,
                    f"{pct}%", "Yes" if session.is_complete else "No"])
        w.writerow([])
        w.writerow(["#", "QuestionId", "Scenario", "Chosen", "Correct", "Outcome", "Rationale"])
        for i, (q, rec) in enumerate(session.history, start=1):
            w.writerow([i, q.id, q.scenario, q.options[rec.selected] if rec else "",
                        q.correct_option, outcome_label(rec), q.rationale])
    logger.info("wrote results for %d questions to %s", len(session.history), path)
