#!/usr/bin/env python3
# certificate.py - PDF certificate for a completed quiz
# - title, recipient, score and grade message on page one
# - optional review page listing every question shown in the session
#
# Required: reportlab

import hashlib
import logging
from datetime import datetime
from typing import List, Optional

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from export import outcome_label
from quiz_engine import Session, SessionResult

logger = logging.getLogger(__name__)

DEFAULT_ISSUER = "Poker Brain"
FELT_GREEN = HexColor("#0b5d3b")
GOLD = HexColor("#b8923a")

# the base-14 fonts have no suit glyphs; use the usual "As Kd" notation
PDF_SUITS = str.maketrans({"♠": "s", "♥": "h", "♦": "d", "♣": "c"})


def short_cert_id(name: str, result: SessionResult, dt: datetime) -> str:
    """Date prefix plus a digest of who scored what, so a changed score changes the id."""
    digest = hashlib.sha1()
    for part in (name.strip().lower(), f"{result.final_score}/{result.total}", dt.isoformat(timespec="minutes")):
        digest.update(part.encode("utf-8") + b"\0")
    return f"PB-{dt:%y%m%d}-{digest.hexdigest()[:8].upper()}"


def _wrap(c: canvas.Canvas, text: str, max_width: float, font_name: str, font_size: float) -> List[str]:
    lines = []
    text = text.translate(PDF_SUITS)
    for raw in text.splitlines() or [""]:
        cur = ""
        for w in raw.split():
            t = (cur + " " + w).strip()
            if c.stringWidth(t, font_name, font_size) <= max_width:
                cur = t
            else:
                if cur: lines.append(cur)
                cur = w
        lines.append(cur)
    return lines


def _draw_center_wrapped(c: canvas.Canvas, text: str, y_top: float, max_width_cm: float, line_height: float,
                         font_name="Helvetica", font_size=12) -> float:
    c.setFont(font_name, font_size)
    y = y_top
    for ln in _wrap(c, text, max_width_cm * cm, font_name, font_size):
        c.drawCentredString(A4[0]/2, y, ln)
        y -= line_height
    return y


def _draw_review(c: canvas.Canvas, session: Session):
    W, H = A4
    left, width = 2*cm, W - 4*cm
    y = H - 2.5*cm

    def line(text, font="Helvetica", size=10, indent=0.0):
        nonlocal y
        for ln in _wrap(c, text, width - indent, font, size):
            if y < 2*cm:
                c.showPage(); y = H - 2.5*cm
            c.setFont(font, size)
            c.drawString(left + indent, y, ln)
            y -= size * 1.35

    line("Question review", font="Helvetica-Bold", size=16)
    y -= 6
    for i, (q, rec) in enumerate(session.history, start=1):
        line(f"{i}. {q.scenario}", font="Helvetica-Bold")
        chosen = q.options[rec.selected] if rec else "-"
        line(f"Your answer: {chosen}   Correct: {q.correct_option}   ({outcome_label(rec)})", indent=0.6*cm)
        if q.rationale:
            line(q.rationale, font="Helvetica-Oblique", size=9, indent=0.6*cm)
        y -= 6


def generate_certificate(
    name: str,
    result: SessionResult,
    dt: datetime,
    path: str,
    *,
    issuer: str = DEFAULT_ISSUER,
    session: Optional[Session] = None,
):
    c = canvas.Canvas(path, pagesize=A4)
    W, H = A4

    # Borders
    c.setStrokeColor(FELT_GREEN)
    c.setLineWidth(4); c.rect(1*cm, 1*cm, W-2*cm, H-2*cm)
    c.setStrokeColor(GOLD)
    c.setLineWidth(1); c.rect(1.4*cm, 1.4*cm, W-2.8*cm, H-2.8*cm)
    c.setFillColor(HexColor("#000000"))

    c.setFont("Helvetica-Bold", 28)
    c.drawCentredString(W/2, H-6.0*cm, "CERTIFICATE OF COMPLETION")
    c.setFont("Helvetica", 13)
    c.drawCentredString(W/2, H-7.0*cm, issuer)

    cert_id = short_cert_id(name, result, dt)
    c.setFont("Helvetica", 11)
    c.drawCentredString(W/2, H-8.0*cm, f"Certificate No: {cert_id}")

    c.setFont("Helvetica-Bold", 22)
    c.drawCentredString(W/2, H-11.0*cm, name or "Participant")

    c.setFont("Helvetica", 14)
    c.drawCentredString(W/2, H-13.0*cm, f"Score: {result.final_score}/{result.total} ({result.percentage}%)")
    _draw_center_wrapped(c, result.message, y_top=H-14.2*cm, max_width_cm=15, line_height=0.6*cm,
                         font_name="Helvetica-Oblique", font_size=12)
    c.setFont("Helvetica", 11)
    c.drawCentredString(W/2, H-16.0*cm, f"Date: {dt.strftime('%Y-%m-%d %H:%M')}")

    c.setFont("Helvetica", 8.5)
    c.drawCentredString(W/2, 2.1*cm, "Practice quiz result. Not a measure of live play.")
    c.showPage()

    if session is not None:
        _draw_review(c, session)
        c.showPage()
    c.save()
    logger.info("saved certificate %s to %s", cert_id, path)
    return cert_id
