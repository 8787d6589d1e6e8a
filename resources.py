# resources.py - poker terms glossary shown alongside the quiz

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class TermCategory(Enum):
    POSITIONS = "positions"
    GENERAL = "general"
    ACTIONS = "actions"
    HANDS = "hands"
    OTHER = "other"


CATEGORY_TITLES: Dict[TermCategory, str] = {
    TermCategory.POSITIONS: "Table Positions",
    TermCategory.GENERAL: "General Terms",
    TermCategory.ACTIONS: "Actions",
    TermCategory.HANDS: "Hand Rankings",
    TermCategory.OTHER: "Other Terms",
}


@dataclass(frozen=True)
class Term:
    term: str
    definition: str


POKER_TERMS: Dict[TermCategory, Tuple[Term, ...]] = {
    TermCategory.POSITIONS: (
        Term("UTG", "Under the Gun - First position to act preflop, immediately left of the big blind"),
        Term("UTG+1", "One seat to the left of UTG"),
        Term("UTG+2", "Two seats to the left of UTG"),
        Term("MP", "Middle Position - Seats in the middle of the table"),
        Term("Hijack", "Two seats to the right of the button"),
        Term("Cutoff/CO", "One seat to the right of the button"),
        Term("Button", "Dealer position - Last to act postflop, best position"),
        Term("SB", "Small Blind - Forced bet, first to act postflop"),
        Term("BB", "Big Blind - Larger forced bet, second to act postflop"),
    ),
    TermCategory.GENERAL: (
        Term("Villain", "Your opponent(s) in the hand"),
        Term("Hero", "You - the player making decisions"),
        Term("Pot Odds", "Ratio of current pot size to the cost of a call"),
        Term("Equity", "Your percentage chance of winning the pot"),
        Term("GTO", "Game Theory Optimal - Mathematically balanced strategy"),
        Term("EV", "Expected Value - Average profit/loss of a decision"),
        Term("Outs", "Cards that will improve your hand"),
        Term("Implied Odds", "Pot odds considering future betting"),
    ),
    TermCategory.ACTIONS: (
        Term("Limp", "Call the big blind preflop instead of raising"),
        Term("Raise", "Increase the bet size"),
        Term("3-bet", "Re-raise after an initial raise"),
        Term("4-bet", "Re-raise after a 3-bet"),
        Term("All-in/Shove", "Bet all remaining chips"),
        Term("Check", "Pass action without betting (when no bet is required)"),
        Term("Call", "Match the current bet"),
        Term("Fold", "Surrender your hand and forfeit the pot"),
        Term("Isolation Raise", "Raise to play heads-up against a specific player"),
    ),
    TermCategory.HANDS: (
        Term("Set", "Three of a kind using a pocket pair"),
        Term("Trips", "Three of a kind using one hole card"),
        Term("Two Pair", "Two different pairs"),
        Term("Overpair", "Pocket pair higher than any board card"),
        Term("Top Pair", "Pair using the highest board card"),
        Term("Nut/Nuts", "The best possible hand"),
        Term("Draw", "Incomplete hand that needs improvement"),
        Term("Flush Draw", "Four cards of the same suit, needing one more"),
        Term("Straight Draw", "Four cards to a straight, needing one more"),
    ),
    TermCategory.OTHER: (
        Term("Flop", "First three community cards"),
        Term("Turn", "Fourth community card"),
        Term("River", "Fifth and final community card"),
        Term("Board", "All community cards"),
        Term("Suited", "Cards of the same suit (♠♥♦♣)"),
        Term("Offsuit/o", "Cards of different suits"),
        Term("Pocket Pair", "Two cards of the same rank as hole cards"),
        Term("Multiway", "Pot with 3+ players"),
        Term("Heads-up", "Pot with only 2 players"),
    ),
}

_missing = set(TermCategory) - set(CATEGORY_TITLES) | set(TermCategory) - set(POKER_TERMS)
if _missing:
    raise RuntimeError(f"glossary categories without an entry: {sorted(c.value for c in _missing)}")


def lookup_term(name: str) -> Optional[Term]:
    """Case-insensitive lookup across all categories; "CO" finds "Cutoff/CO"."""
    wanted = name.strip().lower()
    for terms in POKER_TERMS.values():
        for t in terms:
            if wanted == t.term.lower() or wanted in t.term.lower().split("/"):
                return t
    return None


def glossary_text() -> str:
    lines = []
    for category, terms in POKER_TERMS.items():
        lines.append(CATEGORY_TITLES[category])
        lines.extend(f"  • {t.term} - {t.definition}" for t in terms)
        lines.append("")
    return "\n".join(lines)
