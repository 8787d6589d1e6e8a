from resources import CATEGORY_TITLES, POKER_TERMS, TermCategory, glossary_text, lookup_term


def test_every_category_has_title_and_terms() -> None:
    for category in TermCategory:
        assert CATEGORY_TITLES[category]
        assert POKER_TERMS[category]


def test_lookup_is_case_insensitive() -> None:
    term = lookup_term("pot odds")
    assert term is not None
    assert term.term == "Pot Odds"


def test_lookup_matches_aliases() -> None:
    assert lookup_term("CO").term == "Cutoff/CO"
    assert lookup_term("shove").term == "All-in/Shove"


def test_lookup_unknown_term() -> None:
    assert lookup_term("bad beat") is None


def test_glossary_text_groups_by_category() -> None:
    text = glossary_text()
    assert text.index("Table Positions") < text.index("UTG") < text.index("General Terms")
    assert "Hand Rankings" in text
