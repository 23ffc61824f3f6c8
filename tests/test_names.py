import pytest

from showdown.models import HandRank
from showdown.names import cheat_sheet, describe, hand_name

from .helpers import eval_labels


def test_english_names_match_display_names():
    assert hand_name(HandRank.ROYAL_FLUSH) == "Royal Flush"
    assert hand_name(HandRank.THREE_OF_A_KIND) == "Three of a Kind"
    assert eval_labels(["As", "Ah"]).name == "Pair"


def test_russian_names_and_descriptions():
    assert hand_name(HandRank.FOUR_OF_A_KIND, "ru") == "Каре"
    assert describe(HandRank.TWO_PAIR, "ru") == "Две разные пары."


def test_cheat_sheet_lists_strongest_first_with_odds():
    rows = cheat_sheet()
    assert len(rows) == 10
    assert rows[0][0] == HandRank.ROYAL_FLUSH
    assert rows[0][3] == "0.0032%"
    assert rows[-1] == (HandRank.HIGH_CARD, "High Card", "When you haven't made any of the hands above.", "50.1%")


def test_unknown_language_rejected():
    with pytest.raises(ValueError, match="Unsupported language: de"):
        hand_name(HandRank.PAIR, "de")
