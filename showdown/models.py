from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from .cards import Card


class HandRank(IntEnum):
    """Hand categories from weakest to strongest."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.PAIR: "Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
}


@dataclass(frozen=True)
class HandEvaluation:
    """Best five-card hand found for one player against one board.

    ``winning_cards`` is ordered by descending significance (core cards
    first, then kickers) and is what ``score`` was computed from.
    ``core_cards`` is the subset forming the named combination.
    """

    rank: HandRank
    score: int
    winning_cards: Tuple[Card, ...]
    core_cards: Tuple[Card, ...]

    @property
    def kickers(self) -> Tuple[Card, ...]:
        return tuple(card for card in self.winning_cards if card not in self.core_cards)

    @property
    def name(self) -> str:
        return self.rank.display_name

    def beats(self, other: HandEvaluation) -> bool:
        return self.score > other.score

    def ties(self, other: HandEvaluation) -> bool:
        return self.score == other.score


@dataclass
class PlayerHand:
    hand_id: int
    cards: Tuple[Card, Card]
    evaluation: Optional[HandEvaluation] = None


@dataclass
class RoundConfig:
    opponents: int = 1
    hide_board: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.opponents <= 5:
            raise ValueError(f"Opponents must be between 1 and 5, got {self.opponents}")

    @property
    def hand_count(self) -> int:
        return self.opponents + 1
