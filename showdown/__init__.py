"""Texas Hold'em hand evaluation and hand-reading rounds."""

from .cards import Card, RANKS, SUITS, build_deck, deal, parse_cards
from .evaluator import InvalidInputError, best_hands, evaluate
from .game import GuessResult, Highlight, RoundContext, RoundEngine, RoundStatus
from .models import HandEvaluation, HandRank, PlayerHand, RoundConfig
from .names import hand_name

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "build_deck",
    "deal",
    "parse_cards",
    "InvalidInputError",
    "best_hands",
    "evaluate",
    "GuessResult",
    "Highlight",
    "RoundContext",
    "RoundEngine",
    "RoundStatus",
    "HandEvaluation",
    "HandRank",
    "PlayerHand",
    "RoundConfig",
    "hand_name",
]
