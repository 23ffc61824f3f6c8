from __future__ import annotations

from typing import Sequence

from showdown.cards import build_deck, parse_cards
from showdown.evaluator import evaluate
from showdown.game import RoundContext, RoundEngine, RoundStatus
from showdown.models import HandEvaluation, PlayerHand, RoundConfig


def eval_labels(hole: Sequence[str], board: Sequence[str] = ()) -> HandEvaluation:
    """Evaluate a hand written as labels, e.g. (["As", "Kd"], ["2c", ...])."""
    return evaluate(parse_cards(hole), parse_cards(board))


def labels(cards) -> list[str]:
    return [card.label for card in cards]


def scripted_round(engine: RoundEngine, board: Sequence[str], hands: Sequence[Sequence[str]]) -> RoundContext:
    """Install a hand-picked round on the engine instead of a shuffled one."""
    board_cards = parse_cards(board)
    used = set(board_cards)
    players = []
    for hand_id, hole_labels in enumerate(hands):
        hole = parse_cards(hole_labels)
        used.update(hole)
        players.append(PlayerHand(hand_id=hand_id, cards=(hole[0], hole[1]), evaluation=evaluate(hole, board_cards)))
    ctx = RoundContext(
        round_id="R-TEST",
        seed=0,
        deck=[card for card in build_deck(0) if card not in used],
        board=board_cards,
        players=players,
        status=RoundStatus.PLAYING,
    )
    engine.round = ctx
    return ctx


def create_engine(*, opponents: int = 1, hide_board: bool = False) -> RoundEngine:
    return RoundEngine(RoundConfig(opponents=opponents, hide_board=hide_board))
