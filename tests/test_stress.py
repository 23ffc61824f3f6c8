from showdown.cards import build_deck, deal
from showdown.evaluator import evaluate
from showdown.models import HandRank

from .helpers import create_engine


def test_score_order_agrees_with_rank_order_over_many_deals():
    evaluations = []
    for seed in range(400):
        deck = build_deck(seed=seed)
        board = deal(deck, 5)
        for _ in range(6):
            evaluations.append(evaluate(deal(deck, 2), board))

    ordered = sorted(evaluations, key=lambda evaluation: evaluation.score)
    ranks = [evaluation.rank for evaluation in ordered]
    assert ranks == sorted(ranks)
    for evaluation in evaluations:
        assert len(evaluation.winning_cards) == 5
        assert set(evaluation.core_cards) <= set(evaluation.winning_cards)
        if evaluation.rank in (HandRank.FLUSH, HandRank.STRAIGHT, HandRank.STRAIGHT_FLUSH, HandRank.ROYAL_FLUSH):
            assert evaluation.core_cards == evaluation.winning_cards


def test_engine_handles_thousand_rounds_without_repeating_cards():
    engine = create_engine(opponents=5)
    for seed in range(1_000, 2_000):
        ctx = engine.start_round(seed=seed)
        dealt = ctx.board + [card for player in ctx.players for card in player.cards]
        assert len(set(dealt)) == len(dealt) == 17
        assert len(set(dealt) | set(ctx.deck)) == 52
        engine.resolve(engine.winner_id())
    assert engine.hands_played == 1_000
