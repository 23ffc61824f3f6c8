from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .cards import RANK_VALUE, Card
from .models import HandEvaluation, HandRank

# Positional base for the score. It must exceed the highest card value (14)
# so the kicker digits never carry into the rank digit.
BASE = 15
ACE = RANK_VALUE["A"]
WHEEL = (5, 4, 3, 2, ACE)


class InvalidInputError(ValueError):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def card_value(card: Card) -> int:
    return card.value


def score_cards(rank: HandRank, cards: Sequence[Card]) -> int:
    """Encode ``rank`` and up to five card values as one base-15 integer.

    ``score = rank * 15**5 + sum(value_i * 15**(4 - i))``, so comparing two
    scores is the same as comparing (rank, value_0, ..., value_4)
    lexicographically.
    """
    score = int(rank) * BASE**5
    for idx, card in enumerate(cards[:5]):
        score += card_value(card) * BASE ** (4 - idx)
    return score


def fill_kickers(core: Sequence[Card], cards: Sequence[Card]) -> List[Card]:
    """Pad ``core`` to five cards with the first unused cards of ``cards``.

    ``cards`` must already be sorted high to low. Cards are excluded by
    identity, so a card sharing a rank with the core is still eligible.
    """
    if len(core) >= 5:
        return list(core[:5])
    kickers = [card for card in cards if card not in core]
    return list(core) + kickers[: 5 - len(core)]


def find_flush(cards: Sequence[Card]) -> Optional[Tuple[str, List[Card]]]:
    """Return the flush suit and its five highest cards, if any suit has five."""
    by_suit: Dict[str, List[Card]] = {}
    for card in cards:
        by_suit.setdefault(card.suit, []).append(card)
    for suit, suited in by_suit.items():
        if len(suited) >= 5:
            return suit, suited[:5]
    return None


def find_straight(cards: Sequence[Card]) -> Optional[List[Card]]:
    """Return the highest five-card run in ``cards``, wheel included.

    One card is picked per value (the first one found). For the wheel the
    Ace is placed last since it plays as the low card.
    """
    values = sorted({card_value(card) for card in cards}, reverse=True)
    for idx in range(len(values) - 4):
        window = values[idx : idx + 5]
        if window[0] - window[4] == 4:
            return _pick_values(cards, window)
    if set(WHEEL).issubset(values):
        return _pick_values(cards, WHEEL)
    return None


def _pick_values(cards: Sequence[Card], values: Sequence[int]) -> List[Card]:
    return [next(card for card in cards if card_value(card) == value) for value in values]


def find_n_of_a_kind(cards: Sequence[Card], n: int) -> Optional[List[Card]]:
    """Return ``n`` cards of the highest value that appears at least ``n`` times."""
    by_value: Dict[int, List[Card]] = {}
    for card in cards:
        by_value.setdefault(card_value(card), []).append(card)
    matches = [group for value, group in by_value.items() if len(group) >= n]
    if not matches:
        return None
    best = max(matches, key=lambda group: card_value(group[0]))
    return best[:n]


def exclude_cards(cards: Sequence[Card], used: Sequence[Card]) -> List[Card]:
    """Drop the ``used`` cards themselves; other cards of the same rank stay."""
    return [card for card in cards if card not in used]


def _result(rank: HandRank, winning: Sequence[Card], core: Sequence[Card]) -> HandEvaluation:
    return HandEvaluation(
        rank=rank,
        score=score_cards(rank, winning),
        winning_cards=tuple(winning),
        core_cards=tuple(core),
    )


# Classifiers -----------------------------------------------------------
# Each takes the seven cards sorted high to low and returns a result only
# when its category is present. They are tried strongest first.


def _straight_flush(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    flush = find_flush(cards)
    if flush is None or find_straight(cards) is None:
        return None
    suit, _ = flush
    run = find_straight([card for card in cards if card.suit == suit])
    if run is None:
        return None
    rank = HandRank.ROYAL_FLUSH if card_value(run[0]) == ACE else HandRank.STRAIGHT_FLUSH
    return _result(rank, run, run)


def _four_of_a_kind(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    quads = find_n_of_a_kind(cards, 4)
    if quads is None:
        return None
    return _result(HandRank.FOUR_OF_A_KIND, fill_kickers(quads, cards), quads)


def _full_house(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    trips = find_n_of_a_kind(cards, 3)
    if trips is None:
        return None
    pair = find_n_of_a_kind(exclude_cards(cards, trips), 2)
    if pair is None:
        return None
    hand = trips + pair
    return _result(HandRank.FULL_HOUSE, hand, hand)


def _flush(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    flush = find_flush(cards)
    if flush is None:
        return None
    _, top_five = flush
    return _result(HandRank.FLUSH, top_five, top_five)


def _straight(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    run = find_straight(cards)
    if run is None:
        return None
    return _result(HandRank.STRAIGHT, run, run)


def _three_of_a_kind(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    trips = find_n_of_a_kind(cards, 3)
    if trips is None:
        return None
    return _result(HandRank.THREE_OF_A_KIND, fill_kickers(trips, cards), trips)


def _two_pair(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    high = find_n_of_a_kind(cards, 2)
    if high is None:
        return None
    low = find_n_of_a_kind(exclude_cards(cards, high), 2)
    if low is None:
        return None
    core = high + low
    return _result(HandRank.TWO_PAIR, fill_kickers(core, cards), core)


def _pair(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    pair = find_n_of_a_kind(cards, 2)
    if pair is None:
        return None
    return _result(HandRank.PAIR, fill_kickers(pair, cards), pair)


def _high_card(cards: Sequence[Card]) -> Optional[HandEvaluation]:
    top_five = list(cards[:5])
    return _result(HandRank.HIGH_CARD, top_five, top_five[:1])


CLASSIFIERS: Tuple[Callable[[Sequence[Card]], Optional[HandEvaluation]], ...] = (
    _straight_flush,
    _four_of_a_kind,
    _full_house,
    _flush,
    _straight,
    _three_of_a_kind,
    _two_pair,
    _pair,
    _high_card,
)


def evaluate(hole_cards: Sequence[Card], community_cards: Sequence[Card]) -> HandEvaluation:
    """Evaluate two hole cards against an empty or complete (5 card) board."""
    hole = list(hole_cards)
    board = list(community_cards)
    _validate(hole, board)

    if not board:
        return _evaluate_preflop(hole)

    cards = sorted(hole + board, key=card_value, reverse=True)
    for classify in CLASSIFIERS:
        result = classify(cards)
        if result is not None:
            return result
    raise AssertionError("high card classifier always matches")


def _evaluate_preflop(hole: List[Card]) -> HandEvaluation:
    ordered = sorted(hole, key=card_value, reverse=True)
    if card_value(ordered[0]) == card_value(ordered[1]):
        return _result(HandRank.PAIR, ordered, ordered)
    return _result(HandRank.HIGH_CARD, ordered, ordered[:1])


def _validate(hole: List[Card], board: List[Card]) -> None:
    if len(hole) != 2:
        raise InvalidInputError("BAD_HOLE_COUNT", f"Expected 2 hole cards, got {len(hole)}")
    if len(board) not in (0, 5):
        raise InvalidInputError("BAD_BOARD_COUNT", f"Expected 0 or 5 community cards, got {len(board)}")
    cards = hole + board
    for card in cards:
        if not isinstance(card, Card):
            raise InvalidInputError("BAD_CARD", f"Not a card: {card!r}")
    seen = set()
    for card in cards:
        if card in seen:
            raise InvalidInputError("DUPLICATE_CARD", f"Duplicate card: {card.label}")
        seen.add(card)


def best_hands(evaluations: Sequence[HandEvaluation]) -> List[int]:
    """Return the indices of every evaluation holding the top score."""
    if not evaluations:
        return []
    top = max(evaluation.score for evaluation in evaluations)
    return [idx for idx, evaluation in enumerate(evaluations) if evaluation.score == top]
