from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .cards import Card, build_deck, deal
from .evaluator import evaluate
from .models import HandEvaluation, PlayerHand, RoundConfig
from .names import hand_name

LOGGER = logging.getLogger("showdown")

# RoundEngine runs one "pick the winning hand" round at a time: deal a board
# and several hands, evaluate them, then score a guess. Nothing here renders
# or times anything.


class RoundStatus(str, Enum):
    DEALING = "DEALING"
    PLAYING = "PLAYING"
    REVEALED = "REVEALED"


class GuessResult(str, Enum):
    WIN = "WIN"
    LOSS = "LOSS"


class Highlight(str, Enum):
    WINNER = "WINNER"
    KICKER = "KICKER"
    DIMMED = "DIMMED"
    NORMAL = "NORMAL"


@dataclass
class RoundContext:
    round_id: str
    seed: int
    deck: List[Card]
    board: List[Card] = field(default_factory=list)
    players: List[PlayerHand] = field(default_factory=list)
    status: RoundStatus = RoundStatus.DEALING
    winner_id: Optional[int] = None
    selected_id: Optional[int] = None
    result: Optional[GuessResult] = None


class RoundEngine:
    """Deals and resolves hand-reading rounds for a single table."""

    def __init__(self, config: Optional[RoundConfig] = None) -> None:
        self.config = config or RoundConfig()
        self.hands_played = 0
        self.round: Optional[RoundContext] = None

    # Round lifecycle -------------------------------------------------

    def start_round(self, seed: Optional[int] = None) -> RoundContext:
        if seed is None:
            seed = int(time.time() * 1000) & 0xFFFFFFFF

        ctx = RoundContext(
            round_id=f"R-{time.strftime('%Y%m%d')}-{self.hands_played:05d}",
            seed=seed,
            deck=build_deck(seed),
        )
        self.round = ctx

        # Board first, then two cards per hand, all from the same deck.
        ctx.board = [] if self.config.hide_board else deal(ctx.deck, 5)
        for hand_id in range(self.config.hand_count):
            hole = deal(ctx.deck, 2)
            ctx.players.append(
                PlayerHand(hand_id=hand_id, cards=(hole[0], hole[1]), evaluation=evaluate(hole, ctx.board))
            )

        ctx.status = RoundStatus.PLAYING
        self.hands_played += 1
        LOGGER.debug(
            "Round %s dealt: board=%s hands=%s",
            ctx.round_id,
            [card.label for card in ctx.board],
            [[card.label for card in player.cards] for player in ctx.players],
        )
        return ctx

    def winner_id(self) -> int:
        ctx = self._active_round()
        best = ctx.players[0]
        for player in ctx.players[1:]:
            # Strictly greater keeps the first dealt hand on equal scores.
            if self._evaluation(player).score > self._evaluation(best).score:
                best = player
        return best.hand_id

    def resolve(self, selected_id: Optional[int]) -> GuessResult:
        """Score a guess. ``None`` means no pick was made in time."""
        ctx = self._active_round()
        if ctx.status != RoundStatus.PLAYING:
            raise RuntimeError("Round already resolved")
        if selected_id is not None and selected_id not in {player.hand_id for player in ctx.players}:
            raise ValueError(f"Unknown hand {selected_id}")

        ctx.winner_id = self.winner_id()
        ctx.selected_id = selected_id
        ctx.result = GuessResult.WIN if selected_id == ctx.winner_id else GuessResult.LOSS
        ctx.status = RoundStatus.REVEALED
        LOGGER.info(
            "Round %s resolved: winner=%s selected=%s result=%s",
            ctx.round_id,
            ctx.winner_id,
            selected_id,
            ctx.result.value,
        )
        return ctx.result

    def timeout(self) -> GuessResult:
        return self.resolve(None)

    # Presentation helpers --------------------------------------------

    def winning_hand(self) -> Optional[PlayerHand]:
        ctx = self._active_round()
        if ctx.winner_id is None:
            return None
        return next(player for player in ctx.players if player.hand_id == ctx.winner_id)

    def highlight(self, card: Card) -> Highlight:
        ctx = self._active_round()
        if ctx.status != RoundStatus.REVEALED:
            return Highlight.NORMAL
        winner = self.winning_hand()
        if winner is None:
            raise RuntimeError("Round has no winner")
        evaluation = self._evaluation(winner)
        if card not in evaluation.winning_cards:
            return Highlight.DIMMED
        if card in evaluation.core_cards:
            return Highlight.WINNER
        return Highlight.KICKER

    def snapshot(self, language: str = "en") -> Dict[str, object]:
        ctx = self._active_round()
        revealed = ctx.status == RoundStatus.REVEALED
        payload: Dict[str, object] = {
            "round_id": ctx.round_id,
            "seed": ctx.seed,
            "status": ctx.status.value,
            "board": [card.label for card in ctx.board],
            "hands": [self._hand_payload(player, revealed, language) for player in ctx.players],
        }
        if revealed:
            payload["winner_id"] = ctx.winner_id
            payload["selected_id"] = ctx.selected_id
            payload["result"] = ctx.result.value if ctx.result else None
            payload["highlights"] = {
                card.label: self.highlight(card).value
                for card in ctx.board + [card for player in ctx.players for card in player.cards]
            }
        return payload

    # Internal helpers ------------------------------------------------

    def _hand_payload(self, player: PlayerHand, revealed: bool, language: str) -> Dict[str, object]:
        entry: Dict[str, object] = {
            "hand_id": player.hand_id,
            "cards": [card.label for card in player.cards],
        }
        if revealed:
            evaluation = self._evaluation(player)
            entry["rank"] = int(evaluation.rank)
            entry["name"] = hand_name(evaluation.rank, language)
            entry["score"] = evaluation.score
        return entry

    def _active_round(self) -> RoundContext:
        if not self.round:
            raise RuntimeError("Round not active")
        return self.round

    @staticmethod
    def _evaluation(player: PlayerHand) -> HandEvaluation:
        if player.evaluation is None:
            raise RuntimeError(f"Hand {player.hand_id} not evaluated")
        return player.evaluation
