"""Display names, short descriptions and odds for each hand category."""

from __future__ import annotations

from typing import Dict, List, Tuple

from .models import HandRank

LANGUAGES = ("en", "ru")

HAND_NAMES: Dict[str, Dict[HandRank, str]] = {
    "en": {rank: rank.display_name for rank in HandRank},
    "ru": {
        HandRank.HIGH_CARD: "Старшая карта",
        HandRank.PAIR: "Пара",
        HandRank.TWO_PAIR: "Две пары",
        HandRank.THREE_OF_A_KIND: "Сет",
        HandRank.STRAIGHT: "Стрит",
        HandRank.FLUSH: "Флеш",
        HandRank.FULL_HOUSE: "Фулл-хаус",
        HandRank.FOUR_OF_A_KIND: "Каре",
        HandRank.STRAIGHT_FLUSH: "Стрит-флеш",
        HandRank.ROYAL_FLUSH: "Роял-флеш",
    },
}

DESCRIPTIONS: Dict[str, Dict[HandRank, str]] = {
    "en": {
        HandRank.ROYAL_FLUSH: "A, K, Q, J, 10, all the same suit.",
        HandRank.STRAIGHT_FLUSH: "Five cards in a sequence, all in the same suit.",
        HandRank.FOUR_OF_A_KIND: "All four cards of the same rank.",
        HandRank.FULL_HOUSE: "Three of a kind with a pair.",
        HandRank.FLUSH: "Any five cards of the same suit, but not in a sequence.",
        HandRank.STRAIGHT: "Five cards in a sequence, but not of the same suit.",
        HandRank.THREE_OF_A_KIND: "Three cards of the same rank.",
        HandRank.TWO_PAIR: "Two different pairs.",
        HandRank.PAIR: "Two cards of the same rank.",
        HandRank.HIGH_CARD: "When you haven't made any of the hands above.",
    },
    "ru": {
        HandRank.ROYAL_FLUSH: "Туз, Король, Дама, Валет, 10 одной масти.",
        HandRank.STRAIGHT_FLUSH: "Пять карт по порядку одной масти.",
        HandRank.FOUR_OF_A_KIND: "Четыре карты одного достоинства.",
        HandRank.FULL_HOUSE: "Три карты одного достоинства и одна пара.",
        HandRank.FLUSH: "Любые пять карт одной масти.",
        HandRank.STRAIGHT: "Пять карт по порядку любых мастей.",
        HandRank.THREE_OF_A_KIND: "Три карты одного достоинства.",
        HandRank.TWO_PAIR: "Две разные пары.",
        HandRank.PAIR: "Две карты одного достоинства.",
        HandRank.HIGH_CARD: "Старшая карта, если нет других комбинаций.",
    },
}

# Chance of finishing with each category using seven cards.
PROBABILITIES: Dict[HandRank, str] = {
    HandRank.ROYAL_FLUSH: "0.0032%",
    HandRank.STRAIGHT_FLUSH: "0.0279%",
    HandRank.FOUR_OF_A_KIND: "0.168%",
    HandRank.FULL_HOUSE: "2.60%",
    HandRank.FLUSH: "3.03%",
    HandRank.STRAIGHT: "4.62%",
    HandRank.THREE_OF_A_KIND: "4.83%",
    HandRank.TWO_PAIR: "23.5%",
    HandRank.PAIR: "43.8%",
    HandRank.HIGH_CARD: "50.1%",
}


def _check_language(language: str) -> None:
    if language not in LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")


def hand_name(rank: HandRank, language: str = "en") -> str:
    _check_language(language)
    return HAND_NAMES[language][HandRank(rank)]


def describe(rank: HandRank, language: str = "en") -> str:
    _check_language(language)
    return DESCRIPTIONS[language][HandRank(rank)]


def cheat_sheet(language: str = "en") -> List[Tuple[HandRank, str, str, str]]:
    """Rows of (rank, name, description, probability), strongest first."""
    _check_language(language)
    return [
        (rank, HAND_NAMES[language][rank], DESCRIPTIONS[language][rank], PROBABILITIES[rank])
        for rank in sorted(HandRank, reverse=True)
    ]
