from showdown.cards import Card, RANK_VALUE, build_deck, cards_to_labels, deal, parse_cards, parse_label


def test_build_deck_has_52_unique_cards():
    deck = build_deck(seed=1)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert len(set(cards_to_labels(deck))) == 52


def test_build_deck_is_deterministic_per_seed():
    assert build_deck(seed=5) == build_deck(seed=5)
    assert build_deck(seed=5) != build_deck(seed=6)


def test_deal_removes_cards_without_overlap():
    deck = build_deck(seed=3)
    board = deal(deck, 5)
    hands = [deal(deck, 2) for _ in range(6)]
    dealt = board + [card for hand in hands for card in hand]
    assert len(set(dealt)) == 17
    assert len(deck) == 52 - 17
    assert not set(dealt) & set(deck)


def test_card_identity_is_rank_and_suit():
    assert Card("A", "s") == parse_label("As")
    assert hash(Card("A", "s")) == hash(parse_label("As"))
    assert Card("A", "s") != Card("A", "h")
    assert len({Card("T", "d"), parse_label("Td")}) == 1


def test_card_values_and_labels():
    assert RANK_VALUE["2"] == 2
    assert RANK_VALUE["T"] == 10
    assert RANK_VALUE["A"] == 14
    card = parse_label("ah")
    assert card == Card("A", "h")
    assert card.value == 14
    assert card.label == "Ah"
    assert card.symbol == "A♥"
    assert str(card) == "Ah"


def test_parse_cards_round_trips_labels():
    labels = ["As", "Td", "2c"]
    assert cards_to_labels(parse_cards(labels)) == labels
