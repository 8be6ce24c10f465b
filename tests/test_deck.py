import random

import pytest

from holdem.deck import Card, Deck, card_str, create_shuffled_deck, make_deck, parse_card, to_cards
from holdem.exceptions import InvalidCardError


def test_make_deck_has_52_unique_cards():
    deck = make_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_card_str_formats_face_cards():
    assert card_str((11, "h")) == "Jh"
    assert card_str(Card(14, "s")) == "As"
    assert str(Card(10, "d")) == "10d"


def test_card_is_a_plain_rank_suit_pair():
    card = Card(12, "c")
    rank, suit = card
    assert (rank, suit) == (12, "c")
    assert card.rank == 12 and card.suit == "c"
    assert card == (12, "c")
    assert hash(card) == hash(Card(12, "c"))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("As", Card(14, "s")),
        ("kh", Card(13, "h")),
        ("Td", Card(10, "d")),
        ("10c", Card(10, "c")),
        ("2S", Card(2, "s")),
    ],
)
def test_parse_card(text, expected):
    assert parse_card(text) == expected


@pytest.mark.parametrize("text", ["", "A", "1s", "15h", "Ax", "Zs"])
def test_parse_card_rejects_garbage(text):
    with pytest.raises(InvalidCardError):
        parse_card(text)


def test_full_deal_yields_52_distinct_cards():
    deck = Deck()
    dealt = [deck.deal_one() for _ in range(52)]
    assert None not in dealt
    assert len(set(dealt)) == 52
    assert deck.remaining == 0
    assert len(deck) == 0


def test_deal_one_on_empty_deck_returns_none(seeded_deck):
    seeded_deck.deal(52)
    assert seeded_deck.deal_one() is None
    assert seeded_deck.burn() is None


def test_deal_returns_only_what_is_left(seeded_deck):
    seeded_deck.deal(50)
    rest = seeded_deck.deal(5)
    assert len(rest) == 2
    assert seeded_deck.deal(3) == []


def test_deal_rejects_negative_count(seeded_deck):
    with pytest.raises(ValueError):
        seeded_deck.deal(-1)
    assert seeded_deck.remaining == 52


def test_remaining_and_dealt_partition_the_deck(seeded_deck):
    hole = seeded_deck.deal(2)
    seeded_deck.burn()
    flop = seeded_deck.deal(3)

    assert seeded_deck.remaining == 46
    assert len(seeded_deck.dealt) == 6
    assert seeded_deck.dealt[:2] == hole
    assert seeded_deck.dealt[3:] == flop
    assert len(seeded_deck.dealt) + seeded_deck.remaining == 52


def test_dealt_property_is_a_copy(seeded_deck):
    seeded_deck.deal(3)
    seeded_deck.dealt.clear()
    assert len(seeded_deck.dealt) == 3


def test_reset_and_shuffle_restores_all_cards(seeded_deck):
    seeded_deck.deal(30)
    seeded_deck.reset_and_shuffle()
    assert seeded_deck.remaining == 52
    assert seeded_deck.dealt == []

    again = seeded_deck.deal(60)
    assert len(again) == 52
    assert set(again) == set(make_deck())


def test_same_seed_gives_same_order():
    assert Deck(seed=7).deal(52) == Deck(seed=7).deal(52)


def test_reset_draws_a_new_permutation():
    deck = Deck(seed=99)
    first = deck.deal(52)
    deck.reset_and_shuffle()
    second = deck.deal(52)
    assert sorted(first) == sorted(second)
    assert first != second


def test_injected_rng_is_used():
    class ReverseShuffle:
        def shuffle(self, cards):
            cards.reverse()

    deck = Deck(rng=ReverseShuffle())
    # cards are dealt from the end, so a reversed deck deals in make_deck order
    assert deck.deal(3) == make_deck()[:3]


def test_create_shuffled_deck_uses_given_rng():
    assert create_shuffled_deck(random.Random(3)) == create_shuffled_deck(random.Random(3))
    assert sorted(create_shuffled_deck()) == sorted(make_deck())


def test_to_cards_converts_pairs():
    assert to_cards([(14, "s"), Card(2, "c")]) == [Card(14, "s"), Card(2, "c")]
    assert to_cards([]) == []


@pytest.mark.parametrize(
    "bad",
    [
        [14],
        [(14, "s", "extra")],
        [(14.0, "s")],
        [("A", "s")],
        [(14, "x")],
    ],
)
def test_to_cards_rejects_non_cards(bad):
    with pytest.raises(InvalidCardError):
        to_cards(bad)
