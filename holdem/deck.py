"""
Cards and the dealing deck for the Hold'em rules core.
"""

import logging
import random
from typing import Iterable, List, NamedTuple, Optional

from holdem.exceptions import InvalidCardError

# Card representation: (rank:int 2..14, suit:str one of 'cdhs')
Rank = int
Suit = str

RANKS = list(range(2, 15))  # 2-14 (where 11=J, 12=Q, 13=K, 14=A)
SUITS = list('cdhs')  # clubs, diamonds, hearts, spades

RANK_NAMES = {11: 'J', 12: 'Q', 13: 'K', 14: 'A'}
_RANK_LOOKUP = {'T': 10, 'J': 11, 'Q': 12, 'K': 13, 'A': 14}


class Card(NamedTuple):
    """An immutable playing card. Still unpacks as ``rank, suit``."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return card_str(self)


def make_deck() -> List[Card]:
    """Create a standard 52-card deck."""
    return [Card(r, s) for r in RANKS for s in SUITS]


def card_str(card: Card) -> str:
    """Convert a card to its string representation."""
    r, s = card
    return f"{RANK_NAMES.get(r, r)}{s}"


def parse_card(text: str) -> Card:
    """Parse strings such as ``"As"``, ``"10h"`` or ``"td"`` into a Card."""
    text = text.strip()
    if len(text) < 2:
        raise InvalidCardError(f"Cannot parse card {text!r}")

    rank_part, suit = text[:-1].upper(), text[-1].lower()
    if rank_part in _RANK_LOOKUP:
        rank = _RANK_LOOKUP[rank_part]
    elif rank_part.isdigit():
        rank = int(rank_part)
    else:
        raise InvalidCardError(f"Unknown rank in card {text!r}")

    if rank not in RANKS:
        raise InvalidCardError(f"Rank out of range in card {text!r}")
    if suit not in SUITS:
        raise InvalidCardError(f"Unknown suit in card {text!r}")
    return Card(rank, suit)


def to_cards(cards: Iterable) -> List[Card]:
    """Check every item names one of the 52 cards and return them as Cards."""
    converted = []
    for card in cards:
        try:
            rank, suit = card
        except (TypeError, ValueError):
            raise InvalidCardError(f"Not a (rank, suit) pair: {card!r}") from None
        if not isinstance(rank, int) or rank not in RANKS or suit not in SUITS:
            raise InvalidCardError(f"Not a playing card: {card!r}")
        converted.append(Card(rank, suit))
    return converted


def create_shuffled_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create and return a shuffled list of all 52 cards."""
    cards = make_deck()
    (rng or random).shuffle(cards)
    return cards


class Deck:
    """A single table's deck.

    Cards are dealt from the end of ``_remaining`` and moved to ``_dealt`` so
    that the two always partition the 52 cards. Running out is not an
    error: ``deal_one`` returns ``None`` and ``deal`` returns a short list.

    ``rng`` may be any object with a ``shuffle(list)`` method; when omitted
    a private ``random.Random(seed)`` is used.
    """

    def __init__(self, rng=None, seed: Optional[int] = None):
        self._rng = rng if rng is not None else random.Random(seed)
        self._remaining: List[Card] = []
        self._dealt: List[Card] = []
        self.reset_and_shuffle()

    def reset_and_shuffle(self) -> None:
        """Gather every card back and shuffle a fresh 52-card order."""
        self._remaining = make_deck()
        self._dealt = []
        self._rng.shuffle(self._remaining)
        logging.debug("Deck reset and shuffled")

    def deal_one(self) -> Optional[Card]:
        """Deal the next card, or None if the deck is exhausted."""
        if not self._remaining:
            logging.debug("deal_one called on an empty deck")
            return None
        card = self._remaining.pop()
        self._dealt.append(card)
        return card

    def deal(self, n: int) -> List[Card]:
        """Deal up to ``n`` cards in dealing order."""
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")

        dealt = []
        for _ in range(n):
            card = self.deal_one()
            if card is None:
                logging.debug(f"Deck exhausted after {len(dealt)} of {n} cards")
                break
            dealt.append(card)
        return dealt

    def burn(self) -> Optional[Card]:
        """Discard the top card face down."""
        return self.deal_one()

    @property
    def remaining(self) -> int:
        return len(self._remaining)

    @property
    def dealt(self) -> List[Card]:
        return list(self._dealt)

    def __len__(self) -> int:
        return len(self._remaining)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._remaining)}, dealt={len(self._dealt)})"
