"""
Preflop starting-hand strength heuristic.

Scores two hole cards on a 0-1 scale with no board information. Pairs
start at 0.5 (deuces) and climb to 1.0 (aces); unpaired hands are built
from their two ranks plus bonuses for sharing a suit and for being close
enough together to make straights.
"""

from typing import Sequence

from holdem.deck import Card, to_cards
from holdem.exceptions import InvalidCardError, InvalidHandError

PAIR_BASE = 0.5
PAIR_SPAN = 0.5
HIGH_CARD_WEIGHT = 0.40
LOW_CARD_WEIGHT = 0.15
SUITED_BONUS = 0.10
CONNECTOR_BONUS = 0.08
GAP_PENALTY = 0.02
# kept below one low-card rank step (0.15 / 12) so A6 still beats A5
WHEEL_BONUS = 0.01


def _rank_fraction(rank: int) -> float:
    return (rank - 2) / 12


def _connectivity(gap: int) -> float:
    """Bonus for rank distance: connectors best, five or more apart nothing."""
    return max(0.0, CONNECTOR_BONUS - GAP_PENALTY * (gap - 1))


def get_preflop_strength(hole: Sequence[Card]) -> float:
    """Return a heuristic strength in [0.0, 1.0] for exactly two hole cards."""
    try:
        cards = to_cards(hole)
    except InvalidCardError as e:
        raise InvalidHandError(f"Invalid hole cards: {e}") from e
    if len(cards) != 2:
        raise InvalidHandError(f"Preflop strength needs exactly 2 cards, got {len(cards)}")

    (r1, s1), (r2, s2) = cards
    if (r1, s1) == (r2, s2):
        raise InvalidHandError(f"Duplicate hole card: {(r1, s1)!r}")

    high, low = max(r1, r2), min(r1, r2)

    if high == low:
        score = PAIR_BASE + PAIR_SPAN * _rank_fraction(high)
    else:
        score = HIGH_CARD_WEIGHT * _rank_fraction(high) + LOW_CARD_WEIGHT * _rank_fraction(low)
        if s1 == s2:
            score += SUITED_BONUS
        score += _connectivity(high - low)
        if high == 14 and low <= 5:
            # the ace also plays low for A-2-3-4-5
            score += WHEEL_BONUS

    return round(min(max(score, 0.0), 1.0), 4)
