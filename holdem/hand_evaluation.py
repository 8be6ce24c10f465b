"""
Hand evaluation for the Hold'em rules core.

Every 5-card subset of a player's hole and community cards is classified,
and the best ``(category, tiebreakers)`` pair wins. Python's tuple and
list ordering does the comparison work.
"""

import itertools
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Tuple

from holdem.deck import Card, to_cards
from holdem.exceptions import InvalidHandError
from holdem.preflop import get_preflop_strength

MAX_CARDS = 7


class HandRank(IntEnum):
    """Hand categories, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return HAND_RANK_LABELS[self]


HAND_RANK_LABELS = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
}


@dataclass(frozen=True)
class HandEvaluationResult:
    """The best hand found for one player."""

    rank_enum: HandRank
    rank_name: str
    kickers: Tuple[int, ...]
    cards: Tuple[Card, ...] = ()

    @property
    def score(self) -> Tuple[int, Tuple[int, ...]]:
        return (int(self.rank_enum), self.kickers)


def _is_straight(ranks: List[int]) -> Tuple[bool, List[int]]:
    """Check if ranks form a straight. Returns (is_straight, [high_card])."""
    rset = sorted(set(ranks), reverse=True)
    # account for wheel (A-2-3-4-5)
    if 14 in rset:
        rset.append(1)

    consec = 1
    best_high = None
    for i in range(len(rset) - 1):
        if rset[i] - 1 == rset[i + 1]:
            consec += 1
            if consec >= 5 and best_high is None:
                best_high = rset[i - 3]
        else:
            consec = 1
    if best_high is None:
        return False, []
    return True, [best_high]


def evaluate_5cards(cards: Sequence[Card]) -> Tuple[HandRank, List[int]]:
    """Classify up to 5 cards and return (category, tiebreaker ranks).

    With fewer than five cards only the rank-count categories can apply,
    since flushes and straights need five cards.
    """
    ranks = sorted([r for r, _ in cards], reverse=True)
    suits = [s for _, s in cards]

    counts = Counter(ranks)
    groups = sorted(((cnt, r) for r, cnt in counts.items()), reverse=True)

    full_five = len(cards) == 5
    is_flush = full_five and len(set(suits)) == 1
    is_str, str_high = _is_straight(ranks) if full_five else (False, [])

    if is_flush and is_str:
        if str_high[0] == 14:
            return HandRank.ROYAL_FLUSH, str_high
        return HandRank.STRAIGHT_FLUSH, str_high

    top_count, top_rank = groups[0]

    if top_count == 4:
        kicker = [r for r in ranks if r != top_rank][:1]
        return HandRank.FOUR_OF_A_KIND, [top_rank] + kicker

    if top_count == 3 and len(groups) > 1 and groups[1][0] >= 2:
        return HandRank.FULL_HOUSE, [top_rank, groups[1][1]]

    if is_flush:
        return HandRank.FLUSH, ranks

    if is_str:
        return HandRank.STRAIGHT, str_high

    if top_count == 3:
        kickers = [r for r in ranks if r != top_rank][:2]
        return HandRank.THREE_OF_A_KIND, [top_rank] + kickers

    if top_count == 2 and len(groups) > 1 and groups[1][0] == 2:
        high_pair, low_pair = top_rank, groups[1][1]
        kicker = [r for r in ranks if r not in (high_pair, low_pair)][:1]
        return HandRank.TWO_PAIR, [high_pair, low_pair] + kicker

    if top_count == 2:
        kickers = [r for r in ranks if r != top_rank][:3]
        return HandRank.ONE_PAIR, [top_rank] + kickers

    return HandRank.HIGH_CARD, ranks[:5]


def best_hand(cards: Sequence[Card]) -> Tuple[HandRank, List[int], Tuple[Card, ...]]:
    """Find the best 5-card combination among up to 7 cards.

    Cards are put in a canonical order first so that equal-scoring
    combinations always resolve to the same cards.
    """
    ordered = sorted(cards, key=lambda c: (-c[0], c[1]))
    if len(ordered) <= 5:
        rank, tiebreakers = evaluate_5cards(ordered)
        return rank, tiebreakers, tuple(ordered)

    best = None
    best_combo: Tuple[Card, ...] = ()
    for combo in itertools.combinations(ordered, 5):
        val = evaluate_5cards(combo)
        if best is None or val > best:
            best = val
            best_combo = combo
    return best[0], best[1], best_combo


RANK_WORDS = {11: 'Jack', 12: 'Queen', 13: 'King', 14: 'Ace'}


def _word(rank: int) -> str:
    return RANK_WORDS.get(rank, str(rank))


def _plural(rank: int) -> str:
    return f"{_word(rank)}s"


def hand_description(hand_rank: HandRank, tiebreakers: Sequence[int]) -> str:
    """Build the display label for a category, e.g. "Full House, Kings over 10s"."""
    hand_rank = HandRank(hand_rank)
    label = hand_rank.label
    top = tiebreakers[0]

    if hand_rank == HandRank.ROYAL_FLUSH:
        return label
    if hand_rank in (HandRank.STRAIGHT_FLUSH, HandRank.FLUSH):
        return f"{label}, {_word(top)} high"
    if hand_rank == HandRank.STRAIGHT:
        suffix = " (Wheel)" if top == 5 else ""
        return f"{label}, {_word(top)} high{suffix}"
    if hand_rank == HandRank.FULL_HOUSE:
        return f"{label}, {_plural(top)} over {_plural(tiebreakers[1])}"
    if hand_rank == HandRank.TWO_PAIR:
        return f"{label}, {_plural(top)} and {_plural(tiebreakers[1])}"
    if hand_rank == HandRank.HIGH_CARD:
        return f"{label}, {_word(top)}"
    # pair, trips and quads name the grouped rank
    return f"{label}, {_plural(top)}"


def evaluate_hand(hole: Sequence[Card], community: Sequence[Card] = ()) -> HandEvaluationResult:
    """Evaluate a player's best hand from hole cards plus the board.

    Raises InvalidHandError when fewer than 2 hole cards are given, when
    more than 7 cards are given in total, or when a card appears twice.
    """
    hole_cards = to_cards(hole)
    board = to_cards(community)

    if len(hole_cards) < 2:
        raise InvalidHandError(f"Need at least 2 hole cards, got {len(hole_cards)}")

    cards = hole_cards + board
    if len(cards) > MAX_CARDS:
        raise InvalidHandError(f"Cannot evaluate {len(cards)} cards, at most {MAX_CARDS} allowed")
    if len(set(cards)) != len(cards):
        raise InvalidHandError(f"Duplicate cards in hand: {[str(c) for c in cards]}")

    rank, tiebreakers, chosen = best_hand(cards)
    return HandEvaluationResult(
        rank_enum=rank,
        rank_name=hand_description(rank, tiebreakers),
        kickers=tuple(tiebreakers),
        cards=tuple(chosen),
    )


def compare_hands(result1: HandEvaluationResult, result2: HandEvaluationResult) -> int:
    """Return 1 if result1 wins, -1 if result2 wins, 0 on an exact tie."""
    if result1.score > result2.score:
        return 1
    if result1.score < result2.score:
        return -1
    return 0


class HandEvaluator:
    """Stateless entry point for callers that prefer a single namespace."""

    evaluate_hand = staticmethod(evaluate_hand)
    compare_hands = staticmethod(compare_hands)
    get_preflop_strength = staticmethod(get_preflop_strength)
    hand_description = staticmethod(hand_description)
