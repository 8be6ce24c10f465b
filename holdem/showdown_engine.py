"""
Showdown ranking for the Hold'em rules core.

Takes the players still in the hand and orders them by their best hand
against a shared board. Chip distribution is left to the caller.
"""

import functools
import logging
from typing import Any, Dict, List, Mapping, Sequence

from holdem.deck import Card, card_str
from holdem.hand_evaluation import HandEvaluationResult, compare_hands, evaluate_hand


class ShowdownEngine:
    """Evaluates contenders' hands against a board and picks the winners."""

    def __init__(self, community: Sequence[Card] = ()):
        self.community = list(community)

    def evaluate(self, players: Mapping[str, Sequence[Card]]) -> Dict[str, Any]:
        """Evaluate every contender and rank them best first.

        ``players`` maps a player name to their hole cards; folded players
        should simply be left out. Returns a dict with ``winners`` (names
        sharing the best hand), ``results`` (name -> HandEvaluationResult)
        and ``ranking`` (list of tied groups, best group first).
        """
        if not players:
            raise ValueError("Showdown needs at least one contender")

        results: Dict[str, HandEvaluationResult] = {}
        for name, hole in players.items():
            results[name] = evaluate_hand(hole, self.community)
            logging.debug(
                f"{name}: {' '.join(card_str(c) for c in hole)} -> {results[name].rank_name}"
            )

        ranking = self.rank(results)
        winners = ranking[0]
        logging.info(f"Showdown winners: {', '.join(winners)} with {results[winners[0]].rank_name}")

        return {
            'winners': winners,
            'results': results,
            'ranking': ranking,
        }

    @staticmethod
    def rank(results: Mapping[str, HandEvaluationResult]) -> List[List[str]]:
        """Group names by equal hands, strongest group first."""
        by_strength = functools.cmp_to_key(
            lambda a, b: compare_hands(results[b], results[a])
        )
        ordered = sorted(results, key=by_strength)

        ranking: List[List[str]] = []
        for name in ordered:
            if ranking and compare_hands(results[ranking[-1][0]], results[name]) == 0:
                ranking[-1].append(name)
            else:
                ranking.append([name])
        return ranking
