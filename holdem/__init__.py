"""
holdem-rules: deck and hand evaluation core for Texas Hold'em.
"""

from holdem.deck import Card, Deck, card_str, make_deck, parse_card
from holdem.exceptions import ConfigError, HoldemError, InvalidCardError, InvalidHandError
from holdem.hand_evaluation import (
    HandEvaluationResult,
    HandEvaluator,
    HandRank,
    compare_hands,
    evaluate_hand,
    hand_description,
)
from holdem.preflop import get_preflop_strength
from holdem.showdown_engine import ShowdownEngine
from holdem.version import VERSION

__all__ = [
    'Card',
    'Deck',
    'card_str',
    'make_deck',
    'parse_card',
    'HandRank',
    'HandEvaluationResult',
    'HandEvaluator',
    'evaluate_hand',
    'compare_hands',
    'hand_description',
    'get_preflop_strength',
    'ShowdownEngine',
    'HoldemError',
    'InvalidCardError',
    'InvalidHandError',
    'ConfigError',
    'VERSION',
]
