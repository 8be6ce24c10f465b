#!/usr/bin/env python3
"""
Command line table for holdem-rules.

Deals one hand of Hold'em to a table of seats, then prints every seat's
starting hand strength, their best hand on the full board and the winners.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from holdem.config import MAX_PLAYERS, MIN_PLAYERS, load_settings
from holdem.deck import Card, Deck
from holdem.exceptions import ConfigError
from holdem.preflop import get_preflop_strength
from holdem.showdown_engine import ShowdownEngine
from holdem.ui import Colors, card_label, cards_horizontal, paint
from holdem.version import get_version_info


def deal_table(deck: Deck, players: List[str]) -> Dict[str, List[Card]]:
    """Deal two hole cards to each seat, one at a time around the table."""
    hands: Dict[str, List[Card]] = {name: [] for name in players}
    for _ in range(2):
        for name in players:
            hands[name].append(deck.deal_one())
    return hands


def deal_board(deck: Deck) -> List[Card]:
    """Burn and turn the flop, turn and river."""
    board: List[Card] = []
    for count in (3, 1, 1):
        deck.burn()
        board.extend(deck.deal(count))
    return board


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deal and evaluate one hand of Texas Hold'em")
    parser.add_argument("--players", default=settings.players, type=int,
                        help=f"Number of seats to deal ({MIN_PLAYERS}-{MAX_PLAYERS})")
    parser.add_argument("--seed", default=settings.seed, type=int, help="Seed for a reproducible shuffle")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--art", action="store_true", help="Draw the board as ASCII art cards")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    info = get_version_info()
    parser.add_argument("--version", action="version", version=f"%(prog)s {info['version']} ({info['build_date']})")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main launcher."""
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=getattr(logging, settings.log_level))

    if not MIN_PLAYERS <= args.players <= MAX_PLAYERS:
        parser.error(f"--players must be between {MIN_PLAYERS} and {MAX_PLAYERS}")

    color = settings.color and not args.no_color
    names = [f"Seat {i + 1}" for i in range(args.players)]

    deck = Deck(seed=args.seed)
    hands = deal_table(deck, names)
    board = deal_board(deck)
    logging.debug(f"Dealt {len(deck.dealt)} cards, {deck.remaining} left in the deck")

    print(paint("Board", Colors.BOLD, Colors.YELLOW, enabled=color))
    if args.art:
        print(cards_horizontal(board, color=color))
    else:
        print("  " + " ".join(card_label(c, color=color) for c in board))
    print()

    showdown = ShowdownEngine(board)
    result = showdown.evaluate(hands)

    for name in names:
        hole = hands[name]
        strength = get_preflop_strength(hole)
        labels = " ".join(card_label(c, color=color) for c in hole)
        hand = result['results'][name]
        line = f"{name:<8} {labels}  preflop {strength:.2f}  {hand.rank_name}"
        if name in result['winners']:
            line = paint(line + "  <- wins", Colors.GREEN, enabled=color)
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
