"""
Card rendering for terminal output.
Short labels like ``A♠`` and 5-line ASCII art cards laid out side by side.
"""

from typing import List, Sequence

from holdem.deck import RANK_NAMES, Card
from .colors import Colors, paint


SUIT_SYMBOLS = {
    'h': '♥',  # hearts
    'd': '♦',  # diamonds
    'c': '♣',  # clubs
    's': '♠'   # spades
}

SUIT_COLORS = {
    'h': Colors.RED,
    'd': Colors.RED,
    'c': Colors.BLACK,
    's': Colors.BLACK
}

CARD_HEIGHT = 5


def _rank_text(rank: int) -> str:
    return RANK_NAMES.get(rank, str(rank))


def card_label(card: Card, color: bool = True) -> str:
    """Format a card as a short label such as ``10♥``."""
    r, s = card
    text = f"{_rank_text(r)}{SUIT_SYMBOLS.get(s, s)}"
    if SUIT_COLORS.get(s) == Colors.RED:
        return paint(text, Colors.BOLD, Colors.RED, enabled=color)
    return paint(text, Colors.BOLD, enabled=color)


def card_art(card: Card, color: bool = True) -> List[str]:
    """Format a single card as ASCII art lines."""
    r, s = card
    rank = _rank_text(r)
    symbol = SUIT_SYMBOLS.get(s, s)
    codes = (Colors.BOLD, Colors.BG_WHITE, SUIT_COLORS.get(s, Colors.WHITE))

    # rank is 1 or 2 characters, padded to keep every card 5 columns wide
    rank_left = f"{rank:<2}"
    rank_right = f"{rank:>2}"

    lines = [
        "╭───╮",
        f"│{rank_left}{symbol}│",
        "│   │",
        f"│{symbol}{rank_right}│",
        "╰───╯",
    ]
    return [paint(line, *codes, enabled=color) for line in lines]


def cards_horizontal(cards: Sequence[Card], color: bool = True) -> str:
    """Render multiple cards side-by-side horizontally."""
    if not cards:
        return ""

    card_lines = [card_art(card, color=color) for card in cards]

    result_lines = []
    for line_idx in range(CARD_HEIGHT):
        result_lines.append(" ".join(lines[line_idx] for lines in card_lines))
    return "\n".join(result_lines)
