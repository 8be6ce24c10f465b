"""
Terminal rendering helpers for cards.
"""

from .colors import Colors, paint
from .cards import card_art, card_label, cards_horizontal, SUIT_SYMBOLS, SUIT_COLORS

__all__ = ['Colors', 'paint', 'card_art', 'card_label', 'cards_horizontal', 'SUIT_SYMBOLS', 'SUIT_COLORS']
