"""
ANSI color codes for rendering cards in a terminal.
"""


class Colors:
    """ANSI color codes for terminal formatting."""
    RED = '\033[31m'
    BLACK = '\033[30m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    WHITE = '\033[37m'
    BOLD = '\033[1m'
    RESET = '\033[0m'
    BG_WHITE = '\033[47m'


def paint(text: str, *codes: str, enabled: bool = True) -> str:
    """Wrap text in the given codes, or return it untouched when disabled."""
    if not enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"
