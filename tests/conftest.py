import random
from typing import Callable, List

import pytest

from holdem.deck import Card, Deck, parse_card


@pytest.fixture
def cards() -> Callable[..., List[Card]]:
    """Factory turning card strings like "As" or "10h" into Card objects."""

    def _factory(*cardspecs: str) -> List[Card]:
        return [parse_card(spec) for spec in cardspecs]

    return _factory


@pytest.fixture
def seeded_deck() -> Deck:
    """Deck with a fixed shuffle so dealing order is repeatable."""
    return Deck(rng=random.Random(1234))


@pytest.fixture(autouse=True)
def clean_holdem_env(monkeypatch, tmp_path):
    """Keep HOLDEM_* settings and stray .env files out of every test.

    setenv before delenv makes monkeypatch remember the variable as unset,
    so values exported by load_dotenv are removed again at teardown.
    """
    for name in ("HOLDEM_SEED", "HOLDEM_PLAYERS", "HOLDEM_LOG_LEVEL", "HOLDEM_COLOR"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
