import logging

import pytest

from holdem.hand_evaluation import HandRank
from holdem.showdown_engine import ShowdownEngine


def test_showdown_single_winner(cards):
    showdown = ShowdownEngine(cards("10h", "Jh", "Qh", "3c", "4d"))

    result = showdown.evaluate({
        "alice": cards("Ah", "Kh"),
        "bob": cards("Kd", "2c"),
        "carol": cards("9s", "9d"),
    })

    assert result["winners"] == ["alice"]
    assert result["results"]["alice"].rank_enum == HandRank.ROYAL_FLUSH
    assert set(result["results"]) == {"alice", "bob", "carol"}
    assert result["ranking"] == [["alice"], ["carol"], ["bob"]]


def test_showdown_split_pot(cards):
    showdown = ShowdownEngine(cards("2h", "3d", "4s", "9c", "Kh"))

    result = showdown.evaluate({
        "alice": cards("As", "Ac"),
        "bob": cards("Ad", "Ah"),
        "carol": cards("8s", "7d"),
    })

    assert sorted(result["winners"]) == ["alice", "bob"]
    assert result["ranking"][-1] == ["carol"]


def test_showdown_before_the_flop(cards):
    showdown = ShowdownEngine()
    result = showdown.evaluate({"alice": cards("Qs", "Qd"), "bob": cards("As", "Kd")})
    assert result["winners"] == ["alice"]


def test_showdown_logs_winner(cards, caplog):
    showdown = ShowdownEngine(cards("2h", "3d", "4s", "9c", "Kh"))
    with caplog.at_level(logging.INFO):
        showdown.evaluate({"alice": cards("Ks", "Kc"), "bob": cards("8s", "7d")})
    assert "Showdown winners: alice" in caplog.text


def test_showdown_requires_contenders():
    with pytest.raises(ValueError):
        ShowdownEngine().evaluate({})
