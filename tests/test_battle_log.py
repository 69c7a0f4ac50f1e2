"""Tests for the battle log, the narrator payload and the narrator client"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json
from types import SimpleNamespace

import pytest

from duel.battle_log import BattleLog, to_narrator_payload
from duel.controller import BattleController
from duel.models import EnemyConfig, PlayerConfig
from duel.narrator import DuelNarration, narrate_duel, parse_narration
from duel.spells import make_card


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def finished_battle() -> BattleController:
    battle = BattleController(seed=5)
    battle.new_battle(PlayerConfig(name="Merlin"), EnemyConfig(name="Vexor"))
    battle.enemy.hp = 20
    battle.player.hand = [make_card("Lightning")]
    battle.player.mana = 5
    battle.cast_spell("Lightning")
    return battle


class FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(content):
    completions = FakeCompletions(content)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


NARRATION = {
    "narration": "Lightning split the sky and Vexor fell.",
    "title": "The Sky Splits",
    "key_moment": "Merlin's Lightning lands.",
    "tone": "triumphant",
}


# ---------------------------------------------------------------------------
# BattleLog
# ---------------------------------------------------------------------------

def test_log_is_append_only_text():
    log = BattleLog()
    log.append("Game started.")
    mark = log.mark()
    log.append("Player's turn.")
    assert len(log) == 2
    assert log.lines == ("Game started.", "Player's turn.")
    assert log.since(mark) == ["Player's turn."]
    assert log.text() == "Game started.\nPlayer's turn.\n"


def test_log_keeps_earlier_battles():
    battle = finished_battle()
    first_battle = len(battle.battle_log)
    battle.new_battle(PlayerConfig(name="Merlin"), EnemyConfig(name="Vexor"))
    assert len(battle.battle_log) > first_battle
    assert battle.battle_lines[0] == "Game started."
    assert battle.log_text.count("Game started.") == 2


# ---------------------------------------------------------------------------
# Narrator payload
# ---------------------------------------------------------------------------

def test_payload_for_finished_duel():
    battle = finished_battle()
    payload = to_narrator_payload(battle)
    assert payload["winner"] == "Merlin"
    assert payload["state"] == "game_over"
    assert payload["enemy"]["hp"] == 0
    assert payload["difficulty"] == 2
    assert payload["win_streak"] == 1
    assert "Player played: Lightning" in payload["events"]
    assert payload["outcome"].startswith("Merlin struck down Vexor")
    json.dumps(payload)


def test_payload_mid_duel():
    battle = BattleController(seed=5)
    battle.new_battle(PlayerConfig(name="Merlin"), EnemyConfig(name="Vexor"))
    payload = to_narrator_payload(battle)
    assert payload["winner"] is None
    assert payload["state"] == "player_turn"
    assert payload["player"]["cards_in_hand"] == 5


def test_payload_needs_a_battle():
    with pytest.raises(ValueError):
        to_narrator_payload(BattleController())


# ---------------------------------------------------------------------------
# Narrator
# ---------------------------------------------------------------------------

def test_narrate_duel_with_fake_client():
    payload = to_narrator_payload(finished_battle())
    client, completions = fake_client(json.dumps(NARRATION))

    narration = narrate_duel(payload, model="test-model", client=client)

    assert isinstance(narration, DuelNarration)
    assert narration.title == "The Sky Splits"
    assert narration.tone == "triumphant"
    assert narration.raw_payload is payload
    call = completions.calls[0]
    assert call["model"] == "test-model"
    assert call["messages"][0]["role"] == "system"
    assert "Vexor" in call["messages"][1]["content"]


def test_parse_narration_tolerates_wrapping():
    wrapped = "Here you go:\n```json\n" + json.dumps(NARRATION) + "\n```"
    assert parse_narration(wrapped)["title"] == "The Sky Splits"


def test_parse_narration_rejects_garbage():
    with pytest.raises(ValueError):
        parse_narration("the wizards fought bravely")
