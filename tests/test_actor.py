"""Tests for Actor"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from duel.actor import HAND_LIMIT, Actor
from duel.models import PlayerConfig
from duel.spells import make_card


def test_actor_defaults():
    actor = Actor("Merlin")
    assert actor.hp == 100
    assert actor.max_hp == 100
    assert actor.mana == 0
    assert actor.hand == []
    assert actor.shield == 0
    assert actor.is_alive


def test_hp_is_clamped_on_creation():
    assert Actor("Merlin", max_hp=50, hp=80).hp == 50
    assert Actor("Merlin", hp=-5).hp == 0


def test_max_hp_must_be_positive():
    with pytest.raises(ValueError):
        Actor("Merlin", max_hp=0)


def test_from_config():
    config = PlayerConfig(name="Merlin", max_hp=80, starting_mana=3, appearance={"robe": "blue"})
    actor = Actor.from_config(config, is_player=True)
    assert actor.name == "Merlin"
    assert actor.hp == 80
    assert actor.mana == 3
    assert actor.is_player
    assert actor.label == "Player"
    assert actor.appearance == {"robe": "blue"}


def test_suffer_never_goes_below_zero():
    actor = Actor("Vexor", hp=10)
    lost = actor.suffer(25)
    assert lost == 10
    assert actor.hp == 0
    assert not actor.is_alive


def test_heal_is_clamped():
    actor = Actor("Merlin", hp=90)
    assert actor.heal(20) == 10
    assert actor.hp == 100


def test_mana_helpers():
    actor = Actor("Merlin", mana=2)
    assert actor.drain_mana(5) == 2
    assert actor.mana == 0
    actor.gain_mana(4)
    actor.spend_mana(3)
    assert actor.mana == 1
    with pytest.raises(ValueError):
        actor.spend_mana(2)


def test_hand_limit():
    actor = Actor("Merlin")
    for _ in range(HAND_LIMIT):
        assert actor.receive(make_card("Fireball"))
    assert actor.hand_full
    assert actor.receive(make_card("Heal")) is False
    assert len(actor.hand) == HAND_LIMIT


def test_find_and_discard_card():
    actor = Actor("Merlin", hand=[make_card("Heal"), make_card("Drain")])
    card = actor.find_card("Drain")
    assert card.name == "Drain"
    actor.discard(card)
    assert [c.name for c in actor.hand] == ["Heal"]
    assert actor.find_card("Meteor") is None
