"""Tests for Deck"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
from collections import Counter

import pytest

from duel.deck import DECK_PROFILES, Deck, build_cards
from duel.errors import InvalidConfigError
from duel.spells import SPELLS


def test_standard_profile_has_two_of_each_spell():
    cards = build_cards("standard")
    assert len(cards) == 2 * len(SPELLS)
    assert Counter(c.name for c in cards) == {s.name: 2 for s in SPELLS}


def test_every_profile_uses_known_spells():
    names = {s.name for s in SPELLS}
    for profile, counts in DECK_PROFILES.items():
        assert set(counts) <= names, profile
        assert all(n > 0 for n in counts.values()), profile


def test_unknown_profile():
    with pytest.raises(InvalidConfigError):
        build_cards("chaos")


def test_draw_until_exhausted():
    deck = Deck(build_cards("standard"), rng=random.Random(1))
    total = len(deck)
    drawn = [deck.draw() for _ in range(total)]
    assert all(card is not None for card in drawn)
    assert len(deck) == 0
    assert deck.is_empty
    assert deck.draw() is None
    assert deck.draw() is None
    assert deck.drawn == total


def test_shuffle_keeps_the_multiset():
    deck = Deck.from_profiles("standard", "arcane", rng=random.Random(5))
    expected = Counter(c.name for c in build_cards("standard") + build_cards("arcane"))
    assert Counter(c.name for c in deck) == expected


def test_same_seed_same_order():
    first = Deck.from_profiles("standard", rng=random.Random(42))
    second = Deck.from_profiles("standard", rng=random.Random(42))
    assert [c.name for c in first.peek_remaining()] == [c.name for c in second.peek_remaining()]


def test_peek_does_not_move_the_cursor():
    deck = Deck.from_profiles("standard", rng=random.Random(3))
    upcoming = deck.peek_remaining()
    assert deck.draw() == upcoming[0]
    assert deck.peek_remaining() == upcoming[1:]
