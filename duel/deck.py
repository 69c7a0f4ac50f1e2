"""
Wizard Duel — Deck
One shared, shuffled draw pile per battle. The cursor only moves forward;
there is no reshuffle, so an exhausted deck simply yields nothing.
"""

from __future__ import annotations
import random
from typing import Iterable, Iterator, Optional

from .errors import InvalidConfigError
from .spells import SPELLS, SpellCard, make_card


# Card counts per deck profile. The battle deck is the player's profile
# followed by the enemy's, shuffled together.
DECK_PROFILES: dict[str, dict[str, int]] = {
    "standard": {spell.name: 2 for spell in SPELLS},
    "aggressive": {
        "Fireball": 4, "Lightning": 3, "Meteor": 2, "Thunderbolt": 3,
        "Ice Blast": 2, "Poison Cloud": 2, "Curse": 2, "Drain": 2,
        "Heal": 1, "Shield": 1, "Regeneration": 1,
    },
    "arcane": {
        "Shield": 3, "Heal": 3, "Regeneration": 3, "Curse": 3, "Drain": 3,
        "Poison Cloud": 2, "Ice Blast": 2, "Fireball": 2, "Lightning": 1,
        "Thunderbolt": 1, "Meteor": 1,
    },
}


def build_cards(profile: str) -> list[SpellCard]:
    """Expand a profile's card counts into a list of cards, in catalogue order."""
    counts = DECK_PROFILES.get(profile)
    if counts is None:
        raise InvalidConfigError(
            f"unknown deck profile {profile!r} (expected one of {sorted(DECK_PROFILES)})"
        )
    return [make_card(name) for name, count in counts.items() for _ in range(count)]


class Deck:
    def __init__(self, cards: Iterable[SpellCard], rng: Optional[random.Random] = None):
        self._cards = list(cards)
        (rng or random.Random()).shuffle(self._cards)
        self._cursor = 0

    @classmethod
    def from_profiles(cls, *profiles: str, rng: Optional[random.Random] = None) -> Deck:
        cards = []
        for profile in profiles:
            cards.extend(build_cards(profile))
        return cls(cards, rng=rng)

    def __len__(self):
        return len(self._cards) - self._cursor

    def __iter__(self) -> Iterator[SpellCard]:
        # Iterating draws; the cards are gone afterwards.
        while True:
            card = self.draw()
            if card is None:
                return
            yield card

    @property
    def is_empty(self) -> bool:
        return self._cursor >= len(self._cards)

    @property
    def drawn(self) -> int:
        return self._cursor

    def draw(self) -> Optional[SpellCard]:
        if self.is_empty:
            return None
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def peek_remaining(self) -> tuple[SpellCard, ...]:
        """Cards still to come, in draw order. Read-only view for tests and tooling."""
        return tuple(self._cards[self._cursor:])
