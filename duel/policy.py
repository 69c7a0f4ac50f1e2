"""
Wizard Duel — Enemy Policy
Picks at most one spell per enemy turn. Deterministic for a given seed: the
random source is only consulted to break exact ties.

Priority:
    1. At LOW_HP_THRESHOLD or below, heal if a healing spell is castable.
    2. Finish the opponent if some castable spell is lethal.
    3. Otherwise prefer fresh status effects on the opponent, then raw
       damage, then the cheaper card.
"""

from __future__ import annotations
import random
from typing import Optional

from .actor import Actor
from .models import EffectKind
from .spells import Spell, SpellCard, outgoing_damage


LOW_HP_THRESHOLD = 30


def expected_damage(spell: Spell, caster: Actor, target: Actor) -> int:
    """Damage that would get past the target's shield now, after the caster's Weaken."""
    if spell.damage <= 0:
        return 0
    return max(0, outgoing_damage(caster, spell.damage) - target.shield)


class EnemyPolicy:
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def choose_spell(self, caster: Actor, opponent: Actor) -> Optional[str]:
        """Name of the card to cast from `caster`'s hand, or None to pass."""
        candidates = [c for c in caster.hand if c.mana_cost <= caster.mana]
        if not candidates:
            return None

        if caster.hp <= LOW_HP_THRESHOLD:
            healing = self._healing_cards(candidates, caster)
            if healing:
                return healing[0].name

        lethal = [
            c for c in candidates
            if c.spell.damage > 0
            and expected_damage(c.spell, caster, opponent) >= opponent.hp
        ]
        if lethal:
            return self._pick(lethal, lambda c: (expected_damage(c.spell, caster, opponent),
                                                 -c.mana_cost))

        def rank(card: SpellCard):
            spell = card.spell
            fresh_status = spell.afflicts_target and not opponent.has_effect(spell.applies)
            return (fresh_status, spell.damage, -spell.mana_cost)

        return self._pick(candidates, rank)

    def _healing_cards(self, candidates: list[SpellCard], caster: Actor) -> list[SpellCard]:
        healing = []
        for card in candidates:
            spell = card.spell
            if spell.heal > 0 and spell.damage == 0:
                healing.append(card)
            elif spell.applies == EffectKind.REGENERATION and not caster.has_effect(EffectKind.REGENERATION):
                healing.append(card)
        # Immediate healing first
        healing.sort(key=lambda c: (-c.spell.heal, c.mana_cost, c.name))
        return healing

    def _pick(self, cards: list[SpellCard], key) -> str:
        best = max(key(c) for c in cards)
        tied = sorted({c.name for c in cards if key(c) == best})
        if len(tied) == 1:
            return tied[0]
        return self.rng.choice(tied)
