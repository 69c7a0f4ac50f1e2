"""
Wizard Duel — Spell Catalogue
Each spell is an immutable record carrying its effect function. The effect
receives (caster, target, ctx) and mutates only those two actors.

Damage pipeline, in order:
    1. Weaken on the caster cuts outgoing spell damage by WEAKEN_PERCENT
       (rounded down, minimum 1).
    2. A shield on the target absorbs what it can.
    3. The rest comes off the target's HP, clamped at 0.
Healing always happens after damage and is clamped at max HP.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

from . import effects
from .actor import Actor
from .effects import StatusEffect
from .errors import ContractViolation
from .models import EffectKind


WEAKEN_PERCENT = 25


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass
class CastContext:
    """What a spell effect may touch besides the two actors: the battle log."""
    log: Callable[[str], None]


SpellEffect = Callable[[Actor, Actor, CastContext], None]


@dataclass(frozen=True)
class Spell:
    name: str
    mana_cost: int
    effect: SpellEffect
    damage: int = 0                        # nominal damage to the target
    heal: int = 0                          # immediate healing of the caster
    applies: Optional[EffectKind] = None   # status effect this spell attaches
    description: str = ""

    @property
    def afflicts_target(self) -> bool:
        return self.applies is not None and self.applies not in SELF_EFFECTS

    def cast(self, caster: Actor, target: Actor, ctx: CastContext) -> None:
        if caster is None or target is None:
            raise ContractViolation(f"{self.name} needs both a caster and a target")
        self.effect(caster, target, ctx)


@dataclass(frozen=True)
class SpellCard:
    name: str
    spell: Spell

    @property
    def mana_cost(self) -> int:
        return self.spell.mana_cost

    def __repr__(self):
        return f"SpellCard({self.name}, cost={self.mana_cost})"


SELF_EFFECTS = {EffectKind.SHIELD, EffectKind.REGENERATION}


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

def outgoing_damage(caster: Actor, amount: int) -> int:
    """Nominal spell damage after the caster's own Weaken, if any."""
    if amount <= 0 or not caster.is_weakened:
        return amount
    return max(1, amount * (100 - WEAKEN_PERCENT) // 100)


def deal_damage(caster: Actor, target: Actor, amount: int, ctx: CastContext) -> int:
    """Push spell damage through the pipeline. Returns the HP the target lost."""
    amount = outgoing_damage(caster, amount)
    shield_before = target.shield
    lost = target.suffer(amount)
    absorbed = shield_before - target.shield
    if absorbed:
        ctx.log(f"{target.name}'s shield absorbs {absorbed} damage.")
    ctx.log(f"{target.name} takes {lost} damage.")
    return lost


def restore(actor: Actor, amount: int, ctx: CastContext) -> int:
    healed = actor.heal(amount)
    ctx.log(f"{actor.name} heals {healed} HP.")
    return healed


def afflict(actor: Actor, effect: StatusEffect, ctx: CastContext) -> None:
    refreshed = actor.apply_effect(effect)
    verb = "refreshed on" if refreshed else "applied to"
    ctx.log(f"{effect.kind.value} {verb} {actor.name}.")


# ---------------------------------------------------------------------------
# Effect functions
# ---------------------------------------------------------------------------

def _fireball(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 10, ctx)
    afflict(target, effects.burn(3), ctx)


def _ice_blast(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 15, ctx)
    afflict(target, effects.freeze(2), ctx)


def _lightning(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 25, ctx)


def _heal(caster: Actor, target: Actor, ctx: CastContext) -> None:
    restore(caster, 20, ctx)


def _poison_cloud(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 5, ctx)
    afflict(target, effects.poison(4), ctx)


def _drain(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 12, ctx)
    restore(caster, 12, ctx)


def _shield(caster: Actor, target: Actor, ctx: CastContext) -> None:
    afflict(caster, effects.shield(15), ctx)


def _meteor(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 35, ctx)
    afflict(target, effects.burn(2), ctx)


def _regeneration(caster: Actor, target: Actor, ctx: CastContext) -> None:
    afflict(caster, effects.regeneration(4), ctx)


def _thunderbolt(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 18, ctx)
    afflict(target, effects.stun(1), ctx)


def _curse(caster: Actor, target: Actor, ctx: CastContext) -> None:
    deal_damage(caster, target, 8, ctx)
    afflict(target, effects.weaken(3), ctx)


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

SPELLS: list[Spell] = [
    Spell("Fireball", 3, _fireball, damage=10, applies=EffectKind.BURN,
          description="10 damage and Burn for 3 turns"),
    Spell("Ice Blast", 4, _ice_blast, damage=15, applies=EffectKind.FREEZE,
          description="15 damage and Freeze for 2 turns"),
    Spell("Lightning", 5, _lightning, damage=25,
          description="25 damage"),
    Spell("Heal", 3, _heal, heal=20,
          description="Restore 20 HP"),
    Spell("Poison Cloud", 3, _poison_cloud, damage=5, applies=EffectKind.POISON,
          description="5 damage and Poison for 4 turns"),
    Spell("Drain", 4, _drain, damage=12, heal=12,
          description="12 damage, restore 12 HP"),
    Spell("Shield", 3, _shield, applies=EffectKind.SHIELD,
          description="Absorb the next 15 damage"),
    Spell("Meteor", 7, _meteor, damage=35, applies=EffectKind.BURN,
          description="35 damage and Burn for 2 turns"),
    Spell("Regeneration", 4, _regeneration, applies=EffectKind.REGENERATION,
          description="Restore 5 HP per turn for 4 turns"),
    Spell("Thunderbolt", 5, _thunderbolt, damage=18, applies=EffectKind.STUN,
          description="18 damage and Stun for 1 turn"),
    Spell("Curse", 3, _curse, damage=8, applies=EffectKind.WEAKEN,
          description="8 damage and Weaken for 3 turns"),
]

# Quick lookup by name
SPELL_REGISTRY: dict[str, Spell] = {s.name: s for s in SPELLS}


def make_card(name: str) -> SpellCard:
    spell = SPELL_REGISTRY.get(name)
    if spell is None:
        raise KeyError(f"unknown spell {name!r}")
    return SpellCard(name=spell.name, spell=spell)
