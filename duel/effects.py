"""
Wizard Duel — Status Effects
A status effect is a small tagged record attached to an actor. Each kind has
a tick function that runs at the start of the afflicted actor's turn.
Shields do not tick; they are drained by the damage pipeline instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .models import EffectKind

if TYPE_CHECKING:
    from .actor import Actor


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BURN_DAMAGE = 3
POISON_DAMAGE = 4
REGENERATION_HEAL = 5
FREEZE_MANA_DRAIN = 1
STUN_MANA_DRAIN = 1

DEFAULT_TURNS: dict[EffectKind, int] = {
    EffectKind.BURN: 3,
    EffectKind.FREEZE: 2,
    EffectKind.POISON: 4,
    EffectKind.REGENERATION: 4,
    EffectKind.STUN: 1,
    EffectKind.WEAKEN: 3,
}


# ---------------------------------------------------------------------------
# Status effect record
# ---------------------------------------------------------------------------

@dataclass
class StatusEffect:
    kind: EffectKind
    turns_left: int = 0
    shield_points: int = 0
    max_shield_points: int = 0

    def on_turn_start(self, target: Actor) -> Optional[str]:
        """Apply one tick to the afflicted actor. Returns a log line, if any."""
        tick = _TICKS.get(self.kind)
        if tick is None:
            return None
        message = tick(self, target)
        self.turns_left -= 1
        return message

    def is_expired(self) -> bool:
        if self.kind == EffectKind.SHIELD:
            return self.shield_points <= 0
        return self.turns_left <= 0

    def refresh(self, other: StatusEffect) -> None:
        """Re-application of the same kind resets instead of stacking."""
        if other.kind != self.kind:
            raise ValueError(f"cannot refresh {self.kind.value} with {other.kind.value}")
        if self.kind == EffectKind.SHIELD:
            self.shield_points = self.max_shield_points
        else:
            self.turns_left = other.turns_left

    def absorb(self, damage: int) -> int:
        """Soak up to `damage` points with this shield. Returns what got through."""
        if self.kind != EffectKind.SHIELD or self.shield_points <= 0:
            return damage
        absorbed = min(damage, self.shield_points)
        self.shield_points -= absorbed
        return damage - absorbed

    def describe(self) -> str:
        if self.kind == EffectKind.SHIELD:
            return f"Shield({self.shield_points}/{self.max_shield_points})"
        return f"{self.kind.value}({self.turns_left})"


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def burn(turns: int = DEFAULT_TURNS[EffectKind.BURN]) -> StatusEffect:
    return StatusEffect(EffectKind.BURN, turns_left=turns)


def freeze(turns: int = DEFAULT_TURNS[EffectKind.FREEZE]) -> StatusEffect:
    return StatusEffect(EffectKind.FREEZE, turns_left=turns)


def poison(turns: int = DEFAULT_TURNS[EffectKind.POISON]) -> StatusEffect:
    return StatusEffect(EffectKind.POISON, turns_left=turns)


def regeneration(turns: int = DEFAULT_TURNS[EffectKind.REGENERATION]) -> StatusEffect:
    return StatusEffect(EffectKind.REGENERATION, turns_left=turns)


def stun(turns: int = DEFAULT_TURNS[EffectKind.STUN]) -> StatusEffect:
    return StatusEffect(EffectKind.STUN, turns_left=turns)


def weaken(turns: int = DEFAULT_TURNS[EffectKind.WEAKEN]) -> StatusEffect:
    return StatusEffect(EffectKind.WEAKEN, turns_left=turns)


def shield(points: int) -> StatusEffect:
    return StatusEffect(EffectKind.SHIELD, shield_points=points, max_shield_points=points)


# ---------------------------------------------------------------------------
# Tick functions (one per ticking kind)
# ---------------------------------------------------------------------------

def _tick_burn(effect: StatusEffect, target: Actor) -> str:
    dealt = target.suffer(BURN_DAMAGE)
    return f"{target.name} burns for {dealt} damage."


def _tick_poison(effect: StatusEffect, target: Actor) -> str:
    dealt = target.suffer(POISON_DAMAGE)
    return f"{target.name} takes {dealt} poison damage."


def _tick_freeze(effect: StatusEffect, target: Actor) -> str:
    lost = target.drain_mana(FREEZE_MANA_DRAIN)
    return f"{target.name} is frozen and loses {lost} mana."


def _tick_stun(effect: StatusEffect, target: Actor) -> str:
    lost = target.drain_mana(STUN_MANA_DRAIN)
    return f"{target.name} is stunned and loses {lost} mana."


def _tick_regeneration(effect: StatusEffect, target: Actor) -> str:
    healed = target.heal(REGENERATION_HEAL)
    return f"{target.name} regenerates {healed} HP."


def _tick_weaken(effect: StatusEffect, target: Actor) -> None:
    return None


_TICKS: dict[EffectKind, Callable[[StatusEffect, "Actor"], Optional[str]]] = {
    EffectKind.BURN: _tick_burn,
    EffectKind.POISON: _tick_poison,
    EffectKind.FREEZE: _tick_freeze,
    EffectKind.STUN: _tick_stun,
    EffectKind.REGENERATION: _tick_regeneration,
    EffectKind.WEAKEN: _tick_weaken,
}
