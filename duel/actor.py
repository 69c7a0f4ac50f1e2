"""
Wizard Duel — Actor
State shared by the player and the enemy wizard. HP and mana are clamped
here so no caller ever observes a negative value.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .effects import StatusEffect
from .models import ActorConfig, EffectKind

if TYPE_CHECKING:
    from .spells import SpellCard


HAND_LIMIT = 5


@dataclass
class Actor:
    name: str
    max_hp: int = 100
    hp: Optional[int] = None
    mana: int = 0
    is_player: bool = False
    hand: list[SpellCard] = field(default_factory=list)
    status_effects: dict[EffectKind, StatusEffect] = field(default_factory=dict)
    appearance: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.max_hp <= 0:
            raise ValueError(f"max_hp must be positive, got {self.max_hp}")
        if self.hp is None:
            self.hp = self.max_hp
        self.hp = max(0, min(self.hp, self.max_hp))
        self.mana = max(0, self.mana)

    @classmethod
    def from_config(cls, config: ActorConfig, is_player: bool) -> Actor:
        return cls(
            name=config.name,
            max_hp=config.max_hp,
            mana=config.starting_mana,
            is_player=is_player,
            appearance=dict(config.appearance),
        )

    @property
    def label(self) -> str:
        return "Player" if self.is_player else "Enemy"

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def shield(self) -> int:
        effect = self.status_effects.get(EffectKind.SHIELD)
        return effect.shield_points if effect else 0

    @property
    def is_weakened(self) -> bool:
        return EffectKind.WEAKEN in self.status_effects

    # -- health ---------------------------------------------------------------

    def suffer(self, damage: int) -> int:
        """
        Run incoming damage through the shield, then HP.
        Returns the HP actually lost.
        """
        if damage <= 0:
            return 0
        shield = self.status_effects.get(EffectKind.SHIELD)
        if shield is not None:
            damage = shield.absorb(damage)
        lost = min(damage, self.hp)
        self.hp -= lost
        return lost

    def heal(self, amount: int) -> int:
        """Restore HP up to max_hp. Returns the HP actually restored."""
        if amount <= 0:
            return 0
        restored = min(amount, self.max_hp - self.hp)
        self.hp += restored
        return restored

    # -- mana -----------------------------------------------------------------

    def gain_mana(self, amount: int) -> None:
        self.mana += max(0, amount)

    def drain_mana(self, amount: int) -> int:
        """Remove up to `amount` mana without going below zero. Returns mana lost."""
        lost = min(max(0, amount), self.mana)
        self.mana -= lost
        return lost

    def spend_mana(self, cost: int) -> None:
        if cost > self.mana:
            raise ValueError(f"{self.name} cannot pay {cost} mana with {self.mana}")
        self.mana -= cost

    # -- hand -----------------------------------------------------------------

    @property
    def hand_full(self) -> bool:
        return len(self.hand) >= HAND_LIMIT

    def find_card(self, name: str) -> Optional[SpellCard]:
        return next((c for c in self.hand if c.name == name), None)

    def receive(self, card: SpellCard) -> bool:
        """Put a drawn card in hand. Returns False when the hand is full."""
        if self.hand_full:
            return False
        self.hand.append(card)
        return True

    def discard(self, card: SpellCard) -> None:
        self.hand.remove(card)

    # -- status effects -------------------------------------------------------

    def has_effect(self, kind: EffectKind) -> bool:
        return kind in self.status_effects

    def apply_effect(self, effect: StatusEffect) -> bool:
        """Attach an effect, refreshing an existing one of the same kind. Returns True on refresh."""
        existing = self.status_effects.get(effect.kind)
        if existing is not None:
            existing.refresh(effect)
            return True
        self.status_effects[effect.kind] = effect
        return False

    def tick_effects(self) -> list[str]:
        """Tick every effect in the order it was applied. Returns the log lines produced."""
        lines = []
        for effect in list(self.status_effects.values()):
            message = effect.on_turn_start(self)
            if message:
                lines.append(message)
        return lines

    def prune_expired(self) -> list[EffectKind]:
        expired = [kind for kind, effect in self.status_effects.items() if effect.is_expired()]
        for kind in expired:
            del self.status_effects[kind]
        return expired
