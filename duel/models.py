"""
Wizard Duel — Data Models
Enums and configuration records shared by the rules. Pure data, no logic
beyond validation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import InvalidConfigError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class EffectKind(Enum):
    BURN = "Burn"
    FREEZE = "Freeze"
    POISON = "Poison"
    REGENERATION = "Regeneration"
    STUN = "Stun"
    WEAKEN = "Weaken"
    SHIELD = "Shield"


class StateTag(Enum):
    PLAYER_TURN = "player_turn"
    ENEMY_TURN = "enemy_turn"
    GAME_OVER = "game_over"


class Winner(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


# ---------------------------------------------------------------------------
# Actor configuration (built by the customization layer)
# ---------------------------------------------------------------------------

@dataclass
class ActorConfig:
    name: str
    max_hp: int = 100
    starting_mana: int = 0
    deck_profile: str = "standard"
    appearance: dict[str, str] = field(default_factory=dict)   # opaque to the rules

    def validate(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidConfigError(f"{type(self).__name__} needs a non-empty name")
        if not isinstance(self.max_hp, int) or self.max_hp <= 0:
            raise InvalidConfigError(f"max_hp must be a positive integer, got {self.max_hp!r}")
        if not isinstance(self.starting_mana, int) or self.starting_mana < 0:
            raise InvalidConfigError(
                f"starting_mana must be a non-negative integer, got {self.starting_mana!r}"
            )
        if not isinstance(self.deck_profile, str) or not self.deck_profile:
            raise InvalidConfigError("deck_profile must be a profile name")


@dataclass
class PlayerConfig(ActorConfig):
    name: str = "Wizard"


@dataclass
class EnemyConfig(ActorConfig):
    pass


def check_config(config: Optional[ActorConfig], expected: type) -> ActorConfig:
    """Reject a missing or wrongly typed config, then validate its fields."""
    if config is None:
        raise InvalidConfigError(f"missing {expected.__name__}")
    if not isinstance(config, expected):
        raise InvalidConfigError(
            f"expected {expected.__name__}, got {type(config).__name__}"
        )
    config.validate()
    return config
