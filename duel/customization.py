"""
Wizard Duel — Enemy generation
Builds an EnemyConfig that mirrors the player's look: a random evil name, the
opposite hat, robe colour and staff, and a different face when possible.
Appearance keys are opaque to the rules; only the name matters in battle.
"""

from __future__ import annotations
import random
from typing import Optional

from .models import EnemyConfig, PlayerConfig


EVIL_NAMES = [
    "Malachar", "Vexor", "Shadowmane", "Dreadmoor", "Nightshade",
    "Morgath", "Grimveil", "Darkflame", "Ravenclaw", "Thornhex",
    "Blackthorn", "Venomspire", "Skullcrusher", "Doomweaver", "Bloodmoon",
]

FACES = ["RuggedWarrior", "WiseElder", "YoungProdigy"]

OPPOSITE_HAT = {
    "pointy_hat": "wide_brim_hat",
    "wide_brim_hat": "pointy_hat",
    "crown": "hood",
    "hood": "crown",
    "top_hat": "hood",
}

OPPOSITE_ROBE = {
    "blue": "red",
    "red": "blue",
    "purple": "green",
    "green": "purple",
    "black": "white",
    "white": "black",
}

OPPOSITE_STAFF = {
    "wooden_staff": "bone_staff",
    "bone_staff": "wooden_staff",
    "crystal_staff": "gold_staff",
    "gold_staff": "crystal_staff",
}

DEFAULT_APPEARANCE = {
    "face": "WiseElder",
    "hat": "pointy_hat",
    "robe": "blue",
    "staff": "wooden_staff",
}


def default_player_config(name: str = "Wizard", deck_profile: str = "standard") -> PlayerConfig:
    return PlayerConfig(name=name, deck_profile=deck_profile, appearance=dict(DEFAULT_APPEARANCE))


def opposite_appearance(appearance: dict[str, str], rng: random.Random) -> dict[str, str]:
    player_face = appearance.get("face")
    faces = [f for f in FACES if f != player_face] or FACES
    return {
        "face": rng.choice(faces),
        "hat": OPPOSITE_HAT.get(appearance.get("hat"), "hood"),
        "robe": OPPOSITE_ROBE.get(appearance.get("robe"), "black"),
        "staff": OPPOSITE_STAFF.get(appearance.get("staff"), "bone_staff"),
    }


def generate_enemy_config(
    player_config: PlayerConfig,
    rng: Optional[random.Random] = None,
    deck_profile: Optional[str] = None,
) -> EnemyConfig:
    rng = rng or random.Random()
    return EnemyConfig(
        name=rng.choice(EVIL_NAMES),
        deck_profile=deck_profile or player_config.deck_profile,
        appearance=opposite_appearance(player_config.appearance, rng),
    )
