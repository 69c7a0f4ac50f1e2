"""
Wizard Duel — Difficulty & Win Streak
Each victory makes the next enemy tougher and the player richer in mana.
A defeat resets the streak but keeps the difficulty reached so far.
"""

from __future__ import annotations
from typing import Optional

from .actor import Actor
from .models import Winner


DIFFICULTY_HP_STEP = 20       # enemy max HP per difficulty level above 1
DIFFICULTY_MANA_STEP = 2      # enemy starting mana per difficulty level above 1
STREAK_MANA_BONUS = 1         # player starting mana per consecutive win

STREAK_RANKS: list[tuple[int, str]] = [
    (10, "Legendary Wizard"),
    (7, "Master Wizard"),
    (5, "Expert Wizard"),
    (3, "Skilled Wizard"),
    (1, "Apprentice Wizard"),
]


def apply_difficulty(enemy: Actor, difficulty: int) -> None:
    levels = max(0, difficulty - 1)
    enemy.max_hp += DIFFICULTY_HP_STEP * levels
    enemy.hp = enemy.max_hp
    enemy.gain_mana(DIFFICULTY_MANA_STEP * levels)


def apply_win_streak_bonus(player: Actor, win_streak: int) -> None:
    player.gain_mana(STREAK_MANA_BONUS * max(0, win_streak))


def advance(difficulty: int, win_streak: int, winner: Optional[Winner]) -> tuple[int, int]:
    """Return the (difficulty, win_streak) that follow a finished battle."""
    if winner == Winner.PLAYER:
        return difficulty + 1, win_streak + 1
    if winner == Winner.ENEMY:
        return difficulty, 0
    return difficulty, win_streak


def streak_rank(streak: int) -> str:
    for threshold, title in STREAK_RANKS:
        if streak >= threshold:
            return title
    return ""
