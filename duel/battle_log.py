"""
Wizard Duel — Battle Log
Append-only record of everything that happened, one human-readable line per
event. The same lines feed the observers and, once a duel is over, the
narrator payload.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from .models import Winner

if TYPE_CHECKING:
    from .controller import BattleController


class BattleLog:
    def __init__(self):
        self._lines: list[str] = []

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def append(self, line: str) -> None:
        self._lines.append(line)

    def mark(self) -> int:
        return len(self._lines)

    def since(self, mark: int) -> list[str]:
        return self._lines[mark:]

    def text(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)


def to_narrator_payload(battle: BattleController) -> dict:
    """
    Serialize the current duel for the narrator.
    Every field the narrator needs is here. Nothing more.
    """
    player, enemy = battle.player, battle.enemy
    if player is None or enemy is None:
        raise ValueError("no battle has been started")

    def actor_summary(actor) -> dict:
        return {
            "name": actor.name,
            "hp": actor.hp,
            "max_hp": actor.max_hp,
            "mana": actor.mana,
            "effects": [e.describe() for e in actor.status_effects.values()],
            "cards_in_hand": len(actor.hand),
        }

    winner = battle.winner
    return {
        "player": actor_summary(player),
        "enemy": actor_summary(enemy),
        "state": battle.current_state_tag.value,
        "winner": _winner_name(battle, winner),
        "outcome": _outcome_reason(battle, winner),
        "difficulty": battle.difficulty,
        "win_streak": battle.win_streak,
        "events": list(battle.battle_lines),
    }


def _winner_name(battle: BattleController, winner) -> Optional[str]:
    if winner == Winner.PLAYER:
        return battle.player.name
    if winner == Winner.ENEMY:
        return battle.enemy.name
    return None


def _outcome_reason(battle: BattleController, winner) -> str:
    if winner is None:
        return "The duel is still raging"
    champion = battle.player if winner == Winner.PLAYER else battle.enemy
    fallen = battle.enemy if winner == Winner.PLAYER else battle.player
    return f"{champion.name} struck down {fallen.name} with {champion.hp} HP to spare"
