"""
Wizard Duel — Battle Controller
Owns one duel at a time: both actors, the shared deck, the current turn
state, the battle log and the observers. Every public intent runs to
completion, then observers receive the new log lines and a single update().

There is no global instance; create one controller per game session and
hand it to whatever presents the battle.
"""

from __future__ import annotations
import logging
import random
from contextlib import contextmanager
from typing import Optional

from .actor import Actor
from .battle_log import BattleLog
from .deck import Deck
from .errors import InvalidConfigError, ReentrantIntentError
from .models import EnemyConfig, PlayerConfig, StateTag, Winner, check_config
from .observer import BattleObserver
from .policy import EnemyPolicy
from .progression import advance, apply_difficulty, apply_win_streak_bonus
from .states import PHASES, PLAYER_TURN, BattleState, deal

logger = logging.getLogger(__name__)


class BattleController:
    def __init__(
        self,
        seed: Optional[int] = None,
        difficulty: int = 1,
        win_streak: int = 0,
        policy: Optional[EnemyPolicy] = None,
    ):
        self.rng = random.Random(seed)
        self.policy = policy or EnemyPolicy(rng=self.rng)
        self.difficulty = _non_negative("difficulty", difficulty)
        self.win_streak = _non_negative("win_streak", win_streak)

        self.player: Optional[Actor] = None
        self.enemy: Optional[Actor] = None
        self.deck: Optional[Deck] = None
        self.state: Optional[BattleState] = None
        self.battle_log = BattleLog()

        self._battle_start = 0
        self._observers: list[BattleObserver] = []
        self._busy = False

    # -----------------------------------------------------------------------
    # Observers
    # -----------------------------------------------------------------------

    def add_observer(self, observer: BattleObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: BattleObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    @property
    def observers(self) -> tuple[BattleObserver, ...]:
        return tuple(self._observers)

    def _notify(self, lines: list[str]) -> None:
        for observer in list(self._observers):
            for line in lines:
                observer.log(line)
            observer.update()

    # -----------------------------------------------------------------------
    # Intents
    # -----------------------------------------------------------------------

    @contextmanager
    def _intent(self, name: str):
        if self._busy:
            logger.error("Rejected re-entrant %s() during observer notification", name)
            raise ReentrantIntentError(f"{name}() called while the controller is busy")
        self._busy = True
        try:
            mark = self.battle_log.mark()
            yield
            self._notify(self.battle_log.since(mark))
        finally:
            self._busy = False

    def new_battle(
        self,
        player_config: PlayerConfig,
        enemy_config: EnemyConfig,
        difficulty: Optional[int] = None,
        win_streak: Optional[int] = None,
    ) -> None:
        """
        Start a fresh duel. Difficulty and win streak default to the
        controller's running progress.
        """
        with self._intent("new_battle"):
            player_config = check_config(player_config, PlayerConfig)
            enemy_config = check_config(enemy_config, EnemyConfig)
            if difficulty is None:
                difficulty = self.difficulty
            else:
                difficulty = _non_negative("difficulty", difficulty)
            if win_streak is None:
                win_streak = self.win_streak
            else:
                win_streak = _non_negative("win_streak", win_streak)

            # Nothing on the controller changes until everything below has been built.
            deck = Deck.from_profiles(
                player_config.deck_profile, enemy_config.deck_profile, rng=self.rng
            )
            player = Actor.from_config(player_config, is_player=True)
            enemy = Actor.from_config(enemy_config, is_player=False)
            apply_difficulty(enemy, difficulty)
            apply_win_streak_bonus(player, win_streak)

            self.difficulty, self.win_streak = difficulty, win_streak
            self.player, self.enemy, self.deck = player, enemy, deck
            self.state = None
            self._battle_start = self.battle_log.mark()
            logger.info(
                "New battle: %s vs %s (difficulty=%d, win_streak=%d)",
                player.name, enemy.name, self.difficulty, self.win_streak,
            )

            deal(self, player)
            deal(self, enemy)
            self.log("Game started.")
            self.log(f"{player.name} vs {enemy.name}!")
            if self.difficulty > 1:
                self.log(f"{enemy.name} is empowered to difficulty {self.difficulty}.")
            if self.win_streak > 0:
                self.log(f"Win streak {self.win_streak}: {player.name} starts with {player.mana} mana.")
            self.log("Both wizards drew initial hands.")
            self.change_state(PLAYER_TURN)

    def cast_spell(self, name: str) -> None:
        with self._intent("cast_spell"):
            if self.state is None:
                self.log("No battle in progress.")
                return
            PHASES[self.state.tag].cast_spell(self, name)

    def end_turn(self) -> None:
        with self._intent("end_turn"):
            if self.state is None:
                self.log("No battle in progress.")
                return
            PHASES[self.state.tag].end_turn(self)

    # -----------------------------------------------------------------------
    # Used by the state handlers
    # -----------------------------------------------------------------------

    def log(self, line: str) -> None:
        self.battle_log.append(line)
        logger.debug("%s", line)

    def change_state(self, state: BattleState) -> None:
        logger.debug("State -> %s", state.tag.value)
        self.state = state
        PHASES[state.tag].enter(self)

    def record_result(self, winner: Winner) -> None:
        self.difficulty, self.win_streak = advance(self.difficulty, self.win_streak, winner)
        logger.info(
            "Battle over, %s won (difficulty=%d, win_streak=%d)",
            winner.value, self.difficulty, self.win_streak,
        )

    def reset_progress(self) -> None:
        """A new wizard starts over at difficulty 1 with no streak."""
        if self._busy:
            logger.error("Rejected reset_progress() while the controller is busy")
            raise ReentrantIntentError("reset_progress() called while the controller is busy")
        self.difficulty = 1
        self.win_streak = 0

    # -----------------------------------------------------------------------
    # Read-only views
    # -----------------------------------------------------------------------

    @property
    def current_state_tag(self) -> Optional[StateTag]:
        return self.state.tag if self.state else None

    @property
    def winner(self) -> Optional[Winner]:
        return self.state.winner if self.state else None

    @property
    def is_over(self) -> bool:
        return self.state is not None and self.state.is_terminal

    @property
    def battle_lines(self) -> list[str]:
        """Log lines of the current battle only."""
        return self.battle_log.since(self._battle_start)

    @property
    def log_text(self) -> str:
        return self.battle_log.text()


def _non_negative(name: str, value: int) -> int:
    if not isinstance(value, int) or value < 0:
        raise InvalidConfigError(f"{name} must be a non-negative integer, got {value!r}")
    return value
