"""
Wizard Duel — Turn State Machine
A battle state is a tag (plus the winner once the game is over). Behaviour
lives in the PHASES dispatch table: one enter / cast_spell / end_turn
handler per tag. Handlers receive the BattleController and drive it through
change_state(); they never hold state of their own.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .actor import Actor
from .models import EffectKind, StateTag, Winner
from .spells import CastContext

if TYPE_CHECKING:
    from .controller import BattleController


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MANA_PER_TURN = 2
INITIAL_DRAW = 5


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BattleState:
    tag: StateTag
    winner: Optional[Winner] = None

    @property
    def is_terminal(self) -> bool:
        return self.tag == StateTag.GAME_OVER


PLAYER_TURN = BattleState(StateTag.PLAYER_TURN)
ENEMY_TURN = BattleState(StateTag.ENEMY_TURN)


def game_over(winner: Winner) -> BattleState:
    return BattleState(StateTag.GAME_OVER, winner=winner)


# ---------------------------------------------------------------------------
# Shared turn rules
# ---------------------------------------------------------------------------

def deal(battle: BattleController, actor: Actor, count: int = INITIAL_DRAW) -> int:
    """Fill an actor's opening hand. Returns how many cards were dealt."""
    dealt = 0
    for _ in range(count):
        if actor.hand_full:
            break
        card = battle.deck.draw()
        if card is None:
            break
        actor.receive(card)
        dealt += 1
    return dealt


def draw_for(battle: BattleController, actor: Actor) -> bool:
    """Draw one card for the actor. A full hand leaves the deck untouched."""
    if actor.hand_full:
        battle.log(f"{actor.name}'s hand is full.")
        return False
    card = battle.deck.draw()
    if card is None:
        battle.log("The deck is empty.")
        return False
    actor.receive(card)
    battle.log(f"{actor.label} drew 1 card(s).")
    return True


def prune(battle: BattleController, actor: Actor) -> None:
    for kind in actor.prune_expired():
        if kind == EffectKind.SHIELD:
            battle.log(f"{actor.name}'s shield shatters.")
        else:
            battle.log(f"{kind.value} wears off {actor.name}.")


def start_turn(battle: BattleController, actor: Actor) -> bool:
    """
    Turn-start bookkeeping: tick effects, prune, death check, draw, mana.
    Returns False if the actor died to its own status effects.
    """
    for line in actor.tick_effects():
        battle.log(line)
    prune(battle, actor)
    if not actor.is_alive:
        battle.log(f"{actor.name} has been defeated!")
        return False
    draw_for(battle, actor)
    actor.gain_mana(MANA_PER_TURN)
    battle.log(f"{actor.name} gains {MANA_PER_TURN} mana ({actor.mana}).")
    return True


def play_card(battle: BattleController, caster: Actor, target: Actor, name: str) -> bool:
    """
    Cast a card from the caster's hand at the target.
    Returns True if the spell resolved, False if the intent was ignored.
    """
    card = caster.find_card(name)
    if card is None:
        battle.log(f"{caster.label} attempted to play: {name} (no matching card in hand)")
        return False
    if caster.mana < card.mana_cost:
        battle.log("Not enough mana.")
        return False

    caster.spend_mana(card.mana_cost)
    caster.discard(card)
    battle.log(f"{caster.label} played: {card.name}")
    card.spell.cast(caster, target, CastContext(log=battle.log))
    prune(battle, target)
    prune(battle, caster)
    return True


def casualty_winner(battle: BattleController, caster: Actor, target: Actor) -> Optional[Winner]:
    """Who won after a resolution, if anyone. The caster wins a double knockout."""
    if not target.is_alive:
        battle.log(f"{target.name} has been defeated!")
        return Winner.PLAYER if caster.is_player else Winner.ENEMY
    if not caster.is_alive:
        battle.log(f"{caster.name} has been defeated!")
        return Winner.PLAYER if target.is_player else Winner.ENEMY
    return None


# ---------------------------------------------------------------------------
# Phase: Player turn
# ---------------------------------------------------------------------------

def enter_player_turn(battle: BattleController) -> None:
    battle.log("Player's turn.")
    if not start_turn(battle, battle.player):
        battle.change_state(game_over(Winner.ENEMY))


def player_cast_spell(battle: BattleController, name: str) -> None:
    if not play_card(battle, battle.player, battle.enemy, name):
        return
    winner = casualty_winner(battle, battle.player, battle.enemy)
    if winner is not None:
        battle.change_state(game_over(winner))


def player_end_turn(battle: BattleController) -> None:
    battle.log(f"{battle.player.name} ends the turn.")
    battle.change_state(ENEMY_TURN)


# ---------------------------------------------------------------------------
# Phase: Enemy turn
# ---------------------------------------------------------------------------

def enter_enemy_turn(battle: BattleController) -> None:
    enemy, player = battle.enemy, battle.player
    battle.log("Enemy's turn.")
    if not start_turn(battle, enemy):
        battle.change_state(game_over(Winner.PLAYER))
        return

    choice = battle.policy.choose_spell(enemy, player)
    if choice is None:
        battle.log(f"{enemy.name} holds back.")
    elif play_card(battle, enemy, player, choice):
        winner = casualty_winner(battle, enemy, player)
        if winner is not None:
            battle.change_state(game_over(winner))
            return

    battle.change_state(PLAYER_TURN)


def enemy_turn_input(battle: BattleController, *args) -> None:
    battle.log("Wait for your turn.")


# ---------------------------------------------------------------------------
# Phase: Game over
# ---------------------------------------------------------------------------

def enter_game_over(battle: BattleController) -> None:
    winner = battle.state.winner
    champion = battle.player if winner == Winner.PLAYER else battle.enemy
    battle.log(f"{champion.name} wins the duel!")
    battle.record_result(winner)


def game_over_input(battle: BattleController, *args) -> None:
    battle.log("The duel is over.")


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Phase:
    enter: Callable[[BattleController], None]
    cast_spell: Callable[[BattleController, str], None]
    end_turn: Callable[[BattleController], None]


PHASES: dict[StateTag, Phase] = {
    StateTag.PLAYER_TURN: Phase(enter_player_turn, player_cast_spell, player_end_turn),
    StateTag.ENEMY_TURN: Phase(enter_enemy_turn, enemy_turn_input, enemy_turn_input),
    StateTag.GAME_OVER: Phase(enter_game_over, game_over_input, game_over_input),
}
