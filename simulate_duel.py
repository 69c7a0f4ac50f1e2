"""
Wizard Duel — Duel Simulator
Plays consecutive duels with an autopilot wizard against generated enemies,
printing the battle log as it happens. Victories raise the difficulty and
the win streak exactly as in the real game; a defeat ends the run.

Usage:
    python simulate_duel.py                      # narrates with OPENAI_API_KEY if set
    python simulate_duel.py --dry-run            # skip API calls, show payloads only
    python simulate_duel.py --battles 3 --seed 7 # up to 3 duels, reproducible
"""

from __future__ import annotations
import argparse
import json
import logging
import random
import sys
from typing import Optional

from duel.battle_log import to_narrator_payload
from duel.controller import BattleController
from duel.customization import default_player_config, generate_enemy_config
from duel.models import StateTag, Winner
from duel.narrator import narrate_duel
from duel.observer import BattleObserver
from duel.policy import EnemyPolicy
from duel.progression import streak_rank
from duel.settings import Settings


# ---------------------------------------------------------------------------
# Console observer — prints every log line as it arrives
# ---------------------------------------------------------------------------

class ConsoleObserver(BattleObserver):
    def __init__(self, battle: BattleController):
        self.battle = battle
        self.updates = 0

    def log(self, line: str) -> None:
        print(f"  {line}")

    def update(self) -> None:
        self.updates += 1
        player, enemy = self.battle.player, self.battle.enemy
        print(
            f"  ── {player.name} {player.hp}/{player.max_hp} HP, {player.mana} MP"
            f" | {enemy.name} {enemy.hp}/{enemy.max_hp} HP, {enemy.mana} MP"
        )


# ---------------------------------------------------------------------------
# Autopilot — plays the player's side with the enemy's decision procedure
# ---------------------------------------------------------------------------

class Autopilot:
    """
    Casts spells while the policy finds something affordable, then ends the
    turn. Good enough to exercise every rule; not meant to play well.
    """

    def __init__(self, battle: BattleController, rng: random.Random):
        self.battle = battle
        self.policy = EnemyPolicy(rng=rng)

    def play_turn(self) -> None:
        battle = self.battle
        while battle.current_state_tag == StateTag.PLAYER_TURN:
            choice = self.policy.choose_spell(battle.player, battle.enemy)
            if choice is None:
                break
            battle.cast_spell(choice)
        if battle.current_state_tag == StateTag.PLAYER_TURN:
            battle.end_turn()


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

def simulate_duels(
    player_name: str = "Wizard",
    battles: int = 1,
    seed: Optional[int] = None,
    difficulty: int = 1,
    max_turns: int = 50,
    dry_run: bool = False,
    settings: Optional[Settings] = None,
) -> dict:
    settings = settings or Settings()
    rng = random.Random(seed)
    battle = BattleController(seed=seed, difficulty=difficulty)
    battle.add_observer(ConsoleObserver(battle))
    autopilot = Autopilot(battle, rng)
    player_config = default_player_config(player_name)

    results = {"seed": seed, "player": player_name, "duels": []}

    for number in range(1, battles + 1):
        enemy_config = generate_enemy_config(player_config, rng)
        print(f"\n{'=' * 60}")
        print(f"  🧙 DUEL {number}: {player_name} vs {enemy_config.name}")
        print(f"  Difficulty {battle.difficulty} | Win streak {battle.win_streak}")
        print(f"{'=' * 60}")

        battle.new_battle(player_config, enemy_config)
        turns = 0
        while not battle.is_over and turns < max_turns:
            autopilot.play_turn()
            turns += 1

        payload = to_narrator_payload(battle)
        duel = {"number": number, "turns": turns, "payload": payload}

        if not battle.is_over:
            print(f"\n  ⏳ No winner after {max_turns} turns — stopping this duel")
        elif dry_run or not settings.openai_api_key:
            print("\n  [dry-run] Skipping narration")
            print(json.dumps({k: v for k, v in payload.items() if k != "events"}, indent=4))
        else:
            try:
                narration = narrate_duel(
                    payload, api_key=settings.openai_api_key, model=settings.narrator_model
                )
                narration.display()
                duel["narration"] = {
                    "title": narration.title,
                    "narration": narration.narration,
                    "key_moment": narration.key_moment,
                    "tone": narration.tone,
                }
            except Exception as e:
                logging.getLogger(__name__).warning("Narration failed: %s", e)
                duel["narration"] = {"error": str(e)}

        results["duels"].append(duel)
        if battle.winner != Winner.PLAYER:
            break

    results["win_streak"] = battle.win_streak
    results["difficulty"] = battle.difficulty
    results["rank"] = streak_rank(battle.win_streak)

    print(f"\n{'=' * 60}")
    print(f"  🏆 RUN OVER — win streak {battle.win_streak} {results['rank']}".rstrip())
    print(f"{'=' * 60}\n")
    return results


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Wizard Duel Simulator")
    parser.add_argument("--dry-run", action="store_true",
                        help="Skip API calls, show narrator payloads instead")
    parser.add_argument("--battles", type=int, default=1,
                        help="Maximum consecutive duels (default: 1)")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for decks, enemies and tie-breaks")
    parser.add_argument("--name", default="Wizard", help="Player wizard name")
    parser.add_argument("--max-turns", type=int, default=50,
                        help="Give up on a duel after this many player turns")
    parser.add_argument("--output", default=None,
                        help="Write the run summary as JSON to this file")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not settings.openai_api_key and not args.dry_run:
        print("⚠️  No OPENAI_API_KEY found. Running in dry-run mode.")
        args.dry_run = True

    results = simulate_duels(
        player_name=args.name,
        battles=args.battles,
        seed=args.seed,
        difficulty=settings.difficulty,
        max_turns=args.max_turns,
        dry_run=args.dry_run,
        settings=settings,
    )

    if args.output:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2, default=str)
        print(f"📁 Run summary saved to: {args.output}")
    sys.exit(0)
