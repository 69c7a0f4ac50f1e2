"""
Wizard Duel — Observer interface
Anything presenting a battle (a window, a console, a test) subclasses
BattleObserver. The controller calls log() once per new battle-log line and
then update() once, after each intent has fully resolved.

Observers may read controller state during these callbacks but must not
call cast_spell / end_turn / new_battle; the controller raises
ReentrantIntentError if they do.
"""


class BattleObserver:
    def update(self) -> None:
        """Actor-visible state changed; re-read it from the controller."""

    def log(self, line: str) -> None:
        """A new line was appended to the battle log."""
