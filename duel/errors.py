"""
Wizard Duel — Exceptions
Only contract violations are raised. Ignored intents (bad card name, not
enough mana, input after the game is over) go to the battle log instead.
"""


class DuelError(Exception):
    """Base class for every error raised by the battle core."""


class ContractViolation(DuelError):
    """The caller broke the controller's contract. The operation is aborted."""


class InvalidConfigError(ContractViolation, ValueError):
    """A battle was requested with a missing or malformed configuration."""


class ReentrantIntentError(ContractViolation, RuntimeError):
    """An observer called back into the controller while being notified."""
