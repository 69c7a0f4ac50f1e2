"""Wizard Duel Battle Core"""

from .actor import Actor
from .controller import BattleController
from .deck import Deck
from .errors import ContractViolation, DuelError, InvalidConfigError, ReentrantIntentError
from .models import EffectKind, EnemyConfig, PlayerConfig, StateTag, Winner
from .observer import BattleObserver
from .policy import EnemyPolicy
from .spells import SPELL_REGISTRY, Spell, SpellCard

__all__ = [
    'Actor', 'BattleController', 'BattleObserver', 'Deck', 'EnemyPolicy',
    'Spell', 'SpellCard', 'SPELL_REGISTRY',
    'EffectKind', 'StateTag', 'Winner', 'PlayerConfig', 'EnemyConfig',
    'DuelError', 'ContractViolation', 'InvalidConfigError', 'ReentrantIntentError',
]
