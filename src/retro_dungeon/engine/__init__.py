from .combat import CombatOutcome, resolve_attack
from .message_log import MessageLog
from .spawner import Spawner
from .state import GameState, World
from .turns import TurnEngine
from .view import RenderView

__all__ = [
    "CombatOutcome",
    "resolve_attack",
    "MessageLog",
    "Spawner",
    "GameState",
    "World",
    "TurnEngine",
    "RenderView",
]
