"""Game management layer — state machine, selection, moves, turns, players.

Quick start::

    from gambit.game import GameStateMachine, HumanPlayer

    game = GameStateMachine({"opponent": "cpu", "difficulty": "hard"}, HumanPlayer(0))
    game.subscribe(print)
    game.select((6, 4))
    game.select((4, 4))
    game.confirm()  # the automated reply is played before this returns
"""

from gambit.game.interfaces import (
    BoardObserver,
    IDecisionPolicy,
    IMoveGenerator,
    IPlayer,
    TurnDecision,
)
from gambit.game.machine import GameEvents, GameStateMachine, ReentrantCallError
from gambit.game.options import GameOptions
from gambit.game.player import AutomatedPlayer, HumanPlayer
from gambit.game.policy import CapturePolicy
from gambit.game.resolver import MoveOutcome, MoveResolver
from gambit.game.selection import SelectionTracker
from gambit.game.turns import TurnController

__all__ = [
    # Interfaces
    "BoardObserver",
    "IDecisionPolicy",
    "IMoveGenerator",
    "IPlayer",
    "TurnDecision",
    # Concrete
    "AutomatedPlayer",
    "CapturePolicy",
    "GameEvents",
    "GameOptions",
    "GameStateMachine",
    "HumanPlayer",
    "MoveOutcome",
    "MoveResolver",
    "ReentrantCallError",
    "SelectionTracker",
    "TurnController",
]
