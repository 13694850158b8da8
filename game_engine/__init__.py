"""
TicTacToe game engine.
Handles game state, rules, and state snapshots for display.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .game_state import GameState, GameStatus, Player, Ongoing, Draw, Win, ONGOING, DRAW
from .move_validator import (
    MoveError,
    OutOfBoundsError,
    CellOccupiedError,
    GameOverError,
    MoveValidator,
    ValidationResult,
)
from .win_checker import WinChecker
from .game import Game
