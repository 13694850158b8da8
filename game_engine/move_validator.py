"""
Move validator for TicTacToe.
Validates that moves follow the rules, and defines the errors
raised when they don't.
"""

from typing import Optional, List
from dataclasses import dataclass

import numpy as np

from .config import EngineConfig
from .game_state import GameStatus, Player


class MoveError(Exception):
    """Base class for rejected moves. The game is left untouched."""

    def __init__(self, position, message: str):
        super().__init__(message)
        self.position = position


class OutOfBoundsError(MoveError):
    """Position is not a cell index (0-8)."""

    def __init__(self, position, cell_count: int = EngineConfig.CELL_COUNT):
        super().__init__(
            position,
            f"Invalid position {position!r}. Must be 0-{cell_count - 1}."
        )


class CellOccupiedError(MoveError):
    """Target cell already has a mark."""

    def __init__(self, position: int, occupant: Player):
        super().__init__(position, f"Cell {position} is already occupied by {occupant.value}")
        self.occupant = occupant


class GameOverError(MoveError):
    """The game already ended in a win or a draw."""

    def __init__(self, position: int, status: GameStatus):
        super().__init__(position, "Game is already over! Reset to play again.")
        self.status = status


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be a cell index 0-8
    2. Game must not be over
    3. Can only place on empty cells
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def is_in_bounds(self, position) -> bool:
        """True if position is an int (not a bool) naming a cell."""
        if isinstance(position, (bool, np.bool_)):
            return False
        if not isinstance(position, (int, np.integer)):
            return False
        return 0 <= position < self.config.CELL_COUNT

    def validate_move(
        self,
        board: np.ndarray,
        status: GameStatus,
        position
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: The engine's numeric board (0 = empty).
            status: Current game status.
            position: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid and the error that would be raised.
        """
        # Range first, the position has to index the board
        if not self.is_in_bounds(position):
            return ValidationResult(
                is_valid=False,
                error=OutOfBoundsError(position, self.config.CELL_COUNT)
            )

        position = int(position)

        if status.is_terminal:
            return ValidationResult(is_valid=False, error=GameOverError(position, status))

        occupant = Player.from_code(int(board[position]))
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=CellOccupiedError(position, occupant)
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: np.ndarray, status: GameStatus) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of empty positions, or [] once the game is over.
        """
        if status.is_terminal:
            return []
        return [int(pos) for pos in np.flatnonzero(board == 0)]
