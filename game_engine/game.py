"""
The TicTacToe game engine.
Owns one board, enforces the rules, and answers state queries.
"""

from typing import Optional, List, Tuple

import numpy as np

from .config import EngineConfig
from .game_state import GameState, GameStatus, Player, ONGOING
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker


class Game:
    """
    One game of TicTacToe.

    Game flow:
    1. X moves first, then players alternate
    2. After each move the board is checked for a win or a full board
    3. Once won or drawn, moves are rejected until reset()

    A rejected move raises a MoveError and changes nothing.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize a fresh game.

        Args:
            config: Engine settings (default: EngineConfig()).
        """
        self.config = config or EngineConfig()
        self.validator = MoveValidator(self.config)
        self.win_checker = WinChecker()
        self._start()

    @classmethod
    def new(cls, config: Optional[EngineConfig] = None) -> "Game":
        """Create a game in the initial state."""
        return cls(config)

    def _start(self):
        # Fixed-size board: 0 = empty, +1 = X, -1 = O
        self._board = np.zeros(self.config.CELL_COUNT, dtype=np.int8)
        # X always moves first
        self._current_player = Player.X
        self._status: GameStatus = ONGOING

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    def validate_move(self, position) -> ValidationResult:
        """Check a move without playing it."""
        return self.validator.validate_move(self._board, self._status, position)

    def is_valid_move(self, position) -> bool:
        return self.validate_move(position).is_valid

    def play_move(self, position: int) -> None:
        """
        Play the current player's mark at the given position.

        Args:
            position: Cell index (0-8), row by row from the top left.

        Raises:
            OutOfBoundsError: Position is not 0-8.
            GameOverError: The game already ended.
            CellOccupiedError: The cell already has a mark.
        """
        result = self.validate_move(position)
        if not result.is_valid:
            if self.config.DEBUG_MODE:
                print(f"Rejected move {position!r}: {result.error_message}")
            raise result.error

        position = int(position)
        player = self._current_player
        self._board[position] = player.code
        self._status = self.win_checker.evaluate(self._board)

        if self.config.DEBUG_MODE:
            print(f"{player.value} moves to {position}")

        if self._status.is_terminal:
            # Winner stays as current player
            if self.config.DEBUG_MODE:
                print(f"Game over: {self._status.to_wire('flat')}")
            return

        self._current_player = player.opposite()

    def reset(self) -> None:
        """Return to a fresh game. Always succeeds."""
        self._start()
        if self.config.DEBUG_MODE:
            print("Game reset!")

    def get_state(self) -> GameState:
        """Get a snapshot of the board, current player and status."""
        return GameState(
            board=tuple(Player.from_code(int(cell)) for cell in self._board),
            current_player=self._current_player,
            status=self._status,
            config=self.config,
        )

    def get_empty_cells(self) -> List[int]:
        return self.validator.get_valid_moves(self._board, ONGOING)

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        """The completed line, for highlighting (None unless someone won)."""
        return self.win_checker.get_winning_line(self._board)
