"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

import numpy as np

from .game_state import GameStatus, Player, Win, ONGOING, DRAW


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).
    Works on the engine's numeric board: X = +1, O = -1, empty = 0,
    so a line is won when its cells sum to +3 or -3.
    """

    # All possible winning lines (as cell indices), scanned in this order
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ])

    def _line_sums(self, board: np.ndarray) -> np.ndarray:
        # One sum per line, shape (8,)
        return board[self.WINNING_LINES].sum(axis=1, dtype=np.int16)

    def check_winner(self, board: np.ndarray) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The numeric board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return Player.from_code(int(board[line[0]]))

    def get_winning_line(self, board: np.ndarray) -> Optional[Tuple[int, int, int]]:
        """
        Get the first completed line, if there is one.

        Returns:
            The winning line as a tuple of 3 positions, or None.
        """
        winning = np.flatnonzero(np.abs(self._line_sums(board)) == 3)
        if winning.size == 0:
            return None
        return tuple(int(pos) for pos in self.WINNING_LINES[winning[0]])

    def check_draw(self, board: np.ndarray) -> bool:
        """
        Check if the game is a draw.

        A draw needs a full board AND no winner; a last move that
        fills the board and completes a line is a win.
        """
        if self.check_winner(board) is not None:
            return False
        return bool(np.all(board != 0))

    def evaluate(self, board: np.ndarray) -> GameStatus:
        """
        Work out the status of a board.

        Returns:
            Win(player), DRAW, or ONGOING.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Win(winner)
        if np.all(board != 0):
            return DRAW
        return ONGOING
