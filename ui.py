"""
TicTacToe Console UI
A text interface for the game engine.

Shows:
- The board, with cells numbered 0-8 row by row
- Whose turn it is
- The result once someone wins or the board fills up

Type a cell number to play there, or 'r' to reset.
"""

from typing import Callable, Optional

from game_engine import EngineConfig, Game, GameState, MoveError, Player

RESET_COMMAND = "r"


class ConsoleUI:
    """
    Main UI class for playing TicTacToe in a terminal.
    """

    def __init__(
        self,
        game: Optional[Game] = None,
        config: Optional[EngineConfig] = None,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the UI.

        Args:
            game: Game to drive (default: a new one built from config).
            config: Engine settings, used when no game is given.
            input_func: Where input comes from (swap out for tests).
        """
        self.game = game or Game(config)
        self.input_func = input_func
        self.is_running = False

    @staticmethod
    def board_as_string(state: GameState) -> str:
        """Render the board as three rows with dividers."""
        def symbol(cell: Optional[Player]) -> str:
            return " " if cell is None else cell.value

        rows = []
        for start in range(0, len(state.board), 3):
            cells = state.board[start:start + 3]
            rows.append(" " + " | ".join(symbol(c) for c in cells) + " \n")
        return "-----------\n".join(rows)

    def handle_input(self, text: str) -> bool:
        """
        Handle one line of user input.

        Returns:
            True if the input was a reset or an accepted move.
        """
        text = text.strip()

        if text == RESET_COMMAND:
            self.game.reset()
            return True

        try:
            position = int(text)
        except ValueError:
            print("Invalid input. Please enter a number between 0 and 8 or 'r' to reset.")
            return False

        try:
            self.game.play_move(position)
        except MoveError as e:
            print(f"Error: {e}")
            return False
        return True

    def _ask_new_game(self) -> bool:
        """Prompt for a new game. Returns True if the game was reset."""
        answer = self.input_func("Press 'r' to reset the game or any other key to exit: ")
        if answer.strip() != RESET_COMMAND:
            return False
        self.game.reset()
        return True

    def _show_result(self, state: GameState):
        if state.winner is not None:
            print(f"Game over! Winner: {state.winner.value}")
        else:
            print("Game over! It's a draw!")

    def run(self):
        """Run the game loop until the player quits."""
        self.is_running = True
        try:
            while self.is_running:
                state = self.game.get_state()
                print(self.board_as_string(state))

                if state.is_game_over:
                    self._show_result(state)
                    self.is_running = self._ask_new_game()
                    continue

                print(f"Current player: {state.current_player.value}")
                while not self.handle_input(
                    self.input_func("Enter your move (0-8) or 'r' to reset: ")
                ):
                    pass
        except (KeyboardInterrupt, EOFError):
            print("\n\nGame interrupted by user.")
        finally:
            self.is_running = False
            print("Goodbye!")
