"""
Game state types for TicTacToe.
Players, the game status variants, and the read-only state snapshot
handed to whoever draws the board.
"""

import json
from enum import Enum
from typing import Optional, List, Tuple, Union
from dataclasses import dataclass, field

from .config import EngineConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def code(self) -> int:
        """Cell value used on the engine's numeric board (+1 for X, -1 for O)."""
        return 1 if self == Player.X else -1

    @classmethod
    def from_code(cls, code: int) -> Optional["Player"]:
        """Map a numeric board cell back to a player (None for empty)."""
        if code == 0:
            return None
        return cls.X if code > 0 else cls.O


class GameStatus:
    """
    Base class for the three game statuses: Ongoing, Draw and Win.

    Wire shapes:
        tagged: {"type": "Ongoing"}, {"type": "Draw"}, {"type": "Win", "value": "X"}
        flat:   "Ongoing", "Draw", "WinX", "WinO"
    """

    tag = ""
    is_terminal = False

    def to_wire(self, status_format: Optional[str] = None) -> Union[str, dict]:
        """
        Encode the status for the presentation layer.

        Args:
            status_format: "tagged" or "flat" (default: EngineConfig.STATUS_FORMAT).

        Returns:
            A dict for the tagged shape, a string for the flat shape.
        """
        status_format = status_format or EngineConfig.STATUS_FORMAT
        if status_format == "tagged":
            return {"type": self.tag}
        if status_format == "flat":
            return self.tag
        raise ValueError(
            f"Unknown status format {status_format!r}. "
            f"Must be one of {EngineConfig.STATUS_FORMATS}."
        )

    @staticmethod
    def from_wire(value: Union[str, dict]) -> "GameStatus":
        """
        Decode a status from either wire shape.

        Args:
            value: A flat string ("WinX") or a tagged dict ({"type": "Win", "value": "X"}).

        Returns:
            The matching GameStatus.

        Raises:
            ValueError: If the value is not a known status.
        """
        if isinstance(value, str):
            if value == Ongoing.tag:
                return ONGOING
            if value == Draw.tag:
                return DRAW
            if value.startswith(Win.tag) and len(value) == len(Win.tag) + 1:
                return Win(Player(value[len(Win.tag):]))
            raise ValueError(f"Unknown status {value!r}")

        if isinstance(value, dict):
            tag = value.get("type")
            if tag == Ongoing.tag:
                return ONGOING
            if tag == Draw.tag:
                return DRAW
            if tag == Win.tag:
                return Win(Player(value.get("value")))
            raise ValueError(f"Unknown status type {tag!r}")

        raise ValueError(f"Status must be a string or a dict, got {type(value).__name__}")


@dataclass(frozen=True)
class Ongoing(GameStatus):
    """The game is still being played."""
    tag = "Ongoing"


@dataclass(frozen=True)
class Draw(GameStatus):
    """Board is full and nobody has three in a row."""
    tag = "Draw"
    is_terminal = True


@dataclass(frozen=True)
class Win(GameStatus):
    """A player completed a winning line."""
    winner: Player
    tag = "Win"
    is_terminal = True

    def to_wire(self, status_format: Optional[str] = None) -> Union[str, dict]:
        status_format = status_format or EngineConfig.STATUS_FORMAT
        if status_format == "tagged":
            return {"type": self.tag, "value": self.winner.value}
        if status_format == "flat":
            return f"{self.tag}{self.winner.value}"
        return super().to_wire(status_format)


# Statuses without a payload only need one instance each
ONGOING = Ongoing()
DRAW = Draw()


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game at one point in time.

    Tracks:
    - The 9 cells (None means empty, otherwise the Player who marked it)
    - Whose turn it is
    - Game status (ongoing, won, draw)

    Snapshots never change; the engine builds a new one on every get_state().
    config holds the wire defaults for to_dict() and is ignored when comparing.
    """

    board: Tuple[Optional[Player], ...]
    current_player: Player
    status: GameStatus
    config: Optional[EngineConfig] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        board = tuple(self.board)
        if len(board) != EngineConfig.CELL_COUNT:
            raise ValueError(
                f"Board must have {EngineConfig.CELL_COUNT} cells, got {len(board)}"
            )
        for cell in board:
            if cell is not None and not isinstance(cell, Player):
                raise ValueError(f"Invalid cell value {cell!r}")
        # Lists are accepted but stored as a tuple so the snapshot stays immutable
        object.__setattr__(self, "board", board)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner if isinstance(self.status, Win) else None

    def get_empty_cells(self) -> List[int]:
        """Get the positions of all empty cells."""
        return [pos for pos, cell in enumerate(self.board) if cell is None]

    def to_dict(
        self,
        status_format: Optional[str] = None,
        empty_cell: Optional[str] = None
    ) -> dict:
        """
        Convert to the dict the presentation layer renders from.

        Args:
            status_format: "tagged" or "flat" (default: the snapshot's config).
            empty_cell: Symbol for empty cells (default: the snapshot's config).

        Returns:
            {"board": [...9 symbols...], "currentPlayer": "X", "status": ...}
        """
        config = self.config or EngineConfig
        if status_format is None:
            status_format = config.STATUS_FORMAT
        if empty_cell is None:
            empty_cell = config.EMPTY_CELL
        return {
            "board": [empty_cell if cell is None else cell.value for cell in self.board],
            "currentPlayer": self.current_player.value,
            "status": self.status.to_wire(status_format),
        }

    def to_json(self, status_format: Optional[str] = None) -> str:
        """Serialize to a compact JSON string."""
        return json.dumps(self.to_dict(status_format), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: dict, empty_cell: Optional[str] = None) -> "GameState":
        """
        Build a snapshot from a dict in either status shape.

        Empty cells may be the configured empty symbol or None (null in JSON).

        Raises:
            ValueError: If a field is missing or holds an unknown value.
        """
        if empty_cell is None:
            empty_cell = EngineConfig.EMPTY_CELL
        try:
            raw_board = data["board"]
            raw_player = data["currentPlayer"]
            raw_status = data["status"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Missing game state field: {e}") from e

        if not isinstance(raw_board, (list, tuple)):
            raise ValueError(f"Board must be a list, got {type(raw_board).__name__}")

        board = [
            None if cell is None or cell == empty_cell else Player(cell)
            for cell in raw_board
        ]
        return cls(
            board=tuple(board),
            current_player=Player(raw_player),
            status=GameStatus.from_wire(raw_status),
        )

    @classmethod
    def from_json(cls, text: str) -> "GameState":
        return cls.from_dict(json.loads(text))
