"""
Engine configuration for TicTacToe.
All the settings for the board, the wire format, and debug output.
"""


class EngineConfig:
    """
    Configuration class for engine settings.
    Create one and pass it to Game() to change the defaults.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== WIRE FORMAT ====================
    # How an empty cell looks in get_state().to_dict()
    EMPTY_CELL = ""

    # Status shape in to_dict():
    #   "tagged" -> {"type": "Win", "value": "X"}
    #   "flat"   -> "WinX"
    STATUS_FORMAT = "tagged"
    STATUS_FORMATS = ("tagged", "flat")

    # ==================== DEBUG SETTINGS ====================
    # Print every accepted/rejected move and each reset
    DEBUG_MODE = False
