"""Game module for the falling-block engine.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation and line clearing
- Piece: Tetromino piece with rotation and translation
- TetrominoType: Enum of the seven piece types
- ScoringRules: Scoring, leveling and gravity interval helpers
- TetrisGame: Game state machine
- GravityClock: Gravity timing for loop drivers
"""

from .grid import GameGrid
from .pieces import (
    Piece,
    TetrominoType,
    color,
    is_valid_rotation,
    is_valid_type,
    rotate_clockwise,
    rotate_counter_clockwise,
    shape,
)
from .rules import ScoringRules, drop_interval_ms, level_for_lines, score_for
from .core import (
    Action,
    GameConfig,
    GameSnapshot,
    TetrisGame,
    cycle_randomizer,
)
from .timing import GravityClock

__all__ = [
    "GameGrid",
    "Piece",
    "TetrominoType",
    "color",
    "is_valid_rotation",
    "is_valid_type",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "shape",
    "ScoringRules",
    "drop_interval_ms",
    "level_for_lines",
    "score_for",
    "Action",
    "GameConfig",
    "GameSnapshot",
    "TetrisGame",
    "cycle_randomizer",
    "GravityClock",
]
