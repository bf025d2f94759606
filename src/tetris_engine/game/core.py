from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import Piece, TetrominoType, as_type, shape
from .rules import DEFAULT_RULES, ScoringRules, drop_interval_ms, score_for

logger = logging.getLogger(__name__)


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    SOFT_DROP = 3
    ROTATE_CW = 4
    ROTATE_CCW = 5
    HARD_DROP = 6
    PAUSE = 7
    QUIT = 8
    INVALID = 9


# Offsets tried in order when a rotation collides; the first valid one wins.
DEFAULT_KICK_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (-1, 0),
    (1, 0),
    (0, -1),
    (-2, 0),
    (2, 0),
    (0, -2),
)
NO_KICK_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0),)

Randomizer = Callable[[], Any]


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_x: Optional[int] = None  # defaults to width // 2 - 2
    spawn_y: int = 0
    kick_offsets: Tuple[Tuple[int, int], ...] = DEFAULT_KICK_OFFSETS

    def spawn_anchor(self) -> Tuple[int, int]:
        x = self.width // 2 - 2 if self.spawn_x is None else self.spawn_x
        return x, self.spawn_y


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game for renderers."""

    grid: Tuple[Tuple[int, ...], ...]
    current: Optional[Piece]
    current_shape: Optional[Tuple[Tuple[bool, ...], ...]]
    next_type: Optional[TetrominoType]
    score: int
    level: int
    lines: int
    running: bool
    paused: bool


def cycle_randomizer(kinds: Iterable[Any]) -> Randomizer:
    """Randomizer that repeats ``kinds`` in order; handy for reproducible games."""
    kinds = list(kinds)
    if not kinds:
        raise ValueError("cycle_randomizer needs at least one piece type")
    return itertools.cycle(kinds).__next__


class TetrisGame:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        randomizer: Optional[Randomizer] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or DEFAULT_RULES
        self.rng = random.Random(self.config.random_seed)
        self.randomizer = randomizer
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.running = False
        self.paused = False
        self.quit_requested = False
        self.current_piece: Optional[Piece] = None
        self.next_type: Optional[TetrominoType] = None
        self.reset()

    def reset(self) -> bool:
        """Start a fresh game. Returns False if the first spawn is blocked."""
        self.grid.reset()
        self.score = 0
        self.level = 1
        self.lines = 0
        self.running = True
        self.paused = False
        self.quit_requested = False
        self.current_piece = None
        first = self._draw_type()
        self.next_type = self._draw_type()
        ok = self.spawn_piece(first)
        logger.info("New game: current=%s next=%s", first.name, self.next_type.name)
        return ok

    def quit(self) -> None:
        self.quit_requested = True
        self.running = False
        logger.info("Quit requested (score=%d, lines=%d, level=%d)", self.score, self.lines, self.level)

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        logger.debug("Paused" if self.paused else "Resumed")

    def _end_game(self, reason: str) -> None:
        self.running = False
        logger.info("Game over: %s (score=%d, lines=%d, level=%d)", reason, self.score, self.lines, self.level)

    def _draw_type(self) -> TetrominoType:
        if self.randomizer is not None:
            raw = self.randomizer()
            kind = as_type(raw)
            if kind is not None:
                return kind
            logger.warning("Randomizer returned %r, which is not a piece type; using built-in generator", raw)
        return self.rng.choice(list(TetrominoType))

    def _fresh_piece(self, kind: TetrominoType) -> Piece:
        x, y = self.config.spawn_anchor()
        return Piece.create(kind, x, y)

    def set_next_type(self, kind: Any) -> bool:
        piece_type = as_type(kind)
        if piece_type is None:
            return False
        self.next_type = piece_type
        return True

    def spawn_piece(self, kind: Any) -> bool:
        """Place a fresh piece of ``kind`` at the spawn anchor.

        A blocked spawn ends the game. Unknown types are rejected without
        touching any state.
        """
        piece_type = as_type(kind)
        if piece_type is None:
            return False
        candidate = self._fresh_piece(piece_type)
        if not self.is_valid_position(candidate):
            self._end_game(f"spawn blocked for {piece_type.name}")
            return False
        self.current_piece = candidate
        logger.debug("Spawned %s at (%d, %d)", piece_type.name, candidate.x, candidate.y)
        return True

    def is_valid_position(self, piece: Optional[Piece]) -> bool:
        if piece is None or shape(piece.kind, piece.rotation) is None:
            return False
        return self.grid.can_place(piece.cells())

    def move_current(self, dx: int, dy: int) -> bool:
        if self.current_piece is None:
            return False
        candidate = self.current_piece.moved(dx, dy)
        if not self.is_valid_position(candidate):
            return False
        self.current_piece = candidate
        return True

    def rotate_current(self, clockwise: bool = True) -> bool:
        """Rotate with wall kicks: commit the first offset that fits, else leave the piece alone."""
        if self.current_piece is None:
            return False
        rotated = self.current_piece.rotated(clockwise)
        for dx, dy in self.config.kick_offsets:
            candidate = rotated.moved(dx, dy)
            if self.is_valid_position(candidate):
                self.current_piece = candidate
                return True
        return False

    def hard_drop(self) -> int:
        if self.current_piece is None:
            return 0
        distance = 0
        while self.move_current(0, 1):
            distance += 1
        self.lock_piece()
        return distance

    def lock_piece(self) -> int:
        """Fix the current piece to the grid and promote the next piece.

        If the promoted piece does not fit, the game ends and no lines are
        cleared for this lock. Returns the number of lines cleared.
        """
        piece = self.current_piece
        kind = as_type(piece.kind) if piece is not None else None
        if kind is None:
            return 0
        for x, y in piece.cells():
            self.grid.set_cell(x, y, piece.color)
        logger.debug("Locked %s at (%d, %d) rotation %d", kind.name, piece.x, piece.y, piece.rotation)

        promoted = self.next_type if self.next_type is not None else self._draw_type()
        self.current_piece = self._fresh_piece(promoted)
        self.next_type = self._draw_type()
        if not self.is_valid_position(self.current_piece):
            self._end_game(f"no room for {promoted.name}")
            return 0
        return self.clear_lines()

    def clear_lines(self) -> int:
        cleared = self.grid.clear_full_rows()
        if cleared > 0:
            self.lines += cleared
            self.score += self.rules.score_for_lines(cleared, self.level)
            self.level = self.rules.level_for_lines(self.lines)
            logger.debug("Cleared %d line(s): score=%d lines=%d level=%d", cleared, self.score, self.lines, self.level)
        return cleared

    @staticmethod
    def score_for(lines: int, level: int) -> int:
        return score_for(lines, level)

    @staticmethod
    def drop_interval_ms(level: int) -> int:
        return drop_interval_ms(level)

    def drop_interval(self) -> int:
        return self.rules.drop_interval_ms(self.level)

    def check_game_over(self) -> bool:
        if not self.running or self.current_piece is None:
            return True
        return not self.is_valid_position(self._fresh_piece(self.current_piece.kind))

    def gravity_tick(self) -> Optional[int]:
        """Advance one gravity step. Returns lines cleared if the piece locked, else None."""
        if not self.running or self.paused or self.current_piece is None:
            return None
        if self.move_current(0, 1):
            return None
        return self.lock_piece()

    def apply_action(self, action: Any) -> bool:
        try:
            action = Action(action)
        except (ValueError, TypeError):
            return False

        if action == Action.QUIT:
            self.quit()
            return True
        if not self.running:
            return False
        if action == Action.PAUSE:
            self.toggle_pause()
            return True
        if self.paused:
            return False

        if action == Action.LEFT:
            return self.move_current(-1, 0)
        elif action == Action.RIGHT:
            return self.move_current(1, 0)
        elif action == Action.SOFT_DROP:
            return self.move_current(0, 1)
        elif action == Action.ROTATE_CW:
            return self.rotate_current(True)
        elif action == Action.ROTATE_CCW:
            return self.rotate_current(False)
        elif action == Action.HARD_DROP:
            self.hard_drop()
            return True
        return False

    def snapshot(self) -> GameSnapshot:
        current_shape = None
        if self.current_piece is not None:
            s = self.current_piece.shape()
            if s is not None:
                current_shape = tuple(tuple(bool(v) for v in row) for row in s)
        return GameSnapshot(
            grid=tuple(tuple(row) for row in self.grid.rows_as_lists()),
            current=self.current_piece,
            current_shape=current_shape,
            next_type=self.next_type,
            score=self.score,
            level=self.level,
            lines=self.lines,
            running=self.running,
            paused=self.paused,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None and self.running:
            for x, y in self.current_piece.cells():
                if self.grid.is_in_bounds(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.current_piece.kind)
        return state
