from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


ROTATION_COUNT = 4
MATRIX_SIZE = 4
SPAWN_X = 3
SPAWN_Y = 0

Shape = np.ndarray


def _bitmap(*rows: str) -> Shape:
    grid = np.array([[ch == "#" for ch in row] for row in rows], dtype=np.bool_)
    grid.setflags(write=False)
    return grid


# Rotation states 0..3 of every piece, as 4x4 occupancy bitmaps.
SHAPES: Dict[TetrominoType, Tuple[Shape, Shape, Shape, Shape]] = {
    TetrominoType.I: (
        _bitmap("....", "####", "....", "...."),
        _bitmap("..#.", "..#.", "..#.", "..#."),
        _bitmap("....", "####", "....", "...."),
        _bitmap("..#.", "..#.", "..#.", "..#."),
    ),
    TetrominoType.O: (
        _bitmap(".##.", ".##.", "....", "...."),
        _bitmap(".##.", ".##.", "....", "...."),
        _bitmap(".##.", ".##.", "....", "...."),
        _bitmap(".##.", ".##.", "....", "...."),
    ),
    TetrominoType.T: (
        _bitmap(".#..", "###.", "....", "...."),
        _bitmap(".#..", ".##.", ".#..", "...."),
        _bitmap("....", "###.", ".#..", "...."),
        _bitmap(".#..", "##..", ".#..", "...."),
    ),
    TetrominoType.S: (
        _bitmap(".##.", "##..", "....", "...."),
        _bitmap(".#..", ".##.", "..#.", "...."),
        _bitmap(".##.", "##..", "....", "...."),
        _bitmap(".#..", ".##.", "..#.", "...."),
    ),
    TetrominoType.Z: (
        _bitmap("##..", ".##.", "....", "...."),
        _bitmap("..#.", ".##.", ".#..", "...."),
        _bitmap("##..", ".##.", "....", "...."),
        _bitmap("..#.", ".##.", ".#..", "...."),
    ),
    TetrominoType.J: (
        _bitmap("#...", "###.", "....", "...."),
        _bitmap(".##.", ".#..", ".#..", "...."),
        _bitmap("....", "###.", "..#.", "...."),
        _bitmap(".#..", ".#..", "##..", "...."),
    ),
    TetrominoType.L: (
        _bitmap("..#.", "###.", "....", "...."),
        _bitmap(".#..", ".#..", ".##.", "...."),
        _bitmap("....", "###.", "#...", "...."),
        _bitmap("##..", ".#..", ".#..", "...."),
    ),
}

COLORS: Dict[TetrominoType, int] = {kind: int(kind) for kind in TetrominoType}


def as_type(kind: Any) -> Optional[TetrominoType]:
    """Coerce ``kind`` to a TetrominoType, or None if it names no piece."""
    if isinstance(kind, bool):
        return None
    if isinstance(kind, TetrominoType):
        return kind
    if isinstance(kind, (int, np.integer)):
        try:
            return TetrominoType(int(kind))
        except ValueError:
            return None
    if isinstance(kind, str):
        return TetrominoType.__members__.get(kind.upper())
    return None


def is_valid_type(kind: Any) -> bool:
    return as_type(kind) is not None


def is_valid_rotation(rotation: Any) -> bool:
    if isinstance(rotation, bool) or not isinstance(rotation, (int, np.integer)):
        return False
    return 0 <= int(rotation) < ROTATION_COUNT


def shape(kind: Any, rotation: Any) -> Optional[Shape]:
    """Occupancy bitmap for ``kind`` at ``rotation``; None for unknown input.

    Rotation indices are not wrapped here: 4 or -1 is invalid.
    """
    piece_type = as_type(kind)
    if piece_type is None or not is_valid_rotation(rotation):
        return None
    return SHAPES[piece_type][int(rotation)]


def color(kind: Any) -> Optional[int]:
    piece_type = as_type(kind)
    if piece_type is None:
        return None
    return COLORS[piece_type]


def rotate_clockwise(rotation: int) -> int:
    return (rotation + 1) % ROTATION_COUNT


def rotate_counter_clockwise(rotation: int) -> int:
    return (rotation + ROTATION_COUNT - 1) % ROTATION_COUNT


@dataclass(frozen=True)
class Piece:
    kind: TetrominoType
    rotation: int = 0  # 0..3
    x: int = SPAWN_X
    y: int = SPAWN_Y

    @classmethod
    def create(cls, kind: TetrominoType, x: int = SPAWN_X, y: int = SPAWN_Y) -> "Piece":
        return cls(kind=kind, rotation=0, x=x, y=y)

    @property
    def color(self) -> Optional[int]:
        return color(self.kind)

    def shape(self) -> Optional[Shape]:
        return shape(self.kind, self.rotation)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.kind, self.rotation, self.x + dx, self.y + dy)

    def rotated(self, clockwise: bool = True) -> "Piece":
        if clockwise:
            rotation = rotate_clockwise(self.rotation)
        else:
            rotation = rotate_counter_clockwise(self.rotation)
        return Piece(self.kind, rotation, self.x, self.y)

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) board coordinates of the occupied cells."""
        s = self.shape()
        if s is None:
            return []
        return [(self.x + int(dx), self.y + int(dy)) for dy, dx in zip(*np.nonzero(s))]
