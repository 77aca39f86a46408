"""Sliding pieces: the rook and the queen.

Both walk rays outward from their square. A ray's legal moves stop at the
first occupied square, which is included as a possible capture. The danger
list follows each ray to the board's edge until it meets the targeted king.
That king is the black one when it is black's turn and the white one
otherwise. The ray that meets the king becomes the danger line. It is kept
only while at most one enemy piece stands on it besides the king, so that
the line can still describe a check or a pin.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from chessboard.pieces import Piece

_SIDE = 8
_MAX_DISTANCE = 64


def _row(square: int) -> int:
    """Row of a square, rounding toward zero like the board arithmetic does."""
    quotient = abs(square) // _SIDE
    return -quotient if square < 0 else quotient


def _column(square: int) -> int:
    """Column of a square, keeping the sign of the square."""
    return square - _SIDE * _row(square)


@dataclass(frozen=True)
class _Ray:
    """A direction of travel and the test that keeps a step on the board."""

    step: int
    inside: Callable[[int, int, int], bool]

    def squares(self, origin: int) -> Iterator[int]:
        """Squares reached from ``origin`` one step at a time, nearest first."""
        distance = abs(self.step)
        while True:
            square = origin + (distance if self.step > 0 else -distance)
            if not self.inside(origin, square, distance):
                return
            yield square
            distance += abs(self.step)


_LEFT = _Ray(-1, lambda origin, square, _: square >= 0 and _row(origin) == _row(square))
_RIGHT = _Ray(1, lambda origin, square, _: _row(origin) == _row(square))
_UP = _Ray(-8, lambda origin, square, distance: (
    square >= 0 and distance < _MAX_DISTANCE and _column(origin) == _column(square)))
_DOWN = _Ray(8, lambda origin, square, distance: (
    square <= 63 and distance < _MAX_DISTANCE and _column(origin) == _column(square)))
_UP_LEFT = _Ray(-9, lambda origin, square, _: square >= 0 and _column(square) < _column(origin))
_DOWN_RIGHT = _Ray(9, lambda origin, square, _: square <= 63 and _column(square) > _column(origin))
_UP_RIGHT = _Ray(-7, lambda origin, square, _: square >= 0 and _column(square) > _column(origin))
_DOWN_LEFT = _Ray(7, lambda origin, square, _: square <= 63 and _column(square) < _column(origin))

_STRAIGHT = (_LEFT, _RIGHT, _UP, _DOWN)
_DIAGONAL = (_UP_LEFT, _DOWN_RIGHT, _UP_RIGHT, _DOWN_LEFT)


class _SlidingPiece(Piece):
    """A piece whose moves run along rays until blocked."""

    _RAYS: tuple[_Ray, ...] = ()

    def _calc_sliding_moves(self, white_pieces: Sequence[Piece],
                            black_pieces: Sequence[Piece], player_turn: bool) -> None:
        occupied = self._occupied(white_pieces, black_pieces)
        king = self._target_king_square(white_pieces, black_pieces, player_turn)
        origin = self._position

        moves: list[int] = []
        danger: list[int] = []
        king_in_line = False

        for ray in self._RAYS:
            blocked = False
            for square in ray.squares(origin):
                if not blocked:
                    blocked = square in occupied
                    moves.append(square)
                if not king_in_line:
                    danger.append(square)
                    king_in_line = square == king
            if not king_in_line:
                danger.clear()

        if danger and self._collisions(danger, white_pieces, black_pieces) > 2:
            danger.clear()
        danger.append(origin)

        self.possible_moves = moves
        self.danger_moves = danger

    def _collisions(self, line: Sequence[int], white_pieces: Sequence[Piece],
                    black_pieces: Sequence[Piece]) -> int:
        """Weight of the pieces standing on a line; own pieces count double."""
        own_white = 2 if self.white else 1
        own_black = 1 if self.white else 2
        total = 0
        for square in line:
            total += sum(own_black for piece in black_pieces if piece.position == square)
            total += sum(own_white for piece in white_pieces if piece.position == square)
        return total


class Rook(_SlidingPiece):
    """A rook, moving along rows and columns."""

    _RAYS = _STRAIGHT

    def __init__(self, white: bool, position: int) -> None:
        super().__init__("R", white, position, False)

    def calc_moves(self, white_pieces: Sequence[Piece], black_pieces: Sequence[Piece],
                   player_turn: bool) -> None:
        """Fill the possible and danger moves along rows and columns."""
        self._calc_sliding_moves(white_pieces, black_pieces, player_turn)


class Queen(_SlidingPiece):
    """A queen, moving along rows, columns and diagonals."""

    _RAYS = _STRAIGHT + _DIAGONAL

    def __init__(self, white: bool, position: int, moved: bool = False) -> None:
        super().__init__("Q", white, position, moved)

    def calc_moves(self, white_pieces: Sequence[Piece], black_pieces: Sequence[Piece],
                   player_turn: bool) -> None:
        """Fill the possible and danger moves along rows, columns and diagonals."""
        self._calc_sliding_moves(white_pieces, black_pieces, player_turn)