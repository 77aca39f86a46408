"""Chess pieces on a 64-square board and the move generation for knights and pawns.

Squares are numbered 0-63, row by row from the top of the board (black's
home rank is row 0). A position of -1 marks a captured piece.

The side lists handed to ``calc_moves`` follow a fixed layout: the white
king sits at index 4 of the white list, the black king at index 3 of the
black list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

BOARD_SQUARES = 64
OFF_BOARD = -1

WHITE_KING_INDEX = 4
BLACK_KING_INDEX = 3

_KIND_NAMES = {
    "K": "King",
    "Q": "Queen",
    "R": "Rook",
    "B": "Bishop",
    "N": "Knight",
    "P": "Pawn",
}


def _truncated_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Quotient and remainder rounded toward zero."""
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


class Piece(ABC):
    """A chess piece: its kind, side, square and the moves last computed for it."""

    def __init__(self, kind: str = "P", white: bool = True,
                 position: int = OFF_BOARD, moved: bool = False) -> None:
        self.kind = kind
        self.white = white
        self._position = position
        self.moved = moved
        self.en_passant = OFF_BOARD
        self.possible_moves: list[int] = []
        self.danger_moves: list[int] = []

    @property
    def position(self) -> int:
        """The square the piece stands on, or -1 once captured."""
        return self._position

    @position.setter
    def position(self, square: int) -> None:
        if not 0 <= square < BOARD_SQUARES:
            square = OFF_BOARD
            self.possible_moves.clear()
        self._position = square
        self.moved = True

    @abstractmethod
    def calc_moves(self, white_pieces: Sequence[Piece], black_pieces: Sequence[Piece],
                   player_turn: bool) -> None:
        """Fill ``possible_moves`` and ``danger_moves`` for the current board."""

    def describe(self) -> str:
        """A short text naming the piece and the square it stands on."""
        side = "White" if self.white else "Black"
        name = _KIND_NAMES.get(self.kind, "???")
        row, column = _truncated_divmod(self._position, 8)
        return f"{side} {name} \nto position\nX: {column + 1}  Y: {row + 1}\n"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(white={self.white!r}, "
                f"position={self._position!r})")

    @staticmethod
    def _occupied(white_pieces: Sequence[Piece], black_pieces: Sequence[Piece]) -> set[int]:
        return {piece.position for piece in (*white_pieces, *black_pieces)}

    @staticmethod
    def _target_king_square(white_pieces: Sequence[Piece], black_pieces: Sequence[Piece],
                            player_turn: bool) -> int:
        if player_turn:
            return white_pieces[WHITE_KING_INDEX].position
        return black_pieces[BLACK_KING_INDEX].position

    def _mark_direct_danger(self, white_pieces: Sequence[Piece],
                            black_pieces: Sequence[Piece], player_turn: bool) -> None:
        """Record moves landing on the targeted king, then the piece's own square."""
        king = self._target_king_square(white_pieces, black_pieces, player_turn)
        self.danger_moves = [move for move in self.possible_moves if move == king]
        self.danger_moves.append(self._position)


class Knight(Piece):
    """A knight, jumping in an L shape."""

    def __init__(self, white: bool, position: int) -> None:
        super().__init__("N", white, position, False)

    def calc_moves(self, white_pieces: Sequence[Piece], black_pieces: Sequence[Piece],
                   player_turn: bool) -> None:
        row, column = divmod(self._position, 8)
        moves: list[int] = []

        if row != 0:
            if column >= 2:
                moves.append(self._position - 10)
            if column <= 5:
                moves.append(self._position - 6)
            if row != 1:
                if column >= 1:
                    moves.append(self._position - 17)
                if column <= 6:
                    moves.append(self._position - 15)
        if row != 7:
            if column >= 2:
                moves.append(self._position + 6)
            if column <= 5:
                moves.append(self._position + 10)
            if row != 6:
                if column >= 1:
                    moves.append(self._position + 15)
                if column <= 6:
                    moves.append(self._position + 17)

        self.possible_moves = moves
        self._mark_direct_danger(white_pieces, black_pieces, player_turn)


class Pawn(Piece):
    """A pawn: white advances toward row 0, black toward row 7."""

    def __init__(self, white: bool, position: int) -> None:
        super().__init__("P", white, position, False)

    def calc_moves(self, white_pieces: Sequence[Piece], black_pieces: Sequence[Piece],
                   player_turn: bool) -> None:
        occupied = self._occupied(white_pieces, black_pieces)
        row, column = divmod(self._position, 8)
        moves: list[int] = []

        if self.white:
            last_row, step, own_turn = 0, -8, player_turn
            left, right = -9, -7
            opponents = black_pieces
        else:
            last_row, step, own_turn = 7, 8, not player_turn
            left, right = 7, 9
            opponents = white_pieces

        if row != last_row:
            forward = self._position + step
            if forward not in occupied and own_turn:
                moves.append(forward)
                double = forward + step
                if not self.moved and double not in occupied:
                    moves.append(double)

            passant_squares = {piece.en_passant for piece in opponents
                               if piece.en_passant != OFF_BOARD}
            for offset, blocked_column in ((left, 0), (right, 7)):
                if column == blocked_column:
                    continue
                target = self._position + offset
                if not own_turn or target in occupied or target in passant_squares:
                    moves.append(target)

        self.possible_moves = moves
        self._mark_direct_danger(white_pieces, black_pieces, player_turn)