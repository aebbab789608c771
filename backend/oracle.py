"""Board queries used by the position analyzers.

The analyzers never talk to python-chess directly. They go through the
narrow ``BoardOracle`` protocol below, so a test can hand them a small
in-memory fake instead of a full board.
"""
from typing import Protocol

import chess


class InvalidSquareError(ValueError):
    """Raised when a square label cannot be resolved to a board square."""


class BoardOracle(Protocol):
    """Read-only view of a position."""

    def piece_at(self, square: int) -> chess.Piece | None: ...

    def pawns_of(self, color: chess.Color) -> list[int]: ...

    def file_of(self, square: int) -> int: ...

    def rank_of(self, square: int) -> int: ...

    def square_from_file_rank(self, file_idx: int, rank_idx: int) -> int: ...

    def attackers_of(self, square: int, color: chess.Color) -> list[int]: ...

    def square_to_label(self, square: int) -> str: ...

    def label_to_square(self, label: str) -> int: ...


class ChessBoardOracle:
    """BoardOracle backed by a python-chess board.

    The board is copied on construction; later changes to the caller's
    board do not leak into an analysis in progress.
    """

    def __init__(self, board: chess.Board) -> None:
        self._board = board.copy(stack=False)

    @property
    def board(self) -> chess.Board:
        return self._board

    def piece_at(self, square: int) -> chess.Piece | None:
        return self._board.piece_at(square)

    def pawns_of(self, color: chess.Color) -> list[int]:
        return list(self._board.pieces(chess.PAWN, color))

    def file_of(self, square: int) -> int:
        return chess.square_file(square)

    def rank_of(self, square: int) -> int:
        return chess.square_rank(square)

    def square_from_file_rank(self, file_idx: int, rank_idx: int) -> int:
        return chess.square(file_idx, rank_idx)

    def attackers_of(self, square: int, color: chess.Color) -> list[int]:
        return list(self._board.attackers(color, square))

    def square_to_label(self, square: int) -> str:
        return chess.square_name(square)

    def label_to_square(self, label: str) -> int:
        return parse_square(label)


def parse_square(label: str) -> int:
    """Convert algebraic notation ("e4") to a square index.

    Raises:
        InvalidSquareError: If the label is not one of a1..h8.
    """
    if not isinstance(label, str):
        raise InvalidSquareError(f"Invalid square: {label!r}")
    try:
        return chess.parse_square(label.strip().lower())
    except ValueError as e:
        raise InvalidSquareError(f"Invalid square: '{label}'. Use algebraic notation such as e4.") from e


def as_oracle(position: "BoardOracle | chess.Board") -> BoardOracle:
    """Wrap a python-chess board; pass any other oracle through untouched."""
    if isinstance(position, chess.Board):
        return ChessBoardOracle(position)
    return position
