"""Utility functions for position commentary."""

import chess


def describe_piece(piece: chess.Piece | int) -> str:
    """Get a human-readable name for a chess piece.

    Args:
        piece: The chess piece, or a bare piece type, to describe.

    Returns:
        Capitalized piece name (e.g., "Knight", "Queen").
    """
    names = {
        chess.PAWN: "Pawn",
        chess.KNIGHT: "Knight",
        chess.BISHOP: "Bishop",
        chess.ROOK: "Rook",
        chess.QUEEN: "Queen",
        chess.KING: "King",
    }
    piece_type = piece.piece_type if isinstance(piece, chess.Piece) else piece
    return names.get(piece_type, "Piece")


def color_name(color: chess.Color) -> str:
    """Return "White" or "Black"."""
    return "White" if color == chess.WHITE else "Black"
