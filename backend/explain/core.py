"""Move and line commentary."""

import chess

from features import parse_move

from .templates import MOVE_TEMPLATES
from .utils import color_name, describe_piece


def describe_move(board: chess.Board, move: chess.Move) -> str:
    """Describe a single legal move in plain English.

    Args:
        board: The position before the move. It is not modified.
        move: A legal move in that position.

    Returns:
        A sentence naming the mover, the piece and its squares, followed by
        promotion, check and checkmate remarks where they apply.

    Raises:
        ValueError: If the move is not legal in the position.
    """
    if move not in board.legal_moves:
        raise ValueError(f"Illegal move: {move.uci()} in {board.fen()}")

    mover = color_name(board.turn)
    piece = board.piece_at(move.from_square)
    fields = {
        "mover": mover,
        "piece": describe_piece(piece) if piece else "piece",
        "from_sq": chess.square_name(move.from_square),
        "to_sq": chess.square_name(move.to_square),
    }

    if board.is_castling(move):
        key = "castle_kingside" if board.is_kingside_castling(move) else "castle_queenside"
        text = MOVE_TEMPLATES[key].format(**fields)
    elif board.is_en_passant(move):
        text = MOVE_TEMPLATES["en_passant"].format(**fields)
    elif board.is_capture(move):
        captured = board.piece_at(move.to_square)
        text = MOVE_TEMPLATES["capture"].format(captured=describe_piece(captured), **fields)
    else:
        text = MOVE_TEMPLATES["quiet"].format(**fields)

    if move.promotion:
        text += MOVE_TEMPLATES["promotion"].format(promoted=describe_piece(move.promotion))

    after = board.copy(stack=False)
    after.push(move)
    if after.is_checkmate():
        text += MOVE_TEMPLATES["checkmate"]
    elif after.is_check():
        text += MOVE_TEMPLATES["check"]
    return text


def describe_line(board: chess.Board, moves: list[str]) -> list[str]:
    """Comment on a sequence of moves, one line per ply.

    Moves may be SAN or UCI. Lines are numbered the way a score sheet is:
    "1. e4: ..." for White and "1... e5: ..." for Black.

    Raises:
        ValueError: If a move cannot be played; the message names the ply.
    """
    work = board.copy(stack=False)
    lines: list[str] = []
    for ply, move_str in enumerate(moves, start=1):
        try:
            move = parse_move(work, move_str)
        except ValueError as e:
            raise ValueError(f"Ply {ply}: {e}") from e
        if move not in work.legal_moves:
            raise ValueError(f"Ply {ply}: Illegal move '{move_str}'.")

        number = f"{work.fullmove_number}." if work.turn == chess.WHITE else f"{work.fullmove_number}..."
        san = work.san(move)
        lines.append(f"{number} {san}: {describe_move(work, move)}")
        work.push(move)
    return lines
