import io
import logging
from typing import Literal, TypedDict

import chess
import chess.pgn

from chess import PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING

from oracle import BoardOracle, InvalidSquareError, as_oracle

logger = logging.getLogger(__name__)

# Standard piece values. The king takes part in control but adds nothing.
PIECE_VALUES: dict[int, int] = {PAWN: 1, KNIGHT: 3, BISHOP: 3, ROOK: 5, QUEEN: 9, KING: 0}

COLOR_KEYS = {chess.WHITE: "white", chess.BLACK: "black"}

PassedRule = Literal["file", "ahead"]


class PawnFeatures(TypedDict):
    """Classified pawns of one color, as square labels."""

    positions: list[str]
    doubled: list[str]
    isolated: list[str]
    passed: list[str]


class ControlReport(TypedDict):
    """Who occupies a square and which pieces bear on it."""

    square: str
    occupant: str
    white_attackers: list[str]
    black_attackers: list[str]
    white_score: int
    black_score: int
    attackers: list[str]
    defenders: list[str]
    comparison: str


def validate_fen(fen: str) -> tuple[bool, str | None]:
    """Validate a FEN string for correctness.

    Checks that the FEN is parseable by python-chess and that both kings
    are present on the board.

    Args:
        fen: The FEN string to validate.

    Returns:
        A tuple of (is_valid, error_message). If valid, error_message is None.
    """
    try:
        board = chess.Board(fen)
    except ValueError as e:
        return False, f"Invalid FEN format: {e}"

    if board.king(chess.WHITE) is None:
        return False, "Invalid position: White king is missing"
    if board.king(chess.BLACK) is None:
        return False, "Invalid position: Black king is missing"

    return True, None


def load_board(text: str, require_kings: bool = False) -> chess.Board:
    """Build a board from either a FEN string or PGN text.

    FEN is tried first. Anything that does not parse as FEN is read as a
    PGN game and the position after its last mainline move is returned.

    Args:
        text: FEN or PGN.
        require_kings: Reject positions missing a king (needed for move play).

    Raises:
        ValueError: If the text is neither a FEN nor a readable PGN game.
    """
    if not text or not text.strip():
        raise ValueError("Empty position. Provide a FEN string or PGN text.")
    text = text.strip()

    try:
        board = chess.Board(text)
        logger.debug("Position detected as FEN")
    except ValueError:
        board = _board_from_pgn(text)
        logger.debug("Position detected as PGN")

    if require_kings:
        valid, error = validate_fen(board.fen())
        if not valid:
            raise ValueError(error)
    return board


def _board_from_pgn(text: str) -> chess.Board:
    game = chess.pgn.read_game(io.StringIO(text))
    if game is None or game.errors:
        raise ValueError("Could not read position: input is neither a valid FEN nor PGN.")
    has_moves = game.next() is not None
    if not has_moves and "[" not in text:
        raise ValueError("Could not read position: input is neither a valid FEN nor PGN.")
    return game.end().board()


def parse_move(board: chess.Board, move_str: str) -> chess.Move:
    """ Handle both Standard Algebraic Notation(SAN) first, then Universal Chess Interface(UCI).
    SAN for human convenience (CLI and tests), UCI for compatibility with engines and APIs.
    """
    try:
        move = board.parse_san(move_str)
        return move
    except ValueError:
        pass
    try:
        move = board.parse_uci(move_str)
        return move
    except ValueError as e:
        raise ValueError(f"Invalid move: '{move_str}'. Provide SAN (e.g., Nf3) or UCI (e.g., g1f3).") from e


def material_score(board: chess.Board) -> int:
    """Compute material score from White's perspective. Positive = White ahead, Negative = Black ahead."""
    score = 0
    for piece_type, val in PIECE_VALUES.items():
        score += len(board.pieces(piece_type, chess.WHITE)) * val
        score -= len(board.pieces(piece_type, chess.BLACK)) * val
    return score


def piece_label(piece: chess.Piece, with_color: bool = False) -> str:
    """Name a piece for reports, e.g. "Knight" or "Black Knight"."""
    name = chess.piece_name(piece.piece_type).capitalize()
    if with_color:
        return f"{COLOR_KEYS[piece.color].capitalize()} {name}"
    return name


# ------------ Pawn structure ------------ #

def _file_counts(oracle: BoardOracle, pawns: list[int]) -> list[int]:
    counts = [0] * 8
    for sq in pawns:
        counts[oracle.file_of(sq)] += 1
    return counts


def _is_passed(
    oracle: BoardOracle,
    square: int,
    color: chess.Color,
    enemy_pawns: list[int],
    rule: PassedRule,
) -> bool:
    file_idx = oracle.file_of(square)
    rank_idx = oracle.rank_of(square)
    for enemy_sq in enemy_pawns:
        if oracle.file_of(enemy_sq) != file_idx:
            continue
        if rule == "file":
            return False
        enemy_rank = oracle.rank_of(enemy_sq)
        ahead = enemy_rank > rank_idx if color == chess.WHITE else enemy_rank < rank_idx
        if ahead:
            return False
    return True


def classify_pawns(oracle: BoardOracle, color: chess.Color, passed_rule: PassedRule = "file") -> PawnFeatures:
    """Classify every pawn of one color as doubled, isolated and/or passed.

    The three labels are independent: a pawn can be doubled and isolated at
    once (two pawns alone on one file), and either may also be passed.
    """
    pawns = oracle.pawns_of(color)
    enemy_pawns = oracle.pawns_of(not color)
    counts = _file_counts(oracle, pawns)

    features: PawnFeatures = {"positions": [], "doubled": [], "isolated": [], "passed": []}
    for sq in pawns:
        label = oracle.square_to_label(sq)
        file_idx = oracle.file_of(sq)
        features["positions"].append(label)

        if counts[file_idx] > 1:
            features["doubled"].append(label)

        neighbours = [f for f in (file_idx - 1, file_idx + 1) if 0 <= f <= 7]
        if not any(counts[f] for f in neighbours):
            features["isolated"].append(label)

        if _is_passed(oracle, sq, color, enemy_pawns, passed_rule):
            features["passed"].append(label)

    return features


def analyze_pawn_structure(
    position: BoardOracle | chess.Board, passed_rule: PassedRule = "file"
) -> dict[str, PawnFeatures]:
    """Analyze pawn structure for both sides.

    Passed pawns are judged on their own file only. With the default
    ``"file"`` rule a pawn is passed when no enemy pawn stands anywhere on
    its file; ``"ahead"`` only counts enemy pawns in front of it.

    Raises:
        ValueError: On an unknown passed_rule.
    """
    if passed_rule not in ("file", "ahead"):
        raise ValueError(f"Unknown passed pawn rule: '{passed_rule}'. Use 'file' or 'ahead'.")
    oracle = as_oracle(position)
    return {
        "white": classify_pawns(oracle, chess.WHITE, passed_rule),
        "black": classify_pawns(oracle, chess.BLACK, passed_rule),
    }


# ------------ Square control ------------ #

def analyze_square_control(position: BoardOracle | chess.Board, square: str | int) -> ControlReport:
    """Report the occupant of a square and the material bearing on it.

    Every piece attacking the square adds its value to its side's control
    score. Pieces of the occupant's color count as defenders, everything
    else (including both sides on an empty square) as attackers.

    Raises:
        InvalidSquareError: If the square label is malformed.
    """
    oracle = as_oracle(position)
    if isinstance(square, str):
        target = oracle.label_to_square(square)
    elif square in chess.SQUARES:
        target = square
    else:
        raise InvalidSquareError(f"Invalid square: {square!r}")
    target_label = oracle.square_to_label(target)

    occupant = oracle.piece_at(target)
    report: ControlReport = {
        "square": target_label,
        "occupant": piece_label(occupant, with_color=True) if occupant else "empty",
        "white_attackers": [],
        "black_attackers": [],
        "white_score": 0,
        "black_score": 0,
        "attackers": [],
        "defenders": [],
        "comparison": "",
    }

    for color in (chess.WHITE, chess.BLACK):
        key = COLOR_KEYS[color]
        for sq in oracle.attackers_of(target, color):
            piece = oracle.piece_at(sq)
            if piece is None:
                continue
            where = oracle.square_to_label(sq)
            report[f"{key}_attackers"].append(f"{piece_label(piece)} on {where}")
            report[f"{key}_score"] += PIECE_VALUES[piece.piece_type]

            described = f"{piece_label(piece, with_color=True)} on {where}"
            if occupant is not None and occupant.color == color:
                report["defenders"].append(described)
            else:
                report["attackers"].append(described)

    if report["white_score"] > report["black_score"]:
        report["comparison"] = "White is winning"
    elif report["black_score"] > report["white_score"]:
        report["comparison"] = "Black is winning"
    else:
        report["comparison"] = "evenly contested"

    return report
