"""Engine evaluation summary utilities."""
import logging

import chess

from features import material_score

from .reason_builder import ReasonBuilder
from .templates import ADVANTAGE_THRESHOLDS, MATE_TEMPLATES, pick_line
from .utils import color_name

logger = logging.getLogger(__name__)


def advantage_band(score_pawns: float) -> str:
    """Map an evaluation to an advantage band.

    Args:
        score_pawns: The evaluation in pawns (sign is ignored).

    Returns:
        Band string: "equal", "slight", "clear", or "winning".
    """
    score_abs = abs(score_pawns)
    for limit, band in ADVANTAGE_THRESHOLDS:
        if score_abs <= limit:
            return band
    return "winning"


def _headline(score_pawns: float) -> str:
    band = advantage_band(score_pawns)
    side = "White" if score_pawns > 0 else "Black"
    return pick_line(band, side=side)


def summarize_evaluation(result: dict | None, board: chess.Board | None = None) -> str:
    """Turn an engine result into a one or two sentence summary.

    Args:
        result: Engine result from ``engine.evaluate_position``.
        board: Optional position, used to detect checkmate and to fall back
            to the material balance when no engine result is available.

    Returns:
        Human-readable evaluation text.
    """
    if board is not None and board.is_checkmate():
        return MATE_TEMPLATES["mated"].format(side=color_name(board.turn))

    if not result or not result.get("ok"):
        note = ((result or {}).get("note") or "no engine result").rstrip(".")
        if board is None:
            return f"Evaluation unavailable ({note})."
        material = material_score(board)
        return f"Engine evaluation unavailable ({note}). Material balance {material:+d}. {_headline(material)}"

    reasons = ReasonBuilder()
    mate_in = result.get("mate_in")
    cp = result.get("score_centipawn")
    if mate_in is not None and mate_in != 0:
        side = "White" if mate_in > 0 else "Black"
        reasons.add(MATE_TEMPLATES["mate_in"].format(side=side, n=abs(mate_in)))
    elif cp is not None:
        pawns = cp / 100.0
        reasons.add(f"Evaluation {pawns:+.2f}. {_headline(pawns)}")
    else:
        logger.warning("Engine result has neither a score nor a mate: %s", result)
        reasons.add("The engine returned no score.")

    if result.get("depth"):
        reasons.add(f"Depth {result['depth']}.")
    return reasons.to_string()


def _uci_to_san(board: chess.Board, uci: str | None) -> str | None:
    """Convert an engine move to SAN; return the raw text if it is not legal here."""
    if not uci:
        return None
    try:
        move = chess.Move.from_uci(uci)
    except ValueError:
        logger.warning("Engine move %r is not valid UCI", uci)
        return uci
    if move not in board.legal_moves:
        logger.warning("Engine move %s is not legal in %s", uci, board.fen())
        return uci
    return board.san(move)


def describe_best_move(board: chess.Board, result: dict | None) -> str:
    """Describe the engine's best move and expected reply (ponder move).

    Args:
        board: The position the engine analyzed.
        result: Engine result with ``bestmove`` and optional ``ponder``.

    Returns:
        Text such as "Best move for White: Nf3. Expected reply: d5."
    """
    if not result or not result.get("ok") or not result.get("bestmove"):
        return "No best move available."

    mover = color_name(board.turn)
    reasons = ReasonBuilder()
    best_san = _uci_to_san(board, result["bestmove"])
    reasons.add(f"Best move for {mover}: {best_san}.")

    ponder = result.get("ponder")
    if ponder:
        after = board.copy(stack=False)
        try:
            after.push_uci(result["bestmove"])
        except ValueError:
            # Cannot replay an illegal best move; show the reply as given.
            reasons.add(f"Expected reply: {ponder}.")
        else:
            reasons.add(f"Expected reply: {_uci_to_san(after, ponder)}.")
    return reasons.to_string()
