import logging
from typing import Optional

import requests

from settings import settings

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    """Check if the remote evaluation service is enabled and has a URL."""
    return bool(settings.chess_api_enabled and settings.chess_api_url)


def _to_int(value) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def parse_evaluation(data: dict) -> dict:
    """Normalize a chess-api.com response into the engine result shape.

    Scores are from White's point of view. ``centipawns`` is preferred;
    ``eval`` (in pawns) is the fallback. A non-null ``mate`` overrides both.
    """
    if not isinstance(data, dict):
        return {"ok": False, "note": "Unexpected response from evaluation service."}
    if data.get("type") == "error" or ("error" in data and "move" not in data):
        note = data.get("text") or data.get("error") or "Evaluation service reported an error."
        return {"ok": False, "note": str(note)}

    mate_in = _to_int(data.get("mate"))
    score_centipawn = None
    if mate_in is None:
        score_centipawn = _to_int(data.get("centipawns"))
        if score_centipawn is None and data.get("eval") is not None:
            try:
                score_centipawn = round(float(data["eval"]) * 100)
            except (TypeError, ValueError):
                score_centipawn = None

    continuation = [m for m in (data.get("continuationArr") or []) if isinstance(m, str)]
    bestmove = data.get("move") or (continuation[0] if continuation else None)
    ponder = continuation[1] if len(continuation) >= 2 else None

    return {
        "ok": True,
        "score_centipawn": score_centipawn,
        "mate_in": mate_in,
        "bestmove": bestmove,
        "ponder": ponder,
        "continuation": continuation,
        "depth": _to_int(data.get("depth")),
        "win_chance": data.get("winChance"),
    }


def evaluate_position(fen: str, depth: Optional[int] = None) -> dict:
    """Evaluate a position with the remote evaluation service.

    Args:
        fen: The FEN string of the position to evaluate.
        depth: Search depth; defaults to the configured depth.

    Returns:
        A dict with evaluation results or error information. Failures are
        reported with ``ok`` set to False instead of raising.
    """
    if not is_configured():
        return {"ok": False, "note": "Remote evaluation disabled."}

    d = depth or settings.chess_api_depth
    try:
        response = requests.post(
            settings.chess_api_url,
            json={"fen": fen, "depth": d},
            timeout=settings.chess_api_timeout,
        )
        response.raise_for_status()
    except requests.exceptions.Timeout:
        logger.warning("Evaluation request timed out after %ss", settings.chess_api_timeout)
        return {"ok": False, "note": f"Evaluation timed out after {settings.chess_api_timeout}s"}
    except requests.exceptions.ConnectionError as e:
        logger.warning("Could not reach evaluation service: %s", e)
        return {"ok": False, "note": "Could not reach evaluation service."}
    except requests.exceptions.HTTPError as e:
        logger.warning("Evaluation service returned an error: %s", e)
        return {"ok": False, "note": f"Evaluation service error: {e}"}
    except requests.exceptions.RequestException as e:
        logger.warning("Evaluation request failed: %s", e)
        return {"ok": False, "note": f"Evaluation request failed: {e}"}

    try:
        data = response.json()
    except ValueError:
        logger.warning("Evaluation service returned invalid JSON")
        return {"ok": False, "note": "Evaluation service returned invalid JSON."}

    result = parse_evaluation(data)
    if result["ok"]:
        logger.debug("Evaluated %s at depth %s: %s", fen, d, result)
    else:
        logger.warning("Evaluation failed for %s: %s", fen, result["note"])
    return result
