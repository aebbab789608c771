"""Tests for the engine module."""
import os
import sys
import pytest
import requests
from unittest.mock import patch, MagicMock

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from engine import evaluate_position, is_configured, parse_evaluation

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

SAMPLE_RESPONSE = {
    "text": "Move e2 → e4 (e4): [0.31]. The game is balanced.",
    "eval": 0.31,
    "centipawns": "31",
    "mate": None,
    "move": "e2e4",
    "san": "e4",
    "depth": 12,
    "winChance": 52.8,
    "continuationArr": ["e2e4", "e7e5", "g1f3"],
    "type": "bestmove",
}


def _response(json_data=None, status_error=None, json_error=None):
    resp = MagicMock()
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp


class TestEngineConfiguration:
    """Tests for engine configuration checks."""

    def test_disabled(self):
        with patch('engine.settings') as mock_settings:
            mock_settings.chess_api_enabled = False
            mock_settings.chess_api_url = "https://chess-api.com/v1"
            assert is_configured() is False

    def test_empty_url(self):
        with patch('engine.settings') as mock_settings:
            mock_settings.chess_api_enabled = True
            mock_settings.chess_api_url = ""
            assert is_configured() is False

    def test_enabled(self):
        with patch('engine.settings') as mock_settings:
            mock_settings.chess_api_enabled = True
            mock_settings.chess_api_url = "https://chess-api.com/v1"
            assert is_configured() is True


class TestParseEvaluation:
    """Tests for response normalization."""

    def test_centipawn_response(self):
        result = parse_evaluation(SAMPLE_RESPONSE)
        assert result["ok"] is True
        assert result["score_centipawn"] == 31
        assert result["mate_in"] is None
        assert result["bestmove"] == "e2e4"
        assert result["ponder"] == "e7e5"
        assert result["continuation"] == ["e2e4", "e7e5", "g1f3"]
        assert result["depth"] == 12
        assert result["win_chance"] == 52.8

    def test_eval_fallback_when_centipawns_missing(self):
        data = dict(SAMPLE_RESPONSE, centipawns=None, eval=-1.25)
        assert parse_evaluation(data)["score_centipawn"] == -125

    def test_mate_overrides_score(self):
        data = dict(SAMPLE_RESPONSE, mate=-2)
        result = parse_evaluation(data)
        assert result["mate_in"] == -2
        assert result["score_centipawn"] is None

    def test_no_continuation_means_no_ponder(self):
        data = dict(SAMPLE_RESPONSE, continuationArr=None)
        result = parse_evaluation(data)
        assert result["bestmove"] == "e2e4"
        assert result["ponder"] is None

    def test_error_response(self):
        result = parse_evaluation({"type": "error", "text": "Invalid FEN"})
        assert result["ok"] is False
        assert result["note"] == "Invalid FEN"

    def test_non_dict_response(self):
        assert parse_evaluation(["unexpected"])["ok"] is False


class TestEvaluatePosition:
    """Tests for the remote evaluation call."""

    def test_returns_error_when_not_configured(self):
        with patch('engine.is_configured', return_value=False):
            with patch('engine.requests.post') as mock_post:
                result = evaluate_position(START_FEN)
                assert result["ok"] is False
                assert "disabled" in result["note"].lower()
                mock_post.assert_not_called()

    def test_successful_call(self):
        with patch('engine.is_configured', return_value=True):
            with patch('engine.requests.post', return_value=_response(SAMPLE_RESPONSE)) as mock_post:
                result = evaluate_position(START_FEN, depth=8)
        assert result["ok"] is True
        assert result["bestmove"] == "e2e4"
        kwargs = mock_post.call_args.kwargs
        assert kwargs["json"] == {"fen": START_FEN, "depth": 8}
        assert "timeout" in kwargs

    def test_default_depth_from_settings(self):
        with patch('engine.is_configured', return_value=True):
            with patch('engine.settings') as mock_settings:
                mock_settings.chess_api_depth = 14
                mock_settings.chess_api_timeout = 5.0
                mock_settings.chess_api_url = "https://example.test/v1"
                with patch('engine.requests.post', return_value=_response(SAMPLE_RESPONSE)) as mock_post:
                    evaluate_position(START_FEN)
        assert mock_post.call_args.args[0] == "https://example.test/v1"
        assert mock_post.call_args.kwargs["json"]["depth"] == 14

    def test_timeout(self):
        with patch('engine.is_configured', return_value=True):
            with patch('engine.requests.post', side_effect=requests.exceptions.Timeout()):
                result = evaluate_position(START_FEN)
        assert result["ok"] is False
        assert "timed out" in result["note"]

    def test_connection_error(self):
        with patch('engine.is_configured', return_value=True):
            with patch('engine.requests.post', side_effect=requests.exceptions.ConnectionError("down")):
                result = evaluate_position(START_FEN)
        assert result["ok"] is False
        assert "Could not reach" in result["note"]

    def test_http_error(self):
        error = requests.exceptions.HTTPError("429 Too Many Requests")
        with patch('engine.is_configured', return_value=True):
            with patch('engine.requests.post', return_value=_response(status_error=error)):
                result = evaluate_position(START_FEN)
        assert result["ok"] is False
        assert "429" in result["note"]

    def test_invalid_json(self):
        with patch('engine.is_configured', return_value=True):
            with patch('engine.requests.post', return_value=_response(json_error=ValueError("no json"))):
                result = evaluate_position(START_FEN)
        assert result["ok"] is False
        assert "invalid JSON" in result["note"]

    def test_api_error_payload(self):
        with patch('engine.is_configured', return_value=True):
            with patch('engine.requests.post', return_value=_response({"type": "error", "text": "bad fen"})):
                result = evaluate_position(START_FEN)
        assert result == {"ok": False, "note": "bad fen"}
