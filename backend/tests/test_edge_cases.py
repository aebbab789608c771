"""Tests for edge cases in move and position commentary."""

import os
import sys

import chess
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from explain import describe_line, describe_move
from features import analyze_pawn_structure, analyze_square_control, load_board


class TestEnPassant:
    """Tests for en passant capture handling."""

    def test_en_passant_capture(self):
        # Position after 1.e4 d5 2.e5 f5 - en passant available
        board = chess.Board("rnbqkbnr/ppp1p1pp/8/3pPp2/8/8/PPPP1PPP/RNBQKBNR w KQkq f6 0 3")
        text = describe_move(board, board.parse_san("exf6"))
        assert text == "White's Pawn on e5 captures en passant on f6."


class TestPromotion:
    """Tests for pawn promotion handling."""

    def test_promotion_to_queen_gives_check(self):
        board = chess.Board("8/P7/8/8/8/8/8/K6k w - - 0 1")
        text = describe_move(board, board.parse_san("a8=Q"))
        assert "promotes to a Queen" in text
        assert text.endswith("This gives check.")

    def test_underpromotion_to_knight(self):
        board = chess.Board("8/P7/8/8/8/8/8/K6k w - - 0 1")
        text = describe_move(board, board.parse_san("a8=N"))
        assert text == "White moves the Pawn from a7 to a8. The pawn promotes to a Knight."


class TestCastling:
    """Tests for castling moves."""

    def test_kingside_castling(self):
        board = chess.Board("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1")
        assert describe_move(board, board.parse_san("O-O")) == "White castles kingside."

    def test_queenside_castling(self):
        board = chess.Board("r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R b KQkq - 0 1")
        assert describe_move(board, board.parse_san("O-O-O")) == "Black castles queenside."


class TestGameTermination:
    """Tests for checkmate detection in commentary."""

    def test_checkmate_detection(self):
        board = chess.Board("7k/5Q2/7K/8/8/8/8/8 w - - 0 1")
        text = describe_move(board, board.parse_san("Qg7#"))
        assert text.endswith("Checkmate!")
        assert "This gives check." not in text


class TestPgnInput:
    """Positions given as PGN feed the same analyzers."""

    def test_line_after_pgn(self):
        board = load_board("1. e4 e5 2. Nf3 Nc6 *")
        lines = describe_line(board, ["Bb5"])
        assert lines == ["3. Bb5: White moves the Bishop from f1 to b5."]

    def test_pawn_structure_after_exchange(self):
        # Black's d-pawn is gone, so the d5 pawn has an open file.
        board = load_board("1. e4 d5 2. exd5 *")
        white = analyze_pawn_structure(board)["white"]
        assert "d5" in white["positions"]
        assert "d5" in white["passed"]
        assert white["doubled"] == []

    def test_square_control_after_pgn(self):
        board = load_board("1. e4 e5 2. Nf3 *")
        report = analyze_square_control(board, "e5")
        assert report["occupant"] == "Black Pawn"
        assert report["attackers"] == ["White Knight on f3"]


class TestWholeBoard:
    """Square control over every square never fails on a legal position."""

    @pytest.mark.parametrize("fen", [
        chess.STARTING_FEN,
        "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3",
    ])
    def test_every_square(self, fen):
        board = chess.Board(fen)
        for sq in chess.SQUARE_NAMES:
            report = analyze_square_control(board, sq)
            assert report["white_score"] >= 0
            assert report["black_score"] >= 0
            assert len(report["attackers"]) + len(report["defenders"]) == (
                len(report["white_attackers"]) + len(report["black_attackers"])
            )
