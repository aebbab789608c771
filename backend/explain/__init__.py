"""Chess position commentary module.

This module turns move, engine and analyzer data into natural language:
move descriptions, line commentary, evaluation and best-move summaries,
pawn-structure reports and square-control reports.
"""
from .core import describe_move, describe_line
from .templates import ADVANTAGE_BANK, ADVANTAGE_THRESHOLDS, pick_line
from .engine_summary import advantage_band, summarize_evaluation, describe_best_move
from .reports import describe_pawn_structure, describe_square_control
from .reason_builder import ReasonBuilder
from .utils import describe_piece, color_name

__all__ = [
    "describe_move",
    "describe_line",
    "ADVANTAGE_BANK",
    "ADVANTAGE_THRESHOLDS",
    "pick_line",
    "advantage_band",
    "summarize_evaluation",
    "describe_best_move",
    "describe_pawn_structure",
    "describe_square_control",
    "ReasonBuilder",
    "describe_piece",
    "color_name",
]
