"""Text reports for pawn structure and square control."""

from features import ControlReport, PawnFeatures

from .reason_builder import ReasonBuilder
from .templates import CONTROL_TEMPLATES, PAWN_TEMPLATES, join_squares


def _describe_side(side: str, features: PawnFeatures) -> str:
    if not features["positions"]:
        return PAWN_TEMPLATES["none"].format(side=side)

    sentences = ReasonBuilder()
    sentences.add(PAWN_TEMPLATES["positions"].format(side=side, squares=join_squares(features["positions"])))
    for key in ("doubled", "isolated", "passed"):
        sentences.add(PAWN_TEMPLATES[key].format(squares=join_squares(features[key])))
    return sentences.to_string()


def describe_pawn_structure(structure: dict[str, PawnFeatures]) -> str:
    """One line per side listing its pawns and their weaknesses/strengths."""
    return "\n".join(
        _describe_side(side.capitalize(), structure[side]) for side in ("white", "black")
    )


def describe_square_control(report: ControlReport) -> str:
    """Summarize a ControlReport: occupant, attackers, defenders and verdict."""
    square = report["square"]
    sentences = ReasonBuilder()

    if report["occupant"] == "empty":
        sentences.add(CONTROL_TEMPLATES["empty"].format(square=square))
    else:
        sentences.add(CONTROL_TEMPLATES["occupied"].format(square=square, occupant=report["occupant"]))

    if not report["attackers"] and not report["defenders"]:
        sentences.add(CONTROL_TEMPLATES["unattacked"].format(square=square))
        return sentences.to_string()

    if report["attackers"]:
        sentences.add(CONTROL_TEMPLATES["attackers"].format(pieces=", ".join(report["attackers"])))
    if report["defenders"]:
        sentences.add(CONTROL_TEMPLATES["defenders"].format(pieces=", ".join(report["defenders"])))
    sentences.add(CONTROL_TEMPLATES["scores"].format(white=report["white_score"], black=report["black_score"]))

    if report["white_score"] > report["black_score"]:
        sentences.add(CONTROL_TEMPLATES["winning"].format(side="White", square=square))
    elif report["black_score"] > report["white_score"]:
        sentences.add(CONTROL_TEMPLATES["winning"].format(side="Black", square=square))
    else:
        sentences.add(CONTROL_TEMPLATES["even"])
    return sentences.to_string()
