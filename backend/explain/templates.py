"""Phrase banks and thresholds for position commentary."""
import random

# Evaluation headlines, keyed by advantage band. "{side}" is the side ahead.
ADVANTAGE_BANK: dict[str, list[str]] = {
    "equal": [
        "The position is roughly equal.",
        "Neither side has a meaningful edge.",
        "The balance is holding."
    ],
    "slight": [
        "{side} is slightly better.",
        "{side} has a small edge.",
        "{side} is pressing a little."
    ],
    "clear": [
        "{side} is clearly better.",
        "{side} has a solid advantage.",
        "{side} is firmly in control."
    ],
    "winning": [
        "{side} is winning.",
        "{side} has a decisive advantage.",
        "{side} should convert from here."
    ]
}

# Upper bound (in pawns) of each band; anything above the last is "winning".
ADVANTAGE_THRESHOLDS: list[tuple[float, str]] = [
    (0.30, "equal"),
    (1.00, "slight"),
    (2.50, "clear"),
]

MATE_TEMPLATES: dict[str, str] = {
    "mate_in": "{side} has mate in {n}.",
    "mated": "{side} is checkmated.",
}

MOVE_TEMPLATES: dict[str, str] = {
    "quiet": "{mover} moves the {piece} from {from_sq} to {to_sq}.",
    "capture": "{mover}'s {piece} on {from_sq} captures the {captured} on {to_sq}.",
    "en_passant": "{mover}'s Pawn on {from_sq} captures en passant on {to_sq}.",
    "castle_kingside": "{mover} castles kingside.",
    "castle_queenside": "{mover} castles queenside.",
    "promotion": " The pawn promotes to a {promoted}.",
    "check": " This gives check.",
    "checkmate": " Checkmate!",
}

PAWN_TEMPLATES: dict[str, str] = {
    "none": "{side} has no pawns.",
    "positions": "{side} pawns: {squares}.",
    "doubled": "Doubled: {squares}.",
    "isolated": "Isolated: {squares}.",
    "passed": "Passed: {squares}.",
}

CONTROL_TEMPLATES: dict[str, str] = {
    "occupied": "{square} is occupied by a {occupant}.",
    "empty": "{square} is empty.",
    "attackers": "Attacked by: {pieces}.",
    "defenders": "Defended by: {pieces}.",
    "unattacked": "No piece bears on {square}.",
    "scores": "Control: White {white}, Black {black}.",
    "winning": "{side} is winning the fight for {square}.",
    "even": "The square is evenly contested.",
}


def pick_line(key: str, **fields: str) -> str:
    """Select a random evaluation headline for the given band.

    Args:
        key: The advantage band (e.g., "equal", "winning").
        **fields: Values substituted into the template (e.g., side="White").

    Returns:
        A formatted headline, or an "equal" one if the key is unknown.
    """
    arr = ADVANTAGE_BANK.get(key, ADVANTAGE_BANK["equal"])
    return random.choice(arr).format(**fields)


def join_squares(squares: list[str]) -> str:
    return ", ".join(squares) if squares else "none"
