from typing import Literal

from pydantic import BaseModel, Field


class PositionRequest(BaseModel):
    position: str = Field(..., description="FEN string or PGN text of the position")


class PawnsRequest(PositionRequest):
    passed_rule: Literal["file", "ahead"] = Field("file", description="How passed pawns are judged")


class SquareRequest(PositionRequest):
    square: str = Field(..., description="Target square in algebraic notation (e.g., 'e4')")


class MoveRequest(PositionRequest):
    move: str = Field(..., description="Move in SAN or UCI (e.g., 'Nf3' or 'g1f3')")


class LineRequest(PositionRequest):
    moves: list[str] = Field(..., description="Moves in SAN or UCI, played in order")


class EvaluateRequest(PositionRequest):
    depth: int | None = Field(None, ge=1, le=30, description="Search depth for the remote engine")


class ReportResponse(BaseModel):
    ok: bool
    text: str
    details: dict
