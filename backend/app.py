import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from engine import evaluate_position
from explain import (
    describe_best_move,
    describe_line,
    describe_move,
    describe_pawn_structure,
    describe_square_control,
    summarize_evaluation,
)
from features import analyze_pawn_structure, analyze_square_control, load_board, parse_move
from schemas import (
    EvaluateRequest,
    LineRequest,
    MoveRequest,
    PawnsRequest,
    ReportResponse,
    SquareRequest,
)
from settings import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Chess Position Commentary", version="0.3.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origins] if settings.cors_origins != "*" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.post("/pawns", response_model=ReportResponse)
def pawns(req: PawnsRequest):
    try:
        board = load_board(req.position)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    structure = analyze_pawn_structure(board, passed_rule=req.passed_rule)
    return ReportResponse(ok=True, text=describe_pawn_structure(structure), details=structure)


@app.post("/square", response_model=ReportResponse)
def square(req: SquareRequest):
    try:
        board = load_board(req.position)
        report = analyze_square_control(board, req.square)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReportResponse(ok=True, text=describe_square_control(report), details=dict(report))


@app.post("/move", response_model=ReportResponse)
def move(req: MoveRequest):
    try:
        board = load_board(req.position, require_kings=True)
        mv = parse_move(board, req.move)
        text = describe_move(board, mv)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReportResponse(ok=True, text=text, details={"san": board.san(mv), "uci": mv.uci()})


@app.post("/line", response_model=ReportResponse)
def line(req: LineRequest):
    try:
        board = load_board(req.position, require_kings=True)
        lines = describe_line(board, req.moves)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReportResponse(ok=True, text="\n".join(lines), details={"lines": lines})


@app.post("/evaluate", response_model=ReportResponse)
def evaluate(req: EvaluateRequest):
    try:
        board = load_board(req.position, require_kings=True)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result = evaluate_position(board.fen(), depth=req.depth)
    text = summarize_evaluation(result, board)
    if result.get("ok") and result.get("bestmove"):
        text = f"{text} {describe_best_move(board, result)}"
    return ReportResponse(ok=bool(result.get("ok")), text=text, details=result)
