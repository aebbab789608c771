import argparse
import logging
import sys

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
from settings import settings


def _cmd_pawns(args) -> None:
    board = load_board(args.position)
    print(describe_pawn_structure(analyze_pawn_structure(board, passed_rule=args.passed_rule)))


def _cmd_square(args) -> None:
    board = load_board(args.position)
    print(describe_square_control(analyze_square_control(board, args.square)))


def _cmd_move(args) -> None:
    board = load_board(args.position, require_kings=True)
    print(describe_move(board, parse_move(board, args.move)))


def _cmd_line(args) -> None:
    board = load_board(args.position, require_kings=True)
    for line in describe_line(board, args.moves):
        print(line)


def _cmd_eval(args) -> None:
    board = load_board(args.position, require_kings=True)
    result = evaluate_position(board.fen(), depth=args.depth)
    print(summarize_evaluation(result, board))
    if result.get("ok"):
        print(describe_best_move(board, result))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Chess Position Commentary (CLI)")
    sub = p.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str, handler):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("--position", required=True, help="FEN string or PGN text")
        sp.set_defaults(handler=handler)
        return sp

    sp = add("pawns", "Report doubled, isolated and passed pawns", _cmd_pawns)
    sp.add_argument("--passed-rule", choices=["file", "ahead"], default="file",
                    help="'file': no enemy pawn on the file; 'ahead': none in front")

    sp = add("square", "Report attackers and defenders of a square", _cmd_square)
    sp.add_argument("--square", required=True, help="Square in algebraic notation (e.g., e4)")

    sp = add("move", "Describe a move", _cmd_move)
    sp.add_argument("--move", required=True, help="Move in SAN (e.g., Nf3) or UCI (e.g., g1f3)")

    sp = add("line", "Comment on a line of moves", _cmd_line)
    sp.add_argument("moves", nargs="+", help="Moves in SAN or UCI")

    sp = add("eval", "Evaluate the position with the remote engine", _cmd_eval)
    sp.add_argument("--depth", type=int, default=None, help="Search depth")
    return p


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
