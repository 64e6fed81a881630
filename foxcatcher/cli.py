"""
Fox Catcher CLI - play in the terminal and inspect results.

Usage:
    foxcatcher play --player-one NAME --player-two NAME   Play a game
    foxcatcher results [--limit N]                        Show the best results
    foxcatcher serve [--host HOST] [--port PORT]          Serve the results API
"""

import argparse
import sys
from typing import Callable

from loguru import logger

from .engine_core import BOARD_SIZE, BoardState, PieceType, Position
from .log import configure_logging
from .results import DEFAULT_RESULTS_FILE, GameResult, GameResultRepository
from .session import GameLoop


RESULTS_TABLE_SIZE = 15

PIECE_SYMBOLS = {
    PieceType.FOX: "F",
    PieceType.DOG: "D",
}

PLAY_HELP = """\
Commands:
  <row> <col> <row> <col>   move the piece on the first square to the second
  hints <row> <col>         list the moves of the piece on that square
  quit                      leave the game"""


def non_negative_int(text: str) -> int:
    """argparse type for row counts."""
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Fox Catcher - one fox against four dogs",
        prog="foxcatcher",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: FOXCATCHER_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--player-one", required=True, help="Name of the player controlling the dogs")
    play_parser.add_argument("--player-two", required=True, help="Name of the player controlling the fox")
    play_parser.add_argument("--results-file", default=DEFAULT_RESULTS_FILE, help="Where results are stored")

    # Results command
    results_parser = subparsers.add_parser("results", help="Show the best results")
    results_parser.add_argument("--limit", type=non_negative_int, default=RESULTS_TABLE_SIZE, help="Number of rows")
    results_parser.add_argument("--results-file", default=DEFAULT_RESULTS_FILE, help="Where results are stored")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Serve the results API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--results-file", default=DEFAULT_RESULTS_FILE, help="Where results are stored")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "results":
        cmd_results(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play one game in the terminal."""
    if not args.player_one.strip() or not args.player_two.strip():
        print("Error: both players need a name")
        sys.exit(1)

    loop = GameLoop(args.player_one, args.player_two, results_file=args.results_file)
    run_game(loop)

    if loop.is_over:
        print()
        print(format_results(loop.repository.find_best_results(RESULTS_TABLE_SIZE)))


def cmd_results(args):
    """Print the results table."""
    try:
        repository = GameResultRepository.from_file(args.results_file)
    except (OSError, ValueError) as e:
        logger.warning("The results could not be loaded: {}", e)
        print(f"Error: cannot read {args.results_file}")
        sys.exit(1)
    print(format_results(repository.find_best_results(args.limit)))


def cmd_serve(args):
    """Run the results API."""
    import uvicorn
    from .api import create_app

    uvicorn.run(create_app(args.results_file), host=args.host, port=args.port)


# =============================================================================
# Terminal game
# =============================================================================

def run_game(
    loop: GameLoop,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
):
    """
    Read moves until the game ends or the players quit.

    read and write default to the terminal.
    """
    write(PLAY_HELP)
    while not loop.is_over:
        write("")
        write(render_board(loop.state))
        side = "dogs" if loop.state.to_move is PieceType.DOG else "fox"
        write(f"{loop.current_player} ({side}) to move, {loop.number_of_moves} move(s) so far")

        try:
            line = read("> ").strip().lower()
        except EOFError:
            return

        if line in ("quit", "q", "exit"):
            return

        words = line.split()
        if words and words[0] == "hints":
            try:
                (square,) = parse_squares(" ".join(words[1:]), count=1)
            except ValueError as e:
                write(f"Error: {e}")
                continue
            if loop.state.index_at(square) is None:
                write(f"No piece at {square}")
                continue
            loop.select_square(square)
            write(", ".join(d.name for d in loop.hints()) or "no moves")
            continue

        try:
            source, destination = parse_squares(line, count=2)
        except ValueError as e:
            write(f"Error: {e}")
            continue

        result = loop.try_move(source, destination)
        for warning in result.warnings:
            write(f"Not possible: {warning}")

    write("")
    write(render_board(loop.state))
    write(f"{loop.winner_name} wins in {loop.number_of_moves} moves!")


def parse_squares(text: str, count: int) -> list[Position]:
    """Parse count squares given as 'row col' pairs of integers."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2 * count:
        raise ValueError(f"expected {2 * count} numbers, got {len(parts)}")
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        raise ValueError("squares are given as integers") from None
    return [Position(numbers[i], numbers[i + 1]) for i in range(0, len(numbers), 2)]


def render_board(state: BoardState) -> str:
    """Draw the board as text, row 0 on top."""
    lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = state.index_at(Position(row, col))
            if index is not None:
                cells.append(PIECE_SYMBOLS[state.piece_at(index).piece_type])
            elif (row + col) % 2:
                cells.append(".")
            else:
                cells.append(" ")
        lines.append(f"{row} " + " ".join(cells))
    return "\n".join(lines)


def format_results(results: list[GameResult]) -> str:
    """Format results as a table, best first."""
    if not results:
        return "No results yet."
    header = f"{'#':>3}  {'Player one':<15} {'Player two':<15} {'Winner':<15} {'Moves':>5}  Time of play"
    lines = [header, "-" * len(header)]
    for rank, result in enumerate(results, start=1):
        lines.append(
            f"{rank:>3}  {result.player_one:<15} {result.player_two:<15} {result.winner:<15} "
            f"{result.number_of_moves:>5}  {result.time_of_play:%Y-%m-%d %H:%M}"
        )
    return "\n".join(lines)


if __name__ == "__main__":
    main()
