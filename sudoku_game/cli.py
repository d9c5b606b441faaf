"""Command-line interface for the Sudoku game engine."""

import argparse
import json
import logging
import sys

from tqdm import tqdm

from .config import GameConfig
from .core.board import SudokuBoard
from .core.conflicts import find_all_conflicts
from .core.validator import is_grid_complete
from .errors import SudokuError, MoveError
from .game.session import GameSession, GameState
from .generator import SudokuGenerator, Difficulty
from .scoring.score import calculate_score, format_time
from .scoring.store import JsonFileStore, ScoreRepository

DIFFICULTY_CHOICES = [d.value for d in Difficulty]

PLAY_HELP = """Commands:
  r c v     place digit v at row r, column c (1-9 each)
  r c 0     clear the cell
  n         toggle notes mode
  h         reveal a hint
  c         check for errors
  p         pause / resume
  s         show the board
  q         quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-game",
        description="Sudoku puzzle generator, checker and score keeper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 medium difficulty puzzles
  sudoku-game generate --count 5 --difficulty medium

  # Check whether a filled grid is complete
  sudoku-game check --puzzle "534678912..."

  # Play an easy game in the terminal
  sudoku-game play --difficulty easy --name Ada
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--data-dir", type=str, default=None,
        help="Directory for the score store (default: $SUDOKU_GAME_HOME or ~/.sudoku_game)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=5,
        help="Number of puzzles to generate (default: 5)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES + ["all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles and solutions (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--unique", action="store_true",
        help="Only clear cells that keep the solution unique"
    )
    gen_parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Do not print the generated boards"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a grid for conflicts and completion")
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Grid string (81 chars, 0 or . for empty cells)"
    )

    # Score command
    score_parser = subparsers.add_parser("score", help="Compute the score for a finished game")
    score_parser.add_argument("--time-ms", "-t", type=int, required=True, help="Elapsed time in milliseconds")
    score_parser.add_argument("--errors", "-e", type=int, default=0, help="Number of errors (default: 0)")
    score_parser.add_argument("--hints", type=int, default=0, help="Number of hints used (default: 0)")
    score_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES, default="easy",
        help="Difficulty level (default: easy)"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES, default="easy",
        help="Difficulty level (default: easy)"
    )
    play_parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    play_parser.add_argument("--name", type=str, default=None, help="Name for the leaderboard")

    # Leaderboard command
    board_parser = subparsers.add_parser("leaderboard", help="Show saved scores")
    board_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES + ["all"], default="all",
        help="Filter by difficulty (default: all)"
    )
    board_parser.add_argument("--limit", "-n", type=int, default=10, help="Entries to show (default: 10)")

    # Stats command
    subparsers.add_parser("stats", help="Show game statistics")

    return parser


def run(argv=None):
    """Parse arguments and run a command, returning its result."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    config = GameConfig.from_env(data_dir=args.data_dir)
    commands = {
        "generate": cmd_generate,
        "check": cmd_check,
        "score": cmd_score,
        "play": cmd_play,
        "leaderboard": cmd_leaderboard,
        "stats": cmd_stats,
    }

    try:
        return commands[args.command](args, config)
    except SudokuError as e:
        print(f"Error: {e}")
        sys.exit(1)


def main(argv=None):
    """Main entry point for the CLI."""
    run(argv)


def _repository(config: GameConfig) -> ScoreRepository:
    return ScoreRepository(JsonFileStore(config.store_path), config)


def cmd_generate(args, config):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed, ensure_unique=args.unique)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    all_puzzles = []

    for difficulty in difficulties:
        puzzles = [
            generator.generate(difficulty)
            for _ in tqdm(range(args.count), desc=f"Generating {difficulty.value}", disable=args.quiet)
        ]

        for i, puzzle in enumerate(puzzles, 1):
            puzzle_data = {"index": i, **puzzle.to_dict()}
            all_puzzles.append(puzzle_data)

            if not args.quiet:
                print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle_data['clues']} clues) ---")
                print(puzzle.puzzle)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return all_puzzles


def cmd_check(args, config):
    """Handle the check command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print(board)
    conflicts = sorted(find_all_conflicts(board))
    complete = is_grid_complete(board)

    print(f"Empty cells: {board.count_empty()}")
    if conflicts:
        cells = ", ".join(f"({r + 1},{c + 1})" for r, c in conflicts)
        print(f"✗ Conflicts: {cells}")
    else:
        print("✓ No conflicts")
    print("✓ Complete" if complete else "✗ Not complete")
    return complete


def cmd_score(args, config):
    """Handle the score command."""
    score = calculate_score(args.time_ms, args.errors, args.hints, args.difficulty)
    print(f"Time: {format_time(args.time_ms)}")
    print(f"Score: {score}")
    return score


def _print_status(session):
    print(session.grid)
    mode = "notes" if session.notes_mode else "digits"
    print(
        f"Time {format_time(session.elapsed_ms())} | Errors {session.error_count} | "
        f"Hints left {session.hints_remaining} | Mode {mode}"
    )
    if session.errors:
        print("Flagged: " + ", ".join(f"({r + 1},{c + 1})" for r, c in sorted(session.errors)))


def cmd_play(args, config, input_fn=input):
    """Handle the play command."""
    session = GameSession(
        Difficulty(args.difficulty),
        generator=SudokuGenerator(seed=args.seed),
        config=config,
    )
    session.start()
    print(PLAY_HELP)
    _print_status(session)

    while session.state is not GameState.COMPLETE:
        try:
            line = input_fn("> ").strip().lower()
        except EOFError:
            line = "q"

        if not line:
            continue
        if line == "q":
            print("Game abandoned.")
            return None

        try:
            if line == "n":
                print("Notes mode on" if session.toggle_notes_mode() else "Notes mode off")
            elif line == "h":
                pos = session.hint()
                if pos is None:
                    print("No empty cells left.")
                else:
                    print(f"Hint placed at ({pos[0] + 1},{pos[1] + 1}). Hints left: {session.hints_remaining}")
            elif line == "c":
                wrong = session.check_errors()
                print(f"{len(wrong)} wrong cell(s) flagged." if wrong else "No errors. Keep going!")
            elif line == "p":
                if session.state is GameState.PAUSED:
                    session.resume()
                    print("Resumed.")
                else:
                    session.pause()
                    print("Paused. Enter p to resume.")
                    continue
            elif line == "s":
                pass
            else:
                row, col, value = (int(part) for part in line.split())
                result = session.place(row - 1, col - 1, value or None)
                if result is not None and result.conflicts:
                    print("Conflict!")
        except MoveError as e:
            print(e)
            continue
        except ValueError:
            print(PLAY_HELP)
            continue

        _print_status(session)

    print(f"\nSolved in {format_time(session.elapsed_ms())} with score {session.score()}!")
    name = args.name or input_fn("Name for the leaderboard (blank to skip): ").strip()
    if name:
        result = session.result(name)
        _repository(config).record_completion(result)
        print(f"Saved {name}: {result.score} points")
    return session


def cmd_leaderboard(args, config):
    """Handle the leaderboard command."""
    repo = _repository(config)
    if args.difficulty == "all":
        scores = repo.get_scores()
    else:
        scores = repo.get_scores_by_difficulty(args.difficulty)

    if not scores:
        print("No scores yet.")
        return scores

    print(f"{'#':>3}  {'Name':<20} {'Difficulty':<10} {'Time':>6} {'Err':>4} {'Hint':>4} {'Score':>6}")
    print("-" * 60)
    for i, s in enumerate(scores[:args.limit], 1):
        print(
            f"{i:>3}  {s.player_name:<20} {s.difficulty:<10} {format_time(s.time):>6} "
            f"{s.errors:>4} {s.hints_used:>4} {s.score:>6}"
        )
    return scores


def cmd_stats(args, config):
    """Handle the stats command."""
    stats = _repository(config).get_game_stats()

    print("=" * 40)
    print("GAME STATISTICS")
    print("=" * 40)
    print(f"Games played:   {stats.games_played}")
    print(f"Games won:      {stats.games_won}")
    print(f"Hints used:     {stats.total_hints_used}")
    print(f"Errors:         {stats.total_errors}")
    print(f"Current streak: {stats.current_streak}")
    print(f"Longest streak: {stats.longest_streak}")
    for difficulty in Difficulty:
        best = stats.best_time.get(difficulty.value)
        avg = stats.average_time.get(difficulty.value)
        best_s = format_time(best) if best is not None else "--:--"
        avg_s = format_time(avg) if avg is not None else "--:--"
        print(f"{difficulty.value.capitalize():<8} best {best_s}  avg {avg_s}")
    return stats


if __name__ == "__main__":
    main()
