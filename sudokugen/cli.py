"""Command-line interface for the Sudoku puzzle generator."""

import argparse
import json
import logging
import os
import sys

from .config import GeneratorConfig
from .core.board import SudokuBoard
from .core.validator import check_entries, mismatched_cells
from .exceptions import SudokuGenError
from .generator import Difficulty, SudokuGenerator
from .generator.stats import profile_generation, summarize

DIFFICULTY_CHOICES = [d.value for d in Difficulty] + ["all"]


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokugen",
        description="Random Sudoku Puzzle Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 easy puzzles
  sudokugen generate --count 5 --difficulty easy

  # Check a filled grid against its solution
  sudokugen check --solution "534678912..." --entries "534678912..."

  # Measure how many attempts generation needs
  sudokugen stats --runs 200 --seed 42
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=positive_int, default=1,
        help="Number of puzzles per difficulty (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d", choices=DIFFICULTY_CHOICES, default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--max-attempts", type=int, default=None,
        help="Give up after this many solution attempts (default: unbounded)"
    )
    gen_parser.add_argument(
        "--config", "-c", type=str, default=None,
        help="JSON config file (seed, max_attempts, removals)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--folder", type=str, default=None,
        help="Also save each puzzle as a text file under this directory"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a filled grid against a solution")
    check_parser.add_argument(
        "--solution", required=True,
        help="Solution string (81 digits)"
    )
    check_parser.add_argument(
        "--entries", required=True,
        help="Player grid string (81 chars, 0 or . for empty cells)"
    )

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Measure generation attempts and timing")
    stats_parser.add_argument(
        "--runs", "-n", type=positive_int, default=100,
        help="Number of puzzles to generate (default: 100)"
    )
    stats_parser.add_argument(
        "--difficulty", "-d", choices=[d.value for d in Difficulty], default="medium",
        help="Difficulty level (default: medium)"
    )
    stats_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    stats_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write per-run stats and summary to this JSON file"
    )
    stats_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "generate":
            return cmd_generate(args)
        elif args.command == "check":
            return cmd_check(args)
        elif args.command == "stats":
            return cmd_stats(args)
    except SudokuGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 1


def cmd_generate(args) -> int:
    """Handle the generate command."""
    config = GeneratorConfig.from_file(args.config) if args.config else GeneratorConfig()
    config = config.merged(seed=args.seed, max_attempts=args.max_attempts)
    generator = SudokuGenerator.from_config(config)

    if args.difficulty == "all":
        difficulties = list(Difficulty)
    else:
        difficulties = [Difficulty(args.difficulty)]

    all_puzzles = []

    for difficulty in difficulties:
        pairs = generator.generate_batch(args.count, difficulty)

        for i, (puzzle, solution) in enumerate(pairs, 1):
            all_puzzles.append({
                "difficulty": difficulty.value,
                "index": i,
                "puzzle": puzzle.to_string(),
                "solution": solution.to_string(),
                "blanks": puzzle.count_empty(),
            })

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} ({puzzle.count_empty()} blanks) ---")
            print(puzzle)

        if args.folder:
            diff_dir = os.path.join(args.folder, difficulty.value)
            SudokuGenerator.save_to_folder(pairs, diff_dir, prefix=f"puzzle_{difficulty.value}")

    if args.folder:
        print(f"\nPuzzles saved individually in the '{args.folder}/' directory")

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return 0


def cmd_check(args) -> int:
    """Handle the check command."""
    try:
        solution = SudokuBoard.from_string(args.solution)
        entries = SudokuBoard.from_string(args.entries)
    except ValueError as e:
        print(f"Error parsing grid: {e}", file=sys.stderr)
        return 1

    if check_entries(entries, solution):
        print("✓ Solved!")
        return 0

    wrong = mismatched_cells(entries, solution)
    print(f"✗ {len(wrong)} cell(s) do not match the solution:")
    for row, col in wrong:
        print(f"  row {row + 1}, column {col + 1}")
    return 1


def cmd_stats(args) -> int:
    """Handle the stats command."""
    stats = profile_generation(
        args.runs,
        difficulty=args.difficulty,
        seed=args.seed,
        show_progress=not args.no_progress,
    )
    summary = summarize(stats)

    print("=" * 50)
    print("GENERATION STATS")
    print("=" * 50)
    print(f"Runs: {summary['runs']}")
    if stats:
        print(f"Attempts: mean {summary['mean_attempts']:.2f}, "
              f"min {summary['min_attempts']}, max {summary['max_attempts']}")
        print(f"Avg Time: {summary['mean_time_seconds'] * 1000:.2f} ms")
        print(f"Peak Memory: {summary['peak_memory_bytes'] / 1024:.2f} KB")

    if args.output:
        with open(args.output, "w") as f:
            json.dump({"summary": summary, "runs": [s.to_dict() for s in stats]}, f, indent=2)
        print(f"\nStats saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
