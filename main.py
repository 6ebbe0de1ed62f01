#!/usr/bin/env python3
"""
Puzzle Arcade - Main entry point.

Usage:
    python main.py sudoku [--difficulty {easy,medium,hard}] [--size {6,9}] [--solve]
    python main.py minesweeper [--difficulty {easy,medium,hard}] [--row R] [--col C]
    python main.py hint [--grid "2,2,0,0/0,4,0,0/0,0,0,0/0,0,0,0"]
    python main.py wordle GUESS [ANSWER | --daily]
    python main.py evaluate [--agent {random,expectimax}] [--games N]
    python main.py compare [--games N]
"""
import argparse
import logging
from typing import List, Optional

from puzzle_arcade.rng import seed_default_rng
from puzzle_arcade.sudoku import format_grid as format_sudoku
from puzzle_arcade.sudoku import generate_sudoku, solve_sudoku
from puzzle_arcade.minesweeper import DIFFICULTIES, MinesweeperEnv
from puzzle_arcade.game2048 import Game2048, calculate_best_move
from puzzle_arcade.game2048 import format_grid as format_2048
from puzzle_arcade.game2048.grid import validate_grid
from puzzle_arcade.wordle import LetterState, check_guess, get_daily_word
from puzzle_arcade.agents import ExpectimaxAgent, RandomAgent
from puzzle_arcade.evaluation import Evaluator


FEEDBACK_SYMBOLS = {
    LetterState.CORRECT: "G",
    LetterState.PRESENT: "Y",
    LetterState.ABSENT: ".",
}


def sudoku(args: argparse.Namespace) -> None:
    """Generate a puzzle and optionally print its solution."""
    puzzle = generate_sudoku(args.difficulty, args.size)
    clues = sum(1 for row in puzzle for value in row if value is not None)
    print(f"{args.size}x{args.size} {args.difficulty} puzzle ({clues} clues):\n")
    print(format_sudoku(puzzle))

    if args.solve:
        print("\nSolution:\n")
        print(format_sudoku(solve_sudoku(puzzle)))


def minesweeper(args: argparse.Namespace) -> None:
    """Play a first click and show the resulting board."""
    config = DIFFICULTIES[args.difficulty]
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.reset(seed=args.seed)
    row = args.row if args.row is not None else config.rows // 2
    col = args.col if args.col is not None else config.cols // 2
    _, _, _, _, info = env.step(row * config.cols + col)

    print(f"{config.rows}x{config.cols} board, {config.num_mines} mines, first click ({row}, {col}):\n")
    print(env.render())
    print(f"\nRevealed {info['revealed']} of {info['total_safe']} safe cells")


def parse_grid(text: str) -> List[List[Optional[int]]]:
    """Parse "a,b,c,d/e,f,g,h/..." into a 2048 grid (0 = empty)."""
    return [
        [int(value) or None for value in row.split(",")]
        for row in text.strip().split("/")
    ]


def hint(args: argparse.Namespace) -> None:
    """Suggest a 2048 move for a given or random board."""
    grid = parse_grid(args.grid) if args.grid else Game2048().grid
    validate_grid(grid)
    print(format_2048(grid))

    best = calculate_best_move(grid, args.depth)
    if best is None:
        print("\nNo move changes the board.")
        return
    print(f"\nBest move: {best.direction.value} (score {best.score:.1f})")
    print(f"Reason: {best.reason}")


def wordle(args: argparse.Namespace) -> None:
    """Score a guess against an answer or the daily word."""
    if args.daily or not args.answer:
        answer = get_daily_word()
    else:
        answer = args.answer
    result = check_guess(args.guess, answer)
    print(" ".join(item.letter for item in result))
    print(" ".join(FEEDBACK_SYMBOLS[item.state] for item in result))


def make_agent(name: str):
    if name == "random":
        return RandomAgent()
    return ExpectimaxAgent()


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    agent = make_agent(args.agent)
    evaluator = Evaluator(num_episodes=args.games, max_steps=args.max_steps, seed=args.seed)

    print(f"\nEvaluating {args.agent} over {args.games} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {args.agent}:")
    print(f"  Win rate: {results.win_rate:.1%}")
    print(f"  Avg score: {results.avg_score:.1f}")
    print(f"  Avg max tile: {results.avg_max_tile:.1f}")
    print(f"  Best tile: {results.best_tile}")
    print(f"  Avg steps: {results.avg_steps:.1f}")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    agents = {
        "Random": RandomAgent(args.seed),
        "Expectimax": ExpectimaxAgent(),
    }

    evaluator = Evaluator(num_episodes=args.games, max_steps=args.max_steps, seed=args.seed)
    results = evaluator.compare(agents)

    print("\n" + "=" * 58)
    print("Agent Comparison Results")
    print("=" * 58)
    print(f"{'Agent':<14} {'Win Rate':<10} {'Avg Score':<12} {'Max Tile':<10} {'Steps':<8}")
    print("-" * 58)

    for name, metrics in results.items():
        print(
            f"{name:<14} {metrics['win_rate']:>8.1%} "
            f"{metrics['avg_score']:>12.1f} "
            f"{metrics['avg_max_tile']:>10.1f} "
            f"{metrics['avg_steps']:>8.1f}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Puzzle Arcade - Sudoku, Minesweeper, 2048 and Wordle engines"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    sudoku_parser = subparsers.add_parser("sudoku", help="Generate a Sudoku puzzle")
    sudoku_parser.add_argument(
        "--difficulty", choices=["easy", "medium", "hard"], default="easy"
    )
    sudoku_parser.add_argument("--size", type=int, choices=[6, 9], default=9)
    sudoku_parser.add_argument("--solve", action="store_true", help="Print the solution")

    mines_parser = subparsers.add_parser("minesweeper", help="Show a first click")
    mines_parser.add_argument(
        "--difficulty", choices=sorted(DIFFICULTIES), default="easy"
    )
    mines_parser.add_argument("--row", type=int, default=None)
    mines_parser.add_argument("--col", type=int, default=None)

    hint_parser = subparsers.add_parser("hint", help="Suggest a 2048 move")
    hint_parser.add_argument(
        "--grid", default=None, help='Rows separated by "/", cells by ",", 0 = empty'
    )
    hint_parser.add_argument("--depth", type=int, default=2, help="Search depth")

    wordle_parser = subparsers.add_parser("wordle", help="Score a Wordle guess")
    wordle_parser.add_argument("guess")
    wordle_parser.add_argument("answer", nargs="?", default=None)
    wordle_parser.add_argument("--daily", action="store_true", help="Use today's word")

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate a 2048 agent")
    eval_parser.add_argument(
        "--agent", choices=["random", "expectimax"], default="expectimax"
    )
    eval_parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    eval_parser.add_argument("--max-steps", type=int, default=5000)

    compare_parser = subparsers.add_parser("compare", help="Compare all 2048 agents")
    compare_parser.add_argument("--games", type=int, default=10, help="Number of games per agent")
    compare_parser.add_argument("--max-steps", type=int, default=5000)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    if args.seed is not None:
        seed_default_rng(args.seed)

    commands = {
        "sudoku": sudoku,
        "minesweeper": minesweeper,
        "hint": hint,
        "wordle": wordle,
        "evaluate": evaluate,
        "compare": compare,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return
    try:
        command(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
