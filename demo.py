#!/usr/bin/env python3
"""Watch the Expectimax agent play 2048."""
import os
import time

from puzzle_arcade.agents import ExpectimaxAgent
from puzzle_arcade.game2048 import Game2048Env


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.1, games: int = 3, depth: int = 2, max_moves: int = 3000):
    """Run demo games with visualization."""
    env = Game2048Env(render_mode="ansi")
    agent = ExpectimaxAgent(depth=depth)

    print(f"Expectimax search depth {depth}")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset()
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done and step < max_moves:
            action = agent.select_action(obs, env.get_action_mask())
            direction = agent.action_to_direction(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Move {step} ===")
            print(f"Wins so far: {wins} | Score: {info['score']}")
            print(f"Last move: {direction.value}\n")
            print(env.render())

            if done:
                if info["won"]:
                    wins += 1
                    print(f"\n*** 2048 reached! ***")
                else:
                    print(f"\n*** No moves left (max tile {info['max_tile']}) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.1, help="Delay between moves")
    parser.add_argument("--games", type=int, default=3, help="Number of games")
    parser.add_argument("--depth", type=int, default=2, help="Expectimax search depth")
    parser.add_argument("--max-moves", type=int, default=3000, help="Move limit per game")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, depth=args.depth, max_moves=args.max_moves)
