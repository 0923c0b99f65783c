#!/usr/bin/env python3
"""
Evaluate machine difficulty levels by playing them against each other.
"""
import argparse
import sys
import time
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gomoku_engine.ai.move_selector import MoveSelector
from gomoku_engine.core.game import GameMode, GameSession


def parse_args():
    parser = argparse.ArgumentParser(description='Play two difficulty levels against each other')
    parser.add_argument('--level1', type=int, default=5, help='Difficulty of the first selector')
    parser.add_argument('--level2', type=int, default=1, help='Difficulty of the second selector')
    parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    parser.add_argument('--no-swap', action='store_true', help='Keep the first selector on black')
    parser.add_argument('--seed', type=int, default=42, help='Base random seed')
    return parser.parse_args()


def play_game(black, white, show_progress=False):
    """
    Play a single game between two move selectors.

    The session runs in human-vs-human mode so that it only referees;
    both sides are fed through apply_human_move.

    Args:
        black: MoveSelector playing black (goes first)
        white: MoveSelector playing white
        show_progress: Whether to print move-by-move progress

    Returns:
        int: Winner (1 for black, -1 for white, 0 for draw)
    """
    session = GameSession(mode=GameMode.HUMAN_VS_HUMAN)

    while not session.current_status().is_terminal:
        selector = black if session.current_player.value == 1 else white
        move = selector.select_move(session)
        if show_progress:
            print(f"Move {session.board.stone_count() + 1}: {session.current_player.display_name} plays {tuple(move)}")
        session.apply_human_move(*move)

    if session.game_state == 'win':
        return session.winner.value
    return 0


def evaluate(name1, selector1, name2, selector2, num_games=100, swap_colors=True):
    """
    Play a series of games and tally the results.

    Returns:
        dict: Results summary
    """
    results = {'agent1_wins': 0, 'agent2_wins': 0, 'draws': 0}

    print(f"Evaluating {name1} vs {name2}")
    print(f"Playing {num_games} games{' with color swapping' if swap_colors else ''}...")
    print()

    start_time = time.time()

    for i in range(num_games):
        swapped = swap_colors and i % 2 == 1
        if swapped:
            winner = -play_game(selector2, selector1)
        else:
            winner = play_game(selector1, selector2)

        if winner == 1:
            results['agent1_wins'] += 1
        elif winner == -1:
            results['agent2_wins'] += 1
        else:
            results['draws'] += 1

        if (i + 1) % max(1, num_games // 10) == 0:
            print(f"Progress: {(i + 1) / num_games * 100:.0f}% ({i + 1}/{num_games})")

    elapsed = time.time() - start_time
    total_games = num_games
    results.update({
        'total_games': total_games,
        'agent1_win_rate': results['agent1_wins'] / total_games * 100 if total_games else 0,
        'agent2_win_rate': results['agent2_wins'] / total_games * 100 if total_games else 0,
        'draw_rate': results['draws'] / total_games * 100 if total_games else 0,
        'elapsed_time': elapsed,
    })

    print(f"\n=== Results after {total_games} games ({elapsed:.1f}s) ===")
    print(f"{name1}: {results['agent1_wins']} wins ({results['agent1_win_rate']:.1f}%)")
    print(f"{name2}: {results['agent2_wins']} wins ({results['agent2_win_rate']:.1f}%)")
    print(f"Draws: {results['draws']} ({results['draw_rate']:.1f}%)")

    return results


def main():
    """Main evaluation function."""
    args = parse_args()
    selector1 = MoveSelector(args.level1, seed=args.seed)
    selector2 = MoveSelector(args.level2, seed=args.seed + 1)
    return evaluate(
        f"Level {args.level1} ({selector1.strategy})", selector1,
        f"Level {args.level2} ({selector2.strategy})", selector2,
        num_games=args.games,
        swap_colors=not args.no_swap,
    )


if __name__ == "__main__":
    main()
