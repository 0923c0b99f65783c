#!/usr/bin/env python3
"""
CLI interface for playing Gomoku against a human or the machine.
"""
import argparse
import logging
import sys
import os
import time

# Add the parent directory to Python path so we can import gomoku_engine
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gomoku_engine.config import GameConfig
from gomoku_engine.core.board import Cell
from gomoku_engine.core.errors import MoveError
from gomoku_engine.core.game import GameMode, GameSession, GAME_OVER, MACHINE_THINKING


def parse_args():
    parser = argparse.ArgumentParser(description='Play Gomoku (five in a row) in the terminal')
    parser.add_argument('--mode', choices=['pvp', 'pve'], help='pvp: two humans, pve: human vs machine')
    parser.add_argument('--difficulty', type=int, help='Machine difficulty 1-10 (1-3 play randomly)')
    parser.add_argument('--delay', type=float, help='Seconds the machine "thinks" before moving')
    parser.add_argument('--seed', type=int, help='Random seed for the machine')
    parser.add_argument('--config', help='Path to a JSON game config')
    parser.add_argument('--verbose', action='store_true', help='Log engine events')
    return parser.parse_args()


def load_config(args):
    """Build the game config from an optional JSON file and CLI overrides."""
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    for key in ('mode', 'difficulty', 'seed'):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)
    if args.delay is not None:
        config.thinking_delay = args.delay
    return config.validate()


def display_board(board):
    """Display the current board state in ASCII format."""
    print("\n   ", end="")
    for col in range(board.size):
        print(f"{col:2d}", end=" ")
    print()

    print("   " + "---" * board.size)

    for row in range(board.size):
        print(f"{row:2d}|", end="")
        for col in range(board.size):
            cell = board.state[row, col]
            if cell == Cell.BLACK:
                print(" X", end=" ")
            elif cell == Cell.WHITE:
                print(" O", end=" ")
            else:
                print(" .", end=" ")
        print(f"|{row:2d}")

    print("   " + "---" * board.size)


def get_player_name(player):
    """Get display name for player."""
    return f"{player.display_name} ({'X' if player.value == 1 else 'O'})"


def parse_move(move_input):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "7 7" or "7,7"

    Returns:
        tuple: (row, col) or None if not two integers
    """
    parts = move_input.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def describe_result(session):
    status = session.current_status()
    if status.game_state == 'draw':
        return "It's a draw! The board is full."
    winner_name = get_player_name(status.winner)
    if session.mode is GameMode.HUMAN_VS_MACHINE:
        if status.winner == session.machine_player:
            return f"Machine ({winner_name}) wins! Better luck next time!"
        return f"Congratulations! You ({winner_name}) beat the machine!"
    return f"{winner_name} wins!"


def handle_command(session, command):
    """
    Apply a non-move command.

    Returns:
        bool: False if the player asked to quit
    """
    words = command.split()
    if words[0] in ('quit', 'exit', 'q'):
        return False
    if words[0] == 'restart':
        session.reset()
    elif words[0] == 'mode':
        other = (GameMode.HUMAN_VS_HUMAN if session.mode is GameMode.HUMAN_VS_MACHINE
                 else GameMode.HUMAN_VS_MACHINE)
        session.set_mode(other)
        print(f"Switched to {'Player vs Player' if other is GameMode.HUMAN_VS_HUMAN else 'Player vs Machine'}.")
    elif words[0] == 'difficulty' and len(words) == 2:
        try:
            session.set_difficulty(int(words[1]))
            print(f"Difficulty set to {session.difficulty} ({session.strategy}).")
        except ValueError as e:
            print(f"Invalid difficulty: {e}")
    else:
        print("Unknown command! Enter: row col, restart, mode, difficulty N or quit")
    return True


def main():
    """Main game loop."""
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(name)s %(levelname)s %(message)s')

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        print(f"Could not load config: {e}")
        sys.exit(1)

    session = GameSession.from_config(config)

    def announce(event):
        if event.event_type == GAME_OVER:
            print("\n" + describe_result(session))
        elif event.event_type == MACHINE_THINKING:
            print("Machine is thinking...")

    session.add_listener(announce)

    print("=" * 60)
    print("                 GOMOKU (five in a row)")
    print("=" * 60)
    print("Get five or more stones in a row to win. Black (X) goes first.")
    print("Enter moves as: row col   Commands: restart, mode, difficulty N, quit")
    print("=" * 60)

    try:
        while True:
            display_board(session.board)
            status = session.current_status()

            if status.is_terminal:
                answer = input("\nPlay again? (restart / quit): ").strip().lower()
                if not answer or not handle_command(session, answer):
                    break
                continue

            if session.is_machine_turn():
                time.sleep(config.thinking_delay)
                move, _ = session.request_machine_move()
                print(f"Machine plays: {move.row} {move.col}")
                continue

            player_name = get_player_name(status.active_player)
            command = input(f"\n{player_name}, enter your move: ").strip().lower()
            if not command:
                continue

            move = parse_move(command)
            if move is None:
                if not handle_command(session, command):
                    break
                continue

            try:
                session.apply_human_move(*move)
            except MoveError as e:
                print(f"Invalid move: {e}")

    except (KeyboardInterrupt, EOFError):
        pass

    print("\nThanks for playing!")


if __name__ == "__main__":
    main()
