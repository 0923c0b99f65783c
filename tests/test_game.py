"""
Tests for GameSession class.
"""
import logging

import numpy as np
import pytest
from gomoku_engine.config import GameConfig
from gomoku_engine.core.board import Board, Cell, Player
from gomoku_engine.core.errors import (
    BoardFullError, CellOccupiedError, GameOverError, OutOfBoundsError, WrongTurnError,
)
from gomoku_engine.core.game import (
    GAME_OVER, GAME_RESET, MACHINE_THINKING, MOVE_PLAYED,
    GameMode, GameSession, GameStatus, SessionState,
)

from conftest import fill_board, pattern_player


def pvp():
    return GameSession(mode=GameMode.HUMAN_VS_HUMAN)


def test_game_initialization():
    """Test that a game is initialized correctly."""
    game = GameSession(seed=1)

    assert isinstance(game.board, Board)
    assert game.mode is GameMode.HUMAN_VS_MACHINE
    assert game.difficulty == 5
    assert game.machine_player is Player.WHITE
    assert game.current_status() == GameStatus(SessionState.AWAITING_MOVE, Player.BLACK)
    assert game.current_player is Player.BLACK
    assert game.game_state == 'ongoing'
    assert game.winner is None
    assert len(game.board.get_legal_moves()) == 225


def test_turns_alternate_between_humans():
    """Test that valid moves are processed and the turn passes."""
    game = pvp()

    status = game.apply_human_move(7, 7)
    assert game.board.get(7, 7) is Cell.BLACK
    assert status.state is SessionState.AWAITING_MOVE
    assert status.active_player is Player.WHITE
    assert status.last_move == (7, 7)

    status = game.apply_human_move(7, 8)
    assert game.board.get(7, 8) is Cell.WHITE
    assert status.active_player is Player.BLACK


def test_invalid_moves_leave_state_unchanged():
    """Test that rejected moves do not touch board or status."""
    game = pvp()
    game.apply_human_move(7, 7)
    before_status = game.current_status()
    before_board = game.board.state.copy()

    with pytest.raises(OutOfBoundsError):
        game.apply_human_move(-1, 5)
    with pytest.raises(OutOfBoundsError):
        game.apply_human_move(15, 5)
    with pytest.raises(CellOccupiedError):
        game.apply_human_move(7, 7)

    assert game.current_status() == before_status
    assert np.array_equal(game.board.state, before_board)


def test_win_detection_after_move():
    """Test the center-line scenario through the session."""
    game = pvp()
    for col, white in zip((7, 8, 9, 10), ((0, 0), (0, 2), (0, 4), (0, 6))):
        game.apply_human_move(7, col)
        game.apply_human_move(*white)

    assert game.game_state == 'ongoing'

    status = game.apply_human_move(7, 11)

    assert status.state is SessionState.WON
    assert status.winner is Player.BLACK
    assert status.is_terminal
    assert game.game_state == 'win'
    assert game.current_player is Player.BLACK


def test_game_over_move_rejection():
    """Test that moves are rejected once the game is won."""
    game = pvp()
    for col in range(4):
        game.apply_human_move(7, col)
        game.apply_human_move(8, col)
    game.apply_human_move(7, 4)
    final = game.current_status()

    with pytest.raises(GameOverError):
        game.apply_human_move(0, 14)

    assert game.board.get(0, 14) is Cell.EMPTY
    assert game.current_status() == final


def test_draw_detection_after_move():
    """Test that filling the last cell without five is a draw."""
    game = pvp()
    fill_board(game.board, skip={(0, 0)})
    assert pattern_player(0, 0) is Player.BLACK

    status = game.apply_human_move(0, 0)

    assert status.state is SessionState.DRAWN
    assert status.winner is None
    assert game.game_state == 'draw'
    with pytest.raises(GameOverError):
        game.apply_human_move(0, 0)


def test_last_cell_five_is_win_not_draw():
    """Test that a five completed on the last empty cell wins."""
    game = pvp()
    fill_board(game.board, skip={(14, c) for c in range(5)})
    for col in range(4):
        game.board.place(14, col, Player.BLACK)

    status = game.apply_human_move(14, 4)

    assert game.board.is_full()
    assert status.state is SessionState.WON
    assert status.winner is Player.BLACK


def test_machine_turn_follows_human_move():
    """Test the human -> thinking -> human cycle against the machine."""
    game = GameSession(difficulty=6, seed=3)

    status = game.apply_human_move(7, 7)
    assert status.state is SessionState.MACHINE_THINKING
    assert status.active_player is Player.WHITE
    assert game.is_machine_turn()

    move, status = game.request_machine_move()

    assert game.board.get(*move) is Cell.WHITE
    assert status.state is SessionState.AWAITING_MOVE
    assert status.active_player is Player.BLACK
    assert game.board.stone_count() == 2


def test_human_cannot_move_while_machine_thinks():
    """Test that human input is refused during the machine's turn."""
    game = GameSession(seed=3)
    game.apply_human_move(7, 7)

    with pytest.raises(WrongTurnError):
        game.apply_human_move(0, 0)

    assert game.board.get(0, 0) is Cell.EMPTY
    assert game.is_machine_turn()


def test_machine_cannot_move_out_of_turn():
    """Test that the machine is only asked to move in its own turn."""
    game = GameSession(seed=3)
    with pytest.raises(WrongTurnError):
        game.request_machine_move()

    game = pvp()
    with pytest.raises(WrongTurnError):
        game.request_machine_move()

    assert game.board.stone_count() == 0


def test_machine_playing_black_moves_first():
    """Test that a machine on black starts thinking right after reset."""
    game = GameSession(machine_player=Player.BLACK, difficulty=7, seed=0)

    assert game.is_machine_turn()
    move, status = game.request_machine_move()

    assert move == (7, 7)
    assert status.state is SessionState.AWAITING_MOVE
    assert status.active_player is Player.WHITE


def test_machine_win_ends_game():
    """Test that the machine completing five wins the game."""
    game = GameSession(difficulty=9, seed=0)
    for col in range(4):
        game.board.place(3, col, Player.WHITE)

    game.apply_human_move(10, 10)
    move, status = game.request_machine_move()

    assert move == (3, 4)
    assert status.state is SessionState.WON
    assert status.winner is Player.WHITE
    with pytest.raises(GameOverError):
        game.request_machine_move()


def test_machine_board_full_is_reported(caplog):
    """Test that a full board during the machine's turn is signalled and logged."""
    game = GameSession(seed=0)
    game.apply_human_move(0, 0)
    fill_board(game.board, skip={(0, 0)})
    before = game.current_status()

    with caplog.at_level(logging.WARNING, logger='gomoku_engine.core.game'):
        with pytest.raises(BoardFullError):
            game.request_machine_move()

    assert game.current_status() == before
    assert "machine could not move" in caplog.text


def test_reset_after_win():
    """Test that reset gives an empty board and Black to move."""
    game = pvp()
    for col in range(4):
        game.apply_human_move(0, col)
        game.apply_human_move(1, col)
    game.apply_human_move(0, 4)
    assert game.game_state == 'win'

    status = game.reset()

    assert np.all(game.board.state == Cell.EMPTY)
    assert status == GameStatus(SessionState.AWAITING_MOVE, Player.BLACK)
    assert game.current_player is Player.BLACK
    assert game.mode is GameMode.HUMAN_VS_HUMAN


def test_set_difficulty_resets_game():
    """Test that changing difficulty starts a new game."""
    game = GameSession(difficulty=5, seed=0)
    game.apply_human_move(7, 7)
    game.request_machine_move()

    status = game.set_difficulty(2)

    assert game.difficulty == 2
    assert game.strategy == 'random'
    assert game.board.stone_count() == 0
    assert status.state is SessionState.AWAITING_MOVE


def test_set_mode_resets_game():
    """Test that changing mode starts a new game."""
    game = GameSession(seed=0)
    game.apply_human_move(7, 7)

    game.set_mode(GameMode.HUMAN_VS_HUMAN)

    assert game.mode is GameMode.HUMAN_VS_HUMAN
    assert game.board.stone_count() == 0
    assert game.apply_human_move(7, 7).state is SessionState.AWAITING_MOVE


def test_invalid_difficulty_keeps_game():
    """Test that a rejected difficulty leaves the game alone."""
    game = pvp()
    game.apply_human_move(7, 7)

    with pytest.raises(ValueError):
        game.set_difficulty(11)

    assert game.difficulty == 5
    assert game.board.stone_count() == 1


def test_new_game_applies_settings():
    """Test that new_game sets mode and difficulty together."""
    game = pvp()
    game.apply_human_move(7, 7)

    game.new_game(GameMode.HUMAN_VS_MACHINE, 8)

    assert game.mode is GameMode.HUMAN_VS_MACHINE
    assert game.difficulty == 8
    assert game.strategy == 'heuristic'
    assert game.board.stone_count() == 0


def test_listeners_receive_events():
    """Test the event sequence for a human move followed by the machine."""
    game = GameSession(seed=0)
    events = []
    game.add_listener(events.append)
    game.add_listener(events.append)

    game.apply_human_move(7, 7)
    game.request_machine_move()
    game.reset()

    assert [e.event_type for e in events] == [
        MOVE_PLAYED, MACHINE_THINKING, MOVE_PLAYED, GAME_RESET,
    ]
    assert events[0].move == (7, 7)
    assert events[1].status.state is SessionState.MACHINE_THINKING

    assert game.remove_listener(events.append)
    assert not game.remove_listener(events.append)


def test_game_over_event():
    """Test that a winning move emits a game over event."""
    game = pvp()
    events = []
    for col in range(4):
        game.apply_human_move(0, col)
        game.apply_human_move(1, col)
    game.add_listener(events.append)

    game.apply_human_move(0, 4)

    assert [e.event_type for e in events] == [MOVE_PLAYED, GAME_OVER]
    assert events[-1].status.winner is Player.BLACK


def test_failing_listener_does_not_break_game(caplog):
    """Test that listener errors are logged and ignored."""
    game = pvp()

    def broken(event):
        raise RuntimeError("boom")

    game.add_listener(broken)
    with caplog.at_level(logging.WARNING, logger='gomoku_engine.core.game'):
        status = game.apply_human_move(7, 7)

    assert status.active_player is Player.WHITE
    assert "listener" in caplog.text


def test_session_from_config():
    """Test building a session from a GameConfig."""
    config = GameConfig(mode='pvp', difficulty=2, machine_player='black', seed=4)

    game = GameSession.from_config(config)

    assert game.mode is GameMode.HUMAN_VS_HUMAN
    assert game.difficulty == 2
    assert game.machine_player is Player.BLACK
    assert not game.is_machine_turn()
