"""
Game implementation for Gomoku.
"""
import logging
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from ..ai.move_selector import MoveSelector
from ..config import DEFAULT_DIFFICULTY, validate_difficulty
from .board import Board, Move, Player
from .errors import GameOverError, MoveError, WrongTurnError
from .rules import check_draw, check_win

logger = logging.getLogger(__name__)


class GameMode(Enum):
    HUMAN_VS_HUMAN = 'pvp'
    HUMAN_VS_MACHINE = 'pve'


class SessionState(Enum):
    AWAITING_MOVE = 'awaiting_move'
    MACHINE_THINKING = 'machine_thinking'
    WON = 'won'
    DRAWN = 'drawn'


class GameStatus(NamedTuple):
    """Snapshot of the session state handed to the presentation layer."""
    state: SessionState
    active_player: Player
    winner: Optional[Player] = None
    last_move: Optional[Move] = None

    @property
    def is_terminal(self):
        return self.state in (SessionState.WON, SessionState.DRAWN)

    @property
    def game_state(self):
        """One of 'ongoing', 'win', 'draw'."""
        if self.state is SessionState.WON:
            return 'win'
        if self.state is SessionState.DRAWN:
            return 'draw'
        return 'ongoing'


class GameEvent(NamedTuple):
    event_type: str
    status: GameStatus
    move: Optional[Move] = None


GameEventCallback = Callable[[GameEvent], None]

MOVE_PLAYED = 'move_played'
MACHINE_THINKING = 'machine_thinking'
GAME_OVER = 'game_over'
GAME_RESET = 'game_reset'


class GameSession:
    """
    Manages a Gomoku game session.

    Owns the board, turn order, mode and difficulty. Human moves come in
    through apply_human_move; when the machine is to play the session waits
    in MACHINE_THINKING until the caller asks for request_machine_move, so
    the caller can show a thinking indicator or delay in between.
    """

    def __init__(self,
                 mode: GameMode = GameMode.HUMAN_VS_MACHINE,
                 difficulty: int = DEFAULT_DIFFICULTY,
                 machine_player: Player = Player.WHITE,
                 seed: Optional[int] = None):
        """
        Initialize a new game session.

        Args:
            mode: Human vs human or human vs machine
            difficulty: Machine difficulty level (1-10)
            machine_player: Colour played by the machine
            seed: Random seed for the machine's move choices
        """
        self.board = Board()
        self.machine_player = Player(machine_player)
        self._seed = seed
        self._listeners: List[GameEventCallback] = []
        self._mode = GameMode(mode)
        self._difficulty = validate_difficulty(difficulty)
        self._selector = MoveSelector(self._difficulty, seed=seed)
        self._start()

    @classmethod
    def from_config(cls, config):
        """Create a session from a GameConfig."""
        config.validate()
        return cls(mode=GameMode(config.mode),
                   difficulty=config.difficulty,
                   machine_player=Player[config.machine_player.upper()],
                   seed=config.seed)

    @property
    def mode(self):
        return self._mode

    @property
    def difficulty(self):
        return self._difficulty

    @property
    def current_player(self):
        return self._status.active_player

    @property
    def game_state(self):
        return self._status.game_state

    @property
    def winner(self):
        return self._status.winner

    @property
    def strategy(self):
        return self._selector.strategy

    def current_status(self):
        return self._status

    def add_listener(self, callback: GameEventCallback) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: GameEventCallback) -> bool:
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    def new_game(self, mode: GameMode, difficulty: int) -> GameStatus:
        """Start over with the given mode and difficulty."""
        return self.reset(mode=mode, difficulty=difficulty)

    def reset(self, mode: Optional[GameMode] = None,
              difficulty: Optional[int] = None) -> GameStatus:
        """
        Clear the board and return to Black's turn.

        Args:
            mode: New game mode, or None to keep the current one
            difficulty: New difficulty, or None to keep the current one

        Returns:
            GameStatus: Status of the fresh game
        """
        if difficulty is not None:
            validate_difficulty(difficulty)
        if mode is not None:
            self._mode = GameMode(mode)
        if difficulty is not None and difficulty != self._difficulty:
            self._difficulty = difficulty
            self._selector = MoveSelector(difficulty, seed=self._seed)
        self.board.reset()
        return self._start()

    def set_difficulty(self, level: int) -> GameStatus:
        """Change the machine difficulty. Always starts a new game."""
        return self.reset(difficulty=level)

    def set_mode(self, mode: GameMode) -> GameStatus:
        """Change the game mode. Always starts a new game."""
        return self.reset(mode=mode)

    def is_machine_turn(self):
        return self._status.state is SessionState.MACHINE_THINKING

    def apply_human_move(self, row: int, col: int) -> GameStatus:
        """
        Make a move for the human whose turn it is.

        Args:
            row (int): Row position (0-14)
            col (int): Column position (0-14)

        Returns:
            GameStatus: Status after the move

        Raises:
            GameOverError: If the game is already won or drawn
            WrongTurnError: If the machine is to move
            OutOfBoundsError, CellOccupiedError: If the position is not playable
        """
        self._ensure_not_over()
        if self._status.state is not SessionState.AWAITING_MOVE:
            raise WrongTurnError("it is the machine's turn")
        return self._play(row, col)

    def request_machine_move(self):
        """
        Let the machine choose and play its move.

        Returns:
            tuple: (Move, GameStatus) for the machine's move

        Raises:
            GameOverError: If the game is already won or drawn
            WrongTurnError: If it is not the machine's turn
            BoardFullError: If no empty cell remains
        """
        self._ensure_not_over()
        if self._status.state is not SessionState.MACHINE_THINKING:
            raise WrongTurnError("it is not the machine's turn")

        try:
            move = self._selector.select_move(self)
            status = self._play(*move)
        except MoveError:
            logger.warning("machine could not move in state %s", self._status, exc_info=True)
            raise
        return move, status

    def _start(self):
        first = Player.BLACK
        if self._machine_to_move(first):
            state = SessionState.MACHINE_THINKING
        else:
            state = SessionState.AWAITING_MOVE
        self._status = GameStatus(state, first)
        logger.debug("new game: mode=%s difficulty=%d", self._mode.value, self._difficulty)
        self._notify(GAME_RESET)
        if state is SessionState.MACHINE_THINKING:
            self._notify(MACHINE_THINKING)
        return self._status

    def _machine_to_move(self, player):
        return (self._mode is GameMode.HUMAN_VS_MACHINE
                and player == self.machine_player)

    def _ensure_not_over(self):
        if self._status.is_terminal:
            raise GameOverError(f"game is over ({self._status.game_state})")

    def _play(self, row, col):
        player = self._status.active_player
        move = self.board.place(row, col, player)
        logger.debug("%s plays %s", player.display_name, tuple(move))

        if check_win(self.board, row, col, player):
            self._status = GameStatus(SessionState.WON, player, winner=player, last_move=move)
        elif check_draw(self.board):
            self._status = GameStatus(SessionState.DRAWN, player, last_move=move)
        else:
            next_player = player.opponent
            # The machine never hands the turn back to itself
            if player != self.machine_player and self._machine_to_move(next_player):
                state = SessionState.MACHINE_THINKING
            else:
                state = SessionState.AWAITING_MOVE
            self._status = GameStatus(state, next_player, last_move=move)

        self._notify(MOVE_PLAYED, move)
        if self._status.is_terminal:
            logger.info("game over: %s", self._status.game_state)
            self._notify(GAME_OVER, move)
        elif self._status.state is SessionState.MACHINE_THINKING:
            self._notify(MACHINE_THINKING, move)
        return self._status

    def _notify(self, event_type, move=None):
        event = GameEvent(event_type, self._status, move)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.warning("listener %r failed on %s", listener, event_type, exc_info=True)
