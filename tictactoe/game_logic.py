import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

log = logging.getLogger(__name__)

BOARD_SIZE = 3                       # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
EMPTY = ''
PLAYER_X = 'X'
PLAYER_O = 'O'

# rows, columns, diagonals (row-major indices)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """
    result derived from a board: in progress, win(player, line) or draw
    """
    outcome: Outcome
    winner: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS


IN_PROGRESS = GameResult(Outcome.IN_PROGRESS)
DRAW = GameResult(Outcome.DRAW)


def empty_board() -> List[str]:
    return [EMPTY] * CELL_COUNT


def is_board_full(board: Sequence[str]) -> bool:
    return all(cell != EMPTY for cell in board)


def calculate_winner(board: Sequence[str]) -> Optional[Tuple[str, Tuple[int, int, int]]]:
    """
    scan the 8 lines in order, first line with 3 equal marks wins
    returns: (player, line) or None
    """
    for a, b, c in WINNING_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return board[a], (a, b, c)
    return None


def evaluate_board(board: Sequence[str]) -> GameResult:
    """
    win beats draw: a full board with a completed line is a win
    """
    found = calculate_winner(board)
    if found:
        return GameResult(Outcome.WIN, winner=found[0], line=found[1])
    if is_board_full(board):
        return DRAW
    return IN_PROGRESS


def cell_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


class GameLogic:
    """
    tic-tac-toe state: board, turn and move history
    the result is always derived from the board, never stored
    """
    def __init__(self):
        self.board = empty_board()        # 9 cells, row-major
        self.x_is_next = True             # X always opens
        self.history = []                 # board snapshot per accepted move

    @property
    def current_player(self) -> str:
        return PLAYER_X if self.x_is_next else PLAYER_O

    @property
    def result(self) -> GameResult:
        return evaluate_board(self.board)

    @property
    def game_over(self) -> bool:
        return self.result.is_over

    @property
    def winner(self) -> Optional[str]:
        return self.result.winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.result.line

    @property
    def move_count(self) -> int:
        return len(self.history)

    def is_cell_empty(self, index) -> bool:
        """
        true if index valid and cell blank
        """
        return 0 <= index < CELL_COUNT and self.board[index] == EMPTY

    def apply_move(self, index) -> bool:
        """
        place current player's mark and flip the turn
        returns False (nothing changed) for a bad index, taken cell or decided game
        """
        if self.game_over or not self.is_cell_empty(index):
            log.debug("ignored move at %r (game_over=%s)", index, self.game_over)
            return False
        player = self.current_player
        self.board[index] = player
        self.history.append(tuple(self.board))
        self.x_is_next = not self.x_is_next
        log.info("player %s took cell %d", player, index)
        return True

    def reset(self):
        """
        clear board and history, X to move
        """
        self.board = empty_board()
        self.x_is_next = True
        self.history = []

    def status_text(self) -> str:
        result = self.result
        if result.outcome is Outcome.WIN:
            return f"Winner: {result.winner}"
        if result.outcome is Outcome.DRAW:
            return "Draw!"
        return f"Next turn: {self.current_player}"
