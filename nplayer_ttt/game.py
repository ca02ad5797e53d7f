from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

EMPTY = 0        # board value for a cell nobody has played
NEXT_PLAYER = 0  # game status: no result yet, next player moves


class MoveResult(Enum):
    """Outcome of a single move."""
    WIN = "win"
    INVALID = "invalid"
    DRAW = "draw"
    CONTINUE = "continue"


@dataclass(frozen=True)
class Location:
    row: int
    col: int


def move_result_to_status(result: MoveResult, player: int, num_players: int) -> int:
    """
    Convert a move result into the externally visible game status.
      WIN      -> player
      DRAW     -> num_players + 1 (cat's game, larger than any player id)
      INVALID  -> -player
      CONTINUE -> NEXT_PLAYER (0, never a player id)
    """
    if result is MoveResult.WIN:
        return player
    if result is MoveResult.DRAW:
        return num_players + 1
    if result is MoveResult.INVALID:
        return -player
    if result is MoveResult.CONTINUE:
        return NEXT_PLAYER
    raise RuntimeError(f"Unmapped move result {result!r}. Should never reach here.")


class TicTacToe:
    """
    N-player Tic-Tac-Toe on an NxN board; N in a line (row, column or
    main diagonal) wins.
    Board cells: EMPTY (0) or the id of the player who marked it.
    Players are 1-indexed and player 1 moves first.
    """
    def __init__(self, board_size: int, num_players: int):
        self.board_size = board_size
        self.num_players = num_players
        self.max_valid_moves = board_size * board_size
        self.cats_game = num_players + 1
        self._board = np.zeros((board_size, board_size), dtype=np.int64)
        self.valid_move_count = 0
        self.whose_turn = 1

    @property
    def board(self) -> np.ndarray:
        """Read-only view of the board; only make_move writes to it."""
        view = self._board.view()
        view.flags.writeable = False
        return view

    def _is_off_board(self, idx: int) -> bool:
        return idx < 0 or idx >= self.board_size

    def make_move(self, player: int, location: Location) -> MoveResult:
        """
        Apply `player`'s move at `location` and classify it.
        The turn advances on every call, including moves rejected as INVALID.
        """
        wrong_player = player != self.whose_turn
        # TODO decide whether a rejected move should cost the player their turn
        self.whose_turn = (self.whose_turn % self.num_players) + 1

        off_board = self._is_off_board(location.row) or self._is_off_board(location.col)
        # never index with off-board coordinates, numpy wraps negatives
        already_filled = (not off_board
                          and self._board[location.row, location.col] != EMPTY)

        result: Optional[MoveResult] = None
        if wrong_player or off_board or already_filled:
            result = MoveResult.INVALID
        elif self.valid_move_count == self.max_valid_moves:
            result = MoveResult.DRAW
        else:
            self._board[location.row, location.col] = player
            self.valid_move_count += 1
            result = self._check_for_win(location, player)
            if (result is MoveResult.CONTINUE
                    and self.valid_move_count == self.max_valid_moves):
                # last empty cell filled without completing a line
                result = MoveResult.DRAW

        if result is None:
            raise RuntimeError("Move left unclassified. Should never reach here.")
        return result

    def game_status(self, result: MoveResult, player: int) -> int:
        return move_result_to_status(result, player, self.num_players)

    # ---- win detection ----
    def _check_for_win(self, location: Location, player: int) -> MoveResult:
        """
        Did `player` just win by playing at `location`? Only the row, the
        column and (when `location` lies on them) the two main diagonals
        through the last move can have been completed. Scans each once,
        returning early once none of them can still be a win.
        Returns WIN or CONTINUE only.
        """
        n = self.board_size
        b = self._board
        row, col = location.row, location.col
        row_win = True
        col_win = True
        diag_down = row == col
        diag_up = row == n - 1 - col
        for idx in range(n):
            if row_win:
                row_win = b[row, idx] == player
            if col_win:
                col_win = b[idx, col] == player
            if diag_down:
                diag_down = b[idx, idx] == player
            if diag_up:
                diag_up = b[idx, n - 1 - idx] == player
            if not (row_win or col_win or diag_down or diag_up):
                return MoveResult.CONTINUE
        return MoveResult.WIN

    # ---- display ----
    def render(self) -> str:
        return "\n".join(" ".join(str(int(v)) for v in row) for row in self._board)

    def print_board(self) -> None:
        print(self.render())
