from .game import EMPTY, NEXT_PLAYER, Location, MoveResult, TicTacToe, move_result_to_status
from .play import BatchInput, parse_batch, play_tictactoe
