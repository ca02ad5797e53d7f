#!/usr/bin/env python3
"""
play.py — drive a TicTacToe game through a batch of moves and print the game
status after each one.

Batch input (file or stdin):
  board_size
  num_players
  move_count
  field_count            (3: player row col)
  <player> <row> <col>   x move_count

Output: one status per line (player id = win, -player id = invalid move,
num_players+1 = cat's game, 0 = next player), optionally followed by the board.

CLI:
  python -m nplayer_ttt.play moves.txt --board
  python -m nplayer_ttt.play --demo --board --verbose
"""
import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from .game import NEXT_PLAYER, Location, TicTacToe

Move = Tuple[int, int, int]  # (player, row, col)

MOVE_FIELDS = 3

# 5x5, 3 players: player 3 completes the anti-diagonal on the 18th move.
REFERENCE_GAME = {
    "board_size": 5,
    "num_players": 3,
    "moves": [
        (1, 1, 0), (2, 3, 3), (3, 1, 3), (1, 0, 2), (2, 0, 0), (3, 2, 2),
        (1, 4, 1), (2, 4, 2), (3, 3, 1), (1, 1, 2), (2, 4, 3), (3, 2, 1),
        (1, 4, 4), (2, 1, 1), (3, 0, 4), (1, 0, 1), (2, 2, 3), (3, 4, 0),
    ],
}


@dataclass
class BatchInput:
    board_size: int
    num_players: int
    moves: List[Move] = field(default_factory=list)


def play_tictactoe(game: TicTacToe, moves: Iterable[Sequence[int]],
                   stop_on_invalid: bool = True, verbose: bool = False) -> List[int]:
    """
    Apply `moves` in order, collecting the game status of each.
    Stops after the first win or draw, and after the first invalid move
    unless stop_on_invalid is False.
    """
    game_statuses: List[int] = []
    for move in moves:
        player = move[0]
        location = Location(move[1], move[2])
        result = game.make_move(player, location)
        game_status = game.game_status(result, player)
        game_statuses.append(game_status)
        if verbose:
            print(f"[move {len(game_statuses)}] player {player} -> "
                  f"({location.row},{location.col}): {result.value} ({game_status})",
                  file=sys.stderr)
        if game_status > NEXT_PLAYER:
            break
        if stop_on_invalid and game_status != NEXT_PLAYER:
            break
    return game_statuses


# ---------- batch input ----------
def _parse_ints(line: str, lineno: int) -> List[int]:
    try:
        return [int(tok) for tok in line.strip().split(' ')]
    except ValueError:
        raise ValueError(f"Line {lineno}: expected space-separated integers, got {line.strip()!r}") from None


def _parse_header(lines: List[str], idx: int, name: str) -> int:
    if idx >= len(lines):
        raise ValueError(f"Missing header line {idx + 1} ({name}).")
    values = _parse_ints(lines[idx], idx + 1)
    if len(values) != 1:
        raise ValueError(f"Line {idx + 1}: expected a single integer for {name}.")
    return values[0]


def parse_batch(lines: Iterable[str]) -> BatchInput:
    """Parse the four-line header and the move lines that follow it."""
    lines = list(lines)
    while lines and not lines[-1].strip():
        lines.pop()

    board_size = _parse_header(lines, 0, "board size")
    num_players = _parse_header(lines, 1, "number of players")
    move_count = _parse_header(lines, 2, "move count")
    field_count = _parse_header(lines, 3, "fields per move")
    if move_count < 0:
        raise ValueError(f"Line 3: move count must be >= 0, got {move_count}.")
    if field_count < MOVE_FIELDS:
        raise ValueError(f"Line 4: moves need at least {MOVE_FIELDS} fields (player row col), got {field_count}.")

    moves: List[Move] = []
    for i in range(move_count):
        lineno = 5 + i
        if lineno > len(lines):
            raise ValueError(f"Expected {move_count} moves, found {i}.")
        values = _parse_ints(lines[lineno - 1], lineno)
        if len(values) != field_count:
            raise ValueError(f"Line {lineno}: expected {field_count} fields, got {len(values)}.")
        moves.append((values[0], values[1], values[2]))
    return BatchInput(board_size, num_players, moves)


def format_statuses(statuses: Sequence[int]) -> str:
    return "".join(f"{s}\n" for s in statuses)


# ---------- Main ----------
def main(argv=None):
    ap = argparse.ArgumentParser(description='Play a batch of N-player NxN Tic-Tac-Toe moves and print each game status')
    ap.add_argument('input', nargs='?', default='-', help='Batch input file ("-" or omitted for stdin)')
    ap.add_argument('--demo', action='store_true', help='Play the built-in 5x5, 3-player reference game instead of reading input')
    ap.add_argument('--board', action='store_true', help='Print the final board after the statuses')
    ap.add_argument('--continue-on-invalid', action='store_true', help='Keep playing after an invalid move (stop only on win/draw)')
    ap.add_argument('--verbose', action='store_true', help='Trace every move on stderr')
    args = ap.parse_args(argv)

    if args.demo:
        batch = BatchInput(REFERENCE_GAME["board_size"], REFERENCE_GAME["num_players"],
                           list(REFERENCE_GAME["moves"]))
    else:
        try:
            if args.input == '-':
                batch = parse_batch(sys.stdin.read().splitlines())
            else:
                with open(args.input, "r") as f:
                    batch = parse_batch(f.read().splitlines())
        except (OSError, ValueError) as e:
            raise SystemExit(f"Could not read moves: {e}")

    if args.verbose:
        print(f"Board {batch.board_size}x{batch.board_size}, {batch.num_players} players, "
              f"{len(batch.moves)} moves", file=sys.stderr)

    game = TicTacToe(batch.board_size, batch.num_players)
    statuses = play_tictactoe(game, batch.moves,
                              stop_on_invalid=not args.continue_on_invalid,
                              verbose=args.verbose)
    sys.stdout.write(format_statuses(statuses))
    if args.board:
        game.print_board()


if __name__ == '__main__':
    main()
