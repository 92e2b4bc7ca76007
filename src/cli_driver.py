# cli_driver.py
# This file is intended to be run to play the game on the CLI.
# It stands in for a touch front-end: keys pick a direction directly,
# two numbers are treated as a drag vector and go through the gesture classifier.

import argparse
import logging
import random
from typing import List, Optional

from core import (
    DIRECTION,
    GameState,
    apply_move,
    board_to_values,
    classify_direction,
    max_tile,
    new_game,
    restart,
)
from settings import GameSettings

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {'W': DIRECTION.UP, 'A': DIRECTION.LEFT, 'S': DIRECTION.DOWN, 'D': DIRECTION.RIGHT}
PROMPT = "Enter move (W/A/S/D, or a drag 'dx dy'; R to restart, Q to quit): "

def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the 4 x 4 sliding-tile game in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile spawns.")
    parser.add_argument("--dead-zone", type=float, default=0.0,
                        help="Ignore drags shorter than this length.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def _parse_drag(move_input: str) -> Optional[tuple]:
    """Returns (dx, dy) if the input is two numbers, else None."""
    parts = move_input.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None

def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    settings = GameSettings(swipe_dead_zone=args.dead_zone)
    rng = random.Random(args.seed)

    # 1. Initialize game
    state = new_game(settings, rng)
    display_board_state(state)

    # 2. Game Loop
    while True:
        try:
            move_input = input(PROMPT).strip().upper()
        except EOFError:
            move_input = 'Q'

        if move_input == 'Q':
            print("Quitting game.")
            break

        if move_input == 'R':
            state = restart(settings, rng)
            display_board_state(state)
            continue

        # 3. Process the move
        chosen_direction = KEY_DIRECTIONS.get(move_input)
        drag = _parse_drag(move_input)
        if chosen_direction is None and drag is not None:
            chosen_direction = classify_direction(drag[0], drag[1], settings.swipe_dead_zone)
            if chosen_direction is None:
                print("Swipe too short; ignored.")
                continue
        if chosen_direction is None:
            logger.debug("Unrecognised input %r", move_input)
            print("Invalid input. Use W, A, S, D or a drag vector such as '-30 5'.")
            continue

        state = apply_move(state, chosen_direction, rng, settings)

        if not state.moved and not state.is_over:
            print("Move did not change the board.")

        display_board_state(state)

        # 4. Game over: offer a restart
        if state.is_over:
            print("No more moves possible.")
            try:
                again = input("Play again? (y/N): ").strip().lower()
            except EOFError:
                again = ""
            if again != "y":
                break
            state = restart(settings, rng)
            display_board_state(state)

    print(f"Final moves: {state.move_count}, best tile: {max_tile(state.board)}")
    return 0


# --- Display Function ---
def display_board_state(state: GameState) -> None:
    """Prints the board, move counter, and game status to the console."""
    print(f"\nMoves: {state.move_count}")
    print("GAME OVER!" if state.is_over else "Status: IN_PROGRESS")

    for row in board_to_values(state.board):
        print("\t".join(str(value) if value else "." for value in row))
    print("-" * (len(state.board) * 6))

if __name__ == "__main__":
    raise SystemExit(main())
