# core.py
# This file is the stateless core logic for a 4 x 4 sliding-tile game.
# Every public function returns new values; nothing here mutates its inputs.

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from gestures import classify_direction
from models import BOARD_SIZE, DIRECTION, Board, GameState, Line, Tile
from settings import DEFAULT_SETTINGS, GameSettings

logger = logging.getLogger(__name__)

# --- Board Helper Functions ---

def get_board_size(board: Sequence[Sequence[Optional[Tile]]]) -> int:
    """
    Checks the shape of a board and returns its dimension.
    Args:
        board: The game board.
    Returns:
        int: The dimension of the board (always 4).
    Raises:
        ValueError: If the board is not a 4 x 4 grid.
    """
    if len(board) != BOARD_SIZE or not all(len(row) == BOARD_SIZE for row in board):
        raise ValueError(f"Board must be a {BOARD_SIZE} x {BOARD_SIZE} grid.")
    return BOARD_SIZE

def empty_board() -> Board:
    """
    Creates a board with every cell empty.
    Returns:
        Board: A 4 x 4 grid of None.
    """
    return tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))

def board_from_values(rows: Iterable[Iterable[Optional[int]]]) -> Board:
    """
    Builds a board from plain integers, where 0 or None marks an empty cell.
    Args:
        rows: Four rows of four values each.
    Returns:
        Board: The equivalent board of Tiles.
    Raises:
        ValueError: If the grid is not 4 x 4 or a value is not a valid tile.
    """
    board = tuple(
        tuple(Tile(value=value) if value else None for value in row)
        for row in rows
    )
    get_board_size(board)
    return board

def board_to_values(board: Board) -> List[List[int]]:
    """Converts a board back to plain integers, 0 for empty cells."""
    return [[tile.value if tile else 0 for tile in row] for row in board]

def max_tile(board: Board) -> int:
    """
    Finds the highest tile on the board.
    Args:
        board (Board): The game board.
    Returns:
        int: The largest tile value, or 0 for an empty board.
    """
    return max((tile.value for row in board for tile in row if tile), default=0)

def get_empty_cells(board: Board) -> List[Tuple[int, int]]:
    """
    Get coordinates of empty cells in the given board.
    Args:
        board (Board): The board to check.
    Returns:
        List[Tuple[int, int]]: List of (row, col) tuples for empty cells.
    """
    n = get_board_size(board)
    return [(row, col) for row in range(n) for col in range(n) if board[row][col] is None]

def add_random_tile(
    board: Board,
    rng: Optional[random.Random] = None,
    four_tile_odds: int = DEFAULT_SETTINGS.four_tile_odds,
) -> Tuple[Board, bool]:
    """
    Adds a new tile to a uniformly chosen empty cell of a copy of the board.

    The tile is a 4 when a draw from [1, four_tile_odds] comes up 1, otherwise a 2.
    Args:
        board (Board): The current game board.
        rng: Random source; defaults to the module-level generator.
        four_tile_odds (int): One-in-N chance of spawning a 4.
    Returns:
        Tuple[Board, bool]: The new board and whether a tile was added.
                            If no empty cells, returns the original board and False.
    """
    rng = rng if rng is not None else random
    empty_cells = get_empty_cells(board)
    if not empty_cells:
        return board, False

    row, col = rng.choice(empty_cells)
    value = 4 if rng.randint(1, four_tile_odds) == 1 else 2
    new_board = [list(r) for r in board]
    new_board[row][col] = Tile(value=value)
    logger.debug("Spawned %d at (%d, %d)", value, row, col)
    return tuple(tuple(r) for r in new_board), True

# --- Line Manipulation ---

def _compress_line(line: Line) -> List[Tile]:
    return [tile for tile in line if tile is not None]

def merge_line(line: Line) -> Line:
    """
    Slides and merges one line toward index 0.

    Equal neighbours merge into a tile of double value. The scan skips past a
    merged pair, so a tile merges at most once: [2, 2, 2, -] gives [4, 2, -, -].
    Args:
        line (Line): Up to four cells, oriented so that travel is toward index 0.
    Returns:
        Line: The resulting line, padded with empty cells to length 4.
    """
    tiles = _compress_line(line)
    merged: List[Optional[Tile]] = []
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i].value == tiles[i + 1].value:
            merged.append(tiles[i].doubled())
            i += 2
        else:
            merged.append(tiles[i])
            i += 1
    merged += [None] * (BOARD_SIZE - len(merged))
    return tuple(merged)

# --- Board Transformations ---

def transpose_board(board: Board) -> Board:
    """Swaps rows and columns."""
    return tuple(zip(*board))

def reverse_rows(board: Board) -> Board:
    return tuple(row[::-1] for row in board)

# --- Core Game Move Processing ---

def _apply_left_processing_to_all_lines(board: Board) -> Tuple[Board, bool]:
    processed = tuple(merge_line(row) for row in board)
    return processed, processed != board

def process_move(board: Board, direction: DIRECTION) -> Tuple[Board, bool]:
    """
    Slides and merges every line of the board in the given direction.
    No tile is spawned.
    Args:
        board (Board): The current game board.
        direction (DIRECTION): The direction to move.
    Returns:
        Tuple[Board, bool]:
            - The new board state after the move.
            - A boolean indicating if the board changed as a result of the move.
    Raises:
        ValueError: If the board is malformed or the direction is invalid.
    """
    get_board_size(board)
    board = tuple(tuple(row) for row in board)

    if direction == DIRECTION.LEFT:
        return _apply_left_processing_to_all_lines(board)

    if direction == DIRECTION.RIGHT:
        processed, changed = _apply_left_processing_to_all_lines(reverse_rows(board))
        return reverse_rows(processed), changed

    if direction == DIRECTION.UP:
        processed, changed = _apply_left_processing_to_all_lines(transpose_board(board))
        return transpose_board(processed), changed

    if direction == DIRECTION.DOWN:
        columns_bottom_up = reverse_rows(transpose_board(board))
        processed, changed = _apply_left_processing_to_all_lines(columns_bottom_up)
        return transpose_board(reverse_rows(processed)), changed

    raise ValueError("Invalid direction specified for process_move.")

# --- Game State Checks ---

def has_legal_move(board: Board) -> bool:
    """
    Checks whether any move is possible.
    Args:
        board (Board): The game board.
    Returns:
        bool: True if a cell is empty or two horizontally or vertically
              adjacent tiles hold equal values, False otherwise (game over).
    """
    n = get_board_size(board)
    for r in range(n):
        for c in range(n):
            tile = board[r][c]
            if tile is None:
                return True
            right = board[r][c + 1] if c + 1 < n else None
            below = board[r + 1][c] if r + 1 < n else None
            if right is not None and right.value == tile.value:
                return True
            if below is not None and below.value == tile.value:
                return True
    return False

# --- Game Lifecycle ---

def new_game(
    settings: Optional[GameSettings] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Starts a new game: empty board, no moves, then the starting tiles.
    Args:
        settings (GameSettings): Engine settings. Defaults to DEFAULT_SETTINGS.
        rng: Random source for tile placement.
    Returns:
        GameState: The initial game state.
    """
    settings = settings or DEFAULT_SETTINGS
    board = empty_board()
    for _ in range(settings.start_tiles):
        board, _ = add_random_tile(board, rng, settings.four_tile_odds)
    return GameState(board=board)

def restart(
    settings: Optional[GameSettings] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    logger.info("Restarting game")
    return new_game(settings, rng)

def apply_move(
    state: GameState,
    direction: DIRECTION,
    rng: Optional[random.Random] = None,
    settings: Optional[GameSettings] = None,
) -> GameState:
    """
    Plays one move and returns the next game state.

    1. Slide and merge all four lines.
    2. If the board changed, spawn one random tile.
    3. If a legal move remains, count the move. With the default settings the
       move is counted even when the board did not change.
    4. Otherwise flag the game as over.
    Args:
        state (GameState): The state before the move.
        direction (DIRECTION): The direction to move.
        rng: Random source for the spawned tile.
        settings (GameSettings): Engine settings. Defaults to DEFAULT_SETTINGS.
    Returns:
        GameState: The state after the move.
    """
    settings = settings or DEFAULT_SETTINGS
    board, changed = process_move(state.board, direction)
    if changed:
        board, _ = add_random_tile(board, rng, settings.four_tile_odds)
    logger.debug("Move %s changed=%s", direction.name, changed)

    move_count = state.move_count
    is_over = state.is_over
    if has_legal_move(board):
        if changed or settings.count_ineffective_moves:
            move_count += 1
    else:
        if not is_over:
            logger.info("Game over after %d moves", move_count)
        is_over = True

    return GameState(board=board, move_count=move_count, is_over=is_over, moved=changed)

def handle_swipe(
    state: GameState,
    dx: float,
    dy: float,
    rng: Optional[random.Random] = None,
    settings: Optional[GameSettings] = None,
) -> GameState:
    """
    Classifies a drag vector and plays the resulting move.
    A drag inside the dead zone leaves the state untouched.
    """
    settings = settings or DEFAULT_SETTINGS
    direction = classify_direction(dx, dy, settings.swipe_dead_zone)
    if direction is None:
        logger.debug("Ignoring swipe (%s, %s) inside dead zone", dx, dy)
        return state.model_copy(update={"moved": False})
    return apply_move(state, direction, rng, settings)
