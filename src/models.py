# models.py
# Immutable value types shared by the engine and its front-ends.

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

BOARD_SIZE = 4

class DIRECTION(Enum):
    """Represents the possible move directions."""
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

# --- Pydantic Models for the game state ---

class Tile(BaseModel):
    """A single tile. Two tiles are equal when their values are equal."""
    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=2, description="Tile value, a power of two (2, 4, 8, ...).")

    @field_validator("value")
    @classmethod
    def _power_of_two(cls, value: int) -> int:
        if value & (value - 1):
            raise ValueError(f"Tile value must be a power of two, got {value}.")
        return value

    def doubled(self) -> "Tile":
        """Returns the tile produced by merging this tile with an equal one."""
        return Tile(value=self.value * 2)


Line = Tuple[Optional[Tile], ...]
Board = Tuple[Line, ...]


class GameState(BaseModel):
    """Represents the complete state of a game instance."""
    model_config = ConfigDict(frozen=True)

    board: Board = Field(..., description="The 4 x 4 board; None marks an empty cell.")
    move_count: int = Field(default=0, ge=0, description="Number of counted moves so far.")
    is_over: bool = Field(default=False, description="True once no legal move remains.")
    moved: bool = Field(
        default=False,
        description="True if the most recent move changed the board."
    )

    @field_validator("board")
    @classmethod
    def _four_by_four(cls, board: Board) -> Board:
        if len(board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in board):
            raise ValueError(f"Board must be a {BOARD_SIZE} x {BOARD_SIZE} grid.")
        return board
