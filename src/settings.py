# settings.py
# Tunables for the engine and the terminal driver.

from pydantic import BaseModel, ConfigDict, Field

from models import BOARD_SIZE

class GameSettings(BaseModel):
    """Settings for creating and playing a game."""
    model_config = ConfigDict(frozen=True)

    start_tiles: int = Field(
        default=2,
        ge=0,
        le=BOARD_SIZE * BOARD_SIZE,
        description="Number of tiles spawned on a new or restarted game."
    )
    four_tile_odds: int = Field(
        default=10,
        ge=1,
        description="A spawned tile is a 4 with probability 1 / four_tile_odds, otherwise a 2."
    )
    count_ineffective_moves: bool = Field(
        default=True,
        description="Count a move that left the board unchanged, as long as a legal move remains."
    )
    swipe_dead_zone: float = Field(
        default=0.0,
        ge=0.0,
        description="Drags shorter than this are ignored. 0 disables the dead zone."
    )


DEFAULT_SETTINGS = GameSettings()
