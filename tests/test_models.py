import pytest
from pydantic import ValidationError

from models import GameState, Tile
from settings import GameSettings


def test_tiles_compare_by_value():
    assert Tile(value=8) == Tile(value=8)
    assert Tile(value=8) != Tile(value=16)

@pytest.mark.parametrize("value", [0, 1, 3, 6, 12, -2])
def test_tile_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        Tile(value=value)

def test_tile_is_immutable():
    tile = Tile(value=2)
    with pytest.raises(ValidationError):
        tile.value = 4

def test_doubled_returns_new_tile():
    tile = Tile(value=32)
    merged = tile.doubled()
    assert merged.value == 64
    assert tile.value == 32

def test_game_state_defaults():
    board = tuple((None,) * 4 for _ in range(4))
    state = GameState(board=board)
    assert state.move_count == 0
    assert state.is_over is False
    assert state.moved is False

@pytest.mark.parametrize("board", [
    [[None] * 4] * 3,
    [[None] * 4, [None] * 4, [None] * 3, [None] * 4],
    [[None] * 5] * 4,
])
def test_game_state_rejects_other_shapes(board):
    with pytest.raises(ValidationError):
        GameState(board=board)

def test_game_state_rejects_negative_move_count():
    with pytest.raises(ValidationError):
        GameState(board=[[None] * 4] * 4, move_count=-1)

def test_settings_validation():
    assert GameSettings().four_tile_odds == 10
    with pytest.raises(ValidationError):
        GameSettings(four_tile_odds=0)
    with pytest.raises(ValidationError):
        GameSettings(swipe_dead_zone=-1.0)
    with pytest.raises(ValidationError):
        GameSettings(start_tiles=17)
