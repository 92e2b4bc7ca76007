# gestures.py
# Maps raw drag vectors from a pointer or touch surface onto move directions.

import math
from typing import Optional

from models import DIRECTION

def classify_direction(dx: float, dy: float, dead_zone: float = 0.0) -> Optional[DIRECTION]:
    """
    Classifies a drag displacement into one of the four move directions.

    The dominant axis wins; ties go to the vertical axis, so a (0, 0) drag
    resolves to UP. Screen coordinates are assumed (positive dy points down).
    Args:
        dx (float): Horizontal displacement.
        dy (float): Vertical displacement.
        dead_zone (float): Minimum drag length. Shorter drags return None.
                           The default of 0 never returns None.
    Returns:
        Optional[DIRECTION]: The direction, or None for a drag inside the dead zone.
    Raises:
        ValueError: If dead_zone is negative.
    """
    if dead_zone < 0:
        raise ValueError("dead_zone must not be negative.")
    if dead_zone > 0 and math.hypot(dx, dy) < dead_zone:
        return None

    if abs(dx) > abs(dy):
        return DIRECTION.RIGHT if dx > 0 else DIRECTION.LEFT
    return DIRECTION.DOWN if dy > 0 else DIRECTION.UP
