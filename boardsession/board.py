"""
Default board layout.
"""

import random
from typing import List, Optional

from boardsession.config import MIN_BOARD_SIZE
from boardsession.exceptions import InvalidConfigurationError
from boardsession.spaces import (
    ChanceSpace,
    FreeParkingSpace,
    GoSpace,
    GoToJailSpace,
    JailSpace,
    Space,
    TaxSpace,
)

INCOME_TAX = 200
LUXURY_TAX = 100


def create_board(size: int = 20, rng: Optional[random.Random] = None) -> List[Space]:
    """
    Create a closed loop of `size` spaces.

    The corners sit at GO (0), Jail (size // 4), Free Parking (size // 2)
    and Go To Jail (3 * size // 4). The remaining spaces cycle through
    chance, income tax, empty lots and luxury tax.

    Args:
        size: Number of spaces on the board
        rng: Random source shared by the Chance spaces

    Returns:
        List of spaces, where each space's position equals its index
    """
    if size < MIN_BOARD_SIZE:
        raise InvalidConfigurationError(f"board needs at least {MIN_BOARD_SIZE} spaces, got {size}")

    rng = rng if rng is not None else random.Random()
    jail = size // 4
    corners = {
        0: lambda: GoSpace(0),
        jail: lambda: JailSpace(jail),
        size // 2: lambda: FreeParkingSpace(size // 2),
        3 * size // 4: lambda: GoToJailSpace(3 * size // 4, jail),
    }

    spaces: List[Space] = []
    filler = 0
    for position in range(size):
        if position in corners:
            spaces.append(corners[position]())
            continue
        kind = filler % 4
        if kind == 0:
            spaces.append(ChanceSpace(position, rng))
        elif kind == 1:
            spaces.append(TaxSpace("Income Tax", position, INCOME_TAX))
        elif kind == 2:
            spaces.append(FreeParkingSpace(position, name=f"Empty Lot {position}"))
        else:
            spaces.append(TaxSpace("Luxury Tax", position, LUXURY_TAX))
        filler += 1
    return spaces


def describe_board(spaces: List[Space]) -> str:
    return "\n".join(f"{space.position:>3}  {space.name}" for space in spaces)
