"""
Player state and dice.
"""

import random
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from boardsession.exceptions import InvalidConfigurationError, InvalidRollError


@runtime_checkable
class SessionPlayer(Protocol):
    """What a session needs from a player: a position and a dice roll."""

    position: int

    def roll_dice(self) -> int:
        ...


class Player:
    """Represents the state of a player in the session."""

    def __init__(
        self,
        player_id: int,
        name: str,
        cash: int = 1500,
        rng: Optional[random.Random] = None,
        dice_count: int = 2,
        dice_sides: int = 6,
    ):
        if dice_count < 1 or dice_sides < 1:
            raise InvalidConfigurationError(
                f"player {name} needs at least one die with one side, "
                f"got {dice_count}d{dice_sides}"
            )
        self.player_id = player_id
        self.name = name
        self.cash = cash
        self.position = 0
        self.dice_count = dice_count
        self.dice_sides = dice_sides
        self.rng = rng if rng is not None else random.Random()
        self.last_roll: Optional[Tuple[int, ...]] = None

    def throw(self) -> Tuple[int, ...]:
        """Throw the dice and return the individual faces."""
        return tuple(self.rng.randint(1, self.dice_sides) for _ in range(self.dice_count))

    def roll_dice(self) -> int:
        """
        Roll the dice and return the total.

        Raises:
            InvalidRollError: if the total is not a positive number
        """
        dice = self.throw()
        total = sum(dice)
        if total <= 0:
            raise InvalidRollError(f"{self.name} rolled {total}, rolls must be positive")
        self.last_roll = dice
        return total

    def __repr__(self) -> str:
        return (
            f"Player(id={self.player_id}, name='{self.name}', "
            f"cash={self.cash}, position={self.position})"
        )


PLAYER_NAMES = ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Hank"]


def create_players(config, count: int, rng: Optional[random.Random] = None) -> List[Player]:
    """Create `count` players with the config's cash and dice, sharing one RNG."""
    if count < 1 or count > len(PLAYER_NAMES):
        raise InvalidConfigurationError(f"player count must be 1-{len(PLAYER_NAMES)}, got {count}")
    rng = rng if rng is not None else config.rng_for("dice")
    return [
        Player(i, PLAYER_NAMES[i], config.starting_cash, rng, config.dice_count, config.dice_sides)
        for i in range(count)
    ]
