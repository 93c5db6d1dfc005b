"""
Board space definitions and types.

Every space exposes `effect(player)`, which may change the player's state
and returns a human-readable description of what happened.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Tuple


class SpaceType(Enum):
    """Types of spaces on the board."""

    GO = "go"
    TAX = "tax"
    CHANCE = "chance"
    JAIL = "jail"
    GO_TO_JAIL = "go_to_jail"
    FREE_PARKING = "free_parking"


class Grid(Protocol):
    """What a session needs from a board space."""

    def effect(self, player) -> str:
        ...


# (text, cash delta)
CHANCE_CARDS: Tuple[Tuple[str, int], ...] = (
    ("Bank pays you dividend", 50),
    ("Speeding fine", -15),
    ("Your building loan matures", 150),
    ("Pay poor tax", -15),
    ("You have won a crossword competition", 100),
    ("Doctor's fee", -50),
)


@dataclass
class Space:
    """Base class for a board space."""

    name: str
    position: int
    space_type: SpaceType

    def effect(self, player) -> str:
        return f"{player.name} lands on {self.name}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', position={self.position})"


@dataclass
class GoSpace(Space):
    """The GO space."""

    def __init__(self, position: int = 0):
        super().__init__("GO", position, SpaceType.GO)


@dataclass
class FreeParkingSpace(Space):
    """A space where nothing happens."""

    def __init__(self, position: int, name: str = "Free Parking"):
        super().__init__(name, position, SpaceType.FREE_PARKING)

    def effect(self, player) -> str:
        return f"{player.name} rests on {self.name}"


@dataclass
class JailSpace(Space):
    """The Jail/Just Visiting space."""

    def __init__(self, position: int):
        super().__init__("Jail", position, SpaceType.JAIL)

    def effect(self, player) -> str:
        return f"{player.name} is just visiting {self.name}"


@dataclass
class TaxSpace(Space):
    """A tax space. Landing costs a fixed amount of cash."""

    amount: int

    def __init__(self, name: str, position: int, amount: int):
        super().__init__(name, position, SpaceType.TAX)
        self.amount = amount

    def effect(self, player) -> str:
        player.cash -= self.amount
        return f"{player.name} pays ${self.amount} {self.name} (cash: ${player.cash})"


@dataclass
class ChanceSpace(Space):
    """A Chance space. Draws a card that adds or removes cash."""

    rng: random.Random

    def __init__(self, position: int, rng: Optional[random.Random] = None):
        super().__init__("Chance", position, SpaceType.CHANCE)
        self.rng = rng if rng is not None else random.Random()

    def draw(self) -> Tuple[str, int]:
        return self.rng.choice(CHANCE_CARDS)

    def effect(self, player) -> str:
        text, delta = self.draw()
        player.cash += delta
        sign = "+" if delta >= 0 else "-"
        return f"{player.name} draws Chance: {text} ({sign}${abs(delta)}, cash: ${player.cash})"


@dataclass
class GoToJailSpace(Space):
    """The Go To Jail space. Sends the player to the jail position."""

    jail_position: int

    def __init__(self, position: int, jail_position: int):
        super().__init__("Go To Jail", position, SpaceType.GO_TO_JAIL)
        self.jail_position = jail_position

    def effect(self, player) -> str:
        player.position = self.jail_position
        return f"{player.name} goes to jail (position {self.jail_position})"
