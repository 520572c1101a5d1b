"""Pokemons, their elements and the backpack used during fights."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

TEAM_SIZE = 3
POKEBALLS = ("Normalball", "Superball", "Masterball")


class Element(Enum):
    """Element of a pokemon, with the numeric codes used by the game."""

    EARTH = 10
    WATER = 20
    AIR = 30
    FIRE = 40


@dataclass
class Pokemon:
    """A pokemon as kept in a backpack or box."""

    name: str
    level: int
    index: int
    health: int
    element: Element


_PRESETS: dict[int, tuple[tuple[str, int, Element], ...]] = {
    # first opponent
    1: (
        ("jistolwer", 50, Element.WATER),
        ("auron", 60, Element.WATER),
        ("pulple", 70, Element.AIR),
    ),
    # fire pokemons of the underground trainer
    2: (
        ("poras", 100, Element.FIRE),
        ("arfau", 100, Element.FIRE),
        ("lowtor", 100, Element.FIRE),
    ),
    # mixed team
    3: (
        ("wapefet", 100, Element.AIR),
        ("sandlax", 100, Element.EARTH),
        ("auron", 100, Element.WATER),
    ),
    # the referee
    4: (
        ("abata", 100, Element.AIR),
        ("golnite", 100, Element.WATER),
        ("pikalee", 100, Element.FIRE),
    ),
}


def preset_team(number: int) -> list[Pokemon]:
    """Return a fresh copy of one of the standard opponent teams."""
    try:
        entries = _PRESETS[number]
    except KeyError:
        raise ValueError(f"no preset team numbered {number}") from None
    return [
        Pokemon(name, 1, index, health, element)
        for index, (name, health, element) in enumerate(entries)
    ]


def _empty_team() -> list[Optional[Pokemon]]:
    return [None] * TEAM_SIZE


def _empty_pokeballs() -> dict[str, int]:
    return dict.fromkeys(POKEBALLS, 0)


@dataclass
class FightBackpack:
    """The team and pokeballs a side brings into a fight."""

    pokemons: list[Optional[Pokemon]] = field(default_factory=_empty_team)
    pokeballs: dict[str, int] = field(default_factory=_empty_pokeballs)
    bag_number: int = 0

    def load_preset(self, number: int) -> None:
        """Fill the team with a standard preset; unknown numbers leave it unchanged."""
        self.bag_number = number
        if number in _PRESETS:
            self.pokemons = list(preset_team(number))

    def alive_pokemons(self) -> bool:
        """False exactly when every pokemon in the team has fainted."""
        return any(p is not None and p.health > 0 for p in self.pokemons)

    def heal_pokemons(self) -> None:
        """Restore every pokemon in the team to full health."""
        for pokemon in self.pokemons:
            if pokemon is not None:
                pokemon.health = 100