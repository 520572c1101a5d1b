"""The box where caught pokemons wait when the backpack is full."""

from __future__ import annotations

from typing import Optional

from .monsters import Element, Pokemon

BOX_SIZE = 10


class PokemonStorage:
    """Ten slots of stored pokemons and the names of those stored so far."""

    def __init__(self) -> None:
        self.pokemons: list[Optional[Pokemon]] = [None] * BOX_SIZE
        self.names: list[str] = []

    def is_empty(self, index: int) -> bool:
        """True if slot ``index`` holds no pokemon."""
        return self.pokemons[index] is None

    def add(self, name: str, level: int, health: int, element: Element | int) -> bool:
        """Store a pokemon in the first free slot; False if the box is full."""
        for slot in range(BOX_SIZE):
            if self.is_empty(slot):
                self.pokemons[slot] = Pokemon(name, level, slot, health, Element(element))
                self.names.append(name)
                return True
        return False