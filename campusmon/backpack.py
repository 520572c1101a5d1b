"""The backpack screen: items on the right, the carried team on the left."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .inventory import ITEM_COLUMN, POKEMON_COLUMN, Inventory
from .keys import Key, KeyEvent
from .monsters import TEAM_SIZE, Pokemon

FULL_HEALTH = 100


@dataclass
class Potion:
    """A healing potion and the selection state it has on the backpack screen.

    A pokemon whose health is at least ``threshold`` is healed to full;
    below it, it gains ``gain`` health points.
    """

    name: str
    threshold: int
    gain: int
    selected: bool = False
    released: bool = True


class BackpackMap:
    """Items, money and the three carried pokemons, driven by key events."""

    def __init__(self) -> None:
        self.inventory = Inventory()
        self.pokemons: list[Optional[Pokemon]] = [None] * TEAM_SIZE
        self.selected_pokemon = 0
        self.location = ""
        self.small_potion = Potion("SmallHealthPotion", threshold=80, gain=20)
        self.big_potion = Potion("BigHealthPotion", threshold=50, gain=50)
        self.release_left = True
        self.release_right = True
        self.switching = False
        self.switch_first = -1

    @property
    def column(self) -> int:
        """Which column has the focus: items or pokemons."""
        return self.inventory.column

    @column.setter
    def column(self, value: int) -> None:
        self.inventory.column = value

    def handle_event(self, event: KeyEvent) -> None:
        """Apply one key event to every part of the screen, in drawing order."""
        self.switch_pokemon(event)
        # background
        self.inventory.delete(event)
        self.heal_small(event)
        self.heal_big(event)
        # item menu
        self.inventory.delete(event)
        self.inventory.move_up(event)
        self.inventory.move_down(event)
        self.move_left(event)
        self.heal_small(event)
        self.heal_big(event)
        # pokemon column
        self.move_right(event)
        self.move_up_pokemon(event)
        self.move_down_pokemon(event)
        self.heal_small(event)
        self.heal_big(event)

    def move_up_pokemon(self, event: KeyEvent) -> None:
        """Move the pokemon cursor one slot up."""
        if self.column != POKEMON_COLUMN:
            return
        if event.is_press(Key.UP) and self.inventory.arrow_released:
            if self.selected_pokemon > 0:
                self.selected_pokemon -= 1
            self.inventory.arrow_released = False
        elif event.is_release(Key.UP):
            self.inventory.arrow_released = True

    def move_down_pokemon(self, event: KeyEvent) -> None:
        """Move the pokemon cursor one slot down, onto an occupied slot only."""
        if self.column != POKEMON_COLUMN:
            return
        if event.is_press(Key.DOWN) and self.inventory.arrow_released:
            below = self.selected_pokemon + 1
            if below < TEAM_SIZE and self.pokemons[below] is not None:
                self.selected_pokemon = below
            self.inventory.arrow_released = False
        elif event.is_release(Key.DOWN):
            self.inventory.arrow_released = True

    def move_left(self, event: KeyEvent) -> None:
        """Give the focus to the pokemon column."""
        if self.column != ITEM_COLUMN:
            return
        if event.is_press(Key.LEFT) and self.inventory.delete_released:
            self.column = POKEMON_COLUMN
            self.release_left = False
        elif event.is_release(Key.LEFT):
            self.release_left = True

    def move_right(self, event: KeyEvent) -> None:
        """Give the focus to the item column."""
        if self.column != POKEMON_COLUMN:
            return
        if event.is_press(Key.RIGHT) and self.inventory.delete_released:
            self.column = ITEM_COLUMN
            self.release_right = False
        elif event.is_release(Key.RIGHT):
            self.release_right = True

    def heal_small(self, event: KeyEvent) -> None:
        """Select, deselect or use a small health potion with X."""
        self._heal(self.small_potion, event)

    def heal_big(self, event: KeyEvent) -> None:
        """Select, deselect or use a big health potion with X."""
        self._heal(self.big_potion, event)

    def _heal(self, potion: Potion, event: KeyEvent) -> None:
        items = self.inventory.items
        on_potion = (
            self.column == ITEM_COLUMN
            and self.inventory.selected_name() == potion.name
            and items.get(potion.name, 0) > 0
        )
        pressed = event.is_press(Key.X)
        released = event.is_release(Key.X)

        if on_potion and not potion.selected:
            if pressed and potion.released:
                potion.selected = True
                potion.released = False
            elif released:
                potion.released = True

        if on_potion and potion.selected:
            if pressed and potion.released:
                potion.selected = False
                potion.released = False
            elif released:
                potion.released = True

        if self.column == POKEMON_COLUMN:
            if pressed and potion.released and potion.selected:
                pokemon = self.pokemons[self.selected_pokemon]
                if pokemon is not None:
                    if potion.threshold <= pokemon.health < FULL_HEALTH:
                        pokemon.health = FULL_HEALTH
                        items[potion.name] -= 1
                        potion.selected = False
                        potion.released = False
                    if pokemon.health < potion.threshold:
                        pokemon.health += potion.gain
                        items[potion.name] -= 1
                        potion.selected = False
                        potion.released = False
            elif released and not potion.selected:
                potion.released = True

        if self.column == ITEM_COLUMN and potion.selected:
            if pressed and potion.released:
                potion.selected = False
            elif released:
                potion.released = True

    def switch_pokemon(self, event: KeyEvent) -> None:
        """Swap two carried pokemons: X on the first, then X on the second."""
        if self.column != POKEMON_COLUMN:
            return
        if not event.is_press(Key.X):
            return
        if not self.switching:
            self.switching = True
            self.switch_first = self.selected_pokemon
        if self.switching and self.selected_pokemon != self.switch_first:
            first, second = self.switch_first, self.selected_pokemon
            self.pokemons[first], self.pokemons[second] = (
                self.pokemons[second],
                self.pokemons[first],
            )
            for index, pokemon in enumerate(self.pokemons):
                if pokemon is not None:
                    pokemon.index = index
            self.switching = False
            self.switch_first = -1