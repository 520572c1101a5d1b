"""The pokemon box screen: the carried team on the left, the box on the right."""

from __future__ import annotations

from typing import Optional

from .backpack import BackpackMap
from .keys import Key, KeyEvent
from .monsters import TEAM_SIZE, Pokemon
from .storage import BOX_SIZE, PokemonStorage

LEFT_COLUMN = 0
RIGHT_COLUMN = 1
NO_COLUMN = -1
BOXED_INDEX = 3


class Box:
    """Cursors and pending swap of the box screen, driven by key events.

    The left column shows the pokemons carried in the backpack and the right
    column those kept in the box.  A pokemon is swapped between the two by
    pressing X on it, moving to the other column and pressing X again.
    """

    def __init__(self) -> None:
        self.storage = PokemonStorage()
        self.column = LEFT_COLUMN
        self.selected_left = 0
        self.selected_right = 0
        self.release = True
        self.release_left = True
        self.release_right = True
        self.release_up_left = True
        self.release_down_left = True
        self.release_up_right = True
        self.release_down_right = True
        self.switching = False
        self.switch_first = -1
        self.switch_second = -1
        self.switch_column = NO_COLUMN
        self.selected_first: Optional[int] = None
        self.selected_second: Optional[int] = None

    @property
    def pokemons(self) -> list[Optional[Pokemon]]:
        """The ten box slots."""
        return self.storage.pokemons

    @property
    def names(self) -> list[str]:
        """Names of the pokemons put in the box so far."""
        return self.storage.names

    def handle_event(self, event: KeyEvent, backpack: BackpackMap) -> None:
        """Apply one key event to the cursors and to a pending swap."""
        self.move_right(event)
        self.move_left(event)
        self.move_up_right(event)
        self.move_down_right(event)
        self.move_up_left(event)
        self.move_down_left(event, backpack)
        self.switch_pokemon(backpack, event)

    def move_up_left(self, event: KeyEvent) -> None:
        """Move the backpack cursor one slot up."""
        if self.column != LEFT_COLUMN:
            return
        if event.is_press(Key.UP) and self.release_up_left:
            if self.selected_left > 0:
                self.selected_left -= 1
            self.release_up_left = False
        elif event.is_release(Key.UP):
            self.release_up_left = True

    def move_down_left(self, event: KeyEvent, backpack: BackpackMap) -> None:
        """Move the backpack cursor one slot down, onto an occupied slot only."""
        if self.column != LEFT_COLUMN:
            return
        if event.is_press(Key.DOWN) and self.release_down_left:
            below = self.selected_left + 1
            if below < TEAM_SIZE and backpack.pokemons[below] is not None:
                self.selected_left = below
            self.release_down_left = False
        elif event.is_release(Key.DOWN):
            self.release_down_left = True

    def move_up_right(self, event: KeyEvent) -> None:
        """Move the box cursor one slot up."""
        if self.column != RIGHT_COLUMN:
            return
        if event.is_press(Key.UP) and self.release_up_right:
            if self.selected_right > 0:
                self.selected_right -= 1
            self.release_up_right = False
        elif event.is_release(Key.UP):
            self.release_up_right = True

    def move_down_right(self, event: KeyEvent) -> None:
        """Move the box cursor one slot down, onto an occupied slot only.

        Up and down in the box column share one release flag.
        """
        if self.column != RIGHT_COLUMN:
            return
        if event.is_press(Key.DOWN) and self.release_up_right:
            below = self.selected_right + 1
            if below < BOX_SIZE and self.pokemons[below] is not None:
                self.selected_right = below
            self.release_up_right = False
        elif event.is_release(Key.DOWN):
            self.release_up_right = True

    def move_left(self, event: KeyEvent) -> None:
        """Give the focus to the backpack column."""
        if self.column != RIGHT_COLUMN:
            return
        if event.is_press(Key.LEFT) and self.release:
            self.column = LEFT_COLUMN
            self.release_left = False
        elif event.is_release(Key.LEFT):
            self.release_left = True

    def move_right(self, event: KeyEvent) -> None:
        """Give the focus to the box column, if the box holds a pokemon."""
        if self.column != LEFT_COLUMN or self.pokemons[0] is None:
            return
        if event.is_press(Key.RIGHT) and self.release:
            self.column = RIGHT_COLUMN
            self.release_right = False
        elif event.is_release(Key.RIGHT):
            self.release_right = True

    def _selected(self) -> int:
        return self.selected_left if self.column == LEFT_COLUMN else self.selected_right

    def switch_pokemon(self, backpack: BackpackMap, event: KeyEvent) -> None:
        """Mark a pokemon with X, then swap it with the one chosen in the other column."""
        if not event.is_press(Key.X):
            return
        if not self.switching:
            self.switching = True
            self.selected_first = self._selected()
            self.switch_first = self.selected_first
            self.switch_column = self.column
        if self.switching and self.column != self.switch_column:
            self.selected_second = self._selected()
            self.switch_second = self.selected_second
            first, second = self.switch_first, self.switch_second
            if self.switch_column == LEFT_COLUMN:
                backpack_slot, box_slot = first, second
            else:
                box_slot, backpack_slot = first, second
            backpack.pokemons[backpack_slot], self.pokemons[box_slot] = (
                self.pokemons[box_slot],
                backpack.pokemons[backpack_slot],
            )
            carried = backpack.pokemons[backpack_slot]
            if carried is not None:
                carried.index = backpack_slot
            boxed = self.pokemons[box_slot]
            if boxed is not None:
                boxed.index = BOXED_INDEX
            self.switching = False
            self.switch_first = -1
            self.switch_second = -1
            self.switch_column = NO_COLUMN

    def add_pokemon(self, pokemon: Pokemon, backpack: BackpackMap) -> bool:
        """Put a pokemon in the backpack, or in the box when the backpack is full.

        Returns False when both are full.
        """
        for slot, held in enumerate(backpack.pokemons):
            if held is None:
                backpack.pokemons[slot] = Pokemon(
                    pokemon.name, pokemon.level, slot, pokemon.health, pokemon.element
                )
                return True
        return self.storage.add(pokemon.name, pokemon.level, pokemon.health, pokemon.element)