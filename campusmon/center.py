"""The pokemon center menu: heal the team or open the box."""

from __future__ import annotations

from .keys import Key, KeyEvent

ACTIONS = ("Heal", "Pokemon Box")
FULL_HEALTH = 100


class Center:
    """Menu cursor of the pokemon center."""

    def __init__(self) -> None:
        self.selected = 0
        self.arrow_released = True
        self.actions = ACTIONS

    def handle_event(self, event: KeyEvent, backpack) -> bool:
        """Apply a key event; True when the team was healed and the visit ends."""
        self.move_up(event)
        self.move_down(event)
        return self.heal_pokemons(backpack, event)

    def move_up(self, event: KeyEvent) -> None:
        """Move the cursor one action up."""
        if event.is_press(Key.UP) and self.arrow_released:
            if self.selected > 0:
                self.selected -= 1
            self.arrow_released = False
        elif event.is_release(Key.UP):
            self.arrow_released = True

    def move_down(self, event: KeyEvent) -> None:
        """Move the cursor one action down."""
        if event.is_press(Key.DOWN) and self.arrow_released:
            if self.selected < len(self.actions) - 1:
                self.selected += 1
            self.arrow_released = False
        elif event.is_release(Key.DOWN):
            self.arrow_released = True

    def heal_pokemons(self, backpack, event: KeyEvent) -> bool:
        """Heal every carried pokemon when X is pressed on "Heal"."""
        if not (event.is_press(Key.X) and self.selected == 0):
            return False
        for pokemon in backpack.pokemons:
            if pokemon is not None:
                pokemon.health = FULL_HEALTH
        return True