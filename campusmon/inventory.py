"""Item inventory shown in the backpack menu."""

from __future__ import annotations

from dataclasses import dataclass, field

from .keys import Key, KeyEvent

ITEM_TYPES = (
    "Normalball",
    "Superball",
    "Masterball",
    "SmallHealthPotion",
    "BigHealthPotion",
    "Torch",
)

ITEM_COLUMN = 1
POKEMON_COLUMN = 0


def _starting_items() -> dict[str, int]:
    items = dict.fromkeys(ITEM_TYPES, 0)
    items["Normalball"] = 3
    return items


@dataclass
class Inventory:
    """Items, money and the item-column cursor of the backpack.

    ``column`` tells which column of the backpack screen has the focus; the
    item menu only reacts to keys while it is ``ITEM_COLUMN``.  A key must be
    released before it acts again, so holding it down acts only once.
    """

    items: dict[str, int] = field(default_factory=_starting_items)
    capacity: int = 30
    wallet: int = 300
    selected: int = 0
    column: int = ITEM_COLUMN
    delete_released: bool = True
    arrow_released: bool = True

    def num_item(self) -> int:
        """Total number of items carried."""
        return sum(self.items.values())

    def selected_name(self) -> str:
        """Name of the item under the cursor."""
        return ITEM_TYPES[self.selected]

    def delete(self, event: KeyEvent) -> None:
        """Throw away one of the selected item when D is pressed."""
        if self.column != ITEM_COLUMN:
            return
        if event.is_press(Key.D) and self.delete_released:
            name = self.selected_name()
            if self.items.get(name, 0) > 0:
                self.items[name] -= 1
            self.delete_released = False
        elif event.is_release(Key.D):
            self.delete_released = True

    def move_up(self, event: KeyEvent) -> None:
        """Move the cursor one item up, stopping at the first."""
        if self.column != ITEM_COLUMN:
            return
        if event.is_press(Key.UP) and self.arrow_released:
            if self.selected > 0:
                self.selected -= 1
            self.arrow_released = False
        elif event.is_release(Key.UP):
            self.arrow_released = True

    def move_down(self, event: KeyEvent) -> None:
        """Move the cursor one item down, stopping at the last."""
        if self.column != ITEM_COLUMN:
            return
        if event.is_press(Key.DOWN) and self.arrow_released:
            if self.selected < len(ITEM_TYPES) - 1:
                self.selected += 1
            self.arrow_released = False
        elif event.is_release(Key.DOWN):
            self.arrow_released = True