# campusmon

This package holds the game state and rules for a small campus role-playing game. In the game
you catch monsters, carry three of them in a backpack, keep more in a ten-slot box and heal them
at a center. Keyboard events drive the menus. The package keeps no screen of its own. A front
end reads the state and draws it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `campusmon.keys` defines `Key` (UP, DOWN, LEFT, RIGHT, D, X), `EventKind` and the frozen
  `KeyEvent`, which has `is_press(key)` and `is_release(key)`. The helpers `press(key)` and
  `release(key)` build events.
- `campusmon.monsters` has the following:
  - `Element` (EARTH=10, WATER=20, AIR=30, FIRE=40).
  - The `Pokemon` dataclass (name, level, index, health, element).
  - `preset_team(number)`, which returns one of the four built-in opponent teams. It raises
    `ValueError` for any other number.
  - `FightBackpack`, which holds a team of three and a pokeball count. Its methods are
    `load_preset`, `alive_pokemons` and `heal_pokemons`.
- `campusmon.inventory` has `Inventory`. It holds item counts, a capacity of 30 and a wallet of
  300, and the game starts with 3 Normalballs. Its methods are:
  - `num_item()`, the total count.
  - `selected_name()`.
  - `move_up` and `move_down`, which move the item cursor.
  - `delete`, which drops one of the selected item when D is pressed.
- `campusmon.backpack` has `BackpackMap`, the backpack screen. It has an item column and a
  column for the three carried monsters. `handle_event(event)` applies a key event to both
  columns:
  - LEFT and RIGHT change the focused column.
  - UP and DOWN move the cursors.
  - X selects a small or big health potion, and on the team column X uses it on the selected
    monster. A small potion heals to full from 80 health, or gives +20 below that. A big potion
    heals to full from 50 health, or gives +50 below that.
  - X twice on the team column swaps two monsters.
- `campusmon.storage` has `PokemonStorage`, which holds ten slots and the names of the monsters
  stored. `add(...)` fills the first free slot and returns `False` when the box is full.
- `campusmon.box` has `Box`, the box screen. It swaps monsters between the backpack and the
  storage. You press X on one, change column and press X on the other. `add_pokemon(pokemon,
  backpack)` puts a newly caught monster in the backpack. If the backpack is full, it goes to
  the box instead.
- `campusmon.center` has `Center`, the healing center menu ("Heal", "Pokemon Box"). Pressing X
  on "Heal" restores every carried monster to 100 health, and then `handle_event` returns
  `True`.
- `campusmon.collision` has `Sprite`, a texture rectangle cut from an alpha mask and placed by
  position, origin, scale and rotation. It also has these collision tests:
  - `pixel_perfect_test(first, second, alpha_limit)`
  - `circle_test(first, second)`
  - `bounding_box_test(first, second)`, a separating-axis test that uses
    `OrientedBoundingBox`.

Every menu handler follows the same rule: an action fires once when a key is pressed, and it is
armed again only when that key is released.

## Example

```python
from campusmon.backpack import BackpackMap
from campusmon.box import Box
from campusmon.center import Center
from campusmon.keys import Key, press
from campusmon.monsters import Element, Pokemon

backpack = BackpackMap()
box = Box()
box.add_pokemon(Pokemon("auron", 1, 0, 40, Element.WATER), backpack)  # True: backpack slot 0

center = Center()
center.handle_event(press(Key.X), backpack)  # True
backpack.pokemons[0].health                  # 100

backpack.inventory.num_item()                # 3
backpack.handle_event(press(Key.D))          # throws away one Normalball
backpack.inventory.items["Normalball"]       # 2
```

```python
from campusmon.collision import Sprite, bounding_box_test, pixel_perfect_test

solid = [[255] * 4 for _ in range(4)]
a = Sprite(solid)
b = Sprite(solid, position=(2.0, 2.0))
pixel_perfect_test(a, b, 0)  # True
bounding_box_test(a, b)      # True
```

## What it does not do

The package draws nothing and opens no window. It also has no fights. There are no bullets, no
ammunition or shooting, no pokeball throws and no fight loop. `FightBackpack` and the collision
tests are the only parts of fighting it provides. Nothing is saved to disk.