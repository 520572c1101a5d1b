import pytest

from campusmon.backpack import BackpackMap
from campusmon.box import BOXED_INDEX, LEFT_COLUMN, RIGHT_COLUMN, Box
from campusmon.keys import Key, press, release
from campusmon.monsters import Element, Pokemon


def _poke(name, level=1, health=100, element=Element.FIRE):
    return Pokemon(name, level, 0, health, element)


@pytest.fixture
def full_team():
    box = Box()
    backpack = BackpackMap()
    for name in ("a", "b", "c"):
        assert box.add_pokemon(_poke(name), backpack)
    return box, backpack


def test_add_fills_backpack_first(full_team):
    box, backpack = full_team
    assert [p.name for p in backpack.pokemons] == ["a", "b", "c"]
    assert [p.index for p in backpack.pokemons] == [0, 1, 2]
    assert all(p is None for p in box.pokemons)
    assert box.names == []


def test_add_goes_to_box_when_backpack_full(full_team):
    box, backpack = full_team
    assert box.add_pokemon(_poke("d", level=4, element=Element.WATER), backpack)
    stored = box.pokemons[0]
    assert stored.name == "d"
    assert stored.level == 4
    assert stored.element is Element.WATER
    assert box.names == ["d"]


def test_add_fails_when_everything_full(full_team):
    box, backpack = full_team
    for n in range(10):
        assert box.add_pokemon(_poke(f"p{n}"), backpack)
    assert not box.add_pokemon(_poke("extra"), backpack)
    assert len(box.names) == 10


def test_move_right_needs_pokemon_in_box(full_team):
    box, _ = full_team
    box.move_right(press(Key.RIGHT))
    assert box.column == LEFT_COLUMN


def test_move_right_and_left(full_team):
    box, backpack = full_team
    box.add_pokemon(_poke("d"), backpack)
    box.move_right(press(Key.RIGHT))
    assert box.column == RIGHT_COLUMN
    box.move_left(press(Key.LEFT))
    assert box.column == LEFT_COLUMN


def test_move_down_left_only_onto_occupied_slot():
    box = Box()
    backpack = BackpackMap()
    box.add_pokemon(_poke("a"), backpack)
    box.move_down_left(press(Key.DOWN), backpack)
    assert box.selected_left == 0
    box.add_pokemon(_poke("b"), backpack)
    box.move_down_left(release(Key.DOWN), backpack)
    box.move_down_left(press(Key.DOWN), backpack)
    assert box.selected_left == 1


def test_move_down_left_needs_release(full_team):
    box, backpack = full_team
    box.move_down_left(press(Key.DOWN), backpack)
    box.move_down_left(press(Key.DOWN), backpack)
    assert box.selected_left == 1
    box.move_down_left(release(Key.DOWN), backpack)
    box.move_down_left(press(Key.DOWN), backpack)
    assert box.selected_left == 2
    box.move_up_left(press(Key.UP))
    assert box.selected_left == 1


def test_move_down_right_shares_flag_with_up(full_team):
    box, backpack = full_team
    for name in ("d", "e", "f"):
        box.add_pokemon(_poke(name), backpack)
    box.column = RIGHT_COLUMN
    box.move_down_right(press(Key.DOWN))
    assert box.selected_right == 1
    box.move_down_right(press(Key.DOWN))
    assert box.selected_right == 1
    box.move_up_right(release(Key.UP))
    box.move_down_right(press(Key.DOWN))
    assert box.selected_right == 2
    box.move_down_right(release(Key.DOWN))
    box.move_down_right(press(Key.DOWN))
    assert box.selected_right == 2


def test_move_up_right_stops_at_top(full_team):
    box, backpack = full_team
    box.add_pokemon(_poke("d"), backpack)
    box.column = RIGHT_COLUMN
    box.move_up_right(press(Key.UP))
    assert box.selected_right == 0


def test_switch_from_backpack_to_box(full_team):
    box, backpack = full_team
    box.add_pokemon(_poke("d"), backpack)
    box.handle_event(press(Key.X), backpack)
    assert box.switching
    assert box.selected_first == 0
    box.handle_event(release(Key.X), backpack)
    box.handle_event(press(Key.RIGHT), backpack)
    assert box.column == RIGHT_COLUMN
    box.handle_event(press(Key.X), backpack)
    assert backpack.pokemons[0].name == "d"
    assert backpack.pokemons[0].index == 0
    assert box.pokemons[0].name == "a"
    assert box.pokemons[0].index == BOXED_INDEX
    assert not box.switching


def test_switch_from_box_to_backpack(full_team):
    box, backpack = full_team
    box.add_pokemon(_poke("d"), backpack)
    box.add_pokemon(_poke("e"), backpack)
    box.column = RIGHT_COLUMN
    box.handle_event(press(Key.DOWN), backpack)
    assert box.selected_right == 1
    box.handle_event(press(Key.X), backpack)
    box.handle_event(press(Key.LEFT), backpack)
    box.handle_event(release(Key.DOWN), backpack)
    box.handle_event(press(Key.DOWN), backpack)
    box.handle_event(press(Key.DOWN), backpack)
    assert box.selected_left == 1
    box.handle_event(press(Key.X), backpack)
    assert backpack.pokemons[1].name == "e"
    assert backpack.pokemons[1].index == 1
    assert box.pokemons[1].name == "b"
    assert box.pokemons[1].index == BOXED_INDEX
    assert box.switch_first == -1


def test_x_in_same_column_does_not_swap(full_team):
    box, backpack = full_team
    box.switch_pokemon(backpack, press(Key.X))
    box.switch_pokemon(backpack, press(Key.X))
    assert [p.name for p in backpack.pokemons] == ["a", "b", "c"]
    assert box.switching