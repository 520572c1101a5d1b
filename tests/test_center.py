import pytest

from campusmon.backpack import BackpackMap
from campusmon.center import ACTIONS, Center
from campusmon.keys import Key, press, release
from campusmon.monsters import Element, Pokemon


@pytest.fixture
def backpack():
    bp = BackpackMap()
    bp.pokemons[0] = Pokemon("auron", 1, 0, 10, Element.WATER)
    bp.pokemons[2] = Pokemon("pulple", 1, 2, 0, Element.AIR)
    return bp


def test_actions():
    assert Center().actions == ("Heal", "Pokemon Box")
    assert ACTIONS[0] == "Heal"


def test_cursor_bounded(backpack):
    center = Center()
    for _ in range(3):
        center.handle_event(press(Key.DOWN), backpack)
        center.handle_event(release(Key.DOWN), backpack)
    assert center.selected == len(ACTIONS) - 1
    for _ in range(3):
        center.handle_event(press(Key.UP), backpack)
        center.handle_event(release(Key.UP), backpack)
    assert center.selected == 0


def test_holding_arrow_moves_once():
    center = Center()
    center.move_down(press(Key.DOWN))
    center.move_up(press(Key.UP))
    assert center.selected == 1


def test_heal_restores_all(backpack):
    center = Center()
    assert center.handle_event(press(Key.X), backpack) is True
    assert backpack.pokemons[0].health == 100
    assert backpack.pokemons[2].health == 100
    assert backpack.pokemons[1] is None


def test_no_heal_on_box_action(backpack):
    center = Center()
    center.move_down(press(Key.DOWN))
    assert center.heal_pokemons(backpack, press(Key.X)) is False
    assert backpack.pokemons[0].health == 10


def test_release_does_not_heal(backpack):
    center = Center()
    assert center.heal_pokemons(backpack, release(Key.X)) is False
    assert backpack.pokemons[2].health == 0