import random

import pytest

from horrified.board import Board
from horrified.characters import Dracula, InvisibleMan
from horrified.heroes import Archaeologist, Mayor
from horrified.items import Item, ItemBag
from horrified.movement import Movement
from horrified.perks import BreakOfDawn, LateIntoTheNight, PerkBag


def answers(*values):
    it = iter(values)
    return lambda prompt="": next(it)


def empty_bag():
    return PerkBag(random.Random(1))


def make_movement(first, second):
    board = Board(ask=answers())
    return Movement(board, first, second, Dracula(), InvisibleMan())


def test_action_counts():
    mayor = Mayor(empty_bag(), answers())
    arch = Archaeologist(empty_bag(), answers())
    mayor.reset_actions()
    arch.reset_actions()
    assert mayor.actions == 5
    assert arch.actions == 4
    mayor.add_actions(2)
    assert mayor.actions == 7


def test_draws_one_perk_at_start():
    bag = PerkBag(random.Random(3))
    bag.fill()
    hero = Mayor(bag, answers())
    assert hero.perk_count() == 1
    assert hero.name == "Mayor"


def test_empty_perk_bag_gives_no_perk():
    hero = Archaeologist(empty_bag(), answers())
    assert hero.perk_count() == 0
    assert hero.name == "Archaeologist"


def test_can_destroy_spends_matching_items():
    hero = Mayor(empty_bag(), answers())
    hero.item_bag = ItemBag()
    before = len(hero.item_bag.out_of_game)
    red1 = Item("torch", "barn", "red", 2)
    red2 = Item("crossbow", "dungion", "red", 4)
    yellow = Item("garlic", "inn", "yellow", 2)
    hero.items = [red1, yellow, red2]
    assert hero.can_destroy(6, "red") is True
    assert hero.items == [yellow]
    assert hero.item_bag.out_of_game[before:] == [red1, red2]
    assert hero.item_count() == 1


def test_can_destroy_keeps_items_when_too_weak():
    hero = Mayor(empty_bag(), answers())
    hero.item_bag = ItemBag()
    items = [Item("torch", "barn", "red", 2), Item("garlic", "inn", "yellow", 4)]
    hero.items = list(items)
    assert hero.can_destroy(6, "red") is False
    assert hero.items == items


def test_give_up_item_without_items_raises():
    hero = Mayor(empty_bag(), answers())
    with pytest.raises(RuntimeError):
        hero.give_up_item()


def test_give_up_item_returns_newest_to_bag():
    hero = Archaeologist(empty_bag(), answers())
    hero.item_bag = ItemBag()
    first = Item("axe", "barn", "red", 2)
    second = Item("stake", "abbey", "yellow", 3)
    hero.items = [first, second]
    assert hero.give_up_item() == second
    assert hero.items == [first]
    assert hero.item_bag.out_of_game[-1] == second


def test_turn_ends_on_bad_action_without_perks():
    hero = Mayor(empty_bag(), answers("9", "1"))
    other = Archaeologist(empty_bag(), answers())
    movement = make_movement(hero, other)
    assert hero.take_turn(movement) is False
    assert hero.actions == 5


def test_turn_plays_late_into_the_night():
    hero = Mayor(empty_bag(), answers("9", "1", "0"))
    hero.add_perk(LateIntoTheNight())
    other = Archaeologist(empty_bag(), answers())
    movement = make_movement(hero, other)
    assert hero.take_turn(movement) is False
    assert hero.actions == 7
    assert hero.perk_count() == 0


def test_break_of_dawn_skips_monster_phase():
    hero = Archaeologist(empty_bag(), answers("9", "1", "0"))
    hero.add_perk(BreakOfDawn())
    other = Mayor(empty_bag(), answers())
    movement = make_movement(hero, other)
    assert hero.take_turn(movement) is True
    assert sum(len(place.items) for place in movement.board) == 2