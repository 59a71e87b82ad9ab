import random

import pytest

from horrified.items import ItemBag
from horrified.perks import (
    BreakOfDawn,
    Hurry,
    LateIntoTheNight,
    Overstock,
    PerkBag,
    PerkCard,
    Repel,
    VisitFromTheDetective,
)


class _Spot:
    def __init__(self):
        self.items = []


class _Board:
    def __init__(self):
        self.items = ItemBag()
        self.places = {}

    def get(self, name):
        return self.places.setdefault(name, _Spot())


class _Movement:
    def __init__(self, valid=("cave", "camp")):
        self.board = _Board()
        self.calls = []
        self.valid = valid

    def move_monsters_back(self):
        self.calls.append("monsters")

    def move_heroes_back(self):
        self.calls.append("heroes")

    def send_invisible_man(self, place_name):
        if place_name not in self.valid:
            raise ValueError("Error: The place was not found in the map.")
        self.calls.append(("invisible", place_name))


class _Hero:
    def __init__(self, answers=()):
        self.answers = iter(answers)
        self.actions = 0

    def ask(self, prompt):
        return next(self.answers)

    def add_actions(self, count):
        self.actions += count


def _board_item_total(board):
    return sum(len(spot.items) for spot in board.places.values())


def test_perk_card_is_abstract():
    with pytest.raises(TypeError):
        PerkCard(1)


def test_break_of_dawn_skips_monster_phase_and_adds_items():
    movement = _Movement()
    assert BreakOfDawn(1).play(movement, _Hero()) is True
    assert _board_item_total(movement.board) == 2


def test_overstock_adds_items_without_skipping():
    movement = _Movement()
    assert Overstock(1).play(movement, _Hero()) is False
    assert _board_item_total(movement.board) == 2


def test_late_into_the_night_adds_actions():
    hero = _Hero()
    assert LateIntoTheNight(1).play(_Movement(), hero) is False
    assert hero.actions == 2


def test_repel_moves_monsters():
    movement = _Movement()
    Repel(1).play(movement, _Hero())
    assert movement.calls == ["monsters"]


def test_hurry_moves_heroes():
    movement = _Movement()
    Hurry(1).play(movement, _Hero())
    assert movement.calls == ["heroes"]


def test_detective_retries_until_valid_place():
    movement = _Movement()
    hero = _Hero(["nowhere", "also_nowhere", "camp"])
    assert VisitFromTheDetective(1).play(movement, hero) is False
    assert movement.calls == [("invisible", "camp")]


def test_empty_bag_draws_nothing():
    bag = PerkBag(random.Random(1))
    assert bag.draw() is None


def test_fill_adds_six_kinds():
    bag = PerkBag(random.Random(1))
    bag.fill()
    assert [card.name for card in bag.cards] == [
        "visit_from_the_detective",
        "break_of_dawn",
        "overstock",
        "late_into_the_night",
        "repel",
        "hurry",
    ]
    assert [card.count for card in bag.cards] == [3, 3, 4, 4, 3, 3]


def test_drawn_card_is_single_copy_and_decrements_original():
    bag = PerkBag(random.Random(7))
    bag.fill()
    before = sum(card.count for card in bag.cards)
    drawn = bag.draw()
    assert drawn is not None
    assert drawn.count == 1
    assert sum(card.count for card in bag.cards) == before - 1
    assert drawn not in bag.cards or all(drawn is not card for card in bag.cards)


@pytest.mark.parametrize("seed", [0, 1, 2, 42])
def test_bag_empties_with_one_lost_copy_per_kind(seed):
    bag = PerkBag(random.Random(seed))
    bag.fill()
    counts = [card.count for card in bag.cards]
    kinds = len(bag.cards)
    drawn = []
    misses = 0
    while bag.cards:
        card = bag.draw()
        if card is None:
            misses += 1
        else:
            drawn.append(card)
    assert misses == kinds
    assert len(drawn) == sum(count - 1 for count in counts)
    assert bag.draw() is None