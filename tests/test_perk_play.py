import pytest

from horrified.board import Board
from horrified.perk_play import perk_kind, play_perks
from horrified.perks import (
    BreakOfDawn,
    Hurry,
    LateIntoTheNight,
    Overstock,
    Repel,
    VisitFromTheDetective,
)


class _Hero:
    def __init__(self, cards):
        self.name = "Mayor"
        self.perk_cards = list(cards)
        self.actions = 0

    def add_actions(self, count):
        self.actions += count

    def ask(self, prompt):
        return "camp"


class _Movement:
    def __init__(self):
        self.board = Board(ask=lambda prompt: "0")
        self.monsters_back = 0
        self.heroes_back = 0
        self.sent = []

    def move_monsters_back(self):
        self.monsters_back += 1

    def move_heroes_back(self):
        self.heroes_back += 1

    def send_invisible_man(self, place_name):
        self.sent.append(place_name)


def _total_items(board):
    return sum(len(place.items) for place in board)


def _answers(*values):
    replies = iter(values)
    return lambda prompt: next(replies)


@pytest.mark.parametrize(
    "perk, kind",
    [
        (VisitFromTheDetective(), 1),
        (BreakOfDawn(), 2),
        (Overstock(), 3),
        (LateIntoTheNight(), 4),
        (Repel(), 5),
        (Hurry(), 6),
        (None, 0),
        ("not a perk", 0),
    ],
)
def test_perk_kind(perk, kind):
    assert perk_kind(perk) == kind


def test_no_perks_plays_nothing():
    hero = _Hero([])
    asked = []
    assert play_perks(hero, _Movement(), asked.append) is False
    assert asked == []


def test_plays_newest_first_and_stops_when_told():
    hero = _Hero([Repel(), Hurry()])
    movement = _Movement()
    assert play_perks(hero, movement, _answers("0")) is False
    assert movement.heroes_back == 1
    assert movement.monsters_back == 0
    assert len(hero.perk_cards) == 1
    assert isinstance(hero.perk_cards[0], Repel)


def test_keeps_playing_and_reports_skip():
    hero = _Hero([LateIntoTheNight(), BreakOfDawn()])
    movement = _Movement()
    before = _total_items(movement.board)
    assert play_perks(hero, movement, _answers("1", "1")) is True
    assert hero.perk_cards == []
    assert hero.actions == 2
    assert _total_items(movement.board) == before + 2


def test_overstock_does_not_skip():
    hero = _Hero([Overstock()])
    movement = _Movement()
    before = _total_items(movement.board)
    assert play_perks(hero, movement, _answers("1")) is False
    assert _total_items(movement.board) == before + 2


def test_detective_moves_invisible_man_to_named_place():
    hero = _Hero([VisitFromTheDetective()])
    movement = _Movement()
    play_perks(hero, movement, _answers("x"))
    assert movement.sent == ["camp"]


def test_empty_slot_is_discarded():
    hero = _Hero([Repel(), None])
    movement = _Movement()
    play_perks(hero, movement, _answers("0"))
    assert len(hero.perk_cards) == 1
    assert movement.monsters_back == 0