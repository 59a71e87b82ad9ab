"""Perk cards that heroes collect, and the bag they are drawn from."""

from __future__ import annotations

import copy
import random
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class PerkCard(ABC):
    """A perk card; ``count`` is how many copies it stands for."""

    count: int = 1
    name: ClassVar[str] = ""

    @abstractmethod
    def play(self, movement, hero) -> bool:
        """Apply the card. Returns True when the next monster phase is skipped."""


class VisitFromTheDetective(PerkCard):
    name = "visit_from_the_detective"

    def play(self, movement, hero) -> bool:
        while True:
            place_name = hero.ask(
                "\t ----------- Name the place where you want the invisible man to be : ---------- \n"
            ).strip()
            try:
                movement.send_invisible_man(place_name)
            except ValueError as error:
                print(error, file=sys.stderr)
                print("Please try again with a valid place name.", file=sys.stderr)
            else:
                return False


class BreakOfDawn(PerkCard):
    name = "break_of_dawn"

    def play(self, movement, hero) -> bool:
        board = movement.board
        board.items.put_items_in_places(board, 2)
        return True


class Overstock(PerkCard):
    name = "overstock"

    def play(self, movement, hero) -> bool:
        board = movement.board
        board.items.put_items_in_places(board, 2)
        return False


class LateIntoTheNight(PerkCard):
    name = "late_into_the_night"

    def play(self, movement, hero) -> bool:
        hero.add_actions(2)
        return False


class Repel(PerkCard):
    name = "repel"

    def play(self, movement, hero) -> bool:
        movement.move_monsters_back()
        return False


class Hurry(PerkCard):
    name = "hurry"

    def play(self, movement, hero) -> bool:
        movement.move_heroes_back()
        return False


class PerkBag:
    """A bag of perk cards drawn at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.cards: list[PerkCard] = []

    def fill(self) -> None:
        """Add the standard set of perk cards."""
        self.cards.extend(
            [
                VisitFromTheDetective(3),
                BreakOfDawn(3),
                Overstock(4),
                LateIntoTheNight(4),
                Repel(3),
                Hurry(3),
            ]
        )

    def draw(self) -> PerkCard | None:
        """Draw one card at random.

        The chosen card loses one copy. If that leaves none, the card is
        removed from the bag and nothing is returned.
        """
        if not self.cards:
            return None
        index = self.rng.randrange(len(self.cards))
        original = self.cards[index]
        original.count -= 1
        if original.count == 0:
            del self.cards[index]
            return None
        drawn = copy.copy(original)
        drawn.count = 1
        return drawn