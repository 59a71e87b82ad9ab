"""The heroes the players control."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Callable

from horrified.actions import perform_actions
from horrified.perk_play import play_perks


def _read_int(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


class Hero(ABC):
    """A hero with a location, items, perk cards and actions left this turn.

    ``item_bag`` is where spent items go; it is taken from the board at the
    start of each turn.
    """

    name: str = ""

    def __init__(self, perks, ask: Callable[[str], str] = input) -> None:
        self.ask = ask
        self.location = ""
        self.actions = 0
        self.items: list = []
        self.invisible_man_items: list = []
        self.perk_cards: list = []
        self.item_bag = None
        perk = perks.draw()
        if perk is not None:
            self.perk_cards.append(perk)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(location={self.location!r})"

    def take_turn(self, movement) -> bool:
        """Play the hero phase. Returns True if the next monster phase is skipped."""
        self.item_bag = movement.board.items
        print(f"HERO PHASE : {self.name}")
        self.reset_actions()
        perform_actions(self, movement, self.ask)
        if _read_int(self.ask("do you like play perk enter one\n")) != 1:
            return False
        if not self.perk_cards:
            print("you dont have perk card", file=sys.stderr)
            return False
        return play_perks(self, movement, self.ask)

    @abstractmethod
    def reset_actions(self) -> None:
        """Restore the actions available at the start of a turn."""

    def add_actions(self, count: int) -> None:
        self.actions += count

    def add_perk(self, perk) -> None:
        self.perk_cards.append(perk)

    def _discard(self, item) -> None:
        if self.item_bag is not None:
            self.item_bag.return_item(item)

    def give_up_item(self):
        """Lose the newest item to the used pile; RuntimeError if there is none."""
        if not self.items:
            raise RuntimeError("you dont havr enogh item")
        item = self.items.pop()
        self._discard(item)
        return item

    def can_destroy(self, power: int, color: str) -> bool:
        """Spend items of ``color`` whose strength adds up to ``power``.

        Items are spent only when enough strength is found; otherwise the hero
        keeps everything and False is returned.
        """
        chosen = []
        total = 0
        for item in self.items:
            if item.color == color:
                chosen.append(item)
                total += item.power
            if total >= power:
                break
        if total < power:
            return False
        chosen_ids = {id(item) for item in chosen}
        for item in chosen:
            self._discard(item)
        self.items = [item for item in self.items if id(item) not in chosen_ids]
        return True

    def item_count(self) -> int:
        return len(self.items)

    def perk_count(self) -> int:
        return len(self.perk_cards)


class Archaeologist(Hero):
    name = "Archaeologist"

    def reset_actions(self) -> None:
        self.actions = 4


class Mayor(Hero):
    name = "Mayor"

    def reset_actions(self) -> None:
        self.actions = 5