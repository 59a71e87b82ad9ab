"""Monsters, villagers and the numbering of places and hero actions."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum


class Action(IntEnum):
    """The actions a hero may choose, by the number the player types."""

    MOVE = 0
    GUIDE = 1
    PICKUP = 2
    ADVANCE = 3
    DEFEAT = 4
    SPECIAL_ACTION = 5


_PLACE_NUMBERS: tuple[str, ...] = (
    "precinct",
    "mansion",
    "musium",
    "inn",
    "camp",
    "theatre",
    "cave",
    "institute",
    "crypt",
    "barn",
    "dungion",
    "docks",
    "tower",
    "laboratory",
    "graveyard",
    "hospital",
    "abbey",
    "church",
    "shop",
)


def place_name(index: int) -> str:
    """The place with dashboard number ``index``, or "" for an unknown number."""
    if 0 <= index < len(_PLACE_NUMBERS):
        return _PLACE_NUMBERS[index]
    return ""


def _read_int(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


@dataclass(eq=False)
class Monster:
    """A monster piece; ``location`` is "" until it is put on the board."""

    name: str = ""
    location: str = ""


@dataclass(eq=False)
class Dracula(Monster):
    name: str = "deracula"

    def strike(self, movement) -> bool:
        """Attack a hero here, or else a villager. True if the attack landed."""
        place = movement.board.get(self.location)
        hero = place.hero_here()
        if hero is not None:
            print(f"{hero.name}is in dangur")
            answer = _read_int(
                movement.board.ask(
                    f"{hero.name}do you like get one item enter one "
                    "if you like go to hospital enter 2 \n"
                )
            )
            if answer == 1:
                try:
                    hero.give_up_item()
                except RuntimeError as error:
                    print(error, file=sys.stderr)
                    movement.move_hero(hero, "hospital", True)
                else:
                    return True
            else:
                try:
                    movement.move_hero(hero, "hospital", True)
                except RuntimeError as error:
                    print(error, file=sys.stderr)
                return True
        victim = place.top_villager()
        if victim is not None:
            print(f"villager whit name : {victim.name} is kill ")
            place.remove_villager(victim)
            return True
        return False

    def special_power(self, movement) -> None:
        """Dark charm: pull the last active hero to Dracula."""
        movement.dracula_power()


@dataclass(eq=False)
class InvisibleMan(Monster):
    name: str = "invisible_man"

    def strike(self, movement) -> bool:
        """Kill an unguarded villager here. True if one was killed."""
        return movement.board.get(self.location).invisible_man_strike()

    def special_power(self, movement) -> None:
        """Stalk unseen: move towards the nearest villager."""
        movement.invisible_man_power()


@dataclass(eq=False)
class Villager:
    """A villager who wants to be led to ``safe_place``."""

    name: str
    safe_place: str
    location: str = ""

    def is_safe(self) -> bool:
        return self.location == self.safe_place