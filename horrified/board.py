"""The places of the game board and the board that holds them."""

from __future__ import annotations

import sys
from typing import Callable, Iterator

from horrified.items import Item, ItemBag
from horrified.perks import PerkBag

_NEIGHBORS: dict[str, tuple[str, ...]] = {
    "cave": ("camp",),
    "camp": ("cave", "precinct", "mansion", "theatre", "inn"),
    "precinct": ("camp", "inn", "theatre", "mansion"),
    "inn": ("precinct", "camp", "theatre", "mansion"),
    "barn": ("theatre",),
    "dungion": ("tower",),
    "theatre": ("inn", "precinct", "camp", "mansion", "tower", "shop"),
    "tower": ("theatre", "docks", "dungion"),
    "mansion": ("abbey", "camp", "precinct", "inn", "theatre", "shop", "mansion", "church"),
    "docks": ("tower",),
    "abbey": ("mansion", "crypt"),
    "shop": ("theatre", "mansion", "musium", "church", "laboratory"),
    "crypt": ("abbey",),
    "musium": ("mansion", "shop", "church"),
    "church": ("mansion", "musium", "hospital", "graveyard", "shop"),
    "laboratory": ("shop", "institute"),
    "hospital": ("church",),
    "graveyard": ("church",),
    "institute": ("laboratory",),
}

_COFFIN_PLACES = frozenset({"cave", "dungion", "crypt", "graveyard"})

# Places as numbered on the dashboard, used when a player picks one by number.
_NUMBERED_PLACES: tuple[str, ...] = (
    "precinct", "mansion", "musium", "inn", "camp", "theatre", "cave",
    "institute", "crypt", "barn", "dungion", "docks", "tower", "laboratory",
    "graveyard", "hospital", "abbey", "church", "shop",
)

_INVISIBLE_MAN = "invisible_man"
_DRACULA = "deracula"


def _numbered_place(answer: str) -> str:
    try:
        index = int(answer.strip())
    except ValueError:
        return ""
    if 0 <= index < len(_NUMBERED_PLACES):
        return _NUMBERED_PLACES[index]
    return ""


class Place:
    """One location on the board with the pieces and items lying there."""

    def __init__(self, name: str, board: Board) -> None:
        self.name = name
        self.board = board
        self.items: list[Item] = []
        self.monsters: list = []
        self.heroes: list = []
        self.villagers: list = []
        self.coffin = name in _COFFIN_PLACES
        self.neighbors: list[str] = list(_NEIGHBORS.get(name, ()))

    def __repr__(self) -> str:
        return f"Place({self.name!r})"

    def _perk_for(self, hero) -> None:
        perk = self.board.perks.draw()
        if perk is not None:
            hero.add_perk(perk)

    def put_monster(self, monster, forced: bool = False) -> None:
        """Move a monster here, taking it off its previous place."""
        if len(self.monsters) == 2:
            raise RuntimeError("monster was in place ")
        if len(self.monsters) == 1 and self.monsters[-1].name == monster.name:
            raise RuntimeError("monster was in place ")
        if monster.location:
            self.board.get(monster.location).remove_monster(monster)
        self.monsters.append(monster)
        monster.location = self.name
        print(f"\n------------------  new location of : {monster.name} is {self.name}------------------")

    def put_hero(self, hero) -> None:
        """Move a hero here, taking it off its previous place."""
        if len(self.heroes) == 2:
            raise RuntimeError("Hero was in place ")
        if len(self.heroes) == 1 and self.heroes[-1].name == hero.name:
            raise RuntimeError("Hero was in place ")
        if hero.location:
            self.board.get(hero.location).remove_hero(hero)
        self.heroes.append(hero)
        hero.location = self.name
        print(f"\n------------------  new location of : {hero.name} is : {self.name}------------------")

    def enter(self, piece) -> None:
        """Move a hero or monster here, reporting rather than raising a refusal."""
        try:
            if callable(getattr(piece, "strike", None)):
                self.put_monster(piece)
            else:
                self.put_hero(piece)
        except RuntimeError as error:
            print(error, file=sys.stderr)

    def move_villagers_with(self, hero, destination: Place) -> None:
        """Send every villager here along with a hero moving to ``destination``."""
        if not self.villagers:
            print("here dont have villager !!! ")
            return
        destination.villagers.extend(self.villagers)
        self.villagers.clear()
        for villager in destination.villagers:
            villager.location = destination.name
            if villager.is_safe():
                self._perk_for(hero)

    def guide_villager(self, hero, place_name: str = "") -> None:
        """Guide a villager for ``hero``.

        With a place name, a villager from a neighbouring place comes to the
        hero's place. Without one, the villager at the hero's place is led on.
        """
        here = self.board.get(hero.location)
        if place_name:
            for neighbor_name in here.neighbors:
                neighbor = self.board.get(neighbor_name)
                if neighbor.villagers:
                    villager = neighbor.villagers[-1]
                    if villager.location:
                        self.board.get(villager.location).remove_villager(villager)
                    here.villagers.append(villager)
                    villager.location = here.name
                    if villager.is_safe():
                        self._perk_for(hero)
                    return
            print("near place has not villager", file=sys.stderr)
            return

        if not here.villagers:
            print("your place hasnt villager", file=sys.stderr)
            return
        villager = here.villagers[-1]
        for neighbor_name in here.neighbors:
            if neighbor_name == villager.safe_place:
                self.board.get(villager.location).remove_villager(villager)
                self.board.get(neighbor_name).villagers.append(villager)
                villager.location = neighbor_name
                self._perk_for(hero)
                return
            chosen = _numbered_place(
                self.board.ask("please enter name of place which do you like villager go to it\n")
            )
            if chosen:
                target = self.board.get(chosen)
                self.board.get(villager.location).remove_villager(villager)
                target.villagers.append(villager)
                villager.location = target.name
                if villager.is_safe():
                    self._perk_for(hero)

    def put_villager(self, villager) -> None:
        """Move a villager here from wherever it stands."""
        if villager.location:
            self.board.get(villager.location).remove_villager(villager)
        self.villagers.append(villager)
        villager.location = self.name
        print(f"\n------------------ location of : {villager.name} is : {self.name}------------------")

    def top_villager(self):
        """The most recently arrived villager, or None."""
        return self.villagers[-1] if self.villagers else None

    def take_items(self, count: int) -> list[Item]:
        """Pick up ``count`` items, newest first; each also goes to the used pile."""
        if count > len(self.items):
            raise ValueError("here dont have enogh item")
        taken: list[Item] = []
        for _ in range(count):
            item = self.items.pop()
            self.board.items.return_item(item)
            taken.append(item)
        return taken

    def destroy_coffin(self) -> None:
        """Destroy the coffin at this place."""
        self.coffin = False

    def monster_code(self) -> int:
        """0: no monster, 1: both, 2: invisible man last, 3: Dracula last."""
        if not self.monsters:
            return 0
        if len(self.monsters) == 2:
            return 1
        last = self.monsters[-1].name
        if last == _INVISIBLE_MAN:
            return 2
        if last == _DRACULA:
            return 3
        return 0

    def kill_monster(self, kind: int) -> bool:
        """Remove the invisible man (1) or Dracula (2) from here."""
        wanted = {1: _INVISIBLE_MAN, 2: _DRACULA}.get(kind)
        for monster in self.monsters:
            if monster.name == wanted:
                self.monsters.remove(monster)
                if kind == 1:
                    print("Invisible man removed from place. and it is kill")
                else:
                    print("Deracula removed from place. and it is kill")
                return True
        print("Monster not found in place.")
        return False

    def clear_items(self) -> None:
        """Send every item here to the used pile."""
        for item in self.items:
            self.board.items.return_item(item)
        self.items.clear()

    def remove_monster(self, monster) -> None:
        if not monster.location:
            return
        if monster in self.monsters:
            self.monsters.remove(monster)

    def remove_hero(self, hero) -> None:
        if not hero.location:
            return
        if hero in self.heroes:
            self.heroes.remove(hero)

    def nearest_villager_place(self) -> str:
        """Name of a place to chase villagers to, or "" if there is none."""
        if self.villagers:
            return self.name
        for neighbor_name in self.neighbors:
            if self.board.get(neighbor_name).villagers:
                return neighbor_name
        for neighbor_name in self.neighbors:
            for second in self.board.get(neighbor_name).neighbors:
                if self.board.get(second).neighbors:
                    return second
        return ""

    def invisible_man_strike(self) -> bool:
        """Kill the newest villager if no hero guards this place."""
        if not self.heroes and self.villagers:
            victim = self.villagers.pop()
            print(f"{victim.name}is killed")
            return True
        return False

    def pull_hero(self, hero) -> None:
        """Drag a hero here regardless of who else stands here."""
        self.board.get(hero.location).remove_hero(hero)
        self.heroes.append(hero)
        hero.location = self.name
        print(f"new location for {hero.name} is {self.name}")

    def has_hero(self) -> bool:
        return bool(self.heroes)

    def describe_creatures(self) -> list[str]:
        """Names of villagers then monsters here, or a note that there are none."""
        names = [v.name for v in self.villagers if v.name]
        names += [m.name for m in self.monsters if m is not None and m.name]
        return names or ["No creature found in this place"]

    def hero_here(self):
        """The most recently arrived hero, or None."""
        return self.heroes[-1] if self.heroes else None

    def monsters_gone(self) -> bool:
        return not self.monsters

    def remove_villager(self, villager) -> None:
        if not villager.location:
            return
        for present in self.villagers:
            if present.name == villager.name:
                self.villagers.remove(present)
                break


class Board:
    """All places of the town, with the item and perk bags used on them."""

    def __init__(
        self,
        items: ItemBag | None = None,
        perks: PerkBag | None = None,
        ask: Callable[[str], str] = input,
    ) -> None:
        self.items = items if items is not None else ItemBag()
        self.perks = perks if perks is not None else PerkBag()
        self.ask = ask
        self.places: dict[str, Place] = {name: Place(name, self) for name in _NEIGHBORS}

    def __iter__(self) -> Iterator[Place]:
        return iter(self.places.values())

    def __len__(self) -> int:
        return len(self.places)

    def __contains__(self, name: object) -> bool:
        return name in self.places

    def get(self, name: str) -> Place:
        """The place called ``name``; KeyError if there is none."""
        return self.places[name]

    def place_with_most_items(self) -> str:
        """Name of the first place, alphabetically, holding the most items; "" if none hold any."""
        best = ""
        most = 0
        for name in sorted(self.places):
            count = len(self.places[name].items)
            if count > most:
                most = count
                best = name
        return best