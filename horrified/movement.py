"""Moving heroes, monsters and villagers around the board."""

from __future__ import annotations

import sys

from horrified.characters import place_name as numbered_place

_DRACULA = "deracula"
_INVISIBLE_MAN = "invisible_man"


def _read_int(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


class Movement:
    """Keeps track of the pieces in play and moves them between places."""

    def __init__(self, board, first_hero, second_hero, dracula, invisible_man) -> None:
        self.board = board
        self.first_hero = first_hero
        self.second_hero = second_hero
        self.dracula = dracula
        self.invisible_man = invisible_man
        self.last = None
        # Items handed in at the precinct towards defeating the invisible man.
        self.delivered_items = 0

    def _step_back(self, piece) -> None:
        if piece is None or not piece.location:
            return
        target = self.board.get(piece.location).neighbors[-1]
        self.board.get(target).enter(piece)

    def move_monsters_back(self) -> None:
        """Move each monster two steps, each to the last neighbour of its place."""
        for piece in (self.dracula, self.invisible_man, self.dracula, self.invisible_man):
            self._step_back(piece)

    def move_heroes_back(self) -> None:
        """Move each hero two steps, each to the last neighbour of its place."""
        for piece in (self.first_hero, self.first_hero, self.second_hero, self.second_hero):
            self._step_back(piece)

    def move_hero(self, hero, place_name: str, forced: bool = False) -> None:
        """Move ``hero`` to a neighbouring place, optionally taking villagers along.

        A forced move only announces the destination.
        """
        if hero is None:
            raise ValueError("Error: Null pointer passed for Hero in set_new_location.")
        if hero.location not in self.board:
            raise RuntimeError("Error: Current hero location not found in map.")
        print(f"Selected place : {place_name}")
        if forced:
            return
        current = self.board.get(hero.location)
        if place_name not in current.neighbors:
            raise RuntimeError(
                "Error: The selected place is not adjacent to the current location."
            )
        destination = self.board.get(place_name)
        try:
            destination.put_hero(hero)
        except RuntimeError as error:
            print(error, file=sys.stderr)
            raise
        answer = _read_int(self.board.ask("Do you want to move a villager? Enter 1 for Yes: \n"))
        if answer == 1:
            print("\nplase wait ... ")
            current.move_villagers_with(hero, destination)

    def send_invisible_man(self, place_name: str) -> None:
        """Put the invisible man at a named place."""
        if place_name not in self.board:
            raise ValueError("Error: The place was not found in the map.")
        self.board.get(place_name).enter(self.invisible_man)

    def advance_monster(self, name: str, steps: int) -> None:
        """Move a monster up to ``steps`` places towards its prey.

        Dracula hunts heroes, the invisible man hunts villagers. With no prey
        in reach the monster goes to the last neighbour of its place.
        """
        if name == _DRACULA:
            monster = self.dracula

            def occupied(place):
                return bool(place.heroes)

        elif name == _INVISIBLE_MAN:
            monster = self.invisible_man

            def occupied(place):
                return bool(place.villagers)

        else:
            return
        if monster is None or not monster.location or steps not in (1, 2):
            return
        here = self.board.get(monster.location)
        if steps == 1:
            candidates = list(here.neighbors)
        else:
            candidates = [
                second
                for neighbor in here.neighbors
                for second in self.board.get(neighbor).neighbors
            ]
        for candidate in candidates:
            place = self.board.get(candidate)
            if occupied(place):
                place.enter(monster)
                return
        self.board.get(here.neighbors[-1]).enter(monster)

    def guide_villager(self, hero, place_of_hero: str, place_name: str = "") -> None:
        """Guide a villager for ``hero`` standing at ``place_of_hero``."""
        self.board.get(place_of_hero).guide_villager(hero, place_name)

    def place_villager(self, villager, place_name: str) -> None:
        """Put a villager at a named place."""
        try:
            self.board.get(place_name).put_villager(villager)
        except RuntimeError as error:
            print(error, file=sys.stderr)

    def all_coffins_destroyed(self) -> bool:
        """True when no place holds a coffin any more."""
        return not any(place.coffin for place in self.board)

    def kill_invisible_man(self) -> None:
        if self.invisible_man is None:
            raise RuntimeError("Error: Invisible man pointer is null.")
        self.invisible_man = None

    def kill_dracula(self) -> None:
        if self.dracula is None:
            raise RuntimeError("Error: Deracula pointer is null.")
        self.dracula = None

    def choose_neighbor(self, place_name: str):
        """Show the neighbours of a place and return the place the player numbers."""
        print("near place is")
        for neighbor in self.board.get(place_name).neighbors:
            print(neighbor)
        index = _read_int(self.board.ask("which place you like please enter id \n"))
        chosen = numbered_place(index) if index is not None else ""
        return self.board.places.get(chosen)

    def move_dracula(self, place_name: str = "") -> None:
        """Send Dracula to the last active hero, or force him to a named place."""
        if self.dracula is None:
            raise RuntimeError("Error: Null pointer for deracula in set_location_deracula.")
        if not place_name:
            self.board.get(self.last.location).put_monster(self.dracula)
        else:
            self.board.get(place_name).put_monster(self.dracula, True)

    def move_invisible_man_to_most_items(self) -> None:
        """Send the invisible man to the place with most items and discard them."""
        try:
            target = self.board.place_with_most_items()
            if not target:
                print("no location whit the most items found yet ")
                return
            if self.invisible_man.location:
                self.board.get(self.invisible_man.location).remove_monster(self.invisible_man)
            place = self.board.get(target)
            place.put_monster(self.invisible_man, True)
            place.clear_items()
        except RuntimeError as error:
            print(error, file=sys.stderr)

    def invisible_man_power(self) -> None:
        """Stalk unseen: move the invisible man to where villagers can be found."""
        current = self.invisible_man.location
        target = self.board.get(current).nearest_villager_place()
        if not target:
            print("invisible man go to near villager ")
            return
        if target == current:
            return
        try:
            self.board.get(target).put_monster(self.invisible_man, True)
        except RuntimeError as error:
            print(error, file=sys.stderr)

    def dracula_power(self) -> None:
        """Dark charm: pull the last active hero to Dracula's place."""
        self.board.get(self.dracula.location).pull_hero(self.last)

    def heroes_won(self) -> bool:
        """True when no monster is left on the board."""
        return all(place.monsters_gone() for place in self.board)

    def start(self) -> None:
        """Set out the heroes and monsters at their starting places."""
        self.last = self.first_hero
        if self.first_hero.name == "Mayor":
            self.board.get("theatre").enter(self.first_hero)
            self.board.get("docks").enter(self.second_hero)
        if self.first_hero.name == "Archaeologist":
            self.board.get("theatre").enter(self.second_hero)
            self.board.get("docks").enter(self.first_hero)
        self.board.get("mansion").enter(self.dracula)
        self.board.get("institute").enter(self.invisible_man)