"""The actions a hero takes during the hero phase."""

from __future__ import annotations

import sys

from horrified.characters import Action, place_name

# Items picked up here count towards defeating the invisible man.
_EVIDENCE_PLACES = frozenset({"inn", "mansion", "barn", "laboratory", "institute"})


def _read_int(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


def action_for(index: int) -> Action:
    """The action numbered ``index``; MOVE for any other number."""
    try:
        return Action(index)
    except ValueError:
        return Action.MOVE


def _store_items(hero, items) -> None:
    if hero.location in _EVIDENCE_PLACES:
        hero.invisible_man_items.extend(items)
    else:
        hero.items.extend(items)


def _move(hero, movement, ask, place) -> None:
    while True:
        index = _read_int(ask("Please enter the place you want to go (0 to 18):\n"))
        if index is None or not 0 <= index <= 18:
            print("Invalid number. Please enter a number between 0 and 18.")
            continue
        try:
            movement.move_hero(hero, place_name(index))
        except RuntimeError as error:
            print(error)
        else:
            return


def _guide(hero, movement, ask, place) -> None:
    choice = _read_int(
        ask(
            "Do you want to move a villager in your location (enter 1) "
            "or bring one from a nearby place (enter 2)?\n"
        )
    )
    if choice == 1:
        movement.guide_villager(hero, hero.location, hero.location)
    elif choice == 2:
        movement.guide_villager(hero, hero.location, "")


def _pickup(hero, movement, ask, place) -> None:
    count = _read_int(ask("How many items do you want to pick up?\n"))
    if count is None or count < 0:
        print("Invalid item count.")
        return
    try:
        taken = place.take_items(count)
    except ValueError as error:
        print(error)
        return
    _store_items(hero, taken)


def _advance(hero, movement, ask, place) -> None:
    print("please wait while the information is processed ... ")
    hero.actions -= 1
    if not place.coffin:
        print("here dont have tabot !!! ")
        return
    print("here has tabot if you lik distroed it enter one")
    if place.name != "precinct":
        return
    print("for giv the items for kill invisble man enter 2")
    choice = _read_int(ask(""))
    if choice == 1 and hero.can_destroy(6, "red"):
        place.destroy_coffin()
    elif choice == 2:
        movement.delivered_items += len(hero.invisible_man_items)
        hero.invisible_man_items.clear()


def _defeat_invisible_man(hero, movement, place, shortfall: str) -> None:
    if movement.delivered_items < 5:
        print(shortfall)
        return
    if not hero.can_destroy(9, "red"):
        print("you cant kill invisble man beacase you dont have enogh item")
        return
    place.kill_monster(1)
    try:
        movement.kill_invisible_man()
    except RuntimeError as error:
        print(error, file=sys.stderr)


def _defeat_dracula(hero, movement, place) -> None:
    if not hero.can_destroy(6, "yellow"):
        print("you dont have enogh yellow item")
        return
    place.kill_monster(2)
    try:
        movement.kill_dracula()
    except RuntimeError as error:
        print(error, file=sys.stderr)


def _defeat(hero, movement, ask, place) -> None:
    code = place.monster_code()
    if code == 1:
        choice = _read_int(
            ask(
                "here has invisble_man and deracula for kill the invisble man "
                "enter 2 and for deracula enter 3\n"
            )
        )
        if choice == 2:
            _defeat_invisible_man(hero, movement, place, "you dont have enogh item")
        elif choice == 3:
            _defeat_dracula(hero, movement, place)
    elif code == 2:
        _defeat_invisible_man(hero, movement, place, "each item dont catch")
    elif code == 3:
        _defeat_dracula(hero, movement, place)
    else:
        print("here dont have moster !!!")


def _special(hero, movement, ask, place) -> None:
    if hero.name != "Archaeologist":
        print("you cant do special power beacuse you are mayor !!! ", file=sys.stderr)
        return
    print("what place you like catch item in that ? ")
    index = _read_int(ask("enter place number \n"))
    if index is None or not 0 <= index <= 18:
        return
    wanted = place_name(index)
    chosen = movement.choose_neighbor(hero.location)
    if chosen is None or wanted not in chosen.neighbors:
        print("selected place is not your naghbor !! ", file=sys.stderr)
        return
    source = movement.board.get(wanted)
    count = _read_int(ask("how many item do you want? \n"))
    if count is None or count < 0:
        print("the entered number was wrong ")
        return
    try:
        taken = source.take_items(count)
    except ValueError as error:
        print(error)
        return
    _store_items(hero, taken)


_HANDLERS = {
    Action.MOVE: _move,
    Action.GUIDE: _guide,
    Action.PICKUP: _pickup,
    Action.ADVANCE: _advance,
    Action.DEFEAT: _defeat,
    Action.SPECIAL_ACTION: _special,
}


def perform_actions(hero, movement, ask=input) -> None:
    """Let the player spend the hero's remaining actions.

    The hero provides ``name``, ``location``, ``actions``, ``items``,
    ``invisible_man_items`` and ``can_destroy(power, color)``.
    """
    while hero.actions > 0:
        choice = _read_int(ask("Enter the action ID you want to perform (between 0 to 5):\n"))
        if choice is None or not 0 <= choice <= 5:
            print("The given number is incorrect. Your turn is over!", file=sys.stderr)
            return
        action = action_for(choice)
        place = movement.board.get(hero.location)
        hero.actions -= 1
        _HANDLERS[action](hero, movement, ask, place)
        if hero.name == "Mayor" and hero.actions > 0:
            answer = _read_int(
                ask(
                    "Do you want to continue? Enter 1 to choose a new action "
                    "or any other number to exit.\n"
                )
            )
            if answer != 1:
                return