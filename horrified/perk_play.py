"""Playing the perk cards a hero holds."""

from __future__ import annotations

from horrified.perks import (
    BreakOfDawn,
    Hurry,
    LateIntoTheNight,
    Overstock,
    Repel,
    VisitFromTheDetective,
)

_KINDS = (
    VisitFromTheDetective,
    BreakOfDawn,
    Overstock,
    LateIntoTheNight,
    Repel,
    Hurry,
)


def _read_int(answer: str) -> int | None:
    try:
        return int(answer.strip())
    except ValueError:
        return None


def perk_kind(perk) -> int:
    """Number of the perk's kind, 1 to 6, or 0 for anything else."""
    for kind, cls in enumerate(_KINDS, start=1):
        if isinstance(perk, cls):
            return kind
    return 0


def play_perks(hero, movement, ask=input) -> bool:
    """Play the hero's perks, newest first, while the player wants to go on.

    Returns True if a played card skips the next monster phase.
    """
    skip = False
    while hero.perk_cards:
        perk = hero.perk_cards[-1]
        if perk_kind(perk):
            print(f"perk card is ;{perk.name}")
            if perk.play(movement, hero):
                skip = True
        hero.perk_cards.pop()
        if _read_int(ask("do you like play eater perk_card enter one\n")) != 1:
            break
    return skip