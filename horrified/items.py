"""Items that lie on the board and the bag that supplies them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    """A single item card: where it appears, its colour and its strength."""

    name: str
    location: str
    color: str
    power: int


_ITEM_KINDS: tuple[tuple[str, str, str, int], ...] = (
    ("flower", "docks", "yellow", 2),
    ("tarot deck", "camp", "yellow", 3),
    ("garlic", "inn", "yellow", 2),
    ("mirrored box", "mansion", "yellow", 3),
    ("stake", "abbey", "yellow", 3),
    ("holy water", "church", "yellow", 4),
    ("crucifix", "graveyard", "yellow", 2),
    ("torch", "barn", "red", 2),
    ("silver dagger", "tower", "red", 3),
    ("vampire book", "mansion", "red", 4),
    ("explosive vial", "cave", "red", 3),
    ("axe", "barn", "red", 2),
    ("blood sample", "precinct", "red", 2),
    ("crossbow", "dungion", "red", 4),
    ("spear", "crypt", "red", 3),
    ("mind elixir", "laboratory", "blue", 2),
    ("hypnotic charm", "institute", "blue", 3),
    ("ghost mirror", "mansion", "blue", 2),
    ("scientific journal", "institute", "blue", 4),
    ("telepathy stone", "laboratory", "blue", 2),
    ("magnetic compass", "camp", "blue", 3),
    ("dream catcher", "inn", "blue", 2),
    ("sacred scroll", "church", "yellow", 2),
    ("crystal ball", "tower", "yellow", 3),
    ("magic talisman", "cave", "yellow", 2),
    ("sun medallion", "graveyard", "yellow", 4),
    ("ancient relic", "musium", "red", 3),
    ("ritual knife", "crypt", "red", 2),
    ("soul urn", "dungion", "red", 3),
    ("mental tonic", "hospital", "blue", 2),
    ("calming incense", "theatre", "blue", 2),
    ("spirit lantern", "camp", "yellow", 2),
    ("protective amulet", "precinct", "blue", 3),
    ("enchanted rope", "camp", "red", 2),
)


def _standard_items() -> list[Item]:
    return [Item(*kind) for kind in _ITEM_KINDS for _ in range(2)]


@dataclass
class ItemBag:
    """The supply of items still to enter play and the pile of used items."""

    in_game: list[Item] = field(default_factory=list)
    out_of_game: list[Item] = field(default_factory=list)

    def __init__(self) -> None:
        self.in_game = _standard_items()
        self.out_of_game = []

    def put_items_in_places(self, board, count: int) -> None:
        """Place ``count`` items on the board, each at its own location.

        Items are taken from the end of the supply. When the supply is empty
        the most recently discarded item is recycled onto the board.
        """
        for _ in range(count):
            if not self.in_game:
                recycled = self.out_of_game[-1]
                board.get(recycled.location).items.append(recycled)
                self.in_game.append(recycled)
            else:
                drawn = self.in_game.pop()
                board.get(drawn.location).items.append(drawn)
                self.out_of_game.append(drawn)

    def return_item(self, item: Item) -> None:
        """Put an item on the out-of-game pile."""
        self.out_of_game.append(item)