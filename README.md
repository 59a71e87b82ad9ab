# horrified

The board, pieces and hero turns of a cooperative board game in which two
heroes, the Mayor and the Archaeologist, face Dracula and the Invisible Man in
a village of nineteen places. Player input is read through an `ask` callable
(by default `input`), so every interactive step can be driven from code.

## Installing

```
pip install .
```

## What is in the package

- `horrified.items`: `Item` (name, location, colour, power) and `ItemBag`,
  which holds the 68 standard items. `ItemBag.put_items_in_places(board, count)`
  places items at their own locations; `ItemBag.return_item(item)` puts an
  item on the used pile.
- `horrified.perks`: the perk cards `VisitFromTheDetective`, `BreakOfDawn`,
  `Overstock`, `LateIntoTheNight`, `Repel` and `Hurry`, each with
  `play(movement, hero)`, and `PerkBag` with `fill()` and a random `draw()`.
- `horrified.board`: `Place` (items, heroes, monsters, villagers, coffin,
  neighbours) and `Board`, which holds every place and the item and perk bags.
- `horrified.characters`: the `Action` numbers, `place_name(index)` for the
  dashboard numbering of places, the monsters `Dracula` and `InvisibleMan`
  with `strike(movement)` and `special_power(movement)`, and `Villager`.
- `horrified.movement`: `Movement`, which sets the pieces out with `start()`
  and moves heroes, monsters and villagers between places. `heroes_won()`
  reports whether no monster is left on the board.
- `horrified.actions`: `perform_actions(hero, movement, ask)`, the hero phase
  of Move, Guide, Pick Up, Advance, Defeat and Special Action.
- `horrified.perk_play`: `play_perks(hero, movement, ask)`, which plays a
  hero's perk cards newest first.
- `horrified.heroes`: `Archaeologist` (4 actions a turn) and `Mayor`
  (5 actions a turn), with `take_turn(movement)`.

## Example

```python
from horrified.board import Board
from horrified.characters import Dracula, InvisibleMan
from horrified.heroes import Archaeologist, Mayor
from horrified.movement import Movement
from horrified.perks import PerkBag

perks = PerkBag()
perks.fill()
board = Board(perks=perks)
mayor = Mayor(perks)
archaeologist = Archaeologist(perks)
movement = Movement(board, mayor, archaeologist, Dracula(), InvisibleMan())
movement.start()

board.items.put_items_in_places(board, 4)
skip_monster_phase = mayor.take_turn(movement)  # reads answers from input()
```

`take_turn` returns True when a played perk card skips the next monster phase.

## What the package does not do

The package has no command to start a game, no monster cards, monster deck or
dice, and no dashboard screen. It provides the board and the hero side of a
turn; a game loop that draws monster cards and tracks the terror level has to
be written on top of it.

## Running the tests

```
pip install .[test]
pytest
```