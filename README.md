# dungeongame

A small turn-based role-playing combat game for the terminal. Four heroes
fight Tyrax the green dragon:

| Fighter | Health | Strength | Magic | Speed | Mana | Abilities |
|---|---|---|---|---|---|---|
| Magnus Machtfaust (`Warrior`) | 80 | 20 | 5 | 8 | 10 | `slash`, `bolster`, `randomhit` |
| Salabrius der Weise (`Wizard`) | 25 | 2 | 20 | 4 | 100 | `fireball`, `barrier`, `magicmissile` |
| Helga Hartholz (`Ranger`) | 60 | 15 | 10 | 10 | 25 | none of its own |
| Vater Umpfred (`Cleric`) | 50 | 10 | 17 | 2 | 80 | `healall` |
| Tyrax der Grüne (`Dragon`) | 400 | 20 | 20 | 1 | 200 | `biss`, `feuer`, `stun` |

The turn order is the living fighters sorted by mana, highest first. It is
worked out again at the end of every turn. The dragon has the most mana, so
it acts first. On its turn it picks a living hero at random and then one of
its three ability slots at random. Slot 1 does nothing, so sometimes the
dragon wastes its turn.

## Installation

```
pip install .
```

No packages outside the standard library are needed.

## Playing

```
dungeongame [--seed N]
```

The command prints the start menu and starts the game, and then loops:

1. It lets all pending delayed actions run, such as the dragon's turn.
2. It prints each fighter's health bar and the three ability buttons.
   Buttons you can press are shown as `[name]` and disabled ones as `(name)`.
3. It asks for `1`, `2` or `3`. Enter `q` (or end the input) to quit.

You win when the dragon is down and a hero still stands. If no button is
enabled because it is never the heroes' turn again, the game prints
"The party has fallen." `--seed` makes a game repeatable.

Know these quirks before you play:

- The buttons are labelled with the abilities of the hero on turn. The
  ability that actually runs belongs to `CombatScreen.current_actor`, and by
  default that is a `Warrior` the screen creates for itself. The button
  numbers therefore mean slash, bolster and randomhit. Bolster heals that
  screen-owned warrior and none of the party.
- A hero's ability always targets the first foe.
- Healing is not capped at a fighter's starting health.

## Using it as a library

The game logic does not depend on the terminal front end.

```python
from dungeongame.characters import Warrior, Wizard, Ranger, Cleric, Dragon
from dungeongame.combat import CombatLogic

warrior, wizard, ranger, cleric = Warrior(), Wizard(), Ranger(), Cleric()
dragon = Dragon()

logic = CombatLogic()
logic.player_health_changed.connect(lambda hp, who: print(who.name, hp))
logic.enemy_health_changed.connect(lambda hp, who: print(who.name, hp))

logic.start_combat([warrior, wizard, ranger, cleric], [dragon])
logic.scheduler.run_until_idle()               # the dragon acts first
logic.handle_ability(0, logic.current_actor)   # the hero on turn uses ability 0
logic.scheduler.run_until_idle()               # move on to the next turn
print(logic.check_player_victory())
```

These are the parts you will use most:

- `Character` and its subclasses have `is_alive()`, `stat(select)`,
  `ability(index, target)`, `ability_name(index)`, `receive_damage(amount)`
  and `receive_healing(amount)`. Each one takes an optional `random.Random`,
  so its rolls can be repeated.
- `CombatLogic` has `start_combat`, `next_turn`, `end_turn`,
  `handle_ai_ability`, `handle_ability`, `handle_area_ability`,
  `check_player_victory` and `turn_order()`. It reports through `Signal`
  attributes such as `update_ability_ui`, `player_health_changed`,
  `enemy_health_changed` and `update_status_display`.
- `dungeongame.events` holds `Signal` and `Scheduler`. A `Signal` calls its
  connected callbacks in order. A `Scheduler` runs delayed callbacks on a
  virtual clock: nothing runs until you call `advance(ms)` or
  `run_until_idle()`. Because of this, every run with the same seed gives
  the same result.
- `dungeongame.screen` holds the text widgets:
  - `HealthBar` has `set_range`, `set_value` (it ignores values outside the
    range) and `render(width)`.
  - `AbilityButton` is a single button.
  - `CombatScreen` has `bind_character`, `update_ui`, `click_ability` and
    `render`. It also has `ability_request`, a `Signal`.
  - `Menu` has `click_start` and `render`.
- `dungeongame.app.Game` connects these parts to each other, just as the
  command does. Use `start()` to begin a game, `choose_ability(index)` to
  press a button, and `wait_for_player()` to let time pass.

## What it does not do

This is a text-only game. There are no graphics, sprites or animations. The
screen "shake" after you press a button only changes the numbers in
`CombatScreen.offsets`. The game does not save anything. The ranger has no
abilities, and the cleric has no abilities apart from `healall`. The
terminal game never calls `handle_area_ability`.

## Tests

```
pip install ".[test]"
pytest
```