"""Wires characters, combat logic, menu and screen into a playable game."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .characters import Cleric, Dragon, Ranger, Warrior, Wizard
from .combat import CombatLogic
from .events import Scheduler
from .screen import CombatScreen, Menu

MENU_VIEW = 0
COMBAT_VIEW = 1


class Game:
    """A party of four heroes against a dragon."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.scheduler = Scheduler()

        self.warrior = Warrior(rng=self.rng)
        self.wizard = Wizard(rng=self.rng)
        self.ranger = Ranger(rng=self.rng)
        self.cleric = Cleric(rng=self.rng)
        self.dragon = Dragon(rng=self.rng)
        self.all_characters = [
            self.warrior, self.wizard, self.ranger, self.cleric, self.dragon
        ]

        self.menu = Menu()
        self.screen = CombatScreen(scheduler=self.scheduler, rng=self.rng)
        self.logic = CombatLogic(scheduler=self.scheduler, rng=self.rng)
        self.current_index = MENU_VIEW

        self.screen.bind_character(self.warrior, self.screen.warrior_health)
        self.screen.bind_character(self.wizard, self.screen.wizard_health)
        self.screen.bind_character(self.ranger, self.screen.ranger_health)
        self.screen.bind_character(self.cleric, self.screen.cleric_health)
        self.screen.bind_character(self.dragon, self.screen.dragon_health)

        self.menu.start_game.connect(self._on_start_game)
        self.logic.update_ability_ui.connect(self.screen.update_ui)
        self.logic.player_health_changed.connect(self.screen.update_player_health)
        self.logic.enemy_health_changed.connect(self.screen.update_enemy_health)
        self.screen.ability_request.connect(self.logic.handle_ability)

    def _on_start_game(self, party, foes) -> None:
        # The menu's lists are ignored; the fixed party always fights the dragon.
        combat_party = [self.warrior, self.wizard, self.ranger, self.cleric]
        self.current_index = COMBAT_VIEW
        self.logic.start_combat(combat_party, [self.dragon])

    def start(self) -> None:
        """Press the menu's start button."""
        self.menu.click_start()

    def choose_ability(self, index: int) -> bool:
        """Press an ability button; return whether a request was sent."""
        return self.screen.click_ability(index)

    def wait_for_player(self) -> bool:
        """Let time pass until nothing is pending; return whether the player may act."""
        self.scheduler.run_until_idle()
        return self.screen.buttons[0].enabled


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dungeongame", description="Fight the dragon.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))
    print(game.menu.render())
    game.start()
    while True:
        can_act = game.wait_for_player()
        print(game.screen.render())
        if game.logic.check_player_victory():
            print("Victory! The dragon is slain.")
            return 0
        if not can_act:
            print("The party has fallen.")
            return 0
        try:
            choice = input("Ability (1-3, q to quit): ").strip().lower()
        except EOFError:
            return 0
        if choice in ("q", "quit"):
            return 0
        if choice not in ("1", "2", "3"):
            print("Please choose 1, 2 or 3.")
            continue
        game.choose_ability(int(choice) - 1)