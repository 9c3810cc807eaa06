"""Turn-based combat between a player party and a group of foes."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from .characters import Character, Cleric, Dragon
from .events import Scheduler, Signal

log = logging.getLogger(__name__)

SKIP_DELAY_MS = 100
TURN_DELAY_MS = 1000


def _contains(group: Iterable[Character], who: Character) -> bool:
    return any(member is who for member in group)


class CombatLogic:
    """Drives turn order, enemy actions and player ability requests."""

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.rng = rng if rng is not None else random.Random()
        self.current_actor: Optional[Character] = None
        self.is_player_turn = True
        self._player_party: list[Character] = []
        self._enemies: list[Character] = []
        self._turn_order: list[Character] = []
        self._turn_index = -1

        self.player_health_changed = Signal()
        self.enemy_health_changed = Signal()
        self.combat_ended = Signal()
        self.status_applied = Signal()
        self.update_status_display = Signal()
        self.enable_player_input = Signal()
        self.update_ability_ui = Signal()

    def start_combat(self, party: Iterable[Character], foes: Iterable[Character]) -> None:
        self._player_party = list(party)
        self._enemies = list(foes)
        self._sort_turn_order()
        self.next_turn()

    def turn_order(self) -> list[Character]:
        """The living combatants, highest mana first."""
        return list(self._turn_order)

    def next_turn(self) -> None:
        if not self._turn_order:
            raise ValueError("no living combatants to take a turn")
        self._turn_index = (self._turn_index + 1) % len(self._turn_order)
        actor = self._turn_order[self._turn_index]
        self.current_actor = actor

        if not actor.is_alive():
            self.scheduler.call_later(SKIP_DELAY_MS, self.next_turn)
            return

        self.is_player_turn = _contains(self._player_party, actor)
        self.update_ability_ui.emit(actor, self.is_player_turn)

        if not self.is_player_turn:
            self.scheduler.call_later(TURN_DELAY_MS, self.handle_ai_ability)

    def handle_ai_ability(self) -> None:
        alive = [c for c in self._player_party if c.is_alive()]
        if not alive or self.current_actor is None:
            return
        target = alive[self.rng.randrange(len(alive))]
        ability_index = self.rng.randrange(3)
        self.current_actor.ability(ability_index, target)
        self.player_health_changed.emit(target.health, target)
        self.end_turn()

    def end_turn(self) -> None:
        self._sort_turn_order()
        log.debug("turn ended")
        self.scheduler.call_later(TURN_DELAY_MS, self.next_turn)

    def handle_ability(self, index: int, caster: Character) -> None:
        roll = self.rng.randrange(4)
        if self.is_player_turn:
            target = self._enemies[0]
            caster.ability(index, target)
            self.enemy_health_changed.emit(target.health, target)
        else:
            target = self._player_party[roll]
            caster.ability(index, target)
            self.player_health_changed.emit(target.health, target)
        self.end_turn()

    def handle_area_ability(self, index: int, targets_allies: bool) -> None:
        actor = self.current_actor
        if actor is None or not self.is_player_turn:
            return
        if isinstance(actor, Cleric) and index == 2:
            actor.healall(self._player_party)
            self.update_status_display.emit()
        elif isinstance(actor, Dragon) and index == 1:
            actor.feuer(self._player_party)
            self.update_status_display.emit()
        self.end_turn()

    def check_player_victory(self) -> bool:
        """True once any foe is down while any party member still stands."""
        enemy_down = any(not enemy.is_alive() for enemy in self._enemies)
        party_standing = any(player.is_alive() for player in self._player_party)
        return enemy_down and party_standing

    def _sort_turn_order(self) -> None:
        combatants = self._player_party + self._enemies
        combatants.sort(key=lambda c: c.stat(3), reverse=True)
        self._turn_order = [c for c in combatants if c.is_alive()]