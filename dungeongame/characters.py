"""Heroes and monsters with their stats and abilities."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Protocol

log = logging.getLogger(__name__)


class HealthDisplay(Protocol):
    """Anything that can show a health value."""

    def set_value(self, value: int) -> None: ...


class Character:
    """A combatant with health, stats and up to three abilities."""

    def __init__(
        self,
        name: str,
        health: int,
        strength: int,
        magic: int,
        speed: int,
        mana: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.name = name
        self.health = health
        self.max_health = health
        self.strength = strength
        self.magic = magic
        self.speed = speed
        self.mana = mana
        self.critrate = strength // 10
        self.healthbar: Optional[HealthDisplay] = None
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, health={self.health})"

    def is_alive(self) -> bool:
        return self.health != 0

    def stat(self, select: int) -> int:
        """Return strength, magic, speed or mana for 0..3; anything else is 0."""
        return {
            0: self.strength,
            1: self.magic,
            2: self.speed,
            3: self.mana,
        }.get(select, 0)

    def ability(self, index: int, target: "Character") -> None:
        log.debug("%s has no ability %d", self.name, index)

    def ability_name(self, index: int) -> str:
        return "Angriff"

    def _show_health(self) -> None:
        if self.healthbar is not None:
            self.healthbar.set_value(self.health)

    def receive_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)
        self._show_health()

    def receive_healing(self, amount: int) -> None:
        # Healing is deliberately not capped at max_health.
        self.health = max(0, self.health + amount)
        self._show_health()


class Warrior(Character):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__("Magnus Machtfaust", 80, 20, 5, 8, 10, rng)

    def ability(self, index: int, target: Character) -> None:
        actions = {0: self.slash, 1: self.bolster, 2: self.randomhit}
        action = actions.get(index)
        if action is not None:
            action(target)

    def slash(self, target: Character) -> None:
        target.receive_damage(10 + self.rng.randrange(10) + self.stat(0) // 10)
        log.debug("slashing")

    def bolster(self, target: Character) -> None:
        self.receive_healing(100)

    def randomhit(self, target: Character) -> None:
        target.receive_damage(self.rng.randrange(100))

    def ability_name(self, index: int) -> str:
        return {0: "slash", 1: "bolster", 2: "randomhit"}.get(index, "")


class Wizard(Character):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__("Salabrius der Weise", 25, 2, 20, 4, 100, rng)

    def ability(self, index: int, target: Character) -> None:
        actions = {0: self.fireball, 1: self.barrier, 2: self.magicmissile}
        action = actions.get(index)
        if action is not None:
            action(target)

    def fireball(self, target: Character) -> None:
        damage = 15 + self.rng.randrange(10) + self.stat(1) // 5
        target.receive_damage(damage)
        log.debug("Fireball! (%d damage + Burn)", damage)

    def barrier(self, target: Character) -> None:
        """Touch the target without changing its health."""
        target.receive_damage(0)

    def magicmissile(self, target: Character) -> None:
        """Strike the target for no damage."""
        target.receive_damage(0)

    def ability_name(self, index: int) -> str:
        return {0: "fireball", 1: "barrier", 2: "magicmissile"}.get(index, "")


class Ranger(Character):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__("Helga Hartholz", 60, 15, 10, 10, 25, rng)

    def ability_name(self, index: int) -> str:
        return {0: "fireball", 1: "barrier", 2: "magicmissile"}.get(index, "")


class Cleric(Character):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__("Vater Umpfred", 50, 10, 17, 2, 80, rng)

    def healall(self, allies: Iterable[Character]) -> None:
        """Heal every living ally; magic boosts the amount."""
        for ally in allies:
            if ally.is_alive():
                ally.receive_healing(30 + self.stat(1))
        log.debug("Mass healing wave!")


class Dragon(Character):
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__("Tyrax der Grüne", 400, 20, 20, 1, 200, rng)

    def ability(self, index: int, target: Character) -> None:
        if index == 0:
            self.biss(target)
        elif index == 2:
            self.stun(target)

    def biss(self, target: Character) -> None:
        target.receive_damage(45)

    def feuer(self, targets: Iterable[Character]) -> None:
        """Breathe fire on every living target."""
        for target in targets:
            if target.is_alive():
                target.receive_damage(50 + self.rng.randrange(20))
        log.debug("Drache speit")

    def stun(self, target: Character) -> None:
        target.receive_damage(100)