"""Text-mode combat screen and start menu."""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .characters import Character, Warrior
from .events import Scheduler, Signal

log = logging.getLogger(__name__)

ENEMY_TURN_TEXT = "(Enemy Turn)"
DISABLED_STYLE = "color: #777; background-color: #222;"
MEDIEVAL_BUTTON_STYLE = (
    "background-color: #3a2c1a; color: #e8d8a0; border: 3px solid #5a4a2a; "
    'padding: 5px; font-family: "Courier New"; font-size: 14px; font-weight: bold;'
)

SHAKE_DURATION_MS = 800
SHAKE_INTERVAL_MS = 30
SHAKE_INTENSITY = 5


class HealthBar:
    """A bounded progress value; values outside the range are ignored."""

    def __init__(
        self, name: str = "", minimum: int = 0, maximum: int = 100, color: Optional[str] = None
    ) -> None:
        self.name = name
        self.minimum = minimum
        self.maximum = max(minimum, maximum)
        self.value: Optional[int] = None
        self.color = color

    def set_range(self, minimum: int, maximum: int) -> None:
        """Set the bounds; a value that falls outside them is cleared."""
        self.minimum = minimum
        self.maximum = max(minimum, maximum)
        if self.value is not None and not self.minimum <= self.value <= self.maximum:
            self.value = None

    def set_value(self, value: int) -> None:
        """Show ``value`` if it lies within the range; otherwise keep the old one."""
        if self.minimum <= value <= self.maximum:
            self.value = value

    def render(self, width: int) -> str:
        """Draw the bar ``width`` cells wide, followed by value/maximum."""
        if width < 1:
            raise ValueError("width must be positive")
        if self.value is None:
            return "[" + " " * width + "]"
        span = self.maximum - self.minimum
        filled = width if span == 0 else (self.value - self.minimum) * width // span
        return f"[{'#' * filled}{' ' * (width - filled)}] {self.value}/{self.maximum}"


@dataclass
class AbilityButton:
    """One of the three ability buttons."""

    text: str = ""
    enabled: bool = True
    style: str = ""


class CombatScreen:
    """Health bars, ability buttons and the requests the buttons send."""

    def __init__(
        self,
        actor: Optional[Character] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        # The actor ability requests are sent for.
        self.current_actor: Optional[Character] = (
            actor if actor is not None else Warrior(rng=self.rng)
        )
        self.warrior_health = HealthBar("warrior", color="#ff0000")
        self.wizard_health = HealthBar("wizard")
        self.ranger_health = HealthBar("ranger")
        self.cleric_health = HealthBar("cleric")
        self.dragon_health = HealthBar("dragon")
        self.characterbar: dict[Character, Optional[HealthBar]] = {}
        self.buttons = [AbilityButton() for _ in range(3)]
        self.offsets: dict[str, tuple[int, int]] = {
            view: (0, 0) for view in ("warrior", "wizard", "ranger", "cleric", "dragon")
        }
        self.ability_request = Signal()

    def bind_character(self, character: Character, bar: Optional[HealthBar]) -> None:
        """Tie a character to a health bar that starts full."""
        if bar is not None:
            bar.set_range(0, character.health)
            bar.set_value(character.health)
            character.healthbar = bar
        self.characterbar[character] = bar

    def update_ui(self, current_actor: Character, is_player_turn: bool) -> None:
        """Relabel and enable or disable the buttons for the turn that begins."""
        for index, button in enumerate(self.buttons):
            button.text = (
                current_actor.ability_name(index) if is_player_turn else ENEMY_TURN_TEXT
            )
            button.enabled = is_player_turn
            button.style = MEDIEVAL_BUTTON_STYLE if is_player_turn else DISABLED_STYLE

    def update_player_health(self, new_hp: int, target: Character) -> None:
        self.characterbar[target].set_value(new_hp)

    def update_enemy_health(self, new_hp: int, target: Character) -> None:
        self.characterbar[target].set_value(new_hp)

    def click_ability(self, ability_id: int) -> bool:
        """Press a button; return whether it sent an ability request."""
        if not 0 <= ability_id < len(self.buttons):
            raise IndexError(f"no ability button {ability_id}")
        if not self.buttons[ability_id].enabled or self.current_actor is None:
            return False
        self._shake("dragon")
        self.ability_request.emit(ability_id, self.current_actor)
        return True

    def _shake(self, view: str) -> None:
        origin = self.offsets[view]
        ticks = itertools.count(1)

        def tick() -> None:
            if next(ticks) * SHAKE_INTERVAL_MS > SHAKE_DURATION_MS:
                self.offsets[view] = origin
                return
            dx = self.rng.randint(-SHAKE_INTENSITY, SHAKE_INTENSITY)
            dy = self.rng.randint(-SHAKE_INTENSITY, SHAKE_INTENSITY)
            self.offsets[view] = (origin[0] + dx, origin[1] + dy)
            self.scheduler.call_later(SHAKE_INTERVAL_MS, tick)

        self.scheduler.call_later(SHAKE_INTERVAL_MS, tick)

    def render(self) -> str:
        """Draw the bound health bars and the ability buttons as text."""
        lines = [
            f"{character.name:<22} {bar.render(20)}"
            for character, bar in self.characterbar.items()
            if bar is not None
        ]
        lines.append(
            " ".join(
                f"[{button.text}]" if button.enabled else f"({button.text})"
                for button in self.buttons
            )
        )
        return "\n".join(lines)


class Menu:
    """The start menu with a single button."""

    title = "RPG Main Menu"
    button_text = "Start Game"

    def __init__(self) -> None:
        self.start_game = Signal()

    def click_start(self) -> None:
        """Ask for a game with an empty party and no foes."""
        self.start_game.emit([], [])

    def render(self) -> str:
        return f"{self.title}\n[ {self.button_text} ]"