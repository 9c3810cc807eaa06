import random

import pytest

from dungeongame.app import COMBAT_VIEW, MENU_VIEW, Game, main


def make_game(seed=7):
    return Game(random.Random(seed))


def test_new_game_shows_menu_with_full_bars():
    game = make_game()
    assert game.current_index == MENU_VIEW
    assert game.screen.dragon_health.value == 400
    assert game.screen.warrior_health.value == 80


def test_start_switches_view_and_dragon_acts_first():
    game = make_game()
    game.start()
    assert game.current_index == COMBAT_VIEW
    assert game.logic.current_actor is game.dragon
    assert game.logic.turn_order()[0] is game.dragon
    assert not game.screen.buttons[0].enabled
    assert game.scheduler.pending() == 1


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_wait_for_player_reaches_a_living_hero(seed):
    game = make_game(seed)
    game.start()
    assert game.wait_for_player() is True
    actor = game.logic.current_actor
    assert actor in [game.warrior, game.wizard, game.ranger, game.cleric]
    assert actor.is_alive()
    assert game.logic.is_player_turn


@pytest.mark.parametrize("seed", [0, 5])
def test_choose_ability_hurts_dragon_and_updates_bar(seed):
    game = make_game(seed)
    game.start()
    game.wait_for_player()
    assert game.choose_ability(0) is True
    assert game.dragon.health < 400
    assert game.screen.dragon_health.value == game.dragon.health


def test_choose_ability_during_enemy_turn_is_refused():
    game = make_game()
    game.start()
    assert game.choose_ability(0) is False
    assert game.dragon.health == 400


def test_bars_track_health_over_several_turns():
    game = make_game(11)
    game.start()
    for _ in range(5):
        if not game.wait_for_player():
            break
        game.choose_ability(0)
    for character in game.all_characters:
        bar = game.screen.characterbar[character]
        assert bar.value == character.health or character.health > bar.maximum


def test_main_quits_on_q(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "q")
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Start Game" in out
    assert "Tyrax der Grüne" in out


def test_main_rejects_bad_choice_then_quits(monkeypatch, capsys):
    answers = iter(["x", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--seed", "2"]) == 0
    assert "Please choose 1, 2 or 3." in capsys.readouterr().out


def test_main_ends_on_end_of_input(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["--seed", "3"]) == 0