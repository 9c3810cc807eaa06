import pytest

from dungeongame.characters import Character, Cleric, Dragon, Ranger, Warrior, Wizard


class FixedRng:
    """Returns the same value from every randrange call."""

    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        assert 0 <= self.value < n
        return self.value


class RecordingBar:
    def __init__(self):
        self.values = []

    def set_value(self, value):
        self.values.append(value)


def test_warrior_stats_from_constructor():
    w = Warrior()
    assert w.name == "Magnus Machtfaust"
    assert (w.health, w.max_health) == (80, 80)
    assert [w.stat(i) for i in range(4)] == [20, 5, 8, 10]


def test_stat_out_of_range_is_zero():
    assert Dragon().stat(4) == 0
    assert Dragon().stat(-1) == 0


@pytest.mark.parametrize(
    "cls, name, health, mana",
    [
        (Wizard, "Salabrius der Weise", 25, 100),
        (Ranger, "Helga Hartholz", 60, 25),
        (Cleric, "Vater Umpfred", 50, 80),
        (Dragon, "Tyrax der Grüne", 400, 200),
    ],
)
def test_roster_constants(cls, name, health, mana):
    c = cls()
    assert (c.name, c.health, c.stat(3)) == (name, health, mana)


def test_damage_clamps_at_zero_and_kills():
    w = Warrior()
    w.receive_damage(w.max_health + 50)
    assert w.health == 0
    assert not w.is_alive()


def test_healing_is_not_capped():
    w = Warrior()
    w.bolster(w)
    assert w.health == w.max_health + 100


def test_healthbar_follows_health():
    w = Warrior()
    bar = RecordingBar()
    w.healthbar = bar
    w.receive_damage(30)
    w.receive_healing(5)
    assert bar.values == [w.max_health - 30, w.max_health - 25]


@pytest.mark.parametrize(
    "cls, names",
    [
        (Warrior, ["slash", "bolster", "randomhit", ""]),
        (Wizard, ["fireball", "barrier", "magicmissile", ""]),
        (Ranger, ["fireball", "barrier", "magicmissile", ""]),
        (Cleric, ["Angriff"] * 4),
        (Dragon, ["Angriff"] * 4),
    ],
)
def test_ability_names(cls, names):
    c = cls()
    assert [c.ability_name(i) for i in range(4)] == names


def test_base_ability_does_nothing():
    hero = Character("Test", 10, 1, 1, 1, 1)
    target = Ranger()
    hero.ability(0, target)
    assert target.health == target.max_health


def test_dragon_biss_and_stun():
    d = Dragon()
    target = Dragon()
    d.ability(0, target)
    assert target.health == target.max_health - 45
    d.ability(2, target)
    assert target.health == target.max_health - 145
    d.ability(1, target)
    assert target.health == target.max_health - 145


def test_slash_damage_rises_with_roll():
    low_target, high_target = Dragon(), Dragon()
    Warrior(rng=FixedRng(0)).slash(low_target)
    Warrior(rng=FixedRng(7)).slash(high_target)
    assert low_target.health - high_target.health == 7
    assert low_target.health < low_target.max_health


def test_warrior_ability_dispatch():
    target = Dragon()
    Warrior(rng=FixedRng(42)).ability(2, target)
    assert target.health == target.max_health - 42


def test_fireball_damage_rises_with_roll():
    low_target, high_target = Dragon(), Dragon()
    Wizard(rng=FixedRng(0)).ability(0, low_target)
    Wizard(rng=FixedRng(9)).ability(0, high_target)
    assert low_target.health - high_target.health == 9
    assert low_target.health < low_target.max_health


def test_wizard_barrier_and_missile_have_no_effect():
    target = Dragon()
    wiz = Wizard()
    wiz.ability(1, target)
    wiz.ability(2, target)
    assert target.health == target.max_health


def test_healall_skips_the_dead():
    cleric = Cleric()
    alive, dead = Warrior(), Wizard()
    alive.receive_damage(10)
    dead.receive_damage(dead.max_health)
    cleric.healall([alive, dead])
    assert dead.health == 0
    assert alive.health == alive.max_health - 10 + 30 + cleric.stat(1)


def test_feuer_hits_only_the_living():
    dragon = Dragon(rng=FixedRng(0))
    alive, dead = Dragon(), Warrior()
    dead.receive_damage(dead.max_health)
    dragon.feuer([alive, dead])
    assert alive.health == alive.max_health - 50
    assert dead.health == 0