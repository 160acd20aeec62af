from adventpuzzles.y2015.day21 import BOSS, Fighter, loadouts, part1, part2


def test_example_battle():
    player = Fighter(hp=8, damage=5, armor=5)
    boss = Fighter(hp=12, damage=7, armor=2)
    assert player.beats(boss) is True


def test_first_strike_decides_a_tie():
    player = Fighter(hp=8, damage=5, armor=5)
    boss = Fighter(hp=12, damage=7, armor=2)
    assert boss.beats(player) is True


def test_minimum_damage_is_one():
    weak = Fighter(hp=10, damage=0, armor=0)
    tank = Fighter(hp=1, damage=0, armor=100)
    assert weak.beats(tank) is True


def test_loadouts_use_player_hit_points():
    players = list(loadouts())
    assert all(p.hp == 100 for p in players)
    assert min(p.cost for p in players) >= 8


def test_part1_is_cheapest_win():
    cheapest = part1("")
    players = list(loadouts())
    assert any(p.cost == cheapest and p.beats(BOSS) for p in players)
    assert all(not p.beats(BOSS) for p in players if p.cost < cheapest)


def test_part2_is_dearest_loss():
    dearest = part2("")
    players = list(loadouts())
    assert any(p.cost == dearest and not p.beats(BOSS) for p in players)
    assert all(p.beats(BOSS) for p in players if p.cost > dearest)