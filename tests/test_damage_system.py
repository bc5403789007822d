from dungeonrl.components import CombatStats, Name, Player, Position, SufferDamage, new_damage
from dungeonrl.damage_system import apply_damage, delete_the_dead
from dungeonrl.world import RunMode, World


def _stats(hp):
    return CombatStats(max_hp=30, hp=hp, defense=1, power=5)


def test_apply_damage_sums_and_stains():
    world = World()
    mob = world.create_entity(_stats(20), Position(4, 6))
    new_damage(world, mob, 3)
    new_damage(world, mob, 4)
    apply_damage(world)
    assert world.get(mob, CombatStats).hp == 20 - 3 - 4
    assert world.map.xy_idx(4, 6) in world.map.bloodstains
    assert world.storage(SufferDamage) == {}


def test_apply_damage_clamps_at_zero_without_position():
    world = World()
    mob = world.create_entity(_stats(2))
    new_damage(world, mob, 50)
    apply_damage(world)
    assert world.get(mob, CombatStats).hp == 0
    assert world.map.bloodstains == set()


def test_delete_the_dead_removes_monsters_and_logs():
    world = World()
    alive = world.create_entity(_stats(5), Name("Orc"))
    dead = world.create_entity(_stats(0), Name("Goblin"))
    delete_the_dead(world)
    assert not world.is_alive(dead)
    assert world.is_alive(alive)
    assert world.log.entries == ["Goblin is dead"]


def test_dead_player_ends_game_but_stays():
    world = World()
    player = world.create_entity(_stats(0), Player(), Name("Player"))
    world.player_entity = player
    delete_the_dead(world)
    assert world.is_alive(player)
    assert world.run_state.mode is RunMode.GAME_OVER
    assert world.log.entries == []