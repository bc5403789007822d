import pytest

from dungeonrl.components import (
    AreaOfEffect,
    CombatStats,
    Confusion,
    Consumable,
    EquipmentSlot,
    Equippable,
    Equipped,
    HungerClock,
    HungerState,
    InBackpack,
    InflictsDamage,
    MagicMapper,
    Name,
    Position,
    ProvidesFood,
    ProvidesHealing,
    SufferDamage,
    WantsToDropItem,
    WantsToPickupItem,
    WantsToRemoveItem,
    WantsToUseItem,
)
from dungeonrl.console import to_cp437
from dungeonrl.inventory_system import (
    ParticleRequest,
    collect_items,
    drop_items,
    remove_items,
    use_items,
)
from dungeonrl.map import Map, Point, TileType
from dungeonrl.world import RunMode, World


def make_world():
    fov_map = Map.new(1, 20, 20)
    fov_map.tiles = [TileType.FLOOR] * (20 * 20)
    fov_map.populate_blocked()
    world = World(fov_map)
    world.player_entity = world.create_entity(
        Name("Player"), Position(5, 5), CombatStats(30, 10, 2, 5)
    )
    return world


def place(world, entity, x, y):
    world.map.tile_content[world.map.xy_idx(x, y)].append(entity)


def test_collect_moves_item_to_backpack():
    world = make_world()
    item = world.create_entity(Name("Potion"), Position(5, 5))
    world.create_entity(WantsToPickupItem(world.player_entity, item))
    collect_items(world)
    assert world.get(item, Position) is None
    assert world.get(item, InBackpack) == InBackpack(world.player_entity)
    assert world.log.entries[-1] == "You pick up the Potion."
    assert world.storage(WantsToPickupItem) == {}


def test_collect_by_monster_is_silent():
    world = make_world()
    orc = world.create_entity(Name("Orc"))
    item = world.create_entity(Name("Dagger"), Position(1, 1))
    world.add_component(orc, WantsToPickupItem(orc, item))
    collect_items(world)
    assert world.get(item, InBackpack).owner == orc
    assert world.log.entries == []


def test_drop_places_item_at_dropper():
    world = make_world()
    item = world.create_entity(Name("Potion"), InBackpack(world.player_entity))
    world.add_component(world.player_entity, WantsToDropItem(item))
    drop_items(world)
    assert world.get(item, Position) == Position(5, 5)
    assert not world.has(item, InBackpack)
    assert world.log.entries[-1] == "You drop the Potion."
    assert world.storage(WantsToDropItem) == {}


def test_drop_without_position_raises():
    world = make_world()
    ghost = world.create_entity(Name("Ghost"))
    item = world.create_entity(Name("Potion"), InBackpack(ghost))
    world.add_component(ghost, WantsToDropItem(item))
    with pytest.raises(KeyError):
        drop_items(world)


def test_remove_returns_item_to_backpack():
    world = make_world()
    item = world.create_entity(Name("Sword"), Equipped(world.player_entity, EquipmentSlot.MELEE))
    world.add_component(world.player_entity, WantsToRemoveItem(item))
    remove_items(world)
    assert not world.has(item, Equipped)
    assert world.get(item, InBackpack).owner == world.player_entity
    assert world.storage(WantsToRemoveItem) == {}


def test_healing_potion_caps_and_is_consumed():
    world = make_world()
    potion = world.create_entity(
        Name("Health Potion"), ProvidesHealing(100), Consumable(), InBackpack(world.player_entity)
    )
    world.add_component(world.player_entity, WantsToUseItem(potion))
    use_items(world)
    stats = world.get(world.player_entity, CombatStats)
    assert stats.hp == stats.max_hp
    assert not world.is_alive(potion)
    assert world.log.entries[-1] == "You use the Health Potion, healing 100 hp."
    assert world.particles[-1].glyph == to_cp437("♥")
    assert (world.particles[-1].x, world.particles[-1].y) == (5, 5)
    assert world.storage(WantsToUseItem) == {}


def test_non_consumable_item_survives_use():
    world = make_world()
    charm = world.create_entity(Name("Charm"), ProvidesHealing(1))
    world.add_component(world.player_entity, WantsToUseItem(charm))
    use_items(world)
    assert world.is_alive(charm)
    assert world.get(world.player_entity, CombatStats).hp == 11


def test_equip_swaps_slot_item():
    world = make_world()
    player = world.player_entity
    old = world.create_entity(Name("Dagger"), Equipped(player, EquipmentSlot.MELEE))
    new = world.create_entity(
        Name("Longsword"), Equippable(EquipmentSlot.MELEE), InBackpack(player)
    )
    world.add_component(player, WantsToUseItem(new))
    use_items(world)
    assert world.get(new, Equipped) == Equipped(player, EquipmentSlot.MELEE)
    assert not world.has(new, InBackpack)
    assert not world.has(old, Equipped)
    assert world.get(old, InBackpack).owner == player
    assert world.log.entries[-2:] == ["You unequip Dagger.", "You equip Longsword."]


def test_equip_keeps_other_slot():
    world = make_world()
    player = world.player_entity
    shield = world.create_entity(Name("Shield"), Equipped(player, EquipmentSlot.SHIELD))
    sword = world.create_entity(Name("Sword"), Equippable(EquipmentSlot.MELEE))
    world.add_component(player, WantsToUseItem(sword))
    use_items(world)
    assert world.get(shield, Equipped).slot is EquipmentSlot.SHIELD
    assert world.get(sword, Equipped).slot is EquipmentSlot.MELEE


def test_single_target_damage():
    world = make_world()
    orc = world.create_entity(Name("Orc"), Position(8, 8), CombatStats(16, 16, 1, 4))
    place(world, orc, 8, 8)
    scroll = world.create_entity(Name("Magic Missile Scroll"), InflictsDamage(8), Consumable())
    world.add_component(world.player_entity, WantsToUseItem(scroll, Point(8, 8)))
    use_items(world)
    assert world.get(orc, SufferDamage).amount == [8]
    assert world.log.entries[-1] == "You use Magic Missile Scroll on Orc, inflicting 8 hp."
    assert not world.is_alive(scroll)
    assert world.particles[-1].glyph == to_cp437("‼")


def test_damage_on_empty_tile_still_consumes_nothing():
    world = make_world()
    scroll = world.create_entity(Name("Scroll"), InflictsDamage(8), Consumable())
    world.add_component(world.player_entity, WantsToUseItem(scroll, Point(9, 9)))
    use_items(world)
    assert world.is_alive(scroll)
    assert world.storage(SufferDamage) == {}


def test_area_damage_hits_mobs_in_radius():
    world = make_world()
    near = world.create_entity(Name("Goblin"), Position(10, 10))
    far = world.create_entity(Name("Orc"), Position(16, 16))
    place(world, near, 10, 10)
    place(world, far, 16, 16)
    scroll = world.create_entity(
        Name("Fireball Scroll"), InflictsDamage(20), AreaOfEffect(3), Consumable()
    )
    world.add_component(world.player_entity, WantsToUseItem(scroll, Point(10, 10)))
    use_items(world)
    assert world.get(near, SufferDamage).amount == [20]
    assert not world.has(far, SufferDamage)
    blast = [p for p in world.particles if p.glyph == to_cp437("░")]
    assert blast
    assert all(abs(p.x - 10) <= 3 and abs(p.y - 10) <= 3 for p in blast)
    assert all(isinstance(p, ParticleRequest) for p in blast)


def test_confusion_applies_to_target():
    world = make_world()
    orc = world.create_entity(Name("Orc"), Position(7, 7))
    place(world, orc, 7, 7)
    scroll = world.create_entity(Name("Confusion Scroll"), Confusion(4), Consumable())
    world.add_component(world.player_entity, WantsToUseItem(scroll, Point(7, 7)))
    use_items(world)
    assert world.get(orc, Confusion) == Confusion(4)
    assert world.log.entries[-1] == "You use Confusion Scroll on Orc, confusing them."
    assert not world.is_alive(scroll)


def test_magic_mapper_switches_run_state():
    world = make_world()
    scroll = world.create_entity(Name("Magic Mapping Scroll"), MagicMapper(), Consumable())
    world.add_component(world.player_entity, WantsToUseItem(scroll))
    use_items(world)
    assert world.run_state.mode is RunMode.MAGIC_MAP_REVEAL
    assert world.run_state.row == 0
    assert world.log.entries[-1] == "The map is revealed to you!"
    assert not world.is_alive(scroll)


def test_food_makes_well_fed():
    world = make_world()
    world.add_component(world.player_entity, HungerClock(HungerState.HUNGRY, 5))
    ration = world.create_entity(Name("Rations"), ProvidesFood(), Consumable())
    world.add_component(world.player_entity, WantsToUseItem(ration))
    use_items(world)
    clock = world.get(world.player_entity, HungerClock)
    assert clock.state is HungerState.WELL_FED
    assert clock.duration == 20
    assert world.log.entries[-1] == "You eat the Rations."
    assert not world.is_alive(ration)