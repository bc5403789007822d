"""Game setup, the per-turn system pipeline and the state changes behind menu choices."""

from __future__ import annotations

from .components import (
    Equipped,
    InBackpack,
    Player,
    Ranged,
    WantsToDropItem,
    WantsToRemoveItem,
    WantsToUseItem,
)
from .damage_system import apply_damage
from .hunger_system import run_hunger
from .inventory_system import collect_items, drop_items, remove_items, use_items
from .map import Map, Point
from .world import GameLog, RunMode, RunState, World

MAP_WIDTH = 80
MAP_HEIGHT = 50
WELCOME_MESSAGE = "Welcome to the dungeon."


def create_world() -> World:
    """A fresh world on depth 1, waiting for its first map to be generated."""
    world = World(Map.new(1, MAP_WIDTH, MAP_HEIGHT))
    world.player_pos = Point(0, 0)
    world.run_state = RunState(RunMode.MAP_GENERATION)
    world.log = GameLog([WELCOME_MESSAGE])
    world.particles = []
    return world


def run_systems(world: World) -> None:
    """Run one pass of the turn's systems in their fixed order."""
    apply_damage(world)
    collect_items(world)
    use_items(world)
    drop_items(world)
    remove_items(world)
    run_hunger(world)


def entities_to_remove_on_level_change(world: World) -> list[int]:
    """Every entity except the player and what the player carries or wears."""
    player = world.player_entity
    to_delete: list[int] = []
    for entity in world.entities():
        if world.has(entity, Player):
            continue
        pack = world.get(entity, InBackpack)
        if pack is not None and pack.owner == player:
            continue
        worn = world.get(entity, Equipped)
        if worn is not None and worn.owner == player:
            continue
        to_delete.append(entity)
    return to_delete


def reveal_map_row(world: World, row: int) -> RunState:
    """Reveal one row of the map and return the state that follows."""
    fov_map = world.map
    for x in range(fov_map.width):
        fov_map.revealed_tiles[fov_map.xy_idx(x, row)] = True
    if row == fov_map.height - 1:
        return RunState(RunMode.MONSTER_TURN)
    return RunState(RunMode.MAGIC_MAP_REVEAL, row=row + 1)


def handle_inventory_selection(world: World, item: int) -> RunState:
    """Use the chosen item, or ask for a target first if it is ranged."""
    ranged = world.get(item, Ranged)
    if ranged is not None:
        return RunState(RunMode.SHOW_TARGETING, range=ranged.range, item=item)
    world.add_component(world.player_entity, WantsToUseItem(item, None))
    return RunState(RunMode.PLAYER_TURN)


def handle_drop_selection(world: World, item: int) -> RunState:
    """Record the player's wish to drop ``item`` and pass the turn."""
    world.add_component(world.player_entity, WantsToDropItem(item))
    return RunState(RunMode.PLAYER_TURN)


def handle_remove_selection(world: World, item: int) -> RunState:
    """Record the player's wish to unequip ``item`` and pass the turn."""
    world.add_component(world.player_entity, WantsToRemoveItem(item))
    return RunState(RunMode.PLAYER_TURN)


def handle_targeting_selection(world: World, item: int, target: Point | None) -> RunState:
    """Record the player's wish to use ``item`` on ``target`` and pass the turn."""
    world.add_component(world.player_entity, WantsToUseItem(item, target))
    return RunState(RunMode.PLAYER_TURN)