"""Picking up, using, dropping and unequipping items."""

from __future__ import annotations

from dataclasses import dataclass

from .components import (
    AreaOfEffect,
    CombatStats,
    Confusion,
    Consumable,
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
    WantsToDropItem,
    WantsToPickupItem,
    WantsToRemoveItem,
    WantsToUseItem,
    new_damage,
)
from .console import BLACK, GREEN, MAGENTA, ORANGE, RED, RGB, to_cp437
from .map import field_of_view
from .world import RunMode, RunState, World

PARTICLE_LIFETIME_MS = 200.0
WELL_FED_DURATION = 20


@dataclass(frozen=True)
class ParticleRequest:
    """A short-lived visual effect to be spawned at a map position."""

    x: int
    y: int
    fg: RGB
    bg: RGB
    glyph: int
    lifetime: float


def _request_particle(world: World, x: int, y: int, fg: RGB, glyph: str) -> None:
    world.particles.append(
        ParticleRequest(x, y, fg, BLACK, to_cp437(glyph), PARTICLE_LIFETIME_MS)
    )


def _name_of(world: World, entity: int) -> str:
    name = world.get(entity, Name)
    if name is None:
        raise KeyError(f"entity {entity} has no name")
    return name.name


def collect_items(world: World) -> None:
    """Move every item someone wants to pick up into their backpack."""
    for _entity, pickup in list(world.query(WantsToPickupItem)):
        world.remove_component(pickup.item, Position)
        world.add_component(pickup.item, InBackpack(pickup.collected_by))
        if pickup.collected_by == world.player_entity:
            world.log.entries.append(f"You pick up the {_name_of(world, pickup.item)}.")
    world.clear_components(WantsToPickupItem)


def _select_targets(world: World, use: WantsToUseItem) -> list[int]:
    if use.target is None:
        return [world.player_entity]
    fov_map = world.map
    area = world.get(use.item, AreaOfEffect)
    if area is None:
        return list(fov_map.tile_content[fov_map.xy_idx(use.target.x, use.target.y)])
    targets: list[int] = []
    blast = [
        p
        for p in field_of_view(use.target, area.radius, fov_map)
        if 0 < p.x < fov_map.width - 1 and 0 < p.y < fov_map.height - 1
    ]
    for tile in blast:
        targets.extend(fov_map.tile_content[fov_map.xy_idx(tile.x, tile.y)])
        _request_particle(world, tile.x, tile.y, ORANGE, "░")
    return targets


def _equip(world: World, item: int, equippable: Equippable, target: int) -> None:
    slot = equippable.slot
    player = world.player_entity
    to_unequip = []
    for item_entity, already, name in world.query(Equipped, Name):
        if already.owner == target and already.slot is slot:
            to_unequip.append(item_entity)
            if target == player:
                world.log.entries.append(f"You unequip {name.name}.")
    for old in to_unequip:
        world.remove_component(old, Equipped)
        world.add_component(old, InBackpack(target))
    world.add_component(item, Equipped(target, slot))
    world.remove_component(item, InBackpack)
    if target == player:
        world.log.entries.append(f"You equip {_name_of(world, item)}.")


def use_items(world: World) -> None:
    """Apply the effects of every item someone wants to use."""
    player = world.player_entity
    for entity, use in list(world.query(WantsToUseItem)):
        item = use.item
        used_item = True
        targets = _select_targets(world, use)

        equippable = world.get(item, Equippable)
        if equippable is not None:
            _equip(world, item, equippable, targets[0])

        if world.has(item, ProvidesFood):
            used_item = True
            clock = world.get(targets[0], HungerClock)
            if clock is not None:
                clock.state = HungerState.WELL_FED
                clock.duration = WELL_FED_DURATION
                world.log.entries.append(f"You eat the {_name_of(world, item)}.")

        healer = world.get(item, ProvidesHealing)
        if healer is not None:
            for target in targets:
                stats = world.get(target, CombatStats)
                if stats is None:
                    continue
                stats.hp = min(stats.max_hp, stats.hp + healer.heal_amount)
                if entity == player:
                    world.log.entries.append(
                        f"You use the {_name_of(world, item)}, healing {healer.heal_amount} hp."
                    )
                used_item = True
                pos = world.get(target, Position)
                if pos is not None:
                    _request_particle(world, pos.x, pos.y, GREEN, "♥")

        if world.has(item, MagicMapper):
            used_item = True
            world.log.entries.append("The map is revealed to you!")
            world.run_state = RunState(RunMode.MAGIC_MAP_REVEAL, row=0)

        damage = world.get(item, InflictsDamage)
        if damage is not None:
            used_item = False
            for mob in targets:
                new_damage(world, mob, damage.damage)
                if entity == player:
                    world.log.entries.append(
                        f"You use {_name_of(world, item)} on {_name_of(world, mob)}, "
                        f"inflicting {damage.damage} hp."
                    )
                used_item = True
                pos = world.get(mob, Position)
                if pos is not None:
                    _request_particle(world, pos.x, pos.y, RED, "‼")

        confusion = world.get(item, Confusion)
        if confusion is not None:
            used_item = False
            for mob in targets:
                if entity == player:
                    world.log.entries.append(
                        f"You use {_name_of(world, item)} on {_name_of(world, mob)}, "
                        "confusing them."
                    )
                used_item = True
                pos = world.get(mob, Position)
                if pos is not None:
                    _request_particle(world, pos.x, pos.y, MAGENTA, "?")
            for mob in targets:
                world.add_component(mob, Confusion(confusion.turns))

        if used_item and world.has(item, Consumable) and world.is_alive(item):
            world.delete_entity(item)

    world.clear_components(WantsToUseItem)


def drop_items(world: World) -> None:
    """Place every item someone wants to drop at their feet."""
    for entity, to_drop in list(world.query(WantsToDropItem)):
        dropper = world.get(entity, Position)
        if dropper is None:
            raise KeyError(f"entity {entity} has no position to drop at")
        world.add_component(to_drop.item, Position(dropper.x, dropper.y))
        world.remove_component(to_drop.item, InBackpack)
        if entity == world.player_entity:
            world.log.entries.append(f"You drop the {_name_of(world, to_drop.item)}.")
    world.clear_components(WantsToDropItem)


def remove_items(world: World) -> None:
    """Unequip every item someone wants to take off, returning it to their backpack."""
    for entity, to_remove in list(world.query(WantsToRemoveItem)):
        world.remove_component(to_remove.item, Equipped)
        world.add_component(to_remove.item, InBackpack(entity))
    world.clear_components(WantsToRemoveItem)