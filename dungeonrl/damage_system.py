"""Applying queued damage and removing the dead."""

from __future__ import annotations

from .components import CombatStats, Name, Player, Position, SufferDamage
from .world import RunMode, RunState, World


def apply_damage(world: World) -> None:
    """Subtract pending damage from combat stats and leave bloodstains."""
    for entity, stats, damage in world.query(CombatStats, SufferDamage):
        stats.hp = max(0, stats.hp - sum(damage.amount))
        pos = world.get(entity, Position)
        if pos is not None:
            world.map.bloodstains.add(world.map.xy_idx(pos.x, pos.y))
    world.clear_components(SufferDamage)


def delete_the_dead(world: World) -> None:
    """Delete every non-player entity with no hit points; a dead player ends the game."""
    dead: list[int] = []
    for entity, stats in world.query(CombatStats):
        if stats.hp >= 1:
            continue
        if world.has(entity, Player):
            world.run_state = RunState(RunMode.GAME_OVER)
            continue
        name = world.get(entity, Name)
        if name is not None:
            world.log.entries.append(f"{name.name} is dead")
        dead.append(entity)
    for victim in dead:
        world.delete_entity(victim)