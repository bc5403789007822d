"""Hunger clocks that tick down each turn."""

from __future__ import annotations

from .components import HungerClock, HungerState, new_damage
from .world import RunMode, World

_STATE_DURATION = 200

_NEXT_STATE = {
    HungerState.WELL_FED: (HungerState.NORMAL, "You are no longer well fed."),
    HungerState.NORMAL: (HungerState.HUNGRY, "You are hungry."),
    HungerState.HUNGRY: (HungerState.STARVING, "You are starving!"),
}


def run_hunger(world: World) -> None:
    """Advance hunger for the player on its turn and for others on theirs."""
    mode = world.run_state.mode
    player = world.player_entity
    for entity, clock in list(world.query(HungerClock)):
        is_player = entity == player
        if mode is RunMode.PLAYER_TURN:
            proceed = is_player
        elif mode is RunMode.MONSTER_TURN:
            proceed = not is_player
        else:
            proceed = False
        if not proceed:
            continue

        clock.duration -= 1
        if clock.duration >= 1:
            continue
        if clock.state is HungerState.STARVING:
            if is_player:
                world.log.entries.append(
                    "Your hunger pangs are getting painful! You suffer 1 hp damage."
                )
            new_damage(world, entity, 1)
        else:
            clock.state, message = _NEXT_STATE[clock.state]
            clock.duration = _STATE_DURATION
            if is_player:
                world.log.entries.append(message)