import pytest

from dungeonrl.components import HungerClock, HungerState, SufferDamage
from dungeonrl.hunger_system import run_hunger
from dungeonrl.world import RunMode, RunState, World


def _world(mode, player_clock, monster_clock=None):
    world = World()
    player = world.create_entity(player_clock)
    world.player_entity = player
    monster = world.create_entity(monster_clock) if monster_clock else None
    world.run_state = RunState(mode)
    return world, player, monster


@pytest.mark.parametrize(
    "start,end,message",
    [
        (HungerState.WELL_FED, HungerState.NORMAL, "You are no longer well fed."),
        (HungerState.NORMAL, HungerState.HUNGRY, "You are hungry."),
        (HungerState.HUNGRY, HungerState.STARVING, "You are starving!"),
    ],
)
def test_player_state_transitions(start, end, message):
    world, player, _ = _world(RunMode.PLAYER_TURN, HungerClock(start, 1))
    run_hunger(world)
    clock = world.get(player, HungerClock)
    assert clock.state is end
    assert clock.duration == 200
    assert world.log.entries == [message]


def test_duration_counts_down_without_transition():
    world, player, _ = _world(RunMode.PLAYER_TURN, HungerClock(HungerState.NORMAL, 5))
    run_hunger(world)
    assert world.get(player, HungerClock) == HungerClock(HungerState.NORMAL, 4)
    assert world.log.entries == []


def test_starving_player_takes_damage():
    world, player, _ = _world(RunMode.PLAYER_TURN, HungerClock(HungerState.STARVING, 1))
    run_hunger(world)
    assert world.get(player, SufferDamage).amount == [1]
    assert world.log.entries == [
        "Your hunger pangs are getting painful! You suffer 1 hp damage."
    ]


def test_monsters_only_tick_on_monster_turn():
    world, player, monster = _world(
        RunMode.PLAYER_TURN,
        HungerClock(HungerState.NORMAL, 10),
        HungerClock(HungerState.NORMAL, 10),
    )
    run_hunger(world)
    assert world.get(monster, HungerClock).duration == 10
    assert world.get(player, HungerClock).duration == 9

    world.run_state = RunState(RunMode.MONSTER_TURN)
    run_hunger(world)
    assert world.get(monster, HungerClock).duration == 9
    assert world.get(player, HungerClock).duration == 9


def test_monster_transition_is_silent():
    world, _, monster = _world(
        RunMode.MONSTER_TURN,
        HungerClock(HungerState.NORMAL, 10),
        HungerClock(HungerState.STARVING, 1),
    )
    run_hunger(world)
    assert world.get(monster, SufferDamage).amount == [1]
    assert world.log.entries == []


def test_other_modes_do_nothing():
    world, player, _ = _world(RunMode.AWAITING_INPUT, HungerClock(HungerState.HUNGRY, 1))
    run_hunger(world)
    assert world.get(player, HungerClock) == HungerClock(HungerState.HUNGRY, 1)
    assert world.log.entries == []