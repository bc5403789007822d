"""Component types that entities carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .map import Map, Point


@dataclass
class Position:
    x: int
    y: int


@dataclass
class Renderable:
    glyph: int
    fg: Any
    bg: Any
    render_order: int


@dataclass
class Player:
    pass


@dataclass
class Viewshed:
    visible_tiles: list[Point]
    range: int
    dirty: bool


@dataclass
class Monster:
    pass


@dataclass
class Name:
    name: str


@dataclass
class BlocksTile:
    pass


@dataclass
class CombatStats:
    max_hp: int
    hp: int
    defense: int
    power: int


@dataclass
class WantsToMelee:
    target: int


@dataclass
class SufferDamage:
    amount: list[int] = field(default_factory=list)


def new_damage(world: Any, victim: int, amount: int) -> None:
    """Queue ``amount`` damage on ``victim``, adding to any already pending."""
    suffering = world.get(victim, SufferDamage)
    if suffering is not None:
        suffering.amount.append(amount)
    else:
        world.add_component(victim, SufferDamage([amount]))


@dataclass
class Item:
    pass


@dataclass
class Consumable:
    pass


@dataclass
class InBackpack:
    owner: int


@dataclass
class WantsToPickupItem:
    collected_by: int
    item: int


@dataclass
class WantsToUseItem:
    item: int
    target: Point | None = None


@dataclass
class WantsToDropItem:
    item: int


@dataclass
class ProvidesHealing:
    heal_amount: int


@dataclass
class Ranged:
    range: int


@dataclass
class InflictsDamage:
    damage: int


@dataclass
class AreaOfEffect:
    radius: int


@dataclass
class Confusion:
    turns: int


@dataclass
class SerializationHelper:
    """Carries the map alongside entities when saving a game."""

    map: Map


class EquipmentSlot(Enum):
    MELEE = "melee"
    SHIELD = "shield"


@dataclass
class Equippable:
    slot: EquipmentSlot


@dataclass
class Equipped:
    owner: int
    slot: EquipmentSlot


@dataclass
class MeleePowerBonus:
    power: int


@dataclass
class DefenseBonus:
    defense: int


@dataclass
class WantsToRemoveItem:
    item: int


@dataclass
class ParticleLifetime:
    lifetime_ms: float


class HungerState(Enum):
    WELL_FED = "well_fed"
    NORMAL = "normal"
    HUNGRY = "hungry"
    STARVING = "starving"


@dataclass
class HungerClock:
    state: HungerState
    duration: int


@dataclass
class ProvidesFood:
    pass


@dataclass
class MagicMapper:
    pass


@dataclass
class Hidden:
    pass


@dataclass
class EntryTrigger:
    pass


@dataclass
class EntityMoved:
    pass


@dataclass
class SingleActivation:
    pass


@dataclass
class BlocksVisibility:
    pass


@dataclass
class Door:
    open: bool