"""Entity store, game-wide resources and run states."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterable, Iterator

from .map import Map, Point


@dataclass
class GameLog:
    """Messages shown to the player, oldest first."""

    entries: list[str] = field(default_factory=list)


class MainMenuSelection(Enum):
    NEW_GAME = auto()
    LOAD_GAME = auto()
    QUIT = auto()


class RunMode(Enum):
    AWAITING_INPUT = auto()
    PRE_RUN = auto()
    PLAYER_TURN = auto()
    MONSTER_TURN = auto()
    SHOW_INVENTORY = auto()
    SHOW_DROP_ITEM = auto()
    SHOW_TARGETING = auto()
    MAIN_MENU = auto()
    SAVE_GAME = auto()
    NEXT_LEVEL = auto()
    SHOW_REMOVE_ITEM = auto()
    GAME_OVER = auto()
    MAGIC_MAP_REVEAL = auto()
    MAP_GENERATION = auto()


@dataclass(frozen=True)
class RunState:
    """The game's current mode plus the data some modes carry.

    ``range`` and ``item`` belong to SHOW_TARGETING, ``menu_selection`` to
    MAIN_MENU and ``row`` to MAGIC_MAP_REVEAL.
    """

    mode: RunMode
    range: int = 0
    item: int | None = None
    menu_selection: MainMenuSelection | None = None
    row: int = 0


class World:
    """Entities with typed components, plus the shared game resources."""

    def __init__(self, fov_map: Map | None = None) -> None:
        self.map: Map = fov_map if fov_map is not None else Map.new(1, 80, 50)
        self.player_pos = Point(0, 0)
        self.player_entity: int | None = None
        self.run_state = RunState(RunMode.PRE_RUN)
        self.log = GameLog()
        self.particles: list[Any] = []
        self.rng = random.Random()
        self._next_id = 0
        self._alive: set[int] = set()
        self._storages: dict[type, dict[int, Any]] = {}

    def create_entity(self, *args: Any) -> int:
        """Create an entity carrying the given components and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._alive.add(entity)
        for component in args:
            self.add_component(entity, component)
        return entity

    def delete_entity(self, entity: int) -> None:
        """Remove an entity and all of its components."""
        if entity not in self._alive:
            raise KeyError(f"entity {entity} is not alive")
        self._alive.discard(entity)
        for store in self._storages.values():
            store.pop(entity, None)

    def is_alive(self, entity: int) -> bool:
        return entity in self._alive

    def entities(self) -> list[int]:
        """Live entities in creation order."""
        return sorted(self._alive)

    def add_component(self, entity: int, component: Any) -> None:
        """Attach ``component`` to ``entity``, replacing one of the same type."""
        if entity not in self._alive:
            raise KeyError(f"entity {entity} is not alive")
        self._storages.setdefault(type(component), {})[entity] = component

    def remove_component(self, entity: int, component_type: type) -> Any | None:
        """Detach and return the component of the given type, if any."""
        return self._storages.get(component_type, {}).pop(entity, None)

    def get(self, entity: int, component_type: type) -> Any | None:
        return self._storages.get(component_type, {}).get(entity)

    def has(self, entity: int, component_type: type) -> bool:
        return entity in self._storages.get(component_type, {})

    def storage(self, component_type: type) -> dict[int, Any]:
        """The live mapping of entity to component for one component type."""
        return self._storages.setdefault(component_type, {})

    def clear_components(self, component_type: type) -> None:
        """Remove every component of the given type."""
        self.storage(component_type).clear()

    def query(self, *args: type, exclude: Iterable[type] = ()) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities holding every type in
        ``args`` and none in ``exclude``, in creation order."""
        stores = [self.storage(t) for t in args]
        excluded = [self.storage(t) for t in exclude]
        candidates = min(stores, key=len).keys() if stores else self._alive
        for entity in sorted(candidates):
            if all(entity in store for store in stores) and not any(
                entity in store for store in excluded
            ):
                yield (entity, *(store[entity] for store in stores))