"""Tile map, grid geometry and field-of-view calculation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

DIAGONAL_COST = 1.45
CARDINAL_COST = 1.0


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int
    y: int


class TileType(Enum):
    """The kinds of tile a map can hold."""

    WALL = "wall"
    FLOOR = "floor"
    DOWN_STAIRS = "down_stairs"


def distance_pythagoras(p1: Point, p2: Point) -> float:
    """Straight-line distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


@dataclass
class Map:
    """A rectangular level: tiles plus per-tile visibility and occupancy data."""

    tiles: list[TileType]
    width: int
    height: int
    revealed_tiles: list[bool]
    visible_tiles: list[bool]
    blocked: list[bool]
    depth: int
    bloodstains: set[int] = field(default_factory=set)
    view_blocked: set[int] = field(default_factory=set)
    tile_content: list[list[int]] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def new(cls, new_depth: int, width: int, height: int) -> "Map":
        """Create a map of the given size made entirely of walls."""
        count = width * height
        return cls(
            tiles=[TileType.WALL] * count,
            width=width,
            height=height,
            revealed_tiles=[False] * count,
            visible_tiles=[False] * count,
            blocked=[False] * count,
            depth=new_depth,
            tile_content=[[] for _ in range(count)],
        )

    def xy_idx(self, x: int, y: int) -> int:
        """Index of the tile at (x, y) in the flat tile lists."""
        return y * self.width + x

    def is_exit_valid(self, x: int, y: int) -> bool:
        """Whether an entity may step onto (x, y)."""
        if x < 1 or x > self.width - 1 or y < 1 or y > self.height - 1:
            return False
        return not self.blocked[self.xy_idx(x, y)]

    def populate_blocked(self) -> None:
        """Mark every wall tile as blocked and every other tile as open."""
        self.blocked = [tile is TileType.WALL for tile in self.tiles]

    def clear_content_index(self) -> None:
        """Forget which entities stand on which tile."""
        for content in self.tile_content:
            content.clear()

    def dimensions(self) -> Point:
        return Point(self.width, self.height)

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def is_opaque(self, idx: int) -> bool:
        """Whether the tile at ``idx`` blocks line of sight."""
        return self.tiles[idx] is TileType.WALL or idx in self.view_blocked

    def get_available_exits(self, idx: int) -> list[tuple[int, float]]:
        """Neighbouring tile indices that can be entered, with their step costs."""
        x, y = idx % self.width, idx // self.width
        w = self.width
        candidates = (
            (-1, 0, idx - 1, CARDINAL_COST),
            (1, 0, idx + 1, CARDINAL_COST),
            (0, -1, idx - w, CARDINAL_COST),
            (0, 1, idx + w, CARDINAL_COST),
            (-1, -1, idx - w - 1, DIAGONAL_COST),
            (1, -1, idx - w + 1, DIAGONAL_COST),
            (-1, 1, idx + w - 1, DIAGONAL_COST),
            (1, 1, idx + w + 1, DIAGONAL_COST),
        )
        return [
            (target, cost)
            for dx, dy, target, cost in candidates
            if self.is_exit_valid(x + dx, y + dy)
        ]

    def get_pathing_distance(self, idx1: int, idx2: int) -> float:
        w = self.width
        return distance_pythagoras(Point(idx1 % w, idx1 // w), Point(idx2 % w, idx2 // w))


def _line(start: Point, end: Point) -> Iterator[Point]:
    """Bresenham line from ``start`` to ``end``, both included."""
    x, y = start.x, start.y
    dx = abs(end.x - x)
    dy = -abs(end.y - y)
    sx = 1 if x < end.x else -1
    sy = 1 if y < end.y else -1
    err = dx + dy
    while True:
        yield Point(x, y)
        if x == end.x and y == end.y:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def _perimeter(origin: Point, radius: int) -> Iterator[Point]:
    left, right = origin.x - radius, origin.x + radius
    top, bottom = origin.y - radius, origin.y + radius
    for x in range(left, right + 1):
        yield Point(x, top)
        yield Point(x, bottom)
    for y in range(top + 1, bottom):
        yield Point(left, y)
        yield Point(right, y)


def field_of_view(origin: Point, radius: int, fov_map: Map) -> list[Point]:
    """Tiles visible from ``origin`` within ``radius``; opaque tiles are seen but stop sight."""
    seen: dict[Point, None] = {}
    for target in _perimeter(origin, radius):
        for point in _line(origin, target):
            if not fov_map.in_bounds(point):
                break
            if distance_pythagoras(origin, point) > radius:
                break
            seen.setdefault(point, None)
            if fov_map.is_opaque(fov_map.xy_idx(point.x, point.y)):
                break
    return list(seen)