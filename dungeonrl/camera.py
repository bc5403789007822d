"""Drawing the visible part of the map and its entities onto a console."""

from __future__ import annotations

from .components import Hidden, Position, Renderable
from .console import BLACK, GRAY, RGB, Console, to_cp437
from .map import Map, TileType
from .world import World

SHOW_BOUNDARIES = True

_WALL_MASK_GLYPHS = {
    0: 9,  # pillar: no neighbouring walls seen
    1: 186,
    2: 186,
    3: 186,
    4: 205,
    5: 188,
    6: 187,
    7: 185,
    8: 205,
    9: 200,
    10: 201,
    11: 204,
    12: 205,
    13: 202,
    14: 203,
    15: 206,
}
_FALLBACK_WALL_GLYPH = 35


def get_screen_bounds(world: World, console: Console) -> tuple[int, int, int, int]:
    """Map coordinates ``(min_x, max_x, min_y, max_y)`` shown, centred on the player."""
    player_pos = world.player_pos
    x_chars, y_chars = console.get_char_size()
    min_x = player_pos.x - x_chars // 2
    min_y = player_pos.y - y_chars // 2
    return min_x, min_x + x_chars, min_y, min_y + y_chars


def _draw_tiles(
    fov_map: Map, console: Console, min_x: int, max_x: int, min_y: int, max_y: int
) -> None:
    map_width = fov_map.width - 1
    map_height = fov_map.height - 1
    boundary_glyph = to_cp437("·")
    for y, ty in enumerate(range(min_y, max_y)):
        for x, tx in enumerate(range(min_x, max_x)):
            if 0 < tx < map_width and 0 < ty < map_height:
                idx = fov_map.xy_idx(tx, ty)
                if fov_map.revealed_tiles[idx]:
                    glyph, fg, bg = get_tile_glyph(idx, fov_map)
                    console.set(x, y, fg, bg, glyph)
            elif SHOW_BOUNDARIES:
                console.set(x, y, GRAY, BLACK, boundary_glyph)


def render_camera(world: World, console: Console) -> None:
    """Draw revealed tiles and visible, unhidden entities around the player."""
    fov_map = world.map
    min_x, max_x, min_y, max_y = get_screen_bounds(world, console)
    _draw_tiles(fov_map, console, min_x, max_x, min_y, max_y)

    map_width = fov_map.width - 1
    map_height = fov_map.height - 1
    drawables = sorted(
        ((pos, render) for _e, pos, render in world.query(Position, Renderable, exclude=(Hidden,))),
        key=lambda pair: pair[1].render_order,
        reverse=True,
    )
    for pos, render in drawables:
        if not fov_map.visible_tiles[fov_map.xy_idx(pos.x, pos.y)]:
            continue
        screen_x = pos.x - min_x
        screen_y = pos.y - min_y
        if 0 < screen_x < map_width and 0 < screen_y < map_height:
            console.set(screen_x, screen_y, render.fg, render.bg, render.glyph)


def render_debug_map(fov_map: Map, console: Console) -> None:
    """Draw a map's revealed tiles centred on the middle of the map."""
    x_chars, y_chars = console.get_char_size()
    min_x = fov_map.width // 2 - x_chars // 2
    min_y = fov_map.height // 2 - y_chars // 2
    _draw_tiles(fov_map, console, min_x, min_x + x_chars, min_y, min_y + y_chars)


def get_tile_glyph(idx: int, fov_map: Map) -> tuple[int, RGB, RGB]:
    """Glyph, foreground and background for the tile at ``idx``."""
    bg = RGB.from_f32(0.0, 0.0, 0.0)
    tile = fov_map.tiles[idx]
    if tile is TileType.FLOOR:
        glyph = to_cp437(".")
        fg = RGB.from_f32(0.0, 0.5, 0.5)
    elif tile is TileType.WALL:
        glyph = wall_glyph(fov_map, idx % fov_map.width, idx // fov_map.width)
        fg = RGB.from_f32(0.0, 1.0, 0.0)
    else:
        glyph = to_cp437(">")
        fg = RGB.from_f32(0.0, 1.0, 1.0)

    if idx in fov_map.bloodstains:
        bg = RGB.from_f32(0.75, 0.0, 0.0)
    if not fov_map.visible_tiles[idx]:
        fg = fg.to_greyscale()
        bg = RGB.from_f32(0.0, 0.0, 0.0)
    return glyph, fg, bg


def _is_revealed_and_wall(fov_map: Map, x: int, y: int) -> bool:
    idx = fov_map.xy_idx(x, y)
    return fov_map.tiles[idx] is TileType.WALL and fov_map.revealed_tiles[idx]


def wall_glyph(fov_map: Map, x: int, y: int) -> int:
    """Box-drawing glyph for a wall, chosen from its revealed wall neighbours."""
    if x < 1 or x > fov_map.width - 2 or y < 1 or y > fov_map.height - 2:
        return _FALLBACK_WALL_GLYPH
    mask = 0
    if _is_revealed_and_wall(fov_map, x, y - 1):
        mask += 1
    if _is_revealed_and_wall(fov_map, x, y + 1):
        mask += 2
    if _is_revealed_and_wall(fov_map, x - 1, y):
        mask += 4
    if _is_revealed_and_wall(fov_map, x + 1, y):
        mask += 8
    return _WALL_MASK_GLYPHS.get(mask, _FALLBACK_WALL_GLYPH)