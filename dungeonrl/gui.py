"""Status panel, tooltips, item menus, targeting and the game-over screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from . import camera
from .components import (
    CombatStats,
    Equipped,
    Hidden,
    HungerClock,
    HungerState,
    InBackpack,
    Name,
    Player,
    Position,
    Viewshed,
)
from .console import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    GREY,
    KEY_ESCAPE,
    MAGENTA,
    ORANGE,
    RED,
    WHITE,
    YELLOW,
    Console,
    letter_to_option,
    to_cp437,
)
from .map import Point, distance_pythagoras
from .world import MainMenuSelection, World


@dataclass(frozen=True)
class MainMenuResult:
    """The highlighted main-menu entry, and whether it was confirmed."""

    selected: MainMenuSelection
    confirmed: bool = False


class ItemMenuResult(Enum):
    CANCEL = auto()
    NO_RESPONSE = auto()
    SELECTED = auto()


class GameOverResult(Enum):
    NO_SELECTION = auto()
    QUIT_TO_MENU = auto()


_HUNGER_LABELS = {
    HungerState.WELL_FED: ("Well Fed", GREEN),
    HungerState.HUNGRY: ("Hungry", ORANGE),
    HungerState.STARVING: ("Starving", RED),
}


def draw_ui(world: World, console: Console) -> None:
    """Draw the bottom panel: health, hunger, log, depth, cursor and tooltips."""
    console.draw_box(0, 43, 79, 6, WHITE, BLACK)

    for _player, stats, clock in world.query(Player, CombatStats, HungerClock):
        health = f" HP: {stats.hp} / {stats.max_hp} "
        console.print_color(12, 43, YELLOW, BLACK, health)
        console.draw_bar_horizontal(28, 43, 48, stats.hp, stats.max_hp, RED, BLACK)
        label = _HUNGER_LABELS.get(clock.state)
        if label is not None:
            text, colour = label
            console.print_color(71, 42, colour, BLACK, text)

    for y, entry in enumerate(reversed(world.log.entries), start=44):
        if y >= 49:
            break
        console.print(2, y, entry)

    mouse_x, mouse_y = console.mouse_pos()
    console.set_bg(mouse_x, mouse_y, MAGENTA)
    draw_tooltips(world, console)

    console.print_color(2, 43, YELLOW, BLACK, f"Depth: {world.map.depth}")


def draw_tooltips(world: World, console: Console) -> None:
    """Show the names of unhidden entities under a visible mouse tile."""
    min_x, _max_x, min_y, _max_y = camera.get_screen_bounds(world, console)
    fov_map = world.map
    mouse_x, mouse_y = console.mouse_pos()
    map_x, map_y = mouse_x + min_x, mouse_y + min_y
    if map_x >= fov_map.width - 1 or map_y >= fov_map.height - 1 or map_x < 1 or map_y < 1:
        return
    if not fov_map.visible_tiles[fov_map.xy_idx(map_x, map_y)]:
        return

    tooltip = [
        name.name
        for _e, name, pos in world.query(Name, Position, exclude=(Hidden,))
        if pos.x == map_x and pos.y == map_y
    ]
    if not tooltip:
        return

    width = max(len(s) for s in tooltip) + 3
    space = " "
    if mouse_x > 40:
        arrow = Point(mouse_x - 2, mouse_y)
        left_x = mouse_x - width
        for y, text in enumerate(tooltip, start=mouse_y):
            console.print_color(left_x, y, WHITE, GREY, text)
            for i in range(width - len(text) - 1):
                console.print_color(arrow.x - i, y, WHITE, GREY, space)
        console.print_color(arrow.x, arrow.y, WHITE, GREY, "->")
    else:
        arrow = Point(mouse_x + 1, mouse_y)
        left_x = mouse_x + 3
        for y, text in enumerate(tooltip, start=mouse_y):
            console.print_color(left_x + 1, y, WHITE, GREY, text)
            for i in range(width - len(text) - 1):
                console.print_color(arrow.x + 1 + i, y, WHITE, GREY, space)
        console.print_color(arrow.x, arrow.y, WHITE, GREY, "<-")


def _item_menu(
    world: World, console: Console, holder_type: type, title: str
) -> tuple[ItemMenuResult, int | None]:
    player = world.player_entity
    items = [
        (entity, name)
        for entity, holder, name in world.query(holder_type, Name)
        if holder.owner == player
    ]
    count = len(items)

    top = 25 - count // 2
    console.draw_box(15, top - 2, 31, count + 3, WHITE, BLACK)
    console.print_color(18, top - 2, YELLOW, BLACK, title)
    console.print_color(18, top + count + 1, YELLOW, BLACK, "ESCAPE to cancel")

    for j, (_entity, name) in enumerate(items):
        y = top + j
        console.set(17, y, WHITE, BLACK, to_cp437("("))
        console.set(18, y, YELLOW, BLACK, 97 + j)
        console.set(19, y, WHITE, BLACK, to_cp437(")"))
        console.print(21, y, name.name)

    if console.key is None:
        return ItemMenuResult.NO_RESPONSE, None
    if console.key == KEY_ESCAPE:
        return ItemMenuResult.CANCEL, None
    selection = letter_to_option(console.key)
    if 0 <= selection < count:
        return ItemMenuResult.SELECTED, items[selection][0]
    return ItemMenuResult.NO_RESPONSE, None


def show_inventory(world: World, console: Console) -> tuple[ItemMenuResult, int | None]:
    """Menu of the player's backpack; returns the chosen item, if any."""
    return _item_menu(world, console, InBackpack, "Inventory")


def drop_item_menu(world: World, console: Console) -> tuple[ItemMenuResult, int | None]:
    """Menu for choosing a backpack item to drop."""
    return _item_menu(world, console, InBackpack, "Drop Which Item?")


def remove_item_menu(world: World, console: Console) -> tuple[ItemMenuResult, int | None]:
    """Menu for choosing an equipped item to take off."""
    return _item_menu(world, console, Equipped, "Remove Which Item?")


def ranged_target(
    world: World, console: Console, range: int
) -> tuple[ItemMenuResult, Point | None]:
    """Highlight tiles in range and let the player click one as a target."""
    min_x, max_x, min_y, max_y = camera.get_screen_bounds(world, console)
    player_pos = world.player_pos

    console.print_color(5, 0, YELLOW, BLACK, "Select Target:")

    viewshed = world.get(world.player_entity, Viewshed) if world.player_entity is not None else None
    if viewshed is None:
        return ItemMenuResult.CANCEL, None

    available: set[Point] = set()
    for tile in viewshed.visible_tiles:
        if distance_pythagoras(player_pos, tile) > range:
            continue
        screen_x = tile.x - min_x
        screen_y = tile.y - min_y
        if 1 < screen_x < (max_x - min_x) - 1 and 1 < screen_y < (max_y - min_y) - 1:
            console.set_bg(screen_x, screen_y, BLUE)
            available.add(Point(tile.x, tile.y))

    mouse_x, mouse_y = console.mouse_pos()
    target = Point(mouse_x + min_x, mouse_y + min_y)
    if target in available:
        console.set_bg(mouse_x, mouse_y, CYAN)
        if console.left_click:
            return ItemMenuResult.SELECTED, target
    else:
        console.set_bg(mouse_x, mouse_y, RED)
        if console.left_click:
            return ItemMenuResult.CANCEL, None
    return ItemMenuResult.NO_RESPONSE, None


def game_over(console: Console) -> GameOverResult:
    """Draw the game-over screen; any key returns to the menu."""
    console.print_color_centered(15, YELLOW, BLACK, "Your journey has ended!")
    console.print_color_centered(
        17, WHITE, BLACK, "One day, we'll tell you all about how you did."
    )
    console.print_color_centered(
        18, WHITE, BLACK, "That day, sadly, is not in this chapter.."
    )
    console.print_color_centered(
        20, MAGENTA, BLACK, "Press any key to return to the menu."
    )
    if console.key is None:
        return GameOverResult.NO_SELECTION
    return GameOverResult.QUIT_TO_MENU