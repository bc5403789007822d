# dungeonrl

The core of a turn-based dungeon crawler. It is plain Python and has no
third-party dependencies.

## What is in it

- `dungeonrl.map` has `Point`, `TileType` and `Map`. `Map.new(depth, width, height)`
  creates a map filled with walls. Around that sit `xy_idx`,
  `populate_blocked`, `clear_content_index`, `is_opaque`,
  `get_available_exits`, which gives neighbours with cost 1.0 for
  cardinal steps and 1.45 for diagonal ones, and `get_pathing_distance`.
  The module also has `distance_pythagoras` and `field_of_view(origin,
  radius, map)`.
- `dungeonrl.components` holds the dataclass components: `Position`,
  `Renderable`, `CombatStats`, `Name`, `InBackpack`, `Equippable`,
  `Equipped`, `HungerClock`, `ProvidesHealing`, `InflictsDamage`,
  `AreaOfEffect`, `Confusion` and the rest. It also has
  `new_damage(world, victim, amount)`, which queues damage on an entity.
- `dungeonrl.world` has the entity store `World`: `create_entity`,
  `delete_entity`, `add_component`, `remove_component`, `get`, `has`,
  `storage`, `clear_components` and `query(*types, exclude=...)`. The world
  also carries the shared resources: `map`, `player_pos`, `player_entity`,
  `run_state`, `log` (a `GameLog`), `particles` and `rng`. The module
  defines `RunMode`, `RunState` and `MainMenuSelection` as well.
- `dungeonrl.console` is an in-memory console of `Cell`s coloured with
  `RGB`. It has `set`, `set_bg`, `print`, `print_color`,
  `print_color_centered`, `draw_box` and `draw_bar_horizontal`, and you read
  cells back with `cell(x, y)`. Input for a frame is held in `key`, `mouse`
  and `left_click`. Letter keys are one-character strings and Escape is
  `"escape"`. Helpers: `to_cp437`, `letter_to_option`.
- `dungeonrl.damage_system` has `apply_damage` and `delete_the_dead`. A
  player with no hit points switches the run state to `GAME_OVER`.
- `dungeonrl.hunger_system` has `run_hunger`.
- `dungeonrl.inventory_system` has `collect_items`, `use_items`,
  `drop_items` and `remove_items`. Item effects push `ParticleRequest`s
  onto `world.particles`.
- `dungeonrl.camera` has `get_screen_bounds`, `render_camera`,
  `render_debug_map`, `get_tile_glyph` and `wall_glyph`.
- `dungeonrl.gui` has `draw_ui` and `draw_tooltips`, plus the item menus
  `show_inventory`, `drop_item_menu` and `remove_item_menu`. It also has
  `ranged_target` and `game_over`, along with `ItemMenuResult`,
  `GameOverResult` and `MainMenuResult`.
- `dungeonrl.game` has `create_world`, and `run_systems`, which runs the
  turn's systems in a fixed order. It also has
  `entities_to_remove_on_level_change` and `reveal_map_row`. The
  `handle_*_selection` functions turn a menu choice into the next `RunState`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from dungeonrl.components import (
    CombatStats, Consumable, InBackpack, Item, Name, Player, Position, ProvidesHealing,
)
from dungeonrl.game import handle_inventory_selection, run_systems
from dungeonrl.map import Map
from dungeonrl.world import World

world = World(Map.new(1, 20, 10))
player = world.create_entity(Player(), Name("Player"), Position(5, 5),
                             CombatStats(max_hp=30, hp=10, defense=2, power=5))
world.player_entity = player
potion = world.create_entity(Item(), Consumable(), Name("Health Potion"),
                             ProvidesHealing(8), InBackpack(player))

world.run_state = handle_inventory_selection(world, potion)  # PLAYER_TURN
run_systems(world)

print(world.get(player, CombatStats).hp)   # 18
print(world.log.entries[-1])               # You use the Health Potion, healing 8 hp.
print(world.is_alive(potion))              # False
```

Renderers draw into a `Console`:

```python
from dungeonrl.camera import render_camera
from dungeonrl.console import Console
from dungeonrl.gui import draw_ui

console = Console()
render_camera(world, console)
draw_ui(world, console)
print(console.cell(2, 43).glyph)  # first character of "Depth: 1"
```

## What it does not do

This package is the engine state and logic only. It has no window, terminal
front end or main loop: something else has to show a `Console` and fill in
its `key`, `mouse` and `left_click`. It does not generate levels. A new
`Map` is solid wall until you carve tiles into it, and nothing here places
monsters or items. Several parts are also left out: player movement input,
monster AI, visibility updates for `Viewshed`s, melee combat, traps and
triggers, and turning `world.particles` into on-screen effects. There is no
main menu screen and no saving or loading of games.