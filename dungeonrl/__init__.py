"""Core of a turn-based dungeon crawler: map, components, turn systems and console rendering."""

__version__ = "0.1.0"
__all__ = [
    "camera",
    "components",
    "console",
    "damage_system",
    "game",
    "gui",
    "hunger_system",
    "inventory_system",
    "map",
    "world",
]