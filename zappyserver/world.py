"""The toroidal world map and the resources lying on it."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from termcolor import colored

from .objects import Resource

RESOURCE_CHANCE = 0.30


@dataclass
class Cell:
    """One square of the map with the resources lying on it."""

    content: dict[Resource, int] = field(default_factory=dict)


WorldMap = list[list[Cell]]


def _random_cell(rng: random.Random) -> Cell:
    cell = Cell()
    if rng.random() < RESOURCE_CHANCE:
        cell.content[rng.choice(list(Resource))] = 1
    return cell


def create_map(width: int, height: int, rng: random.Random | None = None) -> WorldMap:
    """Build a ``height`` x ``width`` map; each cell may hold one random resource."""
    if rng is None:
        rng = random.Random()
    print(colored("[INFO] Création du monde...", "green", attrs=["bold"]))
    world_map = [[_random_cell(rng) for _ in range(width)] for _ in range(height)]
    print(colored("[INFO] Monde généré !\n", "green", attrs=["bold"]))
    return world_map


def get_cell(world_map: WorldMap, x: int, y: int) -> Cell | None:
    """Return the cell at column ``x`` and row ``y``, or None when outside the map."""
    if x < 0 or y < 0 or y >= len(world_map) or x >= len(world_map[y]):
        return None
    return world_map[y][x]


def drop_object(world_map: WorldMap, x: int, y: int, obj: Resource) -> bool:
    """Put one unit of ``obj`` on a cell; return False when outside the map."""
    cell = get_cell(world_map, x, y)
    if cell is None:
        return False
    cell.content[obj] = cell.content.get(obj, 0) + 1
    return True


def take_object(world_map: WorldMap, x: int, y: int, obj: Resource) -> bool:
    """Take one unit of ``obj`` from a cell; return False if there is none."""
    cell = get_cell(world_map, x, y)
    if cell is None:
        return False
    count = cell.content.get(obj, 0)
    if count <= 0:
        return False
    if count == 1:
        del cell.content[obj]
    else:
        cell.content[obj] = count - 1
    return True