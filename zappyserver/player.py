"""Players: position, orientation, inventory and what they see."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from termcolor import colored

from . import world
from .inventory import Inventory
from .objects import Resource


class Direction(Enum):
    """Where a player is facing."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


_RIGHT_OF = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}
_LEFT_OF = {after: before for before, after in _RIGHT_OF.items()}


def _starting_inventory() -> Inventory:
    inventory = Inventory()
    inventory.add(Resource.FOOD, 10)
    return inventory


def _debug(message: str) -> None:
    print(colored(message, "cyan"))


@dataclass
class Player:
    """A player of a team; ``id`` is ``<team id>_<player number>``."""

    id: str
    pos_x: int = 1
    pos_y: int = 1
    inventory: Inventory = field(default_factory=_starting_inventory)
    life_unit: int = 10
    level: int = 1
    direction: Direction = Direction.NORTH
    health_points: int = 100
    client_id: int | None = None

    @property
    def position(self) -> tuple[int, int]:
        """The player's (x, y) coordinates."""
        return (self.pos_x, self.pos_y)

    @property
    def vision_range(self) -> int:
        """How many rows ahead the player sees."""
        return self.level

    def take_object(self, world_map: world.WorldMap, obj: Resource) -> bool:
        """Pick ``obj`` up from the player's cell."""
        if world.take_object(world_map, self.pos_x, self.pos_y, obj):
            _debug(f"[DEBUG] Client #{self.id} a récupéré: {obj.label()}")
            self.inventory.add(obj, 1)
            return True
        return False

    def drop_object(self, world_map: world.WorldMap, obj: Resource) -> bool:
        """Put ``obj`` down on the player's cell."""
        if world.drop_object(world_map, self.pos_x, self.pos_y, obj):
            _debug(f"[DEBUG] Client #{self.id} a laché: {obj.label()}")
            return self.inventory.remove(obj, 1)
        return False

    def eat(self) -> bool:
        """Consume one unit of food if the player has any."""
        if self.inventory.get(Resource.FOOD) > 0:
            _debug(f"[DEBUG] Joueur: {self.id} vient de manger !")
            return self.inventory.remove(Resource.FOOD, 1)
        _debug(f"[DEBUG] Joueur: {self.id} n'a pas de nourriture dans son inventaire !")
        return False

    def move_forward(self, world_map: world.WorldMap) -> None:
        """Step one cell ahead, wrapping around the map edges."""
        height = len(world_map)
        width = len(world_map[0])
        if self.direction is Direction.NORTH:
            self.pos_y = (self.pos_y - 1) % height
        elif self.direction is Direction.SOUTH:
            self.pos_y = (self.pos_y + 1) % height
        elif self.direction is Direction.EAST:
            self.pos_x = (self.pos_x + 1) % width
        else:
            self.pos_x = (self.pos_x - 1) % width

    def turn_right(self) -> None:
        """Rotate a quarter turn clockwise."""
        self.direction = _RIGHT_OF[self.direction]

    def turn_left(self) -> None:
        """Rotate a quarter turn counter-clockwise."""
        self.direction = _LEFT_OF[self.direction]

    def _view_coords(self, dist: int, offset: int, width: int, height: int) -> tuple[int, int]:
        x, y = self.position
        if self.direction is Direction.NORTH:
            return (x + offset) % width, (y - dist) % height
        if self.direction is Direction.SOUTH:
            return (x - offset) % width, (y + dist) % height
        if self.direction is Direction.EAST:
            return (x + dist) % width, (y + offset) % height
        return (x - dist) % width, (y - offset) % height

    def _cell_items(self, game_state: Any, x: int, y: int) -> list[str]:
        cell = game_state.world_map[y][x]
        items = [
            resource.label().lower()
            for resource in Resource
            for _ in range(cell.content.get(resource, 0))
        ]
        items.extend(
            "player"
            for team in game_state.teams
            for other in team.players
            if other.position == (x, y) and other.id != self.id
        )
        return items

    def vision(self, game_state: Any) -> str:
        """Describe the cone of cells in front of the player, nearest first."""
        height = len(game_state.world_map)
        width = len(game_state.world_map[0])
        cells: list[str] = []
        for dist in range(self.vision_range + 1):
            for offset in range(-dist, dist + 1):
                x, y = self._view_coords(dist, offset, width, height)
                items = self._cell_items(game_state, x, y)
                if items:
                    cells.append(" ".join(items))
                else:
                    cells.append("" if cells else " ")
        return "{" + ", ".join(cells) + "}\n"

    def inventory_report(self) -> str:
        """Describe every resource the player holds, in canonical order."""
        parts = (f"{obj.label().lower()} {count}" for obj, count in self.inventory.all_objects())
        return "{" + ", ".join(parts) + "}\n"


def find_player_by_client_id(game_state: Any, client_id: int) -> Player | None:
    """Return the player controlled by ``client_id``, if any."""
    return next(
        (
            player
            for team in game_state.teams
            for player in team.players
            if player.client_id == client_id
        ),
        None,
    )