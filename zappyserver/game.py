"""The game world: map and teams."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .settings import ServerSettings
from .team import Team, create_teams
from .world import WorldMap, create_map


@dataclass
class GameState:
    """The map together with every team playing on it."""

    world_map: WorldMap = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)


def game_init(settings: ServerSettings, rng: random.Random | None = None) -> GameState:
    """Build the world and teams described by ``settings``."""
    if rng is None:
        rng = random.Random()
    return GameState(
        world_map=create_map(settings.width, settings.height, rng),
        teams=create_teams(settings.teams_name, rng),
    )