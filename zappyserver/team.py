"""Teams and the players that belong to them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from termcolor import colored

from .colors import random_color
from .player import Player


@dataclass
class Team:
    """A team with its players and the number of free connection slots."""

    id: int
    name: str
    level: int = 1
    next_player_id: int = 1
    connect_nbr: int = 1
    players: list[Player] = field(default_factory=list)

    def _next_player_name(self) -> str:
        name = f"{self.id}_{self.next_player_id}"
        self.next_player_id += 1
        return name

    def add_player(self) -> None:
        """Add a new player with no client attached."""
        self.players.append(Player(self._next_player_name()))

    def remove_player(self, player: Player) -> None:
        """Remove the first player equal to ``player``, if present."""
        if player in self.players:
            self.players.remove(player)

    def add_level(self) -> None:
        self.level += 1

    def add_connect_nbr(self) -> None:
        self.connect_nbr += 1

    def assign_player(self, client_id: int) -> str | None:
        """Attach ``client_id`` to the first free player and return its id."""
        for player in self.players:
            if player.client_id is None:
                self.connect_nbr += 1
                player.client_id = client_id
                print(
                    f"{colored('[TEAM]', 'magenta', attrs=['bold'])} "
                    f"Client #{client_id} a rejoint: {self.name}({self.id})"
                )
                return player.id
        return None

    def unassign_player(self, client_id: int) -> None:
        """Detach ``client_id`` from every player it controls."""
        for player in self.players:
            if player.client_id == client_id:
                print(
                    f"{colored('[TEAM]', 'red', attrs=['bold'])} "
                    f"Client #{client_id} a quitté: {self.name}({self.id})"
                )
                self.connect_nbr -= 1
                player.client_id = None


def add_client_team(name: str, teams: list[Team], client_id: int) -> str | None:
    """Create a player for ``client_id`` in the team called ``name``.

    Returns the new player's id, or None if the team is unknown or full.
    """
    team = next((t for t in teams if t.name == name), None)
    if team is None or team.connect_nbr <= 0:
        return None
    player_id = team._next_player_name()
    team.players.append(Player(player_id, client_id=client_id))
    team.connect_nbr -= 1
    print(
        f"{colored('[BIRTH]', 'green', attrs=['bold'])} "
        f"Nouveau joueur {player_id} a rejoint l'équipe {name}"
    )
    return player_id


def remove_client_team(team_id: int, teams: list[Team], client_id: int) -> None:
    """Detach ``client_id`` from the team with ``team_id``."""
    for team in teams:
        if team.id == team_id:
            team.unassign_player(client_id)


def create_teams(names: list[str], rng: random.Random | None = None) -> list[Team]:
    """Create one team per name, numbered from 1."""
    print(colored("[INFO] Création des équipes...", "green", attrs=["bold"]))
    teams = []
    for team_id, name in enumerate(names, start=1):
        teams.append(Team(team_id, name))
        print(
            f"{colored('[Team]', 'magenta', attrs=['bold'])} "
            f"#{team_id}: {colored(name, random_color(rng), attrs=['bold'])}"
        )
    print(colored("[INFO] Les équipes ont été créées !\n", "green", attrs=["bold"]))
    return teams