"""Listening socket, client connections and command dispatch."""

from __future__ import annotations

import socket
from dataclasses import dataclass, field

from termcolor import colored

from .client import Client
from .game import GameState
from .player import find_player_by_client_id
from .settings import ServerSettings
from .team import add_client_team

HOST = "127.0.0.1"


@dataclass
class ServerState:
    """The listening socket and every connected client by id."""

    listener: socket.socket
    connexion_max: int
    clients: dict[int, Client] = field(default_factory=dict)
    next_id: int = 0


def accept_new_client(server: ServerState) -> None:
    """Accept one waiting connection, greet it and register it."""
    try:
        stream, addr = server.listener.accept()
    except OSError:
        return
    stream.setblocking(False)
    client = Client(stream, addr, server.next_id)
    client.send_message("BIENVENUE\n")
    server.clients[server.next_id] = client
    server.next_id += 1


def disconnect_client(clients: dict[int, Client], game_state: GameState, client_id: int) -> None:
    """Remove a client and the player it controlled."""
    client = clients.get(client_id)
    if client is not None and client.team_id != 0:
        team = next((t for t in game_state.teams if t.id == client.team_id), None)
        if team is not None:
            player = next((p for p in team.players if p.client_id == client_id), None)
            if player is not None:
                print(f"{colored('[DEATH]', 'red', attrs=['bold'])} Joueur {player.id} est mort")
                team.players.remove(player)
    removed = clients.pop(client_id, None)
    if removed is not None:
        removed.disconnect()


def _refuse(client: Client, message: str) -> bool:
    print(f"{colored('[ERROR]', 'red', attrs=['bold'])} {message}")
    client.send_message("ko\n")
    client.remove_command()
    return False


def handle_first_command(client: Client, game_state: GameState) -> bool:
    """Treat the client's first due command as a team name and try to join it."""
    command = client.update_commands()
    if command is None:
        return False
    team_name = command.strip()
    if not any(team.name == team_name for team in game_state.teams):
        return _refuse(client, f"Équipe {team_name} n'existe pas")
    player_id = add_client_team(team_name, game_state.teams, client.id)
    if player_id is None:
        return _refuse(client, f"Impossible de rejoindre l'équipe {team_name}")
    client.player_id = player_id
    client.team_id = next((t.id for t in game_state.teams if t.name == team_name), 0)
    client.send_message("ok\n")
    client.remove_command()
    print(f"{colored('[SUCCESS]', 'green', attrs=['bold'])} "
          f"Client #{client.id} a rejoint l'équipe {team_name}")
    return True


def handle_client(client: Client, game_state: GameState) -> None:
    """Run the client's next due command, joining a team first if needed."""
    if client.team_id == 0 and not handle_first_command(client, game_state):
        return
    command = client.update_commands()
    if command is None:
        return
    parts = command.strip().split(" ", 1)
    action = parts[0]
    args = parts[1] if len(parts) > 1 else None

    player = find_player_by_client_id(game_state, client.id)
    if player is None:
        client.send_message("Vous n'avez pas de joueur associé !\n")
        return

    match action:
        case "avance":
            player.move_forward(game_state.world_map)
            client.send_message("ok\n")
        case "droite":
            player.turn_right()
            client.send_message("ok\n")
        case "gauche":
            player.turn_left()
            client.send_message("ok\n")
        case "voir":
            client.send_message(player.vision(game_state))
        case "inventaire":
            client.send_message(player.inventory_report())
        case "prend" | "pose" | "broadcast":
            client.send_message("ok\n" if args is not None else "ko\n")
        case "expulse" | "fork":
            client.send_message("ok\n")
        case "incantation":
            client.send_message("elevation en cours\nniveau actuel: K\n")
        case "connect_nbr":
            client.send_message("0\n")
        case _:
            client.send_message("Commande Inconnue\n")


def server_loop(server: ServerState, game_state: GameState) -> None:
    """Accept a connection if there is room, read from every client, drop closed ones."""
    if len(server.clients) < server.connexion_max:
        accept_new_client(server)
    closed = [cid for cid, client in server.clients.items() if not client.read_from_stream()]
    for client_id in closed:
        disconnect_client(server.clients, game_state, client_id)


def init_server(settings: ServerSettings) -> socket.socket:
    """Open the non-blocking listening socket on the configured port."""
    address = f"{HOST}:{settings.port}"
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((HOST, settings.port))
        listener.listen()
        listener.setblocking(False)
    except (OSError, OverflowError) as exc:
        listener.close()
        print(f"❌ Erreur lors de l'écoute sur {address}: {exc}")
        raise OSError(f"cannot listen on {address}: {exc}") from exc
    print(f"🌍 Serveur ouvert sur: {address}\n")
    return listener