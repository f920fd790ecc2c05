# zappyserver

A server for the Zappy game. It holds a toroidal world sprinkled with
resources, groups players into teams, and runs on a fixed tick. Each client
connects over TCP, names a team, and then sends commands that run after a
delay counted in ticks.

## Installing

```
pip install .
```

## Running the server

```
zappyserver -p 4242 -x 10 -y 10 -c 6 -t 100 -n red blue
```

| Flag | Meaning |
|------|---------|
| `-p <port>` | port to listen on, always bound to `127.0.0.1` |
| `-x <n>` | number of map rows (the height) |
| `-y <n>` | number of map columns (the width) |
| `-c <n>` | maximum number of clients connected at once |
| `-t <t>` | time unit: ticks per second; it must be greater than zero |
| `-n <team> [team ...]` | team names, read up to the next argument that starts with `-` |

Every flag is required. If a flag is missing or its value is invalid, the
server prints an error and exits with status 255. It also exits with 255 if
it cannot listen on the port. Ctrl-C stops it with status 0.

At startup the server prints a summary of its settings. It then builds the
map. Each cell has a 30% chance of holding one unit of a random resource.
Teams are numbered from 1 in the order they were given.

## Protocol

When a client connects, the server sends `BIENVENUE`. The server reads at
most 512 bytes at a time, trims the whitespace and treats the result as one
command. A client can have at most ten commands waiting. Any command that
arrives while ten are waiting is dropped. Each command waits its cost in
ticks before it runs, and only the first waiting command counts down.

The first command is taken as a team name. If the team exists and has a
free slot, the server answers `ok` and creates a player for the client.
Otherwise it answers `ko`. Each team starts with one slot, so it accepts one
player. A new player starts at (1, 1), faces north, is at level 1 and holds
10 food.

| Command | Ticks | Reply |
|---------|-------|-------|
| `avance` | 7 | moves one cell forward, wrapping at the edges; `ok` |
| `droite`, `gauche` | 7 | turns right or left; `ok` |
| `voir` | 7 | `{cell, cell, ...}`: the cone in front of the player, one more row than its level |
| `inventaire` | 1 | `{nourriture 10, linemate 0, deraumere 0, sibur 0, mendiane 0, phiras 0, thystame 0}` |
| `prend <obj>`, `pose <obj>` | 7 | `ok` with an argument, `ko` without |
| `broadcast <text>` | 7 | `ok` with an argument, `ko` without |
| `expulse` | 7 | `ok` |
| `incantation` | 300 | `elevation en cours` / `niveau actuel: K` |
| `fork` | 42 | `ok` |
| `connect_nbr` | 0 | `0` |

Any other command gets the reply `Commande Inconnue`. When a client
disconnects, its player is removed from the team.

## What the server does not do

This server covers the basic game loop only:

- `prend` and `pose` do not move any resources. `broadcast` does not reach
  other players.
- `expulse`, `fork` and `incantation` only send their replies.
  `connect_nbr` always answers `0`.
- Players do not consume food over time, do not die of hunger and never
  level up. The server never checks for a winner.
- There is no AI client and no graphical client.

## Using it as a library

The game model works without the network:

```python
import random

from zappyserver.settings import parse_settings, format_banner
from zappyserver.game import game_init
from zappyserver.team import add_client_team
from zappyserver.player import find_player_by_client_id

settings = parse_settings(["-p", "4242", "-x", "5", "-y", "5",
                           "-c", "4", "-t", "10", "-n", "red"])
print(format_banner(settings))
state = game_init(settings, random.Random(0))
add_client_team("red", state.teams, client_id=0)

player = find_player_by_client_id(state, 0)
player.move_forward(state.world_map)
print(player.position)
print(player.vision(state))
print(player.inventory_report())
```

The modules are:

- `zappyserver.objects`: the `Resource` enum.
- `zappyserver.inventory`: the `Inventory` class.
- `zappyserver.world`: `Cell`, `create_map`, `get_cell`, `drop_object` and
  `take_object`.
- `zappyserver.player`: `Direction`, `Player` and `find_player_by_client_id`.
- `zappyserver.team`: `Team`, `add_client_team`, `remove_client_team` and
  `create_teams`.
- `zappyserver.settings`: `ServerSettings`, `SettingsError`,
  `parse_settings` and `format_banner`.
- `zappyserver.game`: `GameState` and `game_init`.
- `zappyserver.client`: `Client`, `PendingCommand` and `command_ticks`.
- `zappyserver.server`: `ServerState`, `init_server`, `accept_new_client`,
  `handle_first_command`, `handle_client`, `disconnect_client` and
  `server_loop`.
- `zappyserver.app`: `AppState`, `run_tick`, `update_game`, `game_loop` and
  `main`.

`parse_settings` raises `SettingsError` when a flag is missing or invalid.

## Running the tests

```
pip install .[test]
pytest
```