"""Application state, the tick loop and the command-line entry point."""

from __future__ import annotations

import time
from dataclasses import dataclass

from .game import GameState, game_init
from .server import ServerState, handle_client, init_server, server_loop
from .settings import ServerSettings, SettingsError, format_banner, parse_settings

EXIT_FAILURE = 255


@dataclass
class AppState:
    """Everything the running server holds."""

    game: GameState
    server: ServerState
    settings: ServerSettings


def update_game(app_state: AppState) -> None:
    """Apply the world's own rules for one tick; the world has none that evolve yet."""
    return None


def run_tick(app_state: AppState) -> None:
    """Let every client run its due command, then advance the world."""
    for client in list(app_state.server.clients.values()):
        handle_client(client, app_state.game)
    update_game(app_state)


def game_loop(app_state: AppState) -> None:
    """Run ticks at the configured rate while serving connections in between."""
    time_unit = app_state.settings.time_unit
    if not time_unit > 0:
        raise ValueError(f"time unit must be positive, got {time_unit}")
    tick_duration = 1.0 / time_unit
    last_tick = time.monotonic()
    while True:
        now = time.monotonic()
        if now - last_tick >= tick_duration:
            run_tick(app_state)
            last_tick = now
        server_loop(app_state.server, app_state.game)


def main(argv: list[str] | None = None) -> int:
    """Start the server from command-line arguments."""
    try:
        settings = parse_settings(argv)
    except SettingsError as exc:
        print(exc)
        return EXIT_FAILURE
    print(format_banner(settings))
    game = game_init(settings)
    try:
        listener = init_server(settings)
    except OSError:
        return EXIT_FAILURE
    app_state = AppState(
        game=game,
        server=ServerState(listener=listener, connexion_max=settings.connexion_max),
        settings=settings,
    )
    try:
        game_loop(app_state)
    except ValueError as exc:
        print(exc)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return 0
    finally:
        listener.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())