import random

from zappyserver.game import game_init
from zappyserver.settings import ServerSettings


def _settings():
    return ServerSettings(
        port=4242, width=6, height=4, connexion_max=3, time_unit=100.0, teams_name=["alpha", "beta"]
    )


def test_map_matches_settings():
    settings = _settings()
    state = game_init(settings, random.Random(2))
    assert len(state.world_map) == settings.height
    assert all(len(row) == settings.width for row in state.world_map)


def test_teams_match_settings():
    settings = _settings()
    state = game_init(settings, random.Random(2))
    assert [t.name for t in state.teams] == settings.teams_name
    assert [t.id for t in state.teams] == list(range(1, len(settings.teams_name) + 1))
    assert all(t.players == [] for t in state.teams)


def test_same_seed_same_world():
    first = game_init(_settings(), random.Random(9))
    second = game_init(_settings(), random.Random(9))
    assert first.world_map == second.world_map