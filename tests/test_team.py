import random

from zappyserver.team import Team, add_client_team, create_teams, remove_client_team


def test_add_player_ids():
    team = Team(1, "red")
    team.add_player()
    team.add_player()
    assert [p.id for p in team.players] == ["1_1", "1_2"]
    assert all(p.client_id is None for p in team.players)


def test_remove_player():
    team = Team(2, "blue")
    team.add_player()
    team.add_player()
    first = team.players[0]
    team.remove_player(first)
    assert first not in team.players
    assert len(team.players) == 1


def test_add_level_and_connect_nbr():
    team = Team(1, "red")
    level, slots = team.level, team.connect_nbr
    team.add_level()
    team.add_connect_nbr()
    assert team.level == level + 1
    assert team.connect_nbr == slots + 1


def test_assign_player_without_players():
    assert Team(1, "red").assign_player(3) is None


def test_assign_and_unassign():
    team = Team(1, "red")
    team.add_player()
    slots = team.connect_nbr
    player_id = team.assign_player(9)
    assert player_id == team.players[0].id
    assert team.players[0].client_id == 9
    assert team.connect_nbr == slots + 1
    team.unassign_player(9)
    assert team.players[0].client_id is None
    assert team.connect_nbr == slots


def test_add_client_team_uses_slot():
    teams = [Team(1, "red"), Team(2, "blue")]
    player_id = add_client_team("blue", teams, 4)
    assert player_id == teams[1].players[0].id
    assert teams[1].players[0].client_id == 4
    assert teams[1].connect_nbr == 0
    assert add_client_team("blue", teams, 5) is None
    assert len(teams[1].players) == 1


def test_add_client_team_unknown_name():
    teams = [Team(1, "red")]
    assert add_client_team("green", teams, 1) is None
    assert teams[0].players == []


def test_remove_client_team():
    teams = [Team(1, "red")]
    add_client_team("red", teams, 7)
    remove_client_team(1, teams, 7)
    assert teams[0].players[0].client_id is None


def test_create_teams_numbers_from_one():
    names = ["red", "blue", "green"]
    teams = create_teams(names, random.Random(0))
    assert [t.name for t in teams] == names
    assert [t.id for t in teams] == list(range(1, len(names) + 1))