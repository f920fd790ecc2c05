import random

from zappyserver.objects import Resource
from zappyserver.world import Cell, create_map, drop_object, get_cell, take_object


class _AlwaysRng:
    """Always places a resource and always picks the first one."""

    def random(self):
        return 0.0

    def choice(self, seq):
        return seq[0]


class _NeverRng:
    def random(self):
        return 0.99

    def choice(self, seq):
        return seq[-1]


class _ScriptedRng:
    """Replays fixed draws and picks fixed positions."""

    def __init__(self, draws, picks):
        self._draws = iter(draws)
        self._picks = iter(picks)

    def random(self):
        return next(self._draws)

    def choice(self, seq):
        return seq[next(self._picks)]


def _empty_map(width, height):
    return [[Cell() for _ in range(width)] for _ in range(height)]


def test_dimensions():
    world_map = create_map(5, 3, random.Random(1))
    assert len(world_map) == 3
    assert all(len(row) == 5 for row in world_map)


def test_each_cell_holds_at_most_one_item():
    world_map = create_map(20, 20, random.Random(7))
    assert all(sum(cell.content.values()) <= 1 for row in world_map for cell in row)


def test_scripted_rng_places_chosen_resources():
    rng = _ScriptedRng([0.1, 0.9, 0.9, 0.1], [2, 6])
    world_map = create_map(2, 2, rng)
    assert world_map[0][0].content == {Resource.DERAUMERE: 1}
    assert world_map[0][1].content == {}
    assert world_map[1][0].content == {}
    assert world_map[1][1].content == {Resource.THYSTAME: 1}


def test_always_rng_fills_every_cell():
    world_map = create_map(4, 2, _AlwaysRng())
    assert all(cell.content == {Resource.FOOD: 1} for row in world_map for cell in row)


def test_never_rng_leaves_cells_empty():
    world_map = create_map(4, 2, _NeverRng())
    assert all(cell.content == {} for row in world_map for cell in row)


def test_get_cell_bounds():
    world_map = _empty_map(3, 2)
    assert get_cell(world_map, 2, 1) is world_map[1][2]
    assert get_cell(world_map, 3, 0) is None
    assert get_cell(world_map, 0, 2) is None
    assert get_cell(world_map, -1, 0) is None


def test_drop_then_take_round_trip():
    world_map = _empty_map(3, 3)
    assert drop_object(world_map, 1, 2, Resource.SIBUR) is True
    assert world_map[2][1].content == {Resource.SIBUR: 1}
    assert take_object(world_map, 1, 2, Resource.SIBUR) is True
    assert world_map[2][1].content == {}


def test_take_from_empty_cell_fails():
    world_map = _empty_map(2, 2)
    assert take_object(world_map, 0, 0, Resource.FOOD) is False


def test_outside_map_fails():
    world_map = _empty_map(2, 2)
    assert drop_object(world_map, 5, 5, Resource.FOOD) is False
    assert take_object(world_map, -1, 0, Resource.FOOD) is False


def test_take_decrements_stack():
    world_map = _empty_map(1, 1)
    drop_object(world_map, 0, 0, Resource.PHIRAS)
    drop_object(world_map, 0, 0, Resource.PHIRAS)
    assert take_object(world_map, 0, 0, Resource.PHIRAS) is True
    assert world_map[0][0].content == {Resource.PHIRAS: 1}