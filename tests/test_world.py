import random

from voxelcast.colors import Color
from voxelcast.geometry import Angle3, Point, Vec3
from voxelcast.world import Block, Blockworld


def make_world(x=10, y=10, z=10):
    world = Blockworld()
    world.set_size(x, y, z)
    return world


def test_new_world_defaults():
    world = Blockworld()
    assert world.player_pos == Vec3(170, 170, 64)
    assert world.player_dir == Angle3(90, 45)
    assert world.block_size_px == 25
    assert world.blocks() == []


def test_set_then_get_round_trip():
    world = make_world()
    block = Block(color=Color(1, 2, 3, 4), reflective=True)
    world.set(1, 2, 3, block)
    got = world.get(Point(1, 2, 3))
    assert got.is_set
    assert got.color == Color(1, 2, 3, 4)
    assert got.reflective
    assert world.get_raw(1, 2, 3) == got


def test_unset_cell_is_air():
    assert make_world().get(Point(0, 0, 0)) is None


def test_out_of_bounds_get_is_none():
    world = make_world(2, 2, 2)
    assert world.get(Point(2, 0, 0)) is None
    assert world.get_raw(-1, 0, 0) is None


def test_out_of_bounds_set_is_ignored():
    world = make_world(2, 2, 2)
    world.set(5, 0, 0, Block(color=Color(9, 9, 9)))
    assert not any(b.is_set for b in world.blocks())


def test_blocks_layout_is_x_fastest():
    world = make_world(3, 4, 5)
    block = Block(color=Color(7, 7, 7))
    world.set(1, 2, 3, block)
    cells = world.blocks()
    assert len(cells) == 3 * 4 * 5
    assert [i for i, b in enumerate(cells) if b.is_set] == [43]


def test_set_size_clears_blocks():
    world = make_world()
    world.set(0, 0, 0, Block(color=Color(1, 1, 1)))
    world.set_size(10, 10, 10)
    assert world.get(Point(0, 0, 0)) is None


def test_randomize_builds_wall_within_bounds():
    world = make_world()
    world.randomize(random.Random(1))
    placed = {
        (x, y, z)
        for x in range(10)
        for y in range(10)
        for z in range(10)
        if world.get_raw(x, y, z) is not None
    }
    assert placed == {(4, y, z) for y in range(5) for z in range(5)}


def test_randomize_is_reproducible_with_seed():
    a, b = make_world(), make_world()
    a.randomize(random.Random(42))
    b.randomize(random.Random(42))
    assert a.blocks() == b.blocks()


def test_randomize_on_empty_world_places_nothing():
    world = Blockworld()
    world.randomize(random.Random(0))
    assert world.blocks() == []