import pytest

from voxelcast.colors import Color
from voxelcast.geometry import Angle3, Vec3
from voxelcast.render import Frame, render_frame
from voxelcast.world import Block, Blockworld

RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLACK = Color(0, 0, 0, 255)


def _wall_world():
    world = Blockworld()
    world.set_size(20, 20, 20)
    for y in range(20):
        for z in range(20):
            world.set(10, y, z, Block(color=RED))
    world.player_pos = Vec3(5.5, 10.5, 10.5)
    world.player_dir = Angle3(90, 0)
    return world


def _mirror_floor_world():
    world = Blockworld()
    world.set_size(20, 20, 20)
    for x in range(20):
        for y in range(20):
            world.set(x, y, 0, Block(color=GREEN, reflective=True))
    world.player_pos = Vec3(10.5, 10.5, 3.5)
    world.player_dir = Angle3(180, 0)
    return world


def test_new_frame_is_transparent():
    frame = Frame(4, 3)
    assert frame.get_pixel(2, 1) == Color(0, 0, 0, 0)
    assert frame.to_bytes() == bytes(4 * 3 * 4)


def test_clear_fills_opaque_black():
    frame = Frame(4, 3)
    frame.clear()
    assert frame.to_bytes() == bytes((0, 0, 0, 255)) * 12
    assert frame.get_pixel(3, 2) == BLACK


def test_opaque_pixel_round_trip():
    frame = Frame(5, 5)
    color = Color(12, 34, 56, 255)
    frame.set_pixel(1, 2, color)
    assert frame.get_pixel(1, 2) == color


def test_translucent_pixel_is_premultiplied():
    frame = Frame(2, 2)
    frame.set_pixel(0, 0, Color(255, 0, 0, 128))
    stored = frame.get_pixel(0, 0)
    assert stored.a == 128
    assert stored.r == stored.a
    assert stored.g == 0


def test_out_of_bounds_writes_are_ignored():
    frame = Frame(3, 3)
    frame.clear()
    before = frame.to_bytes()
    frame.set_pixel(3, 0, RED)
    frame.set_pixel(0, -1, RED)
    assert frame.to_bytes() == before
    assert frame.get_pixel(5, 5) == Color(0, 0, 0, 0)


@pytest.mark.parametrize("size", [(0, 4), (4, 0), (-1, 3)])
def test_invalid_frame_size(size):
    with pytest.raises(ValueError):
        Frame(*size)


def test_empty_world_renders_black():
    world = Blockworld()
    frame = Frame(8, 6)
    render_frame(frame, world)
    empty = Frame(8, 6)
    empty.clear()
    assert frame.to_bytes() == empty.to_bytes()


def test_wall_fills_view_except_unwritten_row():
    frame = Frame(8, 6)
    render_frame(frame, _wall_world())
    assert all(frame.get_pixel(x, 0) == BLACK for x in range(8))
    assert all(frame.get_pixel(x, y) == RED for y in range(1, 6) for x in range(8))


def test_mirror_floor_shows_its_colour():
    frame = Frame(8, 6)
    render_frame(frame, _mirror_floor_world())
    assert frame.get_pixel(4, 3) == GREEN
    assert all(frame.get_pixel(x, y) == GREEN for y in range(1, 6) for x in range(8))


def test_rendering_is_deterministic_and_clears_previous_frame():
    world = _wall_world()
    first = Frame(8, 6)
    render_frame(first, world)
    second = Frame(8, 6)
    second.set_pixel(0, 0, GREEN)
    render_frame(second, world)
    assert second.to_bytes() == first.to_bytes()