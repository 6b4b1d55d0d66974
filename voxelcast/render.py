"""Software ray casting of a block world into an RGBA frame."""

from __future__ import annotations

import math
from dataclasses import replace

from .colors import Color, composite_over
from .geometry import Vec3
from .world import Blockworld

FOV_H_DEG = 55.0
MAX_STEPS = 250
REFLECTION_ALPHA = 200

_BLACK = bytes((0, 0, 0, 255))
_TRANSPARENT = Color(0, 0, 0, 0)


def _premultiply(color: Color) -> Color:
    """Convert a straight-alpha colour to the premultiplied form the frame stores."""
    a = color.a

    def channel(v: int) -> int:
        return ((v * 0x101 * a) // 0xFF) >> 8

    return Color(channel(color.r), channel(color.g), channel(color.b), a)


class Frame:
    """An RGBA pixel buffer holding premultiplied colours, row 0 first."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"frame size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pix = bytearray(width * height * 4)

    def _offset(self, x: int, y: int) -> int | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return (y * self.width + x) * 4

    def clear(self) -> None:
        """Fill the frame with opaque black."""
        self._pix[:] = _BLACK * (self.width * self.height)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Store a straight-alpha colour; coordinates outside the frame are ignored."""
        offset = self._offset(x, y)
        if offset is None:
            return
        pm = _premultiply(color)
        self._pix[offset : offset + 4] = bytes((pm.r, pm.g, pm.b, pm.a))

    def get_pixel(self, x: int, y: int) -> Color:
        """The stored premultiplied colour; transparent black outside the frame."""
        offset = self._offset(x, y)
        if offset is None:
            return _TRANSPARENT
        return Color(*self._pix[offset : offset + 4])

    def to_bytes(self) -> bytes:
        return bytes(self._pix)


def _axis_setup(pos: float, d: float) -> tuple[int, float, float]:
    """Step direction, parametric distance per cell and distance to the first boundary."""
    if d > 0:
        return 1, 1 / d, (math.floor(pos + 1) - pos) / d
    if d < 0:
        return -1, 1 / -d, (math.ceil(pos - 1) - pos) / d
    return 0, 0.0, math.inf


def _trace(world: Blockworld, origin: Vec3, ray: Vec3) -> Color | None:
    """Walk the grid along ``ray`` and return the colour seen, if any."""
    pos = [origin.x, origin.y, origin.z]
    comps = [ray.x, ray.y, ray.z]
    setups = [_axis_setup(p, d) for p, d in zip(pos, comps)]
    steps = [s[0] for s in setups]
    deltas = [s[1] for s in setups]
    t_max = [s[2] for s in setups]
    reflected: Color | None = None

    for _ in range(MAX_STEPS):
        if t_max[0] < t_max[1] and t_max[0] < t_max[2]:
            axis = 0
        elif t_max[1] < t_max[2]:
            axis = 1
        else:
            axis = 2
        pos[axis] += steps[axis]
        t_max[axis] += deltas[axis]

        block = world.get_raw(int(pos[0]), int(pos[1]), int(pos[2]))
        if block is None:
            continue
        if block.reflective:
            # Mirror the ray vertically and nudge it off the surface.
            comps[2] = -comps[2]
            pos = [p + c for p, c in zip(pos, comps)]
            reflected = block.color
            continue
        if reflected is not None:
            front = replace(_premultiply(reflected), a=REFLECTION_ALPHA)
            return composite_over(front, block.color)
        return block.color
    return reflected


def render_frame(frame: Frame, world: Blockworld) -> None:
    """Render the world as seen by the player into ``frame``.

    Rows are written bottom-up, so row 0 of the buffer is the bottom of the view.
    """
    frame.clear()
    width, height = frame.width, frame.height
    fov_v = FOV_H_DEG * (height / width)
    deg_per_pixel = FOV_H_DEG / width
    tilt = world.player_dir.theta - 90
    heading = world.player_dir.phi
    origin = world.player_pos
    forward = Vec3(1.0, 0.0, 0.0)

    for y in range(height):
        row_ray = forward.rotate_y(-fov_v / 2 + y * deg_per_pixel)
        for x in range(width):
            xd = -FOV_H_DEG / 2 + x * deg_per_pixel
            ray = row_ray.rotate_z(xd).rotate_y(tilt).rotate_z(heading)
            color = _trace(world, origin, ray)
            if color is not None:
                frame.set_pixel(x, height - y, color)