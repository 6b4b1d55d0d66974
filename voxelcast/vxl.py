"""Reader for the 512x512x64 VXL voxel map format."""

from __future__ import annotations

import os
from collections.abc import Iterator
from itertools import compress

from .colors import Color
from .world import Block, Blockworld

WIDTH = 512
DEPTH = 512
HEIGHT = 64

_SOLID_COLUMN = b"\x01" * HEIGHT


class VxlFormatError(ValueError):
    """The map data is truncated or malformed."""


class VxlMap:
    """Solidity and colours of every voxel; z is 0 at the bottom of the map."""

    def __init__(self) -> None:
        self._solid = bytearray(WIDTH * DEPTH * HEIGHT)
        self._colors: dict[int, int] = {}

    @staticmethod
    def _index(x: int, y: int, z: int) -> int:
        if not (0 <= x < WIDTH and 0 <= y < DEPTH and 0 <= z < HEIGHT):
            raise IndexError(f"voxel ({x}, {y}, {z}) outside the map")
        return (x * DEPTH + y) * HEIGHT + z

    def is_solid(self, x: int, y: int, z: int) -> bool:
        return bool(self._solid[self._index(x, y, z)])

    def color_at(self, x: int, y: int, z: int) -> int:
        """The raw 32-bit colour stored for a voxel, 0 if none was given."""
        return self._colors.get(self._index(x, y, z), 0)

    def solid_voxels(self) -> Iterator[tuple[int, int, int, int]]:
        """Yield ``(x, y, z, color)`` for every solid voxel, ordered by x, y, z."""
        for index in compress(range(len(self._solid)), self._solid):
            x, rest = divmod(index, DEPTH * HEIGHT)
            y, z = divmod(rest, HEIGHT)
            yield x, y, z, self._colors.get(index, 0)


def _advance(pos: int, step: int, size: int) -> int:
    if step < 0 or pos + step > size:
        raise VxlFormatError("span runs past the end of the data")
    return pos + step


def _store_color(data: bytes, cpos: int, colors: dict[int, int], base: int, z: int) -> int:
    if len(data) - cpos < 4:
        raise VxlFormatError("insufficient color data")
    world_z = HEIGHT - 1 - z
    if not 0 <= world_z < HEIGHT:
        raise VxlFormatError("z out of bounds")
    colors[base + world_z] = int.from_bytes(data[cpos : cpos + 4], "big")
    return cpos + 4


def parse_vxl(data: bytes) -> VxlMap:
    """Decode a VXL map; trailing bytes after the last column are ignored."""
    data = bytes(data)
    size = len(data)
    vxl = VxlMap()
    solid, colors = vxl._solid, vxl._colors
    pos = 0
    for y in range(DEPTH):
        for x in range(WIDTH):
            base = (x * DEPTH + y) * HEIGHT
            solid[base : base + HEIGHT] = _SOLID_COLUMN
            z = 0
            while True:
                if size - pos < 4:
                    raise VxlFormatError("insufficient data")
                chunks, top_start, top_end = data[pos], data[pos + 1], data[pos + 2]

                if top_start > z:
                    if top_start > HEIGHT:
                        raise VxlFormatError("z out of bounds")
                    # File depths z..top_start-1 are air; file depth d is world height 63-d.
                    solid[base + HEIGHT - top_start : base + HEIGHT - z] = bytes(top_start - z)

                cpos = pos + 4
                z = top_start
                while z <= top_end:
                    cpos = _store_color(data, cpos, colors, base, z)
                    z += 1

                top_count = top_end - top_start + 1
                if chunks == 0:
                    pos = _advance(pos, 4 * (top_count + 1), size)
                    break

                bottom_count = (chunks - 1) - top_count
                pos = _advance(pos, chunks * 4, size)
                if size - pos < 4:
                    raise VxlFormatError("insufficient data for bottom color end")
                bottom_end = data[pos + 3]
                z = bottom_end - bottom_count
                while z < bottom_end:
                    cpos = _store_color(data, cpos, colors, base, z)
                    z += 1
    return vxl


def _decode_color(raw: int) -> Color:
    # Stored as B, G, R, shade; the shade byte (0x00 dark, 0x80 full) is shifted into alpha.
    return Color(
        r=(raw >> 8) & 0xFF,
        g=(raw >> 16) & 0xFF,
        b=(raw >> 24) & 0xFF,
        a=((raw & 0xFF) + 128) & 0xFF,
    )


def populate_world(vxl_map: VxlMap, world: Blockworld) -> None:
    """Resize ``world`` to the map and fill it; the bottom layer is reflective."""
    world.set_size(WIDTH, DEPTH, HEIGHT)
    for x, y, z, raw in vxl_map.solid_voxels():
        world.set(x, y, z, Block(color=_decode_color(raw), reflective=z == 0))


def load_map(path: str | os.PathLike[str], world: Blockworld) -> None:
    """Read the VXL file at ``path`` into ``world``."""
    with open(path, "rb") as fh:
        data = fh.read()
    populate_world(parse_vxl(data), world)