"""A bounded grid of coloured voxel blocks plus the player's position and view."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from .colors import Color
from .geometry import Angle3, Point, Vec3

BLOCK_SIZE_PX = 25

_PALETTE = (
    Color(0, 0, 0, 0),
    Color(255, 0, 0, 255),
    Color(0, 255, 0, 255),
    Color(0, 0, 255, 255),
    Color(255, 255, 0, 255),
    Color(255, 0, 255, 255),
    Color(0, 255, 255, 255),
)


@dataclass(frozen=True)
class Block:
    """One voxel. A block that is not set is air."""

    color: Color = field(default_factory=lambda: Color(0, 0, 0, 0))
    is_set: bool = False
    reflective: bool = False
    distance_to_nearest_block: int = 0


_AIR = Block()


class Blockworld:
    """Blocks on an ``x`` by ``y`` by ``z`` grid; positions outside it are empty."""

    def __init__(self) -> None:
        self._x = self._y = self._z = 0
        self._cells: dict[int, Block] = {}
        self.block_size_px = BLOCK_SIZE_PX
        self.player_pos = Vec3(170, 170, 64)
        self.player_dir = Angle3(90, 45)

    @property
    def size(self) -> tuple[int, int, int]:
        return self._x, self._y, self._z

    def _index(self, x: int, y: int, z: int) -> int | None:
        if not (0 <= x < self._x and 0 <= y < self._y and 0 <= z < self._z):
            return None
        return x + y * self._x + z * self._x * self._y

    def randomize(self, rng: random.Random | None = None) -> None:
        """Place a small wall of randomly coloured blocks near the origin."""
        rng = rng or random.Random()
        for x in range(4, 5):
            for y in range(-5, 5):
                for z in range(5):
                    self.set(x, y, z, Block(color=rng.choice(_PALETTE)))

    def set_size(self, x: int, y: int, z: int) -> None:
        """Resize the grid and clear every block."""
        self._x, self._y, self._z = x, y, z
        self._cells = {}

    def blocks(self) -> list[Block]:
        """All cells in storage order (x fastest, then y, then z)."""
        count = self._x * self._y * self._z
        return [self._cells.get(i, _AIR) for i in range(count)]

    def get(self, point: Point) -> Block | None:
        """The block at ``point``, or None if it is air or outside the grid."""
        return self.get_raw(point.x, point.y, point.z)

    def get_raw(self, x: int, y: int, z: int) -> Block | None:
        index = self._index(x, y, z)
        if index is None:
            return None
        block = self._cells.get(index)
        return block if block is not None and block.is_set else None

    def set(self, x: int, y: int, z: int, block: Block) -> None:
        """Store ``block`` as a solid block; positions outside the grid are ignored."""
        index = self._index(x, y, z)
        if index is None:
            return
        self._cells[index] = block if block.is_set else replace(block, is_set=True)