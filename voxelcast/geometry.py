"""Discrete points, spherical angles and 3D vectors used by the voxel world."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


def _to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def sign_as_float(f: float) -> float:
    """Return 1.0 or -1.0 carrying the sign bit of ``f`` (also for zeros and NaN)."""
    return math.copysign(1.0, f)


def _round_half_away(value: float) -> int:
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += 1 if value > 0 else -1
    return int(truncated)


@dataclass(frozen=True)
class Point:
    """A discrete 3D point."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class Angle3:
    """A direction in degrees: ``theta`` is polar (up-down), ``phi`` azimuthal (left-right)."""

    theta: float = 0.0
    phi: float = 0.0

    def clamp_to_view(self) -> Angle3:
        """Limit the polar angle to the range [0, 180]."""
        return replace(self, theta=min(max(self.theta, 0.0), 180.0))

    def normalize(self) -> Angle3:
        """Fold theta into [0, 180] and phi into [0, 360)."""
        theta, phi = self.theta, self.phi
        while theta > 180:
            theta = 180 - math.fmod(theta, 180)
            phi += 180
        while theta < 0:
            theta = 180 + math.fmod(theta, 180)
            phi += 180
        while phi > 360:
            phi -= 360
        if phi < 0:
            phi += 360
        return Angle3(math.fmod(theta, 360), math.fmod(phi, 360))

    def rotate_phi(self, angle: float) -> Angle3:
        return Angle3(self.theta, self.phi + angle).normalize()

    def rotate_theta(self, angle: float) -> Angle3:
        return Angle3(self.theta + angle, self.phi).normalize()

    def reset_theta(self) -> Angle3:
        """Return the same heading looking at the horizon."""
        return Angle3(90.0, self.phi)

    def to_cartesian(self, r: float) -> Vec3:
        """Convert to a Cartesian vector of length ``r``."""
        theta = _to_radians(self.theta)
        phi = _to_radians(self.phi)
        return Vec3(
            r * math.sin(theta) * math.cos(phi),
            r * math.sin(theta) * math.sin(phi),
            r * math.cos(theta),
        )


@dataclass(frozen=True)
class Vec3:
    """A continuous 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"{{X: {self.x:0.3f}, Y: {self.y:0.3f}, Z: {self.z:0.3f}}}"

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vec3:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vec3(self.x * s, self.y * s, self.z * s)

    def rotate(self, x: float, y: float, z: float) -> Vec3:
        """Rotate by the given angles in degrees around the X, Y and Z axes."""
        ax, ay, az = _to_radians(x), _to_radians(y), _to_radians(z)
        sin_x, cos_x = math.sin(ax), math.cos(ax)
        sin_y, cos_y = math.sin(ay), math.cos(ay)
        sin_z, cos_z = math.sin(az), math.cos(az)
        vx, vy, vz = self.x, self.y, self.z
        return Vec3(
            vx * cos_y * cos_z - vy * cos_y * sin_z + vz * sin_y,
            vx * (sin_x * sin_y * cos_z + cos_x * sin_z)
            - vy * (sin_x * sin_y * sin_z - cos_x * cos_z)
            - vz * sin_x * cos_y,
            vx * (-cos_x * sin_y * cos_z - sin_x * sin_z)
            + vy * (cos_x * sin_y * sin_z + sin_x * cos_z)
            + vz * cos_x * cos_y,
        )

    def rotate_x(self, angle: float) -> Vec3:
        """Rotate counter-clockwise around the X axis by ``angle`` degrees."""
        rad = _to_radians(angle)
        sin, cos = math.sin(rad), math.cos(rad)
        return Vec3(self.x, self.y * cos - self.z * sin, self.y * sin + self.z * cos)

    def rotate_y(self, angle: float) -> Vec3:
        """Rotate counter-clockwise around the Y axis by ``angle`` degrees."""
        rad = _to_radians(angle)
        sin, cos = math.sin(rad), math.cos(rad)
        return Vec3(self.x * cos + self.z * sin, self.y, -self.x * sin + self.z * cos)

    def rotate_z(self, angle: float) -> Vec3:
        """Rotate counter-clockwise around the Z axis by ``angle`` degrees."""
        rad = _to_radians(angle)
        sin, cos = math.sin(rad), math.cos(rad)
        return Vec3(self.x * cos - self.y * sin, self.x * sin + self.y * cos, self.z)

    def normalize(self) -> Vec3:
        """Return the unit vector; a zero vector gives NaN components."""
        mag = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if mag == 0:
            return Vec3(math.nan, math.nan, math.nan)
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    def to_nearest_point(self) -> Point:
        """Round each component, halves away from zero."""
        return Point(
            _round_half_away(self.x),
            _round_half_away(self.y),
            _round_half_away(self.z),
        )

    def to_point_trunc(self) -> Point:
        """Truncate each component toward zero."""
        return Point(int(self.x), int(self.y), int(self.z))

    def advance_to_next_block_boundary(self, direction: Vec3) -> Vec3:
        """Step along ``direction`` just past the nearest integer block boundary."""

        def factor(pos: float, d: float) -> float:
            if d > 0:
                return (math.floor(pos + 1) - pos) / d
            if d < 0:
                return (math.ceil(pos - 1) - pos) / d
            return 100.0

        fx = factor(self.x, direction.x)
        fy = factor(self.y, direction.y)
        fz = factor(self.z, direction.z)
        overshoot = 1.0001

        if fx < fy and fx < fz:
            return self + direction * (fx * overshoot)
        if fy < fx and fy < fz:
            return self + direction * (fy * overshoot)
        if fz < fx and fz < fy:
            return self + direction * (fz * overshoot)
        return self + direction