"""Three-component vectors and the random sampling helpers built on them."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Union

INFINITY = math.inf
PI = 3.1415926535897932385

_NEAR_ZERO = 1e-8
_MIN_LENGTH_SQUARED = 1e-160


def _format_component(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector used for points, directions and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vec3, float]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vec3:
        if isinstance(scalar, (int, float)):
            return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return "({}, {}, {})".format(*(_format_component(c) for c in self))

    def mag(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        magnitude = self.mag()
        if magnitude > 0.0:
            return self / magnitude
        return Vec3()

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def near_zero(self) -> bool:
        """True when every component is within 1e-8 of zero."""
        return all(abs(c) < _NEAR_ZERO for c in self)


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI / 180.0


def random_float() -> float:
    """A random value in [0, 1] with a resolution of one thousandth."""
    return random.randint(0, 1000) / 1000.0


def random_float_interval(min_value: float, max_value: float) -> float:
    return min_value + (max_value - min_value) * random_float()


def random_in_unit_disk() -> Vec3:
    """A random point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(random_float_interval(-1.0, 1.0), random_float_interval(-1.0, 1.0), 0.0)
        if p.dot(p) < 1.0:
            return p


def random_unit_vector() -> Vec3:
    """A random direction of unit length."""
    while True:
        p = random_range_vec3(-1.0, 1.0)
        length_squared = p.dot(p)
        if _MIN_LENGTH_SQUARED < length_squared <= 1.0:
            return p / math.sqrt(length_squared)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector on the hemisphere facing ``normal``."""
    on_unit_sphere = random_unit_vector()
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def random_vec3() -> Vec3:
    return Vec3(random_float(), random_float(), random_float())


def random_range_vec3(min_value: float, max_value: float) -> Vec3:
    return Vec3(
        random_float_interval(min_value, max_value),
        random_float_interval(min_value, max_value),
        random_float_interval(min_value, max_value),
    )


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with normal ``n``."""
    return v - 2.0 * v.dot(n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Bend the unit vector ``uv`` through a surface with normal ``n`` (Snell's law)."""
    cos_theta = min((-uv).dot(n), 1.0)
    r_out_perpendicular = etai_over_etat * (uv + n * cos_theta)
    r_out_parallel = -(
        math.sqrt(abs(1.0 - r_out_perpendicular.dot(r_out_perpendicular))) * n
    )
    return r_out_parallel + r_out_perpendicular