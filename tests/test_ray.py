import pytest

from tracer.ray import Ray
from tracer.vec3 import Vec3

ORIGIN = Vec3(1.0, 2.0, 3.0)
DIRECTION = Vec3(0.5, -1.0, 2.0)


def test_at_zero_is_origin():
    assert Ray(ORIGIN, DIRECTION).at(0.0) == ORIGIN


def test_at_one_adds_direction():
    assert Ray(ORIGIN, DIRECTION).at(1.0) == ORIGIN + DIRECTION


def test_at_scales_direction():
    ray = Ray(ORIGIN, DIRECTION)
    assert ray.at(2.0) - ray.at(1.0) == DIRECTION


def test_at_negative_goes_backwards():
    ray = Ray(ORIGIN, DIRECTION)
    assert ray.at(-1.0) == ORIGIN - DIRECTION


def test_fields_are_kept():
    ray = Ray(ORIGIN, DIRECTION)
    assert (ray.origin, ray.direction) == (ORIGIN, DIRECTION)


def test_ray_is_immutable():
    ray = Ray(ORIGIN, DIRECTION)
    with pytest.raises(AttributeError):
        ray.origin = Vec3()  # type: ignore[misc]