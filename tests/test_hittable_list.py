import pytest

from tracer.hittable_list import HittableList
from tracer.interval import Interval
from tracer.material import Lambertian, Metal
from tracer.ray import Ray
from tracer.sphere import Sphere
from tracer.vec3 import INFINITY, Vec3

EVERYTHING = Interval(0.0001, INFINITY)
RAY = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
NEAR_MAT = Lambertian(Vec3(0.1, 0.2, 0.3))
FAR_MAT = Metal(Vec3(0.9, 0.9, 0.9), 0.0)


def _near():
    return Sphere(Vec3(0.0, 0.0, -2.0), 0.5, NEAR_MAT)


def _far():
    return Sphere(Vec3(0.0, 0.0, -6.0), 0.5, FAR_MAT)


def test_empty_list_misses():
    assert HittableList().hit(RAY, EVERYTHING) is None


@pytest.mark.parametrize("order", [("near", "far"), ("far", "near")])
def test_nearest_object_wins_regardless_of_order(order):
    spheres = {"near": _near(), "far": _far()}
    world = HittableList(spheres[name] for name in order)
    record = world.hit(RAY, EVERYTHING)
    expected = spheres["near"].hit(RAY, EVERYTHING)
    assert record.mat is NEAR_MAT
    assert record.t == pytest.approx(expected.t)


def test_add_and_len():
    world = HittableList()
    world.add(_near())
    world.add(_far())
    assert len(world) == 2
    assert [s.mat for s in world] == [NEAR_MAT, FAR_MAT]


def test_clear_removes_everything():
    world = HittableList([_near(), _far()])
    world.clear()
    assert len(world) == 0
    assert world.hit(RAY, EVERYTHING) is None


def test_interval_max_limits_hits():
    world = HittableList([_far()])
    assert world.hit(RAY, Interval(0.0001, 3.0)) is None
    assert world.hit(RAY, EVERYTHING).mat is FAR_MAT


def test_single_object_matches_object_hit():
    sphere = _far()
    world = HittableList([sphere])
    assert world.hit(RAY, EVERYTHING) == sphere.hit(RAY, EVERYTHING)