import random

import pytest

from tracer.material import Dielectric, Lambertian, Metal
from tracer.scene import build_camera, build_world, main
from tracer.sphere import Sphere
from tracer.vec3 import Vec3


@pytest.fixture
def world():
    random.seed(1234)
    return build_world()


def _small_spheres(world):
    return list(world)[1:-3]


def test_ground_sphere_comes_first(world):
    ground = list(world)[0]
    assert isinstance(ground, Sphere)
    assert ground.center == Vec3(0.0, -1000.0, 0.0)
    assert ground.radius == 1000.0
    assert isinstance(ground.mat, Lambertian)
    assert ground.mat.albedo == Vec3(0.5, 0.5, 0.5)


def test_three_feature_spheres_come_last(world):
    glass, diffuse, metal = list(world)[-3:]
    assert glass.center == Vec3(0.0, 1.0, 0.0) and glass.radius == 1.0
    assert isinstance(glass.mat, Dielectric) and glass.mat.refraction_index == 1.5
    assert diffuse.center == Vec3(-4.0, 1.0, 0.0)
    assert isinstance(diffuse.mat, Lambertian)
    assert diffuse.mat.albedo == Vec3(0.4, 0.2, 0.1)
    assert metal.center == Vec3(4.0, 1.0, 0.0)
    assert isinstance(metal.mat, Metal)
    assert metal.mat.albedo == Vec3(0.7, 0.6, 0.5)
    assert metal.mat.fuzz == 0.0


def test_small_spheres_lie_on_the_grid(world):
    small = _small_spheres(world)
    assert 0 < len(small) <= 22 * 22
    for sphere in small:
        assert sphere.radius == 0.2
        assert sphere.center.y == 0.2
        assert -11.0 <= sphere.center.x <= 10.9 + 1e-9
        assert -11.0 <= sphere.center.z <= 10.9 + 1e-9
        assert (sphere.center - Vec3(4.0, 0.2, 0.0)).mag() > 0.9


def test_small_sphere_materials_are_in_range(world):
    for sphere in _small_spheres(world):
        mat = sphere.mat
        if isinstance(mat, Lambertian):
            assert all(0.0 <= c <= 1.0 for c in mat.albedo)
        elif isinstance(mat, Metal):
            assert all(0.5 <= c <= 1.0 for c in mat.albedo)
            assert 0.0 <= mat.fuzz <= 0.5
        else:
            assert isinstance(mat, Dielectric)
            assert mat.refraction_index == 1.5


def test_build_camera_settings():
    cam = build_camera()
    assert cam.aspect_ratio == pytest.approx(16.0 / 9.0)
    assert cam.image_width == 1200
    assert cam.samples_per_pixel == 500
    assert cam.max_depth == 50
    assert cam.vfov == 20.0
    assert cam.lookfrom == Vec3(13.0, 2.0, 3.0)
    assert cam.lookat == Vec3(0.0, 0.0, 0.0)
    assert cam.vup == Vec3(0.0, 1.0, 0.0)
    assert cam.defocus_angle == 0.6
    assert cam.focus_dist == 10.0


def test_main_renders_small_image(tmp_path, capsys):
    target = tmp_path / "scene.ppm"
    status = main(
        [
            "--output",
            str(target),
            "--image-width",
            "4",
            "--samples-per-pixel",
            "1",
            "--max-depth",
            "2",
        ]
    )
    assert status == 0
    lines = target.read_text().splitlines()
    assert lines[0] == "P3"
    width, height = (int(v) for v in lines[1].split())
    assert width == 4
    assert lines[2] == "255"
    assert len(lines) == 3 + width * height
    assert "Rendering complete, writing to file..." in capsys.readouterr().out