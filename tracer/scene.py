"""The demo scene: a field of small random spheres around three large ones."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from tracer.camera import DEFAULT_OUTPUT, Camera
from tracer.hittable_list import HittableList
from tracer.material import Dielectric, Lambertian, Material, Metal
from tracer.sphere import Sphere
from tracer.vec3 import Vec3, random_float, random_float_interval, random_range_vec3, random_vec3

_KEEP_CLEAR_OF = Vec3(4.0, 0.2, 0.0)


def _random_material() -> Material:
    choose_mat = random_float()
    if choose_mat < 0.8:
        return Lambertian(random_vec3() * random_vec3())
    if choose_mat < 0.95:
        return Metal(random_range_vec3(0.5, 1.0), random_float_interval(0.0, 0.5))
    return Dielectric(1.5)


def build_world() -> HittableList:
    """Ground, a randomised grid of small spheres, and three large feature spheres."""
    world = HittableList()
    world.add(Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_float()
            center = Vec3(a + 0.9 * random_float(), 0.2, b + 0.9 * random_float())
            if (center - _KEEP_CLEAR_OF).mag() <= 0.9:
                continue
            if choose_mat < 0.8:
                material: Material = Lambertian(random_vec3() * random_vec3())
            elif choose_mat < 0.95:
                material = Metal(random_range_vec3(0.5, 1.0), random_float_interval(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)))
    return world


def build_camera() -> Camera:
    """The camera used for the demo scene."""
    return Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=1200,
        samples_per_pixel=500,
        max_depth=50,
        vfov=20.0,
        lookfrom=Vec3(13.0, 2.0, 3.0),
        lookat=Vec3(0.0, 0.0, 0.0),
        vup=Vec3(0.0, 1.0, 0.0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the demo scene to a PPM file."""
    camera = build_camera()
    parser = argparse.ArgumentParser(description="Render the demo sphere scene.")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="PPM file to write")
    parser.add_argument("--image-width", type=int, default=camera.image_width)
    parser.add_argument("--samples-per-pixel", type=int, default=camera.samples_per_pixel)
    parser.add_argument("--max-depth", type=int, default=camera.max_depth)
    args = parser.parse_args(argv)

    camera.image_width = args.image_width
    camera.samples_per_pixel = args.samples_per_pixel
    camera.max_depth = args.max_depth

    camera.render(build_world(), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())