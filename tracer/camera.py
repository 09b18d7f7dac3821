"""A positionable pinhole/thin-lens camera that renders scenes to PPM."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Optional

from tracer.color import write_color
from tracer.hittable import Hittable
from tracer.interval import Interval
from tracer.ray import Ray
from tracer.vec3 import (
    INFINITY,
    Vec3,
    degrees_to_radians,
    random_float,
    random_in_unit_disk,
)

DEFAULT_OUTPUT = "renders/image.ppm"

# Hits closer than this are ignored so a bounced ray does not re-hit its own surface.
_MIN_HIT_DISTANCE = 0.0001

_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)

Progress = Callable[[int, int], None]


def write_to_file(filename: str | Path, data: str) -> None:
    """Write ``data`` to ``filename``, replacing any existing file."""
    Path(filename).write_text(data)


def _sky_color(ray: Ray) -> Vec3:
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * _WHITE + t * _SKY_BLUE


@dataclass
class Camera:
    """Image and view settings; call :meth:`render` to produce an image."""

    aspect_ratio: float = 0.0
    image_width: int = 0
    samples_per_pixel: int = 1
    max_depth: int = 10
    vfov: float = 90.0
    lookfrom: Vec3 = Vec3()
    lookat: Vec3 = Vec3(0.0, 0.0, -1.0)
    vup: Vec3 = Vec3(0.0, 1.0, 0.0)
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: int = field(default=0, init=False)
    pixel_samples_scale: float = field(default=0.5, init=False, repr=False)
    _centre: Vec3 = field(default=Vec3(), init=False, repr=False)
    _pixel00_loc: Vec3 = field(default=Vec3(), init=False, repr=False)
    _pixel_delta_u: Vec3 = field(default=Vec3(), init=False, repr=False)
    _pixel_delta_v: Vec3 = field(default=Vec3(), init=False, repr=False)
    _u: Vec3 = field(default=Vec3(), init=False, repr=False)
    _v: Vec3 = field(default=Vec3(), init=False, repr=False)
    _w: Vec3 = field(default=Vec3(), init=False, repr=False)
    _defocus_disk_u: Vec3 = field(default=Vec3(), init=False, repr=False)
    _defocus_disk_v: Vec3 = field(default=Vec3(), init=False, repr=False)

    def initialize(self) -> None:
        """Derive the image height, viewport and camera frame from the settings."""
        if self.aspect_ratio <= 0.0:
            raise ValueError("aspect_ratio must be positive")
        if self.image_width < 1:
            raise ValueError("image_width must be at least 1")
        if self.samples_per_pixel < 1:
            raise ValueError("samples_per_pixel must be at least 1")

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self._centre = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2.0)

        self._w = (self.lookfrom - self.lookat).normalize()
        self._u = self.vup.cross(self._w)
        self._v = self._w.cross(self._u)

        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * self.image_width / self.image_height

        viewport_u = viewport_width * self._u
        viewport_v = viewport_height * -self._v

        self._pixel_delta_u = viewport_u / self.image_width
        self._pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self._centre - self._w * self.focus_dist - viewport_u / 2.0 - viewport_v / 2.0
        )
        self._pixel00_loc = (
            viewport_upper_left + self._pixel_delta_u / 2.0 + self._pixel_delta_v / 2.0
        )

        defocus_radius = self.focus_dist * degrees_to_radians(self.defocus_angle / 2.0)
        self._defocus_disk_u = self._u * defocus_radius
        self._defocus_disk_v = self._v * defocus_radius

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray from the lens towards a random point in pixel row ``i``, column ``j``."""
        offset = Vec3(random_float() - 0.5, random_float() - 0.5, 0.0)
        pixel_sample = (
            self._pixel00_loc
            + (offset.x + i) * self._pixel_delta_v
            + (offset.y + j) * self._pixel_delta_u
        )
        origin = self._centre if self.defocus_angle <= 0.0 else self._defocus_disk_sample()
        return Ray(origin, pixel_sample - origin)

    def _defocus_disk_sample(self) -> Vec3:
        p = random_in_unit_disk()
        return self._centre + self._defocus_disk_u * p.x + self._defocus_disk_v * p.y

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Vec3:
        """The colour seen along ``ray``, following at most ``depth`` bounces."""
        throughput = _WHITE
        for _ in range(depth):
            record = world.hit(ray, Interval(_MIN_HIT_DISTANCE, INFINITY))
            if record is None:
                return throughput * _sky_color(ray)
            scattered = record.mat.scatter(ray, record)
            if scattered is None:
                return Vec3()
            attenuation, ray = scattered
            throughput = throughput * attenuation
        return Vec3()

    def _pixel_color(self, world: Hittable, i: int, j: int) -> Vec3:
        total = Vec3()
        for _ in range(self.samples_per_pixel):
            total = total + self.ray_color(self.get_ray(i, j), self.max_depth, world)
        return total * self.pixel_samples_scale

    def _render_parts(
        self, world: Hittable, progress: Optional[Progress] = None
    ) -> Iterator[str]:
        self.initialize()
        yield f"P3\n{self.image_width} {self.image_height}\n255\n"
        for i in range(self.image_height):
            if progress is not None:
                progress(i, self.image_height)
            yield "".join(
                write_color(self._pixel_color(world, i, j)) for j in range(self.image_width)
            )

    def render_ppm(self, world: Hittable) -> str:
        """Render ``world`` and return the image as plain-text PPM."""
        return "".join(self._render_parts(world))

    def render(self, world: Hittable, path: str | Path = DEFAULT_OUTPUT) -> None:
        """Render ``world`` to a PPM file, reporting progress on stdout."""

        def report(row: int, total: int) -> None:
            print(f"Progress: {row}/{total}")

        image_data = "".join(self._render_parts(world, report))
        print("Rendering complete, writing to file...")
        write_to_file(path, image_data)