"""How surfaces scatter incoming light."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional, Tuple

from tracer.ray import Ray
from tracer.vec3 import Vec3, random_float, random_unit_vector, reflect, refract

if TYPE_CHECKING:
    from tracer.hittable import HitRecord

Scatter = Optional[Tuple[Vec3, Ray]]


class Material:
    """A surface's response to light; the base material absorbs everything."""

    def scatter(self, ray_in: Ray, hit_record: HitRecord) -> Scatter:
        """Return ``(attenuation, scattered_ray)``, or None if the ray is absorbed."""
        return None


class DefaultMaterial(Material):
    """A placeholder material that absorbs every ray."""

    def scatter(self, ray_in: Ray, hit_record: HitRecord) -> Scatter:
        return None


class Lambertian(Material):
    """An ideal diffuse surface."""

    def __init__(self, albedo: Vec3) -> None:
        self.albedo = albedo

    def scatter(self, ray_in: Ray, hit_record: HitRecord) -> Scatter:
        scatter_direction = hit_record.normal + random_unit_vector()
        if scatter_direction.near_zero():
            scatter_direction = hit_record.normal
        return self.albedo, Ray(hit_record.point, scatter_direction)


class Metal(Material):
    """A reflective surface; ``fuzz`` (capped at 1) blurs the reflection."""

    def __init__(self, albedo: Vec3, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1.0 else 1.0

    def scatter(self, ray_in: Ray, hit_record: HitRecord) -> Scatter:
        reflected = reflect(ray_in.direction, hit_record.normal)
        reflected = reflected.normalize() + self.fuzz * random_unit_vector()
        scattered = Ray(hit_record.point, reflected)
        if hit_record.normal.dot(scattered.direction) > 0.0:
            return self.albedo, scattered
        return None


def reflectance(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation of the reflection coefficient."""
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5


class Dielectric(Material):
    """A clear material such as glass or water that refracts and reflects."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, hit_record: HitRecord) -> Scatter:
        attenuation = Vec3(1.0, 1.0, 1.0)
        ref_index = (
            1.0 / self.refraction_index if hit_record.front_face else self.refraction_index
        )
        unit_direction = ray_in.direction.normalize()
        cos_theta = (-unit_direction).dot(hit_record.normal)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ref_index * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ref_index) > random_float():
            direction = reflect(unit_direction, hit_record.normal)
        else:
            direction = refract(unit_direction, hit_record.normal, ref_index)
        return attenuation, Ray(hit_record.point, direction)