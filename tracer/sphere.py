"""Spheres and a stand-alone ray/sphere distance test."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from tracer.hittable import HitRecord, Hittable
from tracer.interval import Interval
from tracer.material import Material
from tracer.ray import Ray
from tracer.vec3 import Vec3


@dataclass
class Sphere(Hittable):
    """A sphere with a centre, a radius and a surface material."""

    center: Vec3
    radius: float
    mat: Material

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        oc = self.center - ray.origin
        a = ray.direction.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        h = ray.direction.dot(oc)
        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)
        root = (h - sqrt_d) / a
        if not interval.surrounds(root):
            root = (h + sqrt_d) / a
            if not interval.surrounds(root):
                return None

        point = ray.at(root)
        record = HitRecord(t=root, point=point, mat=self.mat)
        record.set_face_normal(ray, (point - self.center) / self.radius)
        return record


def hit_sphere(center: Vec3, radius: float, ray: Ray) -> float:
    """Distance along the normalised ray to a sphere, or -1.0 on a miss."""
    oc = center - ray.origin
    unit_direction = ray.direction.normalize()
    a = unit_direction.dot(unit_direction)
    h = oc.dot(unit_direction)
    c = oc.dot(oc) - radius * radius
    discriminant = h * h - a * c
    if discriminant < 0.0:
        return -1.0
    return h - math.sqrt(discriminant) / a