"""Surfaces that rays can hit, and the record of a hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from tracer.interval import Interval
from tracer.material import DefaultMaterial, Material
from tracer.ray import Ray
from tracer.vec3 import Vec3


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    t: float = 0.0
    point: Vec3 = field(default_factory=Vec3)
    mat: Material = field(default_factory=DefaultMaterial)
    normal: Vec3 = field(default_factory=Vec3)
    front_face: bool = True

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Orient the normal against the incoming ray and remember which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        """The hit with ``t`` strictly inside ``interval``, or None on a miss."""