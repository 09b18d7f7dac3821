"""A collection of hittable objects treated as one."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from tracer.hittable import HitRecord, Hittable
from tracer.interval import Interval
from tracer.ray import Ray


class HittableList(Hittable):
    """A scene made of several objects; a ray hits the nearest one."""

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        closest: Optional[HitRecord] = None
        closest_so_far = interval.max
        for obj in self.objects:
            record = obj.hit(ray, Interval(interval.min, closest_so_far))
            if record is not None:
                closest = record
                closest_so_far = record.t
        return closest