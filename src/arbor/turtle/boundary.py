from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from arbor.geometry import Vector3


class BoundaryPolicy(Protocol):
    def constrain(
        self, start: Vector3, end: Vector3, *, first_segment: bool
    ) -> tuple[Vector3, Vector3]: ...


@dataclass(frozen=True)
class GroundClamp:
    """Keep root segments at or below ``ground_height``.

    The first segment of a pass keeps its start point so the root system stays
    attached to the trunk base.
    """

    ground_height: float

    def clamp(self, point: Vector3) -> Vector3:
        if point.y >= self.ground_height:
            return point.with_y(self.ground_height)
        return point

    def constrain(
        self, start: Vector3, end: Vector3, *, first_segment: bool
    ) -> tuple[Vector3, Vector3]:
        if not first_segment:
            start = self.clamp(start)
        return start, self.clamp(end)
