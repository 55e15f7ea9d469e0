"""World (x, z) to floorplan canvas mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .contracts import RoomBounds, RoomDimensions


@dataclass(frozen=True)
class CoordinateMapper:
    """Affine top-down mapping: world X -> canvas x, world Z -> canvas y.

    No rounding; formatting happens when the SVG is written.
    """

    origin_x: float = 0.0
    origin_z: float = 0.0
    scale: float = 100.0
    margin: float = 20.0

    @classmethod
    def from_bounds(
        cls, bounds: Optional[RoomBounds], scale: float = 100.0, margin: float = 20.0
    ) -> CoordinateMapper:
        if bounds is None:
            return cls(scale=scale, margin=margin)
        return cls(origin_x=bounds.min[0], origin_z=bounds.min[2], scale=scale, margin=margin)

    def map_point(self, point_xz: Sequence[float]) -> tuple[float, float]:
        """Map a projected (x, z) point to canvas (x, y)."""
        x = (point_xz[0] - self.origin_x) * self.scale + self.margin
        y = (point_xz[1] - self.origin_z) * self.scale + self.margin
        return x, y

    def map_position(self, position: Sequence[float]) -> tuple[float, float]:
        """Map a world (x, y, z) position, ignoring height."""
        return self.map_point((position[0], position[2]))

    def canvas_size(self, dimensions: RoomDimensions) -> tuple[float, float]:
        """Canvas (width, height) fitting the room plus margin on every side."""
        return (
            dimensions.length * self.scale + 2 * self.margin,
            dimensions.width * self.scale + 2 * self.margin,
        )
