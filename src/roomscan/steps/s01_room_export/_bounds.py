"""Room bounds: axis-aligned box over surface (or object) extents.

Each surface contributes ``center - dims/2`` and ``center + dims/2``, an
axis-aligned approximation of its oriented box. Objects are used only when
the room has no walls and no floors.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import numpy as np

from roomscan.core.contracts import CapturedObject, CapturedRoom, CapturedSurface
from roomscan.utils.geometry import translation
from .contracts import RoomBounds

logger = logging.getLogger(__name__)


def _extreme_points(items: Iterable[Union[CapturedSurface, CapturedObject]]) -> list[np.ndarray]:
    points = []
    for item in items:
        center = translation(item.transform.matrix_4x4)
        half = np.asarray(item.dimensions, dtype=np.float64) / 2.0
        points.append(center - half)
        points.append(center + half)
    return points


def compute_room_bounds(room: CapturedRoom) -> Optional[RoomBounds]:
    """Bounds of walls+floors, falling back to objects. None when there is no geometry."""
    points = _extreme_points([*room.walls, *room.floors])
    if not points:
        points = _extreme_points(room.objects)
        if points:
            logger.info(f"No surfaces captured; bounds from {len(room.objects)} objects")

    if not points:
        return None

    pts = np.vstack(points)
    return RoomBounds(
        min=pts.min(axis=0).tolist(),
        max=pts.max(axis=0).tolist(),
    )
