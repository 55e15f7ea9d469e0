"""Wall and door segments projected onto the floor (x, z) plane.

Door detection is a label heuristic supplied as a predicate, so a geometric
classifier can replace it without touching the segment math.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from roomscan.core.contracts import CapturedObject, CapturedRoom
from roomscan.utils.geometry import primary_axis, project_xz, translation
from .contracts import LineSegment2D

DoorPredicate = Callable[[CapturedObject], bool]


def label_contains(keywords: Iterable[str]) -> DoorPredicate:
    """Predicate matching objects whose category contains any keyword (case-insensitive)."""
    needles = tuple(k.lower() for k in keywords if k)

    def _predicate(obj: CapturedObject) -> bool:
        label = obj.category.lower()
        return any(n in label for n in needles)

    return _predicate


is_door_label = label_contains(("door",))


def _oriented_segment(matrix_4x4: Sequence[float], half_length: float) -> LineSegment2D:
    center = translation(matrix_4x4)
    axis = primary_axis(matrix_4x4)
    start = project_xz(center - axis * half_length)
    end = project_xz(center + axis * half_length)
    return LineSegment2D(start=start.tolist(), end=end.tolist())


def build_wall_segments(room: CapturedRoom) -> list[LineSegment2D]:
    """One segment per wall, spanning dims.x along the wall's primary axis."""
    return [
        _oriented_segment(wall.transform.matrix_4x4, wall.dimensions[0] / 2.0)
        for wall in room.walls
    ]


def build_door_segments(
    room: CapturedRoom, is_door: DoorPredicate = is_door_label
) -> list[LineSegment2D]:
    """One segment per door object, spanning the larger horizontal extent."""
    segments = []
    for obj in room.objects:
        if not is_door(obj):
            continue
        half_length = max(obj.dimensions[0], obj.dimensions[2]) / 2.0
        segments.append(_oriented_segment(obj.transform.matrix_4x4, half_length))
    return segments
