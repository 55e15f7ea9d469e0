"""Room export: dimensions, furniture, segments, and both serialized artifacts.

``export_room`` is pure (no I/O) and can be re-run freely; ``write_artifacts``
is the only function with side effects. A failed write is retried by calling
``write_artifacts`` again with the same artifacts.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from roomscan.core.contracts import CapturedRoom
from roomscan.utils.geometry import translation
from roomscan.utils.io import write_atomic
from ._bounds import compute_room_bounds
from ._canvas import CoordinateMapper
from ._segments import DoorPredicate, build_door_segments, build_wall_segments, label_contains
from ._svg_writer import render_floorplan_svg
from .config import RoomExportConfig
from .contracts import (
    FurnitureItem,
    LineSegment2D,
    RoomBounds,
    RoomDimensions,
    RoomExport,
)

logger = logging.getLogger(__name__)


@dataclass
class RoomArtifacts:
    """Everything one export produces, before anything touches disk."""

    export: RoomExport
    bounds: Optional[RoomBounds]
    wall_segments: list[LineSegment2D] = field(default_factory=list)
    door_segments: list[LineSegment2D] = field(default_factory=list)
    metadata_json: str = ""
    floorplan_svg: str = ""


def compute_dimensions(bounds: Optional[RoomBounds]) -> RoomDimensions:
    """length = X extent, width = Z extent, height = Y extent; zero without bounds."""
    if bounds is None:
        return RoomDimensions()
    dx, dy, dz = (max(e, 0.0) for e in bounds.extent)
    return RoomDimensions(length=dx, width=dz, height=dy)


def build_furniture(room: CapturedRoom) -> list[FurnitureItem]:
    return [
        FurnitureItem(
            type=obj.category,
            position=translation(obj.transform.matrix_4x4).tolist(),
        )
        for obj in room.objects
    ]


def serialize_metadata(export: RoomExport, indent: int = 2) -> str:
    """Deterministic JSON: sorted keys, plain floats."""
    return json.dumps(export.model_dump(mode="json"), indent=indent, sort_keys=True)


def parse_metadata(text: str) -> RoomExport:
    return RoomExport.model_validate_json(text)


def export_room(
    room: CapturedRoom,
    config: Optional[RoomExportConfig] = None,
    is_door: Optional[DoorPredicate] = None,
) -> RoomArtifacts:
    """Run bounds -> dimensions -> furniture -> segments -> serialization."""
    config = config or RoomExportConfig()
    is_door = is_door or label_contains(config.door_keywords)

    # --- 1. Bounds and dimensions ---
    bounds = compute_room_bounds(room)
    if bounds is None:
        logger.warning("No geometry in captured room; exporting zero-size room")
    dimensions = compute_dimensions(bounds)

    # --- 2. Furniture and segments ---
    furniture = build_furniture(room)
    wall_segments = build_wall_segments(room)
    door_segments = build_door_segments(room, is_door=is_door)
    logger.info(
        f"Room {dimensions.length:.2f} x {dimensions.width:.2f} x {dimensions.height:.2f} m: "
        f"{len(wall_segments)} walls, {len(door_segments)} doors, {len(furniture)} furniture"
    )

    # --- 3. Serialize ---
    export = RoomExport(dimensions=dimensions, furniture=furniture)
    mapper = CoordinateMapper.from_bounds(bounds, scale=config.scale, margin=config.margin)
    svg = render_floorplan_svg(export, mapper, wall_segments, door_segments, config)

    return RoomArtifacts(
        export=export,
        bounds=bounds,
        wall_segments=wall_segments,
        door_segments=door_segments,
        metadata_json=serialize_metadata(export, indent=config.json_indent),
        floorplan_svg=svg,
    )


def write_artifacts(
    artifacts: RoomArtifacts,
    scan_dir: Path,
    metadata_name: str = "room.json",
    floorplan_name: str = "room.svg",
) -> tuple[Path, Path]:
    """Atomically write room.json then room.svg. Raises ArtifactWriteError."""
    scan_dir = Path(scan_dir)
    metadata_path = write_atomic(
        scan_dir / metadata_name, artifacts.metadata_json, artifact="metadata"
    )
    floorplan_path = write_atomic(
        scan_dir / floorplan_name, artifacts.floorplan_svg, artifact="floorplan"
    )
    logger.info(f"Artifacts written: {metadata_path.name}, {floorplan_path.name} -> {scan_dir}")
    return metadata_path, floorplan_path
