"""Step 01: Room export: captured room -> room.json metadata + room.svg floorplan.

Bounds come from wall/floor extents (objects as fallback), walls and doors
become oriented (x, z) segments, and the floorplan is drawn on a canvas sized
to the room at ``scale`` units per meter plus ``margin`` on every side.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from roomscan.core.step_base import BaseStep
from roomscan.utils.io import read_captured_room
from ._exporter import export_room, write_artifacts
from .config import RoomExportConfig
from .contracts import RoomExportInput, RoomExportOutput

logger = logging.getLogger(__name__)


class RoomExportStep(BaseStep[RoomExportInput, RoomExportOutput, RoomExportConfig]):
    name: ClassVar[str] = "room_export"
    input_type: ClassVar = RoomExportInput
    output_type: ClassVar = RoomExportOutput
    config_type: ClassVar = RoomExportConfig

    def validate_inputs(self, inputs: RoomExportInput) -> bool:
        if not inputs.captured_room_path.exists():
            logger.error(f"Captured room not found: {inputs.captured_room_path}")
            return False
        return True

    def run(self, inputs: RoomExportInput) -> RoomExportOutput:
        room = read_captured_room(inputs.captured_room_path)
        artifacts = export_room(room, self.config)

        scan_dir = self.data_root / self.config.output_root / inputs.scan_id
        metadata_path, floorplan_path = write_artifacts(
            artifacts,
            scan_dir,
            metadata_name=self.config.metadata_name,
            floorplan_name=self.config.floorplan_name,
        )

        return RoomExportOutput(
            scan_dir=scan_dir,
            metadata_path=metadata_path,
            floorplan_path=floorplan_path,
            dimensions=artifacts.export.dimensions,
            num_walls=len(artifacts.wall_segments),
            num_doors=len(artifacts.door_segments),
            num_furniture=len(artifacts.export.furniture),
        )
