"""Step 00: Import a captured room (walls, floors, objects) into the pipeline.

Validates the capture session's JSON dump against the CapturedRoom contract,
rejecting malformed transforms (NaN/inf, wrong arity) at the boundary, and
stores a normalized copy in the scan's folder for the export step.
"""

from __future__ import annotations

import logging
import uuid
from typing import ClassVar

from pydantic import ValidationError

from roomscan.core.step_base import BaseStep
from roomscan.utils.io import read_captured_room, write_atomic
from .config import ImportRoomConfig
from .contracts import ImportRoomInput, ImportRoomOutput

logger = logging.getLogger(__name__)


def new_scan_id() -> str:
    """Fresh, unique scan identifier."""
    return str(uuid.uuid4()).upper()


class ImportRoomStep(BaseStep[ImportRoomInput, ImportRoomOutput, ImportRoomConfig]):
    name: ClassVar[str] = "import_room"
    input_type: ClassVar = ImportRoomInput
    output_type: ClassVar = ImportRoomOutput
    config_type: ClassVar = ImportRoomConfig

    def validate_inputs(self, inputs: ImportRoomInput) -> bool:
        if not inputs.room_path.exists():
            logger.error(f"Captured room file not found: {inputs.room_path}")
            return False
        if inputs.room_path.suffix.lower() != ".json":
            logger.error(f"Expected .json file, got: {inputs.room_path.suffix}")
            return False
        return True

    def run(self, inputs: ImportRoomInput) -> ImportRoomOutput:
        scan_id = inputs.scan_id or new_scan_id()

        # --- 1. Load and validate ---
        try:
            room = read_captured_room(inputs.room_path)
        except ValidationError as e:
            logger.error(f"Malformed captured room {inputs.room_path}: {e.error_count()} errors")
            raise ValueError(f"Malformed captured room: {inputs.room_path}") from e

        if room.is_empty:
            if not self.config.allow_empty:
                raise ValueError(f"Captured room has no geometry: {inputs.room_path}")
            logger.warning("Captured room has no walls, floors or objects")

        logger.info(
            f"Loaded room: {len(room.walls)} walls, {len(room.floors)} floors, "
            f"{len(room.objects)} objects"
        )

        # --- 2. Store normalized snapshot ---
        scan_dir = self.data_root / self.config.output_root / scan_id
        snapshot_path = write_atomic(
            scan_dir / self.config.snapshot_name,
            room.model_dump_json(indent=2),
            artifact="snapshot",
        )
        logger.info(f"Scan {scan_id}: snapshot -> {snapshot_path}")

        return ImportRoomOutput(
            captured_room_path=snapshot_path,
            scan_id=scan_id,
            num_walls=len(room.walls),
            num_floors=len(room.floors),
            num_objects=len(room.objects),
        )
