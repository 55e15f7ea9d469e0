"""I/O contracts for Step 00: Import a captured room dump."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from roomscan.core.contracts import SCAN_ID_PATTERN


class ImportRoomInput(BaseModel):
    room_path: Path = Field(..., description="Path to the captured-room JSON dump")
    scan_id: Optional[str] = Field(
        None,
        pattern=SCAN_ID_PATTERN,
        description="Scan identifier; a fresh UUID4 is assigned when omitted",
    )


class ImportRoomOutput(BaseModel):
    captured_room_path: Path = Field(..., description="Path to the validated, normalized copy")
    scan_id: str = Field(..., description="Scan identifier namespacing this scan's artifacts")
    num_walls: int = Field(0, description="Number of wall surfaces")
    num_floors: int = Field(0, description="Number of floor surfaces")
    num_objects: int = Field(0, description="Number of captured objects")
