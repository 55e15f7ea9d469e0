"""I/O contracts for Step 01: Room export (captured room -> room.json + room.svg)."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, FiniteFloat

from roomscan.core.contracts import SCAN_ID_PATTERN


class RoomBounds(BaseModel):
    """Axis-aligned world-space box; min <= max component-wise."""

    min: list[float] = Field(..., min_length=3, max_length=3)
    max: list[float] = Field(..., min_length=3, max_length=3)

    @property
    def extent(self) -> list[float]:
        return [hi - lo for lo, hi in zip(self.min, self.max)]


class LineSegment2D(BaseModel):
    """Top-down (x, z) segment. No ordering between start and end."""

    start: list[float] = Field(..., min_length=2, max_length=2)
    end: list[float] = Field(..., min_length=2, max_length=2)

    @property
    def length(self) -> float:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return (dx * dx + dy * dy) ** 0.5


class RoomDimensions(BaseModel):
    length: FiniteFloat = Field(0.0, ge=0, description="X extent (m)")
    width: FiniteFloat = Field(0.0, ge=0, description="Z extent (m)")
    height: FiniteFloat = Field(0.0, ge=0, description="Y extent (m)")


class FurnitureItem(BaseModel):
    type: str = Field(..., description="Category label, verbatim")
    position: list[float] = Field(..., description="World position (x, y, z)")


class RoomExport(BaseModel):
    """The metadata record written as room.json."""

    dimensions: RoomDimensions = Field(default_factory=RoomDimensions)
    furniture: list[FurnitureItem] = Field(default_factory=list)


class RoomExportInput(BaseModel):
    captured_room_path: Path = Field(..., description="Captured room JSON from s00")
    scan_id: str = Field(..., pattern=SCAN_ID_PATTERN, description="Scan identifier")


class RoomExportOutput(BaseModel):
    scan_dir: Path = Field(..., description="Folder holding this scan's artifacts")
    metadata_path: Path = Field(..., description="Path to room.json")
    floorplan_path: Path = Field(..., description="Path to room.svg")
    dimensions: RoomDimensions = Field(default_factory=RoomDimensions)
    num_walls: int = Field(0, description="Wall segments drawn")
    num_doors: int = Field(0, description="Door segments drawn")
    num_furniture: int = Field(0, description="Furniture items exported")
