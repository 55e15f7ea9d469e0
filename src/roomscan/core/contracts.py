"""Common Pydantic models shared across pipeline steps."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Scan ids name a folder, so no separators or leading dots
SCAN_ID_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._-]*$"

# Capture coordinates are meters; anything beyond this is sensor garbage and
# would overflow the bounds and canvas arithmetic
MAX_COORDINATE = 1e9

Coordinate = Annotated[float, Field(ge=-MAX_COORDINATE, le=MAX_COORDINATE, allow_inf_nan=False)]
Extent = Annotated[float, Field(ge=0, le=MAX_COORDINATE, allow_inf_nan=False)]

IDENTITY_4X4 = [
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]


class Transform(BaseModel):
    """Rigid 3D transform: 4x4 local-to-world matrix stored as flat list (row-major).

    Column 3 holds the translation; columns 0-2 hold the rotation axes.
    """

    model_config = ConfigDict(frozen=True)

    matrix_4x4: list[Coordinate] = Field(
        default_factory=lambda: list(IDENTITY_4X4), min_length=16, max_length=16
    )

    @field_validator("matrix_4x4", mode="before")
    @classmethod
    def _flatten_nested(cls, value: Any) -> Any:
        # Accept [[r0], [r1], [r2], [r3]] as well as the flat form
        if isinstance(value, (list, tuple)) and value and isinstance(value[0], (list, tuple)):
            return [v for row in value for v in row]
        return value


class CapturedSurface(BaseModel):
    """A wall or floor plane reported by the capture session."""

    model_config = ConfigDict(frozen=True)

    transform: Transform = Field(default_factory=Transform)
    dimensions: list[Extent] = Field(
        ..., min_length=3, max_length=3, description="Local-space extents (x, y, z), non-negative"
    )


class CapturedObject(BaseModel):
    """Furniture or fixture reported by the capture session."""

    model_config = ConfigDict(frozen=True)

    transform: Transform = Field(default_factory=Transform)
    dimensions: list[Extent] = Field(
        ..., min_length=3, max_length=3, description="Local-space extents (x, y, z), non-negative"
    )
    category: str = Field(..., description="Free-text category label, e.g. 'table', 'door'")

    @field_validator("category")
    @classmethod
    def _encodable_label(cls, value: str) -> str:
        # Lone surrogates survive JSON decoding but cannot be written as UTF-8
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"category is not valid UTF-8 text: {e.reason}") from e
        return value


class CapturedRoom(BaseModel):
    """Snapshot of one completed capture session. Read-only pipeline input."""

    model_config = ConfigDict(frozen=True)

    walls: list[CapturedSurface] = Field(default_factory=list)
    floors: list[CapturedSurface] = Field(default_factory=list)
    objects: list[CapturedObject] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.walls or self.floors or self.objects)


class PipelineConfig(BaseModel):
    """Top-level pipeline configuration loaded from pipeline.yaml."""

    project_name: str = "roomscan"
    data_root: Path = Path("./data")
    steps: list[StepEntry] = Field(default_factory=list)


class StepEntry(BaseModel):
    """One entry in the pipeline step list."""

    name: str
    module: str
    config_file: Optional[str] = None
    depends_on: list[str] = Field(default_factory=list)
    inputs: dict[str, Any] = Field(
        default_factory=dict, description="Static input fields, overridden by dependency outputs"
    )
    enabled: bool = True


# Fix forward reference
PipelineConfig.model_rebuild()
