"""Configuration for Step 01: Room export (metadata JSON + SVG floorplan)."""

from pydantic import BaseModel, Field


class RoomExportConfig(BaseModel):
    output_root: str = Field(
        "RoomScans", description="Folder under data_root holding one subfolder per scan"
    )
    metadata_name: str = Field("room.json", description="Metadata artifact file name")
    floorplan_name: str = Field("room.svg", description="Floorplan artifact file name")

    # Canvas mapping
    scale: float = Field(100.0, gt=0, description="Canvas units per world meter")
    margin: float = Field(20.0, ge=0, description="Canvas border padding")

    # Door detection (case-insensitive substring match on category label)
    door_keywords: list[str] = Field(
        default=["door"], min_length=1, description="Category substrings marking an object as a door"
    )

    # Styling
    outline_color: str = Field("#111827", description="Boundary rectangle stroke")
    outline_stroke_width: float = Field(2.0, gt=0)
    wall_color: str = Field("#111827", description="Wall line stroke")
    wall_stroke_width: float = Field(3.0, gt=0)
    door_color: str = Field("#16a34a", description="Door line stroke")
    door_stroke_width: float = Field(2.0, gt=0)
    furniture_color: str = Field("#2563eb", description="Furniture marker fill")
    marker_radius: float = Field(6.0, gt=0)
    label_color: str = Field("#111827", description="Furniture label fill")
    label_font_size: float = Field(10.0, gt=0)
    label_offset: float = Field(8.0, description="Label offset right of / above the marker")

    json_indent: int = Field(2, ge=0, description="Indentation of the metadata JSON")
