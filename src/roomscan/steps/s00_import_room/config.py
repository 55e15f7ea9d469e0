"""Configuration for Step 00: Import a captured room dump."""

from pydantic import BaseModel, Field


class ImportRoomConfig(BaseModel):
    output_root: str = Field(
        "RoomScans", description="Folder under data_root holding one subfolder per scan"
    )
    snapshot_name: str = Field(
        "captured_room.json", description="File name of the normalized captured-room copy"
    )
    allow_empty: bool = Field(
        True, description="Accept rooms with no walls, floors or objects (exported as zero-size)"
    )
