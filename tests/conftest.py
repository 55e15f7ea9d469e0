"""Shared pytest fixtures for roomscan pipeline tests."""

import json
import math
from pathlib import Path

import pytest


def make_matrix(
    translation=(0.0, 0.0, 0.0), yaw_degrees: float = 0.0
) -> list[float]:
    """Row-major 4x4 transform: rotation about +Y by ``yaw_degrees``, then translation."""
    a = math.radians(yaw_degrees)
    c, s = math.cos(a), math.sin(a)
    tx, ty, tz = translation
    return [
        c, 0.0, s, tx,
        0.0, 1.0, 0.0, ty,
        -s, 0.0, c, tz,
        0.0, 0.0, 0.0, 1.0,
    ]


def surface(translation=(0.0, 0.0, 0.0), dimensions=(1.0, 1.0, 1.0), yaw_degrees=0.0) -> dict:
    return {
        "transform": {"matrix_4x4": make_matrix(translation, yaw_degrees)},
        "dimensions": list(dimensions),
    }


def room_object(category, translation=(0.0, 0.0, 0.0), dimensions=(1.0, 1.0, 1.0), yaw_degrees=0.0) -> dict:
    return {**surface(translation, dimensions, yaw_degrees), "category": category}


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Create a temporary data root with standard directory structure."""
    for subdir in ["raw", "RoomScans"]:
        (tmp_path / subdir).mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture
def sample_room_dict() -> dict:
    """A 4 x 3 m room, 2.5 m tall: four walls, one floor, a door and a table."""
    return {
        "walls": [
            surface((2.0, 1.25, 0.0), (4.0, 2.5, 0.0)),
            surface((2.0, 1.25, 3.0), (4.0, 2.5, 0.0)),
            surface((0.0, 1.25, 1.5), (3.0, 2.5, 0.0), yaw_degrees=90.0),
            surface((4.0, 1.25, 1.5), (3.0, 2.5, 0.0), yaw_degrees=90.0),
        ],
        "floors": [
            surface((2.0, 0.0, 1.5), (4.0, 0.0, 3.0)),
        ],
        "objects": [
            room_object("door", (1.0, 1.0, 0.0), (0.9, 2.0, 0.1)),
            room_object("table", (2.0, 0.4, 1.5), (1.2, 0.8, 0.8)),
        ],
    }


@pytest.fixture
def sample_room_json(data_root: Path, sample_room_dict: dict) -> Path:
    """Write the sample room as a captured-room dump."""
    path = data_root / "raw" / "captured_room.json"
    with open(path, "w") as f:
        json.dump(sample_room_dict, f)
    return path


@pytest.fixture
def empty_room_json(data_root: Path) -> Path:
    path = data_root / "raw" / "empty_room.json"
    path.write_text(json.dumps({"walls": [], "floors": [], "objects": []}))
    return path
