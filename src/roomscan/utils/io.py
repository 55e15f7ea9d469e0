"""I/O utilities: captured-room loading, atomic artifact writes."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from roomscan.core.contracts import CapturedRoom

logger = logging.getLogger(__name__)


class ArtifactWriteError(OSError):
    """Durable write of one export artifact failed.

    ``artifact`` names which one ("metadata" or "floorplan"); the underlying
    OSError is chained as ``__cause__``.
    """

    def __init__(self, artifact: str, path: Path, reason: str):
        super().__init__(f"Failed to write {artifact} artifact to {path}: {reason}")
        self.artifact = artifact
        self.path = Path(path)


# ── Captured room ────────────────────────────────────────────────────

def read_captured_room(path: Path) -> CapturedRoom:
    """Load and validate a captured-room JSON dump."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Captured room not found: {path}")
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return CapturedRoom.model_validate(raw)


# ── Atomic writes ────────────────────────────────────────────────────

def write_atomic(path: Path, data: str | bytes, artifact: str) -> Path:
    """Write ``data`` to ``path`` so readers see either nothing or the full file.

    Writes to a temp file in the target directory, fsyncs, then renames over
    the destination. The temp file is removed on every failure path.
    """
    path = Path(path)
    tmp_name = None
    try:
        payload = data.encode("utf-8") if isinstance(data, str) else data
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, UnicodeError) as e:
        logger.error(f"Writing {artifact} to {path} failed: {e}")
        raise ArtifactWriteError(artifact, path, str(e)) from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.debug(f"Wrote {artifact} ({len(payload)} bytes) -> {path}")
    return path
