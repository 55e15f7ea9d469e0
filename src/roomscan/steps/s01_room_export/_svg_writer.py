"""SVG floorplan writer: boundary, walls, doors, furniture markers with labels."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING
from xml.sax.saxutils import escape

from ._canvas import CoordinateMapper
from .contracts import LineSegment2D, RoomExport

if TYPE_CHECKING:
    from .config import RoomExportConfig

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Characters outside the XML 1.0 Char production
_XML_INVALID = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def fmt(value: float) -> str:
    """Fixed two-decimal formatting used for every canvas number."""
    return f"{value:.2f}"


def xml_text(value: str) -> str:
    """Escape text content, dropping characters XML 1.0 cannot carry."""
    return escape(_XML_INVALID.sub("", value))


def _line(
    mapper: CoordinateMapper, seg: LineSegment2D, stroke: str, stroke_width: float
) -> str:
    x1, y1 = mapper.map_point(seg.start)
    x2, y2 = mapper.map_point(seg.end)
    return (
        f'<line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
        f'stroke="{stroke}" stroke-width="{fmt(stroke_width)}"/>'
    )


def render_floorplan_svg(
    export: RoomExport,
    mapper: CoordinateMapper,
    wall_segments: list[LineSegment2D],
    door_segments: list[LineSegment2D],
    config: RoomExportConfig,
) -> str:
    """Render the floorplan document as a single-line SVG string."""
    dims = export.dimensions
    svg_w, svg_h = mapper.canvas_size(dims)
    rect_w = dims.length * mapper.scale
    rect_h = dims.width * mapper.scale

    out = [
        f'<svg xmlns="{SVG_NS}" width="{fmt(svg_w)}" height="{fmt(svg_h)}" '
        f'viewBox="0 0 {fmt(svg_w)} {fmt(svg_h)}">',
        f'<rect x="{fmt(mapper.margin)}" y="{fmt(mapper.margin)}" '
        f'width="{fmt(rect_w)}" height="{fmt(rect_h)}" fill="none" '
        f'stroke="{config.outline_color}" stroke-width="{fmt(config.outline_stroke_width)}"/>',
    ]

    for seg in wall_segments:
        out.append(_line(mapper, seg, config.wall_color, config.wall_stroke_width))

    for seg in door_segments:
        out.append(_line(mapper, seg, config.door_color, config.door_stroke_width))

    skipped = 0
    for item in export.furniture:
        if len(item.position) < 3:
            skipped += 1
            continue
        cx, cy = mapper.map_position(item.position)
        out.append(
            f'<circle cx="{fmt(cx)}" cy="{fmt(cy)}" r="{fmt(config.marker_radius)}" '
            f'fill="{config.furniture_color}"/>'
        )
        out.append(
            f'<text x="{fmt(cx + config.label_offset)}" y="{fmt(cy - config.label_offset)}" '
            f'font-size="{fmt(config.label_font_size)}" fill="{config.label_color}">'
            f"{xml_text(item.type)}</text>"
        )
    if skipped:
        logger.warning(f"Skipped {skipped} furniture items without a 3D position")

    out.append("</svg>")
    return "".join(out)
