"""
Floor footprints and overlap reporting.

Footprints live in the (x, z) plane. Overlaps are reported for inspection
only; the model never moves or rejects parts because of them.
"""

import math
from typing import List, Sequence, Tuple

from shapely import affinity
from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from .catalog import PartKind, require
from .schema import PartSpec

PERIMETER_KINDS = {PartKind.WALL, PartKind.DOOR, PartKind.WINDOW}

# Slack for rotated footprints, whose corners carry float noise from cos(pi/2)
JOINT_TOLERANCE = 1e-9


def _place(shape: BaseGeometry, part: PartSpec) -> BaseGeometry:
    # A positive y-rotation carries +x towards -z, hence the negated angle in (x, z)
    shape = affinity.rotate(shape, -part.rotation_y, origin=(0, 0), use_radians=True)
    return affinity.translate(shape, part.position[0], part.position[2])


def footprint(part: PartSpec) -> Polygon:
    """Box of (width x thickness) centered on the part, turned about the vertical axis."""
    definition = require(part.kind)
    w, t = definition.width, definition.thickness
    return _place(box(-w / 2, -t / 2, w / 2, t / 2), part)


def end_zones(part: PartSpec, reach: float) -> BaseGeometry:
    """The first and last `reach` meters along the part's length, over its full thickness."""
    definition = require(part.kind)
    w, t = definition.width, definition.thickness
    reach = min(reach, w / 2)
    ends = unary_union([
        box(-w / 2, -t / 2, -w / 2 + reach, t / 2),
        box(w / 2 - reach, -t / 2, w / 2, t / 2),
    ])
    return _place(ends, part)


def is_corner_joint(a: PartSpec, b: PartSpec) -> bool:
    """
    Two perimeter pieces meeting end to end at right angles, which the grid
    accepts as touching. The shared area must sit in an end of both pieces;
    pieces crossing mid-span or butting into the middle of another are not joints.
    """
    if a.kind not in PERIMETER_KINDS or b.kind not in PERIMETER_KINDS:
        return False
    if abs(math.sin(a.rotation_y - b.rotation_y)) <= 0.999:
        return False

    shared = footprint(a).intersection(footprint(b))
    if shared.is_empty:
        return False
    reach = max(require(a.kind).thickness, require(b.kind).thickness)
    return all(
        end_zones(part, reach).buffer(JOINT_TOLERANCE).contains(shared)
        for part in (a, b)
    )


def find_overlaps(parts: Sequence[PartSpec], min_area: float = 1e-9) -> List[Tuple[int, int, float]]:
    """Returns (i, j, area) for every pair whose footprints share more than `min_area`."""
    shapes = [footprint(p) for p in parts]
    overlaps = []
    for i in range(len(parts)):
        for j in range(i + 1, len(parts)):
            if not shapes[i].intersects(shapes[j]):
                continue
            if is_corner_joint(parts[i], parts[j]):
                continue
            area = shapes[i].intersection(shapes[j]).area
            if area > min_area:
                overlaps.append((i, j, area))
    return overlaps


def room_bounds(parts: Sequence[PartSpec]) -> Tuple[float, float, float, float]:
    """(min_x, min_z, max_x, max_z) over all footprints."""
    if not parts:
        return (0.0, 0.0, 0.0, 0.0)
    bounds = [footprint(p).bounds for p in parts]
    return (
        min(b[0] for b in bounds),
        min(b[1] for b in bounds),
        max(b[2] for b in bounds),
        max(b[3] for b in bounds),
    )
