import math
from typing import Optional, Sequence, Union

from .catalog import PartKind, require
from .schema import PartSpec, Vec3


def snap_to_grid(point: Sequence[float], step: float = 1.0) -> Vec3:
    """
    Rounds a raw pick point onto the floor grid. Only x and z are kept;
    y is dropped because placement height comes from the part kind.
    """
    if step <= 0:
        raise ValueError(f"grid step must be positive, got {step}")
    # half-up rounding, matching the pointer snap of the viewport
    x = math.floor(point[0] / step + 0.5) * step
    z = math.floor(point[2] / step + 0.5) * step
    return (float(x), 0.0, float(z))


def build_part(active_tool: Optional[Union[str, PartKind]], pick_point: Sequence[float],
               pending_rotation: float = 0.0) -> Optional[PartSpec]:
    """
    Turns a pick on the floor into a ready-to-place part.

    Returns None when no tool is active; the caller treats that pick as a deselect.
    The pick's y is untrusted and replaced by the kind's vertical offset.
    """
    if active_tool is None:
        return None

    definition = require(active_tool)
    return PartSpec(
        kind=definition.kind,
        position=(float(pick_point[0]), definition.vertical_offset, float(pick_point[2])),
        rotation=(0.0, pending_rotation, 0.0),
    )


def ghost_part(active_tool: Optional[Union[str, PartKind]], hover_point: Optional[Sequence[float]],
               pending_rotation: float = 0.0) -> Optional[PartSpec]:
    """Preview of what a click at `hover_point` would place. Never stored."""
    if hover_point is None:
        return None
    return build_part(active_tool, hover_point, pending_rotation)
