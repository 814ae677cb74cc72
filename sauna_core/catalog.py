"""
Part Catalog - static registry of placeable sauna parts.

Each kind has a label, a display color, a box footprint (width, height,
thickness in meters) and the height of its center above the floor.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class PartKind(str, Enum):
    WALL = "wall"
    HEATER = "heater"
    BENCH = "bench"
    DOOR = "door"
    WINDOW = "window"


class UnknownPartKindError(ValueError):
    """Raised when a tag outside the closed PartKind set reaches the core."""


class InvalidColorError(ValueError):
    """Raised for a material color that is not a #rgb or #rrggbb hex token."""


@dataclass(frozen=True)
class PartDefinition:
    kind: PartKind
    label: str
    color: str
    dimensions: Tuple[float, float, float]  # width, height, thickness
    vertical_offset: float  # center height above floor

    @property
    def width(self) -> float:
        return self.dimensions[0]

    @property
    def height(self) -> float:
        return self.dimensions[1]

    @property
    def thickness(self) -> float:
        return self.dimensions[2]


PARTS: Dict[PartKind, PartDefinition] = {
    PartKind.WALL: PartDefinition(PartKind.WALL, "Wall", "#8b5a2b", (2.0, 3.0, 0.2), 1.5),
    # Non-square so rotation stays visible
    PartKind.HEATER: PartDefinition(PartKind.HEATER, "Heater", "#333333", (0.6, 0.8, 0.4), 0.4),
    PartKind.BENCH: PartDefinition(PartKind.BENCH, "Bench", "#d2b48c", (2.0, 0.5, 0.6), 0.25),
    PartKind.DOOR: PartDefinition(PartKind.DOOR, "Door", "#a0522d", (1.0, 2.2, 0.1), 1.1),
    # Mounted at mid-wall height, not on the floor
    PartKind.WINDOW: PartDefinition(PartKind.WINDOW, "Window", "#87ceeb", (1.0, 1.0, 0.1), 1.5),
}

# (label, value); an empty value means "use the part's default color"
MATERIALS: List[Tuple[str, str]] = [
    ("Default", ""),
    ("Wood Light", "#e2c290"),
    ("Wood Dark", "#5c4033"),
    ("Stone", "#7d7d7d"),
    ("Tile White", "#ececec"),
    ("Tile Blue", "#87ceeb"),
]

_HEX_COLOR = re.compile(r"^(?:#([0-9a-fA-F]{3})|#?([0-9a-fA-F]{6}))$")


def parse_kind(value: Union[str, PartKind]) -> PartKind:
    if isinstance(value, PartKind):
        return value
    try:
        return PartKind(value)
    except ValueError:
        raise UnknownPartKindError(
            f"Unknown part kind {value!r}; expected one of {[k.value for k in PartKind]}"
        ) from None


def lookup(kind: Union[str, PartKind]) -> Optional[PartDefinition]:
    """
    Returns the definition for `kind`, or None if the kind is unknown.
    Renderers treat None as "skip this part".
    """
    try:
        return PARTS[parse_kind(kind)]
    except UnknownPartKindError:
        logger.debug("Catalog lookup miss for %r", kind)
        return None


def require(kind: Union[str, PartKind]) -> PartDefinition:
    return PARTS[parse_kind(kind)]


def vertical_offset(kind: Union[str, PartKind]) -> float:
    return require(kind).vertical_offset


def display_color(kind: Union[str, PartKind], material_color: Optional[str] = None) -> str:
    if material_color:
        return material_color
    return require(kind).color


def normalize_color(value: Optional[str]) -> Optional[str]:
    """
    Canonical form of a material override: '#rrggbb' in lower case, or None
    for "use the kind default". Shorthand '#rgb' is expanded.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidColorError(f"Color must be a string, got {value!r}")
    token = value.strip()
    if not token:
        return None
    match = _HEX_COLOR.match(token)
    if not match:
        raise InvalidColorError(f"Not a #rgb or #rrggbb color: {value!r}")
    digits = (match.group(1) or match.group(2)).lower()
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return "#" + digits
