import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Union

from .catalog import PartKind, normalize_color, require
from .placement import build_part
from .schema import PartSpec, PlacedPart, Vec3

logger = logging.getLogger(__name__)

FULL_TURN = 2 * math.pi
QUARTER_TURN = math.pi / 2


def normalize_angle(angle: float) -> float:
    """Wraps `angle` into [0, 2pi). Arbitrary angles are kept, not snapped."""
    wrapped = math.fmod(angle, FULL_TURN)
    if wrapped < 0:
        wrapped += FULL_TURN
    # fmod of a value just below 2pi can round up to exactly 2pi
    return 0.0 if wrapped >= FULL_TURN else wrapped


@dataclass(frozen=True)
class InteractionState:
    """Tool/selection state owned by the input layer and threaded through each operation."""
    active_tool: Optional[PartKind] = None
    selected_part_id: Optional[str] = None
    pending_rotation: float = 0.0


class PartCollection:
    """
    Ordered list of placed parts. Order is insertion order and only matters for paint order.
    Parts are immutable; updates replace the entry in place.
    """

    def __init__(self, parts: Optional[Iterable[PlacedPart]] = None):
        self._parts: List[PlacedPart] = list(parts or [])

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[PlacedPart]:
        return iter(list(self._parts))

    def snapshot(self) -> List[PlacedPart]:
        return list(self._parts)

    def get(self, part_id: str) -> Optional[PlacedPart]:
        for part in self._parts:
            if part.id == part_id:
                return part
        return None

    def _index_of(self, part_id: Optional[str]) -> int:
        for i, part in enumerate(self._parts):
            if part.id == part_id:
                return i
        return -1

    def place(self, kind: Union[str, PartKind], point: Vec3, rotation_y: float = 0.0) -> PlacedPart:
        """
        Appends a new part at `point`. The vertical coordinate comes from the
        kind's offset; point[1] is ignored.
        """
        part = PlacedPart.from_spec(build_part(require(kind).kind, point, rotation_y))
        self._parts.append(part)
        logger.debug("Placed %s %s at %s", part.kind.value, part.id, part.position)
        return part

    def rotate(self, part_id: str) -> Optional[PlacedPart]:
        i = self._index_of(part_id)
        if i < 0:
            logger.debug("rotate: part %s not found, ignoring", part_id)
            return None
        part = self._parts[i]
        ry = normalize_angle(part.rotation_y + QUARTER_TURN)
        self._parts[i] = part.model_copy(update={"rotation": (part.rotation[0], ry, part.rotation[2])})
        return self._parts[i]

    def recolor(self, part_id: str, color: Optional[str]) -> Optional[PlacedPart]:
        """Raises InvalidColorError for a color that is not a hex token, even for a missing id."""
        color = normalize_color(color)
        i = self._index_of(part_id)
        if i < 0:
            logger.debug("recolor: part %s not found, ignoring", part_id)
            return None
        # model_copy skips validation, so the color is normalized above
        self._parts[i] = self._parts[i].model_copy(update={"material_color": color})
        return self._parts[i]

    def remove(self, part_id: str) -> bool:
        i = self._index_of(part_id)
        if i < 0:
            logger.debug("remove: part %s not found, ignoring", part_id)
            return False
        del self._parts[i]
        return True

    def clear(self) -> InteractionState:
        """Empties the collection. Returns the reset interaction state."""
        self._parts = []
        return InteractionState()

    def replace_all(self, parts: Iterable[PartSpec]) -> List[PlacedPart]:
        """Replaces the contents; every incoming part gets a fresh id."""
        self._parts = [PlacedPart.from_spec(spec) for spec in parts]
        logger.debug("Replaced collection with %d parts", len(self._parts))
        return list(self._parts)

    def kinds(self) -> List[PartKind]:
        return [p.kind for p in self._parts]
