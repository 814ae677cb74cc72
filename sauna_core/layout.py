"""
Layout Generator - procedural sauna room on the module grid.

Coordinates: x grows to the right, z grows towards the viewer, y is up.
The front wall runs along z = 0 and the room extends into negative z.
Walls are centered on module boundaries, so perpendicular walls meet at
the corners without filler pieces.
"""

import logging
import random
from typing import List, Optional, Tuple

from .catalog import PARTS, PartKind
from .collection import QUARTER_TURN
from .config import Settings
from .schema import PartSpec

logger = logging.getLogger(__name__)


class InvalidDimensionsError(ValueError):
    """Raised for module counts that are not positive integers."""


class SaunaLayoutGenerator:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    @staticmethod
    def _check_modules(name: str, value) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionsError(f"{name} must be an integer module count, got {value!r}")
        if value <= 0:
            raise InvalidDimensionsError(f"{name} must be at least 1 module, got {value}")
        return value

    def generate(self, width_modules: int, depth_modules: int) -> List[PartSpec]:
        """
        Lays out a closed room of `width_modules` x `depth_modules`.

        Order of the result: back wall, front wall (with door), left wall,
        right wall, bench row, heater. Same input, same geometry.
        """
        width = self._check_modules("width_modules", width_modules)
        depth = self._check_modules("depth_modules", depth_modules)

        m = self.settings.module_size
        wall = PARTS[PartKind.WALL]
        bench = PARTS[PartKind.BENCH]

        back_z = -depth * m
        right_x = width * m
        door_index = width // 2  # even widths round down

        parts: List[PartSpec] = []

        # Back wall
        for i in range(width):
            parts.append(self._part(PartKind.WALL, i * m + m / 2, back_z, 0.0))

        # Front wall, one module replaced by the door
        for i in range(width):
            kind = PartKind.DOOR if i == door_index else PartKind.WALL
            parts.append(self._part(kind, i * m + m / 2, 0.0, 0.0))

        # Left and right walls
        for j in range(depth):
            parts.append(self._part(PartKind.WALL, 0.0, -(j * m + m / 2), QUARTER_TURN))
        for j in range(depth):
            parts.append(self._part(PartKind.WALL, right_x, -(j * m + m / 2), QUARTER_TURN))

        # Bench row against the interior face of the back wall
        bench_inset = wall.thickness / 2 + bench.thickness / 2
        for i in range(width):
            parts.append(self._part(PartKind.BENCH, i * m + m / 2, back_z + bench_inset, 0.0))

        parts.append(self._place_heater(width, depth))

        logger.debug(
            "Generated %dx%d layout: %d parts, door at front index %d",
            width, depth, len(parts), door_index,
        )
        return parts

    def _place_heater(self, width: int, depth: int) -> PartSpec:
        m = self.settings.module_size
        wall = PARTS[PartKind.WALL]
        heater = PARTS[PartKind.HEATER]

        # Inset from the interior wall faces by half the heater footprint
        x = width * m - wall.thickness / 2 - heater.width / 2
        z = -(wall.thickness / 2 + heater.thickness / 2)

        if width == 1 and depth == 1:
            # The single front module is the door; use the back-right corner
            z = -depth * m + wall.thickness / 2 + heater.thickness / 2

        return self._part(PartKind.HEATER, x, z, 0.0)

    @staticmethod
    def _part(kind: PartKind, x: float, z: float, rotation_y: float) -> PartSpec:
        return PartSpec(
            kind=kind,
            position=(x, PARTS[kind].vertical_offset, z),
            rotation=(0.0, rotation_y, 0.0),
        )


def generate(width_modules: int, depth_modules: int, settings: Optional[Settings] = None) -> List[PartSpec]:
    return SaunaLayoutGenerator(settings).generate(width_modules, depth_modules)


def random_dimensions(rng: Optional[random.Random] = None, settings: Optional[Settings] = None) -> Tuple[int, int]:
    """Draws (width, depth) in modules for an auto-build with no chosen size."""
    rng = rng or random.Random()
    settings = settings or Settings()
    lo, hi = settings.random_min_modules, settings.random_max_modules
    return rng.randint(lo, hi), rng.randint(lo, hi)


# Fixed starter room offered by the toolbar
BASIC_SAUNA_PRESET: List[PartSpec] = [
    # Back wall
    PartSpec(kind=PartKind.WALL, position=(0.0, 1.5, -2.0)),
    PartSpec(kind=PartKind.WALL, position=(2.0, 1.5, -2.0)),
    # Side walls
    PartSpec(kind=PartKind.WALL, position=(-2.0, 1.5, 0.0), rotation=(0.0, QUARTER_TURN, 0.0)),
    PartSpec(kind=PartKind.WALL, position=(3.0, 1.5, 0.0), rotation=(0.0, QUARTER_TURN, 0.0)),
    PartSpec(kind=PartKind.BENCH, position=(0.0, 0.25, -1.5)),
    PartSpec(kind=PartKind.HEATER, position=(2.0, 0.4, 0.0)),
    PartSpec(kind=PartKind.DOOR, position=(1.0, 1.1, 2.0)),
]
