from .catalog import MATERIALS, PARTS, InvalidColorError, PartDefinition, PartKind, UnknownPartKindError, lookup
from .collection import InteractionState, PartCollection
from .editor import SaunaEditor
from .layout import BASIC_SAUNA_PRESET, InvalidDimensionsError, SaunaLayoutGenerator, generate
from .placement import build_part, snap_to_grid
from .schema import PartSpec, PlacedPart

__all__ = [
    "MATERIALS",
    "PARTS",
    "InvalidColorError",
    "PartDefinition",
    "PartKind",
    "UnknownPartKindError",
    "lookup",
    "InteractionState",
    "PartCollection",
    "SaunaEditor",
    "BASIC_SAUNA_PRESET",
    "InvalidDimensionsError",
    "SaunaLayoutGenerator",
    "generate",
    "build_part",
    "snap_to_grid",
    "PartSpec",
    "PlacedPart",
]
