import math
import uuid
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .catalog import PartKind, normalize_color, parse_kind

Vec3 = Tuple[float, float, float]


def new_part_id() -> str:
    return str(uuid.uuid4())


class PartSpec(BaseModel):
    """
    A part that is fully positioned but not yet part of a collection.
    Generator and preset output; gets an id on insertion.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: PartKind = Field(alias="type")
    position: Vec3  # [x, y, z] meters, y up
    rotation: Vec3 = (0.0, 0.0, 0.0)  # [rx, ry, rz] radians, only ry is used
    material_color: Optional[str] = Field(default=None, alias="materialColor")

    @field_validator("kind", mode="before")
    @classmethod
    def _known_kind(cls, value):
        return parse_kind(value)

    @field_validator("rotation")
    @classmethod
    def _vertical_axis_only(cls, value: Vec3) -> Vec3:
        if value[0] != 0 or value[2] != 0:
            raise ValueError(f"rotation must be about the vertical axis only, got {value}")
        if not math.isfinite(value[1]):
            raise ValueError(f"rotation must be finite, got {value}")
        return value

    @field_validator("material_color")
    @classmethod
    def _hex_or_default(cls, value: Optional[str]) -> Optional[str]:
        return normalize_color(value)

    @property
    def rotation_y(self) -> float:
        return self.rotation[1]


class PlacedPart(PartSpec):
    id: str

    @classmethod
    def from_spec(cls, spec: PartSpec) -> "PlacedPart":
        """Stamps a fresh id on `spec`, ignoring any id it already carries."""
        return cls(
            id=new_part_id(),
            kind=spec.kind,
            position=spec.position,
            rotation=spec.rotation,
            material_color=spec.material_color,
        )

    def to_record(self) -> dict:
        # Persisted/wire form: {id, type, position, rotation, materialColor?}
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
