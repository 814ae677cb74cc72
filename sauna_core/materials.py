import re
from typing import Any, Dict, Tuple

from .catalog import MATERIALS, display_color, normalize_color, require
from .schema import PartSpec

# Palette value -> label, for naming exported materials
_PALETTE_NAMES: Dict[str, str] = {value.lower(): label for label, value in MATERIALS if value}


def hex_to_rgb(color: str) -> Tuple[float, float, float]:
    """'#e2c290' -> (0.886, 0.761, 0.565). Accepts the '#rgb' shorthand too."""
    digits = normalize_color(color)
    if digits is None:
        raise ValueError(f"Empty color: {color!r}")
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (1, 3, 5))


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")


def get_material_for_part(part: PartSpec) -> Dict[str, Any]:
    """
    Resolves the display material: the override color if set, else the kind default.
    Returns {'color': (r, g, b) in 0-1, 'hex': '#rrggbb', 'name': str}.
    """
    color = display_color(part.kind, part.material_color)
    if part.material_color:
        label = _PALETTE_NAMES.get(color.lower(), "custom_" + color.lstrip('#').lower())
    else:
        label = require(part.kind).label + "_default"
    return {'color': hex_to_rgb(color), 'hex': color, 'name': _slug(label)}
