import logging
import os
from typing import Iterable

import numpy as np

from ..catalog import require
from ..materials import get_material_for_part
from ..schema import PartSpec

logger = logging.getLogger(__name__)

# Unit cube corners, bottom ring then top ring
_CORNERS = np.array([
    [-0.5, -0.5, 0.5], [0.5, -0.5, 0.5], [0.5, -0.5, -0.5], [-0.5, -0.5, -0.5],
    [-0.5, 0.5, 0.5], [0.5, 0.5, 0.5], [0.5, 0.5, -0.5], [-0.5, 0.5, -0.5],
])


def box_vertices(part: PartSpec) -> np.ndarray:
    """World-space corners (8 x 3) of the part's box, Y-up."""
    definition = require(part.kind)
    local = _CORNERS * np.array(definition.dimensions)
    c, s = np.cos(part.rotation_y), np.sin(part.rotation_y)
    rot_y = np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])
    return local @ rot_y.T + np.array(part.position)


class ObjExporter:
    @staticmethod
    def export(parts: Iterable[PartSpec], output_path: str):
        """
        Writes the parts as boxes to .obj plus a sibling .mtl.
        One material per distinct display color.
        """
        parts = list(parts)
        base_name = os.path.splitext(os.path.basename(output_path))[0]
        mtl_filename = f"{base_name}.mtl"
        obj_lines = [f"mtllib {mtl_filename}", ""]
        mtl_lines = []

        # 1. Materials first
        used_materials = {}
        for part in parts:
            mat = get_material_for_part(part)
            if mat['name'] in used_materials:
                continue
            used_materials[mat['name']] = mat['color']
            r, g, b = mat['color']
            mtl_lines.append(f"newmtl {mat['name']}")
            mtl_lines.append(f"Ka {r:.3f} {g:.3f} {b:.3f}")
            mtl_lines.append(f"Kd {r:.3f} {g:.3f} {b:.3f}")
            mtl_lines.append("Ks 0.1 0.1 0.1")
            mtl_lines.append("Ns 100")
            mtl_lines.append("d 1.0")
            mtl_lines.append("")

        # 2. One object per part
        vertex_offset = 1
        for idx, part in enumerate(parts):
            obj_lines.append(f"o {part.kind.value}_{idx}")
            obj_lines.append(f"usemtl {get_material_for_part(part)['name']}")

            for vx, vy, vz in box_vertices(part):
                obj_lines.append(f"v {vx:.4f} {vy:.4f} {vz:.4f}")

            v = vertex_offset
            faces = [
                (v+0, v+3, v+2, v+1),  # Bottom
                (v+4, v+5, v+6, v+7),  # Top
                (v+0, v+1, v+5, v+4),  # Front
                (v+2, v+3, v+7, v+6),  # Back
                (v+1, v+2, v+6, v+5),  # Right
                (v+3, v+0, v+4, v+7),  # Left
            ]
            for f in faces:
                obj_lines.append(f"f {f[0]} {f[1]} {f[2]} {f[3]}")

            obj_lines.append("")
            vertex_offset += 8

        with open(output_path, 'w') as f:
            f.write("\n".join(obj_lines))

        mtl_path = os.path.join(os.path.dirname(output_path), mtl_filename)
        with open(mtl_path, 'w') as f:
            f.write("\n".join(mtl_lines))

        logger.info("Exported %d parts to %s", len(parts), output_path)
        return True
