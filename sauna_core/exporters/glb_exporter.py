import logging
from typing import Iterable, List

import trimesh

from ..catalog import require
from ..geometry import room_bounds
from ..materials import get_material_for_part
from ..schema import PartSpec

logger = logging.getLogger(__name__)

FLOOR_COLOR = [200, 180, 160, 255]
FLOOR_THICKNESS = 0.05


class GlbExporter:
    """GLB export of a part collection: colored boxes on a floor slab."""

    @staticmethod
    def build_scene(parts: Iterable[PartSpec]) -> trimesh.Scene:
        parts = list(parts)
        meshes: List[trimesh.Trimesh] = []

        if parts:
            min_x, min_z, max_x, max_z = room_bounds(parts)
            floor = trimesh.creation.box(extents=[max_x - min_x, FLOOR_THICKNESS, max_z - min_z])
            floor.apply_translation([(min_x + max_x) / 2, -FLOOR_THICKNESS / 2, (min_z + max_z) / 2])
            floor.visual.face_colors = FLOOR_COLOR
            meshes.append(floor)

        for part in parts:
            mesh = GlbExporter._make_part_box(part)
            meshes.append(mesh)

        return trimesh.Scene(meshes)

    @staticmethod
    def export(parts: Iterable[PartSpec], output_path: str):
        scene = GlbExporter.build_scene(parts)
        scene.export(output_path, file_type='glb')
        logger.info("Exported %d meshes to %s", len(scene.geometry), output_path)
        return True

    @staticmethod
    def _make_part_box(part: PartSpec) -> trimesh.Trimesh:
        definition = require(part.kind)
        mesh = trimesh.creation.box(extents=list(definition.dimensions))
        if part.rotation_y:
            mesh.apply_transform(trimesh.transformations.rotation_matrix(part.rotation_y, [0, 1, 0]))
        mesh.apply_translation(list(part.position))

        rgb = [int(round(c * 255)) for c in get_material_for_part(part)['color']]
        mesh.visual.face_colors = rgb + [255]
        return mesh
