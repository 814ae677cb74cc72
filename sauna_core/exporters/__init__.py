from .glb_exporter import GlbExporter
from .obj_exporter import ObjExporter

__all__ = ["GlbExporter", "ObjExporter"]
