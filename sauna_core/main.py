import argparse
import json
import logging
import os
import sys
from collections import Counter
from datetime import datetime

from .bom import BOMGenerator
from .collection import PartCollection
from .config import load_settings
from .exporters import GlbExporter, ObjExporter
from .geometry import find_overlaps
from .layout import InvalidDimensionsError, SaunaLayoutGenerator


def main(argv=None):
    parser = argparse.ArgumentParser(description="Sauna Builder - parametric room generator")
    parser.add_argument("width", type=int, help="Room width in modules")
    parser.add_argument("depth", type=int, help="Room depth in modules")
    parser.add_argument("--out", default="outputs", help="Output root directory")
    parser.add_argument("--config", help="Path to settings YAML")
    parser.add_argument("--glb", action="store_true", help="Also export layout.glb")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.config)
    generator = SaunaLayoutGenerator(settings)

    try:
        layout = generator.generate(args.width, args.depth)
    except InvalidDimensionsError as e:
        print(f"Invalid room size: {e}")
        return 2

    parts = PartCollection()
    parts.replace_all(layout)
    snapshot = parts.snapshot()

    print(f"Room: {args.width}x{args.depth} modules ({args.width * settings.module_size:g}m x {args.depth * settings.module_size:g}m)")
    counts = Counter(kind.value for kind in parts.kinds())
    print("Parts: " + ", ".join(f"{k}={v}" for k, v in sorted(counts.items())))

    # Reported, not corrected
    overlaps = find_overlaps(snapshot)
    for i, j, area in overlaps:
        print(f"  Overlap: {snapshot[i].kind.value} #{i} / {snapshot[j].kind.value} #{j} ({area:.3f} m2)")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = os.path.join(args.out, f"run_{timestamp}")
    os.makedirs(out_dir, exist_ok=True)

    json_path = os.path.join(out_dir, "layout.json")
    with open(json_path, 'w') as f:
        json.dump([p.to_record() for p in snapshot], f, indent=4)

    ObjExporter.export(snapshot, os.path.join(out_dir, "layout.obj"))
    BOMGenerator.export_csv(BOMGenerator.generate_bom(snapshot), os.path.join(out_dir, "bom.csv"))
    if args.glb:
        GlbExporter.export(snapshot, os.path.join(out_dir, "layout.glb"))

    print(f"Generated {out_dir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
