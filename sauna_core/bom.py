import csv
import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List

from .catalog import PartKind, require
from .materials import get_material_for_part
from .schema import PartSpec

logger = logging.getLogger(__name__)


class BOMGenerator:
    @staticmethod
    def generate_bom(parts: Iterable[PartSpec]) -> List[Dict[str, Any]]:
        """
        Counts parts by kind and finish, and adds the hidden hardware
        a builder needs for them. Rows are sorted by name.
        """
        summary = defaultdict(int)

        for part in parts:
            definition = require(part.kind)
            w, h, t = definition.dimensions
            finish = get_material_for_part(part)['name']
            summary[f"{definition.label} {w:g}x{h:g}x{t:g}m ({finish})"] += 1

            # Hidden items
            if part.kind == PartKind.DOOR:
                summary["Door hinge pair"] += 1
                summary["Door handle"] += 1
            elif part.kind == PartKind.BENCH:
                summary["Bench bracket pair"] += 1
            elif part.kind == PartKind.HEATER:
                summary["Heater guard rail"] += 1
            elif part.kind == PartKind.WINDOW:
                summary["Window seal kit"] += 1

        bom_rows = [
            {"item_name": key, "quantity": count, "notes": "Generated from layout"}
            for key, count in summary.items()
        ]
        bom_rows.sort(key=lambda x: x['item_name'])
        return bom_rows

    @staticmethod
    def export_csv(bom_rows: List[Dict[str, Any]], filepath: str):
        headers = ["item_name", "quantity", "notes"]
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=headers)
            writer.writeheader()
            writer.writerows(bom_rows)
        logger.info("Wrote %d BOM rows to %s", len(bom_rows), filepath)
        return True
