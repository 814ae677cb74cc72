import csv
import unittest
import os
import tempfile

from sauna_core.bom import BOMGenerator
from sauna_core.layout import generate
from sauna_core.schema import PartSpec


class TestBOM(unittest.TestCase):
    def _row(self, bom, name):
        return next((r for r in bom if r['item_name'] == name), None)

    def test_generated_room(self):
        # 3x2 walls: back 3, front 2 (+ door), sides 4
        bom = BOMGenerator.generate_bom(generate(3, 2))
        self.assertEqual(self._row(bom, "Wall 2x3x0.2m (wall_default)")['quantity'], 9)
        self.assertEqual(self._row(bom, "Door 1x2.2x0.1m (door_default)")['quantity'], 1)
        self.assertEqual(self._row(bom, "Bench 2x0.5x0.6m (bench_default)")['quantity'], 3)
        self.assertEqual(self._row(bom, "Bench bracket pair")['quantity'], 3)
        self.assertEqual(self._row(bom, "Door hinge pair")['quantity'], 1)
        self.assertEqual(self._row(bom, "Heater guard rail")['quantity'], 1)

    def test_finish_splits_rows(self):
        parts = [
            PartSpec(kind='bench', position=(0, 0.25, 0)),
            PartSpec(kind='bench', position=(2, 0.25, 0), material_color="#5c4033"),
        ]
        bom = BOMGenerator.generate_bom(parts)
        self.assertEqual(self._row(bom, "Bench 2x0.5x0.6m (bench_default)")['quantity'], 1)
        self.assertEqual(self._row(bom, "Bench 2x0.5x0.6m (wood_dark)")['quantity'], 1)

    def test_sorted(self):
        names = [r['item_name'] for r in BOMGenerator.generate_bom(generate(2, 2))]
        self.assertEqual(names, sorted(names))

    def test_export_csv(self):
        bom = BOMGenerator.generate_bom(generate(1, 1))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bom.csv")
            self.assertTrue(BOMGenerator.export_csv(bom, path))
            with open(path, newline='', encoding='utf-8') as f:
                rows = list(csv.DictReader(f))
        self.assertEqual(len(rows), len(bom))
        self.assertEqual(rows[0]['item_name'], bom[0]['item_name'])


if __name__ == '__main__':
    unittest.main()
