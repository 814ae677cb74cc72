import math

import pytest

from sauna_core.catalog import PartKind, UnknownPartKindError
from sauna_core.placement import build_part, ghost_part, snap_to_grid


class TestSnapToGrid:
    def test_rounds_x_and_z(self):
        assert snap_to_grid((1.4, 0.7, -2.6)) == (1.0, 0.0, -3.0)

    def test_half_rounds_up(self):
        assert snap_to_grid((0.5, 0.0, -0.5)) == (1.0, 0.0, 0.0)
        assert snap_to_grid((2.5, 0.0, 1.5)) == (3.0, 0.0, 2.0)

    def test_custom_step(self):
        assert snap_to_grid((1.2, 0.0, 2.9), step=2.0) == (2.0, 0.0, 2.0)

    def test_rejects_bad_step(self):
        with pytest.raises(ValueError):
            snap_to_grid((0, 0, 0), step=0)


class TestBuildPart:
    def test_no_tool_means_no_part(self):
        assert build_part(None, (1.0, 0.0, 1.0)) is None

    def test_y_from_kind_table(self):
        part = build_part('wall', (2.0, 99.0, 3.0))
        assert part.position == (2.0, 1.5, 3.0)

    def test_pending_rotation_applied(self):
        part = build_part(PartKind.BENCH, (0.0, 0.0, 0.0), math.pi)
        assert part.rotation == (0.0, math.pi, 0.0)
        assert part.position[1] == 0.25

    def test_accepts_enum_and_tag(self):
        assert build_part('door', (0, 0, 0)) == build_part(PartKind.DOOR, (0, 0, 0))

    def test_unknown_tool(self):
        with pytest.raises(UnknownPartKindError):
            build_part('sauna_stove', (0, 0, 0))


class TestGhostPart:
    def test_no_hover(self):
        assert ghost_part('wall', None) is None

    def test_preview_matches_placement(self):
        assert ghost_part('heater', (1, 0, 1), math.pi / 2) == build_part('heater', (1, 0, 1), math.pi / 2)
