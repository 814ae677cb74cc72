"""
Editor - reacts to input events from the viewport and toolbar.

Every handler takes the current InteractionState and returns the next one;
the editor itself only owns the part collection and the snapshot store.
"""

import logging
import random
from dataclasses import replace
from typing import Optional, Sequence, Union

from .catalog import PartKind, normalize_color, parse_kind
from .collection import QUARTER_TURN, InteractionState, PartCollection, normalize_angle
from .config import Settings
from .layout import BASIC_SAUNA_PRESET, SaunaLayoutGenerator, random_dimensions
from .placement import build_part, ghost_part, snap_to_grid
from .schema import PartSpec, PlacedPart
from .storage import JsonFileStore, load_parts, save_parts

logger = logging.getLogger(__name__)


class SaunaEditor:
    def __init__(self, store=None, settings: Optional[Settings] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings or Settings()
        if store is None and self.settings.storage_path:
            store = JsonFileStore(self.settings.storage_path)
        self.store = store
        self.rng = rng or random.Random()
        self.generator = SaunaLayoutGenerator(self.settings)
        initial = load_parts(store, self.settings.storage_key) if store is not None else []
        self.parts = PartCollection(initial)
        if initial:
            logger.info("Restored %d parts from snapshot", len(initial))

    def _persist(self):
        if self.store is not None:
            save_parts(self.store, self.parts, self.settings.storage_key)

    # ------------------------------------------------------------------
    # Tool events
    # ------------------------------------------------------------------

    def select_tool(self, state: InteractionState, kind: Union[str, PartKind]) -> InteractionState:
        return InteractionState(active_tool=parse_kind(kind))

    def stop_placing(self, state: InteractionState) -> InteractionState:
        return replace(state, active_tool=None, pending_rotation=0.0)

    def pick(self, state: InteractionState, point: Sequence[float]) -> InteractionState:
        spec = build_part(state.active_tool, point, state.pending_rotation)
        if spec is None:
            # Click on empty floor in select mode
            return replace(state, selected_part_id=None)
        self.parts.place(spec.kind, spec.position, spec.rotation_y)
        self._persist()
        return state

    def hover(self, state: InteractionState, raw_point: Optional[Sequence[float]]) -> Optional[PartSpec]:
        """Ghost preview for a raw pointer position, snapped to the grid."""
        if raw_point is None:
            return None
        return ghost_part(state.active_tool, snap_to_grid(raw_point, self.settings.grid_step),
                          state.pending_rotation)

    # ------------------------------------------------------------------
    # Selection events
    # ------------------------------------------------------------------

    def select_part(self, state: InteractionState, part_id: str) -> InteractionState:
        if state.active_tool is not None:
            return state
        if self.parts.get(part_id) is None:
            logger.debug("select: part %s not found, ignoring", part_id)
            return state
        return replace(state, selected_part_id=part_id)

    def rotate_key(self, state: InteractionState) -> InteractionState:
        if state.active_tool is not None:
            return replace(state, pending_rotation=normalize_angle(state.pending_rotation + QUARTER_TURN))
        if state.selected_part_id is not None:
            if self.parts.rotate(state.selected_part_id) is not None:
                self._persist()
        return state

    def delete_key(self, state: InteractionState) -> InteractionState:
        if state.selected_part_id is None:
            return state
        if self.parts.remove(state.selected_part_id):
            self._persist()
        return replace(state, selected_part_id=None)

    def set_material(self, state: InteractionState, color: Optional[str]) -> InteractionState:
        color = normalize_color(color)
        if state.selected_part_id is not None:
            if self.parts.recolor(state.selected_part_id, color) is not None:
                self._persist()
        return state

    # ------------------------------------------------------------------
    # Whole-room events
    # ------------------------------------------------------------------

    def clear_all(self, state: InteractionState) -> InteractionState:
        new_state = self.parts.clear()
        self._persist()
        return new_state

    def auto_build(self, state: InteractionState, width: Optional[int] = None,
                   depth: Optional[int] = None) -> InteractionState:
        if width is None or depth is None:
            rand_w, rand_d = random_dimensions(self.rng, self.settings)
            width = rand_w if width is None else width
            depth = rand_d if depth is None else depth
        # Generate before clearing so a bad size leaves the room untouched
        layout = self.generator.generate(width, depth)
        new_state = self.parts.clear()
        self.parts.replace_all(layout)
        self._persist()
        logger.info("Auto-built %dx%d sauna with %d parts", width, depth, len(layout))
        return new_state

    def load_preset(self, state: InteractionState) -> InteractionState:
        new_state = self.parts.clear()
        self.parts.replace_all(BASIC_SAUNA_PRESET)
        self._persist()
        return new_state

    def selected_part(self, state: InteractionState) -> Optional[PlacedPart]:
        if state.selected_part_id is None:
            return None
        return self.parts.get(state.selected_part_id)
