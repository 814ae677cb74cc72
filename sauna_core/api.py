"""
HTTP surface over the editor. One in-process session per app.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .bom import BOMGenerator
from .catalog import InvalidColorError, UnknownPartKindError
from .collection import InteractionState
from .config import Settings
from .editor import SaunaEditor
from .layout import InvalidDimensionsError

logger = logging.getLogger(__name__)


class ToolRequest(BaseModel):
    kind: str


class PickRequest(BaseModel):
    point: List[float] = Field(min_length=3, max_length=3)


class SelectRequest(BaseModel):
    part_id: str


class MaterialRequest(BaseModel):
    color: Optional[str] = None


class AutoBuildRequest(BaseModel):
    width: Optional[int] = None
    depth: Optional[int] = None


class Session:
    def __init__(self, editor: SaunaEditor):
        self.editor = editor
        self.state = InteractionState()

    def view(self) -> Dict[str, Any]:
        return {
            "parts": [p.to_record() for p in self.editor.parts],
            "state": state_to_dict(self.state),
        }


def state_to_dict(state: InteractionState) -> Dict[str, Any]:
    return {
        "active_tool": state.active_tool.value if state.active_tool else None,
        "selected_part_id": state.selected_part_id,
        "pending_rotation": state.pending_rotation,
    }


def create_app(editor: Optional[SaunaEditor] = None, settings: Optional[Settings] = None) -> FastAPI:
    session = Session(editor or SaunaEditor(settings=settings))
    app = FastAPI(title="Sauna Builder")
    app.state.session = session

    @app.get("/parts")
    async def get_parts():
        return [p.to_record() for p in session.editor.parts]

    @app.get("/state")
    async def get_state():
        return state_to_dict(session.state)

    @app.post("/tool")
    async def select_tool(request: ToolRequest):
        try:
            session.state = session.editor.select_tool(session.state, request.kind)
        except UnknownPartKindError as e:
            logger.warning("Rejected tool %r: %s", request.kind, e)
            raise HTTPException(status_code=422, detail=str(e))
        return session.view()

    @app.post("/stop")
    async def stop_placing():
        session.state = session.editor.stop_placing(session.state)
        return session.view()

    @app.post("/pick")
    async def pick(request: PickRequest):
        session.state = session.editor.pick(session.state, request.point)
        return session.view()

    @app.post("/select")
    async def select_part(request: SelectRequest):
        session.state = session.editor.select_part(session.state, request.part_id)
        return session.view()

    @app.post("/rotate")
    async def rotate():
        session.state = session.editor.rotate_key(session.state)
        return session.view()

    @app.post("/delete")
    async def delete():
        session.state = session.editor.delete_key(session.state)
        return session.view()

    @app.post("/material")
    async def set_material(request: MaterialRequest):
        try:
            session.state = session.editor.set_material(session.state, request.color)
        except InvalidColorError as e:
            logger.warning("Rejected material %r: %s", request.color, e)
            raise HTTPException(status_code=422, detail=str(e))
        return session.view()

    @app.post("/auto-build")
    async def auto_build(request: AutoBuildRequest):
        try:
            session.state = session.editor.auto_build(session.state, request.width, request.depth)
        except InvalidDimensionsError as e:
            logger.warning("Rejected auto-build %sx%s: %s", request.width, request.depth, e)
            raise HTTPException(status_code=422, detail=str(e))
        return session.view()

    @app.post("/preset")
    async def load_preset():
        session.state = session.editor.load_preset(session.state)
        return session.view()

    @app.post("/clear")
    async def clear():
        session.state = session.editor.clear_all(session.state)
        return session.view()

    @app.get("/bom")
    async def bom():
        return BOMGenerator.generate_bom(session.editor.parts)

    return app


app = create_app()
