from collections import OrderedDict
from typing import Literal, Optional
from urllib.parse import quote
from fastapi import FastAPI, HTTPException, Header, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from .types import DocumentInfo
from .tab import PresentationTab
from .session import InMemoryDocumentSession, SessionGate
from .exceptions import GenerationInProgressError
from .notices import DOCUMENT_REQUIRED, GENERATION_BUSY
from .auth import get_user_id_from_header, tab_key
from .config import settings
from .logging_utils import setup_logging


setup_logging()

app = FastAPI(title="pdfdeck API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


class Workspace:
    """One document session and one presentation tab per interface session."""

    def __init__(self):
        self.document = InMemoryDocumentSession()
        self.tab = PresentationTab(SessionGate(self.document))


# Least recently used first. Only touched from the event loop.
_workspaces: "OrderedDict[str, Workspace]" = OrderedDict()


def workspace_for(request: Request, x_user_id: Optional[str]) -> Workspace:
    key = tab_key(request, get_user_id_from_header(x_user_id))
    ws = _workspaces.get(key)
    if ws is None:
        ws = _workspaces[key] = Workspace()
        while len(_workspaces) > max(1, settings.max_workspaces):
            _workspaces.popitem(last=False)
    else:
        _workspaces.move_to_end(key)
    return ws


class AttachDocumentRequest(DocumentInfo):
    session_id: Optional[str] = None


class GeneratePresentationRequest(BaseModel):
    topic: Optional[str] = ""
    max_slides: Optional[int] = None


class NavigateRequest(BaseModel):
    action: Literal["next", "previous", "goto"]
    index: Optional[int] = Field(default=None, description="target slide for goto, 0-based")


@app.get("/health")
def healthz():
    return {"status": "ok"}


@app.put("/api/session")
async def attach_document(payload: AttachDocumentRequest, request: Request, x_user_id: Optional[str] = Header(default=None)):
    ws = workspace_for(request, x_user_id)
    ws.document.attach(DocumentInfo(**payload.model_dump(exclude={"session_id"})), payload.session_id)
    return ws.tab.snapshot()


@app.delete("/api/session")
async def detach_document(request: Request, x_user_id: Optional[str] = Header(default=None)):
    ws = workspace_for(request, x_user_id)
    ws.document.detach()
    return ws.tab.snapshot()


@app.get("/api/presentation")
async def get_presentation(request: Request, x_user_id: Optional[str] = Header(default=None)):
    return workspace_for(request, x_user_id).tab.snapshot()


@app.post("/api/presentation")
async def generate_presentation(payload: GeneratePresentationRequest, request: Request, x_user_id: Optional[str] = Header(default=None)):
    tab = workspace_for(request, x_user_id).tab
    try:
        outcome = await tab.generate(payload.topic, payload.max_slides)
    except GenerationInProgressError:
        raise HTTPException(status_code=409, detail=GENERATION_BUSY)
    if outcome is None:
        raise HTTPException(status_code=412, detail=DOCUMENT_REQUIRED)
    return tab.snapshot()


@app.delete("/api/presentation")
async def new_presentation(request: Request, x_user_id: Optional[str] = Header(default=None)):
    tab = workspace_for(request, x_user_id).tab
    tab.new_presentation()
    return tab.snapshot()


@app.post("/api/presentation/navigate")
async def navigate(payload: NavigateRequest, request: Request, x_user_id: Optional[str] = Header(default=None)):
    tab = workspace_for(request, x_user_id).tab
    if payload.action == "next":
        tab.navigation.next()
    elif payload.action == "previous":
        tab.navigation.previous()
    else:
        if payload.index is None:
            raise HTTPException(status_code=422, detail="index is required for goto")
        tab.navigation.go_to(payload.index)
    return tab.snapshot()


@app.get("/api/presentation/export/markdown")
async def export_markdown(request: Request, x_user_id: Optional[str] = Header(default=None)):
    export = workspace_for(request, x_user_id).tab.export_markdown()
    if export is None:
        raise HTTPException(status_code=404, detail="No presentation to export")
    return Response(
        content=export.encode(),
        media_type=f"{export.media_type}; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(export.filename)}"},
    )


@app.get("/api/presentation/export/artifact")
async def export_artifact(request: Request, x_user_id: Optional[str] = Header(default=None)):
    url = workspace_for(request, x_user_id).tab.artifact_url()
    if not url:
        raise HTTPException(status_code=404, detail="No downloadable presentation file")
    return RedirectResponse(url, status_code=307)
