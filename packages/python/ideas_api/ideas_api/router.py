"""FastAPI router exposing idea tree operations."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel, Field

from idea_tree import (
    CreateChild,
    CreateRoot,
    DragNotAllowedError,
    EditIdea,
    Idea,
    IdeaDraft,
    IdeaNotFoundError,
    InvalidIdeaError,
    Placement,
    connectors,
)

from .workspace import IdeaWorkspace, get_workspace, resolve_workspace_id

router = APIRouter(prefix="/ideas", tags=["ideas"])


class TreeSnapshot(BaseModel):
    revision: int
    ideas: List[Idea]


class SpiralEntry(BaseModel):
    id: str
    title: str
    content: str
    tags: List[str]
    depth: int
    child_count: int
    is_expanded: bool
    draggable: bool
    placement: Placement


class SpiralConnector(BaseModel):
    from_id: str
    to_id: str
    x1: float
    y1: float
    x2: float
    y2: float


class SpiralView(BaseModel):
    revision: int
    entries: List[SpiralEntry]
    connectors: List[SpiralConnector]


class IdeaSaved(BaseModel):
    revision: int
    idea: Idea


class ReorderPayload(BaseModel):
    source_index: int = Field(ge=0)
    destination_index: int = Field(ge=0)


def current_workspace(x_workspace_id: str | None = Header(default=None)) -> IdeaWorkspace:
    return get_workspace(resolve_workspace_id(x_workspace_id))


@contextmanager
def _domain_errors() -> Iterator[None]:
    try:
        yield
    except IdeaNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InvalidIdeaError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except DragNotAllowedError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


def _snapshot(workspace: IdeaWorkspace) -> TreeSnapshot:
    return TreeSnapshot(revision=workspace.revision, ideas=workspace.snapshot())


@router.get("/tree", response_model=TreeSnapshot)
async def get_tree(workspace: IdeaWorkspace = Depends(current_workspace)):
    """Return the full idea tree of the workspace."""

    return _snapshot(workspace)


@router.get("/nodes/{idea_id}", response_model=Idea)
async def get_node(idea_id: str, workspace: IdeaWorkspace = Depends(current_workspace)):
    with _domain_errors():
        return workspace.get(idea_id)


@router.get("/spiral", response_model=SpiralView)
async def get_spiral(workspace: IdeaWorkspace = Depends(current_workspace)):
    """Return the visible ideas in display order with their spiral placement."""

    slots = workspace.spiral()
    entries = [
        SpiralEntry(
            id=slot.entry.idea.id,
            title=slot.entry.idea.title,
            content=slot.entry.idea.content,
            tags=slot.entry.idea.tags,
            depth=slot.entry.depth,
            child_count=len(slot.entry.idea.children),
            is_expanded=slot.entry.idea.is_expanded,
            draggable=slot.entry.depth == 0,
            placement=slot.placement,
        )
        for slot in slots
    ]
    lines = [SpiralConnector(**vars(line)) for line in connectors(slots)]
    return SpiralView(revision=workspace.revision, entries=entries, connectors=lines)


@router.post("", response_model=IdeaSaved, status_code=201)
async def create_root(payload: IdeaDraft, workspace: IdeaWorkspace = Depends(current_workspace)):
    """Create a new root-level idea."""

    with _domain_errors():
        idea = workspace.save(CreateRoot(), payload)
    return IdeaSaved(revision=workspace.revision, idea=idea)


@router.post("/nodes/{idea_id}/children", response_model=IdeaSaved, status_code=201)
async def create_child(
    idea_id: str,
    payload: IdeaDraft,
    workspace: IdeaWorkspace = Depends(current_workspace),
):
    """Append a new child idea below ``idea_id`` and expand the parent."""

    with _domain_errors():
        idea = workspace.save(CreateChild(parent_id=idea_id), payload)
    return IdeaSaved(revision=workspace.revision, idea=idea)


@router.get("/nodes/{idea_id}/draft", response_model=IdeaDraft)
async def get_draft(idea_id: str, workspace: IdeaWorkspace = Depends(current_workspace)):
    """Return the editable fields of an idea, prefilled for the editor."""

    with _domain_errors():
        return workspace.open_draft(EditIdea(idea_id=idea_id))


@router.patch("/nodes/{idea_id}", response_model=IdeaSaved)
async def update_node(
    idea_id: str,
    payload: IdeaDraft,
    workspace: IdeaWorkspace = Depends(current_workspace),
):
    """Save the editor fields of an idea; children and expand state are kept."""

    with _domain_errors():
        idea = workspace.save(EditIdea(idea_id=idea_id), payload)
    return IdeaSaved(revision=workspace.revision, idea=idea)


@router.post("/nodes/{idea_id}/toggle", response_model=Idea)
async def toggle_node(idea_id: str, workspace: IdeaWorkspace = Depends(current_workspace)):
    with _domain_errors():
        return workspace.toggle(idea_id)


@router.post("/reorder", response_model=TreeSnapshot)
async def reorder(payload: ReorderPayload, workspace: IdeaWorkspace = Depends(current_workspace)):
    """Commit a drag-and-drop move made in the flattened spiral view."""

    with _domain_errors():
        workspace.reorder(payload.source_index, payload.destination_index)
    return _snapshot(workspace)
