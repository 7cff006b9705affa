"""
Single-owner idea workspaces.

Each workspace holds the latest tree snapshot and applies every mutation to
it under a lock, so writes are serialized and readers always get a complete
snapshot.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from loguru import logger

from idea_tree import (
    CreateChild,
    DragNotAllowedError,
    EditIdea,
    EditorTarget,
    Idea,
    IdeaDraft,
    SaveResult,
    SpiralGeometry,
    SpiralSlot,
    flatten,
    is_draggable,
    layout,
    open_draft,
    reorder_roots,
    replace_root_order,
    require_idea,
    sample_ideas,
    same_roots,
    save_draft,
    toggle_expand,
)
from idea_tree.layout import DEFAULT_GEOMETRY

from .config import settings


class IdeaWorkspace:
    """Owner of one idea tree snapshot."""

    def __init__(self, workspace_id: str, ideas: Optional[List[Idea]] = None) -> None:
        self.workspace_id = workspace_id
        self._ideas: List[Idea] = list(ideas or [])
        self._revision = 0
        self._lock = threading.Lock()

    @property
    def revision(self) -> int:
        return self._revision

    def snapshot(self) -> List[Idea]:
        return self._ideas

    def _commit(self, ideas: List[Idea]) -> Optional[int]:
        """Install ``ideas``; returns the new revision, or None when nothing changed."""

        if same_roots(self._ideas, ideas):
            return None
        self._ideas = ideas
        self._revision += 1
        return self._revision

    def get(self, idea_id: str) -> Idea:
        return require_idea(self._ideas, idea_id)

    def spiral(self, geometry: SpiralGeometry = DEFAULT_GEOMETRY) -> List[SpiralSlot]:
        return layout(self._ideas, geometry)

    def toggle(self, idea_id: str) -> Idea:
        with self._lock:
            require_idea(self._ideas, idea_id)
            revision = self._commit(toggle_expand(self._ideas, idea_id))
            idea = require_idea(self._ideas, idea_id)
        if revision is None:
            return idea
        logger.debug(
            "Toggled idea {idea_id} in {workspace} (expanded={expanded})",
            idea_id=idea_id,
            workspace=self.workspace_id,
            expanded=idea.is_expanded,
        )
        return idea

    def open_draft(self, target: EditorTarget) -> IdeaDraft:
        return open_draft(self._ideas, target)

    def save(self, target: EditorTarget, draft: IdeaDraft) -> Idea:
        with self._lock:
            result: SaveResult = save_draft(self._ideas, target, draft)
            revision = self._commit(result.tree)

        if isinstance(target, EditIdea):
            message = "Idea updated"
        elif isinstance(target, CreateChild):
            message = "Child idea created"
        else:
            message = "New idea created"
        logger.info(
            "{message}: {title!r} ({idea_id}) in {workspace} rev={revision}",
            message=message,
            title=result.idea.title,
            idea_id=result.idea.id,
            workspace=self.workspace_id,
            revision=revision,
        )
        return result.idea

    def reorder(self, source_index: int, destination_index: int) -> List[Idea]:
        with self._lock:
            flat = flatten(self._ideas)
            if 0 <= source_index < len(flat) and not is_draggable(flat[source_index]):
                logger.warning(
                    "Refused drag of nested idea {idea_id} in {workspace}",
                    idea_id=flat[source_index].idea.id,
                    workspace=self.workspace_id,
                )
                raise DragNotAllowedError("Only root-level ideas can be reordered")
            roots = reorder_roots(flat, source_index, destination_index)
            revision = self._commit(replace_root_order(self._ideas, roots))
        if revision is None:
            return self._ideas
        logger.info(
            "Ideas reordered in {workspace}: {source} -> {dest} rev={revision}",
            workspace=self.workspace_id,
            source=source_index,
            dest=destination_index,
            revision=revision,
        )
        return self._ideas


_WORKSPACES: Dict[str, IdeaWorkspace] = {}
_WORKSPACES_LOCK = threading.Lock()


def _normalize_workspace_id(value: Any) -> str | None:
    if isinstance(value, str):
        trimmed = value.strip()
        if trimmed:
            return trimmed
    return None


def resolve_workspace_id(raw: Any) -> str:
    """Return the requested workspace id, or the configured default one."""

    return _normalize_workspace_id(raw) or settings.default_workspace_id


def get_workspace(workspace_id: str) -> IdeaWorkspace:
    workspace = _WORKSPACES.get(workspace_id)
    if workspace is not None:
        return workspace

    with _WORKSPACES_LOCK:
        workspace = _WORKSPACES.get(workspace_id)
        if workspace is None:
            seed = sample_ideas() if settings.seed_sample_ideas else []
            workspace = IdeaWorkspace(workspace_id, seed)
            _WORKSPACES[workspace_id] = workspace
            logger.info(
                "Workspace {workspace} created with {count} root ideas",
                workspace=workspace_id,
                count=len(seed),
            )
    return workspace


def reset_workspaces() -> None:
    with _WORKSPACES_LOCK:
        _WORKSPACES.clear()
