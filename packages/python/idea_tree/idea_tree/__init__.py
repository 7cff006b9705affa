"""Idea tree engine: copy-on-write tree store and spiral layout."""

from .editor import CreateChild, CreateRoot, EditIdea, EditorTarget, IdeaDraft, SaveResult, open_draft, save_draft
from .errors import DragNotAllowedError, IdeaNotFoundError, IdeaTreeError, InvalidIdeaError
from .layout import (
    Connector,
    FlatEntry,
    Placement,
    SpiralGeometry,
    SpiralSlot,
    connectors,
    flatten,
    is_draggable,
    layout,
    position_for,
    reorder_roots,
)
from .models import Idea, new_idea_id
from .seed import sample_ideas
from .store import (
    add_child,
    append_root,
    find_idea,
    iter_ideas,
    replace_root_order,
    require_idea,
    same_roots,
    toggle_expand,
    update_by_id,
)

__all__ = [
    "Idea",
    "new_idea_id",
    "IdeaTreeError",
    "IdeaNotFoundError",
    "InvalidIdeaError",
    "DragNotAllowedError",
    "find_idea",
    "require_idea",
    "iter_ideas",
    "update_by_id",
    "add_child",
    "toggle_expand",
    "append_root",
    "replace_root_order",
    "same_roots",
    "FlatEntry",
    "Placement",
    "SpiralGeometry",
    "SpiralSlot",
    "Connector",
    "flatten",
    "position_for",
    "layout",
    "connectors",
    "is_draggable",
    "reorder_roots",
    "CreateRoot",
    "CreateChild",
    "EditIdea",
    "EditorTarget",
    "IdeaDraft",
    "SaveResult",
    "open_draft",
    "save_draft",
    "sample_ideas",
]
