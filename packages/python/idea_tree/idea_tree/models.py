"""Pydantic models describing Idea nodes."""

from __future__ import annotations

from typing import Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

ID_PREFIX = "idea-"


class Idea(BaseModel):
    """
    A node in the idea tree.

    Instances are frozen and hold tuples, so snapshots never share mutable
    state. Every mutation goes through ``idea_tree.store``, which returns
    copies and shares untouched subtrees with the old tree.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str = ""
    tags: Tuple[str, ...] = ()
    depth: int = Field(default=0, ge=0)
    children: Tuple[Idea, ...] = ()
    is_expanded: bool = False


def new_idea_id() -> str:
    return f"{ID_PREFIX}{uuid4().hex}"


def has_children(idea: Idea) -> bool:
    return len(idea.children) > 0
