"""
Editor save flow.

The editor is opened against an explicit ``EditorTarget`` which travels with
the draft until it is saved, so there is no pending-parent state to clear.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Callable, Iterable, List, Literal, Tuple, Union

from pydantic import BaseModel, Field

from .errors import InvalidIdeaError
from .models import Idea, new_idea_id
from .store import IdeaTree, add_child, append_root, require_idea, update_by_id


class CreateRoot(BaseModel):
    mode: Literal["create-root"] = "create-root"


class CreateChild(BaseModel):
    mode: Literal["create-child"] = "create-child"
    parent_id: str


class EditIdea(BaseModel):
    mode: Literal["edit"] = "edit"
    idea_id: str


EditorTarget = Annotated[Union[CreateRoot, CreateChild, EditIdea], Field(discriminator="mode")]


def _dedupe(values: Iterable[str]) -> Tuple[str, ...]:
    seen: set[str] = set()
    result: List[str] = []
    for value in values:
        value = value.strip()
        if not value:
            continue
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return tuple(result)


class IdeaDraft(BaseModel):
    """Fields the user edits; nothing here is validated until save."""

    title: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)

    def with_tag(self, tag: str) -> "IdeaDraft":
        cleaned = tag.strip()
        if not cleaned or cleaned in self.tags:
            return self
        return self.model_copy(update={"tags": [*self.tags, cleaned]})

    def without_tag(self, tag: str) -> "IdeaDraft":
        return self.model_copy(update={"tags": [t for t in self.tags if t != tag]})


@dataclass
class SaveResult:
    tree: IdeaTree
    idea: Idea


def open_draft(tree: IdeaTree, target: EditorTarget) -> IdeaDraft:
    if isinstance(target, EditIdea):
        idea = require_idea(tree, target.idea_id)
        return IdeaDraft(title=idea.title, content=idea.content, tags=list(idea.tags))
    if isinstance(target, CreateChild):
        require_idea(tree, target.parent_id)
    return IdeaDraft()


def save_draft(
    tree: IdeaTree,
    target: EditorTarget,
    draft: IdeaDraft,
    id_factory: Callable[[], str] = new_idea_id,
) -> SaveResult:
    """
    Commit ``draft`` to ``tree`` according to ``target``.

    Raises ``InvalidIdeaError`` for a blank title and ``IdeaNotFoundError``
    when the parent or edited idea is not in the tree.
    """

    title = draft.title.strip()
    if not title:
        raise InvalidIdeaError("Idea title must not be blank")
    fields = {"title": title, "content": draft.content.strip(), "tags": _dedupe(draft.tags)}

    if isinstance(target, EditIdea):
        current = require_idea(tree, target.idea_id)
        edited = current.model_copy(update=fields)
        return SaveResult(tree=update_by_id(tree, target.idea_id, lambda _: edited), idea=edited)

    idea = Idea(id=id_factory(), **fields)
    if isinstance(target, CreateChild):
        parent = require_idea(tree, target.parent_id)
        idea = idea.model_copy(update={"depth": parent.depth + 1})
        return SaveResult(tree=add_child(tree, target.parent_id, idea), idea=idea)

    return SaveResult(tree=append_root(tree, idea), idea=idea)
