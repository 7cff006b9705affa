"""
Pure, copy-on-write operations over the idea tree.

A tree is an ordered list of root ``Idea`` nodes. No function here mutates
its input. Updates rebuild only the path from the root to the changed node;
every other subtree is returned by reference so consumers can detect
changes with ``is``.

Missing ids are silent no-ops here. Callers that need to report them use
``require_idea`` first (see ``idea_tree.editor``).
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import IdeaNotFoundError
from .models import Idea, has_children

IdeaTree = List[Idea]
Transform = Callable[[Idea], Idea]


def iter_ideas(tree: Iterable[Idea]) -> Iterator[Idea]:
    """Yield every node in depth-first pre-order, ignoring ``is_expanded``."""

    for idea in tree:
        yield idea
        yield from iter_ideas(idea.children)


def find_idea(tree: Iterable[Idea], idea_id: str) -> Optional[Idea]:
    for idea in iter_ideas(tree):
        if idea.id == idea_id:
            return idea
    return None


def require_idea(tree: Iterable[Idea], idea_id: str) -> Idea:
    idea = find_idea(tree, idea_id)
    if idea is None:
        raise IdeaNotFoundError(idea_id)
    return idea


def count_ideas(tree: Iterable[Idea]) -> int:
    return sum(1 for _ in iter_ideas(tree))


def _update(
    ideas: Iterable[Idea], idea_id: str, transform: Transform
) -> Tuple[List[Idea], bool, bool]:
    """Return ``(ideas, found, changed)``; unchanged subtrees keep their identity."""

    result: List[Idea] = []
    found = changed = False
    for idea in ideas:
        if found:
            result.append(idea)
            continue
        if idea.id == idea_id:
            replaced = transform(idea)
            result.append(replaced)
            found, changed = True, replaced is not idea
            continue
        children, found, changed = _update(idea.children, idea_id, transform)
        if changed:
            # Rebuild the ancestor so nothing on the path keeps its identity.
            result.append(idea.model_copy(update={"children": tuple(children)}))
        else:
            result.append(idea)
    return result, found, changed


def update_by_id(tree: IdeaTree, idea_id: str, transform: Transform) -> IdeaTree:
    """
    Replace the node ``idea_id`` with ``transform(node)``.

    Always returns a new top-level list. When the id is absent, or the
    transform hands back the node itself, the list holds the very same
    root objects.
    """

    updated, _, _ = _update(tree, idea_id, transform)
    return updated


def with_depth(idea: Idea, depth: int) -> Idea:
    """Return ``idea`` re-rooted at ``depth`` with descendant depths re-derived."""

    children = tuple(with_depth(child, depth + 1) for child in idea.children)
    return idea.model_copy(update={"depth": depth, "children": children})


def add_child(tree: IdeaTree, parent_id: str, new_idea: Idea) -> IdeaTree:
    """Append ``new_idea`` as the last child of ``parent_id`` and expand the parent."""

    def _append(parent: Idea) -> Idea:
        child = with_depth(new_idea, parent.depth + 1)
        return parent.model_copy(
            update={"children": (*parent.children, child), "is_expanded": True}
        )

    return update_by_id(tree, parent_id, _append)


def toggle_expand(tree: IdeaTree, idea_id: str) -> IdeaTree:
    def _flip(idea: Idea) -> Idea:
        if not has_children(idea):
            return idea
        return idea.model_copy(update={"is_expanded": not idea.is_expanded})

    return update_by_id(tree, idea_id, _flip)


def append_root(tree: IdeaTree, new_idea: Idea) -> IdeaTree:
    return [*tree, with_depth(new_idea, 0)]


def replace_root_order(tree: IdeaTree, new_roots: Iterable[Idea]) -> IdeaTree:
    """Commit a new root-level ordering; subtrees are taken as given."""

    return list(new_roots)


def same_roots(old: Sequence[Idea], new: Sequence[Idea]) -> bool:
    """True when both snapshots hold the very same root objects in order."""

    return len(old) == len(new) and all(a is b for a, b in zip(old, new))


__all__ = [
    "IdeaTree",
    "Transform",
    "iter_ideas",
    "find_idea",
    "require_idea",
    "count_ideas",
    "update_by_id",
    "with_depth",
    "add_child",
    "toggle_expand",
    "append_root",
    "replace_root_order",
    "same_roots",
]
