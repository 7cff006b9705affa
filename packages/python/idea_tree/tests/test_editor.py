import pytest
from pydantic import TypeAdapter

from idea_tree import (
    CreateChild,
    CreateRoot,
    EditIdea,
    EditorTarget,
    Idea,
    IdeaDraft,
    IdeaNotFoundError,
    InvalidIdeaError,
    find_idea,
    open_draft,
    sample_ideas,
    save_draft,
)
from idea_tree.layout import flatten


@pytest.fixture()
def tree():
    return [
        Idea(id="A", title="A", children=[Idea(id="A1", title="A1", depth=1)]),
        Idea(id="B", title="B", tags=["keep"]),
    ]


def _fixed_id(value="new-1"):
    return lambda: value


def test_blank_title_is_rejected(tree):
    with pytest.raises(InvalidIdeaError):
        save_draft(tree, CreateRoot(), IdeaDraft(title="   "))


def test_create_root_appends_trimmed_idea(tree):
    result = save_draft(
        tree,
        CreateRoot(),
        IdeaDraft(title="  Fresh  ", content=" body ", tags=["x", "x", "y"]),
        id_factory=_fixed_id(),
    )
    assert [idea.id for idea in result.tree] == ["A", "B", "new-1"]
    assert result.idea.title == "Fresh"
    assert result.idea.content == "body"
    assert result.idea.tags == ("x", "y")
    assert result.idea.depth == 0
    assert result.idea.children == ()
    assert result.idea.is_expanded is False


def test_create_child_adds_under_parent(tree):
    result = save_draft(tree, CreateChild(parent_id="A"), IdeaDraft(title="A2"), id_factory=_fixed_id("A2"))

    parent = find_idea(result.tree, "A")
    assert [child.id for child in parent.children] == ["A1", "A2"]
    assert parent.is_expanded is True
    assert result.idea.depth == 1
    assert find_idea(result.tree, "A2").depth == 1
    flat = flatten(result.tree)
    assert [(entry.idea.id, entry.depth) for entry in flat] == [("A", 0), ("A1", 1), ("A2", 1), ("B", 0)]


def test_create_child_of_missing_parent_is_reported(tree):
    with pytest.raises(IdeaNotFoundError):
        save_draft(tree, CreateChild(parent_id="ghost"), IdeaDraft(title="x"))


def test_edit_keeps_structure(tree):
    expanded = [tree[0].model_copy(update={"is_expanded": True}), tree[1]]
    result = save_draft(expanded, EditIdea(idea_id="A"), IdeaDraft(title="Renamed", tags=["t"]))

    edited = find_idea(result.tree, "A")
    assert edited.title == "Renamed"
    assert edited.tags == ("t",)
    assert edited.is_expanded is True
    assert edited.children == expanded[0].children
    assert result.tree[1] is expanded[1]


def test_edit_missing_idea_is_reported(tree):
    with pytest.raises(IdeaNotFoundError):
        save_draft(tree, EditIdea(idea_id="ghost"), IdeaDraft(title="x"))


def test_open_draft_prefills_for_edit(tree):
    draft = open_draft(tree, EditIdea(idea_id="B"))
    assert draft == IdeaDraft(title="B", content="", tags=["keep"])
    assert open_draft(tree, CreateRoot()) == IdeaDraft()
    with pytest.raises(IdeaNotFoundError):
        open_draft(tree, CreateChild(parent_id="ghost"))


def test_saved_tags_are_trimmed_like_draft_tags(tree):
    result = save_draft(tree, CreateRoot(), IdeaDraft(title="T", tags=[" a ", "a", "", " b"]))
    assert result.idea.tags == ("a", "b")
    assert result.idea.tags == tuple(IdeaDraft().with_tag(" a ").with_tag("a").with_tag(" b").tags)


def test_draft_tags_trim_and_dedupe():
    draft = IdeaDraft().with_tag(" alpha ").with_tag("alpha").with_tag("  ").with_tag("beta")
    assert draft.tags == ["alpha", "beta"]
    assert draft.without_tag("alpha").tags == ["beta"]


def test_editor_target_parses_by_mode():
    adapter = TypeAdapter(EditorTarget)
    assert adapter.validate_python({"mode": "create-child", "parent_id": "A"}) == CreateChild(parent_id="A")
    assert isinstance(adapter.validate_python({"mode": "create-root"}), CreateRoot)
    assert adapter.validate_python({"mode": "edit", "idea_id": "B"}).idea_id == "B"


def test_sample_ideas_have_consistent_depths():
    def _check(ideas, depth):
        for idea in ideas:
            assert idea.depth == depth
            _check(idea.children, depth + 1)

    _check(sample_ideas(), 0)
