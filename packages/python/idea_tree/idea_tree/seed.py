"""Demonstration tree used to seed fresh workspaces."""

from __future__ import annotations

from typing import List

from .models import Idea


def sample_ideas() -> List[Idea]:
    return [
        Idea(
            id="1",
            title="The Nature of Recursive Thinking",
            content=(
                "How do ideas spawn other ideas? This fundamental question leads us "
                "down a spiral of meta-cognition..."
            ),
            tags=["philosophy", "cognition", "meta"],
            depth=0,
            is_expanded=True,
            children=[
                Idea(
                    id="1-1",
                    title="Self-Reference in Ideas",
                    content="When an idea references itself, it creates an infinite loop of possibility.",
                    tags=["self-reference", "infinity"],
                    depth=1,
                    children=[
                        Idea(
                            id="1-1-1",
                            title="Gödel's Incompleteness",
                            content="Mathematical systems that reference themselves reveal fundamental limitations.",
                            tags=["mathematics", "logic"],
                            depth=2,
                        )
                    ],
                ),
                Idea(
                    id="1-2",
                    title="Emergent Complexity",
                    content="Simple rules can generate infinitely complex patterns when applied recursively.",
                    tags=["emergence", "complexity"],
                    depth=1,
                ),
            ],
        ),
        Idea(
            id="2",
            title="Digital Origami Patterns",
            content="Exploring how folding algorithms can inspire user interface design...",
            tags=["design", "origami", "ui/ux"],
        ),
        Idea(
            id="3",
            title="Consciousness as Recursive Process",
            content="What if awareness is simply the brain observing itself observing itself?",
            tags=["consciousness", "neuroscience", "philosophy"],
        ),
    ]
