"""Spiral layout: flattening the visible tree and placing each entry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Sequence

from pydantic import BaseModel, Field

from .models import Idea


class FlatEntry(NamedTuple):
    idea: Idea
    depth: int


class SpiralGeometry(BaseModel):
    """Constants of the spiral; any values keep the ordering/opacity contract."""

    angle_step_deg: float = 15.0
    depth_angle_deg: float = 30.0
    base_radius: float = 50.0
    depth_radius: float = 80.0
    max_radius: float = 300.0
    wobble_amplitude: float = 10.0
    wobble_frequency: float = 0.5
    stack_base: int = 100
    opacity_step: float = Field(default=0.15, ge=0)
    opacity_floor: float = Field(default=0.3, gt=0, le=1)


DEFAULT_GEOMETRY = SpiralGeometry()


class Placement(BaseModel):
    x: float
    y: float
    stack_order: int
    opacity: float


@dataclass
class SpiralSlot:
    index: int
    entry: FlatEntry
    placement: Placement


@dataclass
class Connector:
    from_id: str
    to_id: str
    x1: float
    y1: float
    x2: float
    y2: float


def flatten(tree: Iterable[Idea]) -> List[FlatEntry]:
    """
    Visible nodes in pre-order, each annotated with its depth.

    Collapsed nodes contribute themselves and nothing below them.
    """

    result: List[FlatEntry] = []
    _flatten_into(tree, 0, result)
    return result


def _flatten_into(ideas: Iterable[Idea], depth: int, out: List[FlatEntry]) -> None:
    for idea in ideas:
        out.append(FlatEntry(idea, depth))
        if idea.is_expanded and idea.children:
            _flatten_into(idea.children, depth + 1, out)


def position_for(index: int, depth: int, geometry: SpiralGeometry = DEFAULT_GEOMETRY) -> Placement:
    angle = math.radians(index * geometry.angle_step_deg + depth * geometry.depth_angle_deg)
    radius = min(geometry.base_radius + depth * geometry.depth_radius, geometry.max_radius)
    radius += math.sin(index * geometry.wobble_frequency) * geometry.wobble_amplitude
    opacity = max(geometry.opacity_floor, 1.0 - depth * geometry.opacity_step)
    return Placement(
        x=math.cos(angle) * radius,
        y=math.sin(angle) * radius,
        stack_order=geometry.stack_base - index,
        opacity=opacity,
    )


def layout(tree: Iterable[Idea], geometry: SpiralGeometry = DEFAULT_GEOMETRY) -> List[SpiralSlot]:
    return [
        SpiralSlot(index=index, entry=entry, placement=position_for(index, entry.depth, geometry))
        for index, entry in enumerate(flatten(tree))
    ]


def connectors(slots: Sequence[SpiralSlot]) -> List[Connector]:
    """Segments joining each slot to the one before it in display order."""

    lines: List[Connector] = []
    for prev, current in zip(slots, slots[1:]):
        lines.append(
            Connector(
                from_id=prev.entry.idea.id,
                to_id=current.entry.idea.id,
                x1=prev.placement.x,
                y1=prev.placement.y,
                x2=current.placement.x,
                y2=current.placement.y,
            )
        )
    return lines


def is_draggable(entry: FlatEntry) -> bool:
    return entry.depth == 0


def reorder_roots(flat: Sequence[FlatEntry], source_index: int, dest_index: int) -> List[Idea]:
    """
    Move one flattened entry and return the resulting root-level order.

    ``dest_index`` is the position after removal and is clamped to the
    sequence bounds. Non-root entries never change parent here; only the
    relative order of depth-0 ideas is affected.
    """

    items = list(flat)
    if 0 <= source_index < len(items):
        moved = items.pop(source_index)
        dest_index = max(0, min(dest_index, len(items)))
        items.insert(dest_index, moved)
    return [entry.idea for entry in items if entry.depth == 0]


__all__ = [
    "FlatEntry",
    "SpiralGeometry",
    "DEFAULT_GEOMETRY",
    "Placement",
    "SpiralSlot",
    "Connector",
    "flatten",
    "position_for",
    "layout",
    "connectors",
    "is_draggable",
    "reorder_roots",
]
