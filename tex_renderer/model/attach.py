"""Rank-gated attachment of elements into containers.

Rank only decides whether a child is accepted; accepted children keep their
insertion order.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Union

from tex_renderer.model.elements import (
    Chapter,
    Element,
    Environment,
    Paragraph,
    Part,
    Section,
    kind_name,
    rank,
)
from tex_renderer.model.errors import RankError
from tex_renderer.renderer.latex_renderer import render
from tex_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

AttachableElement = Union[Part, Chapter, Section, Paragraph, Environment]

PART_THRESHOLD = 0
CHAPTER_THRESHOLD = 1
SECTION_THRESHOLD = 2
PARAGRAPH_THRESHOLD = 3
# Only text-tier leaves fit inside an environment.
ENVIRONMENT_THRESHOLD = 7


def rank_threshold(parent: AttachableElement) -> int:
    """Return the rank a child must exceed to be attached to ``parent``."""
    if isinstance(parent, Part):
        return PART_THRESHOLD
    if isinstance(parent, Chapter):
        return CHAPTER_THRESHOLD
    if isinstance(parent, Section):
        return SECTION_THRESHOLD
    if isinstance(parent, Paragraph):
        return PARAGRAPH_THRESHOLD
    if isinstance(parent, Environment):
        return ENVIRONMENT_THRESHOLD
    raise TypeError(f"{type(parent).__name__} does not accept attached elements")


def can_attach(parent: AttachableElement, child: Element) -> bool:
    """Return whether ``attach(parent, child)`` would succeed."""
    return rank(child) > rank_threshold(parent)


def attach(parent: AttachableElement, child: Element) -> None:
    """Append ``child`` to ``parent`` or raise ``RankError`` leaving ``parent`` untouched.

    Containers store an independent copy of the child. Environments store the
    child's rendered markup as a raw item instead of the element itself.
    """
    threshold = rank_threshold(parent)
    child_rank = rank(child)
    if child_rank <= threshold:
        LOGGER.debug(
            "Rejected %s (rank %d) under %s (threshold %d)",
            kind_name(child),
            child_rank,
            kind_name(parent),
            threshold,
        )
        raise RankError(kind_name(parent), kind_name(child), child_rank, threshold)

    if isinstance(parent, Environment):
        parent.items.append(render(child))
        return
    parent.children.append(deepcopy(child))
