"""In-memory representation of the LaTeX document element tree."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List as ListType, Optional, Tuple


class TextStyle(Enum):
    """Inline decoration applied to a text run."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    VERBATIM = "verbatim"
    ROMAN = "roman"


class ListMode(Enum):
    """List flavours, named after the environment they render into."""

    ITEMIZE = "itemize"
    ENUMERATE = "enumerate"


class Level(Enum):
    """Document region a user-defined fragment is emitted into.

    META lands after the metadata block, PACKAGE after the package
    directives and BODY inside the document environment.
    """

    META = "meta"
    PACKAGE = "package"
    BODY = "body"


class Attachable:
    """Gives a container the rank-checked ``attach`` operation."""

    __slots__ = ()

    def attach(self, element: "Element") -> None:
        """Append ``element`` after validating its rank; raises ``RankError``.

        Environments keep the rendered markup of the element instead.
        """
        from tex_renderer.model.attach import attach

        attach(self, element)


@dataclass(slots=True)
class Part(Attachable):
    """Top-level sectioning unit, holds chapters and everything below."""

    label: str
    children: ListType["Element"] = field(default_factory=list)

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class Chapter(Attachable):
    """Chapter heading with its nested content."""

    label: str
    children: ListType["Element"] = field(default_factory=list)

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class Section(Attachable):
    """Section heading with its nested content."""

    label: str
    children: ListType["Element"] = field(default_factory=list)

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class Paragraph(Attachable):
    """Run-in paragraph heading; the child list always exists."""

    label: str
    children: ListType["Element"] = field(default_factory=list)

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class Text:
    """A run of text rendered as its own paragraph."""

    content: str
    style: TextStyle = TextStyle.NORMAL

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class Input:
    """Inclusion of another ``.tex`` file."""

    filename: str

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class Environment(Attachable):
    """``\\begin{name} ... \\end{name}`` block holding raw string items."""

    name: str
    items: ListType[str] = field(default_factory=list)

    def rank(self) -> int:
        return rank(self)

    def attach_string(self, item: str) -> None:
        """Append a raw line, bypassing rank validation."""
        self.items.append(item)


@dataclass(slots=True)
class List:
    """Itemized or enumerated list of raw string items."""

    mode: ListMode
    items: ListType[str] = field(default_factory=list)

    def rank(self) -> int:
        return rank(self)


@dataclass(slots=True)
class UserDefined:
    """Raw markup injected verbatim at the given document level."""

    content: str
    level: Level = Level.BODY

    def rank(self) -> int:
        return rank(self)

    def evaluate(self) -> Tuple[str, str, str]:
        """Return ``(body, meta, package)`` with the content in its own slot only."""
        if self.level is Level.BODY:
            return self.content, "", ""
        if self.level is Level.META:
            return "", self.content, ""
        if self.level is Level.PACKAGE:
            return "", "", self.content
        raise TypeError(f"Unsupported level: {self.level!r}")


Element = Part | Chapter | Section | Paragraph | Text | Input | Environment | List | UserDefined
ContainerElement = Part | Chapter | Section | Paragraph

PART_RANK = 0
CHAPTER_RANK = 1
SECTION_RANK = 2
PARAGRAPH_RANK = 3
USER_DEFINED_RANK = 4
LIST_RANK = 5
ENVIRONMENT_RANK = 6
INPUT_RANK = 7
TEXT_RANK = 8


def rank(element: Element) -> int:
    """Return the fixed rank of the element's kind."""
    if isinstance(element, Part):
        return PART_RANK
    if isinstance(element, Chapter):
        return CHAPTER_RANK
    if isinstance(element, Section):
        return SECTION_RANK
    if isinstance(element, Paragraph):
        return PARAGRAPH_RANK
    if isinstance(element, UserDefined):
        return USER_DEFINED_RANK
    if isinstance(element, List):
        return LIST_RANK
    if isinstance(element, Environment):
        return ENVIRONMENT_RANK
    if isinstance(element, Input):
        return INPUT_RANK
    if isinstance(element, Text):
        return TEXT_RANK
    raise TypeError(f"Unsupported element: {type(element).__name__}")


def children(element: Element) -> Optional[ListType[Element]]:
    """Return the child sequence of a container, ``None`` for every other kind."""
    if isinstance(element, (Part, Chapter, Section, Paragraph)):
        return element.children
    if isinstance(element, (Text, Input, Environment, List, UserDefined)):
        return None
    raise TypeError(f"Unsupported element: {type(element).__name__}")


def kind_name(element: Element) -> str:
    """Human readable element kind, used in errors and debug output."""
    return type(element).__name__
