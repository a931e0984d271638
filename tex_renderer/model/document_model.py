"""Aggregate model combining document class, preamble and body elements."""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from tex_renderer.model.elements import Element, Level, UserDefined
from tex_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_FONT_SIZE = 11
DEFAULT_PAPER_SIZE = "letterpaper"


class ClassName(Enum):
    """Document classes understood by ``\\documentclass``."""

    ARTICLE = "article"
    BOOK = "book"
    REPORT = "report"
    BEAMER = "beamer"


class DocumentState(Enum):
    EMPTY = "empty"
    CONFIGURED = "configured"
    RENDERED = "rendered"


@dataclass(slots=True)
class DocumentClass:
    """Class name plus the font and paper options of ``\\documentclass``."""

    name: ClassName = ClassName.ARTICLE
    font_size: Optional[int] = DEFAULT_FONT_SIZE
    paper_size: Optional[str] = DEFAULT_PAPER_SIZE

    def directive(self) -> str:
        font_size = DEFAULT_FONT_SIZE if self.font_size is None else self.font_size
        paper_size = DEFAULT_PAPER_SIZE if self.paper_size is None else self.paper_size
        return f"\\documentclass[{font_size}pt, {paper_size}]{{{self.name.value}}}"


@dataclass(slots=True)
class Metadata:
    """Author, title and date emitted ahead of the packages."""

    author: str = "default author"
    title: str = "default title"
    date: str = "what day is it?"

    def lines(self) -> List[str]:
        return [
            f"\\author{{{self.author}}}",
            f"\\title{{{self.title}}}",
            f"\\date{{{self.date}}}",
        ]


@dataclass(slots=True)
class Package:
    """A ``\\usepackage`` entry, stored by raw name."""

    name: str

    def directive(self) -> str:
        return f"\\usepackage{{{self.name}}}"


@dataclass(slots=True)
class Document:
    """Everything needed to serialize one LaTeX document.

    The setters may be called at any time; rendering always reflects the
    state at the moment it runs.
    """

    document_class: DocumentClass = field(default_factory=DocumentClass)
    metadata: Metadata = field(default_factory=Metadata)
    packages: List[Package] = field(default_factory=list)
    elements: List[Element] = field(default_factory=list)
    state: DocumentState = DocumentState.EMPTY

    def set_class(self, name: ClassName) -> None:
        self.document_class.name = name
        self._touch()

    def set_class_options(self, font_size: Optional[int], paper_size: Optional[str]) -> None:
        self.document_class.font_size = font_size
        self.document_class.paper_size = paper_size
        self._touch()

    def set_metadata(self, metadata: Metadata) -> None:
        self.metadata = metadata
        self._touch()

    def set_packages(self, packages: Iterable[Package | str]) -> None:
        """Replace the package list; plain strings are taken as package names."""
        self.packages = [pkg if isinstance(pkg, Package) else Package(pkg) for pkg in packages]
        self._touch()

    def add_package(self, name: str) -> None:
        self.packages.append(Package(name))
        self._touch()

    def set_elements(self, elements: Iterable[Element]) -> None:
        """Replace the top-level elements with independent copies."""
        self.elements = [deepcopy(element) for element in elements]
        self._touch()

    def add_element(self, element: Element) -> None:
        self.elements.append(deepcopy(element))
        self._touch()

    def user_defined(self, level: Level) -> List[UserDefined]:
        """Top-level user-defined fragments placed at ``level``, in element order."""
        return [
            element
            for element in self.elements
            if isinstance(element, UserDefined) and element.level is level
        ]

    def mark_rendered(self) -> None:
        self.state = DocumentState.RENDERED

    def _touch(self) -> None:
        if self.state is DocumentState.RENDERED:
            LOGGER.debug("Document reconfigured after rendering")
        self.state = DocumentState.CONFIGURED
