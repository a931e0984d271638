"""Serialize a whole document into LaTeX source text."""
from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from contextlib import nullcontext
from dataclasses import dataclass
from typing import List, Optional

from tex_renderer.model.document_model import Document
from tex_renderer.model.elements import Element, Level, UserDefined, children
from tex_renderer.renderer.latex_renderer import (
    DEFAULT_MAX_WORKERS,
    flatten,
    flatten_parallel,
    render,
)
from tex_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

BEGIN_DOCUMENT = "\\begin{document}"
TITLE_PAGE = "\\maketitle\n\\newpage"
END_DOCUMENT = "\\end{document}"


@dataclass(slots=True, frozen=True)
class SplitOutput:
    """Document body plus the separately stored package preamble."""

    main: str
    structure: str


class DocumentRenderer:
    """Produce the LaTeX text for a :class:`Document`.

    With ``parallel`` enabled each top-level child subtree is flattened on a
    bounded thread pool shared for the duration of one render. The output is
    identical to the sequential traversal.
    """

    def __init__(self, *, parallel: bool = False, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        self._parallel = parallel
        self._max_workers = max_workers

    def render(self, document: Document) -> str:
        """Render the complete document into a single text."""
        lines = self._head_lines(document)
        lines.extend(self._structure_lines(document))
        lines.extend(self._body_lines(document))
        document.mark_rendered()
        return "\n".join(lines)

    def render_split(self, document: Document) -> SplitOutput:
        """Render the document into ``main`` and ``structure`` texts.

        ``structure`` holds the package directives followed by package-level
        fragments; ``main`` holds everything else in the usual order.
        """
        lines = self._head_lines(document)
        lines.extend(self._body_lines(document))
        structure = self._structure_lines(document)
        document.mark_rendered()
        return SplitOutput(main="\n".join(lines), structure="\n".join(structure))

    def _head_lines(self, document: Document) -> List[str]:
        lines = [document.document_class.directive()]
        lines.extend(document.metadata.lines())
        lines.extend(fragment.content for fragment in document.user_defined(Level.META))
        return lines

    def _structure_lines(self, document: Document) -> List[str]:
        lines = [package.directive() for package in document.packages]
        lines.extend(fragment.content for fragment in document.user_defined(Level.PACKAGE))
        return lines

    def _body_lines(self, document: Document) -> List[str]:
        LOGGER.debug(
            "Rendering %d top-level elements (parallel=%s)", len(document.elements), self._parallel
        )
        lines = [BEGIN_DOCUMENT, TITLE_PAGE]
        pool = ThreadPoolExecutor(max_workers=self._max_workers) if self._parallel else nullcontext()
        with pool as executor:
            for element in document.elements:
                lines.extend(self._element_lines(element, executor))
        lines.append(END_DOCUMENT)
        return lines

    def _element_lines(self, element: Element, executor: Optional[Executor]) -> List[str]:
        if isinstance(element, UserDefined):
            return [element.content] if element.level is Level.BODY else []
        lines = [render(element)]
        for child in children(element) or ():
            lines.append(render(child))
            if executor is None:
                lines.append(flatten(child))
            else:
                lines.append(flatten_parallel(child, executor))
        return lines
