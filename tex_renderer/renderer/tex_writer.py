"""Persist rendered documents as ``.tex`` files."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from tex_renderer.model.document_model import Document
from tex_renderer.model.errors import DocumentWriteError
from tex_renderer.renderer.document_renderer import DocumentRenderer
from tex_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _write_text(path: Path, content: str) -> None:
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise DocumentWriteError(path, f"content is not encodable as UTF-8 ({exc.reason})") from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise DocumentWriteError(path, exc.strerror or str(exc)) from exc
    LOGGER.info("Wrote %s (%d bytes)", path.name, len(data))


class TexFileWriter:
    """Write the single-file rendering of a document to ``output_path``."""

    def __init__(self, output_path: Path, renderer: Optional[DocumentRenderer] = None) -> None:
        self._output_path = Path(output_path)
        self._renderer = renderer or DocumentRenderer()

    def write(self, document: Document) -> None:
        _write_text(self._output_path, self._renderer.render(document))

    async def write_async(self, document: Document) -> None:
        """Render and write without blocking the running event loop."""
        await asyncio.to_thread(self.write, document)


class SplitTexFileWriter:
    """Write the document body and its package preamble to two files."""

    def __init__(
        self,
        main_path: Path,
        structure_path: Path,
        renderer: Optional[DocumentRenderer] = None,
    ) -> None:
        self._main_path = Path(main_path)
        self._structure_path = Path(structure_path)
        self._renderer = renderer or DocumentRenderer()

    def write(self, document: Document) -> None:
        output = self._renderer.render_split(document)
        _write_text(self._main_path, output.main)
        _write_text(self._structure_path, output.structure)

    async def write_async(self, document: Document) -> None:
        """Render and write both files without blocking the running event loop."""
        output = await asyncio.to_thread(self._renderer.render_split, document)
        await asyncio.to_thread(_write_text, self._main_path, output.main)
        await asyncio.to_thread(_write_text, self._structure_path, output.structure)
