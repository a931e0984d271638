"""Entry-point that builds sample documents and writes them as LaTeX."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, Dict, Optional

from tex_renderer.model.document_model import ClassName, Document, Metadata
from tex_renderer.model.elements import (
    Chapter,
    Environment,
    Level,
    List,
    ListMode,
    Part,
    Section,
    Text,
    TextStyle,
    UserDefined,
)
from tex_renderer.renderer.document_renderer import DocumentRenderer
from tex_renderer.renderer.tex_writer import SplitTexFileWriter, TexFileWriter
from tex_renderer.utils.debug import DebugDumper
from tex_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def build_sample_document() -> Document:
    """Book with two parts, an equation environment and an enumerated list."""
    document = Document()
    document.set_class(ClassName.BOOK)
    document.set_metadata(Metadata())
    document.add_package("dramatist")

    part_one = Part("Part 1")
    part_one.attach(Section("Section 1"))

    part_two = Part("Part 2")
    chapter = Chapter("Chapter")
    chapter.attach(Text("text in part 2", TextStyle.ROMAN))
    part_two.attach(chapter)

    equation = Environment("equation")
    equation.attach_string("x^2 + y^2 = z^2")
    part_two.attach(equation)

    part_two.attach(List(ListMode.ENUMERATE, ["item 1", "item 2", "item 3"]))

    package_note = UserDefined("Some package defined stuff", Level.PACKAGE)
    document.set_elements([part_one, part_two, package_note])
    return document


def build_minimal_document() -> Document:
    """Article with a single part > chapter > section > text chain."""
    document = Document()
    document.set_class(ClassName.ARTICLE)
    document.set_metadata(Metadata(author="An author", title="A title", date="What day is it?"))
    document.add_package("dramatist")
    document.add_package("listings")

    section = Section("Section 1")
    section.attach(Text("Some text", TextStyle.UNDERLINE))
    chapter = Chapter("Chapter 1")
    chapter.attach(section)
    part = Part("Part 1")
    part.attach(chapter)

    document.set_elements([part])
    return document


SAMPLES: Dict[str, Callable[[], Document]] = {
    "book": build_sample_document,
    "minimal": build_minimal_document,
}


def main(
    output: str,
    *,
    split_structure: Optional[str] = None,
    parallel: bool = False,
    use_async: bool = False,
    debug: bool = False,
    sample: str = "book",
) -> Document:
    """Build the requested sample document and write it to ``output``."""
    if sample not in SAMPLES:
        raise ValueError(f"Unknown sample {sample!r}; expected one of {sorted(SAMPLES)}")

    LOGGER.info("Building %s sample document", sample)
    document = SAMPLES[sample]()
    renderer = DocumentRenderer(parallel=parallel)
    output_path = Path(output).resolve()

    if split_structure is not None:
        writer = SplitTexFileWriter(output_path, Path(split_structure).resolve(), renderer)
    else:
        writer = TexFileWriter(output_path, renderer)

    if use_async:
        asyncio.run(writer.write_async(document))
    else:
        writer.write(document)

    if debug:
        DebugDumper(output_path.parent / "debug").dump(document)
    return document


if __name__ == "__main__":  # pragma: no cover
    import argparse

    parser = argparse.ArgumentParser(description="Write a sample LaTeX document built from attached elements")
    parser.add_argument("output", help="Path of the .tex file to write")
    parser.add_argument("--structure", help="Write packages into this separate file")
    parser.add_argument("--parallel", action="store_true", help="Flatten subtrees on a worker pool")
    parser.add_argument("--async", dest="use_async", action="store_true", help="Write through the asyncio path")
    parser.add_argument("--debug", action="store_true", help="Dump the element tree as JSON next to the output")
    parser.add_argument("--sample", choices=sorted(SAMPLES), default="book", help="Sample document to build")

    args = parser.parse_args()
    main(
        args.output,
        split_structure=args.structure,
        parallel=args.parallel,
        use_async=args.use_async,
        debug=args.debug,
        sample=args.sample,
    )
