"""Convert individual elements and whole subtrees into LaTeX markup."""
from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional, Tuple

from tex_renderer.model.elements import (
    Chapter,
    Element,
    Environment,
    Input,
    List as ListElement,
    Paragraph,
    Part,
    Section,
    Text,
    TextStyle,
    UserDefined,
    children,
)
from tex_renderer.renderer.utils import (
    STYLE_COMMANDS,
    begin_end_block,
    latex_command,
    verbatim_delimiter,
)

PARAGRAPH_BREAK = "\\par"
DEFAULT_MAX_WORKERS = 4


def render(element: Element) -> str:
    """Render the element's own markup, excluding any descendants."""
    if isinstance(element, Part):
        return latex_command("part", element.label)
    if isinstance(element, Chapter):
        return latex_command("chapter", element.label)
    if isinstance(element, Section):
        return latex_command("section", element.label)
    if isinstance(element, Paragraph):
        return latex_command("paragraph", element.label)
    if isinstance(element, Text):
        return f"{PARAGRAPH_BREAK} {_styled_text(element)}"
    if isinstance(element, Input):
        return latex_command("input", element.filename)
    if isinstance(element, Environment):
        return begin_end_block(element.name, element.items)
    if isinstance(element, ListElement):
        return begin_end_block(element.mode.value, (f"\\item {item}" for item in element.items))
    if isinstance(element, UserDefined):
        return element.content
    raise TypeError(f"Unsupported element: {type(element).__name__}")


def _styled_text(text: Text) -> str:
    if text.style is TextStyle.VERBATIM:
        delimiter = verbatim_delimiter(text.content)
        return f"\\verb{delimiter}{text.content}{delimiter}"
    command = STYLE_COMMANDS[text.style]
    if command is None:
        return text.content
    return latex_command(command, text.content)


def _render_pair(element: Element) -> Tuple[str, str]:
    return render(element), flatten(element)


def flatten(element: Element) -> str:
    """Render every descendant of ``element`` depth-first, pre-order.

    Each child contributes its own markup followed by its flattened subtree;
    the pieces are joined with newlines. Leaves and childless containers
    flatten to an empty string.
    """
    nested = children(element)
    if not nested:
        return ""
    lines: List[str] = []
    for child in nested:
        lines.extend(_render_pair(child))
    return "\n".join(lines)


def flatten_parallel(
    element: Element,
    executor: Optional[Executor] = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> str:
    """Same output as :func:`flatten`, with sibling subtrees rendered on a worker pool."""
    nested = children(element)
    if not nested:
        return ""
    if executor is None:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            pairs = list(pool.map(_render_pair, nested))
    else:
        pairs = list(executor.map(_render_pair, nested))
    lines: List[str] = []
    for pair in pairs:
        lines.extend(pair)
    return "\n".join(lines)
