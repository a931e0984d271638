"""Common helpers shared by renderer implementations."""
from __future__ import annotations

import string
from typing import Dict, Iterable, List, Optional

from tex_renderer.model.elements import TextStyle

STYLE_COMMANDS: Dict[TextStyle, Optional[str]] = {
    TextStyle.NORMAL: None,
    TextStyle.BOLD: "textbf",
    TextStyle.ITALIC: "textit",
    TextStyle.UNDERLINE: "underline",
    TextStyle.ROMAN: "textrm",
}

DEFAULT_VERBATIM_DELIMITER = "!"
FALLBACK_VERBATIM_DELIMITERS = "|+@#~^=/:;"
# letters would extend the command name and `*` selects \verb*
VERBATIM_DELIMITERS = DEFAULT_VERBATIM_DELIMITER + FALLBACK_VERBATIM_DELIMITERS + "".join(
    char for char in string.punctuation + string.digits
    if char not in DEFAULT_VERBATIM_DELIMITER + FALLBACK_VERBATIM_DELIMITERS + "*"
)


def latex_command(name: str, argument: str) -> str:
    """Return ``\\name{argument}``."""
    return f"\\{name}{{{argument}}}"


def begin_end_block(name: str, lines: Iterable[str]) -> str:
    """Wrap ``lines`` into a ``\\begin{name}``/``\\end{name}`` block."""
    block: List[str] = [latex_command("begin", name)]
    block.extend(lines)
    block.append(latex_command("end", name))
    return "\n".join(block)


def verbatim_delimiter(content: str) -> str:
    """Pick a ``\\verb`` delimiter that does not occur in ``content``.

    Raises ``ValueError`` when every usable delimiter already appears in the
    content, since no ``\\verb`` could then reproduce it.
    """
    for candidate in VERBATIM_DELIMITERS:
        if candidate not in content:
            return candidate
    raise ValueError("No \\verb delimiter is free for the given content")
