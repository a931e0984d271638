"""Exceptions raised while building or persisting a document."""
from __future__ import annotations

from pathlib import Path


class TexError(Exception):
    """Base class for every error raised by the library."""


class RankError(TexError):
    """An element was attached to a container that does not accept its rank."""

    def __init__(self, parent_kind: str, child_kind: str, child_rank: int, threshold: int) -> None:
        self.parent_kind = parent_kind
        self.child_kind = child_kind
        self.child_rank = child_rank
        self.threshold = threshold
        super().__init__(
            f"Rank Error: cannot attach {child_kind} (rank {child_rank}) to {parent_kind}; "
            f"rank must be greater than {threshold}"
        )


class DocumentWriteError(TexError):
    """Rendered output could not be persisted."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")
