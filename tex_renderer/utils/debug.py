"""Helpers to persist the element tree for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from tex_renderer.model.document_model import Document
from tex_renderer.model.elements import (
    Chapter,
    Environment,
    Input,
    List,
    Paragraph,
    Part,
    Section,
    Text,
    UserDefined,
    kind_name,
    rank,
)

_ELEMENT_TYPES = (Part, Chapter, Section, Paragraph, Text, Input, Environment, List, UserDefined)


class DebugDumper:
    """Writes the document tree onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def dump(self, document: Document) -> Path:
        """Persist the document as JSON and return the written path."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / "document_tree.json"
        target.write_text(json.dumps(self.serialize(document), indent=2), encoding="utf-8")
        return target

    def serialize(self, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if is_dataclass(value):
            payload = {}
            if isinstance(value, _ELEMENT_TYPES):
                payload["kind"] = kind_name(value)
                payload["rank"] = rank(value)
            # nested elements are tagged with kind and rank too
            for item in fields(value):
                payload[item.name] = self.serialize(getattr(value, item.name))
            return payload
        if isinstance(value, dict):
            return {k: self.serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.serialize(v) for v in value]
        return value
