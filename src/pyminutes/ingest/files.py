"""In-memory handle for an uploaded projection file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProjectionFile:
    name: str
    content: bytes

    @classmethod
    def from_path(cls, path: Path) -> "ProjectionFile":
        return cls(name=path.name, content=path.read_bytes())

    @property
    def size(self) -> int:
        return len(self.content)

    def text(self) -> str:
        # utf-8-sig tolerates the BOM spreadsheet exports tend to prepend.
        return self.content.decode("utf-8-sig")
