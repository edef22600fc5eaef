from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ProjectNode:
    name: str
    path: str  # ":" for the root, ":<name>" for a subproject
    project_dir: Path
    output_directory: Path


@dataclass(frozen=True, slots=True)
class BuildLayout:
    root: ProjectNode
    subprojects: tuple[ProjectNode, ...] = ()

    def __iter__(self) -> Iterator[ProjectNode]:
        yield self.root
        yield from self.subprojects

    def subproject(self, name: str) -> ProjectNode:
        for node in self.subprojects:
            if node.name == name:
                return node
        raise KeyError(name)

    def output_for(self, name: str) -> Path:
        return self.subproject(name).output_directory

    def to_dict(self) -> dict[str, object]:
        return {
            "root": _node_dict(self.root),
            "subprojects": [_node_dict(n) for n in self.subprojects],
        }


def _node_dict(node: ProjectNode) -> dict[str, str]:
    return {
        "name": node.name,
        "path": node.path,
        "project_dir": str(node.project_dir),
        "output_directory": str(node.output_directory),
    }
