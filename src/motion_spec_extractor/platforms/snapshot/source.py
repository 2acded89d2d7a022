"""Snapshot source adapter.

This module provides a Source implementation that reads a recorded host
project from a JSON snapshot file. The snapshot layout is::

    {
        "host": {"name": "After Effects", "version": "24.1"},
        "projectFile": "/projects/promo.aep",
        "activeComposition": "Main",
        "compositions": [{"name": "Main", "width": 1920, ...}]
    }
"""

import json
from pathlib import Path
from typing import Any

from ...sources.base import HostInfo, Source
from .host import SnapshotComposition


class SnapshotProject:
    """All compositions of a snapshot, addressable by name."""

    def __init__(self, data: dict[str, Any]):
        self._compositions: dict[str, SnapshotComposition] = {}
        for comp_data in data["compositions"]:
            comp = SnapshotComposition(comp_data, self)
            self._compositions[comp_data["name"]] = comp

    @property
    def compositions(self) -> list[SnapshotComposition]:
        return list(self._compositions.values())

    def get_composition(self, name: str) -> SnapshotComposition:
        """Retrieve a composition by name.

        Raises:
            KeyError: If the snapshot has no composition with that name
        """
        if name not in self._compositions:
            raise KeyError(f"Composition not found: {name}")
        return self._compositions[name]


def validate_snapshot(data: Any) -> None:
    """Check the top-level structure of a snapshot.

    Args:
        data: Decoded snapshot JSON

    Raises:
        ValueError: If the structure is not a usable snapshot
    """
    if not isinstance(data, dict):
        raise ValueError("Snapshot must be a JSON object")

    compositions = data.get("compositions")
    if not isinstance(compositions, list):
        raise ValueError("Snapshot must contain a 'compositions' list")

    for position, comp in enumerate(compositions, start=1):
        if not isinstance(comp, dict) or not isinstance(comp.get("name"), str):
            raise ValueError(f"Composition {position} in snapshot has no name")

    active = data.get("activeComposition")
    if active is not None and active not in {comp["name"] for comp in compositions}:
        raise ValueError(f"Active composition not found in snapshot: {active}")


class SnapshotSource(Source):
    """Source adapter for recorded host snapshots.

    Example:
        >>> source = SnapshotSource(Path('promo.snapshot.json'))
        >>> comp = source.get_active_composition()
        >>> comp.name
        'Main'
    """

    def __init__(self, path: Path | None = None, *, data: dict[str, Any] | None = None):
        """Initialize snapshot source.

        Args:
            path: Snapshot JSON file
            data: Already decoded snapshot, used instead of a file

        Raises:
            ValueError: If the file doesn't exist or isn't a valid snapshot
        """
        self.path = path.resolve() if path is not None else None

        if data is not None:
            self._load(data)
            return

        if self.path is None:
            raise ValueError("Either a snapshot path or snapshot data is required")

        if not self.path.exists():
            raise ValueError(f"Snapshot does not exist: {self.path}")

        if not self.path.is_file():
            raise ValueError(f"Snapshot is not a file: {self.path}")

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Snapshot is not valid JSON: {e}") from e

        self._load(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SnapshotSource":
        """Build a source from an already decoded snapshot.

        Raises:
            ValueError: If the structure is not a usable snapshot
        """
        return cls(data=data)

    def _load(self, data: Any) -> None:
        validate_snapshot(data)
        self._data = data
        try:
            self.project = SnapshotProject(data)
        except TypeError as e:
            raise ValueError(f"Malformed snapshot: {e}") from e

    def get_active_composition(self) -> SnapshotComposition | None:
        name = self._data.get("activeComposition")
        if name is None:
            return None
        return self.project.get_composition(name)

    def list_compositions(self) -> list[SnapshotComposition]:
        return self.project.compositions

    def get_composition(self, name: str) -> SnapshotComposition:
        return self.project.get_composition(name)

    def get_host_info(self) -> HostInfo:
        host = self._data.get("host") or {}
        return HostInfo(
            name=host.get("name"),
            version=host.get("version"),
            project_file=self._data.get("projectFile"),
        )
