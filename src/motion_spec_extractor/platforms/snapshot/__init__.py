"""Snapshot platform for the extraction pipeline.

This platform replays a host project recorded as JSON, allowing the
extraction pipeline to run without a live host.
"""

from pathlib import Path

from .host import SnapshotComposition, SnapshotLayer, SnapshotProperty
from .source import SnapshotProject, SnapshotSource, validate_snapshot

# Auto-register with the registry
from ...registry import SourceRegistry


def _create_snapshot_source(path: Path, **kwargs) -> SnapshotSource:
    """Factory function for creating snapshot sources.

    Args:
        path: Snapshot JSON file
        **kwargs: Additional parameters (unused for snapshots)

    Returns:
        SnapshotSource instance
    """
    return SnapshotSource(Path(path))


# Auto-register at module import
SourceRegistry.register_factory('snapshot', _create_snapshot_source)

__all__ = [
    "SnapshotComposition",
    "SnapshotLayer",
    "SnapshotProject",
    "SnapshotProperty",
    "SnapshotSource",
    "validate_snapshot",
]
