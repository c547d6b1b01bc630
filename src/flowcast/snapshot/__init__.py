"""Snapshot layer: read-only record lists handed to the engine."""

from flowcast.snapshot.base import SnapshotSource
from flowcast.snapshot.factories import create_json_source

__all__ = ["SnapshotSource", "create_json_source"]
