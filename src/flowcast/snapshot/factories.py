"""Snapshot factory functions for creating snapshot sources."""

import os
from typing import Optional

from flowcast.config import DATA_PATH_ENV, default_data_path
from flowcast.snapshot.json_source import JSONSnapshotSource


def create_json_source(data_path: Optional[str] = None) -> JSONSnapshotSource:
    """Create a JSON snapshot source.

    Args:
        data_path: Path to the snapshot file. If None, checks FLOWCAST_DATA_PATH
            environment variable, then defaults to ~/.flowcast/snapshot.json

    Returns:
        JSONSnapshotSource for that file (not yet loaded)
    """
    if data_path is None:
        data_path = os.environ.get(DATA_PATH_ENV)

    if data_path is None:
        data_path = str(default_data_path())

    return JSONSnapshotSource(data_path)
