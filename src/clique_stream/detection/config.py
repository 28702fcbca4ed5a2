"""Detector configuration with sensible defaults.

All parameters can be overridden via ``config/detector.yaml``.
If the file does not exist, defaults are used.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class DetectorConfig(BaseModel):
    """Parameters for online cluster detection."""

    # Applied to search filtering, cluster acceptance and subset cleanup.
    min_cluster_size: int = Field(default=3, ge=2)


def load_detector_config(path: Path) -> DetectorConfig:
    """Load detector configuration from a YAML file.

    If the file does not exist, returns a ``DetectorConfig`` with all
    default values.  Partial overrides are supported -- only the keys
    present in the YAML file will override defaults.
    """
    if not path.exists():
        return DetectorConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return DetectorConfig(**data)
