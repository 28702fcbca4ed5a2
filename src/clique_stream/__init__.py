"""Incremental detection of mutual-interaction clusters in event streams."""

from clique_stream.detection import DetectorConfig, OnlineDetector, detect_clusters

__all__ = ["DetectorConfig", "OnlineDetector", "detect_clusters"]
