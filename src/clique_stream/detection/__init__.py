"""Stream-driven detection of mutual-interaction clusters."""

from .config import DetectorConfig, load_detector_config
from .detector import DetectionResult, DetectionStats, OnlineDetector, detect_clusters
from .verifier import EdgeVerifier

__all__ = [
    "DetectionResult",
    "DetectionStats",
    "DetectorConfig",
    "EdgeVerifier",
    "OnlineDetector",
    "detect_clusters",
    "load_detector_config",
]
