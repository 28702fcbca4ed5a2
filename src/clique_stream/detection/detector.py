"""Online cluster detector.

Feeds directed interaction events through the ``EdgeVerifier`` and, on
every promotion to a mutual edge, runs a localized clique search.  The
caller invokes ``finalize`` once after the last event to drop clusters
that were superseded by larger ones.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

import structlog

from clique_stream.clustering import CliqueEngine
from clique_stream.detection.config import DetectorConfig
from clique_stream.detection.verifier import EdgeVerifier

logger = structlog.get_logger()


@dataclass
class DetectionStats:
    """Counters collected while processing a stream.

    Attributes:
        events: Directed events passed to ``process``.
        promotions: Events that confirmed a mutual edge.
        searches: Clique searches actually run.
        skipped_searches: Promotions whose neighbourhood was too small.
        clusters_found: New clusters added during searches.
        clusters_removed: Subset clusters removed by ``finalize``.
    """

    events: int = 0
    promotions: int = 0
    searches: int = 0
    skipped_searches: int = 0
    clusters_found: int = 0
    clusters_removed: int = 0


@dataclass
class DetectionResult:
    """Clusters and statistics from a complete run."""

    clusters: frozenset[frozenset] = field(default_factory=frozenset)
    stats: DetectionStats = field(default_factory=DetectionStats)


class OnlineDetector:
    """Incrementally discovers maximal clusters of mutual interaction."""

    def __init__(self, config: DetectorConfig | None = None) -> None:
        self.config = config or DetectorConfig()
        self.verifier = EdgeVerifier()
        self.engine = CliqueEngine(
            self.verifier.verified, min_cluster_size=self.config.min_cluster_size
        )
        self.stats = DetectionStats()
        self.finalized = False

    def process(self, source: Hashable, target: Hashable) -> None:
        """Handle one directed interaction ``source -> target``."""
        self.stats.events += 1
        if not self.verifier.observe(source, target):
            return
        self.stats.promotions += 1

        seed = self.engine.candidate_neighborhood(source, target)
        if seed is None:
            self.stats.skipped_searches += 1
            return
        self.stats.searches += 1
        self.stats.clusters_found += self.engine.find_cliques(seed)

    def finalize(self) -> None:
        """Remove clusters that are subsets of other clusters."""
        removed = self.engine.clean_subset_clusters()
        self.stats.clusters_removed += removed
        self.finalized = True
        logger.info(
            "detection_finalized",
            events=self.stats.events,
            promotions=self.stats.promotions,
            searches=self.stats.searches,
            clusters=len(self.engine.clusters),
        )

    @property
    def clusters(self) -> frozenset[frozenset]:
        """Read-only snapshot of the current cluster set."""
        return self.engine.clusters


def detect_clusters(
    interactions: Iterable[tuple[Hashable, Hashable]],
    config: DetectorConfig | None = None,
) -> DetectionResult:
    """Run a whole stream of ``(source, target)`` pairs and finalize.

    Args:
        interactions: Directed events in stream order.
        config: Detector configuration (defaults if ``None``).

    Returns:
        A ``DetectionResult`` with the maximal clusters and run counters.
    """
    detector = OnlineDetector(config)
    for source, target in interactions:
        detector.process(source, target)
    detector.finalize()
    return DetectionResult(clusters=detector.clusters, stats=detector.stats)
