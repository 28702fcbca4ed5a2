"""Human-readable cluster listing.

Members are resolved back to their external keys and sorted, and the
rendered clusters are sorted too, so the output is deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable

from clique_stream.registry import NodeRegistry


def format_cluster(cluster: Iterable[int], registry: NodeRegistry, separator: str = ", ") -> str:
    """Render one cluster as its sorted member keys."""
    keys = sorted(str(registry.key_for(node_id)) for node_id in cluster)
    return separator.join(keys)


def format_clusters(
    clusters: Iterable[Iterable[int]], registry: NodeRegistry, separator: str = ", "
) -> list[str]:
    """Render all clusters, one line each, in sorted order."""
    return sorted(format_cluster(cluster, registry, separator) for cluster in clusters)
