"""Localized Bron-Kerbosch search and subset cleanup.

Each verified edge ``(u, v)`` can only create cliques that contain both
endpoints, so the search is restricted to ``N(u) & N(v) | {u, v}``.
Because every search sees only that neighbourhood, a cluster found early
may later be swallowed by a larger one found from another edge; those
subsets are removed in one batch by ``clean_subset_clusters``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable

import structlog

from clique_stream.combinatorics import all_subsets_in_range
from clique_stream.graph import Graph

logger = structlog.get_logger()

Cluster = frozenset


class CliqueEngine:
    """Finds and stores maximal clusters in a verified graph.

    Args:
        graph: The verified (symmetric) graph to search.  It is read,
            never modified.
        min_cluster_size: Smallest cluster worth keeping.
    """

    def __init__(self, graph: Graph, min_cluster_size: int = 3) -> None:
        self._graph = graph
        self.min_cluster_size = min_cluster_size
        self._clusters: set[Cluster] = set()

    @property
    def clusters(self) -> frozenset[Cluster]:
        """Snapshot of the clusters found so far (may hold subsets until cleanup)."""
        return frozenset(self._clusters)

    def add_cluster(self, members: Iterable[Hashable]) -> bool:
        """Store a cluster; returns ``False`` if an identical one exists."""
        cluster = Cluster(members)
        if cluster in self._clusters:
            return False
        self._clusters.add(cluster)
        logger.debug("cluster_found", size=len(cluster))
        return True

    # ------------------------------------------------------------------
    # Trigger path
    # ------------------------------------------------------------------

    def candidate_neighborhood(self, u: Hashable, v: Hashable) -> set | None:
        """Seed for a search after ``(u, v)`` was verified.

        Returns ``None`` when no cluster of ``min_cluster_size`` can
        involve this edge yet.
        """
        u_neighbors = self._graph.neighbors(u)
        v_neighbors = self._graph.neighbors(v)
        needed = self.min_cluster_size - 1
        if len(u_neighbors) < needed or len(v_neighbors) < needed:
            return None

        seed = set(u_neighbors).intersection(v_neighbors)
        seed.add(u)
        seed.add(v)
        if len(seed) < self.min_cluster_size:
            return None
        return seed

    def on_verified_edge(self, u: Hashable, v: Hashable) -> int:
        """Search around a newly verified edge.  Returns clusters added."""
        seed = self.candidate_neighborhood(u, v)
        if seed is None:
            return 0
        return self.find_cliques(seed)

    # ------------------------------------------------------------------
    # Bron-Kerbosch (no pivoting)
    # ------------------------------------------------------------------

    def find_cliques(self, seed: Iterable[Hashable]) -> int:
        """Add every maximal clique inside ``seed`` to the cluster set.

        Candidates are visited in sorted order so runs are reproducible.

        Returns:
            Number of clusters that were not already stored.
        """
        before = len(self._clusters)
        self._extend([], sorted(seed), [])
        return len(self._clusters) - before

    def _extend(
        self,
        potential: list[Hashable],
        candidates: list[Hashable],
        explored: list[Hashable],
    ) -> None:
        if self._end_reached(candidates, explored):
            return

        for candidate in list(candidates):
            potential.append(candidate)
            candidates.remove(candidate)

            neighbors = self._graph.neighbors(candidate)
            new_candidates = [node for node in candidates if node in neighbors]
            new_explored = [node for node in explored if node in neighbors]

            if not new_candidates and not new_explored:
                if len(potential) >= self.min_cluster_size:
                    self.add_cluster(potential)
            else:
                self._extend(potential, new_candidates, new_explored)

            # Undo in reverse order; siblings share these lists.
            explored.append(candidate)
            potential.pop()

    def _end_reached(self, candidates: list[Hashable], explored: list[Hashable]) -> bool:
        """True if some explored node is connected to every candidate."""
        for node in explored:
            neighbors = self._graph.neighbors(node)
            if all(candidate in neighbors for candidate in candidates):
                return True
        return False

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def clean_subset_clusters(self) -> int:
        """Remove stored clusters that are proper subsets of other stored clusters.

        Subsets are enumerated per cluster and looked up in the cluster
        set; everything found is removed after the full scan.  Running it
        twice without new clusters in between changes nothing.

        Returns:
            Number of clusters removed.
        """
        to_remove: set[Cluster] = set()
        for cluster in self._clusters:
            members = sorted(cluster)
            subsets = all_subsets_in_range(
                self.min_cluster_size, len(members) - 1, members
            )
            for subset in subsets:
                key = Cluster(subset)
                if key in self._clusters:
                    to_remove.add(key)

        self._clusters -= to_remove
        if to_remove:
            logger.info(
                "subset_clusters_removed",
                removed=len(to_remove),
                remaining=len(self._clusters),
            )
        return len(to_remove)
