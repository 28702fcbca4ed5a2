"""Rendering clusters for display."""

from .formatter import format_cluster, format_clusters

__all__ = ["format_cluster", "format_clusters"]
