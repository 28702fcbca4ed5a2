"""Reading interaction streams."""

from .stream_reader import Interaction, iter_interactions, parse_interaction_line, read_interactions

__all__ = ["Interaction", "iter_interactions", "parse_interaction_line", "read_interactions"]
