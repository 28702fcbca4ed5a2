"""CLI entry point: python -m clique_stream.cli detect INPUT"""

import argparse
import sys
from pathlib import Path

import structlog

from clique_stream.config.settings import get_settings
from clique_stream.detection import DetectorConfig, OnlineDetector, load_detector_config
from clique_stream.errors import StreamFormatError
from clique_stream.ingestion import read_interactions
from clique_stream.logging_config import configure_logging
from clique_stream.output import format_clusters
from clique_stream.registry import NodeRegistry


def run_detect(input_path: Path, config: DetectorConfig) -> list[str]:
    """Stream ``input_path`` through the detector and return formatted clusters."""
    log = structlog.get_logger().bind(input=str(input_path))
    registry = NodeRegistry()
    detector = OnlineDetector(config)

    for interaction in read_interactions(input_path):
        detector.process(
            registry.node_id(interaction.source),
            registry.node_id(interaction.target),
        )
    detector.finalize()

    log.info(
        "detect_complete",
        nodes=len(registry),
        clusters=len(detector.clusters),
        removed_subsets=detector.stats.clusters_removed,
    )
    return format_clusters(detector.clusters, registry)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="clique_stream.cli",
        description="Mutual-interaction cluster detection",
    )
    subparsers = parser.add_subparsers(dest="command")

    detect_parser = subparsers.add_parser(
        "detect", help="Find maximal clusters in a tab-separated interaction log"
    )
    detect_parser.add_argument("input", type=str, help="Interaction log file")
    detect_parser.add_argument(
        "--min-cluster-size",
        type=int,
        default=None,
        help="Smallest cluster to report (overrides the config file)",
    )
    detect_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Detector config YAML (default: config/detector.yaml)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "detect":
        settings = get_settings()
        configure_logging(json_output=settings.log_json, log_level=settings.log_level)
        log = structlog.get_logger()

        config_path = Path(args.config) if args.config else settings.detector_config_path
        config = load_detector_config(config_path)
        if args.min_cluster_size is not None:
            config = DetectorConfig(
                **{**config.model_dump(), "min_cluster_size": args.min_cluster_size}
            )

        try:
            lines = run_detect(Path(args.input), config)
        except FileNotFoundError:
            log.error("input_not_found", input=args.input)
            sys.exit(1)
        except StreamFormatError as e:
            log.error("input_malformed", input=args.input, line_no=e.line_no, error=str(e))
            sys.exit(1)

        for line in lines:
            print(line)


if __name__ == "__main__":
    main()
