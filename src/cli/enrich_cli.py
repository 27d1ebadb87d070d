"""
Command-line interface for booking enrichment.

Usage:
    python -m src.cli.enrich_cli [-i INPUT] [-o OUTPUT] [-r ROOMS] [-H HOTELS] [options]
"""

import argparse
import sys

from src.batch.pipeline import EnrichmentPipeline
from src.core.config import load_pipeline_config
from src.core.errors import EnrichmentError
from src.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Enrich incomplete booking data with room and hotel details",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use the default file names in the current directory
  python -m src.cli.enrich_cli

  # Explicit files
  python -m src.cli.enrich_cli -i data/input.csv -o data/output.csv \\
      -r data/room_names.csv -H data/hotels.json

  # Settings from a YAML file, human readable logs
  python -m src.cli.enrich_cli --config config/pipeline.yaml --log-format text
        """
    )

    parser.add_argument(
        "-i", "--input",
        help="Path to the input file containing incomplete data (default: input.csv)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Path to the file where the outcome will be saved, "
             "created if it doesn't exist (default: output.csv)"
    )
    parser.add_argument(
        "-r", "--rooms",
        help="Path to the file where data about rooms is stored (default: room_names.csv)"
    )
    parser.add_argument(
        "-H", "--hotels",
        help="Path to the file where data about hotels is stored (default: hotels.json)"
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML file with a 'pipeline' section"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT or json)"
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """
    Execute an enrichment run.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_pipeline_config(
            args.config,
            overrides={
                "input_path": args.input,
                "output_path": args.output,
                "rooms_path": args.rooms,
                "hotels_path": args.hotels,
                "log_level": args.log_level,
                "log_format": args.log_format,
            },
        )
        configure_logging(config.log_level, config.log_format)

        result = EnrichmentPipeline(config).process_file()
    except EnrichmentError as e:
        logger.error(f"Error during enrichment: {e}")
        print(f"Error occurred: {e}")
        return 1

    logger.info(
        f"Processed {result['total_records']} rows, "
        f"{result['rooms_loaded']} rooms and {result['hotels_loaded']} hotels loaded"
    )
    print(f"The data was successfully parsed and saved at {result['output_path']}")
    return 0


def main():
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
