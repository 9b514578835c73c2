"""Main entry point for generating the versioned Leaflet API reference."""

import argparse
import logging
import sys

from apiref.errors import ApiRefError
from apiref.load_config import load_config
from apiref.run_generation import run_generation

logger = logging.getLogger("apiref")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate Markdown API reference pages for the current "
        "checkout and the latest release tags."
    )
    parser.add_argument(
        "--pull",
        action="store_true",
        help="Clone the repository cache if needed and fetch all tags "
        "instead of reusing the cache as-is",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "--tags-limit",
        type=int,
        help="Maximum number of release tags to render",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every external command that is run",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the full documentation generation pipeline."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.tags_limit is not None:
            config["tags_limit"] = args.tags_limit

        logger.info("Building Leaflet documentation with Leafdoc ...")
        run_generation(config, pull=args.pull)
    except (ApiRefError, OSError) as e:
        logger.error("Error generating API documentation: %s", e)  # noqa: TRY400
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
