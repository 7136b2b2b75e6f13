"""Fetch entrypoint - Standalone script for a one-off parking feed fetch.

Usage:
    python -m parking_feed.fetch_entrypoint                    # Fetch FEED_URL
    python -m parking_feed.fetch_entrypoint <url>              # Fetch a given URL
    python -m parking_feed.fetch_entrypoint --file feed.json   # Parse a saved feed
"""

import json
import sys
from typing import List, Optional

from parking_feed.core.config import settings
from parking_feed.core.logging import get_logger
from parking_feed.ingestion.base import BaseSource
from parking_feed.ingestion.file_source import FileFeedSource
from parking_feed.ingestion.thingspeak_source import ThingSpeakSource
from parking_feed.services.parking_service import ParkingService

logger = get_logger("fetch_entrypoint")


def build_source(argv: List[str]) -> Optional[BaseSource]:
    """Pick the source from command-line arguments (argv without the program name)."""
    if not argv:
        return ThingSpeakSource(settings.FEED_URL)
    if argv[0] == "--file":
        if len(argv) < 2:
            logger.error("--file requires a path")
            return None
        return FileFeedSource(argv[1])
    return ThingSpeakSource(argv[0])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    source = build_source(argv)
    if source is None:
        return 1

    result = ParkingService(source).fetch()
    print(json.dumps(result.model_dump(), indent=2))

    if not result.spots:
        logger.error(f"No parking data produced from source={source.name}")
        return 1
    logger.info(f"Fetch completed: {result.count} spots")
    return 0


if __name__ == "__main__":
    sys.exit(main())
