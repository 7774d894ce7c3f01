#!/usr/bin/env python3
"""
IGC to QR route converter

This script parses IGC flight logs, reduces each flight to a small set of
waypoints and writes them as GPX or CSV text sized for a QR code.

Usage:
    python igc2route.py [-c config] [-l level] [-f format] [-o outputFolder] file.igc [file2.igc ...]
"""

import argparse
import sys
import logging
from typing import List, Optional

from igc_config import Config
from igc_parser import IgcParser
from igc_waypoints import WaypointSelector
from igc_writer import RouteWriter
from igc_summary import flightSummary, routeSummary

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger('igc2route')


def process_file(config: Config, in_path: str) -> bool:
    """Convert one IGC file. Returns True when a payload was written."""
    logger.info(f"Processing {in_path}...")
    try:
        with open(in_path, 'r', encoding='utf-8', errors='ignore') as track_file:
            flight = IgcParser().parse_file(track_file)
    except OSError as e:
        logger.error(f"Could not read {in_path}: {e}")
        return False

    if not flight.fixes:
        logger.error(f"No valid track data found in {in_path}")
        return False

    logger.info(f"Flight summary:\n{flightSummary(flight)}")

    route = WaypointSelector().generate(flight.fixes, config.level)
    logger.info(f"Route summary:\n{routeSummary(route)}")

    result = RouteWriter(config.max_payload).export(route, config.format)
    if not result.success:
        logger.error(f"Export failed for {in_path}: {result.error}")
        return False

    out_path = config.output_path_for(in_path, result.format)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, 'w', encoding='utf-8') as out_file:
        out_file.write(result.payload)
    logger.info(f"Successfully generated: {out_path} ({len(result.payload)} chars, {result.format.value})")
    return True


def process_files(config: Config, paths: List[str]) -> int:
    """Convert several IGC files. Returns the number of failures."""
    failures = 0
    for in_path in paths:
        if not process_file(config, in_path):
            failures += 1
    return failures


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Reduce IGC flight logs to QR-sized GPX/CSV waypoint routes',
        epilog='Example: python igc2route.py -l high -f gpx vuelo.igc'
    )

    parser.add_argument('-c', '--config', default=None, help='Path to config file')
    parser.add_argument('-l', '--level', default=None, choices=['low', 'medium', 'high'],
                        help='Detail level: low keeps more waypoints, high keeps fewer')
    parser.add_argument('-f', '--format', default=None, choices=['csv', 'gpx', 'compact'],
                        help='Export format (falls back to compact CSV when too large)')
    parser.add_argument('-o', '--outputFolder', dest='output', default=None,
                        help='Folder to write the route files to')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('trackfile', nargs='+', help='Path to one or more IGC files')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Set log level based on verbose flag
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(args)
    failures = process_files(config, args.trackfile)

    logger.info("Processing complete.")
    return 1 if failures else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except FileNotFoundError as e:
        logger.critical(f"File not found: {e.filename}")
        sys.exit(3)
    except ValueError as e:
        logger.critical(f"Invalid input: {e}")
        sys.exit(2)
    except Exception as e:
        logger.critical(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)
