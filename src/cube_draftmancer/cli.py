#!/usr/bin/env python3
"""Command-line interface for converting CubeCobra cubes into Draftmancer lists."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cube_draftmancer.config import REQUEST_TIMEOUT, WorkflowConfig
from cube_draftmancer.errors import DraftmancerError, MissingArgumentError
from cube_draftmancer.logging_utils import setup_cli_logging
from cube_draftmancer.workflows import into_the_story, remastering_magic

log = logging.getLogger(__name__)

INTO_THE_STORY_NAMES = ("its", "IntoTheStory")
REMASTERING_MAGIC_NAMES = ("rema", "RemasteringMagic")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Convert a CubeCobra cube into a Draftmancer card list"
    )
    parser.add_argument(
        "workflow",
        nargs="?",
        help="Cube to build: its/IntoTheStory or rema/RemasteringMagic",
    )
    parser.add_argument(
        "cube_id",
        nargs="?",
        help="CubeCobra cube ID (required for Remastering Magic)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write <cube_id>.txt into (default: current directory)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"Seconds to wait for CubeCobra (default: {REQUEST_TIMEOUT:g})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    # Unrecognised arguments are ignored, like any unrecognised workflow
    args, extra = build_parser().parse_known_args(argv)

    # Set up logging
    setup_cli_logging(verbose=args.verbose)

    if extra:
        log.debug("Ignoring extra arguments: %s", extra)

    config = WorkflowConfig(output_dir=args.output_dir, timeout=args.timeout)

    try:
        if args.workflow in INTO_THE_STORY_NAMES:
            draftmancer_list = into_the_story(config)
        elif args.workflow in REMASTERING_MAGIC_NAMES:
            draftmancer_list = remastering_magic(args.cube_id, config)
        else:
            log.debug("No workflow selected, nothing to do")
            return

    except MissingArgumentError as e:
        log.error("%s", e)
        return

    except DraftmancerError as e:
        log.error("Error: %s", e)
        sys.exit(1)

    print(draftmancer_list)


if __name__ == "__main__":
    main()
