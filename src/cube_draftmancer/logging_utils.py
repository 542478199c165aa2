#!/usr/bin/env python3
"""Logging setup for the cube-draftmancer command line."""

import logging
import sys

CLI_FORMAT = "%(levelname)s: %(message)s"


def setup_cli_logging(verbose: bool = False) -> None:
    """Send log records to stderr, keeping stdout for the generated card list.

    Args:
        verbose: If True, show DEBUG messages

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(CLI_FORMAT))
    root_logger.addHandler(console_handler)

    # Quieten down urllib3
    logging.getLogger("urllib3").setLevel(logging.INFO)
