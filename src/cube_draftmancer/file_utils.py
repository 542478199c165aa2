#!/usr/bin/env python3
"""Common file utilities."""

import logging
from pathlib import Path

log = logging.getLogger(__name__)


def write_text_file(output_file: Path, content: str, description: str = "file") -> None:
    """Write text to a file, replacing any existing file.

    Args:
        output_file: Path to output file
        content: Text to write
        description: Human-readable description for logging

    """
    try:
        # Ensure output directory exists
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(content)

        log.info("Saved %s to: %s", description, output_file)

    except OSError as e:
        log.error("Error saving %s to %s: %s", description, output_file, e)
        raise
