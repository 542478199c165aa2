"""The two cube conversions: Into the Story and Remastering Magic."""

import logging
from typing import Optional

from cube_draftmancer.config import INTO_THE_STORY_CUBE_ID, WorkflowConfig
from cube_draftmancer.cubecobra import (
    csv_download_url,
    download_card_list,
    plaintext_download_url,
)
from cube_draftmancer.errors import MissingArgumentError
from cube_draftmancer.file_utils import write_text_file
from cube_draftmancer.layouts import expand_layout, get_raw_layout
from cube_draftmancer.parsers import parse_card_list, parse_csv_card_list
from cube_draftmancer.serializer import render_archive_list, render_draft_config

log = logging.getLogger(__name__)


def into_the_story(config: WorkflowConfig, cube_id: str = INTO_THE_STORY_CUBE_ID) -> str:
    """Build the Archive card list for the Into the Story cube.

    Nothing is written to disk; the caller prints the result.
    """
    log.info("Building Into the Story list from cube %s", cube_id)
    data = download_card_list(plaintext_download_url(cube_id), timeout=config.timeout)
    cards, duplicates = parse_card_list(data)
    return render_archive_list(cards, duplicates)


def remastering_magic(cube_id: Optional[str], config: WorkflowConfig) -> str:
    """Build a rarity-sheet card list for a cube and save it as <cube_id>.txt.

    Args:
        cube_id: CubeCobra cube identifier
        config: Output directory and network timeout

    Returns:
        The rendered card list

    Raises:
        MissingArgumentError: If no cube id was given

    """
    if not cube_id:
        raise MissingArgumentError("Please provide a cube ID for Remastering Magic")

    log.info("Building Remastering Magic list for cube %s", cube_id)
    data = download_card_list(csv_download_url(cube_id), timeout=config.timeout)
    layouts = expand_layout(get_raw_layout(cube_id))
    catalog = parse_csv_card_list(data)
    draftmancer_list = render_draft_config(layouts, catalog)

    write_text_file(config.output_path(cube_id), draftmancer_list, "Draftmancer list")
    return draftmancer_list
