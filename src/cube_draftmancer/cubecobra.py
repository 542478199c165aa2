#!/usr/bin/env python3
"""Download card lists from CubeCobra."""

import logging

import requests

from cube_draftmancer.config import (
    CUBECOBRA_CSV_URL,
    CUBECOBRA_PLAINTEXT_URL,
    REQUEST_TIMEOUT,
)
from cube_draftmancer.errors import TransportError

log = logging.getLogger(__name__)


def csv_download_url(cube_id: str) -> str:
    """URL of the CSV export for a cube."""
    return CUBECOBRA_CSV_URL.format(cube_id=cube_id)


def plaintext_download_url(cube_id: str) -> str:
    """URL of the plaintext export for a cube."""
    return CUBECOBRA_PLAINTEXT_URL.format(cube_id=cube_id)


def download_card_list(url: str, timeout: float = REQUEST_TIMEOUT) -> str:
    """Fetch a card list and return the response body as text.

    Args:
        url: Download URL
        timeout: Seconds to wait for the server

    Returns:
        Response body

    Raises:
        TransportError: If the request fails or returns a non-success status

    """
    log.info("Downloading card list from %s", url)

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(url, str(e)) from e

    log.debug("Downloaded %d characters", len(response.text))
    return response.text
