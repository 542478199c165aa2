"""Cube Draftmancer: turn CubeCobra cube lists into Draftmancer card lists.

This library downloads cubes from CubeCobra, groups their cards by rarity or
by duplication, expands pack layouts into weighted Draftmancer layouts and
renders the result in Draftmancer's custom card list format.
"""

from .errors import (
    ConfigurationError,
    DraftmancerError,
    MalformedRecordError,
    MissingArgumentError,
    TransportError,
    UnknownRarityError,
)
from .layouts import expand_layout, get_raw_layout
from .models import CardRecord, Layout, Rarity, Slot, SlotValue
from .parsers import parse_card_list, parse_csv_card_list
from .serializer import render_archive_list, render_draft_config

__version__ = "0.1.0"

__all__ = [
    # Data models
    "CardRecord",
    "Layout",
    "Rarity",
    "Slot",
    "SlotValue",
    # Errors
    "ConfigurationError",
    "DraftmancerError",
    "MalformedRecordError",
    "MissingArgumentError",
    "TransportError",
    "UnknownRarityError",
    # Layouts
    "expand_layout",
    "get_raw_layout",
    # Parsers
    "parse_card_list",
    "parse_csv_card_list",
    # Rendering
    "render_archive_list",
    "render_draft_config",
]
