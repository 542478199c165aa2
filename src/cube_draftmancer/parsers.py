"""Parsers for the CubeCobra CSV and plaintext card list downloads."""

import logging
from typing import Dict, List, Tuple

from cube_draftmancer.errors import MalformedRecordError
from cube_draftmancer.models import CardCatalog, CardRecord, Rarity

log = logging.getLogger(__name__)

NAME_FIELD = 0
RARITY_FIELD = 6

MAINBOARD_MARKER = "# mainboard"
SECTION_MARKER = "#"


def split_lines(data: str) -> List[str]:
    """Split text on line feeds only, dropping the carriage return of CRLF endings.

    Other line boundary characters, such as U+2028, stay inside the line.
    """
    return [line[:-1] if line.endswith("\r") else line for line in data.split("\n")]


def split_delimited_line(line: str, delimiter: str = ",", quote: str = '"') -> List[str]:
    """Split a line on the delimiter, ignoring delimiters between quotes.

    Quote characters toggle quoted mode and are dropped from the output.
    Doubled quotes get no special treatment.
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == quote:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_csv_record(line: str, line_number: int) -> CardRecord:
    """Parse one CSV data row into a CardRecord.

    Args:
        line: Raw CSV row
        line_number: 1-based position of the row in the download

    Raises:
        MalformedRecordError: If the row has no rarity column
        UnknownRarityError: If the rarity column holds an unknown token

    """
    fields = split_delimited_line(line)
    log.debug("Line %d fields: %s", line_number, fields)

    if len(fields) <= RARITY_FIELD:
        raise MalformedRecordError(line_number, len(fields), RARITY_FIELD + 1)

    name = fields[NAME_FIELD]
    return CardRecord(name=name, rarity=Rarity.from_token(name, fields[RARITY_FIELD]))


def parse_csv_card_list(data: str) -> CardCatalog:
    """Bucket the cards of a CubeCobra CSV export by rarity.

    The header line is skipped without validation. Example input::

        name,CMC,Type,Color,Set,Collector Number,Rarity,Color Category,...
        "Humility",4,"Enchantment",W,"tpr","16",mythic,w,Owned,Non-foil,...

    Args:
        data: Full CSV download

    Returns:
        Mapping from rarity to card names, in file order within each rarity

    """
    catalog: CardCatalog = {}

    for line_number, line in enumerate(split_lines(data)[1:], 2):
        if not line.strip():
            continue
        record = parse_csv_record(line, line_number)
        catalog.setdefault(record.rarity, []).append(record.name)

    log.info(
        "Parsed %d cards across %d rarities",
        sum(len(cards) for cards in catalog.values()),
        len(catalog),
    )
    return catalog


def parse_card_list(data: str) -> Tuple[List[str], List[str]]:
    """Split the mainboard of a plaintext cube list into unique cards and duplicates.

    Lines starting with "# mainboard" open the mainboard, any other line
    starting with "#" closes it. Lines before the first marker count as
    mainboard.

    Args:
        data: Full plaintext download

    Returns:
        Tuple of (unique cards in first-seen order, every repeat occurrence)

    """
    in_mainboard = True
    counts: Dict[str, int] = {}
    duplicates = []

    for line in split_lines(data):
        line = line.strip()
        if line.startswith(MAINBOARD_MARKER):
            in_mainboard = True
        elif line.startswith(SECTION_MARKER):
            in_mainboard = False
        elif in_mainboard and line:
            counts[line] = counts.get(line, 0) + 1
            if counts[line] > 1:
                duplicates.append(line)

    log.info("Found %d unique cards and %d duplicates", len(counts), len(duplicates))
    return list(counts), duplicates
