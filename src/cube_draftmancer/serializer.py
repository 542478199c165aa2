"""Render layouts and card lists in the Draftmancer custom card list format."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader

from cube_draftmancer.config import (
    ARCHIVE_LAYOUT_NAME,
    ARCHIVE_LAYOUT_WEIGHT,
    ARCHIVED_COUNT,
    ARCHIVED_SHEET,
    CUBED_COUNT,
    CUBED_SHEET,
)
from cube_draftmancer.models import CardCatalog, Layout, Layouts

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Card names are written verbatim; nothing here is HTML
jinja_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def layout_to_dict(layout: Layout) -> Dict:
    """Convert a Layout into its Draftmancer settings entry."""
    slots: Dict[str, int] = {}
    for slot in layout.slots:
        name = str(slot.rarity)
        slots[name] = slots.get(name, 0) + slot.count
    return {"weight": layout.weight, "slots": slots}


def render_layouts(layouts: Layouts) -> str:
    """Render layouts as the JSON block of a [Settings] section.

    Example output::

        {
          "layouts": {
            "Rare": {
              "weight": 7,
              "slots": {
                "Rare": 1,
                "Common": 11,
                "Uncommon": 3
              }
            },
            ...
          }
        }
    """
    settings = {
        "layouts": {name: layout_to_dict(layout) for name, layout in layouts.items()}
    }
    return json.dumps(settings, indent=2, ensure_ascii=False)


def catalog_sections(catalog: CardCatalog) -> List[Tuple[str, List[str]]]:
    """Catalog entries as (section name, cards), in canonical rarity order."""
    return [
        (str(rarity), catalog[rarity])
        for rarity in sorted(catalog, key=lambda r: r.sort_key)
    ]


def render_card_catalog(catalog: CardCatalog) -> str:
    """Render one [<Rarity>] section per rarity in the catalog."""
    template = jinja_env.get_template("card_catalog.txt.j2")
    return template.render(sections=catalog_sections(catalog))


def render_draft_config(layouts: Layouts, catalog: CardCatalog) -> str:
    """Render a full card list: [Settings] with layouts, then the rarity sections."""
    template = jinja_env.get_template("draft_config.txt.j2")
    return template.render(
        settings=render_layouts(layouts),
        sections=catalog_sections(catalog),
    )


def render_archive_list(cards: Sequence[str], duplicates: Sequence[str]) -> str:
    """Render the Archive card list.

    Packs draw 14 cards from the unique cards and 1 from the duplicates.
    A card repeated three times appears twice in the duplicates section.
    """
    log.debug(
        "Rendering archive list with %d cards and %d duplicates",
        len(cards),
        len(duplicates),
    )
    template = jinja_env.get_template("archive_list.txt.j2")
    return template.render(
        layout_name=ARCHIVE_LAYOUT_NAME,
        layout_weight=ARCHIVE_LAYOUT_WEIGHT,
        cubed_sheet=CUBED_SHEET,
        cubed_count=CUBED_COUNT,
        archived_sheet=ARCHIVED_SHEET,
        archived_count=ARCHIVED_COUNT,
        cards=cards,
        duplicates=duplicates,
    )
