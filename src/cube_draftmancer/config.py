"""Settings shared by the conversion workflows."""

from dataclasses import dataclass, field
from pathlib import Path

CUBECOBRA_CSV_URL = (
    "https://cubecobra.com/cube/download/csv/{cube_id}"
    "?primary=Color%20Category&secondary=Rarity"
    "&tertiary=Creature%2FNon-Creature&quaternary=Mana%20Value&showother=false"
)
CUBECOBRA_PLAINTEXT_URL = (
    "https://cubecobra.com/cube/download/plaintext/{cube_id}"
    "?primary=Color%20Category&secondary=Types-Multicolor"
    "&tertiary=Mana%20Value&quaternary=Alphabetical&showother=undefined"
)

# Into the Story is always built from this cube
INTO_THE_STORY_CUBE_ID = "633f463453859b175ba27b36"

# Seconds to wait on CubeCobra before giving up
REQUEST_TIMEOUT = 30.0

# Archive layout: every pack has 14 cards from the cube and 1 duplicate
ARCHIVE_LAYOUT_NAME = "Archive"
ARCHIVE_LAYOUT_WEIGHT = 1
CUBED_SHEET = "Cubed"
CUBED_COUNT = 14
ARCHIVED_SHEET = "Archived"
ARCHIVED_COUNT = 1


@dataclass
class WorkflowConfig:
    """Where a workflow writes its output and how long it waits on the network."""

    output_dir: Path = field(default_factory=Path)
    timeout: float = REQUEST_TIMEOUT

    def output_path(self, cube_id: str) -> Path:
        """Path of the Draftmancer list written for a cube."""
        return Path(self.output_dir) / f"{cube_id}.txt"
