"""Data models for rarities, pack slots and Draftmancer layouts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from cube_draftmancer.errors import UnknownRarityError


class Rarity(Enum):
    """Card rarities, declared in canonical order."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    MYTHIC = "Mythic"
    SPECIAL = "Special"

    def __str__(self) -> str:
        return self.value

    @property
    def sort_key(self) -> int:
        """Position of the rarity in canonical order."""
        return list(Rarity).index(self)

    @classmethod
    def from_token(cls, card_name: str, token: str) -> "Rarity":
        """Map a lowercase CubeCobra rarity token onto a Rarity.

        Args:
            card_name: Card the token belongs to, used in the error message
            token: Rarity column value, e.g. "mythic"

        Raises:
            UnknownRarityError: If the token is not one of the known rarities

        """
        for rarity in cls:
            if rarity.value.lower() == token:
                return rarity
        raise UnknownRarityError(card_name, token)


@dataclass(frozen=True)
class SlotValue:
    """A rarity together with a count.

    Inside a raw slot the count is the relative print-run weight of the
    rarity. Inside an expanded Layout it is the number of cards of that
    rarity placed in the pack.
    """

    rarity: Rarity
    count: int


@dataclass(frozen=True)
class Slot:
    """A pack position filled by one of its values."""

    values: Tuple[SlotValue, ...]

    @property
    def is_singleton(self) -> bool:
        return len(self.values) == 1


@dataclass
class Layout:
    """A fully resolved pack recipe."""

    weight: int
    slots: List[SlotValue] = field(default_factory=list)


@dataclass(frozen=True)
class CardRecord:
    """A card name with its rarity, as read from a CSV row."""

    name: str
    rarity: Rarity


# Slot -> number of instances of that slot per pack
RawLayout = Dict[Slot, int]

# Layout name -> layout
Layouts = Dict[str, Layout]

# Rarity -> card names in file order
CardCatalog = Dict[Rarity, List[str]]
