"""Pack layouts per cube and their expansion into Draftmancer layouts."""

import logging
from typing import Dict, List

from cube_draftmancer.errors import ConfigurationError
from cube_draftmancer.models import Layout, Layouts, Rarity, RawLayout, Slot, SlotValue

log = logging.getLogger(__name__)


def single(rarity: Rarity) -> Slot:
    """Slot that always holds a card of the given rarity."""
    return Slot(values=(SlotValue(rarity, 1),))


def rare_slot() -> Slot:
    """Rare-or-mythic slot, with seven rares printed for every mythic."""
    return Slot(values=(SlotValue(Rarity.RARE, 7), SlotValue(Rarity.MYTHIC, 1)))


def get_raw_layout(cube_id: str) -> RawLayout:
    """Return the pack layout used for a cube.

    Args:
        cube_id: CubeCobra cube identifier

    Returns:
        Mapping from slot to the number of times that slot appears in a pack

    """
    if cube_id == "garbagemasters":
        return {
            single(Rarity.COMMON): 11,
            single(Rarity.UNCOMMON): 4,
            rare_slot(): 1,
            single(Rarity.SPECIAL): 2,
        }

    return {
        single(Rarity.COMMON): 11,
        single(Rarity.UNCOMMON): 3,
        rare_slot(): 1,
    }


def expand_layout(raw_layout: RawLayout) -> Layouts:
    """Expand a raw layout into one named layout per outcome of its variable slot.

    Every singleton slot is copied verbatim into each layout. The variable
    slot's values become the layout weights, and the layouts are named after
    the value's rarity.

    Args:
        raw_layout: Mapping from slot to instances per pack

    Returns:
        Mapping from layout name to Layout. Empty if no slot is variable.

    Raises:
        ConfigurationError: If more than one slot is variable, or two values
            of the variable slot would produce the same layout name

    """
    singletons: Dict[Rarity, int] = {}
    variable_slots: List[Slot] = []

    for slot, count in raw_layout.items():
        if slot.is_singleton:
            singletons[slot.values[0].rarity] = count
        else:
            variable_slots.append(slot)

    if len(variable_slots) > 1:
        raise ConfigurationError(
            f"Only one slot can have more than one value, found {len(variable_slots)}"
        )

    layouts: Layouts = {}
    if not variable_slots:
        log.warning("Layout has no variable slot, no named layouts produced")
        return layouts

    variable_slot = variable_slots[0]
    for value in variable_slot.values:
        name = str(value.rarity)
        if name in layouts:
            raise ConfigurationError(f"Variable slot produces layout {name!r} twice")

        layout = Layout(weight=value.count)
        layout.slots.append(SlotValue(value.rarity, raw_layout[variable_slot]))
        for rarity, count in singletons.items():
            layout.slots.append(SlotValue(rarity, count))

        layouts[name] = layout

    log.debug("Expanded layout into %d named layouts: %s", len(layouts), list(layouts))
    return layouts
