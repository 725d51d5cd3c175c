"""
Bed map filter engine.

Pure functions over the floor -> ward -> bed tree. Nothing here mutates
its input; memoization lives on `BedCatalog.filter`.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from bedboard.models.enums import BedStatusEnum, VISIBLE_BED_STATUSES, FILTER_ALL
from bedboard.schemas.bed import BedSnapshot, WardView, FloorView, FloorTab, BedStats
from bedboard.schemas.filters import FilterCriteria
from bedboard.utils.validators import normalize_search

EMPTY_RESULT_MESSAGE = "No beds match your filters"


def bed_matches(bed: BedSnapshot, criteria: FilterCriteria, query: str = "") -> bool:
    """
    Bed-level filtering.

    Args:
        bed: Bed to test
        criteria: Active filters
        query: Normalised search text

    Returns:
        True if the bed stays on the map
    """
    # Reserved and maintenance beds never appear on the map
    if bed.status not in VISIBLE_BED_STATUSES:
        return False

    if query:
        matches_bed = query in bed.bed_number.lower()
        matches_ward = query in bed.ward_name.lower()
        matches_patient = (
            bed.occupant is not None and query in bed.occupant.name.lower()
        )
        if not (matches_bed or matches_ward or matches_patient):
            return False

    if criteria.status != FILTER_ALL and bed.status.value != criteria.status:
        return False

    if criteria.bed_type != FILTER_ALL and bed.type.value != criteria.bed_type:
        return False

    return True


def filter_floors(
    floors: Sequence[FloorView],
    criteria: FilterCriteria
) -> Tuple[FloorView, ...]:
    """
    Applies the five filters to the catalog tree.

    Wards left without beds are dropped, then floors left without wards.
    All criteria combine with AND.

    Args:
        floors: Full catalog tree
        criteria: Active filters

    Returns:
        Visible floors
    """
    query = normalize_search(criteria.search)
    visible: List[FloorView] = []

    for floor in floors:
        if criteria.floor != FILTER_ALL and floor.id != criteria.floor:
            continue

        wards: List[WardView] = []
        for ward in floor.wards:
            if criteria.ward != FILTER_ALL and ward.id != f"{floor.id}-{criteria.ward}":
                continue

            beds = tuple(b for b in ward.beds if bed_matches(b, criteria, query))
            if beds:
                wards.append(ward.model_copy(update={"beds": beds}))

        if wards:
            visible.append(floor.model_copy(update={
                "wards": tuple(wards),
                "bed_count": sum(len(w.beds) for w in wards),
            }))

    return tuple(visible)


def iter_beds(floors: Iterable[FloorView]) -> Iterable[BedSnapshot]:
    """Flattens a floor tree into its beds."""
    for floor in floors:
        for ward in floor.wards:
            yield from ward.beds


def compute_stats(floors: Iterable[FloorView]) -> BedStats:
    """
    Counts visible beds by status.

    Args:
        floors: Visible floors

    Returns:
        Counters
    """
    stats = BedStats()
    for bed in iter_beds(floors):
        stats.total += 1
        if bed.status == BedStatusEnum.AVAILABLE:
            stats.available += 1
        elif bed.status == BedStatusEnum.OCCUPIED:
            stats.occupied += 1
        elif bed.status == BedStatusEnum.RESERVED:
            stats.reserved += 1
    return stats


def build_floor_tabs(
    all_floors: Sequence[FloorView],
    visible_floors: Sequence[FloorView]
) -> List[FloorTab]:
    """
    One tab per catalog floor with its visible bed count.

    Args:
        all_floors: Every catalog floor (tab order)
        visible_floors: Result of `filter_floors`

    Returns:
        Tabs; those without visible beds are disabled
    """
    counts = {floor.id: floor.bed_count for floor in visible_floors}
    tabs = []
    for floor in all_floors:
        bed_count = counts.get(floor.id, 0)
        tabs.append(FloorTab(
            id=floor.id,
            name=floor.name,
            bed_count=bed_count,
            disabled=bed_count == 0,
        ))
    return tabs


def resolve_active_floor(
    requested: Optional[str],
    visible_floors: Sequence[FloorView]
) -> Optional[str]:
    """
    Picks the floor tab to show.

    Falls back to the first visible floor when the requested one has no
    visible beds; None when nothing is visible.
    """
    for floor in visible_floors:
        if floor.id == requested:
            return floor.id
    if visible_floors:
        return visible_floors[0].id
    return None
