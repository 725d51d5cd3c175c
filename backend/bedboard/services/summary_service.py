"""
Selection summary bar.
"""
from typing import Optional, Sequence

from bedboard.config import settings
from bedboard.schemas.bed import BedSnapshot
from bedboard.schemas.summary import BedChip, SingleBedDetail, SelectionSummary
from bedboard.utils.formatters import format_bed_chip, format_price_per_day


def build_selection_summary(
    beds: Sequence[BedSnapshot],
    max_chips: Optional[int] = None
) -> Optional[SelectionSummary]:
    """
    Derives the summary bar from the selected beds.

    Args:
        beds: Selected beds, in selection order
        max_chips: Chips shown before "+N more" (defaults to settings)

    Returns:
        None for an empty selection, otherwise the summary
    """
    if not beds:
        return None

    if max_chips is None:
        max_chips = settings.SUMMARY_MAX_CHIPS

    chips = [
        BedChip(
            bed_id=bed.id,
            label=format_bed_chip(bed.floor_id, bed.ward_name, bed.bed_number),
        )
        for bed in beds[:max_chips]
    ]

    overflow = len(beds) - max_chips
    summary = SelectionSummary(
        count=len(beds),
        chips=chips,
        overflow_label=f"+{overflow} more" if overflow > 0 else None,
        transfer_enabled=True,
    )

    if len(beds) == 1:
        bed = beds[0]
        summary.single = SingleBedDetail(
            type=bed.type,
            room_number=bed.room_number,
            price_per_day=bed.price_per_day,
            price_label=format_price_per_day(bed.price_per_day),
            amenities=list(bed.amenities),
        )
    else:
        total = sum(bed.price_per_day for bed in beds)
        summary.total_per_day = total
        summary.total_label = format_price_per_day(total)

    return summary
