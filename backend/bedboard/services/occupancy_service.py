"""
Occupied bed detail panel.
"""
from datetime import datetime

from bedboard.schemas.bed import BedSnapshot
from bedboard.schemas.occupancy import OccupancyDetail
from bedboard.core.exceptions import BedNotOccupiedError
from bedboard.utils.formatters import format_price_per_day, format_time_since


def build_occupancy_detail(bed: BedSnapshot, now: datetime) -> OccupancyDetail:
    """
    Projects an occupied bed into the detail panel fields.

    Args:
        bed: Occupied bed
        now: Reference time for the length of stay

    Returns:
        OccupancyDetail

    Raises:
        BedNotOccupiedError: The bed has no occupant
    """
    occupant = bed.occupant
    if occupant is None:
        raise BedNotOccupiedError(bed.id, bed.status.value)

    return OccupancyDetail(
        bed_id=bed.id,
        bed_number=bed.bed_number,
        floor_name=bed.floor_name,
        ward_name=bed.ward_name,
        room_number=bed.room_number,
        type=bed.type,
        price_per_day=bed.price_per_day,
        price_label=format_price_per_day(bed.price_per_day),
        patient_name=occupant.name,
        mrn=occupant.mrn,
        acuity=occupant.acuity,
        diagnosis=occupant.diagnosis,
        attending_doctor=occupant.attending_doctor,
        admitted_at=occupant.admitted_at,
        time_since_admission=format_time_since(occupant.admitted_at, now),
        amenities=list(bed.amenities),
        notes=bed.notes,
    )
