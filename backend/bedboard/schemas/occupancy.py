"""
Occupied bed detail panel schema.
"""
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from bedboard.models.enums import BedTypeEnum, AcuityEnum


class OccupancyDetail(BaseModel):
    """Read-only projection of an occupied bed and its patient."""

    bed_id: str
    bed_number: str
    floor_name: str
    ward_name: str
    room_number: str
    type: BedTypeEnum
    price_per_day: int
    price_label: str

    patient_name: str
    mrn: str
    acuity: Optional[AcuityEnum] = None
    diagnosis: Optional[str] = None
    attending_doctor: Optional[str] = None
    admitted_at: datetime
    time_since_admission: str

    amenities: List[str] = []
    notes: Optional[str] = None
