"""
Bed catalog snapshots.

Immutable views of the floor -> ward -> bed hierarchy, read from the
database once per board session.
"""
from pydantic import BaseModel, field_validator, model_validator
from typing import Optional, Tuple
from datetime import datetime

from bedboard.models.enums import BedStatusEnum, BedTypeEnum, AcuityEnum
from bedboard.utils.validators import is_valid_mrn


class OccupantSnapshot(BaseModel):
    """Patient lying in an occupied bed."""

    name: str
    mrn: str
    admitted_at: datetime
    acuity: Optional[AcuityEnum] = None
    diagnosis: Optional[str] = None
    attending_doctor: Optional[str] = None

    @field_validator('mrn')
    @classmethod
    def validate_mrn(cls, v):
        if not is_valid_mrn(v):
            raise ValueError(f"Invalid MRN '{v}'")
        return v.strip().upper()

    class Config:
        frozen = True


class BedSnapshot(BaseModel):
    """
    A bed with its location and, when occupied, its occupant.

    `status == occupied` if and only if `occupant` is present.
    """

    id: str
    bed_number: str
    floor_id: str
    floor_name: str
    ward_id: str
    ward_name: str
    room_number: str
    type: BedTypeEnum
    status: BedStatusEnum
    price_per_day: int
    amenities: Tuple[str, ...] = ()
    last_cleaned_at: Optional[datetime] = None
    notes: Optional[str] = None
    grid_row: int = 0
    grid_col: int = 0
    occupant: Optional[OccupantSnapshot] = None

    @model_validator(mode='after')
    def check_occupant_matches_status(self):
        if self.status == BedStatusEnum.OCCUPIED and self.occupant is None:
            raise ValueError(f"Bed {self.id} is occupied but has no occupant")
        if self.status != BedStatusEnum.OCCUPIED and self.occupant is not None:
            raise ValueError(
                f"Bed {self.id} has an occupant but its status is {self.status.value}"
            )
        return self

    @property
    def is_occupied(self) -> bool:
        return self.status == BedStatusEnum.OCCUPIED

    class Config:
        frozen = True


class WardView(BaseModel):
    """
    A ward and the beds currently shown for it.

    `total_beds`, `occupied_beds` and `occupancy_percent` always describe
    the whole ward, even when `beds` is a filtered subset.
    """

    id: str
    code: str
    name: str
    floor_id: str
    type: BedTypeEnum
    price_per_day: int
    total_beds: int
    occupied_beds: int
    occupancy_percent: int
    beds: Tuple[BedSnapshot, ...] = ()

    class Config:
        frozen = True


class FloorView(BaseModel):
    """A floor and the wards currently shown for it."""

    id: str
    name: str
    bed_count: int = 0
    wards: Tuple[WardView, ...] = ()

    class Config:
        frozen = True


class FloorTab(BaseModel):
    """Floor tab header; disabled when no bed of the floor is visible."""

    id: str
    name: str
    bed_count: int
    disabled: bool


class BedStats(BaseModel):
    """Counters over the visible beds."""

    total: int = 0
    available: int = 0
    occupied: int = 0
    reserved: int = 0
