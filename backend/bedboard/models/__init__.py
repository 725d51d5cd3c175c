"""
Data models.
Re-exports every model for simpler imports.
"""
from bedboard.models.enums import (
    BedStatusEnum,
    BedTypeEnum,
    AcuityEnum,
    TransferReasonEnum,
    TransferStateEnum,
    BedClickOutcomeEnum,
    NotificationKindEnum,
)

from bedboard.models.floor import Floor
from bedboard.models.ward import Ward
from bedboard.models.bed import Bed
from bedboard.models.occupant import Occupant
from bedboard.models.inpatient import Inpatient

__all__ = [
    # Enums
    "BedStatusEnum",
    "BedTypeEnum",
    "AcuityEnum",
    "TransferReasonEnum",
    "TransferStateEnum",
    "BedClickOutcomeEnum",
    "NotificationKindEnum",
    # Models
    "Floor",
    "Ward",
    "Bed",
    "Occupant",
    "Inpatient",
]
