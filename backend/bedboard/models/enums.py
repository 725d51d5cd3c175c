"""
System enumerations.
Kept together to avoid circular imports.
"""
from enum import Enum


class BedStatusEnum(str, Enum):
    """Status of a bed."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


class BedTypeEnum(str, Enum):
    """Bed classification."""
    ICU = "ICU"
    HDU = "HDU"
    WARD = "Ward"
    PRIVATE = "Private"
    ISOLATION = "Isolation"


class AcuityEnum(str, Enum):
    """Coarse severity classification of an occupant."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class TransferReasonEnum(str, Enum):
    """Reason codes accepted by the transfer workflow."""
    CLINICAL_DETERIORATION = "clinical_deterioration"
    PROCEDURE = "procedure"
    STEP_UP_CARE = "step_up_care"
    STEP_DOWN_CARE = "step_down_care"
    ISOLATION_NEED = "isolation_need"
    SPECIAL_EQUIPMENT = "special_equipment"
    PATIENT_PREFERENCE = "patient_preference"
    OTHER = "other"

    @property
    def label(self) -> str:
        return TRANSFER_REASON_LABELS[self]


class TransferStateEnum(str, Enum):
    """State of the transfer workflow."""
    CLOSED = "closed"
    SEARCHING_PATIENT = "searching_patient"
    PATIENT_SELECTED = "patient_selected"
    SUBMITTABLE = "submittable"
    SUBMITTED = "submitted"


class BedClickOutcomeEnum(str, Enum):
    """What a click on a bed tile did."""
    SELECTED = "selected"
    DESELECTED = "deselected"
    OPENED_DETAIL = "opened_detail"
    IGNORED = "ignored"


class NotificationKindEnum(str, Enum):
    """Kind of toast notification."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


# ============================================
# ENUM-RELATED CONSTANTS
# ============================================

TRANSFER_REASON_LABELS = {
    TransferReasonEnum.CLINICAL_DETERIORATION: "Clinical Deterioration",
    TransferReasonEnum.PROCEDURE: "Procedure Required",
    TransferReasonEnum.STEP_UP_CARE: "Step-up Care",
    TransferReasonEnum.STEP_DOWN_CARE: "Step-down Care",
    TransferReasonEnum.ISOLATION_NEED: "Isolation Need",
    TransferReasonEnum.SPECIAL_EQUIPMENT: "Special Equipment Required",
    TransferReasonEnum.PATIENT_PREFERENCE: "Patient Preference",
    TransferReasonEnum.OTHER: "Other",
}

# Only these statuses appear on the bed map
VISIBLE_BED_STATUSES = (
    BedStatusEnum.AVAILABLE,
    BedStatusEnum.OCCUPIED,
)

# Clicking these beds does nothing
UNSELECTABLE_BED_STATUSES = (
    BedStatusEnum.MAINTENANCE,
)

# Filter value meaning "no constraint"
FILTER_ALL = "all"
