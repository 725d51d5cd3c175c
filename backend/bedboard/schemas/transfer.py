"""
Transfer workflow schemas.

Workflow inputs are one model per step, combined in a discriminated union
on `action`, so each payload is validated when it is built.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union, Literal, Annotated
from datetime import datetime

from bedboard.models.enums import TransferReasonEnum, TransferStateEnum
from bedboard.schemas.bed import BedSnapshot
from bedboard.utils.validators import is_valid_gdid


class InpatientSnapshot(BaseModel):
    """Admitted patient as listed in the transfer search."""

    id: str
    gdid: str
    name: str
    age: int
    gender: str
    ward_name: str
    room: str
    bed_label: str
    tariff: int

    @field_validator('gdid')
    @classmethod
    def validate_gdid(cls, v):
        if not is_valid_gdid(v):
            raise ValueError(f"Invalid patient id '{v}'")
        return v.strip()

    class Config:
        frozen = True


# ============================================
# STEP ACTIONS
# ============================================

class SearchPatientsAction(BaseModel):
    """Updates the patient search text."""
    action: Literal["search"] = "search"
    text: str = Field("", max_length=200)


class SelectPatientAction(BaseModel):
    """Picks the patient to move."""
    action: Literal["select_patient"] = "select_patient"
    patient_id: str = Field(..., min_length=1)


class ChangePatientAction(BaseModel):
    """Goes back to the patient search."""
    action: Literal["change_patient"] = "change_patient"


class SetReasonAction(BaseModel):
    """Chooses the reason code."""
    action: Literal["set_reason"] = "set_reason"
    reason: TransferReasonEnum


class SetScheduleAction(BaseModel):
    """
    Sets the transfer date and time.

    `scheduled_at = None` means "now".
    """
    action: Literal["set_schedule"] = "set_schedule"
    scheduled_at: Optional[datetime] = None


class SetNotesAction(BaseModel):
    """Free-text notes."""
    action: Literal["set_notes"] = "set_notes"
    notes: str = Field("", max_length=2000)


TransferAction = Annotated[
    Union[
        SearchPatientsAction,
        SelectPatientAction,
        ChangePatientAction,
        SetReasonAction,
        SetScheduleAction,
        SetNotesAction,
    ],
    Field(discriminator="action"),
]


class TransferActionRequest(BaseModel):
    """Body of the actions endpoint."""
    step: TransferAction


# ============================================
# OUTPUTS
# ============================================

class TransferReasonOption(BaseModel):
    """Reason code with its label."""
    value: TransferReasonEnum
    label: str


class TransferRequest(BaseModel):
    """Submission payload produced by a confirmed transfer."""

    patient: InpatientSnapshot
    destination: BedSnapshot
    reason: TransferReasonEnum
    reason_label: str
    scheduled_at: datetime
    is_scheduled: bool
    notes: str = ""
    ordering_clinician: str
    confirmation_message: str


class TransferWorkflowView(BaseModel):
    """Current state of the transfer modal."""

    state: TransferStateEnum
    is_open: bool
    search: str = ""
    patients: List[InpatientSnapshot] = []
    patient: Optional[InpatientSnapshot] = None
    destination: Optional[BedSnapshot] = None
    destination_restricted: bool = False
    reason: Optional[TransferReasonEnum] = None
    scheduled_at: Optional[datetime] = None
    is_scheduled: bool = False
    notes: str = ""
    ordering_clinician: str
    ordering_clinician_department: str
    can_confirm: bool = False
