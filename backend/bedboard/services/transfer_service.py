"""
Transfer workflow.

State machine behind the bed transfer modal:

    closed -> searching_patient -> patient_selected -> submittable -> submitted

Opening always starts from scratch; the workflow cannot be resumed across
opens. Submission only checks the form (patient, destination bed, reason)
and produces an in-memory `TransferRequest`; nothing is persisted here.
"""
from typing import Callable, Dict, List, Optional, Sequence
from datetime import datetime
import logging

from bedboard.config import settings
from bedboard.models.enums import TransferReasonEnum, TransferStateEnum
from bedboard.schemas.bed import BedSnapshot
from bedboard.schemas.transfer import (
    InpatientSnapshot,
    TransferRequest,
    TransferWorkflowView,
    SearchPatientsAction,
    SelectPatientAction,
    ChangePatientAction,
    SetReasonAction,
    SetScheduleAction,
    SetNotesAction,
)
from bedboard.core.exceptions import (
    InvalidStateError,
    PatientNotFoundError,
    PatternMismatchError,
    CrossFieldError,
    TransferValidationError,
)
from bedboard.utils.validators import is_valid_mrn, normalize_search

logger = logging.getLogger("bedboard.transfer")

Clock = Callable[[], datetime]

# User-facing messages, in the order they are checked
MSG_PATIENT_REQUIRED = "Please select a patient"
MSG_DESTINATION_REQUIRED = "No destination bed selected"
MSG_REASON_REQUIRED = "Please select a reason for transfer"
MSG_SCHEDULE_IN_PAST = "Transfer date cannot be in the past"


def _as_local_naive(value: datetime) -> datetime:
    """Drops the timezone after converting to local time."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class TransferWorkflow:
    """
    Single-destination transfer wizard of one board session.

    Usage:
        workflow = TransferWorkflow(patients, clock)
        workflow.open(destination=bed)
        workflow.select_patient("MRN0100002")
        workflow.set_reason(TransferReasonEnum.STEP_DOWN_CARE)
        request = workflow.submit()
    """

    def __init__(self, patients: Sequence[InpatientSnapshot], clock: Clock = datetime.now):
        self._patients = tuple(patients)
        self._patients_by_id: Dict[str, InpatientSnapshot] = {p.id: p for p in self._patients}
        self._clock = clock

        self.is_open = False
        self.last_request: Optional[TransferRequest] = None
        self._reset()

    def _reset(self) -> None:
        self.search = ""
        self.patient: Optional[InpatientSnapshot] = None
        self.destination: Optional[BedSnapshot] = None
        self.destination_restricted = False
        self.reason: Optional[TransferReasonEnum] = None
        self.notes = ""
        self.scheduled_at: Optional[datetime] = self._clock()

    def _require_open(self) -> None:
        if not self.is_open:
            raise InvalidStateError("Transfer workflow is not open")

    # ============================================
    # STATE
    # ============================================

    @property
    def state(self) -> TransferStateEnum:
        if not self.is_open:
            if self.last_request is not None:
                return TransferStateEnum.SUBMITTED
            return TransferStateEnum.CLOSED
        if self.patient is None:
            return TransferStateEnum.SEARCHING_PATIENT
        if self.destination is not None and self.reason is not None and self.scheduled_at is not None:
            return TransferStateEnum.SUBMITTABLE
        return TransferStateEnum.PATIENT_SELECTED

    @property
    def can_confirm(self) -> bool:
        """Whether the confirm button is enabled (patient and bed chosen)."""
        return self.is_open and self.patient is not None and self.destination is not None

    @property
    def is_scheduled(self) -> bool:
        """True when the transfer is planned for later rather than now."""
        return self.scheduled_at is not None and self.scheduled_at > self._clock()

    # ============================================
    # OPEN / CLOSE
    # ============================================

    def open(self, destination: Optional[BedSnapshot] = None, restricted: bool = False) -> None:
        """
        Opens the modal with a clean form.

        Args:
            destination: Pre-selected destination bed (first selected bed)
            restricted: More beds were selected than the one used
        """
        self._reset()
        self.last_request = None
        self.destination = destination
        self.destination_restricted = restricted
        self.is_open = True

        logger.info(
            f"Transfer workflow opened, destination: "
            f"{destination.bed_number if destination else 'none'}"
        )

    def cancel(self) -> None:
        """Discards the form and closes the modal."""
        self._reset()
        self.last_request = None
        self.is_open = False

    # ============================================
    # PATIENT
    # ============================================

    def matching_patients(self) -> List[InpatientSnapshot]:
        """
        Patients matching the search text (all of them when blank).

        Matches name, external id (gdid) or MRN, case-insensitively.
        """
        query = normalize_search(self.search)
        if not query:
            return list(self._patients)
        return [
            p for p in self._patients
            if query in p.name.lower()
            or query in p.gdid.lower()
            or query in p.id.lower()
        ]

    def set_search(self, text: str) -> None:
        self._require_open()
        self.search = text or ""

    def select_patient(self, patient_id: str) -> InpatientSnapshot:
        """
        Picks the patient to transfer and clears the search text.

        Raises:
            PatternMismatchError: The id is not an MRN
            PatientNotFoundError: No such admitted patient
        """
        self._require_open()

        if not is_valid_mrn(patient_id):
            raise PatternMismatchError("patient id", patient_id, "MRN followed by 7 digits")

        patient = self._patients_by_id.get(patient_id.strip().upper())
        if patient is None:
            raise PatientNotFoundError(patient_id)

        self.patient = patient
        self.search = ""
        return patient

    def change_patient(self) -> None:
        """Back to the patient search."""
        self._require_open()
        self.patient = None

    # ============================================
    # DETAILS
    # ============================================

    def set_reason(self, reason: TransferReasonEnum) -> None:
        self._require_open()
        self.reason = TransferReasonEnum(reason)

    def set_schedule(self, scheduled_at: Optional[datetime]) -> None:
        """
        Sets the transfer date and time (None means now).

        Raises:
            CrossFieldError: The date is before today
        """
        self._require_open()
        now = self._clock()

        if scheduled_at is None:
            self.scheduled_at = now
            return

        scheduled_at = _as_local_naive(scheduled_at)
        if scheduled_at.date() < now.date():
            raise CrossFieldError(MSG_SCHEDULE_IN_PAST, "scheduled_at")
        self.scheduled_at = scheduled_at

    def set_notes(self, notes: str) -> None:
        self._require_open()
        self.notes = notes or ""

    def apply(self, step) -> None:
        """
        Applies one validated step action.

        Args:
            step: One of the members of `TransferAction`
        """
        if isinstance(step, SearchPatientsAction):
            self.set_search(step.text)
        elif isinstance(step, SelectPatientAction):
            self.select_patient(step.patient_id)
        elif isinstance(step, ChangePatientAction):
            self.change_patient()
        elif isinstance(step, SetReasonAction):
            self.set_reason(step.reason)
        elif isinstance(step, SetScheduleAction):
            self.set_schedule(step.scheduled_at)
        elif isinstance(step, SetNotesAction):
            self.set_notes(step.notes)
        else:
            raise InvalidStateError(f"Unsupported transfer step: {type(step).__name__}")

    # ============================================
    # SUBMIT
    # ============================================

    def validate(self) -> None:
        """
        Checks the form without submitting it.

        Checks run in a fixed order and the first failure is raised:
        patient, then destination bed, then reason.

        Raises:
            InvalidStateError: The workflow is not open
            TransferValidationError: A required field is missing
        """
        self._require_open()

        if self.patient is None:
            raise TransferValidationError(MSG_PATIENT_REQUIRED, "patient")
        if self.destination is None:
            raise TransferValidationError(MSG_DESTINATION_REQUIRED, "destination")
        if self.reason is None:
            raise TransferValidationError(MSG_REASON_REQUIRED, "reason")

    def submit(self) -> TransferRequest:
        """
        Validates and confirms the transfer.

        On success the form is reset and the modal closes.

        Returns:
            The transfer request

        Raises:
            InvalidStateError: The workflow is not open
            TransferValidationError: A required field is missing
        """
        self.validate()

        scheduled_at = self.scheduled_at or self._clock()

        request = TransferRequest(
            patient=self.patient,
            destination=self.destination,
            reason=self.reason,
            reason_label=self.reason.label,
            scheduled_at=scheduled_at,
            is_scheduled=self.is_scheduled,
            notes=self.notes,
            ordering_clinician=settings.ORDERING_CLINICIAN,
            confirmation_message=(
                f"Transfer initiated for {self.patient.name} "
                f"to {self.destination.bed_number}"
            ),
        )

        logger.info(
            f"Transfer confirmed: {self.patient.name} -> {self.destination.bed_number} "
            f"({self.reason.value})"
        )

        self._reset()
        self.is_open = False
        self.last_request = request
        return request

    def view(self) -> TransferWorkflowView:
        """Snapshot of the modal for the client."""
        return TransferWorkflowView(
            state=self.state,
            is_open=self.is_open,
            search=self.search,
            patients=self.matching_patients() if self.is_open and self.patient is None else [],
            patient=self.patient,
            destination=self.destination,
            destination_restricted=self.destination_restricted,
            reason=self.reason,
            scheduled_at=self.scheduled_at if self.is_open else None,
            is_scheduled=self.is_scheduled if self.is_open else False,
            notes=self.notes,
            ordering_clinician=settings.ORDERING_CLINICIAN,
            ordering_clinician_department=settings.ORDERING_CLINICIAN_DEPARTMENT,
            can_confirm=self.can_confirm,
        )
