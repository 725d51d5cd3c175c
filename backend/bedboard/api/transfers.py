"""
Transfer workflow endpoints.

Lives under a board session: the destination is the first bed selected
in that session.
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import List
import asyncio
import logging

from bedboard.config import settings
from bedboard.core.websocket_manager import manager
from bedboard.core.exceptions import (
    FormValidationError,
    InvalidStateError,
    PatientNotFoundError,
)
from bedboard.models.enums import NotificationKindEnum
from bedboard.schemas.responses import MessageResponse
from bedboard.schemas.transfer import (
    InpatientSnapshot,
    TransferActionRequest,
    TransferWorkflowView,
)
from bedboard.services.session_service import BoardSession
from bedboard.api.deps import get_board

router = APIRouter()
logger = logging.getLogger("bedboard.transfer")


@router.post("/{session_id}/transfer/open", response_model=TransferWorkflowView)
def open_transfer(board: BoardSession = Depends(get_board)):
    """Opens the transfer modal (always with a clean form)."""
    board.open_transfer()
    return board.transfer.view()


@router.get("/{session_id}/transfer", response_model=TransferWorkflowView)
def get_transfer(board: BoardSession = Depends(get_board)):
    """Current state of the transfer modal."""
    return board.transfer.view()


@router.get("/{session_id}/transfer/patients", response_model=List[InpatientSnapshot])
def search_patients(q: str = "", board: BoardSession = Depends(get_board)):
    """
    Admitted patients matching a search text.

    Without `q` the workflow's own search text is used.
    """
    try:
        if q:
            board.transfer.set_search(q)
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)
    return board.transfer.matching_patients()


@router.post("/{session_id}/transfer/actions", response_model=TransferWorkflowView)
def apply_transfer_action(
    request: TransferActionRequest,
    board: BoardSession = Depends(get_board)
):
    """Applies one step of the transfer form."""
    try:
        board.transfer.apply(request.step)
    except PatientNotFoundError:
        raise HTTPException(status_code=404, detail="Patient not found")
    except FormValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)

    return board.transfer.view()


@router.post("/{session_id}/transfer/confirm", response_model=MessageResponse)
async def confirm_transfer(board: BoardSession = Depends(get_board)):
    """
    Confirms the transfer.

    The form is checked first; a missing field is reported right away
    as a 400 and an error notification. Otherwise the request waits the
    configured confirmation delay before the transfer is submitted.
    """
    try:
        board.transfer.validate()
    except FormValidationError as e:
        await manager.notify(NotificationKindEnum.ERROR.value, e.message, session_id=board.id)
        raise HTTPException(status_code=400, detail=e.message)
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await asyncio.sleep(settings.TRANSFER_CONFIRM_DELAY_SECONDS)

    try:
        transfer = board.confirm_transfer()
    except FormValidationError as e:
        # The form can change while the delay runs
        await manager.notify(NotificationKindEnum.ERROR.value, e.message, session_id=board.id)
        raise HTTPException(status_code=400, detail=e.message)
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=e.message)

    await manager.notify(
        NotificationKindEnum.SUCCESS.value,
        transfer.confirmation_message,
        session_id=board.id
    )

    return MessageResponse(
        success=True,
        message=transfer.confirmation_message,
        data=transfer.model_dump(mode="json")
    )


@router.post("/{session_id}/transfer/cancel", response_model=TransferWorkflowView)
def cancel_transfer(board: BoardSession = Depends(get_board)):
    """Closes the modal and discards the form."""
    board.transfer.cancel()
    return board.transfer.view()
