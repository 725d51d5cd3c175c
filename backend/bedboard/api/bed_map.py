"""
Bed map endpoints.

Stateless reads of the catalog; no board session needed.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from sqlmodel import Session
from typing import List, Optional
import logging

from bedboard.core.database import get_session
from bedboard.core.exceptions import BedNotFoundError, CatalogIntegrityError
from bedboard.models.enums import TransferReasonEnum
from bedboard.schemas.bed import BedSnapshot
from bedboard.schemas.filters import FilterCriteria
from bedboard.schemas.responses import BedMapResponse
from bedboard.schemas.transfer import TransferReasonOption
from bedboard.services.catalog_service import CatalogService
from bedboard.services.filter_service import (
    EMPTY_RESULT_MESSAGE,
    compute_stats,
    build_floor_tabs,
)

router = APIRouter()
logger = logging.getLogger("bedboard.bed_map")


@router.get("", response_model=BedMapResponse)
def get_bed_map(
    q: Optional[str] = Query(None, description="Bed number, ward or patient name"),
    floor: str = "all",
    ward: str = "all",
    status: str = "all",
    type: str = "all",
    session: Session = Depends(get_session)
):
    """Filtered bed map with stats and floor tabs."""
    try:
        criteria = FilterCriteria(
            search=q,
            floor=floor,
            ward=ward,
            status=status,
            bed_type=type,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors()[0]["msg"])

    try:
        catalog = CatalogService(session).load_catalog()
    except CatalogIntegrityError as e:
        raise HTTPException(status_code=500, detail=e.message)

    visible = catalog.filter(criteria)

    return BedMapResponse(
        filters=criteria,
        floors=list(visible),
        tabs=build_floor_tabs(catalog.floors, visible),
        stats=compute_stats(visible),
        empty=not visible,
        empty_message=EMPTY_RESULT_MESSAGE if not visible else None,
    )


@router.get("/reasons", response_model=List[TransferReasonOption])
def get_transfer_reasons():
    """Reason codes accepted by the transfer workflow."""
    return [
        TransferReasonOption(value=reason, label=reason.label)
        for reason in TransferReasonEnum
    ]


@router.get("/beds/{bed_id}", response_model=BedSnapshot)
def get_bed(bed_id: str, session: Session = Depends(get_session)):
    """Returns a single bed."""
    try:
        catalog = CatalogService(session).load_catalog()
        return catalog.get_bed(bed_id)
    except BedNotFoundError:
        raise HTTPException(status_code=404, detail="Bed not found")
    except CatalogIntegrityError as e:
        raise HTTPException(status_code=500, detail=e.message)
