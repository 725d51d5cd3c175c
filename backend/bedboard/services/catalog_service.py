"""
Bed catalog service.

Reads the floor -> ward -> bed hierarchy from the database into immutable
snapshots. A board session keeps one catalog for its whole life.
"""
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple
from pydantic import ValidationError
from sqlmodel import Session
import logging

from bedboard.config import settings
from bedboard.models.bed import Bed
from bedboard.models.floor import Floor
from bedboard.models.ward import Ward
from bedboard.models.occupant import Occupant
from bedboard.models.enums import BedStatusEnum
from bedboard.repositories.bed_repo import BedRepository
from bedboard.repositories.inpatient_repo import InpatientRepository
from bedboard.schemas.bed import BedSnapshot, OccupantSnapshot, WardView, FloorView
from bedboard.schemas.filters import FilterCriteria
from bedboard.schemas.transfer import InpatientSnapshot
from bedboard.services.filter_service import filter_floors
from bedboard.core.exceptions import BedNotFoundError, CatalogIntegrityError

logger = logging.getLogger("bedboard.catalog")


class BedCatalog:
    """
    Read-only bed catalog.

    Filter results are memoized on the criteria value, so asking twice
    for the same criteria returns the same tuple. Only the most recently
    used `cache_size` results are kept.
    """

    def __init__(self, floors: Sequence[FloorView], cache_size: Optional[int] = None):
        self.floors: Tuple[FloorView, ...] = tuple(floors)
        self._beds: Dict[str, BedSnapshot] = {
            bed.id: bed
            for floor in self.floors
            for ward in floor.wards
            for bed in ward.beds
        }
        self.cache_size = cache_size if cache_size is not None else settings.FILTER_CACHE_SIZE
        self._filter_cache: "OrderedDict[FilterCriteria, Tuple[FloorView, ...]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._beds)

    def __contains__(self, bed_id: str) -> bool:
        return bed_id in self._beds

    @property
    def beds(self) -> Tuple[BedSnapshot, ...]:
        """Every bed, in floor/ward/grid order."""
        return tuple(self._beds.values())

    @property
    def floor_ids(self) -> List[str]:
        return [floor.id for floor in self.floors]

    def find_bed(self, bed_id: str) -> Optional[BedSnapshot]:
        return self._beds.get(bed_id)

    def get_bed(self, bed_id: str) -> BedSnapshot:
        """
        Returns a bed by id.

        Raises:
            BedNotFoundError: Unknown bed
        """
        bed = self._beds.get(bed_id)
        if bed is None:
            raise BedNotFoundError(bed_id)
        return bed

    def filter(self, criteria: FilterCriteria) -> Tuple[FloorView, ...]:
        """
        Visible floors for the given criteria (memoized).

        Args:
            criteria: Active filters

        Returns:
            Filtered floor tree
        """
        cached = self._filter_cache.get(criteria)
        if cached is not None:
            self._filter_cache.move_to_end(criteria)
            return cached

        cached = filter_floors(self.floors, criteria)
        self._filter_cache[criteria] = cached
        while len(self._filter_cache) > self.cache_size:
            self._filter_cache.popitem(last=False)
        return cached

    @property
    def cached_filters(self) -> int:
        """Number of memoized filter results."""
        return len(self._filter_cache)


def build_ward_view(floor: Floor, ward: Ward, beds: Sequence[BedSnapshot]) -> WardView:
    """
    Builds a ward view with its occupancy counters.

    Args:
        floor: Floor row
        ward: Ward row
        beds: Every bed of the ward

    Returns:
        WardView
    """
    total = len(beds)
    occupied = sum(1 for b in beds if b.status == BedStatusEnum.OCCUPIED)
    percent = round(occupied / total * 100) if total else 0

    return WardView(
        id=ward.id,
        code=ward.code,
        name=ward.name,
        floor_id=floor.id,
        type=ward.type,
        price_per_day=ward.price_per_day,
        total_beds=total,
        occupied_beds=occupied,
        occupancy_percent=percent,
        beds=tuple(beds),
    )


class CatalogService:
    """
    Loads catalog snapshots from the data store.

    Usage:
        catalog = CatalogService(session).load_catalog()
    """

    def __init__(self, session: Session):
        self.session = session
        self.bed_repo = BedRepository(session)
        self.inpatient_repo = InpatientRepository(session)

    def _to_snapshot(
        self,
        floor: Floor,
        ward: Ward,
        bed: Bed,
        occupant: Optional[Occupant]
    ) -> BedSnapshot:
        try:
            occupant_snapshot = None
            if occupant is not None:
                occupant_snapshot = OccupantSnapshot(
                    name=occupant.name,
                    mrn=occupant.mrn,
                    admitted_at=occupant.admitted_at,
                    acuity=occupant.acuity,
                    diagnosis=occupant.diagnosis,
                    attending_doctor=occupant.attending_doctor,
                )

            return BedSnapshot(
                id=bed.id,
                bed_number=bed.bed_number,
                floor_id=floor.id,
                floor_name=floor.name,
                ward_id=ward.id,
                ward_name=ward.name,
                room_number=bed.room_number,
                type=bed.type,
                status=bed.status,
                price_per_day=bed.price_per_day,
                amenities=tuple(bed.get_amenities()),
                last_cleaned_at=bed.last_cleaned_at,
                notes=bed.notes or None,
                grid_row=bed.grid_row,
                grid_col=bed.grid_col,
                occupant=occupant_snapshot,
            )
        except ValidationError as e:
            logger.error(f"Inconsistent bed row {bed.id}: {e}")
            raise CatalogIntegrityError(f"Bed {bed.id} is inconsistent: {e}")

    def load_catalog(self) -> BedCatalog:
        """
        Reads every floor, ward, bed and occupant.

        Returns:
            BedCatalog snapshot

        Raises:
            CatalogIntegrityError: A bed breaks the occupant/status rule
        """
        floors: List[FloorView] = []

        for floor in self.bed_repo.get_floors():
            wards: List[WardView] = []
            for ward in self.bed_repo.get_wards(floor.id):
                beds = [
                    self._to_snapshot(floor, ward, bed, bed.occupant)
                    for bed in self.bed_repo.get_by_ward(ward.id)
                ]
                wards.append(build_ward_view(floor, ward, beds))

            floors.append(FloorView(
                id=floor.id,
                name=floor.name,
                bed_count=sum(len(w.beds) for w in wards),
                wards=tuple(wards),
            ))

        catalog = BedCatalog(floors)
        logger.debug(f"Catalog loaded: {len(floors)} floors, {len(catalog)} beds")
        return catalog

    def load_inpatients(self) -> Tuple[InpatientSnapshot, ...]:
        """
        Reads the admitted patient list used by the transfer search.

        Returns:
            Inpatient snapshots ordered by MRN

        Raises:
            CatalogIntegrityError: A patient row is malformed
        """
        patients: List[InpatientSnapshot] = []
        for p in self.inpatient_repo.get_all_ordered():
            try:
                patients.append(InpatientSnapshot(
                    id=p.id,
                    gdid=p.gdid,
                    name=p.name,
                    age=p.age,
                    gender=p.gender,
                    ward_name=p.ward_name,
                    room=p.room,
                    bed_label=p.bed_label,
                    tariff=p.tariff,
                ))
            except ValidationError as e:
                logger.error(f"Inconsistent inpatient row {p.id}: {e}")
                raise CatalogIntegrityError(f"Patient {p.id} is inconsistent: {e}")
        return tuple(patients)
