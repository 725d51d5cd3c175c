"""
Board sessions.

A board session is the bed map state of one browser tab: filters, active
floor tab, Selection Set, occupancy panel and transfer workflow. Sessions
share only the immutable catalog they were opened with.
"""
from typing import Callable, Dict, Optional, Sequence
from datetime import datetime, timedelta
import logging
import uuid

from bedboard.config import settings
from bedboard.models.enums import BedClickOutcomeEnum
from bedboard.schemas.filters import FilterCriteria
from bedboard.schemas.occupancy import OccupancyDetail
from bedboard.schemas.session import SessionView, ClickResponse
from bedboard.schemas.summary import SelectionSummary
from bedboard.schemas.transfer import InpatientSnapshot, TransferRequest
from bedboard.services.catalog_service import BedCatalog
from bedboard.services.filter_service import (
    EMPTY_RESULT_MESSAGE,
    compute_stats,
    build_floor_tabs,
    resolve_active_floor,
)
from bedboard.services.selection_service import SelectionTracker
from bedboard.services.occupancy_service import build_occupancy_detail
from bedboard.services.summary_service import build_selection_summary
from bedboard.services.transfer_service import TransferWorkflow
from bedboard.core.exceptions import (
    InvalidStateError,
    NotFoundError,
    SessionNotFoundError,
)

logger = logging.getLogger("bedboard.sessions")

Clock = Callable[[], datetime]


class BoardSession:
    """
    Bed map state of one tab.

    Usage:
        board = BoardSession(catalog, patients, clock)
        board.click("F3-WARD-A-3001")
        board.open_transfer()
    """

    def __init__(
        self,
        catalog: BedCatalog,
        patients: Sequence[InpatientSnapshot],
        clock: Clock = datetime.now,
        criteria: Optional[FilterCriteria] = None,
        session_id: Optional[str] = None
    ):
        self.id = session_id or str(uuid.uuid4())
        self.catalog = catalog
        self.clock = clock
        self.criteria = criteria or FilterCriteria()
        self.requested_floor: Optional[str] = catalog.floor_ids[0] if catalog.floors else None
        self.last_seen: datetime = clock()

        self.selection = SelectionTracker()
        self.occupied_bed_id: Optional[str] = None
        self.transfer = TransferWorkflow(patients, clock)

    # ============================================
    # FILTERS
    # ============================================

    def visible_floors(self):
        return self.catalog.filter(self.criteria)

    def set_filters(self, criteria: FilterCriteria) -> None:
        """Replaces every filter at once."""
        self.criteria = criteria

    def clear_search(self) -> None:
        """Clears the search text, keeping the other filters."""
        self.criteria = self.criteria.without_search()

    def set_active_floor(self, floor_id: str) -> None:
        """
        Chooses the floor tab.

        Raises:
            NotFoundError: Unknown floor
        """
        if floor_id not in self.catalog.floor_ids:
            raise NotFoundError("Floor", floor_id)
        self.requested_floor = floor_id

    @property
    def active_floor(self) -> Optional[str]:
        return resolve_active_floor(self.requested_floor, self.visible_floors())

    # ============================================
    # SELECTION
    # ============================================

    def click(self, bed_id: str) -> ClickResponse:
        """
        Handles a click on a bed tile.

        Clicking an occupied bed opens its detail panel and leaves the
        Selection Set as it was.

        Raises:
            BedNotFoundError: Unknown bed
        """
        bed = self.catalog.get_bed(bed_id)
        outcome = self.selection.click(bed)

        occupancy = None
        if outcome == BedClickOutcomeEnum.OPENED_DETAIL:
            self.occupied_bed_id = bed.id
            occupancy = build_occupancy_detail(bed, self.clock())

        return ClickResponse(
            bed_id=bed.id,
            outcome=outcome,
            selected_bed_ids=self.selection.ids,
            summary=self.summary(),
            occupancy=occupancy,
        )

    def summary(self) -> Optional[SelectionSummary]:
        return build_selection_summary(self.selection.resolve(self.catalog))

    def clear_selection(self) -> int:
        return self.selection.clear()

    def _require_selection(self) -> int:
        count = len(self.selection)
        if count == 0:
            raise InvalidStateError("No beds selected")
        return count

    def assign(self) -> str:
        """
        Assign action of the summary bar (no backend call).

        Returns:
            Notification text
        """
        count = self._require_selection()
        self.selection.clear()
        return f"Assign patient to {count} bed(s)"

    def reserve(self) -> str:
        """
        Reserve action of the summary bar (no backend call).

        Returns:
            Notification text
        """
        count = self._require_selection()
        self.selection.clear()
        return f"Reserved {count} bed(s)"

    # ============================================
    # OCCUPANCY PANEL
    # ============================================

    def occupancy_detail(self) -> OccupancyDetail:
        """
        Detail of the bed shown in the panel.

        Raises:
            InvalidStateError: The panel is closed
        """
        if self.occupied_bed_id is None:
            raise InvalidStateError("Occupancy panel is not open")
        bed = self.catalog.get_bed(self.occupied_bed_id)
        return build_occupancy_detail(bed, self.clock())

    def close_occupancy(self) -> None:
        self.occupied_bed_id = None

    def release_bed(self) -> str:
        """
        Discharge action of the panel (no backend call); closes the panel.

        Returns:
            Notification text
        """
        if self.occupied_bed_id is None:
            raise InvalidStateError("Occupancy panel is not open")
        logger.info(f"Release requested for bed {self.occupied_bed_id}")
        self.occupied_bed_id = None
        return "Bed released"

    # ============================================
    # TRANSFER
    # ============================================

    def open_transfer(self) -> None:
        """
        Opens the transfer workflow on the first selected bed.

        Closes the occupancy panel when the request comes from it.
        """
        first_id = self.selection.first()
        destination = self.catalog.find_bed(first_id) if first_id else None
        self.occupied_bed_id = None
        self.transfer.open(destination, restricted=len(self.selection) > 1)

    def confirm_transfer(self) -> TransferRequest:
        """Submits the transfer and clears the selection on success."""
        request = self.transfer.submit()
        self.selection.clear()
        return request

    def close(self) -> None:
        """Discards every piece of tab state (navigating away)."""
        self.selection.clear()
        self.occupied_bed_id = None
        self.transfer.cancel()

    # ============================================
    # VIEW
    # ============================================

    def view(self) -> SessionView:
        """Full render state of the tab."""
        visible = self.visible_floors()
        active = resolve_active_floor(self.requested_floor, visible)
        floor = next((f for f in visible if f.id == active), None)

        occupancy = None
        if self.occupied_bed_id is not None:
            occupancy = self.occupancy_detail()

        return SessionView(
            id=self.id,
            filters=self.criteria,
            tabs=build_floor_tabs(self.catalog.floors, visible),
            active_floor=active,
            floor=floor,
            stats=compute_stats(visible),
            empty=not visible,
            empty_message=EMPTY_RESULT_MESSAGE if not visible else None,
            selected_bed_ids=self.selection.ids,
            summary=self.summary(),
            occupancy=occupancy,
            transfer=self.transfer.view(),
        )


class BoardSessionStore:
    """
    In-memory registry of open board sessions.

    Nothing is persisted: restarting the process closes every session.
    A session not used for `idle_timeout` is closed the next time the
    store is accessed.
    """

    def __init__(self, idle_timeout: Optional[timedelta] = None):
        self._sessions: Dict[str, BoardSession] = {}
        self.idle_timeout = idle_timeout or timedelta(minutes=settings.SESSION_IDLE_MINUTES)

    def _is_idle(self, board: BoardSession) -> bool:
        return board.clock() - board.last_seen > self.idle_timeout

    def expire_idle(self) -> int:
        """
        Closes every idle session.

        Returns:
            Number of sessions closed
        """
        expired = [sid for sid, board in self._sessions.items() if self._is_idle(board)]
        for session_id in expired:
            self._sessions.pop(session_id).close()
            logger.info(f"Board session expired: {session_id}")
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def open(
        self,
        catalog: BedCatalog,
        patients: Sequence[InpatientSnapshot],
        clock: Clock = datetime.now,
        criteria: Optional[FilterCriteria] = None
    ) -> BoardSession:
        self.expire_idle()
        board = BoardSession(catalog, patients, clock, criteria)
        self._sessions[board.id] = board
        logger.info(f"Board session opened: {board.id} ({len(catalog)} beds)")
        return board

    def get(self, session_id: str) -> BoardSession:
        """
        Raises:
            SessionNotFoundError: Closed, expired or unknown session
        """
        self.expire_idle()
        board = self._sessions.get(session_id)
        if board is None:
            raise SessionNotFoundError(session_id)
        board.last_seen = board.clock()
        return board

    def close(self, session_id: str) -> None:
        """
        Closes a session and drops its state.

        Raises:
            SessionNotFoundError: Closed or unknown session
        """
        board = self._sessions.pop(session_id, None)
        if board is None:
            raise SessionNotFoundError(session_id)
        board.close()
        logger.info(f"Board session closed: {session_id}")
