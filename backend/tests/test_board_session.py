"""
Tests for board sessions and the session store.
"""
import pytest
from datetime import timedelta

from bedboard.config import settings
from bedboard.core.exceptions import (
    InvalidStateError,
    NotFoundError,
    SessionNotFoundError,
    TransferValidationError,
)
from bedboard.models.enums import TransferReasonEnum, TransferStateEnum
from bedboard.schemas.filters import FilterCriteria
from bedboard.services.filter_service import EMPTY_RESULT_MESSAGE
from bedboard.services.session_service import BoardSessionStore

from conftest import NOW, fixed_clock

WA_102_1 = "F3-WARD-A-WA-102-1"
WB_203_1 = "F3-WARD-B-WB-203-1"
HARISH_BED = "F3-WARD-A-WA-101-2"


class TestBoardView:
    """Tests for the render state of a tab."""

    def test_initial_view(self, board):
        view = board.view()

        assert view.active_floor == "F1"
        assert view.floor.id == "F1"
        assert len(view.tabs) == 5
        assert not view.empty
        assert view.summary is None
        assert view.occupancy is None
        assert view.transfer.state == TransferStateEnum.CLOSED

    def test_active_floor_follows_filters(self, board):
        board.set_filters(FilterCriteria(floor="F3"))
        view = board.view()

        assert view.active_floor == "F3"
        assert view.stats.total == 14

    def test_choose_floor_tab(self, board):
        board.set_active_floor("F4")
        assert board.view().floor.id == "F4"

    def test_unknown_floor_tab(self, board):
        with pytest.raises(NotFoundError):
            board.set_active_floor("F9")

    def test_empty_result(self, board):
        board.set_filters(FilterCriteria(search="zzz", floor="F3"))
        view = board.view()

        assert view.empty
        assert view.empty_message == EMPTY_RESULT_MESSAGE
        assert view.floor is None
        assert all(tab.disabled for tab in view.tabs)

    def test_clear_search_keeps_other_filters(self, board):
        board.set_filters(FilterCriteria(search="zzz", floor="F3"))
        board.clear_search()

        assert board.criteria.search == ""
        assert board.criteria.floor == "F3"
        assert not board.view().empty


class TestBoardSelection:
    """Tests for summary bar actions."""

    def test_summary_scenario(self, board):
        board.click(WA_102_1)
        board.click(WB_203_1)

        summary = board.summary()
        assert len(summary.chips) == 2
        assert summary.overflow_label is None
        assert summary.total_label == "₹6,500/day"

    def test_assign_clears_selection(self, board):
        board.click(WA_102_1)
        board.click(WB_203_1)

        assert board.assign() == "Assign patient to 2 bed(s)"
        assert len(board.selection) == 0

    def test_reserve_clears_selection(self, board):
        board.click(WA_102_1)

        assert board.reserve() == "Reserved 1 bed(s)"
        assert board.summary() is None

    def test_assign_needs_selection(self, board):
        with pytest.raises(InvalidStateError):
            board.assign()

    def test_selection_survives_filtering(self, board):
        """Beds hidden by a filter stay selected."""
        board.click(WA_102_1)
        board.set_filters(FilterCriteria(floor="F1"))
        assert board.view().selected_bed_ids == [WA_102_1]


class TestBoardTransfer:
    """Tests for the transfer workflow inside a session."""

    def test_destination_is_first_selected_bed(self, board):
        board.click(WB_203_1)
        board.click(WA_102_1)
        board.open_transfer()

        assert board.transfer.destination.id == WB_203_1
        assert board.transfer.destination_restricted

    def test_single_bed_not_restricted(self, board):
        board.click(WA_102_1)
        board.open_transfer()
        assert not board.transfer.destination_restricted

    def test_no_selection_no_destination(self, board):
        board.open_transfer()
        assert board.transfer.destination is None

    def test_confirm_clears_selection(self, board):
        board.click(WA_102_1)
        board.open_transfer()
        board.transfer.select_patient("MRN0100002")
        board.transfer.set_reason(TransferReasonEnum.STEP_DOWN_CARE)

        request = board.confirm_transfer()

        assert request.destination.id == WA_102_1
        assert len(board.selection) == 0
        assert board.view().transfer.state == TransferStateEnum.SUBMITTED

    def test_failed_confirm_keeps_selection(self, board):
        board.click(WA_102_1)
        board.open_transfer()
        board.transfer.select_patient("MRN0100002")

        with pytest.raises(TransferValidationError):
            board.confirm_transfer()
        assert board.selection.ids == [WA_102_1]

    def test_close_discards_state(self, board):
        board.click(WA_102_1)
        board.click(HARISH_BED)
        board.open_transfer()

        board.close()

        assert len(board.selection) == 0
        assert board.occupied_bed_id is None
        assert not board.transfer.is_open


class TestSessionStore:
    """Tests for the in-memory session registry."""

    def test_open_get_close(self, catalog, inpatients):
        store = BoardSessionStore()
        board = store.open(catalog, inpatients, fixed_clock)

        assert len(store) == 1
        assert store.get(board.id) is board

        store.close(board.id)
        assert len(store) == 0
        with pytest.raises(SessionNotFoundError):
            store.get(board.id)

    def test_sessions_are_isolated(self, catalog, inpatients):
        store = BoardSessionStore()
        first = store.open(catalog, inpatients, fixed_clock)
        second = store.open(catalog, inpatients, fixed_clock)

        first.click(WA_102_1)

        assert first.id != second.id
        assert len(second.selection) == 0

    def test_close_unknown(self):
        with pytest.raises(SessionNotFoundError):
            BoardSessionStore().close("missing")

    def test_initial_filters(self, catalog, inpatients):
        board = BoardSessionStore().open(
            catalog, inpatients, fixed_clock, FilterCriteria(ward="WARD-B")
        )
        assert board.view().active_floor == "F3"

    def test_typing_does_not_grow_memo(self, board):
        for index in range(500):
            board.set_filters(FilterCriteria(search=f"ward {index}"))
            board.view()

        assert board.catalog.cached_filters <= board.catalog.cache_size


class MovableClock:
    """Clock the test can move forward."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


class TestSessionExpiry:
    """Tests for closing idle sessions."""

    def test_idle_session_expires(self, catalog, inpatients):
        clock = MovableClock(NOW)
        store = BoardSessionStore(idle_timeout=timedelta(minutes=30))
        board = store.open(catalog, inpatients, clock)
        board.click(WA_102_1)

        clock.now = NOW + timedelta(minutes=31)

        with pytest.raises(SessionNotFoundError):
            store.get(board.id)
        assert len(store) == 0
        assert len(board.selection) == 0

    def test_use_keeps_session_alive(self, catalog, inpatients):
        clock = MovableClock(NOW)
        store = BoardSessionStore(idle_timeout=timedelta(minutes=30))
        board = store.open(catalog, inpatients, clock)

        clock.now = NOW + timedelta(minutes=20)
        store.get(board.id)
        clock.now = NOW + timedelta(minutes=40)

        assert store.get(board.id) is board

    def test_opening_expires_others(self, catalog, inpatients):
        clock = MovableClock(NOW)
        store = BoardSessionStore(idle_timeout=timedelta(minutes=30))
        stale = store.open(catalog, inpatients, clock)

        clock.now = NOW + timedelta(hours=1)
        fresh = store.open(catalog, inpatients, clock)

        assert stale.id not in store
        assert fresh.id in store
        assert store.expire_idle() == 0

    def test_default_timeout_from_settings(self):
        assert BoardSessionStore().idle_timeout == timedelta(
            minutes=settings.SESSION_IDLE_MINUTES
        )
