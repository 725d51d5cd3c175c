"""
Tests for the selection tracker and the summary bar.
"""
from bedboard.models.enums import BedClickOutcomeEnum
from bedboard.services.selection_service import SelectionTracker
from bedboard.services.summary_service import build_selection_summary

WA_102_1 = "F3-WARD-A-WA-102-1"
WB_203_1 = "F3-WARD-B-WB-203-1"
HARISH_BED = "F3-WARD-A-WA-101-2"
RESERVED_BED = "F3-WARD-A-WA-102-2"
MAINTENANCE_BED = "F3-WARD-A-WA-104-1"


class TestSelectionTracker:
    """Tests for bed clicks."""

    def test_click_selects_available_bed(self, catalog):
        tracker = SelectionTracker()
        outcome = tracker.click(catalog.get_bed(WA_102_1))

        assert outcome == BedClickOutcomeEnum.SELECTED
        assert WA_102_1 in tracker
        assert len(tracker) == 1

    def test_toggle_twice_is_identity(self, catalog):
        """Clicking the same bed twice leaves the set as it was."""
        tracker = SelectionTracker()
        tracker.click(catalog.get_bed(WB_203_1))
        before = tracker.ids

        bed = catalog.get_bed(WA_102_1)
        assert tracker.click(bed) == BedClickOutcomeEnum.SELECTED
        assert tracker.click(bed) == BedClickOutcomeEnum.DESELECTED
        assert tracker.ids == before

    def test_occupied_click_leaves_set_unchanged(self, catalog):
        tracker = SelectionTracker()
        tracker.click(catalog.get_bed(WA_102_1))

        outcome = tracker.click(catalog.get_bed(HARISH_BED))

        assert outcome == BedClickOutcomeEnum.OPENED_DETAIL
        assert tracker.ids == [WA_102_1]

    def test_maintenance_click_is_ignored(self, catalog):
        tracker = SelectionTracker()
        outcome = tracker.click(catalog.get_bed(MAINTENANCE_BED))

        assert outcome == BedClickOutcomeEnum.IGNORED
        assert len(tracker) == 0

    def test_reserved_bed_toggles(self, catalog):
        """Reserved beds can be selected like available ones."""
        tracker = SelectionTracker()
        assert tracker.click(catalog.get_bed(RESERVED_BED)) == BedClickOutcomeEnum.SELECTED
        assert tracker.click(catalog.get_bed(RESERVED_BED)) == BedClickOutcomeEnum.DESELECTED

    def test_selection_keeps_click_order(self, catalog):
        tracker = SelectionTracker()
        tracker.click(catalog.get_bed(WB_203_1))
        tracker.click(catalog.get_bed(WA_102_1))

        assert tracker.first() == WB_203_1
        assert [b.id for b in tracker.resolve(catalog)] == [WB_203_1, WA_102_1]

    def test_clear(self, catalog):
        tracker = SelectionTracker()
        tracker.click(catalog.get_bed(WB_203_1))
        tracker.click(catalog.get_bed(WA_102_1))

        assert tracker.clear() == 2
        assert len(tracker) == 0
        assert tracker.first() is None


class TestSelectionSummary:
    """Tests for the summary bar."""

    def test_empty_selection_has_no_summary(self):
        assert build_selection_summary([]) is None

    def test_two_beds_total(self, catalog):
        """WA-102-1 and WB-203-1 add up to 6,500 a day."""
        beds = [catalog.get_bed(WA_102_1), catalog.get_bed(WB_203_1)]
        summary = build_selection_summary(beds)

        assert summary.count == 2
        assert [c.label for c in summary.chips] == [
            "F3 • General Ward A • Bed WA-102-1",
            "F3 • General Ward B • Bed WB-203-1",
        ]
        assert summary.overflow_label is None
        assert summary.total_per_day == 6500
        assert summary.total_label == "₹6,500/day"
        assert summary.single is None
        assert summary.transfer_enabled

    def test_single_bed_detail(self, catalog):
        summary = build_selection_summary([catalog.get_bed(WA_102_1)])

        assert summary.count == 1
        assert summary.total_per_day is None
        assert summary.single.room_number == "102"
        assert summary.single.price_label == "₹3,500/day"
        assert summary.single.amenities == ["O2"]

    def test_chips_capped_with_overflow(self, catalog):
        beds = [
            catalog.get_bed(bed_id) for bed_id in (
                "F3-WARD-A-WA-101-1",
                "F3-WARD-A-WA-102-1",
                "F3-WARD-A-WA-103-1",
                "F3-WARD-B-WB-201-1",
                "F3-WARD-B-WB-203-1",
            )
        ]
        summary = build_selection_summary(beds)

        assert len(summary.chips) == 3
        assert summary.overflow_label == "+2 more"
        assert summary.total_per_day == 3000 + 3500 + 4000 + 3000 + 3000
        assert summary.total_label == "₹16,500/day"

    def test_exactly_three_beds_no_overflow(self, catalog):
        beds = [
            catalog.get_bed("F3-WARD-A-WA-101-1"),
            catalog.get_bed(WA_102_1),
            catalog.get_bed(WB_203_1),
        ]
        summary = build_selection_summary(beds)
        assert len(summary.chips) == 3
        assert summary.overflow_label is None

    def test_custom_chip_limit(self, catalog):
        beds = [catalog.get_bed(WA_102_1), catalog.get_bed(WB_203_1)]
        summary = build_selection_summary(beds, max_chips=1)
        assert len(summary.chips) == 1
        assert summary.overflow_label == "+1 more"
