"""Tests for the "select first N" engine: fill, shrink and target parsing."""

import pytest

from auto_selection import (
    InvalidTargetInput,
    fill_target,
    parse_target_count,
    set_target,
    shrink_to_target,
)


class TestFillTarget:

    def test_no_target_is_noop(self, ledger, arts):
        assert fill_target(ledger, arts(1, 2, 3)) == []
        assert ledger.size() == 0

    def test_fills_in_page_order_until_target(self, ledger, arts):
        ledger.target_count = 2
        assert fill_target(ledger, arts(4, 1, 7)) == [4, 1]
        assert ledger.selected_ids() == [4, 1]
        assert ledger.auto_ids() == [4, 1]

    def test_page_exhausted_before_target(self, ledger, arts):
        ledger.target_count = 10
        assert fill_target(ledger, arts(1, 2)) == [1, 2]
        assert ledger.size() == 2

    def test_skips_selected_and_deselected(self, ledger, arts):
        ledger.target_count = 3
        ledger.record_explicit_select(1)
        ledger.record_explicit_deselect(2)
        assert fill_target(ledger, arts(1, 2, 3, 4)) == [3, 4]
        assert ledger.is_auto(3) and ledger.is_auto(4)
        assert not ledger.is_auto(1)
        assert ledger.is_deselected(2)

    def test_already_at_target(self, ledger, arts):
        ledger.target_count = 1
        ledger.record_explicit_select(99)
        assert fill_target(ledger, arts(1, 2)) == []

    def test_reaches_min_of_target_and_observable(self, ledger, arts):
        ledger.target_count = 7
        ledger.record_explicit_deselect(2)
        pages = [arts(1, 2, 3), arts(4, 5, 6), arts(6, 7)]
        for page in pages:
            fill_target(ledger, page)
        # 7 distinct ids observed, one of them deselected
        assert ledger.size() == 6

        ledger.target_count = 4
        shrink_to_target(ledger)
        for page in pages:
            fill_target(ledger, page)
        assert ledger.size() == 4


class TestShrinkToTarget:

    def test_releases_oldest_auto_first(self, ledger, arts):
        ledger.target_count = 5
        fill_target(ledger, arts(1, 2, 3, 4, 5))
        ledger.target_count = 2
        assert shrink_to_target(ledger) == [1, 2, 3]
        assert ledger.selected_ids() == [4, 5]

    def test_never_touches_explicit(self, ledger, arts):
        ledger.record_explicit_select(10)
        ledger.record_explicit_select(11)
        ledger.target_count = 3
        fill_target(ledger, arts(1))
        ledger.target_count = 1
        assert shrink_to_target(ledger) == [1]
        # pool exhausted: stays over target
        assert ledger.selected_ids() == [10, 11]
        assert ledger.size() > ledger.target_count

    def test_no_target_no_shrink(self, ledger, arts):
        ledger.record_auto_select(1)
        assert shrink_to_target(ledger) == []
        assert 1 in ledger


class TestSetTarget:

    def test_sets_and_fills_current_page(self, ledger, arts):
        assert set_target(ledger, 2, arts(1, 2, 3))
        assert ledger.target_count == 2
        assert ledger.selected_ids() == [1, 2]

    def test_lowering_shrinks_exactly_to_target(self, ledger, arts):
        page = arts(1, 2, 3, 4)
        set_target(ledger, 4, page)
        set_target(ledger, 2, page)
        assert ledger.size() == 2
        # freed slots are not refilled from the same page
        assert ledger.selected_ids() == [3, 4]

    def test_raising_fills_more(self, ledger, arts):
        page = arts(1, 2, 3, 4)
        set_target(ledger, 1, page)
        set_target(ledger, 3, page)
        assert ledger.selected_ids() == [1, 2, 3]

    @pytest.mark.parametrize("bad", [0, -3, 2.5, "5", None, True])
    def test_rejects_non_positive_int(self, ledger, arts, bad):
        ledger.record_explicit_select(8)
        before = ledger.snapshot()
        assert not set_target(ledger, bad, arts(1, 2))
        assert ledger.snapshot() == before


class TestParseTargetCount:

    @pytest.mark.parametrize(
        "raw, expected",
        [("20", 20), ("  7 ", 7), ("12 rows", 12), ("+3", 3), (5, 5), (4.0, 4)],
    )
    def test_valid(self, raw, expected):
        assert parse_target_count(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-2", "  ", 0, -1, 1.5, True, None, [3], "9" * 5000])
    def test_invalid(self, raw):
        with pytest.raises(InvalidTargetInput):
            parse_target_count(raw)

    def test_invalid_target_is_value_error(self):
        with pytest.raises(ValueError):
            parse_target_count("nope")
