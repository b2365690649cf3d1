"""Tests for checkbox selection resolution."""

import pytest

from correction_forms.extraction.checkbox import (
    MARKER_PRIORITY,
    classify_candidate,
    resolve_checked,
    split_candidates,
)

REASON_BOUNDARY = r"(?<=\s)(?=O |OQ |w |wy |y )"
ORDER_TYPE_BOUNDARY = r"(?<=\s)(?=O |Y |Cf |& )"


class TestSplitCandidates:

    def test_date_lines_skipped(self):
        span = "01/02/2024\nwy Correct\ny Incorrect"

        assert split_candidates(span, REASON_BOUNDARY) == ["wy Correct", "y Incorrect"]

    def test_single_digit_date_line_skipped(self):
        assert split_candidates(" 1/2/2024 \nO Other", REASON_BOUNDARY) == ["O Other"]

    def test_date_inside_text_kept(self):
        assert split_candidates("w Filed 1/2/2024", REASON_BOUNDARY) == ["w Filed 1/2/2024"]

    def test_split_before_markers(self):
        line = "O Market Y Limit Cf Stop"

        assert split_candidates(line, ORDER_TYPE_BOUNDARY) == ["O Market", "Y Limit", "Cf Stop"]

    def test_empty_segments_dropped(self):
        assert split_candidates("\n  \n", REASON_BOUNDARY) == []

    def test_no_break_space_is_not_a_boundary(self):
        line = "O Market\u00a0Y Limit"

        assert split_candidates(line, ORDER_TYPE_BOUNDARY) == [line]

    def test_non_ascii_digits_are_not_a_date_line(self):
        # Arabic-Indic digits for 1/2/2024
        line = "\u0661/\u0662/\u0662\u0660\u0662\u0664"

        assert split_candidates(line, REASON_BOUNDARY) == [line]


class TestClassifyCandidate:

    def test_wy_before_w_and_y(self):
        assert classify_candidate("wy Wrong account") == "wy"

    @pytest.mark.parametrize("candidate, marker", [
        ("w Wrong price", "w"),
        ("y Wrong quantity", "y"),
        ("Y Limit", "Y"),
        ("Cf Stop", "Cf"),
        ("& Market", "&"),
    ])
    def test_markers(self, candidate, marker):
        assert classify_candidate(candidate) == marker

    @pytest.mark.parametrize("candidate", ["O Market", "OQ Other", "Wrong account", "C Stop"])
    def test_unmarked(self, candidate):
        assert classify_candidate(candidate) is None

    def test_priority_order(self):
        assert MARKER_PRIORITY == ("wy", "w", "y", "Y", "Cf", "&")


class TestResolveChecked:

    def test_first_marked_option_in_reading_order(self):
        text = "Request Date\n01/02/2024\nwy Correct\ny Incorrect\nOrigin of Error:"

        assert resolve_checked(text, "Request Date", "Origin of Error:", REASON_BOUNDARY) == "Correct"

    def test_never_returns_date_line(self):
        text = "Request Date 01/02/2024\nwy Correct\ny Incorrect Origin of Error:"

        assert resolve_checked(text, "Request Date", "Origin of Error:", REASON_BOUNDARY) in {"Correct", "Incorrect"}

    def test_marked_option_mid_line(self):
        text = "Order Type: O Market Y Limit O Stop\nQuantity: 100"

        assert resolve_checked(text, "Order Type:", "Quantity:", ORDER_TYPE_BOUNDARY) == "Limit"

    def test_ampersand_marker(self):
        text = "Order Type: O Market O Limit & Stop Limit\nQuantity: 100"

        assert resolve_checked(text, "Order Type:", "Quantity:", ORDER_TYPE_BOUNDARY) == "Stop Limit"

    def test_wy_stripped_whole(self):
        text = "Request Date\nwy Wrong account number\nOrigin of Error:"

        assert resolve_checked(text, "Request Date", "Origin of Error:", REASON_BOUNDARY) == "Wrong account number"

    def test_repeated_candidate_kept_once(self):
        text = "Request Date\nO Late\ny Wrong price\ny Wrong price\nOrigin of Error:"

        assert resolve_checked(text, "Request Date", "Origin of Error:", REASON_BOUNDARY) == "Wrong price"

    def test_nothing_marked(self):
        text = "Order Type: O Market O Limit\nQuantity: 1"

        assert resolve_checked(text, "Order Type:", "Quantity:", ORDER_TYPE_BOUNDARY) == ""

    @pytest.mark.parametrize("text", [
        "",
        "no tags at all",
        "Request Date\n01/02/2024\n1/3/2024\nOrigin of Error:",
        "Request Date",
    ])
    def test_malformed_text_returns_empty(self, text):
        assert resolve_checked(text, "Request Date", "Origin of Error:", REASON_BOUNDARY) == ""

    def test_result_drawn_from_input(self):
        text = "Request Date\nw  Broker error  \nOrigin of Error:"

        result = resolve_checked(text, "Request Date", "Origin of Error:", REASON_BOUNDARY)

        assert result == "Broker error"
        assert result in text
