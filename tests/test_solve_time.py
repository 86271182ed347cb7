import pytest

from results_core import (
    DNF_VALUE,
    DNS_VALUE,
    INCOMPLETE_RANK_VALUE,
    SolveTime,
    clock_format,
    format_solve_time,
    format_stored_value,
)


def test_predicates_per_kind():
    done = SolveTime.completed(1234)
    dnf = SolveTime.dnf()
    dns = SolveTime.dns()
    skip = SolveTime.skipped()

    assert done.unskipped and not done.incomplete and not done.is_skipped
    assert dnf.incomplete and dnf.unskipped
    assert dns.incomplete and dns.unskipped
    assert skip.is_skipped and not skip.unskipped and not skip.incomplete


def test_wca_value_ranks_incomplete_last():
    assert SolveTime.completed(850).wca_value == 850
    assert SolveTime.dnf().wca_value == INCOMPLETE_RANK_VALUE
    assert SolveTime.dns().wca_value > SolveTime.completed(10_000_000).wca_value


def test_skipped_attempt_has_no_ranking_value():
    with pytest.raises(ValueError):
        SolveTime.skipped().wca_value
    with pytest.raises(ValueError):
        SolveTime.skipped().sort_key


def test_from_stored_decodes_sentinels():
    assert SolveTime.from_stored(0).is_skipped
    assert SolveTime.from_stored(None).is_skipped
    assert SolveTime.from_stored(DNF_VALUE).is_dnf
    assert SolveTime.from_stored(DNS_VALUE).is_dns
    assert SolveTime.from_stored(4321) == SolveTime.completed(4321)
    assert SolveTime.dns().stored_value == -2


def test_negative_magnitude_is_reported():
    assert SolveTime.completed(-5).errors() == ["Value must be non-negative"]
    assert SolveTime.completed(-5).valid is False
    assert SolveTime.completed(500).errors() == []
    assert SolveTime.dnf().valid


def test_clock_format_drops_leading_zero_components():
    assert clock_format(850) == "8.50"
    assert clock_format(45) == "0.45"
    assert clock_format(6543) == "1:05.43"
    assert clock_format(6000) == "1:00.00"
    assert clock_format(360000) == "1:00:00.00"
    assert clock_format(61000 * 10) == "1:41:40.00"
    assert clock_format(-5) == "-0.05"
    assert clock_format(-6543) == "-1:05.43"


def test_format_solve_time_by_event_units():
    assert format_solve_time(SolveTime.dnf(), "333") == "DNF"
    assert format_solve_time(SolveTime.dns(), "333fm") == "DNS"
    assert format_solve_time(SolveTime.completed(27), "333fm") == "27"
    assert format_solve_time(SolveTime.completed(1234), "333") == "12.34"
    assert format_solve_time(SolveTime.skipped(), "333") == ""


def test_format_stored_value_for_move_count_average():
    assert format_stored_value(2633, "333fm", "average") == "26.33"
    assert format_stored_value(2600, "333fm", "average") == "26.00"
    assert format_stored_value(26, "333fm", "best") == "26"
    assert format_stored_value(DNF_VALUE, "333", "average") == "DNF"
    assert format_stored_value(0, "333", "average") == ""
    assert format_stored_value(6543, "333", "average") == "1:05.43"
