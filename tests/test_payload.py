import pytest

from results_core import (
    DNF_VALUE,
    ResultPayload,
    default_repository,
    record_from_row,
    validate_with,
)


def test_record_from_row_validates_clean_average():
    record = record_from_row(
        {
            "eventId": "333",
            "formatId": "a",
            "value1": 1200,
            "value2": 1300,
            "value3": 1250,
            "value4": 1100,
            "value5": 1400,
            "best": 1100,
            "average": 1250,
        }
    )
    assert len(record.attempts) == 5
    assert validate_with(record, default_repository()) == []


def test_missing_values_become_trailing_skips():
    record = record_from_row(
        {
            "eventId": "333bf",
            "formatId": "3",
            "value1": 3000,
            "value2": -1,
            "value3": 3200,
            "best": 3000,
            "average": DNF_VALUE,
        }
    )
    assert [a.kind for a in record.attempts] == [
        "completed",
        "dnf",
        "completed",
        "skipped",
        "skipped",
    ]
    assert validate_with(record, default_repository()) == []


def test_identifiers_are_normalized():
    payload = ResultPayload.from_row({"eventId": "333FM", "formatId": "M", "value1": 25})
    assert payload.eventId == "333fm"
    assert payload.formatId == "m"


def test_cutoff_flag_is_carried_over():
    record = record_from_row(
        {"eventId": "333", "formatId": "1", "value1": 900, "best": 900, "missedCombinedRoundCutoff": True}
    )
    assert record.missed_combined_round_cutoff is True


def test_rejects_out_of_range_stored_value():
    with pytest.raises(ValueError):
        record_from_row({"eventId": "333", "formatId": "a", "value1": -3})


def test_rejects_row_without_attempts():
    with pytest.raises(ValueError):
        ResultPayload.from_row({"eventId": "333", "formatId": "a"})


def test_rejects_bad_identifier():
    with pytest.raises(ValueError):
        ResultPayload.from_row({"eventId": "3-3", "formatId": "a", "value1": 100})
