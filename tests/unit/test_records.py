from __future__ import annotations

import pytest
from pydantic import ValidationError

from reducekit.domain import Driver
from reducekit.matching import RecordMatcher, match_records


def test_match_records_returns_full_records_in_order(driver_records):
    result = match_records(driver_records, "Bobby")
    assert result == [
        {"name": "Bobby", "hometown": "Pittsburgh"},
        {"name": "Bobby", "hometown": "Tampa Bay"},
    ]
    assert result[0] is driver_records[0]


def test_match_records_returns_empty_list_when_absent(driver_records):
    assert match_records(driver_records, "Susan") == []


def test_match_records_is_case_sensitive(driver_records):
    assert match_records(driver_records, "bobby") == []


def test_match_records_skips_records_without_the_field():
    records = [{"hometown": "Nowhere"}, {"name": "Bobby"}]
    assert match_records(records, "Bobby") == [{"name": "Bobby"}]


def test_match_records_accepts_models():
    drivers = [Driver(name="Bobby", hometown="Pittsburgh"), Driver(name="Sally", hometown="Cleveland")]
    assert match_records(drivers, "Sally") == [drivers[1]]


def test_match_records_uses_custom_field(driver_records):
    assert match_records(driver_records, "Cleveland", field="hometown") == [driver_records[2]]


def test_record_matcher_reads_field_from_settings(monkeypatch, driver_records):
    monkeypatch.setenv("RECORD_NAME_FIELD", "hometown")
    matcher = RecordMatcher()
    assert matcher.field == "hometown"
    assert matcher.match(driver_records, "New York") == [driver_records[1]]


def test_driver_model_is_frozen():
    driver = Driver(name="Bobby", hometown="Pittsburgh")
    with pytest.raises(ValidationError):
        driver.name = "Sammy"  # type: ignore[misc]


def test_driver_model_config_is_frozen_only():
    assert Driver.model_config.get("frozen") is True
    assert "populate_by_name" not in Driver.model_config
