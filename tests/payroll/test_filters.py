from datetime import date, datetime

from overtime_system.common.datetime_utils import month_range
from overtime_system.payroll.filters import (
    RecordFilter,
    filter_records,
    filter_summaries_by_name,
    search_by_employee_name,
)
from overtime_system.payroll.model import ReceiptSummary


def test_start_date_is_inclusive(scenario_records):
    out = filter_records(scenario_records, RecordFilter(start_date="2024-01-06"))
    assert [r.record_id for r in out] == ["r2"]


def test_end_date_is_inclusive(scenario_records):
    out = filter_records(scenario_records, RecordFilter(end_date=date(2024, 1, 5)))
    assert [r.record_id for r in out] == ["r1"]


def test_no_bounds_keeps_everything(scenario_records):
    assert filter_records(scenario_records, RecordFilter()) == scenario_records


def test_timestamp_bounds_compare_by_calendar_day(scenario_records):
    criteria = RecordFilter(
        start_date="2024-01-06T23:30:00-03:00",
        end_date=datetime(2024, 1, 6, 0, 0, 1),
    )
    assert [r.record_id for r in filter_records(scenario_records, criteria)] == ["r2"]


def test_employee_selector(scenario_records, record):
    records = scenario_records + [record("r3", "b", "2024-01-05", "18:00", "19:00")]

    assert [r.record_id for r in filter_records(records, RecordFilter(employee_id="b"))] == ["r3"]
    assert len(filter_records(records, RecordFilter(employee_id="all"))) == 3


def test_filtering_is_idempotent(scenario_records, record):
    records = scenario_records + [record("r3", "b", "2024-01-20", "18:00", "19:00")]
    criteria = RecordFilter(employee_id="a", start_date="2024-01-01", end_date="2024-01-05")

    once = filter_records(records, criteria)
    assert filter_records(once, criteria) == once


def test_filter_does_not_mutate_input(scenario_records):
    before = list(scenario_records)
    filter_records(scenario_records, RecordFilter(start_date="2024-02-01"))
    assert scenario_records == before


def test_search_by_name_drops_unknown_employees(employee_a, scenario_records, record):
    records = scenario_records + [record("r3", "ghost", "2024-01-05", "18:00", "19:00")]

    out = search_by_employee_name(records, {"a": employee_a}, "souza")
    assert [r.record_id for r in out] == ["r1", "r2"]
    assert search_by_employee_name(records, {"a": employee_a}, "lima") == []


def test_filter_summaries_by_name():
    s = ReceiptSummary("a", "A01", "ANA SOUZA", 1.0, 10.0, "2024-01-01")
    assert filter_summaries_by_name([s], "ana") == [s]
    assert filter_summaries_by_name([s], "") == [s]
    assert filter_summaries_by_name([s], "bruno") == []


def test_month_range_handles_leap_february():
    assert month_range(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))
