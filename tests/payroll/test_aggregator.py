import random

import pytest

from overtime_system.core.enums import ServiceType
from overtime_system.payroll.aggregator import (
    aggregate_by_day,
    aggregate_by_employee,
    aggregate_by_service_type,
    period_totals,
)


def test_scenario_totals_per_employee(employee_a, scenario_records):
    summaries = aggregate_by_employee(scenario_records, [employee_a])

    s = summaries["a"]
    assert s.employee_code == "A01"
    assert s.employee_name == "ANA SOUZA"
    assert s.total_hours == pytest.approx(4)
    assert s.total_value == pytest.approx(72)
    assert s.last_date == "2024-01-06"


def test_unknown_employee_is_skipped(employee_a, scenario_records, record):
    records = scenario_records + [record("r9", "ghost", "2024-01-07", "08:00", "10:00")]

    summaries = aggregate_by_employee(records, [employee_a])

    assert list(summaries) == ["a"]
    assert summaries["a"].last_date == "2024-01-06"


def test_aggregation_ignores_input_order(employee_a, employee_b, record):
    records = [
        record(f"r{i}", "a" if i % 2 else "b", f"2024-02-{i % 28 + 1:02d}", "17:00", f"{18 + i % 4}:{i % 6}0",
               ServiceType.SIXTY if i % 3 else ServiceType.HUNDRED)
        for i in range(40)
    ]
    shuffled = list(records)
    random.Random(7).shuffle(shuffled)

    first = aggregate_by_employee(records, [employee_a, employee_b])
    second = aggregate_by_employee(shuffled, [employee_a, employee_b])

    for employee_id in first:
        assert second[employee_id].total_hours == pytest.approx(first[employee_id].total_hours, abs=1e-9)
        assert second[employee_id].total_value == pytest.approx(first[employee_id].total_value, abs=1e-9)
        assert second[employee_id].last_date == first[employee_id].last_date


def test_zero_hour_record_still_counts_for_last_date(employee_a, record):
    records = [
        record("r1", "a", "2024-03-01", "08:00", "09:00"),
        record("r2", "a", "2024-03-09", "10:00", "09:00"),
    ]

    s = aggregate_by_employee(records, [employee_a])["a"]

    assert s.total_hours == 1
    assert s.last_date == "2024-03-09"


def test_by_day_is_sorted_ascending(scenario_records, record):
    records = list(reversed(scenario_records)) + [record("r3", "ghost", "2024-01-05", "07:00", "07:30")]

    daily = aggregate_by_day(records)

    assert [(d.date, d.hours) for d in daily] == [("2024-01-05", 2.5), ("2024-01-06", 2)]


def test_by_service_type_drops_empty_buckets(record):
    records = [
        record("r1", "a", "2024-01-05", "18:00", "19:00", ServiceType.HUNDRED),
        record("r2", "a", "2024-01-06", "18:00", "19:30", ServiceType.HUNDRED),
    ]

    buckets = aggregate_by_service_type(records)

    assert [(b.service_type, b.hours) for b in buckets] == [(ServiceType.HUNDRED, 2.5)]


def test_period_totals_only_count_known_employees(employee_a, scenario_records, record):
    records = scenario_records + [record("r9", "ghost", "2024-01-07", "08:00", "10:00")]

    hours, value = period_totals(records, [employee_a])

    assert hours == pytest.approx(4)
    assert value == pytest.approx(72)


def test_summary_started_by_zero_hour_record_keeps_accumulating(employee_a, record):
    records = [
        record("r1", "a", "2024-03-01", "10:00", "10:00"),
        record("r2", "a", "2024-03-02", "18:00", "20:00"),
        record("r3", "a", "2024-03-03", "18:00", "19:00"),
    ]

    s = aggregate_by_employee(records, [employee_a])["a"]

    assert s.total_hours == pytest.approx(3)
    assert s.last_date == "2024-03-03"
