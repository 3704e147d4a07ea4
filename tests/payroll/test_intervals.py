import pytest

from overtime_system.payroll.intervals import ClockTime, hours_worked


def test_hours_worked_half_hours():
    assert hours_worked("18:00", "20:30") == 2.5


def test_hours_worked_accepts_seconds():
    assert hours_worked("08:00:00", "08:45:00") == pytest.approx(0.75)
    assert hours_worked("08:00", "08:00:36") == pytest.approx(0.01)


@pytest.mark.parametrize(
    "start,end",
    [
        ("20:00", "20:00"),
        ("21:00", "20:00"),
        ("22:00", "02:00"),  # overnight spans are not supported
        ("", "20:00"),
        ("18:00", None),
        ("18h00", "20:00"),
        ("25:00", "26:00"),
    ],
)
def test_hours_worked_invalid_interval_is_zero(start, end):
    assert hours_worked(start, end) == 0


def test_clock_time_normalizes_missing_seconds():
    assert ClockTime.parse("07:05") == ClockTime.parse("07:05:00")
    assert str(ClockTime.parse("7:05")) == "07:05:00"
