import pytest

from overtime_system.core.enums import ServiceType
from overtime_system.core.exceptions import NotFoundError, ValidationError
from overtime_system.employees.model import Employee
from overtime_system.overtime.model import OvertimeDraft
from overtime_system.overtime.service import OvertimeService


@pytest.fixture
def setup(employees_repo, overtime_repo, employee_a):
    inactive = Employee("z", "Z99", "ZECA", 1000, is_active=False)
    records = overtime_repo()
    svc = OvertimeService(records, employees_repo([employee_a, inactive]))
    return svc, records


def _entry(**overrides):
    data = dict(
        employee_id="a",
        date="2024-01-05",
        start_time="18:00",
        end_time="20:00",
        service_type="60%",
        observation="inventário",
    )
    data.update(overrides)
    return data


def test_add_normalizes_fields(setup):
    svc, records = setup

    record_id = svc.add(**_entry())

    rec = records.get_by_id(record_id)
    assert rec.service_type == ServiceType.SIXTY
    assert rec.observation == "INVENTÁRIO"
    assert rec.date == "2024-01-05"


@pytest.mark.parametrize(
    "overrides",
    [
        {"employee_id": ""},
        {"employee_id": "ghost"},
        {"employee_id": "z"},
        {"date": ""},
        {"date": "05/01/2024"},
        {"end_time": "18:00"},
        {"start_time": "21:00"},
        {"service_type": "50%"},
    ],
)
def test_add_rejects_invalid_entries(setup, overrides):
    svc, records = setup
    with pytest.raises(ValidationError):
        svc.add(**_entry(**overrides))
    assert records.list_all() == []


def test_update_allows_inactive_employee_history(setup):
    svc, records = setup
    record_id = svc.add(**_entry())

    svc.update(record_id, **_entry(employee_id="z", service_type="100%"))

    rec = records.get_by_id(record_id)
    assert rec.employee_id == "z"
    assert rec.service_type == ServiceType.HUNDRED


def test_update_and_delete_unknown_record(setup):
    svc, _ = setup
    with pytest.raises(NotFoundError):
        svc.update("nope", **_entry())
    with pytest.raises(NotFoundError):
        svc.delete("nope")


def test_delete(setup):
    svc, records = setup
    record_id = svc.add(**_entry())

    svc.delete(record_id)

    assert records.get_by_id(record_id) is None


def test_import_batch_writes_every_row(setup):
    svc, records = setup
    drafts = [
        OvertimeDraft("a", "2024-01-05", "18:00", "20:00", ServiceType.SIXTY),
        OvertimeDraft("a", "2024-01-06", "19:00", "21:00", ServiceType.HUNDRED),
    ]

    ids = svc.import_batch(drafts)

    assert len(ids) == 2
    assert [r.date for r in records.list_all()] == ["2024-01-06", "2024-01-05"]
