import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.payroll.memory_payroll_repository import MemoryPayrollRepository
from src.office_desk.office_desk.payroll.service import PayrollService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
EMP = SessionUser(id=2, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)


@pytest.fixture()
def service():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    return PayrollService(MemoryPayrollRepository(store), users)


def _slip(**overrides):
    data = {"employee_id": 2, "pay_period": "2024-01", "basic_salary": 4000, "allowances": 200, "deductions": 300, "bonus": 100}
    data.update(overrides)
    return data


def test_hr_creates_draft_with_server_side_net_pay(service):
    record = service.create(actor=HR, data=_slip(net_pay=1))
    assert record["net_pay"] == 4000
    assert record["status"] == "draft"
    assert record["employee"] == {"id": 2, "name": "Alex"}


def test_non_hr_cannot_create_payroll(service):
    with pytest.raises(AuthorizationError):
        service.create(actor=EMP, data=_slip())


def test_validation(service):
    with pytest.raises(ValidationError):
        service.create(actor=HR, data=_slip(employee_id=99))
    with pytest.raises(ValidationError):
        service.create(actor=HR, data=_slip(deductions=10_000))
    with pytest.raises(ValidationError):
        service.create(actor=HR, data=_slip(pay_period=" "))


def test_paid_sets_pay_date(service):
    record = service.create(actor=HR, data=_slip())
    assert record["pay_date"] is None

    processed = service.update_status(actor=HR, payroll_id=record["id"], status="processed")
    assert processed["pay_date"] is None

    paid = service.update_status(actor=HR, payroll_id=record["id"], status="paid")
    assert paid["status"] == "paid"
    assert paid["pay_date"] is not None

    with pytest.raises(NotFoundError):
        service.update_status(actor=HR, payroll_id=77, status="paid")


def test_listing_and_summary(service):
    service.create(actor=HR, data=_slip())
    service.create(actor=HR, data=_slip(employee_id=1, pay_period="2024-02"))

    assert len(service.list_for(HR)) == 2
    assert [r["employee_id"] for r in service.list_for(EMP)] == [2]

    summary = service.period_summary(actor=HR)
    assert [s["pay_period"] for s in summary] == ["2024-02", "2024-01"]
    assert summary[1]["total_net_pay"] == 4000
    with pytest.raises(AuthorizationError):
        service.period_summary(actor=EMP)
