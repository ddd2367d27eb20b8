import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.expenses.memory_expense_repository import MemoryExpenseRepository
from src.office_desk.office_desk.expenses.service import ExpenseService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
EMP = SessionUser(id=2, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)

CLAIM = {"title": "Taxi", "category": "travel", "amount": 2350, "expense_date": "2024-01-12"}


@pytest.fixture()
def service():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    return ExpenseService(MemoryExpenseRepository(store), users)


def test_draft_defaults(service):
    expense = service.create(actor=EMP, data=CLAIM)
    assert (expense["status"], expense["currency"], expense["amount"]) == ("draft", "USD", 2350)
    assert expense["employee"] == {"id": 2, "name": "Alex"}


def test_amount_must_be_positive_cents(service):
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={**CLAIM, "amount": 0})
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={**CLAIM, "amount": "12.50"})


def test_submit_is_owner_only(service):
    expense = service.create(actor=EMP, data=CLAIM)
    with pytest.raises(AuthorizationError):
        service.submit(actor=HR, expense_id=expense["id"])
    assert service.submit(actor=EMP, expense_id=expense["id"])["status"] == "submitted"


def test_hr_decisions_stamp_fields(service):
    expense = service.create(actor=EMP, data=CLAIM)
    service.submit(actor=EMP, expense_id=expense["id"])

    with pytest.raises(AuthorizationError):
        service.update_status(actor=EMP, expense_id=expense["id"], data={"status": "approved"})
    with pytest.raises(ValidationError):
        service.update_status(actor=HR, expense_id=expense["id"], data={"status": "draft"})

    rejected = service.update_status(actor=HR, expense_id=expense["id"], data={"status": "rejected", "rejection_reason": "No receipt"})
    assert rejected["rejection_reason"] == "No receipt"
    assert rejected["approved_by"] == {"id": 1, "name": "Sarah"}

    approved = service.update_status(actor=HR, expense_id=expense["id"], data={"status": "approved"})
    assert approved["approved_at"] is not None
    assert approved["rejection_reason"] is None

    reimbursed = service.update_status(actor=HR, expense_id=expense["id"], data={"status": "reimbursed"})
    assert reimbursed["reimbursed_at"] is not None
    assert reimbursed["approved_at"] == approved["approved_at"]
