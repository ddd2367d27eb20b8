from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.permissions import Action
from src.office_desk.office_desk.users.model import SessionUser
from src.office_desk.office_desk.web.sections import SECTIONS, RowAction, lookup, nav_for

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
IT = SessionUser(id=2, email="it@company.com", name="Mike", role=Role.IT)
EMP = SessionUser(id=3, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)

DELETE_DOC = RowAction(
    "Delete", "DELETE", "/api/documents/{id}", permission=Action.DOCUMENTS_MANAGE, owner_key="uploaded_by.id"
)


def test_action_visible_to_permission_or_owner():
    row = {"id": 4, "uploaded_by": {"id": 3, "name": "Alex"}}
    assert DELETE_DOC.applies(row, HR)
    assert DELETE_DOC.applies(row, EMP)
    assert not DELETE_DOC.applies(row, IT)
    assert not DELETE_DOC.applies({"id": 4, "uploaded_by": None}, EMP)


def test_action_respects_row_status():
    submit = RowAction("Submit", "PATCH", "/api/expenses/{id}/submit", owner_key="employee.id", statuses=("draft",))
    assert submit.applies({"id": 1, "status": "draft", "employee": {"id": 3}}, EMP)
    assert not submit.applies({"id": 1, "status": "submitted", "employee": {"id": 3}}, EMP)


def test_url_and_body_carry_row_id():
    enroll = RowAction("Enroll", "POST", "/api/training-enrollments", id_field="training_id")
    assert enroll.applies({"id": 9}, EMP)
    assert enroll.url_for({"id": 9}) == "/api/training-enrollments"
    assert enroll.body_for({"id": 9}) == {"training_id": 9}
    assert DELETE_DOC.url_for({"id": 9}) == "/api/documents/9"
    assert DELETE_DOC.body_for({"id": 9}) == {}


def test_leave_section_actions_by_role():
    leaves = next(s for s in SECTIONS if s.key == "leaves")
    pending = {"id": 1, "status": "pending", "employee": {"id": 3}}
    assert [a.label for a in leaves.actions_for(pending, HR)] == ["Approve", "Reject"]
    assert leaves.actions_for(pending, EMP) == []
    assert leaves.actions_for({**pending, "status": "approved"}, HR) == []


def test_nav_and_lookup():
    assert "employees" not in [s.key for s in nav_for(Role.EMPLOYEE)]
    assert "employees" in [s.key for s in nav_for(Role.HR)]
    assert nav_for(None) == []
    assert lookup({"a": {"b": 1}}, "a.b") == 1
    assert lookup({"a": None}, "a.b") is None
