import pytest
from werkzeug.security import generate_password_hash

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser
from src.office_desk.office_desk.users.service import AuthService, UserService, public_user


@pytest.fixture()
def users():
    repo = MemoryUserRepository(MemoryStore())
    repo.create_user(email="hr@company.com", password_hash=generate_password_hash("password"), name="HR", role=Role.HR)
    repo.create_user(email="emp@company.com", password_hash="not-a-hash", name="Emp", role=Role.EMPLOYEE)
    return repo


def test_authenticate_returns_session_user(users):
    s_user = AuthService(users).authenticate("HR@company.com", "password")
    assert s_user == SessionUser(id=1, email="hr@company.com", name="HR", role=Role.HR)


@pytest.mark.parametrize("email,password", [("hr@company.com", "wrong"), ("ghost@company.com", "password"), ("emp@company.com", "x")])
def test_authenticate_rejects_bad_credentials(users, email, password):
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        AuthService(users).authenticate(email, password)


def test_authenticate_requires_both_fields(users):
    with pytest.raises(ValidationError):
        AuthService(users).authenticate("hr@company.com", "")


def test_session_round_trip_ignores_unknown_roles():
    s_user = SessionUser(id=3, email="a@b.c", name="A", role=Role.IT)
    assert SessionUser.from_session(s_user.to_session()) == s_user
    assert SessionUser.from_session({}) is None
    assert SessionUser.from_session({"user_id": 1, "role": "admin"}) is None


def test_only_hr_creates_accounts(users):
    service = UserService(users)
    employee = SessionUser(id=2, email="emp@company.com", name="Emp", role=Role.EMPLOYEE)
    hr = SessionUser(id=1, email="hr@company.com", name="HR", role=Role.HR)
    data = {"email": "new@company.com", "name": "New", "password": "secret1", "role": "it"}

    with pytest.raises(AuthorizationError):
        service.create_account(actor=employee, data=data)

    user = service.create_account(actor=hr, data=data)
    assert user.role == Role.IT
    assert "password_hash" not in public_user(user)
    assert AuthService(users).authenticate("new@company.com", "secret1").id == user.id

    with pytest.raises(ValidationError, match="already exists"):
        service.create_account(actor=hr, data=data)


def test_profile_update_touches_only_profile_fields(users):
    emp = SessionUser(id=2, email="emp@company.com", name="Emp", role=Role.EMPLOYEE)
    user = UserService(users).update_profile(actor=emp, data={"phone": "555", "role": "hr"})
    assert user.phone == "555"
    assert user.role == Role.EMPLOYEE

    with pytest.raises(ValidationError):
        UserService(users).update_profile(actor=emp, data={"salary": 1})
