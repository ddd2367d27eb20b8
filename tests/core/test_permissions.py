import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError
from src.office_desk.office_desk.core.permissions import PERMISSIONS, Action, is_allowed, require


def test_every_action_has_a_rule():
    assert set(PERMISSIONS) == set(Action)


def test_ticket_status_is_it_only():
    assert is_allowed(Role.IT, Action.TICKETS_UPDATE_STATUS)
    assert not is_allowed(Role.HR, Action.TICKETS_UPDATE_STATUS)
    assert not is_allowed(Role.EMPLOYEE, Action.TICKETS_UPDATE_STATUS)


def test_projects_are_managed_by_hr_and_it():
    assert is_allowed(Role.HR, Action.PROJECTS_MANAGE)
    assert is_allowed(Role.IT, Action.PROJECTS_MANAGE)
    assert not is_allowed(Role.EMPLOYEE, Action.PROJECTS_MANAGE)


@pytest.mark.parametrize("action", [Action.LEAVES_DECIDE, Action.PAYROLL_MANAGE, Action.EXPENSES_DECIDE, Action.USERS_MANAGE])
def test_hr_only_actions(action):
    assert is_allowed(Role.HR, action)
    assert not is_allowed(Role.IT, action)
    assert not is_allowed(Role.EMPLOYEE, action)


def test_require_raises_with_message():
    with pytest.raises(AuthorizationError, match="nope"):
        require(Role.EMPLOYEE, Action.PAYROLL_MANAGE, "nope")
    require(Role.HR, Action.PAYROLL_MANAGE)
