import pytest

from src.office_desk.office_desk.chat.service import CREATE_HELP, RESPONSES, THANKS, ChatService
from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import ValidationError
from src.office_desk.office_desk.users.model import SessionUser


def _user(role):
    return SessionUser(id=1, email="a@company.com", name="A", role=role)


def test_keyword_answers_depend_on_role():
    chat = ChatService()
    assert chat.reply(actor=_user(Role.IT), message="I forgot my PASSWORD") == RESPONSES[Role.IT]["password"]
    assert chat.reply(actor=_user(Role.HR), message="payroll question") == RESPONSES[Role.HR]["payroll"]
    # "password" is not an employee keyword
    assert chat.reply(actor=_user(Role.EMPLOYEE), message="password") == RESPONSES[Role.EMPLOYEE]["default"]


def test_first_matching_keyword_wins():
    reply = ChatService().reply(actor=_user(Role.EMPLOYEE), message="task for the project")
    assert reply == RESPONSES[Role.EMPLOYEE]["task"]


def test_overrides():
    chat = ChatService()
    assert chat.reply(actor=_user(Role.IT), message="how do I create a ticket") == CREATE_HELP
    assert chat.reply(actor=_user(Role.HR), message="thanks for the leave info") == THANKS


def test_empty_message_is_rejected():
    with pytest.raises(ValidationError):
        ChatService().reply(actor=_user(Role.HR), message="  ")
