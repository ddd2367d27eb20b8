import pytest

from src.office_desk.office_desk.common.validators import optional_bool, optional_int, require_int
from src.office_desk.office_desk.core.exceptions import ValidationError


@pytest.mark.parametrize("value,expected", [(42, 42), ("42", 42), (" 7 ", 7), ("-3", -3), (0, 0)])
def test_require_int_accepts_whole_numbers(value, expected):
    assert require_int(value, "n") == expected


@pytest.mark.parametrize("value", [12.75, 4000.99, 100.0, True, "1.5", "12,5", "", "abc", None, [1]])
def test_require_int_rejects_everything_else(value):
    with pytest.raises(ValidationError) as exc:
        require_int(value, "amount")
    assert "amount must be an integer" in str(exc.value)


def test_bounds_apply_after_parsing():
    assert require_int("100", "progress", minimum=0, maximum=100) == 100
    with pytest.raises(ValidationError):
        require_int(100.9, "progress", minimum=0, maximum=100)
    with pytest.raises(ValidationError):
        require_int("101", "progress", minimum=0, maximum=100)


def test_optional_int_skips_blank_but_not_floats():
    assert optional_int("", "bonus") is None
    assert optional_int(None, "bonus") is None
    with pytest.raises(ValidationError):
        optional_int(0.5, "bonus")


def test_optional_bool_parses_strings():
    assert optional_bool("false", "remember_me", default=True) is False
    assert optional_bool(None, "remember_me", default=True) is True
    with pytest.raises(ValidationError):
        optional_bool("maybe", "remember_me")
