"""Tests for state models."""

import pytest

from statecopy import AppState, InvalidStateError, LineItem, UserStatus


def test_line_item_rejects_empty_product():
    with pytest.raises(InvalidStateError, match="non-empty"):
        LineItem(product="", quantity=1)


def test_line_item_rejects_negative_quantity():
    with pytest.raises(InvalidStateError, match="non-negative"):
        LineItem(product="bread", quantity=-1)


def test_line_item_allows_zero_quantity():
    assert LineItem(product="bread", quantity=0).quantity == 0


def test_invalid_state_error_is_value_error():
    """Callers catching ValueError also catch invariant violations."""
    assert issubclass(InvalidStateError, ValueError)


def test_defaults_are_not_shared_between_instances():
    a = AppState()
    b = AppState()

    assert a.cart == [] and a.user == UserStatus(logged_in=False)
    assert a.cart is not b.cart
    assert a.user is not b.user


def test_to_dict(state):
    assert state.to_dict() == {
        "cart": [
            {"product": "bread", "quantity": 5},
            {"product": "pizza", "quantity": 5},
        ],
        "user": {"logged_in": True},
    }


def test_from_dict_restores_equal_state(state):
    assert AppState.from_dict(state.to_dict()) == state


def test_from_dict_validates_line_items():
    with pytest.raises(InvalidStateError):
        AppState.from_dict({"cart": [{"product": "bread", "quantity": -5}]})


def test_from_dict_missing_fields_use_defaults():
    restored = AppState.from_dict({})

    assert restored.cart == []
    assert restored.user.logged_in is False


def test_from_dict_rejects_non_integer_quantity():
    with pytest.raises(InvalidStateError, match="must be an integer"):
        AppState.from_dict({"cart": [{"product": "bread", "quantity": "5"}]})


def test_from_dict_rejects_non_dict_user():
    with pytest.raises(InvalidStateError, match="user must be a dict"):
        AppState.from_dict({"user": None})


def test_from_dict_rejects_missing_line_item_key():
    with pytest.raises(InvalidStateError, match="cart\\[0\\] is missing quantity"):
        AppState.from_dict({"cart": [{"product": "bread"}]})


def test_from_dict_rejects_non_list_cart():
    with pytest.raises(InvalidStateError, match="cart must be a list"):
        AppState.from_dict({"cart": {"product": "bread", "quantity": 5}})


@pytest.mark.parametrize("quantity", [True, 2.5])
def test_line_item_rejects_non_int_quantity(quantity):
    with pytest.raises(InvalidStateError, match="must be an integer"):
        LineItem(product="bread", quantity=quantity)


def test_line_item_rejects_non_string_product():
    with pytest.raises(InvalidStateError, match="non-empty string"):
        LineItem(product=42, quantity=1)  # type: ignore[arg-type]


def test_user_status_rejects_non_bool():
    with pytest.raises(InvalidStateError, match="must be a bool"):
        UserStatus(logged_in="yes")  # type: ignore[arg-type]
