"""State models: the nested record used to demonstrate copy semantics.

Usage:
    state = AppState(
        cart=[LineItem("bread", 5), LineItem("pizza", 5)],
        user=UserStatus(logged_in=True),
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class InvalidStateError(ValueError):
    """Raised when a model is constructed with data violating its invariants."""


@dataclass(slots=True)
class LineItem:
    """One cart entry.

    Attributes:
        product: Product name, must be a non-empty string.
        quantity: Units in the cart, must be a non-negative integer.
    """

    product: str
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.product, str) or not self.product:
            raise InvalidStateError("LineItem.product must be a non-empty string")
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise InvalidStateError(
                f"LineItem.quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise InvalidStateError(
                f"LineItem.quantity must be non-negative, got {self.quantity}"
            )


@dataclass(slots=True)
class UserStatus:
    logged_in: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.logged_in, bool):
            raise InvalidStateError(
                f"UserStatus.logged_in must be a bool, got {type(self.logged_in).__name__}"
            )


def _expect(value: Any, expected: type, where: str) -> Any:
    if not isinstance(value, expected):
        raise InvalidStateError(
            f"{where} must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value


@dataclass(slots=True)
class AppState:
    """Application state holding a cart and the current user status.

    Both fields are mutable containers owned by the state. Cart order is
    insertion order.

    Attributes:
        cart: Ordered line items.
        user: Login status of the current user.
    """

    cart: list[LineItem] = field(default_factory=list)
    user: UserStatus = field(default_factory=UserStatus)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "cart": [{"product": item.product, "quantity": item.quantity} for item in self.cart],
            "user": {"logged_in": self.user.logged_in},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppState:
        """Create from dictionary, validating every level.

        Missing `cart` or `user` fall back to the defaults. Missing line item
        keys, wrong container types and wrong field types are all rejected.

        Raises:
            InvalidStateError: If the data is malformed or violates an invariant.
        """
        _expect(data, dict, "state")
        user = _expect(data.get("user", {}), dict, "user")
        items = _expect(data.get("cart", []), list, "cart")

        cart = []
        for i, item in enumerate(items):
            _expect(item, dict, f"cart[{i}]")
            missing = {"product", "quantity"} - item.keys()
            if missing:
                raise InvalidStateError(f"cart[{i}] is missing {', '.join(sorted(missing))}")
            cart.append(LineItem(item["product"], item["quantity"]))

        return cls(cart=cart, user=UserStatus(logged_in=user.get("logged_in", False)))
