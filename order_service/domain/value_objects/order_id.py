"""Order identifier value object."""

import uuid
from dataclasses import dataclass
from typing import Any

from order_service.domain.exceptions import InvalidOrderIdError

MAX_ORDER_ID_LENGTH = 64


@dataclass(frozen=True)
class OrderId:
    """
    Order identifier value object.

    Immutable, opaque identifier. Surrounding whitespace is trimmed and
    comparison is case-sensitive. At most MAX_ORDER_ID_LENGTH characters
    after trimming.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and trim the identifier."""
        if not isinstance(self.value, str):
            raise InvalidOrderIdError(self.value)

        normalized = self.value.strip()
        if not normalized or len(normalized) > MAX_ORDER_ID_LENGTH:
            raise InvalidOrderIdError(self.value)

        object.__setattr__(self, "value", normalized)

    @classmethod
    def create(cls, raw: Any) -> "OrderId":
        """
        Create an OrderId from a raw value.

        Args:
            raw: Raw identifier (usually a string)

        Returns:
            Validated OrderId

        Raises:
            InvalidOrderIdError: If raw is None, not a string, blank, or too long
        """
        if isinstance(raw, OrderId):
            return raw
        return cls(raw)

    @classmethod
    def generate(cls) -> "OrderId":
        """Create a new random identifier (128-bit UUID4)."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"OrderId(value={self.value!r})"
