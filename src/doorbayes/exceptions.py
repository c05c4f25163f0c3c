"""Errors raised by the door belief filter."""


class InvalidInputError(ValueError):
    """An action or observation outside its closed set of values."""

    def __init__(self, axis: str, value: object, allowed: list) -> None:
        self.axis = axis
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid {axis}: {value!r} (valid: {allowed})")


class DegenerateBeliefError(ArithmeticError):
    """The corrected belief cannot be normalized (zero total mass)."""
