"""Exceptions raised by the Monty Hall simulator."""


class MontyHallError(Exception):
    """Base exception for all simulator errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {context_str})"


class InvalidDoorError(MontyHallError):
    """Door number outside 1-3, or no unique door to switch to."""


class InvalidArgumentError(MontyHallError):
    """Invalid argument passed to the trial runner."""


class InvalidBoardError(MontyHallError):
    """Game board does not hold exactly one car."""
