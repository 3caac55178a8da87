"""Exceptions raised by the map tools."""


class InvalidCoordinatesError(ValueError):
    """Coordinate text that cannot be used to navigate the map."""

    def __init__(self, message: str) -> None:
        """
        Initialise the error.

        :param message: Short, user-facing explanation of what to correct
        """
        super().__init__(message)
        self.message = message
