"""Error types raised by the rental services."""


class RentalError(Exception):
    """Base exception for rejected rental operations. No state is changed."""
    pass


class NotFoundError(RentalError):
    """An ID does not resolve in the relevant registry."""
    pass


class ConflictError(RentalError):
    """The vehicle is unavailable, or its removal is blocked by an active booking."""
    pass


class InvalidRangeError(RentalError):
    """An end or return date falls before the start date."""
    pass


class AlreadyReturnedError(RentalError):
    """A return was attempted on a booking that is already returned."""
    pass


class InvalidInputError(RentalError):
    """A value could not be interpreted (rate, ID or date)."""
    pass
