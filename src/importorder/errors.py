"""
Exceptions raised while parsing import order configuration.
"""

# relative
from .groups import DEFAULT_ORDER_STRING


# ---------------------------------------------------------------------------- #

class OrderError(ValueError):
    """Base class for invalid import order configuration."""


class OrderConfigError(OrderError):
    """The configuration does not name every import group exactly once."""

    def __init__(self, message=None):
        super().__init__(
            message or
            'use these parameters to sort all groups of your imports: '
            f'"{DEFAULT_ORDER_STRING}"'
        )


class UnknownGroupError(OrderError):
    """A configuration token is not one of the recognized import groups."""

    def __init__(self, token):
        self.token = token
        super().__init__(f'unknown order group type: "{token}"')
