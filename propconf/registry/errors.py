"""Registry construction errors."""

from __future__ import annotations


class ConstructionError(Exception):
    """
    Raised for programmer errors while declaring or registering properties.

    Examples: registering the same property instance twice, registering a
    property under a group that does not declare it, or adding to a frozen
    registry. Name collisions between different properties are not
    construction errors; they are recorded as NamingConflicts.
    """

    pass
