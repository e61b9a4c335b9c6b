"""Enumerations shared by the design rule engine and the persistence layer."""

from enum import StrEnum


class RuleKind(StrEnum):
    """Identifiers of the design rules.

    The string value is the stable identifier reported to callers when the
    rule is violated.
    """

    # Collection rules
    NOT_POLYGON = "NotPolygon"
    NOT_CLOSED = "NotClosed"
    OVERLAPPED = "Overlapped"

    # Split rules
    OUT_OF_BOUND = "OutOfBound"


class ObjectKind(StrEnum):
    """Kinds of geometry documents stored per project."""

    BUILDING_LIMITS = "building_limits"
    HEIGHT_PLATEAUS = "height_plateaus"
