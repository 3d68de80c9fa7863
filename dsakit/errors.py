"""Exceptions raised by the bounded containers."""


class StructureError(Exception):
    """Base class for container errors."""


class CapacityError(StructureError, OverflowError):
    """Raised when adding to a container that is already full."""


class EmptyError(StructureError, IndexError):
    """Raised when removing from or inspecting an empty container."""