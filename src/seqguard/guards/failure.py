"""Centralized failure types for guard violations.

Guards fail fast, loud, and once. Every size check raises the same
exception type, allowing callers to handle bad arguments uniformly.
"""

from typing import Optional


class GuardViolation(ValueError):
    """Raised when an argument does not satisfy a precondition.

    This indicates a caller passed an argument the operation cannot accept.
    It is the general invalid-argument category; concrete guards raise a
    subclass describing which property failed.

    Key distinction:
    - TypeError: The argument is not a sequence at all
    - GuardViolation: The argument is a sequence of the wrong shape
    """

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.message = message
        self.name = name

    def __reduce__(self):
        return (type(self), (self.message, self.name))


class SizeViolation(GuardViolation):
    """Raised when a sequence does not satisfy a size constraint.

    Attributes
    ----------
    name : str
        Caller-supplied label of the argument that failed.
    condition : str
        The violated condition in relational form, e.g. ``"== 4"`` or
        ``"empty"``.
    actual_size : int or None
        Observed size of the sequence, or None when it was not computed
        (a single-pass iterable that was only probed for one element).
    destination_size : int or None
        Size of the destination sequence for two-sequence checks.
    """

    def __init__(
        self,
        message: str,
        name: str,
        condition: str,
        actual_size: Optional[int] = None,
        destination_size: Optional[int] = None,
    ):
        super().__init__(message, name)
        self.condition = condition
        self.actual_size = actual_size
        self.destination_size = destination_size

    def __reduce__(self):
        return (
            type(self),
            (self.message, self.name, self.condition, self.actual_size, self.destination_size),
        )
