"""Render and raise size violations.

Nothing in this module runs unless a check has already failed. Guards
decide pass/fail with plain integer comparisons and only call in here to
build the message, log it, and raise.
"""

import logging
from enum import Enum
from typing import Any, NoReturn, Optional

from seqguard.guards.failure import SizeViolation
from seqguard.schemas.internal import InternalConfig

__all__ = ['SizeRelation', 'describe_type', 'ViolationReporter']

logger = logging.getLogger(__name__)


class SizeRelation(str, Enum):
    """Relational operator of a size constraint, as rendered in messages."""
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_OR_EQUAL = ">="
    LESS = "<"
    LESS_OR_EQUAL = "<="


def describe_type(seq: Any, qualified: bool = False, show_dtype: bool = True) -> str:
    """Short display name for the type of ``seq``.

    >>> describe_type([1, 2])
    'list'
    >>> describe_type(np.arange(3))
    'ndarray[int64]'
    >>> describe_type(np.arange(3), qualified=True, show_dtype=False)
    'numpy.ndarray'
    """
    cls = type(seq)
    type_name = cls.__qualname__
    if qualified and cls.__module__ != "builtins":
        type_name = f"{cls.__module__}.{type_name}"
    # Only a dtype declared on the class; __getattr__ may map it to a column
    if show_dtype and hasattr(cls, "dtype"):
        dtype = seq.dtype
        if dtype is not None:
            return f"{type_name}[{dtype}]"
    return type_name


class ViolationReporter:
    """Build violation messages and raise ``SizeViolation``.

    Parameters
    ----------
    config : InternalConfig
        Controls type rendering (``reporting``) and whether/how violations
        are logged before being raised (``logging``).
    """

    def __init__(self, config: InternalConfig):
        self.qualified = config.reporting.type_names == "qualified"
        self.show_dtype = config.reporting.show_dtype
        self.log_violations = config.logging.log_violations
        self.log_level = getattr(logging, config.logging.level)

    def describe(self, seq: Any) -> str:
        return describe_type(seq, self.qualified, self.show_dtype)

    def _raise(self, violation: SizeViolation) -> NoReturn:
        if self.log_violations:
            logger.log(self.log_level, "Size check failed: %s", violation.message)
        raise violation

    def raise_for_is_empty(self, seq: Any, name: str, actual_size: Optional[int]) -> NoReturn:
        """Raise for a non-empty sequence.

        ``actual_size`` is None when the sequence could only be probed for a
        first element; the message then omits the size.
        """
        message = f'Parameter "{name}" ({self.describe(seq)}) must be empty'
        if actual_size is not None:
            message = f"{message}, had a size of {actual_size}"
        self._raise(SizeViolation(message, name, "== 0", actual_size))

    def raise_for_is_not_empty(self, seq: Any, name: str) -> NoReturn:
        message = f'Parameter "{name}" ({self.describe(seq)}) must not be empty'
        self._raise(SizeViolation(message, name, "!= 0", 0))

    def raise_for_size(
        self,
        seq: Any,
        name: str,
        relation: SizeRelation,
        size: int,
        actual_size: int,
    ) -> NoReturn:
        """Raise for a sequence that failed a threshold comparison."""
        condition = f"{relation.value} {size}"
        message = (
            f'Parameter "{name}" ({self.describe(seq)}) must be sized {condition}, '
            f"had a size of {actual_size}"
        )
        self._raise(SizeViolation(message, name, condition, actual_size))

    def raise_for_sizes(
        self,
        source: Any,
        destination: Any,
        name: str,
        relation: SizeRelation,
        source_size: int,
        destination_size: int,
    ) -> NoReturn:
        """Raise for a source sequence that failed a comparison with a destination."""
        condition = f"{relation.value} {destination_size}"
        message = (
            f'The source "{name}" ({self.describe(source)}) must be sized {condition} '
            f"(destination: {self.describe(destination)}), had a size of {source_size}"
        )
        self._raise(
            SizeViolation(message, name, condition, source_size, destination_size)
        )
