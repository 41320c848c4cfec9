"""Size guards: fail-fast preconditions on sequence size.

Callers invoke a check at the start of an operation to validate the size
of an incoming sequence before using it. Checks fail immediately and loudly
with a single exception type.

Key principle:
- Count resolution picks the cheapest way to count (shape, len, traversal)
- Size checks decide pass/fail with plain comparisons
- Reporting builds the message only after a check has failed
"""

from seqguard.guards.failure import GuardViolation, SizeViolation
from seqguard.guards.counting import SequenceKind, classify, count
from seqguard.guards.reporting import SizeRelation, describe_type
from seqguard.guards.size import (
    SizeGuard,
    is_empty,
    is_not_empty,
    has_size_equal_to,
    has_size_not_equal_to,
    has_size_at_least,
    has_size_at_least_or_equal_to,
    has_size_less_than,
    has_size_less_than_or_equal_to,
)

__all__ = [
    "GuardViolation",
    "SizeViolation",
    "SequenceKind",
    "classify",
    "count",
    "SizeRelation",
    "describe_type",
    "SizeGuard",
    "is_empty",
    "is_not_empty",
    "has_size_equal_to",
    "has_size_not_equal_to",
    "has_size_at_least",
    "has_size_at_least_or_equal_to",
    "has_size_less_than",
    "has_size_less_than_or_equal_to",
]
