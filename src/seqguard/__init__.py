"""`seqguard` - fail-fast size preconditions for sequences.

Subpackages:
- guards: Count resolution, size checks, violation reporting
- schemas: Pydantic configuration

Example:

    from seqguard import has_size_equal_to, is_not_empty

    def mean_of(weights, values):
        is_not_empty(values, "values")
        has_size_equal_to(weights, values, "weights")
        ...
"""

from seqguard.guards import (
    GuardViolation,
    SizeViolation,
    SequenceKind,
    SizeRelation,
    SizeGuard,
    classify,
    count,
    describe_type,
    is_empty,
    is_not_empty,
    has_size_equal_to,
    has_size_not_equal_to,
    has_size_at_least,
    has_size_at_least_or_equal_to,
    has_size_less_than,
    has_size_less_than_or_equal_to,
)
from seqguard.schemas import InternalConfig, ParamConfig, UserConfig, resolve_config

__version__ = "0.1.0"

__all__ = [
    "GuardViolation",
    "SizeViolation",
    "SequenceKind",
    "SizeRelation",
    "SizeGuard",
    "classify",
    "count",
    "describe_type",
    "is_empty",
    "is_not_empty",
    "has_size_equal_to",
    "has_size_not_equal_to",
    "has_size_at_least",
    "has_size_at_least_or_equal_to",
    "has_size_less_than",
    "has_size_less_than_or_equal_to",
    "InternalConfig",
    "ParamConfig",
    "UserConfig",
    "resolve_config",
]
