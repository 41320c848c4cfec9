"""Size checks for sequences, arrays and iterables.

Each check either returns None or raises ``SizeViolation`` for the first
unmet condition. Checks never mutate or keep a reference to the sequence,
and a single-pass iterable is traversed at most once per call.

Module-level functions are bound to a guard built from the default
configuration. Create a ``SizeGuard`` to use a different one:

>>> from seqguard import SizeGuard, resolve_config, ParamConfig
>>> guard = SizeGuard(resolve_config(ParamConfig(), {"log_violations": False}))
>>> guard.has_size_equal_to([1, 2, 3], 3, "values")
"""

import operator
from numbers import Integral, Number
from typing import Any, Iterable, Optional, Union

from seqguard.guards.counting import SequenceKind, classify, count, has_elements, known_size
from seqguard.guards.reporting import SizeRelation, ViolationReporter
from seqguard.schemas import InternalConfig, ParamConfig, resolve_config

__all__ = [
    'SizeGuard',
    'is_empty',
    'is_not_empty',
    'has_size_equal_to',
    'has_size_not_equal_to',
    'has_size_at_least',
    'has_size_at_least_or_equal_to',
    'has_size_less_than',
    'has_size_less_than_or_equal_to',
]

_CROSS_CHECKS = {
    SizeRelation.EQUAL: operator.eq,
    SizeRelation.LESS_OR_EQUAL: operator.le,
}


def _is_threshold(size: Any) -> bool:
    # numpy integer scalars register as Integral; bool is not a size
    if isinstance(size, bool) or (isinstance(size, Number) and not isinstance(size, Integral)):
        raise TypeError(
            f"size must be an integer or a sequence, got {type(size).__name__}"
        )
    return isinstance(size, Integral)


def _require_threshold(size: Any) -> None:
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")


class SizeGuard:
    """Size preconditions bound to one configuration.

    Parameters
    ----------
    config : InternalConfig, optional
        Resolved configuration. Defaults to ``resolve_config(ParamConfig())``.

    Notes
    -----
    Guards hold no mutable state and can be shared between threads.
    ``has_size_equal_to`` and ``has_size_less_than_or_equal_to`` compare
    against a second sequence when ``size`` is not an integer.

    Examples
    --------
    >>> guard = SizeGuard()
    >>> guard.is_not_empty(np.zeros(3), "weights")
    >>> guard.has_size_at_least([1, 2], 2, "pair")
    Traceback (most recent call last):
        ...
    seqguard.guards.failure.SizeViolation: Parameter "pair" (list) must be sized > 2, had a size of 2
    """

    def __init__(self, config: Optional[InternalConfig] = None):
        if config is None:
            config = resolve_config(ParamConfig())
        self.config = config
        self._report = ViolationReporter(config)

    def is_empty(self, seq: Iterable, name: str) -> None:
        """Require ``seq`` to have no elements.

        Single-pass iterables are probed for one element instead of counted,
        and the violation then carries no size.
        """
        kind = classify(seq)
        if kind is SequenceKind.SINGLE_PASS:
            if has_elements(seq):
                self._report.raise_for_is_empty(seq, name, None)
            return
        actual = known_size(seq, kind)
        if actual != 0:
            self._report.raise_for_is_empty(seq, name, actual)

    def is_not_empty(self, seq: Iterable, name: str) -> None:
        """Require ``seq`` to have at least one element."""
        kind = classify(seq)
        if kind is SequenceKind.SINGLE_PASS:
            if not has_elements(seq):
                self._report.raise_for_is_not_empty(seq, name)
            return
        if known_size(seq, kind) == 0:
            self._report.raise_for_is_not_empty(seq, name)

    def has_size_equal_to(self, seq: Iterable, size: Union[int, Iterable], name: str) -> None:
        """Require ``len(seq) == size``, or equal sizes if ``size`` is a sequence."""
        if not _is_threshold(size):
            self._compare_sizes(seq, size, name, SizeRelation.EQUAL)
            return
        actual = count(seq)
        if actual != size:
            self._report.raise_for_size(seq, name, SizeRelation.EQUAL, size, actual)

    def has_size_not_equal_to(self, seq: Iterable, size: int, name: str) -> None:
        _require_threshold(size)
        actual = count(seq)
        if actual == size:
            self._report.raise_for_size(seq, name, SizeRelation.NOT_EQUAL, size, actual)

    def has_size_at_least(self, seq: Iterable, size: int, name: str) -> None:
        """Require ``len(seq) > size``. The bound is exclusive."""
        _require_threshold(size)
        actual = count(seq)
        if actual <= size:
            self._report.raise_for_size(seq, name, SizeRelation.GREATER, size, actual)

    def has_size_at_least_or_equal_to(self, seq: Iterable, size: int, name: str) -> None:
        _require_threshold(size)
        actual = count(seq)
        if actual < size:
            self._report.raise_for_size(seq, name, SizeRelation.GREATER_OR_EQUAL, size, actual)

    def has_size_less_than(self, seq: Iterable, size: int, name: str) -> None:
        _require_threshold(size)
        actual = count(seq)
        if actual >= size:
            self._report.raise_for_size(seq, name, SizeRelation.LESS, size, actual)

    def has_size_less_than_or_equal_to(
        self, seq: Iterable, size: Union[int, Iterable], name: str
    ) -> None:
        """Require ``len(seq) <= size``, or ``len(seq) <= len(size)`` for a sequence."""
        if not _is_threshold(size):
            self._compare_sizes(seq, size, name, SizeRelation.LESS_OR_EQUAL)
            return
        actual = count(seq)
        if actual > size:
            self._report.raise_for_size(seq, name, SizeRelation.LESS_OR_EQUAL, size, actual)

    def _compare_sizes(
        self, source: Iterable, destination: Iterable, name: str, relation: SizeRelation
    ) -> None:
        # Same object on both sides: counting twice would drain an iterator.
        if source is destination:
            return
        source_size = count(source)
        destination_size = count(destination)
        if not _CROSS_CHECKS[relation](source_size, destination_size):
            self._report.raise_for_sizes(
                source, destination, name, relation, source_size, destination_size
            )


_default_guard = SizeGuard()

is_empty = _default_guard.is_empty
is_not_empty = _default_guard.is_not_empty
has_size_equal_to = _default_guard.has_size_equal_to
has_size_not_equal_to = _default_guard.has_size_not_equal_to
has_size_at_least = _default_guard.has_size_at_least
has_size_at_least_or_equal_to = _default_guard.has_size_at_least_or_equal_to
has_size_less_than = _default_guard.has_size_less_than
has_size_less_than_or_equal_to = _default_guard.has_size_less_than_or_equal_to
