"""Resolve the element count of a sequence at the lowest available cost.

Sequences are classified once per check into a small closed set of kinds:

- ``ARRAY``: array-like objects with structural length metadata (a non-empty
  ``shape`` tuple). numpy arrays, pandas Series/DataFrame/Index, xarray
  DataArray and memoryview all land here. Length is ``shape[0]``.
- ``COUNTABLE``: anything implementing ``__len__`` (lists, tuples, dicts,
  sets, ranges, dict views, xarray Dataset, ...).
- ``SINGLE_PASS``: any other iterable. Counting it means consuming it.

Only the last kind is ever traversed, and at most once per call.
"""

from collections.abc import Iterable, Sized
from enum import Enum
from numbers import Integral
from typing import Any, Optional

import numpy as np

__all__ = [
    "SequenceKind",
    "classify",
    "known_size",
    "count",
    "count_by_traversal",
    "has_elements",
]


class SequenceKind(str, Enum):
    """Representation of a sequence, as far as counting is concerned."""
    ARRAY = "array"
    COUNTABLE = "countable"
    SINGLE_PASS = "single_pass"


def _array_shape(seq: Any) -> Optional[tuple]:
    if isinstance(seq, np.ndarray):
        return seq.shape
    shape = getattr(seq, "shape", None)
    if isinstance(shape, tuple):
        return shape
    return None


def _array_length(seq: Any, shape: tuple) -> int:
    if not shape:
        raise TypeError(
            f"{type(seq).__name__} is zero-dimensional and has no length"
        )
    first = shape[0]
    # Lazy arrays (dask with unknown chunks) report None or NaN here
    if not isinstance(first, Integral):
        raise TypeError(
            f"{type(seq).__name__} has an unknown length along its first axis ({first!r})"
        )
    return int(first)


def classify(seq: Any) -> SequenceKind:
    """Classify a sequence by the cheapest way to count it.

    Parameters
    ----------
    seq : object
        Any array-like, sized collection or iterable.

    Returns
    -------
    SequenceKind
        ``ARRAY`` if ``seq`` exposes a ``shape`` tuple, ``COUNTABLE`` if it
        implements ``__len__``, otherwise ``SINGLE_PASS``.

    Examples
    --------
    >>> classify(np.zeros(3))
    <SequenceKind.ARRAY: 'array'>
    >>> classify([1, 2])
    <SequenceKind.COUNTABLE: 'countable'>
    >>> classify(x for x in range(3))
    <SequenceKind.SINGLE_PASS: 'single_pass'>
    """
    if _array_shape(seq) is not None:
        return SequenceKind.ARRAY
    if isinstance(seq, Sized):
        return SequenceKind.COUNTABLE
    return SequenceKind.SINGLE_PASS


def known_size(seq: Any, kind: SequenceKind) -> Optional[int]:
    """Return the O(1) count of ``seq``, or None for single-pass iterables.

    Never traverses ``seq``.

    Raises
    ------
    TypeError
        If ``seq`` is a zero-dimensional array.
    """
    if kind is SequenceKind.ARRAY:
        return _array_length(seq, _array_shape(seq))
    if kind is SequenceKind.COUNTABLE:
        return len(seq)
    return None


def count_by_traversal(iterable: Iterable) -> int:
    """Count elements by consuming ``iterable`` exactly once."""
    total = 0
    for _ in iterable:
        total += 1
    return total


def has_elements(iterable: Iterable) -> bool:
    """Return True as soon as ``iterable`` yields one element.

    Stops after the first element, so at most one item of a single-pass
    iterable is consumed.
    """
    for _ in iterable:
        return True
    return False


def count(seq: Any) -> int:
    """Return the number of elements in ``seq``.

    Tries, in order, and stops at the first that applies:

    1. structural array length (``shape[0]``)
    2. ``len(seq)``
    3. a single full traversal

    Parameters
    ----------
    seq : object
        Any array-like, sized collection or iterable.

    Returns
    -------
    int
        Element count (first-axis length for multi-dimensional arrays).

    Raises
    ------
    TypeError
        If ``seq`` is a zero-dimensional array or is not iterable.

    Examples
    --------
    >>> count(np.zeros((4, 2)))
    4
    >>> count({"a": 1})
    1
    >>> count(iter("abc"))
    3
    """
    shape = _array_shape(seq)
    if shape is not None:
        return _array_length(seq, shape)
    if isinstance(seq, Sized):
        return len(seq)
    return count_by_traversal(seq)
