"""Iterables that record how they are consumed."""


class CountingIterable:
    """Iterable without ``__len__`` that counts traversal starts and items pulled.

    Each ``iter()`` call starts a fresh pass over the same items, so a
    guard that traversed twice would be visible as ``iterations == 2``.
    """

    def __init__(self, items):
        self._items = list(items)
        self.iterations = 0
        self.items_pulled = 0

    def __iter__(self):
        self.iterations += 1
        for item in self._items:
            self.items_pulled += 1
            yield item


class SizedCountingIterable(CountingIterable):
    """CountingIterable that also reports its size in O(1)."""

    def __len__(self):
        return len(self._items)


class OneShotIterable:
    """Iterable that refuses a second traversal."""

    def __init__(self, items):
        self._items = list(items)
        self._used = False

    def __iter__(self):
        if self._used:
            raise AssertionError("iterable traversed twice")
        self._used = True
        return iter(self._items)


class FakeArray:
    """Array-like exposing only ``shape`` and ``dtype``; iterating it is an error."""

    def __init__(self, shape, dtype="float32"):
        self.shape = shape
        self.dtype = dtype

    def __iter__(self):
        raise AssertionError("array-like traversed")
