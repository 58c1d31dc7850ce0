from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class ReusableIterator(Generic[T]):
    """
    Makes a one-shot iterator iterable more than once.

    Elements are recorded the first time they are pulled from the wrapped
    iterator and replayed for every later iteration. Only references are
    kept, the elements themselves are never copied.

    >>> numbers = ReusableIterator(n for n in range(3))
    >>> list(numbers), list(numbers)
    ([0, 1, 2], [0, 1, 2])
    """

    def __init__(self, iterable: Iterable[T]):
        self._iterator = iter(iterable)
        self._items: List[T] = []
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[T]:
        index = 0
        while True:
            if index < len(self._items):
                yield self._items[index]
            elif self._exhausted:
                return
            else:
                try:
                    item = next(self._iterator)
                except StopIteration:
                    self._exhausted = True
                    return
                self._items.append(item)
                yield item
            index += 1


def is_one_shot(iterable: Iterable[T]) -> bool:
    """An iterable is one-shot if it is its own iterator."""
    return iter(iterable) is iterable


def reiterable(iterable: Iterable[T]) -> Iterable[T]:
    if is_one_shot(iterable):
        return ReusableIterator(iterable)
    return iterable
