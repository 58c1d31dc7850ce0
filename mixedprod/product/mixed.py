from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple, Union, overload

from .cursor import MixedProductIterator
from .schedule import PaddingSchedule
from .utils.iteration import reiterable

EMPTY_PRODUCT: Tuple[Tuple[()]] = ((),)


class MixedProduct:
    """
    Lazy product of iterables in coprime-padding order.

    Every combination of one element from each iterable is produced exactly
    once, but instead of advancing like an odometer all iterables advance
    together. To make the combined cycle visit every combination, each
    iterable is padded with fake elements up to a length coprime with the
    lengths discovered before it. Combinations involving a fake element are
    skipped.

    Example:
        >>> list(MixedProduct([0, 1], [0, 1, 2, 3]))
        [(0, 0), (1, 1), (0, 2), (1, 3), (1, 0), (0, 1), (1, 2), (0, 3)]

        The second iterable is padded to 5 elements, so the step pairing
        ``1`` with the padding element is skipped.

    Lengths are never asked for. They are discovered the first time each
    iterable runs out. Containers are iterated again on every wraparound,
    while one-shot iterators such as generators are consumed once and the
    elements they yielded are replayed afterwards.

    Args:
        iterables: One or more iterables. Use ``mixed_product`` for the
            product of zero iterables.
    Raises:
        ValueError: No iterables were given.
        TypeError: One of the arguments is not iterable.
    """

    def __init__(self, *iterables: Iterable[Any]):
        if len(iterables) == 0:
            raise ValueError(
                f"{type(self).__name__} needs at least one iterable, "
                f"use mixed_product() for the empty product."
            )
        self._iterables = iterables
        self._sources = tuple(reiterable(iterable) for iterable in iterables)
        self._schedule = PaddingSchedule(len(iterables))

    @property
    def iterables(self) -> Tuple[Iterable[Any], ...]:
        return self._iterables

    @property
    def sources(self) -> Tuple[Iterable[Any], ...]:
        return self._sources

    @property
    def schedule(self) -> PaddingSchedule:
        return self._schedule

    @property
    def true_lengths(self) -> Tuple[Optional[int], ...]:
        return tuple(node.true_length for node in self._schedule.nodes)

    @property
    def padded_lengths(self) -> Tuple[Optional[int], ...]:
        return tuple(node.padded_length for node in self._schedule.nodes)

    @property
    def cycle_length(self) -> int:
        return self._schedule.running_total

    @property
    def fully_discovered(self) -> bool:
        return self._schedule.fully_discovered

    def __iter__(self) -> MixedProductIterator:
        return MixedProductIterator(self)

    def __repr__(self) -> str:
        iterables = ", ".join(repr(iterable) for iterable in self._iterables)
        return f"{type(self).__name__}({iterables})"


@overload
def mixed_product() -> Tuple[Tuple[()]]:
    ...


@overload
def mixed_product(*iterables: Iterable[Any]) -> MixedProduct:
    ...


def mixed_product(
    *iterables: Iterable[Any],
) -> Union[MixedProduct, Tuple[Tuple[()]]]:
    """
    Product of ``iterables`` in coprime-padding order, see ``MixedProduct``.

    Without arguments this is the constant ``((),)``: the empty product
    has exactly one element, the empty tuple.
    """
    if len(iterables) == 0:
        return EMPTY_PRODUCT
    return MixedProduct(*iterables)
