"""
Traversal of a mixed product.

All node cursors advance together, one element per step, each wrapping
around at the end of its padded cycle. A combination in which any cursor
sits in the padding region of its iterable is *fake* and is skipped. Once
the lengths of all iterables are known, the traversal ends after exactly
``running_total`` steps, which is when every cursor is back at its start.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Optional, Tuple

from typing_extensions import Protocol

from .schedule import MixedProductError, PaddingSchedule, ProductNode

if TYPE_CHECKING:
    from .mixed import MixedProduct

_LOG = logging.getLogger(__name__)


class Cursor(Protocol):
    @property
    def current(self) -> Any:
        """Element the cursor currently points at."""
        pass

    @property
    def is_fake(self) -> bool:
        pass

    def start(self) -> bool:
        pass

    def step(self) -> bool:
        pass


class NodeCursor:
    def __init__(self, source: Iterable[Any], node: ProductNode, schedule: PaddingSchedule):
        self._source = source
        self._node = node
        self._schedule = schedule
        self._iterator: Optional[Iterator[Any]] = None
        self._current: Any = None
        self._at_end = False
        self.lap = 0

    @property
    def node(self) -> ProductNode:
        return self._node

    @property
    def current(self) -> Any:
        return self._current

    @property
    def at_end(self) -> bool:
        return self._at_end

    @property
    def is_fake(self) -> bool:
        true_length = self._node.true_length
        return true_length is not None and self.lap >= true_length

    def start(self) -> bool:
        """Position the cursor on the first element.

        Returns False if the iterable turned out to be empty, which also
        marks the whole product as empty.
        """
        self._iterator = iter(self._source)
        self.lap = 0
        self._pull()
        if self._at_end:
            if not self._node.discovered:
                self._schedule.discover(self._node, 0)
            elif self._node.true_length != 0:
                raise MixedProductError(
                    f"Iterable {self._node.index} is empty after it was "
                    f"found to hold {self._node.true_length} elements."
                )
            return False
        return True

    def step(self) -> bool:
        """Advance by one step of the schedule.

        Returns True if the cursor is left in the padding region.
        """
        if not self.is_fake:
            self._pull()
        self.lap += 1

        if self._at_end and not self._node.discovered:
            self._schedule.discover(self._node, self.lap)
        self._check_size()

        if not self._at_end:
            return False
        if self.is_fake and self.lap < self._node.padded_length:
            return True
        self.start()
        return False

    def _pull(self) -> None:
        assert self._iterator is not None
        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._current = None
            self._at_end = True
        else:
            self._at_end = False

    def _check_size(self) -> None:
        if self._node.discovered and self._at_end != self.is_fake:
            raise MixedProductError(
                f"Iterable {self._node.index} changed size during iteration, "
                f"expected {self._node.true_length} elements."
            )


class MixedProductIterator:
    """
    Iterator over the tuples of a ``MixedProduct``.

    Iterators hold the live position of every input and therefore cannot
    be copied, in the same way generators cannot.
    """

    def __init__(self, product: MixedProduct):
        self._product = product
        self._schedule: PaddingSchedule = product.schedule
        self._cursors: List[Cursor] = [
            NodeCursor(source, node, self._schedule)
            for source, node in zip(product.sources, self._schedule.nodes)
        ]
        self._started = False
        self._exhausted = False
        self._emitted = 0
        self.steps = 0

    @property
    def cursors(self) -> Tuple[Cursor, ...]:
        return tuple(self._cursors)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> MixedProductIterator:
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if self._exhausted:
            raise StopIteration
        if not self._started:
            self._started = True
            if not all(cursor.start() for cursor in self._cursors):
                self._finish()
        else:
            self.advance()
        if self._exhausted:
            raise StopIteration
        self._emitted += 1
        return self.assemble()

    def advance_one_step(self) -> bool:
        """Move every cursor one step. Returns whether any cursor is fake."""
        fake = False
        for cursor in self._cursors:
            fake = cursor.step() or fake
        self.steps += 1
        return fake

    def advance(self) -> None:
        """Move to the next real combination, or to the end."""
        while True:
            fake = self.advance_one_step()
            if (
                self._schedule.fully_discovered
                and self.steps == self._schedule.running_total
            ):
                self._finish()
                return
            if not fake:
                return

    def assemble(self) -> Tuple[Any, ...]:
        return tuple(cursor.current for cursor in self._cursors)

    def _finish(self) -> None:
        self._exhausted = True
        _LOG.debug(
            f"Mixed product of {len(self._cursors)} iterable(s) finished after "
            f"{self.steps} step(s), yielding {self._emitted} tuple(s)."
        )

    def __copy__(self) -> MixedProductIterator:
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo: Any) -> MixedProductIterator:
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

