"""
Padding schedule of a mixed product.

Every iterable of a mixed product is represented by a ``ProductNode``. Its
length is unknown until the iterable is exhausted for the first time. At that
moment the node is *discovered*: its length is padded up to the nearest value
coprime with the product of the padded lengths discovered so far (the running
total), and the running total absorbs the padded length. The running total is
then the length of one full cycle through all the padded iterables.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

_LOG = logging.getLogger(__name__)


class MixedProductError(Exception):
    pass


def next_coprime(value: int, total: int) -> int:
    """Smallest integer ``>= value`` that is coprime with ``total``.

    A ``total`` of zero means nothing has been discovered yet, so ``value``
    is returned as is.
    """
    if total == 0:
        return value
    padded = value
    while math.gcd(padded, total) != 1:
        padded += 1
    return padded


@dataclass
class ProductNode:
    index: int
    true_length: Optional[int] = None
    padded_length: Optional[int] = None

    @property
    def discovered(self) -> bool:
        return self.true_length is not None

    @property
    def padding(self) -> int:
        if self.true_length is None or self.padded_length is None:
            return 0
        return self.padded_length - self.true_length


class PaddingSchedule:
    """
    Owns the nodes of a mixed product and the running total of their
    padded lengths.
    """

    def __init__(self, node_count: int):
        self._nodes: List[ProductNode] = [ProductNode(index) for index in range(node_count)]
        self._running_total = 0
        self._empty = False

    @property
    def nodes(self) -> Tuple[ProductNode, ...]:
        return tuple(self._nodes)

    @property
    def running_total(self) -> int:
        return self._running_total

    @property
    def empty(self) -> bool:
        return self._empty

    @property
    def fully_discovered(self) -> bool:
        return all(node.discovered for node in self._nodes)

    def discover(self, node: ProductNode, true_length: int) -> None:
        if node.discovered:
            raise MixedProductError(
                f"Length of iterable {node.index} was already discovered "
                f"as {node.true_length}."
            )
        node.true_length = true_length
        if true_length == 0:
            _LOG.debug(f"Iterable {node.index} is empty, the product is empty.")
            self._empty = True
            return

        current_total = self._running_total
        node.padded_length = next_coprime(true_length, current_total)
        if current_total == 0:
            self._running_total = node.padded_length
        else:
            self._running_total = node.padded_length * current_total
        _LOG.debug(
            f"Discovered length {true_length} of iterable {node.index}, "
            f"padded to {node.padded_length}. Cycle length is now "
            f"{self._running_total}."
        )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} nodes={len(self._nodes)} "
            f"running_total={self._running_total}>"
        )
