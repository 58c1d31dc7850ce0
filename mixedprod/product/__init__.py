from .cursor import Cursor, MixedProductIterator, NodeCursor
from .mixed import EMPTY_PRODUCT, MixedProduct, mixed_product
from .schedule import MixedProductError, PaddingSchedule, ProductNode, next_coprime

__all__ = [
    "Cursor",
    "EMPTY_PRODUCT",
    "MixedProduct",
    "MixedProductError",
    "MixedProductIterator",
    "NodeCursor",
    "PaddingSchedule",
    "ProductNode",
    "mixed_product",
    "next_coprime",
]
