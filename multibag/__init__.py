from multibag.interface.bag import Bag, BagEntry, BagSlice
from multibag.interface.errors import (
    ContractViolation,
    InvalidOccurrenceCount,
    InvalidRemoval,
    OutOfBoundsCursor,
)
from multibag.interface.index import BagIndex

__all__ = [
    "Bag",
    "BagEntry",
    "BagIndex",
    "BagSlice",
    "ContractViolation",
    "InvalidOccurrenceCount",
    "InvalidRemoval",
    "OutOfBoundsCursor",
]
