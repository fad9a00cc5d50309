"""
Cursors into the traversal order of a `Bag`.
"""

from __future__ import annotations

from dataclasses import dataclass

from multibag.interface.errors import OutOfBoundsCursor


@dataclass(frozen=True, order=True)
class BagIndex:
    """
    Opaque position within the iteration order of the dictionary backing a `Bag`.

    Equality and ordering are those of the wrapped position, so cursors taken from the same
    (unmutated) bag compare consistently with its traversal order. The cursor holds no reference
    to the bag it came from; cursors should only be created by `Bag` and `BagSlice`.

    Any `add` or `remove` may shift positions, after which previously issued cursors are stale.
    Only the bounds check on dereference guards against misuse.
    """

    position: int

    def successor(self) -> BagIndex:
        return BagIndex(self.position + 1)


def check_in_bounds(index: BagIndex, start: BagIndex, end: BagIndex) -> None:
    """Raise `OutOfBoundsCursor` unless `start <= index < end`."""
    if not isinstance(index, BagIndex):
        raise TypeError(f"Bag cursors must be of type BagIndex, got {type(index)}")

    if not start <= index < end:
        raise OutOfBoundsCursor(
            f"out of bounds: cursor {index.position} not in [{start.position}, {end.position})"
        )
