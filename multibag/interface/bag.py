from __future__ import annotations

import abc
import logging
import numbers
from collections.abc import Collection
from typing import (
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from multibag.interface.errors import InvalidOccurrenceCount, InvalidRemoval, OutOfBoundsCursor
from multibag.interface.index import BagIndex, check_in_bounds

logger = logging.getLogger(__name__)

# Mutations happen in tight loops, so they are logged below DEBUG.
MUTATION_LOG_LEVEL = logging.DEBUG - 1

ElementT = TypeVar("ElementT", bound=Hashable)


class BagEntry(NamedTuple):
    element: Hashable
    count: int


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _check_occurrences(occurrences: int, action: str) -> int:
    if not _is_integer(occurrences) or occurrences <= 0:
        raise InvalidOccurrenceCount(
            f"Can only {action} a positive number of occurrences, got {occurrences!r}"
        )
    return int(occurrences)


class _CursorCollection(Collection, Generic[ElementT]):
    """Traversal by `BagIndex` shared between `Bag` and `BagSlice`."""

    @property
    @abc.abstractmethod
    def start_index(self) -> BagIndex:
        """Cursor of the first entry."""

    @property
    @abc.abstractmethod
    def end_index(self) -> BagIndex:
        """Cursor one past the last entry."""

    @abc.abstractmethod
    def _entry_at(self, position: int) -> BagEntry:
        """Entry at a position which is already known to be valid."""

    @abc.abstractmethod
    def _base_bag(self) -> Bag[ElementT]:
        raise NotImplementedError

    def index_after(self, index: BagIndex) -> BagIndex:
        return index.successor()

    def indices(self) -> Iterator[BagIndex]:
        """Yields all valid cursors, in traversal order."""
        for position in range(self.start_index.position, self.end_index.position):
            yield BagIndex(position)

    def __getitem__(self, key: Union[BagIndex, slice]):
        if isinstance(key, slice):
            return self._slice(key)

        check_in_bounds(key, self.start_index, self.end_index)
        return self._entry_at(key.position)

    def _slice(self, key: slice) -> BagSlice[ElementT]:
        if key.step is not None:
            raise ValueError("Bag slices do not support a step")

        start = self.start_index if key.start is None else key.start
        end = self.end_index if key.stop is None else key.stop

        for bound in (start, end):
            if not isinstance(bound, BagIndex):
                raise TypeError(f"Bag slice bounds must be of type BagIndex, got {type(bound)}")

        if not self.start_index <= start <= end <= self.end_index:
            raise OutOfBoundsCursor(
                f"out of bounds: slice [{start.position}, {end.position}) not within "
                f"[{self.start_index.position}, {self.end_index.position})"
            )
        return BagSlice(self._base_bag(), start, end)

    def __iter__(self) -> Iterator[BagEntry]:
        for index in self.indices():
            yield self._entry_at(index.position)

    def __len__(self) -> int:
        return self.end_index.position - self.start_index.position

    @property
    def first(self) -> Optional[BagEntry]:
        if len(self) == 0:
            return None
        return self._entry_at(self.start_index.position)

    def drop_first(self, k: int = 1) -> BagSlice[ElementT]:
        """Slice containing everything but the first `k` entries (empty if there are fewer)."""
        if not _is_integer(k):
            raise TypeError(f"Number of entries to drop must be an integer, got {k!r}")
        if k < 0:
            raise ValueError(f"Can only drop a non-negative number of entries, got {k}")

        start = BagIndex(min(self.start_index.position + int(k), self.end_index.position))
        return BagSlice(self._base_bag(), start, self.end_index)


class Bag(_CursorCollection[ElementT]):
    """Class representing a multi-set (i.e. set where elements are allowed to repeat).

    Elements are stored as keys of a dictionary mapping each element to its (strictly positive)
    number of occurrences; an element is removed from the dictionary as soon as its count drops
    to zero. Iterating over a bag yields `BagEntry(element, count)` pairs, in the iteration
    order of the underlying dictionary. This is the order in which the present elements were
    first added, and is stable as long as the bag is not mutated.

    Entries can also be accessed through `BagIndex` cursors (see `start_index`, `end_index`,
    `index_after` and `__getitem__`), which allows generic algorithms to work on positions
    without copying the contents.
    """

    def __init__(self, elements: Union[Iterable[ElementT], Mapping[ElementT, int]] = ()) -> None:
        self._contents: Dict[ElementT, int] = {}
        self._keys_cache: Optional[Tuple[ElementT, ...]] = None

        # Mappings and bags carry counts, so they are not read as plain element sequences.
        if isinstance(elements, Mapping):
            self._add_pairs(elements.items())
        elif isinstance(elements, Bag):
            self._add_pairs(elements)
        else:
            for element in elements:
                self.add(element)

    @classmethod
    def from_counts(
        cls, counts: Union[Mapping[ElementT, int], Iterable[Tuple[ElementT, int]]]
    ) -> Bag[ElementT]:
        """Build a bag from `(element, count)` pairs; repeated elements accumulate."""
        bag: Bag[ElementT] = cls()
        bag._add_pairs(counts.items() if isinstance(counts, Mapping) else counts)
        return bag

    def _add_pairs(self, pairs: Iterable[Tuple[ElementT, int]]) -> None:
        for element, count in pairs:
            self.add(element, occurrences=count)

    @classmethod
    def of(cls, *elements: ElementT) -> Bag[ElementT]:
        return cls(elements)

    @property
    def unique_count(self) -> int:
        return len(self._contents)

    @property
    def total_count(self) -> int:
        return sum(self._contents.values())

    def add(self, member: ElementT, occurrences: int = 1) -> None:
        occurrences = _check_occurrences(occurrences, "add")

        new_count = self._contents.get(member, 0) + occurrences
        if new_count == occurrences:
            self._keys_cache = None
        self._contents[member] = new_count

        if logger.isEnabledFor(MUTATION_LOG_LEVEL):
            logger.log(MUTATION_LOG_LEVEL, f"Added {occurrences} x {member!r} (now {new_count})")

    def remove(self, member: ElementT, occurrences: int = 1) -> None:
        occurrences = _check_occurrences(occurrences, "remove")

        current_count = self._contents.get(member)
        if current_count is None or current_count < occurrences:
            raise InvalidRemoval(
                f"Removed non-existent elements: asked for {occurrences} x {member!r}, "
                f"but the bag holds {current_count or 0}"
            )

        if current_count > occurrences:
            self._contents[member] = current_count - occurrences
        else:
            del self._contents[member]
            self._keys_cache = None

        if logger.isEnabledFor(MUTATION_LOG_LEVEL):
            logger.log(
                MUTATION_LOG_LEVEL,
                f"Removed {occurrences} x {member!r} (now {current_count - occurrences})",
            )

    def count(self, member: ElementT) -> int:
        """Number of occurrences of `member`, which is 0 if it is not in the bag."""
        return self._contents.get(member, 0)

    def elements(self) -> Iterator[ElementT]:
        """Yields every element as many times as it occurs."""
        for element, count in self._contents.items():
            for _ in range(count):
                yield element

    def to_dict(self) -> Dict[ElementT, int]:
        return dict(self._contents)

    def copy(self) -> Bag[ElementT]:
        result: Bag[ElementT] = type(self)()
        result._contents = dict(self._contents)
        return result

    __copy__ = copy

    @property
    def start_index(self) -> BagIndex:
        return BagIndex(0)

    @property
    def end_index(self) -> BagIndex:
        return BagIndex(len(self._contents))

    def _keys(self) -> Tuple[ElementT, ...]:
        if self._keys_cache is None:
            self._keys_cache = tuple(self._contents)
        return self._keys_cache

    def _entry_at(self, position: int) -> BagEntry:
        element = self._keys()[position]
        return BagEntry(element, self._contents[element])

    def _base_bag(self) -> Bag[ElementT]:
        return self

    def __iter__(self) -> Iterator[BagEntry]:
        for element, count in self._contents.items():
            yield BagEntry(element, count)

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, element) -> bool:
        return element in self._contents

    def __eq__(self, other) -> bool:
        if isinstance(other, Bag):
            return self._contents == other._contents
        else:
            return False

    # Bags are mutable, so they cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._contents!r})"

    def __str__(self) -> str:
        return str(self._contents)


class BagSlice(_CursorCollection[ElementT]):
    """
    Read-only view of the entries of a `Bag` between two cursors.

    A slice shares cursors with its base bag: a cursor obtained from the slice can be used to
    index the bag and vice versa (as long as it lies within the slice's bounds). Mutating the
    base bag invalidates the slice.
    """

    def __init__(self, base: Bag[ElementT], start: BagIndex, end: BagIndex) -> None:
        self._base = base
        self._start = start
        self._end = end

    @property
    def base(self) -> Bag[ElementT]:
        return self._base

    # Both bounds are clamped to the base bag, which may have shrunk since the slice was taken.
    @property
    def start_index(self) -> BagIndex:
        return min(self._start, self.end_index)

    @property
    def end_index(self) -> BagIndex:
        return min(self._end, self._base.end_index)

    def _entry_at(self, position: int) -> BagEntry:
        return self._base._entry_at(position)

    def _base_bag(self) -> Bag[ElementT]:
        return self._base

    def __contains__(self, element) -> bool:
        return any(entry.element == element for entry in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
