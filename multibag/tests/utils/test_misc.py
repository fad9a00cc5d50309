from dataclasses import dataclass

import pytest

from multibag.interface.bag import Bag, BagEntry
from multibag.utils.misc import dictify, undictify_bag


@dataclass
class Inventory:
    name: str
    items: Bag[str]


def test_dictify() -> None:
    bag = Bag.from_counts({"a": 2, "b": 1})

    assert dictify(bag) == {"a": 2, "b": 1}
    assert dictify(BagEntry("a", 2)) == {"element": "a", "count": 2}
    assert dictify(list(bag)) == [{"element": "a", "count": 2}, {"element": "b", "count": 1}]
    assert dictify(bag.drop_first()) == [{"element": "b", "count": 1}]
    assert dictify(Inventory(name="shelf", items=bag)) == {
        "name": "shelf",
        "items": {"a": 2, "b": 1},
    }


def test_dictify_unsupported() -> None:
    with pytest.raises(TypeError):
        dictify(object())


def test_undictify_bag() -> None:
    bag = Bag(["x", "y", "x"])
    assert undictify_bag(dictify(bag)) == bag


def test_undictify_bag_from_entries() -> None:
    bag = Bag.from_counts({"a": 2, "b": 1, "c": 3})

    assert undictify_bag(dictify(list(bag))) == bag
    assert undictify_bag(dictify(bag.drop_first())) == Bag.from_counts({"b": 1, "c": 3})
    assert undictify_bag([]) == Bag()
