from __future__ import annotations

import pytest

from multibag.interface.bag import Bag


@pytest.fixture
def shopping_cart() -> Bag[str]:
    """Returns a bag built through a sequence of additions and removals."""
    bag: Bag[str] = Bag()
    bag.add("Banana")
    bag.add("Orange", occurrences=2)
    bag.add("Banana")
    bag.remove("Orange")
    return bag


@pytest.fixture
def fruit_basket() -> Bag[str]:
    return Bag.from_counts([("Apple", 5), ("Orange", 2), ("Pear", 3), ("Banana", 7)])
