"""Script for counting elements with a `Bag` and reporting the most frequent ones.

Example invocation:
    multibag count \
        elements=[Banana,Orange,Banana] \
        counts={Apple:5,Pear:3} \
        remove=[Orange] \
        min_count=2 \
        sort_by=count descending=true
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

import yaml

from multibag.interface.bag import Bag, BagEntry
from multibag.utils.config import get_config as cli_get_config
from multibag.utils.misc import dictify

logger = logging.getLogger(__name__)


class SortKey(Enum):
    element = "element"
    count = "count"
    none = "none"


@dataclass
class CountConfig:
    elements: List[str] = field(default_factory=list)  # Each contributes a single occurrence
    counts: Dict[str, int] = field(default_factory=dict)  # Explicit element counts
    remove: List[str] = field(default_factory=list)  # Each removes a single occurrence

    # Which entries to report, and in what order
    min_count: int = 1
    sort_by: SortKey = SortKey.none
    descending: bool = False

    log_level: str = "INFO"


def select_entries(
    bag: Bag[str], min_count: int, sort_by: SortKey, descending: bool = False
) -> List[BagEntry]:
    entries = [entry for entry in bag if entry.count >= min_count]

    if sort_by == SortKey.element:
        entries.sort(key=lambda entry: entry.element, reverse=descending)
    elif sort_by == SortKey.count:
        entries.sort(key=lambda entry: entry.count, reverse=descending)
    elif descending:
        entries.reverse()

    return entries


def run_from_config(config: CountConfig) -> Bag[str]:
    bag: Bag[str] = Bag(config.elements)
    for element, count in config.counts.items():
        bag.add(element, occurrences=count)

    for element in config.remove:
        bag.remove(element)

    logger.info(
        f"Built bag with {bag.unique_count} unique elements and {bag.total_count} occurrences"
    )
    logger.debug(f"Bag contents: {bag}")

    entries = select_entries(
        bag, min_count=config.min_count, sort_by=config.sort_by, descending=config.descending
    )
    logger.info(f"{len(entries)} entries have at least {config.min_count} occurrences")

    summary = {
        "unique_count": bag.unique_count,
        "total_count": bag.total_count,
        "entries": dictify(entries),
    }
    yaml.safe_dump(summary, sys.stdout, sort_keys=False)

    return bag


def check_min_count(config: CountConfig) -> None:
    if config.min_count < 1:
        raise ValueError(f"min_count should be at least 1, got {config.min_count}")


def main(argv: Optional[List[str]] = None) -> Bag[str]:
    config: CountConfig = cli_get_config(
        argv=argv, config_cls=CountConfig, checks=[check_min_count]
    )
    return run_from_config(config)


if __name__ == "__main__":
    main()
