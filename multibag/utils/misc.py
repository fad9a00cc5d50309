from dataclasses import fields, is_dataclass
from typing import Any, Dict, Hashable, List, Mapping, Union

from multibag.interface.bag import Bag, BagEntry, BagSlice


def dictify(data: Any) -> Any:
    """Convert bags (and containers of them) into plain, serializable Python data."""
    if isinstance(data, (int, float, str)) or data is None:
        return data
    elif isinstance(data, Bag):
        return data.to_dict()
    elif isinstance(data, BagEntry):
        # Needs to come before the generic `tuple` case, as `BagEntry` is a `NamedTuple`.
        return {"element": dictify(data.element), "count": data.count}
    elif isinstance(data, (List, tuple, BagSlice)):
        return [dictify(x) for x in data]
    elif isinstance(data, dict):
        return {k: dictify(v) for k, v in data.items()}
    elif is_dataclass(data):
        result = {}
        for f in fields(data):
            value = getattr(data, f.name)
            result[f.name] = dictify(value)
        return result
    else:
        raise TypeError(f"Type {type(data)} cannot be handled by `dictify`")


def undictify_bag(data: Union[Mapping[Hashable, int], List[Dict[str, Any]]]) -> Bag:
    """
    Recovers a bag serialized with `dictify`.

    Accepts both the `{element: count}` form produced for a `Bag` and the list of
    `{"element": ..., "count": ...}` dicts produced for a list of entries or a `BagSlice`.
    """
    if isinstance(data, Mapping):
        return Bag.from_counts(data)
    return Bag.from_counts((entry["element"], entry["count"]) for entry in data)
