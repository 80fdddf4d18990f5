# app/data/ids.py
import math
from typing import Any, Dict, List


def _numeric_id(value: Any) -> float:
    # non-numeric ids count as 0: they never raise the counter
    try:
        number = float(str(value).strip() or 0)
    except ValueError:
        return 0
    return number if math.isfinite(number) else 0


def next_id(collection: List[Dict[str, Any]]) -> str:
    """
    Next identifier for a collection: "1" when empty, otherwise max(numeric id) + 1.
    Ids are always strings.
    """
    if not collection:
        return "1"

    highest = max((_numeric_id(item.get("id")) for item in collection), default=0)
    following = max(highest, 0) + 1
    return str(int(following)) if float(following).is_integer() else str(following)


def index_of(collection: List[Dict[str, Any]], record_id: str) -> int | None:
    for index, record in enumerate(collection):
        if str(record.get("id")) == record_id:
            return index
    return None
