from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from models import Dimension, FlatCompanyView


def group_key(view: FlatCompanyView, dimension: Dimension) -> str:
    """Grouping key for one view; levels render as 'level<N>'."""
    dimension = Dimension(dimension)
    if dimension is Dimension.LEVEL:
        return f"level{view.level}"
    return getattr(view, dimension.value)


def group_by(views: Iterable[FlatCompanyView], dimension: Dimension) -> Dict[str, int]:
    """Count views per observed key, in order of first occurrence."""
    counts: Dict[str, int] = {}
    for view in views:
        key = group_key(view, dimension)
        counts[key] = counts.get(key, 0) + 1
    return counts


def group_members(
    views: Iterable[FlatCompanyView], dimension: Dimension
) -> Dict[str, List[FlatCompanyView]]:
    grouped: Dict[str, List[FlatCompanyView]] = {}
    for view in views:
        grouped.setdefault(group_key(view, dimension), []).append(view)
    return grouped


def to_label_value_series(grouping: Mapping[str, int]) -> Dict[str, list]:
    """Chart-ready form: parallel label and value lists."""
    return {
        "labels": list(grouping.keys()),
        "values": list(grouping.values()),
    }
