"""Tabular views of property stores for inventory and diff reports."""

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd

from scripts.python.helpers.jproperties.store import JavaProperties


FRAME_COLUMNS = ["key", "value", "source"]
DIFF_COLUMNS = ["key", "left", "right", "status"]

SOURCE_TABLE = "table"
SOURCE_DEFAULTS = "defaults"

STATUS_ADDED = "added"
STATUS_REMOVED = "removed"
STATUS_CHANGED = "changed"
STATUS_SAME = "same"


def properties_frame(props: JavaProperties) -> pd.DataFrame:
    """One row per visible key, tagged with whether it came from the table or defaults."""
    rows = [
        {
            "key": key,
            "value": props.get_property(key),
            "source": SOURCE_TABLE if key in props else SOURCE_DEFAULTS,
        }
        for key in props.property_names()
    ]
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return frame.sort_values("key", kind="stable").reset_index(drop=True)


def _visible_values(props: JavaProperties | Mapping[str, str]) -> dict[str, str]:
    if isinstance(props, JavaProperties):
        return {key: props.get_property(key) for key in props.property_names()}
    return dict(props)


def _diff_status(side: str, left_value: str | None, right_value: str | None) -> str:
    if side == "right_only":
        return STATUS_ADDED
    if side == "left_only":
        return STATUS_REMOVED
    if left_value != right_value:
        return STATUS_CHANGED
    return STATUS_SAME


def compare_properties(
    left: JavaProperties | Mapping[str, str],
    right: JavaProperties | Mapping[str, str],
) -> pd.DataFrame:
    """Key-by-key comparison of two stores' visible values.

    Keys only on the right are ``added``; keys only on the left are
    ``removed``. Missing sides hold ``None``.
    """
    left_values = _visible_values(left)
    right_values = _visible_values(right)
    merged = pd.merge(
        pd.DataFrame(list(left_values.items()), columns=["key", "left"]),
        pd.DataFrame(list(right_values.items()), columns=["key", "right"]),
        on="key",
        how="outer",
        indicator=True,
    )

    # Object dtype keeps missing sides as None rather than NaN.
    rows = []
    for key, side in zip(merged["key"], merged["_merge"].astype(str)):
        left_value = left_values.get(key)
        right_value = right_values.get(key)
        rows.append(
            {
                "key": key,
                "left": left_value,
                "right": right_value,
                "status": _diff_status(side, left_value, right_value),
            }
        )

    diff = pd.DataFrame(rows, columns=DIFF_COLUMNS, dtype=object)
    return diff.sort_values("key", kind="stable").reset_index(drop=True)


def changed_only(diff: pd.DataFrame) -> pd.DataFrame:
    """Drop unchanged rows from a compare_properties result."""
    return diff[diff["status"] != STATUS_SAME].reset_index(drop=True)


__all__ = [
    "DIFF_COLUMNS",
    "FRAME_COLUMNS",
    "STATUS_ADDED",
    "STATUS_CHANGED",
    "STATUS_REMOVED",
    "STATUS_SAME",
    "changed_only",
    "compare_properties",
    "properties_frame",
]
