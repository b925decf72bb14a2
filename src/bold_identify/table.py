"""Assembly of match records into tables."""

from typing import Any, Iterable, List, Mapping, Union

import pandas as pd

from .models import COLUMNS, MatchRecord


def union_columns(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    """Collect every field name across rows, in first-seen order."""
    columns: List[str] = []
    seen = set()
    for row in rows:
        for name in row:
            if name not in seen:
                seen.add(name)
                columns.append(name)
    return columns


def build_table(records: Iterable[Union[MatchRecord, Mapping[str, Any]]]) -> pd.DataFrame:
    """Build a table with one row per record.

    Columns are the union of all field names; a row lacking a column gets
    None in it. With no records the table has zero rows and the standard
    match columns.
    """
    rows = [record.to_dict() if isinstance(record, MatchRecord) else dict(record)
            for record in records]

    if not rows:
        return pd.DataFrame(columns=list(COLUMNS), dtype=object)

    columns = union_columns(rows)
    filled = [{name: row.get(name) for name in columns} for row in rows]

    frame = pd.DataFrame(filled, columns=columns, dtype=object)
    return frame.where(pd.notna(frame), None)
