from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd


def export_csv(rows: Iterable[Mapping[str, Any]], columns: Mapping[str, str]) -> str:
    """Render rows as CSV text.

    ``columns`` maps record field -> header label and fixes the column order.
    Missing fields are written as empty cells.
    """
    fields = list(columns)
    data = [{f: row.get(f) for f in fields} for row in rows]
    df = pd.DataFrame(data, columns=fields)
    df = df.rename(columns=dict(columns))
    return df.to_csv(index=False)
