from __future__ import annotations
import os
from typing import Iterable
import pandas as pd

from hamviz.search.events import TraceEvent

COLUMNS = ["step", "kind", "u", "v", "message"]


def trace_to_frame(events: Iterable[TraceEvent]) -> pd.DataFrame:
    """
    One row per event. Single-vertex events (start, visit) fill `u` only;
    `cancelled` leaves both empty.
    """
    rows = []
    for i, ev in enumerate(events):
        u = ev.vertices[0] if len(ev.vertices) > 0 else None
        v = ev.vertices[1] if len(ev.vertices) > 1 else None
        rows.append({"step": i, "kind": ev.kind.value, "u": u, "v": v, "message": ev.describe()})
    return pd.DataFrame(rows, columns=COLUMNS)


def write_trace_csv(events: Iterable[TraceEvent], path: str) -> pd.DataFrame:
    df = trace_to_frame(events)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    df.to_csv(path, index=False)
    return df
