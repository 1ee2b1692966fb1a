import argparse
import logging
import time

import pandas as pd
from tqdm import tqdm

from hamviz.registry import GRAPH_FAMILIES
from hamviz.graphs import build_adjacency
from hamviz.search import CycleFound, EventKind, run
from hamviz.trace import TraceRecorder

import hamviz.graphs  # registers families

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(message)s"
)

def main():
    ap = argparse.ArgumentParser(description="Run the search on every registered graph preset.")
    ap.add_argument("--output", default=None, help="CSV summary path")
    ap.add_argument("--seed", type=int, default=0, help="Seed for random families")
    args = ap.parse_args()

    rows = []
    for name in tqdm(GRAPH_FAMILIES.keys(), desc="Presets"):
        fn = GRAPH_FAMILIES.get(name)
        graph = fn(seed=args.seed)
        adjacency = build_adjacency(graph)

        recorder = TraceRecorder()
        t0 = time.perf_counter()
        result = run(adjacency, on_event=recorder)
        ms = (time.perf_counter() - t0) * 1000.0

        counts = recorder.counts()
        rows.append({
            "graph": name,
            "n": adjacency.n,
            "m": int(adjacency.matrix.sum()) // 2,
            "result": type(result).__name__,
            "path": " ".join(map(str, result.path)) if isinstance(result, CycleFound) else "",
            "events": len(recorder),
            "explore": counts.get(EventKind.EXPLORE, 0),
            "backtrack": counts.get(EventKind.BACKTRACK, 0),
            "time_ms": round(ms, 3),
        })

    df = pd.DataFrame(rows)
    print(df.to_string(index=False))
    if args.output:
        df.to_csv(args.output, index=False)
        print(f"Summary written to {args.output}")

if __name__ == "__main__":
    main()
