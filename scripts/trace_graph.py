import argparse
import logging

from hamviz.utils.config import load_config
from hamviz.graphs import build_adjacency, load_graph
from hamviz.graphs.families import make_graph
from hamviz.search import CycleFound, SearchRunner
from hamviz.trace import LoggingSink, TraceRecorder, fan_out, write_trace_csv

def main():
    ap = argparse.ArgumentParser(description="Run the Hamiltonian-cycle backtracking search and log its trace.")
    ap.add_argument("--config", default=None)
    ap.add_argument("--graph", default=None, help="Preset name, e.g. five_cycle | complete_k4 | bipartite_k23")
    ap.add_argument("--graph-file", default=None, help="Editor JSON with nodes/links")
    ap.add_argument("--interval", type=float, default=None, help="Seconds between steps")
    ap.add_argument("--export", default=None, help="Write the trace to this CSV path")
    args = ap.parse_args()

    cfg = load_config(args.config)
    for key in ("graph", "graph_file", "interval", "export"):
        value = getattr(args, key)
        if value is not None:
            cfg[key] = value

    logging.basicConfig(
        level=getattr(logging, str(cfg["log_level"]).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if cfg["graph_file"]:
        graph = load_graph(cfg["graph_file"])
    else:
        graph = make_graph(cfg["graph"], **cfg["graph_params"])

    adjacency = build_adjacency(graph)
    logging.info("Graph: %d vertices, %d edges", adjacency.n, int(adjacency.matrix.sum()) // 2)

    recorder = TraceRecorder()
    runner = SearchRunner(on_event=fan_out(recorder, LoggingSink()), interval=float(cfg["interval"]))
    result = runner.run_blocking(adjacency)

    print(result.describe())
    if isinstance(result, CycleFound):
        print("Cycle: " + " -> ".join(str(v) for v in result.path + (result.path[0],)))
    print(f"Events: {len(recorder)} ({', '.join(f'{k.value}={c}' for k, c in recorder.counts().items())})")

    if cfg["export"]:
        write_trace_csv(recorder.events, cfg["export"])
        print(f"Trace written to {cfg['export']}")

if __name__ == "__main__":
    main()
