from __future__ import annotations
from typing import Any, Dict
import copy
import yaml

DEFAULTS: Dict[str, Any] = {
    "graph": "five_cycle",
    "graph_params": {},
    "graph_file": None,
    "interval": 0.0,
    "log_level": "INFO",
    "export": None,
}

# Speed slider of the visualizer: 0..1400, delay = 1500 - value milliseconds.
SLIDER_MAX_DELAY_MS = 1500


def interval_from_slider(value: int) -> float:
    """Seconds to wait per suspension point for a speed-slider position."""
    return max(0, SLIDER_MAX_DELAY_MS - int(value)) / 1000.0


def load_config(path: str | None = None) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULTS)
    if path is None:
        return cfg
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: top-level YAML must be a mapping")
    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        raise KeyError(f"Unknown config keys in {path}: {sorted(unknown)}. Available: {sorted(DEFAULTS)}")
    cfg.update(loaded)
    if cfg["graph_params"] is None:
        cfg["graph_params"] = {}
    if float(cfg["interval"]) < 0:
        raise ValueError(f"interval must be non-negative, got {cfg['interval']}")
    return cfg
