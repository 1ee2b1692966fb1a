from hamviz.trace.sinks import LoggingSink, TraceRecorder, fan_out, make_sink
from hamviz.trace.export import trace_to_frame, write_trace_csv

__all__ = ["LoggingSink", "TraceRecorder", "fan_out", "make_sink", "trace_to_frame", "write_trace_csv"]
