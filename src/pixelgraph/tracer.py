"""
Hierarchical runtime tracing for pixelgraph.

Nested, timed log lines for graph construction and region traversals.
Disabled by default; the CLI and tests switch it on with configure_tracer.
"""

import functools
import hashlib
import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import IO, Optional

LEVELS = {"ERROR": 0, "WARN": 1, "INFO": 2, "DEBUG": 3}


@dataclass
class TracerConfig:
    """Output settings for the tracer."""
    enabled: bool = False
    level: str = "INFO"
    file_path: Optional[str] = None
    json_output: bool = False
    _file_handle: Optional[IO] = None

    def configure(self, enabled=False, level="INFO", file_path=None, json_output=False):
        self.close()
        self.enabled = enabled
        self.level = level.upper()
        self.file_path = file_path
        self.json_output = json_output
        if file_path and enabled:
            self._file_handle = open(file_path, "w", encoding="utf-8")

    def close(self):
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


class Tracer:
    """
    Span and event logger writing to stderr.

    Each open span indents the lines logged inside it. Events are attributed
    to the innermost open span.
    """

    def __init__(self):
        self.config = TracerConfig()
        self._depth = 0
        self._span_stack = []

    def enabled_for(self, level):
        if not self.config.enabled:
            return False
        return LEVELS.get(level, 2) <= LEVELS.get(self.config.level, 2)

    def _write(self, level, module, func, message, meta=None):
        if not self.enabled_for(level):
            return

        now = datetime.now()
        stamp = f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"
        location = f"{module}:{func}" if func else module
        lines = [f"{stamp} {level:<5} {'  ' * self._depth}{location}  {message}"]

        if self.config.json_output:
            lines.append(json.dumps({
                "timestamp": stamp,
                "level": level,
                "depth": self._depth,
                "module": module,
                "function": func,
                "message": message,
                "meta": {k: summarize(v) for k, v in (meta or {}).items()},
            }))

        handle = self.config._file_handle
        for line in lines:
            print(line, file=sys.stderr)
            if handle:
                handle.write(line + "\n")
        if handle:
            handle.flush()

    def _close_span(self):
        name, module, started = self._span_stack.pop()
        self._depth -= 1
        return name, module, (time.perf_counter() - started) * 1000

    @contextmanager
    def span(self, name, module="", **meta):
        """Trace a block: logs start, then "end ok" or the error that escaped it."""
        if not self.config.enabled:
            yield
            return

        details = " ".join(f"{k}={summarize(v)}" for k, v in meta.items())
        self._write("INFO", module, name, f"start {details}".strip())
        self._span_stack.append((name, module, time.perf_counter()))
        self._depth += 1

        try:
            yield
        except Exception as e:
            _, _, elapsed = self._close_span()
            self._write("ERROR", module, name, f"failed dt={elapsed:.0f}ms error={type(e).__name__}: {str(e)[:100]}")
            raise

        _, _, elapsed = self._close_span()
        self._write("INFO", module, name, f"end ok dt={elapsed:.0f}ms")

    def event(self, message, level="INFO", **meta):
        """Log a one-off line inside the current span."""
        if not self.enabled_for(level):
            return

        func, module = ("", "")
        if self._span_stack:
            func, module, _ = self._span_stack[-1]

        details = " ".join(f"{k}={summarize(v)}" for k, v in meta.items())
        self._write(level, module, func, f"{message} {details}".strip(), meta)


def summarize(obj, max_len=200):
    """Compact one-line description of obj, at most max_len characters."""
    try:
        text = _describe(obj)
    except Exception:
        text = f"<{type(obj).__name__}>"
    if len(text) > max_len:
        return text[:max_len - 3] + "..."
    return text


def _describe(obj):
    import networkx as nx
    import numpy as np
    from pydantic import BaseModel

    # imported here, the graph modules import this one
    from pixelgraph.graph.pixel_graph import PixelGraph
    from pixelgraph.graph.vertex import PixelVertex

    kind = type(obj).__name__

    if obj is None:
        return "None"
    if isinstance(obj, PixelGraph):
        return f"PixelGraph({obj.width}x{obj.height},edges={obj.edge_count()})"
    if isinstance(obj, PixelVertex):
        return f"PixelVertex(x={obj.x},y={obj.y},degree={obj.degree()})"
    if isinstance(obj, np.ndarray):
        shape = "x".join(str(s) for s in obj.shape)
        digest_source = obj.tobytes() if 0 < obj.size < 1000 else str(obj.shape).encode()
        return f"ndarray({obj.dtype},{shape},h={hashlib.md5(digest_source).hexdigest()[:8]})"
    if isinstance(obj, nx.Graph):
        return f"{kind}(nodes={obj.number_of_nodes()},edges={obj.number_of_edges()})"
    if isinstance(obj, BaseModel):
        return f"{kind}(fields={list(type(obj).model_fields)[:3]}...)"
    if isinstance(obj, str):
        if len(obj) > 50:
            return f"str(len={len(obj)},h={hashlib.md5(obj.encode()).hexdigest()[:8]})"
        return repr(obj)
    if isinstance(obj, (list, tuple)):
        # short numeric sequences are colors or coordinates: print them
        if 0 < len(obj) <= 4 and all(isinstance(v, (int, float)) for v in obj):
            return f"{kind}({','.join(str(v) for v in obj)})"
        first = f",first={type(obj[0]).__name__}" if obj else ""
        return f"{kind}(len={len(obj)}{first})"
    if isinstance(obj, dict):
        return f"dict(len={len(obj)},keys=[{','.join(str(k) for k in list(obj)[:5])}])"
    if isinstance(obj, (int, float)):
        return str(obj)
    return f"<{kind}>"


def trace(label=None, arg_names=None):
    """
    Run the decorated function inside a span named label (default: its name).

    Keyword arguments named in arg_names are summarized on the start line.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _tracer.config.enabled:
                return func(*args, **kwargs)

            module = (func.__module__ or "").split(".")[-1]
            meta = {name: kwargs[name] for name in arg_names or () if name in kwargs}
            with _tracer.span(label or func.__name__, module=module, **meta):
                return func(*args, **kwargs)

        return wrapper
    return decorator


_tracer = Tracer()


def get_tracer():
    """Get the global tracer instance."""
    return _tracer


def configure_tracer(enabled=False, level="INFO", file_path=None, json_output=False):
    """Configure the global tracer."""
    _tracer.config.configure(
        enabled=enabled,
        level=level,
        file_path=file_path,
        json_output=json_output,
    )
