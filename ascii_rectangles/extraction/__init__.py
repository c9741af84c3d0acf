from .extractor import extract_rectangles, find_rectangles, verify_corner
from .tracing import trace_top_edge, trace_right_edge, trace_bottom_edge, trace_left_edge

__all__ = [
    "extract_rectangles",
    "find_rectangles",
    "verify_corner",
    "trace_top_edge",
    "trace_right_edge",
    "trace_bottom_edge",
    "trace_left_edge",
]
