"""Typed flag values (booleans, counts, bytes, complex numbers, durations) and flag errors."""

__version__ = "2.0.0"
__all__ = ["errors", "values", "count", "bytes_values", "complex_values", "duration"]