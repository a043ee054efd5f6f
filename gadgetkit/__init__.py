"""Numeric helpers and transport-agnostic drivers for small sensors, displays and memory chips."""

__version__ = "0.1.0"