"""A small path tracer that renders sphere scenes to PPM images."""

__version__ = "0.1.0"