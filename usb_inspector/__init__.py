"""Classify USB and Thunderbolt/USB4 hardware reported by system_profiler."""

__version__ = "0.3.0"
