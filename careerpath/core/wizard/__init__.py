"""Staged profiling wizard."""

from .collector import ProfileCollector
from .guards import gate_satisfied, is_complete

__all__ = ["ProfileCollector", "gate_satisfied", "is_complete"]
