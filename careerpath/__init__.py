"""careerpath - guided career profiling wizard and rule-based recommendations."""

__version__ = "0.3.0"
