"""LaughMeter: a personal laugh journal with stats and achievements."""

__version__ = "0.1.0"
