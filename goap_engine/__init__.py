"""Goal-oriented action planning engine with a small host simulation."""

__version__ = "0.1.0"
