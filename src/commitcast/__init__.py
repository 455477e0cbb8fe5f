"""CommitCast - turn commit activity into developer posts."""

__version__ = "0.1.0"
