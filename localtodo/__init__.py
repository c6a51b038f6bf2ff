"""Local command-line task list that records work sessions in JSON files."""

__version__ = "0.1.0"
__all__ = ["__version__"]