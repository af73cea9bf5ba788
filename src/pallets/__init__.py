"""Download and manage NationStates daily data dumps."""

__version__ = "0.3.0"

__all__ = ["__version__"]
