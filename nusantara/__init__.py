"""Julian Day Number conversions and Javanese calendar cycles."""

__version__ = "0.1.0"

__all__ = ["errors", "gregorian", "jawa_cycles"]