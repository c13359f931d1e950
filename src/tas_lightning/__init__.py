"""Lightning proximity alerts for power stations."""

__version__ = "0.1.0"
