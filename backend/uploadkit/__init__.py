"""uploadkit - mapped file uploads for Python applications."""

__version__ = "1.0.0"
