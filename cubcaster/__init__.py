"""String, formatting, line-reading and byte helpers for .cub scene files."""

__version__ = "0.1.0"
__all__ = ["__version__"]