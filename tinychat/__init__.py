"""A minimal TCP chat room: message format, room, server and line-based client."""

__version__ = "0.1.0"
__all__ = ["__version__"]