"""Read, modify and write changelog files in the Keep a Changelog format."""

__version__ = "0.1.0"