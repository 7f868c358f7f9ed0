"""Support Console kernel: knowledge matching, reply composition and scheduling."""

__version__ = "0.1.0"
