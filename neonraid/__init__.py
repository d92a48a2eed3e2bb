"""Neon Raid: a three-level vertical arcade shooter built on pygame."""

__version__ = "1.0.0"
