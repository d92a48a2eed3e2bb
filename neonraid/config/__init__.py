"""Configuration constants for Neon Raid."""
