"""viu-shared: shared types, validation schemas and helpers for the VIU platform."""

__version__ = "1.0.0"
