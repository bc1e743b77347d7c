"""Turno mission store - core library (document model, I/O, settings, client)."""

__version__ = "0.1.0"
