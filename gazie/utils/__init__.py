"""Shared helpers (logging, display formatting)."""
