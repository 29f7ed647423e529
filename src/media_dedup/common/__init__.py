"""Shared constants, exceptions and logging."""
