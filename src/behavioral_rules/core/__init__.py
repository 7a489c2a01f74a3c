"""Shared core: configuration, enums and errors."""
