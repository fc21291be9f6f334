"""Core trash logic: index, storage, configuration and paths."""
