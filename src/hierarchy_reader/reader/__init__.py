"""Concurrent reading and merging of hierarchy files."""
