"""Hierarchy entries and payload decoding."""
