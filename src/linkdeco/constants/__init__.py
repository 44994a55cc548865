"""Shared constants for linkdeco."""
