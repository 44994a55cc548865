"""Command-line interface for linkdeco."""
