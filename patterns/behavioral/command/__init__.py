"""Command pattern examples."""
