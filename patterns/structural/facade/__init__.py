"""Facade pattern examples."""
