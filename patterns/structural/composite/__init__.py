"""Composite pattern examples."""
