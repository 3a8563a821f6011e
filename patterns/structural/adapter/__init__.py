"""Adapter pattern examples."""
