"""Decorator pattern examples."""
